"""
User GraphQL type definitions
"""

import strawberry

from ..scalars import EmailAddress


@strawberry.type
class User:
    """User type for GraphQL API."""

    name: str | None = None
    email: str | None = None


@strawberry.input
class CreateUserInput:
    """Input for creating a new user."""

    name: str
    email: EmailAddress  # type: ignore[valid-type]
