"""
User resolvers
"""

import strawberry

from ...logging import get_logger
from ..types.user import CreateUserInput, User

logger = get_logger(__name__)


async def resolve_users(info: strawberry.Info) -> list[User | None]:
    """Return the fixed user listing.

    The record carries no email; the field resolves to null.
    """
    _ = info
    return [User(name="John Doe")]


async def create_user(info: strawberry.Info, input: CreateUserInput) -> User:
    """Echo a validated ``CreateUserInput`` back as a ``User``."""
    _ = info
    logger.debug("Creating user", name=input.name)
    return User(name=input.name, email=input.email)
