"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.user import CreateUserInput, User


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="createUser")
    async def create_user(self, info: strawberry.Info, input: CreateUserInput) -> User | None:
        """Create a user from the given input."""
        from ..resolvers.user import create_user

        return await create_user(info, input)
