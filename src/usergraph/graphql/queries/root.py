"""
Root GraphQL query definitions
"""

import strawberry

from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def users(self, info: strawberry.Info) -> list[User | None] | None:
        """List users."""
        from ..resolvers.user import resolve_users

        return await resolve_users(info)
