"""
Tests for user GraphQL resolvers
"""

from unittest.mock import MagicMock

import pytest
import strawberry

from usergraph.graphql.resolvers.user import create_user, resolve_users
from usergraph.graphql.types.user import CreateUserInput, User


@pytest.fixture
def mock_info():
    """Create a mock GraphQL info object with request context."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"request": MagicMock()}
    return info


@pytest.mark.asyncio
async def test_resolve_users(mock_info):
    users = await resolve_users(mock_info)

    assert users == [User(name="John Doe", email=None)]


@pytest.mark.asyncio
async def test_resolve_users_returns_new_list_each_call(mock_info):
    first = await resolve_users(mock_info)
    first.clear()

    assert len(await resolve_users(mock_info)) == 1


@pytest.mark.asyncio
async def test_create_user_echoes_input(mock_info):
    user = await create_user(
        mock_info, CreateUserInput(name="Jane", email="jane@example.com")
    )

    assert isinstance(user, User)
    assert user.name == "Jane"
    assert user.email == "jane@example.com"
