"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient

from usergraph.api.app import create_app
from usergraph.config import Settings
from usergraph.graphql.schema import Schema, build_schema


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def schema() -> Schema:
    return build_schema()


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """HTTP client against an app built with default settings."""
    app = create_app(Settings(debug=False, graphiql=True, cors_origins=["*"]))
    with TestClient(app) as test_client:
        yield test_client


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")
