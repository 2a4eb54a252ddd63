"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures and configuration for all tests.
"""

import os

import pytest

from sql_repository.adapters.database import DatabaseAdapter
from sql_repository.adapters.database.factory import DatabaseManager
from sql_repository.utils.config import get_settings
from tests.fixtures.database import TEST_CONNECTION, PostRepository, UserRepository, seed

# Set testing environment
os.environ["TESTING"] = "true"


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make every test read settings from the current environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def close_connections():
    """Close every connection a test resolved."""
    yield
    DatabaseManager.close_all()


@pytest.fixture
def database() -> DatabaseAdapter:
    """Register a seeded in-memory SQLite connection for a test."""
    adapter = DatabaseManager.add_connection(TEST_CONNECTION, "sqlite://")
    seed(adapter.engine)
    yield adapter
    DatabaseManager.purge(TEST_CONNECTION)


@pytest.fixture
def user_repository(database) -> UserRepository:
    return UserRepository()


@pytest.fixture
def post_repository(database) -> PostRepository:
    return PostRepository()
