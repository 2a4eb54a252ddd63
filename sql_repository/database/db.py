"""
Connection lifecycle and FastAPI integration.

This module provides startup/shutdown hooks for the named connections and
a dependency factory for FastAPI to inject repositories into route handlers.
"""

import logging
from typing import Any, Callable, Iterator, Type, TypeVar

from sql_repository.adapters.database.factory import DatabaseManager
from sql_repository.repositories.base import Repository

logger = logging.getLogger(__name__)

R = TypeVar('R', bound=Repository)


def get_repository(repository_class: Type[R], **kwargs: Any) -> Callable[[], Iterator[R]]:
    """
    Build a FastAPI dependency that provides a repository.

    Every request gets its own instance, so pending clauses never leak
    between requests.

    Args:
        repository_class: Repository subclass to instantiate
        **kwargs: Passed to the constructor (``table_name``, ``connection_name``)

    Returns:
        Callable: Dependency to use with ``Depends``
    """
    def dependency() -> Iterator[R]:
        repository = repository_class(**kwargs)
        try:
            yield repository
        finally:
            repository.reset()

    return dependency


def init_db() -> None:
    """Resolve the default connection.

    This function should be called during application startup.
    """
    try:
        name = DatabaseManager.default_connection_name()
        adapter = DatabaseManager.connection(name)
        logger.info(f"Default connection '{name}' ready ({adapter.dialect_name})")
    except Exception as e:
        logger.error(f"Error initializing database: {str(e)}")
        raise


def close_db() -> None:
    """Close every resolved connection.

    This function should be called during application shutdown.
    """
    try:
        DatabaseManager.close_all()
        logger.info("Closed database connections")
    except Exception as e:
        logger.error(f"Error closing database connections: {str(e)}")
        raise
