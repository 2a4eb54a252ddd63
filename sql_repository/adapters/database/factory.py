"""
Database adapter factory and named-connection registry.

Repositories refer to connections by name. The manager resolves a name to
a URL from settings, builds the matching adapter once, and hands the same
adapter to every repository using that name.
"""

import logging
from typing import Dict, List, Optional

from sqlalchemy.engine import Engine, make_url

from sql_repository.adapters.database import DatabaseAdapter
from sql_repository.adapters.database.postgres import PostgresAdapter
from sql_repository.adapters.database.sqlite import SQLiteAdapter
from sql_repository.exceptions import ConnectionNotConfiguredError
from sql_repository.utils.config import get_settings
from sql_repository.utils.database import get_database_url

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Registry of named database adapters."""

    _adapters: Dict[str, DatabaseAdapter] = {}

    @classmethod
    def default_connection_name(cls) -> str:
        """Name of the connection used when a repository does not pick one."""
        return get_settings().DB_CONNECTION

    @classmethod
    def resolve_url(cls, name: str) -> str:
        """Look up the configured URL for a connection name.

        Raises:
            ConnectionNotConfiguredError: If no URL is configured for ``name``
        """
        settings = get_settings()
        if name in settings.DB_CONNECTIONS:
            return settings.DB_CONNECTIONS[name]
        if name == settings.DB_CONNECTION:
            return get_database_url()
        raise ConnectionNotConfiguredError(name)

    @classmethod
    def create_adapter(
        cls,
        database_url: Optional[str] = None,
        engine: Optional[Engine] = None,
    ) -> DatabaseAdapter:
        """Build the adapter matching a URL or an existing engine.

        The adapter is returned uninitialized.
        """
        if engine is not None:
            backend = engine.dialect.name
        elif database_url:
            backend = make_url(database_url).get_backend_name()
        else:
            raise ValueError("Either a database URL or an engine is required")

        if backend == "sqlite":
            return SQLiteAdapter(database_url, engine=engine)
        if backend == "postgresql":
            return PostgresAdapter(database_url, engine=engine)
        raise ValueError(f"Unsupported database backend: {backend}")

    @classmethod
    def connection(cls, name: Optional[str] = None) -> DatabaseAdapter:
        """Get the adapter for a connection name.

        Args:
            name: Connection name. Defaults to ``DB_CONNECTION``.

        Returns:
            DatabaseAdapter: The initialized adapter, created on first use
        """
        name = name or cls.default_connection_name()

        if name not in cls._adapters:
            adapter = cls.create_adapter(cls.resolve_url(name))
            adapter.init()
            cls._adapters[name] = adapter
            logger.info(f"Resolved database connection '{name}' ({adapter.dialect_name})")

        return cls._adapters[name]

    @classmethod
    def add_connection(
        cls,
        name: str,
        database_url: Optional[str] = None,
        engine: Optional[Engine] = None,
    ) -> DatabaseAdapter:
        """Register a connection explicitly, replacing any existing one."""
        cls.purge(name)
        adapter = cls.create_adapter(database_url, engine=engine)
        adapter.init()
        cls._adapters[name] = adapter
        logger.info(f"Registered database connection '{name}' ({adapter.dialect_name})")
        return adapter

    @classmethod
    def connection_names(cls) -> List[str]:
        return list(cls._adapters)

    @classmethod
    def purge(cls, name: Optional[str] = None) -> None:
        """Close and forget a connection so the next lookup rebuilds it."""
        name = name or cls.default_connection_name()
        adapter = cls._adapters.pop(name, None)
        if adapter is not None:
            adapter.close()
            logger.info(f"Closed database connection '{name}'")

    @classmethod
    def close_all(cls) -> None:
        for name in list(cls._adapters):
            cls.purge(name)
