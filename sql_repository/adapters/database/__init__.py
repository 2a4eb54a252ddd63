"""
Database adapters behind named repository connections.

Each adapter owns one SQLAlchemy engine and the reflected tables for it, so
repositories can work with any supported engine through the same interface.
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import MetaData, Table, inspect
from sqlalchemy.engine import Connection, Engine


class DatabaseAdapter(ABC):
    """Abstract base class for database adapters."""

    def __init__(self, database_url: Optional[str] = None, engine: Optional[Engine] = None):
        """Initialize the adapter.

        Args:
            database_url: Connection URL used to build the engine in ``init()``
            engine: Pre-built engine; takes precedence over ``database_url``
        """
        self.database_url = database_url
        self.engine = engine
        self.metadata = MetaData()

    @abstractmethod
    def init(self) -> None:
        """Create the engine and apply dialect-specific configuration."""
        pass

    def close(self) -> None:
        """Dispose of the engine and forget reflected tables."""
        if self.engine is not None:
            self.engine.dispose()
            self.engine = None
        self.metadata.clear()

    @property
    def dialect_name(self) -> str:
        self._ensure_initialized()
        return self.engine.dialect.name

    @contextmanager
    def connect(self) -> Iterator[Connection]:
        """Yield a connection from the engine's pool.

        Yields:
            Connection: A SQLAlchemy connection, returned to the pool on exit
        """
        self._ensure_initialized()
        with self.engine.connect() as connection:
            yield connection

    def table(self, name: str) -> Table:
        """Get the reflected table for ``name``.

        Tables are reflected on first use and cached for the adapter's
        lifetime. ``sqlalchemy.exc.NoSuchTableError`` propagates when the
        table does not exist.
        """
        self._ensure_initialized()
        if name not in self.metadata.tables:
            Table(name, self.metadata, autoload_with=self.engine)
        return self.metadata.tables[name]

    def has_table(self, name: str) -> bool:
        self._ensure_initialized()
        return inspect(self.engine).has_table(name)

    def _ensure_initialized(self) -> None:
        if self.engine is None:
            raise RuntimeError("Database not initialized. Call init() first.")
