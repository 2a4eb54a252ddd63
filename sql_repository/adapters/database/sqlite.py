"""
SQLite database adapter implementation.

Used for development, tests and small deployments. Foreign keys are
enabled on every new DBAPI connection since SQLite leaves them off.
"""

import logging

from sqlalchemy import event

from sql_repository.adapters.database import DatabaseAdapter
from sql_repository.utils.database import get_engine

logger = logging.getLogger(__name__)


class SQLiteAdapter(DatabaseAdapter):
    """SQLite adapter implementation."""

    def init(self) -> None:
        """Initialize the SQLite engine."""
        if self.engine is None:
            self.database_url = self.database_url or "sqlite://"
            try:
                self.engine = get_engine(self.database_url)
            except Exception as e:
                logger.error(f"Error initializing SQLite database: {str(e)}")
                raise

        if not event.contains(self.engine, "connect", _enable_foreign_keys):
            event.listen(self.engine, "connect", _enable_foreign_keys)

        logger.info(f"Initialized SQLite database at {self.engine.url}")


def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
