"""
PostgreSQL database adapter.
"""

import logging

from sql_repository.adapters.database import DatabaseAdapter
from sql_repository.utils.database import get_engine

logger = logging.getLogger(__name__)


class PostgresAdapter(DatabaseAdapter):
    """PostgreSQL database adapter."""

    def init(self) -> None:
        """Initialize the database connection."""
        if self.engine is None:
            if not self.database_url:
                raise ValueError("Database URL is required")
            self.engine = get_engine(self.database_url)

        logger.info(f"Initialized PostgreSQL database at {self.engine.url}")
