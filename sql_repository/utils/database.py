"""
Database URL resolution and engine configuration.

This module provides:
- The URL of the default connection for the current environment
- Engine creation with per-dialect pooling

The default connection supports both SQLite (development, testing) and
PostgreSQL (production) through environment configuration.
"""

import logging
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import NullPool, QueuePool, StaticPool

from sql_repository.utils.config import get_settings

logger = logging.getLogger(__name__)


def _clean_url(value: str) -> str:
    # Fix potential newline issues in .env file
    return value.split('\n')[0].strip()


def get_database_url() -> str:
    """
    Get the URL of the default connection based on environment.

    Returns:
        str: Database connection URL
    """
    settings = get_settings()

    # For testing, always use in-memory SQLite
    if settings.TESTING:
        logger.info("Using in-memory SQLite database for testing")
        return "sqlite://"

    env = settings.ENVIRONMENT.lower()
    logger.info(f"Current environment: {env}")

    if env == "development":
        db_url = settings.DATABASE_URL_DEV
        if db_url:
            db_url = _clean_url(db_url)
            db_type = "PostgreSQL" if db_url.startswith("postgresql") else "SQLite"
            logger.info(f"Using {db_type} database for development")
            return db_url

        logger.info("Using default SQLite database for development")
        return "sqlite:///app.db"

    db_url = settings.DATABASE_URL
    if db_url:
        db_url = _clean_url(db_url)
        db_type = "PostgreSQL" if db_url.startswith("postgresql") else "SQLite"
        logger.info(f"Using {db_type} database for {env}")
        return db_url

    logger.warning(f"No DATABASE_URL found, falling back to SQLite for {env}")
    return "sqlite:///app.db"


def is_memory_url(database_url: str) -> bool:
    """Check whether a SQLite URL points at an in-memory database."""
    url = make_url(database_url)
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


def get_engine(database_url: Optional[str] = None) -> Engine:
    """
    Get a SQLAlchemy engine with pooling suited to the database type.

    Args:
        database_url: Database URL. If None, the default connection's URL.

    Returns:
        Engine: Configured SQLAlchemy engine
    """
    if database_url is None:
        database_url = get_database_url()

    settings = get_settings()

    connect_args = {}
    engine_args = {
        "echo": settings.DEBUG,
        "echo_pool": settings.DEBUG
    }

    backend = make_url(database_url).get_backend_name()

    if backend == "sqlite":
        connect_args["check_same_thread"] = False
        if is_memory_url(database_url):
            # Every checkout must see the same in-memory database
            engine_args["poolclass"] = StaticPool
            logger.info("Using StaticPool for in-memory SQLite database")
        else:
            engine_args["poolclass"] = NullPool
            logger.info("Using NullPool for SQLite database")

    elif backend == "postgresql":
        engine_args.update({
            "poolclass": QueuePool,
            "pool_size": settings.POOL_SIZE,
            "max_overflow": settings.MAX_OVERFLOW,
            "pool_timeout": settings.POOL_TIMEOUT,
            "pool_recycle": settings.POOL_RECYCLE,
            "pool_pre_ping": True
        })
        logger.info(
            f"Using QueuePool for PostgreSQL database "
            f"(size={settings.POOL_SIZE}, max_overflow={settings.MAX_OVERFLOW})"
        )

    return create_engine(
        database_url,
        connect_args=connect_args,
        **engine_args
    )
