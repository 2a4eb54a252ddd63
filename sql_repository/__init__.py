"""
Repository pattern base class on top of SQLAlchemy's query builder.
"""

from sql_repository.adapters.database.factory import DatabaseManager
from sql_repository.exceptions import (
    ConnectionNotConfiguredError,
    InvalidClauseError,
    RecordNotFoundError,
    RepositoryError,
)
from sql_repository.repositories import Repository

__version__ = "0.1"

__all__ = [
    'DatabaseManager',
    'Repository',
    'RepositoryError',
    'RecordNotFoundError',
    'ConnectionNotConfiguredError',
    'InvalidClauseError',
]
