"""
Custom exceptions for the repository layer.
"""

from typing import Optional


class RepositoryError(Exception):
    """Base exception for repository-related errors."""
    pass


class RecordNotFoundError(RepositoryError):
    """Raised when a query expected to return a record returns none."""

    def __init__(self, table: str, message: Optional[str] = None):
        self.table = table
        super().__init__(message or f"No record found in table '{table}'")


class ConnectionNotConfiguredError(RepositoryError):
    """Raised when a repository asks for a connection name nobody configured."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Database connection '{name}' is not configured")


class InvalidClauseError(RepositoryError):
    """Raised when a helper receives an unknown operator, direction or join type."""
    pass
