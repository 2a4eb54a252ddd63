"""
This package contains the repository base class.

Repositories provide a clean abstraction layer for database access,
implementing the repository pattern to separate business logic from
data access concerns.
"""

from sql_repository.repositories.base import Repository
from sql_repository.repositories.naming import default_table_name

__all__ = ['Repository', 'default_table_name']
