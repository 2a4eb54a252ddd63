"""
Base repository pattern implementation on top of SQLAlchemy's query builder.

A repository is bound to one table on one named connection. Subclasses
usually declare nothing but their name:

    class UserRepository(Repository):
        pass

    UserRepository().where("active", True).order_by("name").get()

The table defaults to the snake_case plural of the class name without its
``Repository`` suffix, and the connection to ``DB_CONNECTION``. Both can be
set on the class (``table_name``/``connection_name``), passed to the
constructor, or changed later with the fluent setters.

Helper methods layer clauses onto a pending ``Select`` and return the
repository so calls chain. Execution methods hand the statement to
SQLAlchemy and return its ``Row`` objects untouched, then clear the pending
statement so the next chain starts fresh.
"""

import logging
import operator as op
import re
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from sqlalchemy import Table, func, literal_column, select, text
from sqlalchemy.engine import Row
from sqlalchemy.sql import ColumnElement, Select

from sql_repository.adapters.database import DatabaseAdapter
from sql_repository.adapters.database.factory import DatabaseManager
from sql_repository.exceptions import InvalidClauseError, RecordNotFoundError
from sql_repository.repositories.naming import default_table_name

logger = logging.getLogger(__name__)

ColumnRef = Union[str, ColumnElement]

_MISSING = object()

_ALIAS_PATTERN = re.compile(r"^(.+?)\s+as\s+(\w+)$", re.IGNORECASE)
_QUALIFIED_PATTERN = re.compile(r"^(\w+)\.(\w+|\*)$")

_OPERATORS: Dict[str, Callable[[Any, Any], Any]] = {
    "=": op.eq,
    "==": op.eq,
    "!=": op.ne,
    "<>": op.ne,
    "<": op.lt,
    "<=": op.le,
    ">": op.gt,
    ">=": op.ge,
    "like": lambda column, value: column.like(value),
    "not like": lambda column, value: column.not_like(value),
    "ilike": lambda column, value: column.ilike(value),
    "in": lambda column, value: column.in_(value),
    "not in": lambda column, value: column.not_in(value),
}

_JOIN_TYPES = {
    "inner": {},
    "left": {"isouter": True},
    "full": {"full": True},
}


class Repository:
    """
    Base class for table repositories.

    Attributes:
        table_name (str): Table the repository reads from
        connection_name (str): Name of the connection resolved through
            ``DatabaseManager``
        joins (list): Joins applied once to every new query, as
            ``(table, first, second)`` or ``(table, first, second, type)``
    """

    table_name: Optional[str] = None
    connection_name: Optional[str] = None
    joins: Sequence[Tuple[str, ...]] = ()

    def __init__(self, table_name: Optional[str] = None, connection_name: Optional[str] = None):
        """
        Initialize the repository.

        Args:
            table_name: Overrides the class attribute and the inferred name
            connection_name: Overrides the class attribute and the default
        """
        cls = type(self)
        self.table_name = table_name or cls.table_name or default_table_name(cls.__name__)
        self.connection_name = (
            connection_name or cls.connection_name or DatabaseManager.default_connection_name()
        )
        self._query: Optional[Select] = None
        self._joins_applied = False

    def __repr__(self) -> str:
        return f"<{type(self).__name__} table={self.table_name!r} connection={self.connection_name!r}>"

    def get_table_name(self) -> str:
        return self.table_name

    def set_table_name(self, table_name: str) -> "Repository":
        self.table_name = table_name
        self.reset()
        return self

    def get_connection_name(self) -> str:
        return self.connection_name

    def set_connection_name(self, connection_name: str) -> "Repository":
        self.connection_name = connection_name
        self.reset()
        return self

    def connection(self) -> DatabaseAdapter:
        """Get the adapter for this repository's connection name."""
        return DatabaseManager.connection(self.connection_name)

    def table(self) -> Table:
        """Get the reflected table this repository reads from."""
        return self.connection().table(self.table_name)

    def new_query(self) -> Select:
        """Get a fresh ``SELECT * FROM <table>`` with no other clauses."""
        table = self.table()
        return select(table).select_from(table)

    @property
    def query(self) -> Select:
        """The pending statement, with the declared joins applied once."""
        if self._query is None or not self._joins_applied:
            query = self._query if self._query is not None else self.new_query()
            for join in self.joins:
                query = self._apply_join(query, *join)
            # Only a fully joined statement becomes pending
            self._query = query
            self._joins_applied = True

        return self._query

    def reset(self) -> "Repository":
        """Discard the pending statement."""
        self._query = None
        self._joins_applied = False
        return self

    # Clause helpers

    def select(self, *columns: ColumnRef) -> "Repository":
        """
        Replace the selected columns.

        Args:
            *columns: Column names (``"name"``, ``"posts.title"``,
                ``"posts.*"``, ``"name as author"``) or SQLAlchemy expressions.
                With no columns the statement is left unchanged.
        """
        if columns:
            resolved = []
            for column in columns:
                resolved.extend(self._columns(column))
            self._query = self.query.with_only_columns(*resolved)
        return self

    def where(self, column: Any, operator: Any = _MISSING, value: Any = _MISSING) -> "Repository":
        """
        Add a WHERE condition.

        ``where("name", "Ada")`` compares for equality, ``where("age", ">", 30)``
        uses the given operator. A dict applies one equality per key and skips
        ``None`` values. A SQLAlchemy expression is applied as-is, a bare
        string as raw SQL.

        Raises:
            InvalidClauseError: If the operator is not supported
        """
        query = self.query

        if operator is _MISSING and value is _MISSING:
            if isinstance(column, dict):
                for name, filter_value in column.items():
                    if filter_value is not None:
                        query = query.where(self._column(name) == filter_value)
                self._query = query
                return self
            self._query = query.where(text(column) if isinstance(column, str) else column)
            return self

        if value is _MISSING:
            operator, value = "=", operator

        comparator = _OPERATORS.get(str(operator).lower())
        if comparator is None:
            raise InvalidClauseError(f"Unsupported operator: {operator}")

        self._query = query.where(comparator(self._column(column), value))
        return self

    def where_in(self, column: ColumnRef, values: Iterable[Any]) -> "Repository":
        return self.where(column, "in", list(values))

    def where_not_in(self, column: ColumnRef, values: Iterable[Any]) -> "Repository":
        return self.where(column, "not in", list(values))

    def where_null(self, column: ColumnRef) -> "Repository":
        self._query = self.query.where(self._column(column).is_(None))
        return self

    def where_not_null(self, column: ColumnRef) -> "Repository":
        self._query = self.query.where(self._column(column).is_not(None))
        return self

    def order_by(self, column: ColumnRef, direction: str = "asc") -> "Repository":
        """
        Add an ORDER BY clause.

        Raises:
            InvalidClauseError: If direction is not ``asc`` or ``desc``
        """
        direction = direction.lower()
        if direction not in ("asc", "desc"):
            raise InvalidClauseError(f"Order direction must be 'asc' or 'desc', got '{direction}'")

        expression = self._column(column)
        self._query = self.query.order_by(expression.desc() if direction == "desc" else expression.asc())
        return self

    def group_by(self, *columns: ColumnRef) -> "Repository":
        if columns:
            self._query = self.query.group_by(*(self._column(column) for column in columns))
        return self

    def limit(self, limit: Optional[int]) -> "Repository":
        if limit is not None:
            self._query = self.query.limit(limit)
        return self

    def offset(self, offset: Optional[int]) -> "Repository":
        if offset is not None:
            self._query = self.query.offset(offset)
        return self

    def for_page(self, page: int, per_page: int = 15) -> "Repository":
        """Limit the statement to one page of results (pages start at 1)."""
        page = max(page, 1)
        return self.offset((page - 1) * per_page).limit(per_page)

    def join(self, table: Union[str, Table], first: ColumnRef, second: ColumnRef, type: str = "inner") -> "Repository":
        """
        Join another table on ``first == second``.

        Args:
            table: Table name on the same connection, or a ``Table``
            first: Left column of the ON condition
            second: Right column of the ON condition
            type: ``inner``, ``left`` or ``full``
        """
        self._query = self._apply_join(self.query, table, first, second, type)
        return self

    def when(self, condition: Any, callback: Callable[["Repository"], Any]) -> "Repository":
        """Apply ``callback(self)`` only when ``condition`` is truthy."""
        if condition:
            callback(self)
        return self

    # Execution

    def get(self) -> List[Row]:
        """Execute the pending statement and return every row."""
        query = self._consume()
        with self.connection().connect() as connection:
            logger.debug("Executing on '%s': %s", self.connection_name, query)
            return list(connection.execute(query).all())

    def first(self) -> Optional[Row]:
        """Execute the pending statement and return the first row, if any."""
        query = self._consume().limit(1)
        with self.connection().connect() as connection:
            logger.debug("Executing on '%s': %s", self.connection_name, query)
            return connection.execute(query).first()

    def first_or_fail(self) -> Row:
        """
        Execute the pending statement and return the first row.

        Raises:
            RecordNotFoundError: If no row matches
        """
        row = self.first()
        if row is None:
            raise RecordNotFoundError(self.table_name)
        return row

    def get_with_total(self) -> Tuple[List[Row], int]:
        """
        Execute the pending statement and count every row it matches.

        Returns:
            Tuple[List[Row], int]: (rows, total), where total ignores the
            limit, offset and ordering of the statement
        """
        query = self._consume()
        with self.connection().connect() as connection:
            logger.debug("Executing on '%s': %s", self.connection_name, query)
            total = connection.execute(self._count_query(query)).scalar() or 0
            rows = list(connection.execute(query).all())
        return rows, total

    def count(self) -> int:
        """Count the rows the pending statement matches, ignoring limit and offset."""
        query = self._count_query(self._consume())
        with self.connection().connect() as connection:
            logger.debug("Executing on '%s': %s", self.connection_name, query)
            return connection.execute(query).scalar() or 0

    def to_sql(self) -> str:
        """Render the pending statement for this connection's dialect without executing it."""
        return str(self.query.compile(
            dialect=self.connection().engine.dialect,
            compile_kwargs={"literal_binds": True},
        ))

    # Internals

    def _consume(self) -> Select:
        try:
            return self.query
        finally:
            self.reset()

    @staticmethod
    def _count_query(query: Select) -> Select:
        base = query.limit(None).offset(None).order_by(None)
        return select(func.count()).select_from(base.subquery())

    def _apply_join(
        self,
        query: Select,
        table: Union[str, Table],
        first: ColumnRef,
        second: ColumnRef,
        type: str = "inner",
    ) -> Select:
        options = _JOIN_TYPES.get(type.lower())
        if options is None:
            raise InvalidClauseError(f"Unsupported join type: {type}")

        target = self.connection().table(table) if isinstance(table, str) else table
        return query.join(target, self._column(first) == self._column(second), **options)

    def _resolve(self, reference: str) -> Tuple[Optional[Table], str]:
        match = _QUALIFIED_PATTERN.match(reference)
        if match:
            return self.connection().table(match.group(1)), match.group(2)
        if re.match(r"^\w+$", reference):
            return self.table(), reference
        return None, reference

    def _column(self, reference: ColumnRef) -> ColumnElement:
        """Resolve a column reference to a SQLAlchemy expression."""
        if not isinstance(reference, str):
            return reference

        reference = reference.strip()
        alias = None
        match = _ALIAS_PATTERN.match(reference)
        if match:
            reference, alias = match.group(1).strip(), match.group(2)

        table, name = self._resolve(reference)
        if table is not None and name in table.c:
            column = table.c[name]
        else:
            column = literal_column(reference)

        return column.label(alias) if alias else column

    def _columns(self, reference: ColumnRef) -> List[ColumnElement]:
        if isinstance(reference, str):
            reference = reference.strip()
            if reference == "*":
                return list(self.table().c)
            match = _QUALIFIED_PATTERN.match(reference)
            if match and match.group(2) == "*":
                return list(self.connection().table(match.group(1)).c)
        return [self._column(reference)]
