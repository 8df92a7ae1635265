"""
Fluent, named-parameter SQL client over an async SQLAlchemy session.

Every statement is plain SQL text with ``:name`` placeholders. Values are bound
by name and mapped back into records by an explicit row mapper supplied per
query:

    customer = await (
        client.sql("SELECT id, name FROM customers WHERE id = :id")
        .param("id", customer_id)
        .query(row_to_customer)
        .optional()
    )

The client never commits, rolls back or retries. Transaction scope belongs to
the caller (see ``services.base.transactional``).
"""

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import (
    Any, AsyncIterator, Callable, Dict, Generic, Iterable, List, Mapping, Optional, TypeVar
)

from sqlalchemy import Boolean, Date, DateTime, Numeric, bindparam, text
from sqlalchemy.engine import Result, Row
from sqlalchemy.exc import (
    IntegrityError, MultipleResultsFound, NoResultFound, SQLAlchemyError
)
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import TextClause

from core.exceptions import ConstraintViolationError, DataAccessError, ResultShapeError

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

RowMapper = Callable[[Row], T]

# datetime must be checked before date (it is a subclass)
_BIND_TYPES = (
    (bool, Boolean()),
    (Decimal, Numeric(10, 2, asdecimal=True)),
    (datetime, DateTime()),
    (date, Date()),
)


def _bind_type(value: Any):
    for python_type, sql_type in _BIND_TYPES:
        if isinstance(value, python_type):
            return sql_type
    return None


def _summarize(statement: str) -> str:
    return " ".join(statement.split())[:120]


def _first_column(row: Row) -> Any:
    return row[0]


def translate_error(exc: SQLAlchemyError, context: Dict[str, Any]) -> DataAccessError:
    """Map a SQLAlchemy error onto the data access exception hierarchy."""
    if isinstance(exc, IntegrityError):
        return ConstraintViolationError(
            "Statement violated a storage constraint",
            context=context,
            original_exception=exc,
        )
    if isinstance(exc, (NoResultFound, MultipleResultsFound)):
        return ResultShapeError(
            "Statement returned an unexpected number of rows",
            context=context,
            original_exception=exc,
        )
    return DataAccessError(
        "Statement failed",
        context=context,
        original_exception=exc,
    )


class SqlClient:
    """Entry point: ``SqlClient(session).sql("...")`` starts a statement."""

    def __init__(self, session: AsyncSession):
        self.session = session

    def sql(self, statement: str) -> "StatementSpec":
        return StatementSpec(self.session, statement)


class StatementSpec:
    """A SQL statement plus its named parameters, ready to query or update."""

    def __init__(self, session: AsyncSession, statement: str):
        self.session = session
        self.statement = statement
        self.parameters: Dict[str, Any] = {}

    def param(self, name: str, value: Any) -> "StatementSpec":
        """Bind a single named parameter."""
        self.parameters[name] = value
        return self

    def params(self, values: Mapping[str, Any]) -> "StatementSpec":
        """Bind every entry of ``values`` as a named parameter."""
        self.parameters.update(values)
        return self

    def query(self, row_mapper: Optional[RowMapper] = None) -> "MappedQuery":
        """
        Prepare a SELECT.

        Args:
            row_mapper: Turns one result row into a record. When omitted,
                the first column of each row is returned.
        """
        return MappedQuery(self, row_mapper or _first_column)

    async def update(self) -> int:
        """Execute an INSERT/UPDATE/DELETE and return the affected row count."""
        result = await self.execute()
        return result.rowcount

    async def update_returning_key(self) -> int:
        """
        Execute an ``INSERT ... RETURNING id`` and return the generated key.
        """
        result = await self.execute()
        return self.consume(result, lambda r: r.scalar_one())

    def compile(self) -> TextClause:
        clause = text(self.statement)
        typed = [
            bindparam(name, type_=sql_type)
            for name, sql_type in (
                (name, _bind_type(value)) for name, value in self.parameters.items()
            )
            if sql_type is not None
        ]
        if typed:
            clause = clause.bindparams(*typed)
        return clause

    def error_context(self) -> Dict[str, Any]:
        return {
            "statement": _summarize(self.statement),
            "parameters": sorted(self.parameters),
        }

    def translate(self, exc: SQLAlchemyError) -> DataAccessError:
        return translate_error(exc, self.error_context())

    async def execute(self) -> Result:
        logger.debug(f"Executing: {_summarize(self.statement)} params={sorted(self.parameters)}")
        try:
            return await self.session.execute(self.compile(), self.parameters)
        except SQLAlchemyError as e:
            raise self.translate(e) from e

    def consume(self, result: Result, reader: Callable[[Result], R]) -> R:
        try:
            return reader(result)
        except SQLAlchemyError as e:
            raise self.translate(e) from e


class MappedQuery(Generic[T]):
    """A SELECT bound to a row mapper; pick how many rows you expect."""

    def __init__(self, stmt: StatementSpec, row_mapper: RowMapper):
        self.stmt = stmt
        self.row_mapper = row_mapper

    async def list(self) -> List[T]:
        """All rows, in the order the statement defines."""
        result = await self.stmt.execute()
        rows = self.stmt.consume(result, lambda r: r.all())
        return [self.row_mapper(row) for row in rows]

    async def optional(self) -> Optional[T]:
        """The only row, or None. More than one row is an error."""
        result = await self.stmt.execute()
        row = self.stmt.consume(result, lambda r: r.one_or_none())
        return self.row_mapper(row) if row is not None else None

    async def single(self) -> T:
        """Exactly one row; used for aggregates, which always produce one."""
        result = await self.stmt.execute()
        row = self.stmt.consume(result, lambda r: r.one())
        return self.row_mapper(row)

    async def extract(self, extractor: Callable[[Iterable[T]], R]) -> R:
        """Hand every mapped row to ``extractor`` and return what it builds."""
        return extractor(await self.list())

    async def stream(self) -> AsyncIterator[T]:
        """
        Yield mapped rows as the driver produces them.

        The underlying result is closed when iteration ends, fails, or the
        consumer closes the generator early.
        """
        logger.debug(f"Streaming: {_summarize(self.stmt.statement)}")
        try:
            result = await self.stmt.session.stream(self.stmt.compile(), self.stmt.parameters)
        except SQLAlchemyError as e:
            raise self.stmt.translate(e) from e
        try:
            async for row in result:
                yield self.row_mapper(row)
        except SQLAlchemyError as e:
            raise self.stmt.translate(e) from e
        finally:
            await result.close()
