"""Database gateway owning the single connection used by the console.

The gateway wraps one SQLAlchemy `Connection`. Every statement is executed
with bound parameters and committed (or rolled back) on its own, so each menu
operation is a single-statement transaction.
"""

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Tuple

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from utilities.connection_config import ConnectionConfig
from utilities.constants.response_messages import (
    ERROR_DATABASE_CONNECTION_FAILURE, ERROR_DATABASE_STATEMENT_FAILURE,
    ERROR_GATEWAY_CLOSED, ERROR_SQL_QUERY_REQUIRED)
from utilities.logging_utils import setup_logger

logger = setup_logger(__name__)

# ValueError and OverflowError come from DBAPI drivers binding parameters and
# are not wrapped by SQLAlchemy (an int too large for SQLite, a NUL in a
# psycopg2 string).
STATEMENT_ERRORS = (SQLAlchemyError, ValueError, OverflowError)


class GatewayError(RuntimeError):
    """A statement could not be executed."""


class GatewayConnectionError(GatewayError):
    """The physical connection could not be established."""


@dataclass
class QueryResult:
    columns: List[str]
    rows: List[Tuple[Any, ...]] = field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def scalar(self):
        """Return the first column of the first row, or None for an empty result."""
        if not self.rows:
            return None
        return self.rows[0][0]


def _error_message(error: Exception) -> str:
    # DBAPI errors carry the driver's own message, which is what the operator needs.
    if isinstance(error, DBAPIError) and error.orig is not None:
        return str(error.orig).strip()
    return str(error)


def _rollback(connection: Connection):
    try:
        connection.rollback()
    except SQLAlchemyError as e:
        logger.warning("Rollback failed: %s", _error_message(e))


class DatabaseGateway:
    """
    Owns one database connection and executes statements on it.

    Attributes:
        close_count (int): Number of times the connection was actually released.
            Stays at 1 however many times close is called.

    Methods:
        connect: Build an engine from a ConnectionConfig and open the connection.
        execute_update: Run a write statement and commit it.
        execute_query: Run a SELECT and return its columns and rows.
        close: Release the connection; safe to call more than once.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self._connection: Optional[Connection] = engine.connect()
        self.close_count = 0

    @classmethod
    def connect(cls, config: ConnectionConfig) -> "DatabaseGateway":
        """
        Open a gateway for the given connection settings.

        Raises:
            GatewayConnectionError: If the database cannot be reached.
        """
        try:
            engine = create_engine(config.url())
            return cls(engine)
        except SQLAlchemyError as e:
            logger.error("Connection to %s failed", config.display_url())
            raise GatewayConnectionError(
                ERROR_DATABASE_CONNECTION_FAILURE.format(error=_error_message(e))
            ) from e

    @property
    def dialect_name(self) -> str:
        return self.engine.dialect.name

    @property
    def closed(self) -> bool:
        return self._connection is None

    def _require_connection(self, statement: str) -> Connection:
        if not statement:
            raise ValueError(ERROR_SQL_QUERY_REQUIRED)
        if self._connection is None:
            raise GatewayError(ERROR_GATEWAY_CLOSED)
        return self._connection

    def execute_update(self, statement: str, params: Optional[Mapping[str, Any]] = None) -> int:
        """
        Execute an INSERT/UPDATE/DELETE statement and commit it.

        Args:
            statement (str): SQL text with `:name` placeholders.
            params (Optional[Mapping[str, Any]]): Values bound to the placeholders.

        Returns:
            int: Number of rows affected.

        Raises:
            GatewayError: If the statement fails; the transaction is rolled back.
        """
        connection = self._require_connection(statement)
        logger.debug("execute_update: %s %s", statement, params)
        try:
            result = connection.execute(text(statement), dict(params or {}))
            connection.commit()
            return result.rowcount
        except STATEMENT_ERRORS as e:
            _rollback(connection)
            raise GatewayError(ERROR_DATABASE_STATEMENT_FAILURE.format(error=_error_message(e))) from e

    def execute_query(self, statement: str, params: Optional[Mapping[str, Any]] = None) -> QueryResult:
        """
        Execute a SELECT statement and fetch every row.

        Raises:
            GatewayError: If the statement fails.
        """
        connection = self._require_connection(statement)
        logger.debug("execute_query: %s %s", statement, params)
        try:
            result = connection.execute(text(statement), dict(params or {}))
            columns = list(result.keys())
            rows = [tuple(row) for row in result.fetchall()]
            connection.commit()
        except STATEMENT_ERRORS as e:
            _rollback(connection)
            raise GatewayError(ERROR_DATABASE_STATEMENT_FAILURE.format(error=_error_message(e))) from e
        return QueryResult(columns=columns, rows=rows)

    def close(self):
        """Close the connection and dispose of the engine. Later calls are no-ops."""
        if self._connection is None:
            return
        connection, self._connection = self._connection, None
        self.close_count += 1
        try:
            connection.close()
        finally:
            self.engine.dispose()
