"""
Execution capability consumed by reflection readers.

The library never opens connections. Readers take any object implementing
:class:`Connection`; :class:`SqlAlchemyConnection` adapts a SQLAlchemy
``Connection`` owned by the caller.

Example:
    >>> from sqlalchemy import create_engine
    >>> engine = create_engine(database_url)
    >>> with engine.connect() as conn:
    ...     reflection = SynapseTableReflection(SqlAlchemyConnection(conn), "dbo", "orders")
    ...     reflection.get_columns_names()
"""

from typing import Any, Dict, List, Protocol, runtime_checkable

from sqlalchemy import Connection as SAConnection

from .utils.logging import get_logger

logger = get_logger(__name__)


@runtime_checkable
class Connection(Protocol):
    """Minimal execution interface: run a statement, or fetch rows as dicts."""

    def execute(self, sql: str) -> None:
        ...

    def fetch_all(self, sql: str) -> List[Dict[str, Any]]:
        ...


class SqlAlchemyConnection:
    """
    Adapter from a SQLAlchemy Connection to :class:`Connection`.

    Statements are passed to the DBAPI driver unchanged, so colons inside
    generated literals are never read as bind parameters.

    Args:
        connection: SQLAlchemy Connection. Caller owns transaction lifecycle.
    """

    def __init__(self, connection: SAConnection) -> None:
        self.connection = connection

    def execute(self, sql: str) -> None:
        logger.debug("connection.execute", sql=sql)
        self.connection.exec_driver_sql(sql)

    def fetch_all(self, sql: str) -> List[Dict[str, Any]]:
        logger.debug("connection.fetch_all", sql=sql)
        result = self.connection.exec_driver_sql(sql)
        return [dict(row) for row in result.mappings().all()]
