"""
Base database reflection: name listings at schema/catalog scope.

Results keep the order returned by the catalog; callers that need a
deterministic order sort them.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ...connection import Connection
from ...sql.dialects import SqlDialect
from ...utils.logging import get_logger
from ...utils.rows import row_value, to_str

logger = get_logger(__name__)


class DatabaseReflection(ABC):
    """
    Lists tables, views, users and roles.

    Args:
        connection: Execution capability used for catalog queries
    """

    dialect: SqlDialect

    def __init__(self, connection: Connection) -> None:
        self.connection = connection

    @abstractmethod
    def get_tables_names(self, schema_name: str) -> List[str]:
        """Names of the base tables in a schema (Teradata: database)."""

    @abstractmethod
    def get_views_names(self, schema_name: str) -> List[str]:
        """Names of the views in a schema (Teradata: database)."""

    @abstractmethod
    def get_users_names(self, like: Optional[str] = None) -> List[str]:
        """Names of users, optionally filtered by a substring."""

    @abstractmethod
    def get_roles_names(self, like: Optional[str] = None) -> List[str]:
        """Names of roles, optionally filtered by a substring."""

    def _like_pattern(self, like: str) -> str:
        """Wrap ``like`` as ``%like%`` and quote it as a literal."""
        return self.dialect.quote_literal(f"%{like}%")

    def _fetch_names(self, sql: str, key: str) -> List[str]:
        logger.debug("database_reflection.query", dialect=self.dialect.name.value, sql=sql)
        rows = self.connection.fetch_all(sql)
        return [to_str(row_value(row, key)) for row in rows]
