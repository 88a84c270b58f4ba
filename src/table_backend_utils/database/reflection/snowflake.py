"""Snowflake database reflection using ``SHOW`` commands."""

from typing import List, Optional

from ...sql.dialects import SnowflakeDialect
from .base import DatabaseReflection


class SnowflakeDatabaseReflection(DatabaseReflection):
    """
    Example:
        >>> reflection = SnowflakeDatabaseReflection(connection)
        >>> reflection.get_users_names("loader")  # SHOW USERS LIKE '%loader%'
    """

    dialect = SnowflakeDialect()

    def get_tables_names(self, schema_name: str) -> List[str]:
        return self._fetch_names(
            f"SHOW TABLES IN SCHEMA {self.dialect.quote(schema_name)}", "name"
        )

    def get_views_names(self, schema_name: str) -> List[str]:
        return self._fetch_names(
            f"SHOW VIEWS IN SCHEMA {self.dialect.quote(schema_name)}", "name"
        )

    def get_users_names(self, like: Optional[str] = None) -> List[str]:
        return self._fetch_names(self._show("USERS", like), "name")

    def get_roles_names(self, like: Optional[str] = None) -> List[str]:
        return self._fetch_names(self._show("ROLES", like), "name")

    def _show(self, objects: str, like: Optional[str]) -> str:
        sql = f"SHOW {objects}"
        if like is not None:
            sql += f" LIKE {self._like_pattern(like)}"
        return sql
