"""Teradata database reflection over the ``DBC`` dictionary views."""

from typing import List, Optional

from ...sql.dialects import TeradataDialect
from .base import DatabaseReflection

# DBC.TablesV.TableKind: T table, O table without primary index, V view
TABLE_KINDS = "('T', 'O')"
VIEW_KINDS = "('V')"


class TeradataDatabaseReflection(DatabaseReflection):
    dialect = TeradataDialect()

    def get_tables_names(self, schema_name: str) -> List[str]:
        return self._objects(schema_name, TABLE_KINDS)

    def get_views_names(self, schema_name: str) -> List[str]:
        return self._objects(schema_name, VIEW_KINDS)

    def get_users_names(self, like: Optional[str] = None) -> List[str]:
        sql = 'SELECT "UserName" FROM "DBC"."UsersV"'
        if like is not None:
            sql += f' WHERE "UserName" LIKE {self._like_pattern(like)}'
        return self._fetch_names(sql, "UserName")

    def get_roles_names(self, like: Optional[str] = None) -> List[str]:
        sql = 'SELECT "RoleName" FROM "DBC"."RoleInfoV"'
        if like is not None:
            sql += f' WHERE "RoleName" LIKE {self._like_pattern(like)}'
        return self._fetch_names(sql, "RoleName")

    def _objects(self, database_name: str, kinds: str) -> List[str]:
        return self._fetch_names(
            'SELECT "TableName" FROM "DBC"."TablesV" '
            f'WHERE "DatabaseName" = {self.dialect.quote_literal(database_name)} '
            f'AND "TableKind" IN {kinds}',
            "TableName",
        )
