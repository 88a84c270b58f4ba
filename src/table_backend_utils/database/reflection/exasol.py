"""Exasol database reflection over the ``SYS.EXA_ALL_*`` system tables."""

from typing import List, Optional

from ...sql.dialects import ExasolDialect
from .base import DatabaseReflection


class ExasolDatabaseReflection(DatabaseReflection):
    dialect = ExasolDialect()

    def get_tables_names(self, schema_name: str) -> List[str]:
        return self._fetch_names(
            'SELECT "TABLE_NAME" FROM "SYS"."EXA_ALL_TABLES" '
            f'WHERE "TABLE_SCHEMA" = {self.dialect.quote_literal(schema_name)}',
            "TABLE_NAME",
        )

    def get_views_names(self, schema_name: str) -> List[str]:
        return self._fetch_names(
            'SELECT "VIEW_NAME" FROM "SYS"."EXA_ALL_VIEWS" '
            f'WHERE "VIEW_SCHEMA" = {self.dialect.quote_literal(schema_name)}',
            "VIEW_NAME",
        )

    def get_users_names(self, like: Optional[str] = None) -> List[str]:
        sql = 'SELECT "USER_NAME" FROM "SYS"."EXA_ALL_USERS"'
        if like is not None:
            sql += f' WHERE "USER_NAME" LIKE {self._like_pattern(like)}'
        return self._fetch_names(sql, "USER_NAME")

    def get_roles_names(self, like: Optional[str] = None) -> List[str]:
        sql = 'SELECT "ROLE_NAME" FROM "SYS"."EXA_ALL_ROLES"'
        if like is not None:
            sql += f' WHERE "ROLE_NAME" LIKE {self._like_pattern(like)}'
        return self._fetch_names(sql, "ROLE_NAME")
