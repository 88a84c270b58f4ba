"""Synapse database reflection."""

from typing import List, Optional

from ...sql.dialects import SynapseDialect
from .base import DatabaseReflection

# sys.database_principals.type: SQL user, Windows user, external user/group
USER_PRINCIPAL_TYPES = "('S', 'U', 'E', 'X')"
ROLE_PRINCIPAL_TYPE = "'R'"


class SynapseDatabaseReflection(DatabaseReflection):
    dialect = SynapseDialect()

    def get_tables_names(self, schema_name: str) -> List[str]:
        return self._fetch_names(
            "SELECT [name] FROM sys.tables "
            f"WHERE [schema_id] = SCHEMA_ID(N{self.dialect.quote_literal(schema_name)})",
            "name",
        )

    def get_views_names(self, schema_name: str) -> List[str]:
        return self._fetch_names(
            "SELECT [name] FROM sys.views "
            f"WHERE [schema_id] = SCHEMA_ID(N{self.dialect.quote_literal(schema_name)})",
            "name",
        )

    def get_users_names(self, like: Optional[str] = None) -> List[str]:
        return self._principals(f"[type] IN {USER_PRINCIPAL_TYPES}", like)

    def get_roles_names(self, like: Optional[str] = None) -> List[str]:
        return self._principals(f"[type] = {ROLE_PRINCIPAL_TYPE}", like)

    def _principals(self, condition: str, like: Optional[str]) -> List[str]:
        sql = f"SELECT [name] FROM sys.database_principals WHERE {condition}"
        if like is not None:
            sql += f" AND [name] LIKE N{self._like_pattern(like)}"
        return self._fetch_names(sql, "name")
