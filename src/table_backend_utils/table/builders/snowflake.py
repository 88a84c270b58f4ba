"""Snowflake table query builder."""

from typing import Sequence

from ...column import ColumnCollection
from ...sql.dialects import SnowflakeDialect
from .base import TableQueryBuilder


class SnowflakeTableQueryBuilder(TableQueryBuilder):
    """Query builder for Snowflake."""

    dialect = SnowflakeDialect()

    def get_create_table_command(
        self,
        schema_name: str,
        table_name: str,
        columns: ColumnCollection,
        primary_keys: Sequence[str] = (),
    ) -> str:
        self._validate_create(schema_name, table_name, columns, primary_keys)
        self._log_create(schema_name, table_name, columns, primary_keys)

        columns_sql = self._columns_sql(columns)
        if primary_keys:
            columns_sql += f", PRIMARY KEY ({self._quote_list(primary_keys)})"
        return f"CREATE TABLE {self._qualified(schema_name, table_name)} ({columns_sql})"

    def get_create_temp_table_command(
        self, schema_name: str, table_name: str, columns: ColumnCollection
    ) -> str:
        self._validate_create(schema_name, table_name, columns)
        self._log_create(schema_name, table_name, columns, temporary=True)
        return (
            f"CREATE TEMPORARY TABLE {self._qualified(schema_name, table_name)} "
            f"({self._columns_sql(columns)})"
        )

    def get_truncate_table_command(self, schema_name: str, table_name: str) -> str:
        self._validate_table_name(schema_name, table_name)
        return f"TRUNCATE TABLE {self._qualified(schema_name, table_name)}"

    def get_rename_table_command(
        self, schema_name: str, table_name: str, new_table_name: str
    ) -> str:
        self._validate_table_name(schema_name, table_name)
        self.dialect.validate_identifier(new_table_name, "table")
        return (
            f"ALTER TABLE {self._qualified(schema_name, table_name)} "
            f"RENAME TO {self._qualified(schema_name, new_table_name)}"
        )
