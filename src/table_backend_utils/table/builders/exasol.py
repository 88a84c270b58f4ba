"""Exasol table query builder."""

from typing import Sequence

from ...column import ColumnCollection
from ...exceptions import ErrorCode, QueryBuilderException
from ...sql.dialects import ExasolDialect
from .base import TableQueryBuilder


class ExasolTableQueryBuilder(TableQueryBuilder):
    """Query builder for Exasol."""

    dialect = ExasolDialect()

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
            columns_sql += f", CONSTRAINT PRIMARY KEY ({self._quote_list(primary_keys)})"
        return f"CREATE TABLE {self._qualified(schema_name, table_name)} ({columns_sql})"

    def get_create_temp_table_command(
        self, schema_name: str, table_name: str, columns: ColumnCollection
    ) -> str:
        # Exasol has no session scoped tables.
        raise QueryBuilderException(
            "Temporary tables are not supported by Exasol",
            ErrorCode.UNSUPPORTED_OPERATION,
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
            f"RENAME TABLE {self._qualified(schema_name, table_name)} "
            f"TO {self.dialect.quote(new_table_name)}"
        )
