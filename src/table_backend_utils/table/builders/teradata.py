"""Teradata table query builder."""

from typing import Sequence

from ...column import ColumnCollection
from ...sql.dialects import TeradataDialect
from .base import TableQueryBuilder


class TeradataTableQueryBuilder(TableQueryBuilder):
    """
    Query builder for Teradata.

    Tables are created as MULTISET with FALLBACK. A table without a primary
    key is created with NO PRIMARY INDEX so rows are not hash distributed on
    the first column.
    """

    dialect = TeradataDialect()

    def get_create_table_command(
        self,
        schema_name: str,
        table_name: str,
        columns: ColumnCollection,
        primary_keys: Sequence[str] = (),
    ) -> str:
        self._validate_create(schema_name, table_name, columns, primary_keys)
        self._log_create(schema_name, table_name, columns, primary_keys)

        columns_sql = self._columns_sql(columns, separator=",\n")
        if primary_keys:
            columns_sql += f",\nPRIMARY KEY ({self._quote_list(primary_keys, ', ')})"
        sql = (
            f"CREATE MULTISET TABLE {self._qualified(schema_name, table_name)}, FALLBACK\n"
            f"({columns_sql})"
        )
        if not primary_keys:
            sql += " NO PRIMARY INDEX"
        return sql + ";"

    def get_create_temp_table_command(
        self, schema_name: str, table_name: str, columns: ColumnCollection
    ) -> str:
        self._validate_create(schema_name, table_name, columns)
        self._log_create(schema_name, table_name, columns, temporary=True)
        columns_sql = self._columns_sql(columns, separator=",\n")
        return (
            f"CREATE MULTISET VOLATILE TABLE {self._qualified(schema_name, table_name)}, "
            "NO FALLBACK, NO LOG\n"
            f"({columns_sql}) NO PRIMARY INDEX ON COMMIT PRESERVE ROWS;"
        )

    def get_truncate_table_command(self, schema_name: str, table_name: str) -> str:
        self._validate_table_name(schema_name, table_name)
        return f"DELETE {self._qualified(schema_name, table_name)} ALL"

    def get_rename_table_command(
        self, schema_name: str, table_name: str, new_table_name: str
    ) -> str:
        self._validate_table_name(schema_name, table_name)
        self.dialect.validate_identifier(new_table_name, "table")
        return (
            f"RENAME TABLE {self._qualified(schema_name, table_name)} "
            f"AS {self._qualified(schema_name, new_table_name)}"
        )
