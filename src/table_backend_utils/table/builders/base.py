"""
Base table query builder.

Query builders are pure: they turn table definitions into single SQL
statements and never touch a connection. Every identifier is validated
before any SQL is produced, so a malformed request fails without a database
round trip.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence

from ...column import Column, ColumnCollection
from ...exceptions import ColumnException, ErrorCode, QueryBuilderException
from ...sql.dialects import SqlDialect
from ...utils.logging import get_logger
from ..definition import TableDefinition

logger = get_logger(__name__)


class TableQueryBuilder(ABC):
    """
    Shared validation and statement templates for all dialects.

    Subclasses set ``dialect`` and implement the create/truncate/rename
    templates that differ between engines.
    """

    dialect: SqlDialect

    # ==================== Validation ====================

    def _validate_table_name(self, schema_name: str, table_name: str) -> None:
        self.dialect.validate_identifier(schema_name, "schema")
        self.dialect.validate_identifier(table_name, "table")

    def _validate_columns(self, columns: ColumnCollection) -> None:
        limit = self.dialect.max_columns
        if limit is not None and len(columns) > limit:
            raise ColumnException.too_many_columns(len(columns), limit)
        for column in columns:
            self.dialect.validate_identifier(column.name, "column")
            if column.dialect != self.dialect.name:
                raise QueryBuilderException(
                    f"Column {column.name} is defined for {column.dialect.value}, "
                    f"expected {self.dialect.name.value}",
                    ErrorCode.INVALID_TYPE,
                )

    def _validate_primary_keys(
        self, columns: ColumnCollection, primary_keys: Sequence[str]
    ) -> None:
        for name in primary_keys:
            self.dialect.validate_identifier(name, "column")
        missing = [name for name in primary_keys if name not in columns]
        if missing:
            raise QueryBuilderException.primary_key_not_in_columns(", ".join(missing))
        for name in primary_keys:
            if columns.get(name).is_nullable():
                raise QueryBuilderException.primary_key_on_nullable_column(name)

    def _validate_create(
        self,
        schema_name: str,
        table_name: str,
        columns: ColumnCollection,
        primary_keys: Sequence[str] = (),
    ) -> None:
        self._validate_table_name(schema_name, table_name)
        self._validate_columns(columns)
        self._validate_primary_keys(columns, primary_keys)

    # ==================== Rendering helpers ====================

    def _column_sql(self, column: Column) -> str:
        return f"{self.dialect.quote(column.name)} {column.sql_definition}"

    def _columns_sql(self, columns: ColumnCollection, separator: str = ", ") -> str:
        return separator.join(self._column_sql(column) for column in columns)

    def _quote_list(self, names: Sequence[str], separator: str = ",") -> str:
        return separator.join(self.dialect.quote(name) for name in names)

    def _qualified(self, schema_name: str, table_name: str) -> str:
        return self.dialect.qualify(table_name, schema_name)

    # ==================== Statements ====================

    @abstractmethod
    def get_create_table_command(
        self,
        schema_name: str,
        table_name: str,
        columns: ColumnCollection,
        primary_keys: Sequence[str] = (),
    ) -> str:
        """Build a CREATE TABLE statement with an optional primary key clause."""

    @abstractmethod
    def get_create_temp_table_command(
        self, schema_name: str, table_name: str, columns: ColumnCollection
    ) -> str:
        """Build a CREATE statement for a session scoped table (no primary key)."""

    @abstractmethod
    def get_truncate_table_command(self, schema_name: str, table_name: str) -> str:
        """Build a statement removing all rows of a table."""

    @abstractmethod
    def get_rename_table_command(
        self, schema_name: str, table_name: str, new_table_name: str
    ) -> str:
        """Build a statement renaming a table within its schema."""

    def get_create_table_command_from_definition(
        self, definition: TableDefinition, define_primary_keys: bool = False
    ) -> str:
        """
        Build the CREATE statement for a table definition.

        Args:
            definition: Table to create
            define_primary_keys: Emit the primary key clause. False clones the
                table shape without its key constraints.

        Returns:
            CREATE TABLE SQL statement
        """
        if definition.is_temporary:
            return self.get_create_temp_table_command(
                definition.schema_name, definition.table_name, definition.columns
            )
        return self.get_create_table_command(
            definition.schema_name,
            definition.table_name,
            definition.columns,
            self._definition_primary_keys(definition, define_primary_keys),
        )

    def get_drop_table_command(self, schema_name: str, table_name: str) -> str:
        self._validate_table_name(schema_name, table_name)
        logger.debug(
            "table_query_builder.drop_table",
            dialect=self.dialect.name.value,
            schema=schema_name,
            table=table_name,
        )
        return f"DROP TABLE {self._qualified(schema_name, table_name)}"

    @staticmethod
    def _definition_primary_keys(
        definition: TableDefinition, define_primary_keys: bool
    ) -> List[str]:
        if not define_primary_keys:
            return []
        return definition.get_primary_keys_names()

    def _log_create(
        self,
        schema_name: str,
        table_name: str,
        columns: ColumnCollection,
        primary_keys: Sequence[str] = (),
        temporary: bool = False,
    ) -> None:
        logger.debug(
            "table_query_builder.create_table",
            dialect=self.dialect.name.value,
            schema=schema_name,
            table=table_name,
            columns_count=len(columns),
            primary_keys=list(primary_keys),
            temporary=temporary,
        )
