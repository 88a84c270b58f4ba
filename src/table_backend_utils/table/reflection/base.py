"""
Base table reflection.

A reflection reader is bound to a connection, a schema (Teradata database)
and a table name. Every public operation resolves the catalog object id
first, so a missing table always surfaces as
:class:`TableNotExistsReflectionException` rather than as an empty result.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from ...column import Column, ColumnCollection
from ...connection import Connection
from ...exceptions import TableNotExistsReflectionException
from ...sql.dialects import SqlDialect
from ...utils.logging import get_logger
from ...utils.rows import row_value, to_int
from ..definition import TableDefinition

logger = get_logger(__name__)


class TableReflection(ABC):
    """
    Reads table metadata from a warehouse catalog.

    Args:
        connection: Execution capability used for catalog queries
        schema_name: Schema (or Teradata database) of the table
        table_name: Table name
    """

    dialect: SqlDialect

    def __init__(self, connection: Connection, schema_name: str, table_name: str) -> None:
        self.connection = connection
        self.schema_name = schema_name
        self.table_name = table_name

    # ==================== Catalog queries ====================

    @abstractmethod
    def get_object_id(self) -> str:
        """
        Resolve the catalog's internal id of the table.

        Raises:
            TableNotExistsReflectionException: If the table does not exist
        """

    @abstractmethod
    def _fetch_columns(self, object_id: str) -> List[Column]:
        """Columns in physical order."""

    @abstractmethod
    def _fetch_primary_keys(self, object_id: str) -> List[str]:
        """Primary key column names in key order."""

    def is_temporary(self) -> bool:
        return False

    # ==================== Public API ====================

    def get_columns_names(self) -> List[str]:
        return [column.name for column in self._fetch_columns(self.get_object_id())]

    def get_columns_definitions(self) -> ColumnCollection:
        return ColumnCollection(self._fetch_columns(self.get_object_id()))

    def get_primary_keys_names(self) -> List[str]:
        return self._fetch_primary_keys(self.get_object_id())

    def get_table_definition(self) -> TableDefinition:
        """
        Assemble the table definition from catalog state.

        Nullable primary key columns are accepted here: the catalog is the
        source of truth for an existing table.
        """
        object_id = self.get_object_id()
        definition = self._build_definition(
            object_id,
            ColumnCollection(self._fetch_columns(object_id)),
            self._fetch_primary_keys(object_id),
        )
        logger.info(
            "table_reflection.definition_loaded",
            dialect=self.dialect.name.value,
            schema=self.schema_name,
            table=self.table_name,
            columns_count=len(definition.columns),
            primary_keys=definition.get_primary_keys_names(),
        )
        return definition

    def get_rows_count(self) -> int:
        """
        Count rows with ``SELECT COUNT(*)``.

        The query is issued directly; for a missing table the connection's
        error propagates unchanged.
        """
        rows = self._fetch(self._rows_count_sql())
        return to_int(row_value(rows[0], "count")) or 0

    # ==================== Helpers ====================

    def _build_definition(
        self, object_id: str, columns: ColumnCollection, primary_keys: List[str]
    ) -> TableDefinition:
        return TableDefinition(
            self.schema_name,
            self.table_name,
            self.is_temporary(),
            columns,
            primary_keys,
            validate_nullable=False,
        )

    def _rows_count_sql(self) -> str:
        return f"SELECT COUNT(*) AS {self.dialect.quote('count')} FROM {self._qualified()}"

    def _qualified(self) -> str:
        return self.dialect.qualify(self.table_name, self.schema_name)

    def _literal(self, value: str) -> str:
        return self.dialect.quote_literal(value)

    def _fetch(self, sql: str) -> List[Dict[str, Any]]:
        logger.debug(
            "table_reflection.query",
            dialect=self.dialect.name.value,
            schema=self.schema_name,
            table=self.table_name,
            sql=sql,
        )
        return self.connection.fetch_all(sql)

    def _table_not_exists(self) -> TableNotExistsReflectionException:
        logger.warning(
            "table_reflection.table_not_exists",
            dialect=self.dialect.name.value,
            schema=self.schema_name,
            table=self.table_name,
        )
        return TableNotExistsReflectionException(self.schema_name, self.table_name)
