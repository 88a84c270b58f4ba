"""Synapse table query builder."""

from typing import List, Optional, Sequence

from ...column import ColumnCollection
from ...exceptions import ErrorCode, QueryBuilderException
from ...sql.dialects import SynapseDialect
from ..definition import SynapseTableDefinition, TableDefinition, TableDistribution, TableIndex
from .base import TableQueryBuilder


class SynapseTableQueryBuilder(TableQueryBuilder):
    """
    Query builder for Azure Synapse dedicated SQL pools.

    Example:
        >>> qb = SynapseTableQueryBuilder()
        >>> qb.get_rename_table_command("schemaA", "t", "t2")
        'RENAME OBJECT [schemaA].[t] TO [t2]'
    """

    dialect = SynapseDialect()

    def get_create_table_command(
        self,
        schema_name: str,
        table_name: str,
        columns: ColumnCollection,
        primary_keys: Sequence[str] = (),
        table_distribution: Optional[TableDistribution] = None,
        table_index: Optional[TableIndex] = None,
    ) -> str:
        """
        Build CREATE TABLE.

        The ``WITH`` clause is emitted only when a distribution or an index is
        given; otherwise the server defaults apply.
        """
        self._validate_create(schema_name, table_name, columns, primary_keys)
        if self.dialect.is_temporary_table_name(table_name):
            raise QueryBuilderException(
                f"Table name {table_name} starting with # is reserved for temporary tables",
                ErrorCode.INVALID_IDENTIFIER,
            )
        self._validate_storage(columns, table_distribution, table_index)
        self._log_create(schema_name, table_name, columns, primary_keys)

        columns_sql = self._columns_sql(columns)
        if primary_keys:
            columns_sql += (
                f", PRIMARY KEY NONCLUSTERED({self._quote_list(primary_keys)}) NOT ENFORCED"
            )
        sql = f"CREATE TABLE {self._qualified(schema_name, table_name)} ({columns_sql})"

        options = self._storage_options(table_distribution, table_index)
        if options:
            sql += f" WITH ({', '.join(options)})"
        return sql

    def get_create_temp_table_command(
        self, schema_name: str, table_name: str, columns: ColumnCollection
    ) -> str:
        self._validate_create(schema_name, table_name, columns)
        if not self.dialect.is_temporary_table_name(table_name):
            raise QueryBuilderException(
                f"Temporary table name {table_name} must start with #",
                ErrorCode.INVALID_IDENTIFIER,
            )
        self._log_create(schema_name, table_name, columns, temporary=True)
        return (
            f"CREATE TABLE {self._qualified(schema_name, table_name)} "
            f"({self._columns_sql(columns)}) WITH (HEAP, LOCATION = USER_DB)"
        )

    def get_create_table_command_from_definition(
        self, definition: TableDefinition, define_primary_keys: bool = False
    ) -> str:
        if definition.is_temporary or not isinstance(definition, SynapseTableDefinition):
            return super().get_create_table_command_from_definition(
                definition, define_primary_keys
            )
        return self.get_create_table_command(
            definition.schema_name,
            definition.table_name,
            definition.columns,
            self._definition_primary_keys(definition, define_primary_keys),
            definition.table_distribution,
            definition.table_index,
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
            f"RENAME OBJECT {self._qualified(schema_name, table_name)} "
            f"TO {self.dialect.quote(new_table_name)}"
        )

    # ==================== Storage clause ====================

    def _validate_storage(
        self,
        columns: ColumnCollection,
        table_distribution: Optional[TableDistribution],
        table_index: Optional[TableIndex],
    ) -> None:
        referenced: List[str] = []
        if table_distribution is not None:
            referenced += table_distribution.distribution_columns_names
        if table_index is not None:
            referenced += table_index.indexed_columns_names
        for name in referenced:
            self.dialect.validate_identifier(name, "column")
            if name not in columns:
                raise QueryBuilderException(
                    f"Column {name} used in table distribution or index is not present in columns",
                    ErrorCode.INVALID_IDENTIFIER,
                )

    def _storage_options(
        self,
        table_distribution: Optional[TableDistribution],
        table_index: Optional[TableIndex],
    ) -> List[str]:
        options = []
        if table_index is not None:
            index_sql = table_index.index_type
            if table_index.index_type == TableIndex.CLUSTERED_INDEX:
                index_sql += f"({self._quote_list(table_index.indexed_columns_names)})"
            options.append(index_sql)
        if table_distribution is not None:
            distribution_sql = f"DISTRIBUTION = {table_distribution.distribution_name}"
            if table_distribution.is_hash_distribution():
                distribution_sql += (
                    f"({self._quote_list(table_distribution.distribution_columns_names)})"
                )
            options.append(distribution_sql)
        return options
