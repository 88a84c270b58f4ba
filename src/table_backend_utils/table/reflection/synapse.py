"""
Synapse table reflection over the ``sys`` catalog views.

Session temporary tables (``#name``) live in ``tempdb``; their catalog rows
are read from ``tempdb.sys.*`` instead of the current database.
"""

from typing import Any, Dict, List, Optional

from ...column import Column, ColumnCollection
from ...datatype import Synapse
from ...exceptions import ErrorCode, ReflectionException
from ...sql.dialects import SynapseDialect
from ...utils.rows import row_value, to_bool, to_int, to_str
from ..definition import SynapseTableDefinition, TableDistribution, TableIndex
from .base import TableReflection

BYTE_LENGTH_TYPES = ("CHAR", "VARCHAR", "BINARY", "VARBINARY")
DOUBLE_BYTE_LENGTH_TYPES = ("NCHAR", "NVARCHAR")
PRECISION_SCALE_TYPES = ("DECIMAL", "NUMERIC")
FRACTIONAL_SECONDS_TYPES = ("DATETIME2", "TIME", "DATETIMEOFFSET")
DEFAULT_FRACTIONAL_SECONDS = 7

INDEX_TYPES = {
    "HEAP": TableIndex.HEAP,
    "CLUSTERED COLUMNSTORE": TableIndex.CLUSTERED_COLUMNSTORE_INDEX,
    "CLUSTERED": TableIndex.CLUSTERED_INDEX,
}


def strip_default_parentheses(value: str) -> str:
    """
    Remove the parentheses SQL Server wraps around stored defaults.

    Example:
        >>> strip_default_parentheses("((0))")
        '0'
        >>> strip_default_parentheses("(getdate())")
        'getdate()'
    """
    while value.startswith("(") and value.endswith(")") and _outer_pair(value):
        value = value[1:-1]
    return value


def _outer_pair(value: str) -> bool:
    depth = 0
    for position, char in enumerate(value):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return position == len(value) - 1
    return False


class SynapseTableReflection(TableReflection):
    """Reads Synapse tables, including distribution and index metadata."""

    dialect = SynapseDialect()

    def is_temporary(self) -> bool:
        return self.dialect.is_temporary_table_name(self.table_name)

    def get_object_id(self) -> str:
        if self.is_temporary():
            name = f"tempdb..{self.dialect.quote(self.table_name)}"
        else:
            name = self._qualified()
        rows = self._fetch(f"SELECT OBJECT_ID(N{self._literal(name)}) AS [object_id]")
        object_id = to_str(row_value(rows[0], "object_id")) if rows else None
        if not object_id:
            raise self._table_not_exists()
        return object_id

    def get_table_distribution(self) -> TableDistribution:
        return self._fetch_distribution(self.get_object_id())

    def get_table_index(self) -> TableIndex:
        return self._fetch_index(self.get_object_id())

    def get_rows_count(self) -> int:
        rows = self._fetch(f"SELECT COUNT_BIG(*) AS [count] FROM {self._qualified()}")
        return to_int(row_value(rows[0], "count")) or 0

    # ==================== Catalog queries ====================

    def _catalog(self) -> str:
        return "tempdb.sys" if self.is_temporary() else "sys"

    def _fetch_columns(self, object_id: str) -> List[Column]:
        catalog = self._catalog()
        rows = self._fetch(
            "SELECT c.[name] AS [column_name], t.[name] AS [type_name], "
            "c.[max_length], c.[precision], c.[scale], c.[is_nullable], "
            "dc.[definition] AS [default_value] "
            f"FROM {catalog}.columns c "
            f"JOIN {catalog}.types t ON c.[user_type_id] = t.[user_type_id] "
            f"LEFT JOIN {catalog}.default_constraints dc "
            "ON dc.[object_id] = c.[default_object_id] "
            f"WHERE c.[object_id] = {int(object_id)} "
            "ORDER BY c.[column_id]"
        )
        return [self._column_from_row(row) for row in rows]

    def _fetch_primary_keys(self, object_id: str) -> List[str]:
        catalog = self._catalog()
        rows = self._fetch(
            "SELECT c.[name] AS [column_name] "
            f"FROM {catalog}.indexes i "
            f"JOIN {catalog}.index_columns ic "
            "ON ic.[object_id] = i.[object_id] AND ic.[index_id] = i.[index_id] "
            f"JOIN {catalog}.columns c "
            "ON c.[object_id] = ic.[object_id] AND c.[column_id] = ic.[column_id] "
            f"WHERE i.[object_id] = {int(object_id)} AND i.[is_primary_key] = 1 "
            "ORDER BY ic.[key_ordinal]"
        )
        return [to_str(row_value(row, "column_name")) for row in rows]

    def _fetch_distribution(self, object_id: str) -> TableDistribution:
        catalog = self._catalog()
        rows = self._fetch(
            "SELECT dp.[distribution_policy_desc] AS [distribution_name], "
            "c.[name] AS [column_name] "
            f"FROM {catalog}.pdw_table_distribution_properties dp "
            f"LEFT JOIN {catalog}.pdw_column_distribution_properties cdp "
            "ON cdp.[object_id] = dp.[object_id] AND cdp.[distribution_ordinal] = 1 "
            f"LEFT JOIN {catalog}.columns c "
            "ON c.[object_id] = cdp.[object_id] AND c.[column_id] = cdp.[column_id] "
            f"WHERE dp.[object_id] = {int(object_id)}"
        )
        if not rows:
            return TableDistribution()
        name = to_str(row_value(rows[0], "distribution_name")).upper()
        columns = [
            to_str(row_value(row, "column_name"))
            for row in rows
            if row_value(row, "column_name") is not None
        ]
        if name != TableDistribution.HASH:
            columns = []
        return TableDistribution(name, columns)

    def _fetch_index(self, object_id: str) -> TableIndex:
        catalog = self._catalog()
        rows = self._fetch(
            "SELECT i.[type_desc] AS [index_type], c.[name] AS [column_name] "
            f"FROM {catalog}.indexes i "
            f"LEFT JOIN {catalog}.index_columns ic "
            "ON ic.[object_id] = i.[object_id] AND ic.[index_id] = i.[index_id] "
            "AND ic.[key_ordinal] > 0 "
            f"LEFT JOIN {catalog}.columns c "
            "ON c.[object_id] = ic.[object_id] AND c.[column_id] = ic.[column_id] "
            f"WHERE i.[object_id] = {int(object_id)} AND i.[index_id] IN (0, 1) "
            "ORDER BY ic.[key_ordinal]"
        )
        if not rows:
            return TableIndex()
        type_desc = to_str(row_value(rows[0], "index_type")).upper()
        try:
            index_type = INDEX_TYPES[type_desc]
        except KeyError:
            raise ReflectionException(
                f'Unknown index type "{type_desc}" of table "{self.schema_name}.{self.table_name}"',
                ErrorCode.INVALID_TABLE_INDEX,
            ) from None
        columns: List[str] = []
        if index_type == TableIndex.CLUSTERED_INDEX:
            columns = [
                to_str(row_value(row, "column_name"))
                for row in rows
                if row_value(row, "column_name") is not None
            ]
        return TableIndex(index_type, columns)

    def _build_definition(
        self, object_id: str, columns: ColumnCollection, primary_keys: List[str]
    ) -> SynapseTableDefinition:
        return SynapseTableDefinition(
            self.schema_name,
            self.table_name,
            self.is_temporary(),
            columns,
            primary_keys,
            self._fetch_distribution(object_id),
            self._fetch_index(object_id),
            validate_nullable=False,
        )

    # ==================== Row mapping ====================

    def _column_from_row(self, row: Dict[str, Any]) -> Column:
        type_name = to_str(row_value(row, "type_name")).upper()
        default = row_value(row, "default_value")
        return Column(
            to_str(row_value(row, "column_name")),
            Synapse(
                type_name,
                length=self._length_from_row(type_name, row),
                nullable=to_bool(row_value(row, "is_nullable")),
                default=strip_default_parentheses(str(default)) if default is not None else None,
            ),
        )

    @staticmethod
    def _length_from_row(type_name: str, row: Dict[str, Any]) -> Optional[str]:
        if type_name in BYTE_LENGTH_TYPES or type_name in DOUBLE_BYTE_LENGTH_TYPES:
            max_length = to_int(row_value(row, "max_length"))
            if max_length == -1:
                return "MAX"
            if type_name in DOUBLE_BYTE_LENGTH_TYPES:
                max_length //= 2
            return str(max_length)
        if type_name in PRECISION_SCALE_TYPES:
            return f"{to_int(row_value(row, 'precision'))},{to_int(row_value(row, 'scale'))}"
        if type_name in FRACTIONAL_SECONDS_TYPES:
            scale = to_int(row_value(row, "scale"))
            if scale is not None and scale != DEFAULT_FRACTIONAL_SECONDS:
                return str(scale)
        return None
