"""Teradata table reflection over the ``DBC`` dictionary views."""

from typing import Any, Dict, List, Optional

from ...column import Column
from ...datatype import Teradata
from ...exceptions import ErrorCode, ReflectionException
from ...sql.dialects import TeradataDialect
from ...utils.rows import row_value, to_bool, to_int, to_str
from .base import TableReflection

# DBC.ColumnsV.ColumnType codes
COLUMN_TYPES = {
    "CV": "VARCHAR",
    "CF": "CHAR",
    "CO": "CLOB",
    "I1": "BYTEINT",
    "I2": "SMALLINT",
    "I": "INTEGER",
    "I8": "BIGINT",
    "D": "DECIMAL",
    "F": "FLOAT",
    "N": "NUMBER",
    "DA": "DATE",
    "AT": "TIME",
    "TS": "TIMESTAMP",
    "TZ": "TIME WITH TIME ZONE",
    "SZ": "TIMESTAMP WITH TIME ZONE",
    "BF": "BYTE",
    "BV": "VARBYTE",
    "BO": "BLOB",
}

CHARACTER_CODES = ("CV", "CF", "CO")
BYTE_CODES = ("BF", "BV")
CHARACTER_SETS = {1: "LATIN", 2: "UNICODE"}
UNICODE_CHAR_TYPE = 2


class TeradataTableReflection(TableReflection):
    """
    Reads permanent Teradata tables.

    Volatile tables are not recorded in the data dictionary and cannot be
    reflected.
    """

    dialect = TeradataDialect()

    def get_object_id(self) -> str:
        rows = self._fetch(
            'SELECT t."TVMId" AS "object_id" '
            'FROM "DBC"."TVM" t '
            'JOIN "DBC"."Dbase" d ON d."DatabaseId" = t."DatabaseId" '
            f'WHERE d."DatabaseName" = {self._literal(self.schema_name)} '
            f'AND t."TVMName" = {self._literal(self.table_name)}'
        )
        if not rows:
            raise self._table_not_exists()
        return to_str(row_value(rows[0], "object_id"))

    def _fetch_columns(self, object_id: str) -> List[Column]:
        rows = self._fetch(
            'SELECT "ColumnName", "ColumnType", "ColumnLength", "DecimalTotalDigits", '
            '"DecimalFractionalDigits", "Nullable", "DefaultValue", "CharType" '
            'FROM "DBC"."ColumnsV" '
            f'WHERE "DatabaseName" = {self._literal(self.schema_name)} '
            f'AND "TableName" = {self._literal(self.table_name)} '
            'ORDER BY "ColumnId"'
        )
        return [self._column_from_row(row) for row in rows]

    def _fetch_primary_keys(self, object_id: str) -> List[str]:
        # K is a primary key that is not the primary index; when the key is
        # also the primary index it is recorded as a unique P/Q index.
        rows = self._fetch(
            'SELECT "ColumnName" '
            'FROM "DBC"."IndicesV" '
            f'WHERE "DatabaseName" = {self._literal(self.schema_name)} '
            f'AND "TableName" = {self._literal(self.table_name)} '
            "AND \"IndexType\" IN ('K', 'P', 'Q') AND \"UniqueFlag\" = 'Y' "
            'ORDER BY "ColumnPosition"'
        )
        return [to_str(row_value(row, "ColumnName")) for row in rows]

    def _column_from_row(self, row: Dict[str, Any]) -> Column:
        code = to_str(row_value(row, "ColumnType"))
        try:
            type_name = COLUMN_TYPES[code]
        except KeyError:
            raise ReflectionException(
                f'Unsupported column type code "{code}" in table '
                f'"{self.schema_name}.{self.table_name}"',
                ErrorCode.INVALID_TYPE,
            ) from None
        char_type = to_int(row_value(row, "CharType"))
        character_set = CHARACTER_SETS.get(char_type) if code in CHARACTER_CODES else None
        default = row_value(row, "DefaultValue")
        return Column(
            to_str(row_value(row, "ColumnName")),
            Teradata(
                type_name,
                length=self._length_from_row(code, char_type, row),
                nullable=to_bool(row_value(row, "Nullable")),
                default=to_str(default) if default is not None else None,
                character_set=character_set,
            ),
        )

    @staticmethod
    def _length_from_row(code: str, char_type: Optional[int], row: Dict[str, Any]) -> Optional[str]:
        if code in CHARACTER_CODES:
            length = to_int(row_value(row, "ColumnLength"))
            # ColumnLength is in bytes; UNICODE stores two bytes per character
            if char_type == UNICODE_CHAR_TYPE:
                length //= 2
            return str(length)
        if code in BYTE_CODES:
            return str(to_int(row_value(row, "ColumnLength")))
        if code == "D":
            total = to_int(row_value(row, "DecimalTotalDigits"))
            fractional = to_int(row_value(row, "DecimalFractionalDigits"))
            return f"{total},{fractional}"
        return None
