"""Exasol table reflection over the ``SYS.EXA_ALL_*`` system tables."""

import re
from typing import Any, Dict, List, Optional, Tuple

from ...column import Column
from ...datatype import Exasol
from ...sql.dialects import ExasolDialect
from ...utils.rows import row_value, to_bool, to_str
from .base import TableReflection

# e.g. "VARCHAR(2000000) UTF8", "DECIMAL(18,0)", "TIMESTAMP(3)", "BOOLEAN"
COLUMN_TYPE_PATTERN = re.compile(
    r"^(?P<type>[A-Z][A-Z0-9 ]*?)\s*(?:\((?P<length>[^)]*)\))?(?:\s+(?:UTF8|ASCII))?$"
)
LENGTH_PARAMETERS_PATTERN = re.compile(r"\([^)]*\)")
# HASHTYPE sizes are reported with a unit, e.g. "HASHTYPE(16 BYTE)"
SIZED_LENGTH_PATTERN = re.compile(r"^(?P<size>\d+) (?P<unit>BYTE|BIT)$")


def parse_column_type(column_type: str) -> Tuple[str, Optional[str]]:
    """
    Split an Exasol ``COLUMN_TYPE`` into type name and length.

    Example:
        >>> parse_column_type("VARCHAR(2000000) UTF8")
        ('VARCHAR', '2000000')
        >>> parse_column_type("INTERVAL DAY(2) TO SECOND(3)")
        ('INTERVAL DAY TO SECOND', None)
        >>> parse_column_type("HASHTYPE(16 BYTE)")
        ('HASHTYPE', '16')
    """
    normalized = " ".join(column_type.split()).upper()
    match = COLUMN_TYPE_PATTERN.match(normalized)
    if match:
        return match.group("type"), _byte_length(match.group("length"))
    return " ".join(LENGTH_PARAMETERS_PATTERN.sub("", normalized).split()), None


def _byte_length(length: Optional[str]) -> Optional[str]:
    if length is None:
        return None
    sized = SIZED_LENGTH_PATTERN.match(length)
    if not sized:
        return length
    size = int(sized.group("size"))
    if sized.group("unit") == "BIT":
        size //= 8
    return str(size)


class ExasolTableReflection(TableReflection):
    """Reads Exasol tables."""

    dialect = ExasolDialect()

    def get_object_id(self) -> str:
        rows = self._fetch(
            'SELECT "TABLE_OBJECT_ID" FROM "SYS"."EXA_ALL_TABLES" '
            f'WHERE "TABLE_SCHEMA" = {self._literal(self.schema_name)} '
            f'AND "TABLE_NAME" = {self._literal(self.table_name)}'
        )
        if not rows:
            raise self._table_not_exists()
        return to_str(row_value(rows[0], "TABLE_OBJECT_ID"))

    def _fetch_columns(self, object_id: str) -> List[Column]:
        rows = self._fetch(
            'SELECT "COLUMN_NAME", "COLUMN_TYPE", "COLUMN_IS_NULLABLE", "COLUMN_DEFAULT" '
            'FROM "SYS"."EXA_ALL_COLUMNS" '
            f'WHERE "COLUMN_SCHEMA" = {self._literal(self.schema_name)} '
            f'AND "COLUMN_TABLE" = {self._literal(self.table_name)} '
            'ORDER BY "COLUMN_ORDINAL_POSITION"'
        )
        return [self._column_from_row(row) for row in rows]

    def _fetch_primary_keys(self, object_id: str) -> List[str]:
        rows = self._fetch(
            'SELECT "COLUMN_NAME" FROM "SYS"."EXA_ALL_CONSTRAINT_COLUMNS" '
            f'WHERE "CONSTRAINT_SCHEMA" = {self._literal(self.schema_name)} '
            f'AND "CONSTRAINT_TABLE" = {self._literal(self.table_name)} '
            "AND \"CONSTRAINT_TYPE\" = 'PRIMARY KEY' "
            'ORDER BY "ORDINAL_POSITION"'
        )
        return [to_str(row_value(row, "COLUMN_NAME")) for row in rows]

    @staticmethod
    def _column_from_row(row: Dict[str, Any]) -> Column:
        type_name, length = parse_column_type(to_str(row_value(row, "COLUMN_TYPE")))
        default = row_value(row, "COLUMN_DEFAULT")
        return Column(
            to_str(row_value(row, "COLUMN_NAME")),
            Exasol(
                type_name,
                length=length,
                nullable=to_bool(row_value(row, "COLUMN_IS_NULLABLE")),
                default=str(default) if default is not None else None,
            ),
        )
