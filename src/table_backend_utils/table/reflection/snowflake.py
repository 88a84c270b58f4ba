"""Snowflake table reflection using ``SHOW`` and ``DESC`` commands."""

import re
from typing import Any, Dict, List

from ...column import Column
from ...datatype import Snowflake
from ...sql.dialects import SnowflakeDialect
from ...utils.rows import row_value, to_int, to_str
from .base import TableReflection

DESC_TYPE_PATTERN = re.compile(r"^(?P<type>[A-Z_0-9]+)(?:\((?P<length>[^)]*)\))?$")
TEMPORARY_KIND = "TEMPORARY"


class SnowflakeTableReflection(TableReflection):
    """
    Reads Snowflake tables.

    Snowflake exposes no numeric object id; the fully qualified name
    ``database.schema.table`` reported by ``SHOW TABLES`` is used instead.
    """

    dialect = SnowflakeDialect()

    def get_object_id(self) -> str:
        row = self._show_table()
        return ".".join(
            to_str(row_value(row, key)) for key in ("database_name", "schema_name", "name")
        )

    def is_temporary(self) -> bool:
        return (to_str(row_value(self._show_table(), "kind")) or "").upper() == TEMPORARY_KIND

    def _show_table(self) -> Dict[str, Any]:
        # LIKE is case-insensitive and treats "_" as a wildcard
        rows = self._fetch(
            f"SHOW TABLES LIKE {self._literal(self.table_name)} "
            f"IN SCHEMA {self.dialect.quote(self.schema_name)}"
        )
        for row in rows:
            if row_value(row, "name") == self.table_name:
                return row
        raise self._table_not_exists()

    def _fetch_columns(self, object_id: str) -> List[Column]:
        rows = self._fetch(f"DESC TABLE {self._qualified()}")
        return [
            self._column_from_row(row)
            for row in rows
            if (to_str(row_value(row, "kind")) or "COLUMN").upper() == "COLUMN"
        ]

    def _fetch_primary_keys(self, object_id: str) -> List[str]:
        rows = self._fetch(f"SHOW PRIMARY KEYS IN TABLE {self._qualified()}")
        rows = sorted(rows, key=lambda row: to_int(row_value(row, "key_sequence")))
        return [row_value(row, "column_name") for row in rows]

    @staticmethod
    def _column_from_row(row: Dict[str, Any]) -> Column:
        desc_type = " ".join(to_str(row_value(row, "type")).split()).upper()
        match = DESC_TYPE_PATTERN.match(desc_type)
        type_name, length = (match.group("type"), match.group("length")) if match else (desc_type, None)
        default = row_value(row, "default")
        return Column(
            row_value(row, "name"),
            Snowflake(
                type_name,
                length=length,
                nullable=(to_str(row_value(row, "null?")) or "Y").upper() == "Y",
                default=str(default) if default is not None else None,
            ),
        )
