"""Snowflake datatype definition."""

from dataclasses import dataclass

from ..sql.dialects.base import Dialect
from .base import Definition

SNOWFLAKE_TYPES = frozenset(
    {
        "NUMBER", "DECIMAL", "NUMERIC", "INT", "INTEGER", "BIGINT", "SMALLINT",
        "TINYINT", "BYTEINT",
        "FLOAT", "FLOAT4", "FLOAT8", "DOUBLE", "DOUBLE PRECISION", "REAL",
        "VARCHAR", "CHAR", "CHARACTER", "STRING", "TEXT", "BINARY", "VARBINARY",
        "BOOLEAN",
        "DATE", "DATETIME", "TIME", "TIMESTAMP", "TIMESTAMP_LTZ", "TIMESTAMP_NTZ",
        "TIMESTAMP_TZ",
        "VARIANT", "OBJECT", "ARRAY", "GEOGRAPHY", "GEOMETRY",
    }
)


@dataclass(frozen=True)
class Snowflake(Definition):
    """Snowflake column type, rendered as ``TYPE[(length)][ NOT NULL][ DEFAULT x]``."""

    dialect = Dialect.SNOWFLAKE
    TYPES = SNOWFLAKE_TYPES

    TYPE_NUMBER = "NUMBER"
    TYPE_VARCHAR = "VARCHAR"
    TYPE_BOOLEAN = "BOOLEAN"
    TYPE_TIMESTAMP_NTZ = "TIMESTAMP_NTZ"
    TYPE_DATE = "DATE"

    def sql_definition(self) -> str:
        definition = self.type
        if self.length:
            definition += f"({self.length})"
        return definition + self._not_null() + self._default()
