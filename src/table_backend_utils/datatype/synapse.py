"""Synapse datatype definition."""

from dataclasses import dataclass

from ..sql.dialects.base import Dialect
from .base import Definition

SYNAPSE_TYPES = frozenset(
    {
        "BIGINT", "INT", "SMALLINT", "TINYINT", "BIT",
        "DECIMAL", "NUMERIC", "MONEY", "SMALLMONEY", "FLOAT", "REAL",
        "DATE", "TIME", "DATETIME", "DATETIME2", "DATETIMEOFFSET", "SMALLDATETIME",
        "CHAR", "VARCHAR", "NCHAR", "NVARCHAR",
        "BINARY", "VARBINARY", "UNIQUEIDENTIFIER",
    }
)


@dataclass(frozen=True)
class Synapse(Definition):
    """
    Synapse column type.

    Renders as ``TYPE[(length)][ NOT NULL][ DEFAULT x]``, e.g.
    ``NVARCHAR(4000) NOT NULL DEFAULT ''``.
    """

    dialect = Dialect.SYNAPSE
    TYPES = SYNAPSE_TYPES

    TYPE_INT = "INT"
    TYPE_BIGINT = "BIGINT"
    TYPE_NUMERIC = "NUMERIC"
    TYPE_DECIMAL = "DECIMAL"
    TYPE_NVARCHAR = "NVARCHAR"
    TYPE_VARCHAR = "VARCHAR"
    TYPE_DATETIME2 = "DATETIME2"
    TYPE_DATE = "DATE"

    MAX_NVARCHAR_LENGTH = 4000

    def sql_definition(self) -> str:
        definition = self.type
        if self.length:
            definition += f"({self.length})"
        return definition + self._not_null() + self._default()
