"""Exasol datatype definition."""

from dataclasses import dataclass

from ..sql.dialects.base import Dialect
from .base import Definition

EXASOL_TYPES = frozenset(
    {
        "BOOLEAN", "BOOL",
        "CHAR", "CHARACTER", "NCHAR", "VARCHAR", "VARCHAR2", "NVARCHAR", "NVARCHAR2",
        "CHAR VARYING", "CHARACTER VARYING", "CLOB", "LONG VARCHAR",
        "DECIMAL", "DEC", "NUMERIC", "NUMBER", "INT", "INTEGER", "BIGINT",
        "SMALLINT", "TINYINT", "SHORTINT",
        "DOUBLE", "DOUBLE PRECISION", "FLOAT", "REAL",
        "DATE", "TIMESTAMP", "TIMESTAMP WITH LOCAL TIME ZONE",
        "INTERVAL YEAR TO MONTH", "INTERVAL DAY TO SECOND",
        "GEOMETRY", "HASHTYPE",
    }
)


@dataclass(frozen=True)
class Exasol(Definition):
    """
    Exasol column type.

    Exasol expects the default before the column constraint, so this renders
    as ``TYPE[ (length)][ DEFAULT x][ NOT NULL]``.
    """

    dialect = Dialect.EXASOL
    TYPES = EXASOL_TYPES

    TYPE_VARCHAR = "VARCHAR"
    TYPE_DECIMAL = "DECIMAL"
    TYPE_BOOLEAN = "BOOLEAN"
    TYPE_TIMESTAMP = "TIMESTAMP"
    TYPE_DATE = "DATE"

    MAX_VARCHAR_LENGTH = 2000000

    def sql_definition(self) -> str:
        definition = self.type
        if self.length:
            definition += f" ({self.length})"
        return definition + self._default() + self._not_null()
