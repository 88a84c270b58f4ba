"""Teradata datatype definition."""

from dataclasses import dataclass
from typing import Optional

from ..exceptions import InvalidTypeException
from ..sql.dialects.base import Dialect
from .base import Definition

CHARACTER_TYPES = frozenset({"CHAR", "CHARACTER", "VARCHAR", "CLOB"})

TERADATA_TYPES = frozenset(
    {
        "BYTEINT", "SMALLINT", "INTEGER", "BIGINT",
        "DECIMAL", "NUMERIC", "NUMBER", "FLOAT", "REAL", "DOUBLE PRECISION",
        "DATE", "TIME", "TIMESTAMP", "TIME WITH TIME ZONE", "TIMESTAMP WITH TIME ZONE",
        "BYTE", "VARBYTE", "BLOB",
    }
    | CHARACTER_TYPES
)

CHARACTER_SETS = frozenset({"LATIN", "UNICODE"})


@dataclass(frozen=True)
class Teradata(Definition):
    """
    Teradata column type.

    Renders as ``TYPE[ (length)][ NOT NULL][ DEFAULT x][ CHARACTER SET cs]``;
    character types get ``CHARACTER SET UNICODE`` unless another set is given.
    """

    character_set: Optional[str] = None

    dialect = Dialect.TERADATA
    TYPES = TERADATA_TYPES

    TYPE_INTEGER = "INTEGER"
    TYPE_BIGINT = "BIGINT"
    TYPE_DECIMAL = "DECIMAL"
    TYPE_VARCHAR = "VARCHAR"
    TYPE_TIMESTAMP = "TIMESTAMP"
    TYPE_DATE = "DATE"

    MAX_VARCHAR_LENGTH = 32000

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.type not in CHARACTER_TYPES:
            if self.character_set is not None:
                raise InvalidTypeException(
                    f"Character set is not allowed for type {self.type}"
                )
            return
        character_set = (self.character_set or "UNICODE").upper()
        if character_set not in CHARACTER_SETS:
            raise InvalidTypeException(f'"{self.character_set}" is not a valid character set')
        object.__setattr__(self, "character_set", character_set)

    def sql_definition(self) -> str:
        definition = self.type
        if self.length:
            definition += f" ({self.length})"
        definition += self._not_null() + self._default()
        if self.character_set:
            definition += f" CHARACTER SET {self.character_set}"
        return definition
