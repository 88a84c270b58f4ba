"""
Column: a name paired with a dialect-specific datatype definition.

The name is not validated here. Helper columns may carry names that are
never emitted as identifiers; query builders validate names at the point
they are written into SQL.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple, Type, Union

from ..datatype import Definition, Exasol, Snowflake, Synapse, Teradata
from ..sql.dialects import Dialect, get_sql_dialect

GENERIC_DEFINITIONS: Dict[Dialect, Tuple[Type[Definition], Dict[str, Any]]] = {
    Dialect.SYNAPSE: (
        Synapse,
        {
            "type": Synapse.TYPE_NVARCHAR,
            "length": str(Synapse.MAX_NVARCHAR_LENGTH),
            "nullable": False,
            "default": "''",
        },
    ),
    Dialect.TERADATA: (
        Teradata,
        {
            "type": Teradata.TYPE_VARCHAR,
            "length": str(Teradata.MAX_VARCHAR_LENGTH),
            "nullable": False,
            "default": "''",
        },
    ),
    Dialect.EXASOL: (
        Exasol,
        {
            "type": Exasol.TYPE_VARCHAR,
            "length": str(Exasol.MAX_VARCHAR_LENGTH),
            "nullable": False,
            "default": "''",
        },
    ),
    Dialect.SNOWFLAKE: (
        Snowflake,
        {"type": Snowflake.TYPE_VARCHAR, "nullable": False, "default": "''"},
    ),
}


@dataclass(frozen=True)
class Column:
    """
    A table column.

    Attributes:
        name: Column name
        definition: Dialect-specific type definition
    """

    name: str
    definition: Definition

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Column name must not be empty")

    @property
    def dialect(self) -> Dialect:
        return self.definition.dialect

    @property
    def sql_definition(self) -> str:
        """Canonical type string, used for comparing columns."""
        return self.definition.sql_definition()

    def is_nullable(self) -> bool:
        return self.definition.is_nullable()

    def get_column_name(self) -> str:
        return self.name

    def get_column_definition(self) -> Definition:
        return self.definition

    def canonical(self) -> Tuple[str, str]:
        """``(name, sql_definition)`` pair used for equality of column sets."""
        return self.name, self.sql_definition

    def to_sql(self) -> str:
        """Render the column DDL fragment, e.g. ``[c1] NVARCHAR(4000) NOT NULL DEFAULT ''``."""
        return f"{get_sql_dialect(self.dialect).quote(self.name)} {self.sql_definition}"

    @classmethod
    def create_generic_column(cls, name: str, dialect: Union[str, Dialect]) -> "Column":
        """
        Create a large text column with a not-null empty-string default.

        Used for staging and helper columns where exact typing does not matter.
        """
        sql_dialect = get_sql_dialect(dialect)
        definition_class, options = GENERIC_DEFINITIONS[sql_dialect.name]
        return cls(name, definition_class(**options))


class SynapseColumn(Column):
    """Synapse column with a dialect-bound generic constructor."""

    @classmethod
    def create_generic_column(  # type: ignore[override]
        cls, name: str, dialect: Union[str, Dialect] = Dialect.SYNAPSE
    ) -> "Column":
        return super().create_generic_column(name, dialect)


class TeradataColumn(Column):
    """Teradata column with a dialect-bound generic constructor."""

    @classmethod
    def create_generic_column(  # type: ignore[override]
        cls, name: str, dialect: Union[str, Dialect] = Dialect.TERADATA
    ) -> "Column":
        return super().create_generic_column(name, dialect)


class ExasolColumn(Column):
    """Exasol column with a dialect-bound generic constructor."""

    @classmethod
    def create_generic_column(  # type: ignore[override]
        cls, name: str, dialect: Union[str, Dialect] = Dialect.EXASOL
    ) -> "Column":
        return super().create_generic_column(name, dialect)


class SnowflakeColumn(Column):
    """Snowflake column with a dialect-bound generic constructor."""

    @classmethod
    def create_generic_column(  # type: ignore[override]
        cls, name: str, dialect: Union[str, Dialect] = Dialect.SNOWFLAKE
    ) -> "Column":
        return super().create_generic_column(name, dialect)
