"""
Base datatype definition.

A definition is the dialect-specific half of a column: type name, optional
length (``"4000"``, ``"10,5"`` or ``"MAX"``), nullability and a default value.
Defaults are raw SQL expressions (``"''"``, ``"0"``, ``"CURRENT_TIMESTAMP"``)
and are emitted verbatim.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, FrozenSet, Optional

from ..exceptions import InvalidTypeException
from ..sql.dialects.base import Dialect

LENGTH_PATTERN = re.compile(r"^(\d+(,\d+)?|MAX)$", re.IGNORECASE)


@dataclass(frozen=True)
class Definition:
    """Dialect-specific column type."""

    type: str
    length: Optional[str] = None
    nullable: bool = True
    default: Optional[str] = None

    dialect: ClassVar[Dialect]
    TYPES: ClassVar[FrozenSet[str]] = frozenset()

    def __post_init__(self) -> None:
        normalized = " ".join(self.type.split()).upper()
        if normalized not in self.TYPES:
            raise InvalidTypeException(
                f'"{self.type}" is not a valid type for {self.dialect.value}'
            )
        object.__setattr__(self, "type", normalized)

        if self.length is not None:
            length = str(self.length).replace(" ", "")
            if length == "":
                length = None
            elif not LENGTH_PATTERN.match(length):
                raise InvalidTypeException(
                    f'"{self.length}" is not valid length for type {normalized}'
                )
            object.__setattr__(self, "length", length)

    def is_nullable(self) -> bool:
        return self.nullable

    def sql_definition(self) -> str:
        """Render the type fragment used in column DDL and for comparison."""
        raise NotImplementedError

    def _not_null(self) -> str:
        return "" if self.nullable else " NOT NULL"

    def _default(self) -> str:
        return "" if self.default is None else f" DEFAULT {self.default}"

    def __str__(self) -> str:
        return self.sql_definition()
