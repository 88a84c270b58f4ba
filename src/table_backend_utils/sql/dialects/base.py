"""
Base SQL dialect.

A dialect bundles the lexical rules of one warehouse engine: identifier and
literal quoting, the allowed-character rule for object names and the
maximum number of columns a table may have.
"""

import re
from enum import Enum
from typing import Optional

from ...exceptions import QueryBuilderException
from ..core.identifier import qualify_table, quote_identifier, quote_literal


class Dialect(str, Enum):
    """Supported warehouse dialects."""

    SYNAPSE = "synapse"
    TERADATA = "teradata"
    EXASOL = "exasol"
    SNOWFLAKE = "snowflake"


class SqlDialect:
    """Shared implementation of the per-dialect lexical rules."""

    name: Dialect
    max_columns: Optional[int] = None

    IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")

    def quote(self, identifier: str) -> str:
        """Quote an identifier using the dialect's quote characters."""
        return quote_identifier(identifier, dialect=self.name)

    def quote_literal(self, value: str) -> str:
        """Quote a string literal."""
        return quote_literal(value, dialect=self.name)

    def qualify(self, table: str, schema: Optional[str] = None) -> str:
        """Create a fully qualified table reference."""
        return qualify_table(table, schema, dialect=self.name)

    def is_valid_identifier(self, name: str, kind: str = "table") -> bool:
        return bool(self.IDENTIFIER_PATTERN.match(name))

    def validate_identifier(self, name: str, kind: str = "table") -> None:
        """
        Check an object name against the dialect's allowed-character rule.

        Args:
            name: Object name to check
            kind: Object kind used in the error message ("table", "schema", "column")

        Raises:
            QueryBuilderException: invalidIdentifier when the name is rejected
        """
        if not self.is_valid_identifier(name, kind):
            raise QueryBuilderException.invalid_identifier(kind, name)
