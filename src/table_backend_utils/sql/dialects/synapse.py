"""
Azure Synapse (dedicated SQL pool) dialect.

Identifiers are bracketed. Table names may carry a single leading ``#``
which marks a session temporary table.
"""

import re

from .base import Dialect, SqlDialect

TEMP_TABLE_PREFIX = "#"


class SynapseDialect(SqlDialect):
    """Synapse SQL dialect implementation."""

    name = Dialect.SYNAPSE
    max_columns = 1024

    TABLE_IDENTIFIER_PATTERN = re.compile(r"^#?[A-Za-z0-9_-]+$")

    def is_valid_identifier(self, name: str, kind: str = "table") -> bool:
        if kind == "table":
            return bool(self.TABLE_IDENTIFIER_PATTERN.match(name))
        return super().is_valid_identifier(name, kind)

    @staticmethod
    def is_temporary_table_name(name: str) -> bool:
        return name.startswith(TEMP_TABLE_PREFIX)
