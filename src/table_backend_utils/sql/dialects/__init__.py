"""
Per-dialect lexical rules.

Usage:
    >>> from table_backend_utils.sql.dialects import get_sql_dialect
    >>> get_sql_dialect("synapse").qualify("t", "schemaA")
    '[schemaA].[t]'
"""

from typing import Dict, Union

from .base import Dialect, SqlDialect
from .exasol import ExasolDialect
from .snowflake import SnowflakeDialect
from .synapse import SynapseDialect
from .teradata import TeradataDialect

_DIALECTS: Dict[Dialect, SqlDialect] = {
    Dialect.SYNAPSE: SynapseDialect(),
    Dialect.TERADATA: TeradataDialect(),
    Dialect.EXASOL: ExasolDialect(),
    Dialect.SNOWFLAKE: SnowflakeDialect(),
}


def get_sql_dialect(dialect: Union[str, Dialect]) -> SqlDialect:
    """
    Resolve a dialect tag to its lexical rules.

    Raises:
        ValueError: If the dialect is not supported
    """
    key = dialect.value if isinstance(dialect, Dialect) else str(dialect).lower()
    try:
        return _DIALECTS[Dialect(key)]
    except ValueError:
        supported = ", ".join(d.value for d in Dialect)
        raise ValueError(f"Unsupported dialect: {dialect}. Supported: {supported}") from None


__all__ = [
    "Dialect",
    "SqlDialect",
    "SynapseDialect",
    "TeradataDialect",
    "ExasolDialect",
    "SnowflakeDialect",
    "get_sql_dialect",
]
