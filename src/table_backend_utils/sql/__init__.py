"""
SQL module for identifier quoting and dialect lexical rules.

Provides reusable utilities for quoting identifiers and literals and for
validating object names per warehouse dialect.
"""

from .core.identifier import qualify_table, quote_identifier, quote_literal, unquote_identifier
from .dialects import (
    Dialect,
    ExasolDialect,
    SnowflakeDialect,
    SqlDialect,
    SynapseDialect,
    TeradataDialect,
    get_sql_dialect,
)

__all__ = [
    "quote_identifier",
    "unquote_identifier",
    "quote_literal",
    "qualify_table",
    "Dialect",
    "SqlDialect",
    "SynapseDialect",
    "TeradataDialect",
    "ExasolDialect",
    "SnowflakeDialect",
    "get_sql_dialect",
]
