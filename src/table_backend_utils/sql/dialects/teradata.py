"""Teradata SQL dialect implementation."""

from .base import Dialect, SqlDialect


class TeradataDialect(SqlDialect):
    """Teradata dialect: double-quoted identifiers, 2048 columns per table."""

    name = Dialect.TERADATA
    max_columns = 2048
