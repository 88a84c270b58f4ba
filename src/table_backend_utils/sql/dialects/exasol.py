"""Exasol SQL dialect implementation."""

from .base import Dialect, SqlDialect


class ExasolDialect(SqlDialect):
    """Exasol dialect: double-quoted identifiers, 10000 columns per table."""

    name = Dialect.EXASOL
    max_columns = 10000
