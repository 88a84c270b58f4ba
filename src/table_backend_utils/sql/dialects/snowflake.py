"""Snowflake SQL dialect implementation."""

from .base import Dialect, SqlDialect


class SnowflakeDialect(SqlDialect):
    """
    Snowflake dialect.

    Snowflake does not publish a per-table column limit, so ``max_columns``
    stays unset and only the identifier rule is enforced.
    """

    name = Dialect.SNOWFLAKE
