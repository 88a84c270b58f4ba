"""Snowflake schema query builder."""

from ...sql.dialects import SnowflakeDialect
from .base import QuotedSchemaQueryBuilder


class SnowflakeSchemaQueryBuilder(QuotedSchemaQueryBuilder):
    dialect = SnowflakeDialect()
