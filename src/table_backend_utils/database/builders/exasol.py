"""Exasol schema query builder."""

from ...sql.dialects import ExasolDialect
from .base import QuotedSchemaQueryBuilder


class ExasolSchemaQueryBuilder(QuotedSchemaQueryBuilder):
    dialect = ExasolDialect()
