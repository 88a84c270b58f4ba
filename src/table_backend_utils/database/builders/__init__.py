"""Per-dialect schema (Teradata: database) query builders."""

from .base import QuotedSchemaQueryBuilder, SchemaQueryBuilder
from .exasol import ExasolSchemaQueryBuilder
from .snowflake import SnowflakeSchemaQueryBuilder
from .synapse import SynapseSchemaQueryBuilder
from .teradata import TeradataDatabaseQueryBuilder

__all__ = [
    "SchemaQueryBuilder",
    "QuotedSchemaQueryBuilder",
    "SynapseSchemaQueryBuilder",
    "TeradataDatabaseQueryBuilder",
    "ExasolSchemaQueryBuilder",
    "SnowflakeSchemaQueryBuilder",
]
