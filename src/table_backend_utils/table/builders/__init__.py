"""Per-dialect table query builders."""

from .base import TableQueryBuilder
from .exasol import ExasolTableQueryBuilder
from .snowflake import SnowflakeTableQueryBuilder
from .synapse import SynapseTableQueryBuilder
from .teradata import TeradataTableQueryBuilder

__all__ = [
    "TableQueryBuilder",
    "SynapseTableQueryBuilder",
    "TeradataTableQueryBuilder",
    "ExasolTableQueryBuilder",
    "SnowflakeTableQueryBuilder",
]
