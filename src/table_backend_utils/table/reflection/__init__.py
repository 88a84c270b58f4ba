"""Per-dialect table reflection readers."""

from .base import TableReflection
from .exasol import ExasolTableReflection
from .snowflake import SnowflakeTableReflection
from .synapse import SynapseTableReflection
from .teradata import TeradataTableReflection

__all__ = [
    "TableReflection",
    "SynapseTableReflection",
    "TeradataTableReflection",
    "ExasolTableReflection",
    "SnowflakeTableReflection",
]
