"""Per-dialect database (schema/catalog scope) reflection."""

from .base import DatabaseReflection
from .exasol import ExasolDatabaseReflection
from .snowflake import SnowflakeDatabaseReflection
from .synapse import SynapseDatabaseReflection
from .teradata import TeradataDatabaseReflection

__all__ = [
    "DatabaseReflection",
    "SynapseDatabaseReflection",
    "TeradataDatabaseReflection",
    "ExasolDatabaseReflection",
    "SnowflakeDatabaseReflection",
]
