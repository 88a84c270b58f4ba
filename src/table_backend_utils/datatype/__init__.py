"""Per-dialect column datatype definitions."""

from .base import Definition
from .exasol import Exasol
from .snowflake import Snowflake
from .synapse import Synapse
from .teradata import Teradata

__all__ = [
    "Definition",
    "Synapse",
    "Teradata",
    "Exasol",
    "Snowflake",
]
