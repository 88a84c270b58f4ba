"""Table definitions, query builders and reflection."""

from .definition import SynapseTableDefinition, TableDefinition, TableDistribution, TableIndex

__all__ = [
    "TableDefinition",
    "SynapseTableDefinition",
    "TableDistribution",
    "TableIndex",
]
