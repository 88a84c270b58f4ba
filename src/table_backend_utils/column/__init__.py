"""Columns and column collections."""

from .collection import ColumnCollection
from .column import Column, ExasolColumn, SnowflakeColumn, SynapseColumn, TeradataColumn

__all__ = [
    "Column",
    "ColumnCollection",
    "SynapseColumn",
    "TeradataColumn",
    "ExasolColumn",
    "SnowflakeColumn",
]
