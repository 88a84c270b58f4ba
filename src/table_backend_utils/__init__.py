"""
table-backend-utils - Warehouse table schema modelling and DDL generation.

Models relational tables in a backend-agnostic form, compiles the model into
DDL for Synapse, Teradata, Exasol and Snowflake, and reflects live catalog
objects back into the same model.

Usage:
    >>> from table_backend_utils import ColumnCollection, SynapseColumn
    >>> from table_backend_utils.table.builders import SynapseTableQueryBuilder
    >>> qb = SynapseTableQueryBuilder()
    >>> qb.get_create_table_command(
    ...     "schemaA", "t", ColumnCollection([SynapseColumn.create_generic_column("c1")])
    ... )
    "CREATE TABLE [schemaA].[t] ([c1] NVARCHAR(4000) NOT NULL DEFAULT '')"
"""

from .column import (
    Column,
    ColumnCollection,
    ExasolColumn,
    SnowflakeColumn,
    SynapseColumn,
    TeradataColumn,
)
from .exceptions import (
    ColumnException,
    ErrorCode,
    InvalidTypeException,
    QueryBuilderException,
    ReflectionException,
    TableBackendUtilsError,
    TableNotExistsReflectionException,
)
from .sql.dialects import Dialect
from .table.definition import (
    SynapseTableDefinition,
    TableDefinition,
    TableDistribution,
    TableIndex,
)

__version__ = "0.1.0"

__all__ = [
    "Column",
    "ColumnCollection",
    "SynapseColumn",
    "TeradataColumn",
    "ExasolColumn",
    "SnowflakeColumn",
    "Dialect",
    "TableDefinition",
    "SynapseTableDefinition",
    "TableDistribution",
    "TableIndex",
    "TableBackendUtilsError",
    "ErrorCode",
    "QueryBuilderException",
    "ColumnException",
    "InvalidTypeException",
    "ReflectionException",
    "TableNotExistsReflectionException",
]
