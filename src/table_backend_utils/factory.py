"""
Dialect registry: resolve a dialect tag to its components.

When no dialect is given the configured ``default_dialect`` is used.

Usage:
    >>> from table_backend_utils.factory import get_query_builder
    >>> get_query_builder("teradata").get_truncate_table_command("db", "t")
    'DELETE "db"."t" ALL'
"""

from typing import Dict, NamedTuple, Optional, Type, Union

from .config import get_settings
from .connection import Connection
from .database.builders import (
    ExasolSchemaQueryBuilder,
    SchemaQueryBuilder,
    SnowflakeSchemaQueryBuilder,
    SynapseSchemaQueryBuilder,
    TeradataDatabaseQueryBuilder,
)
from .database.reflection import (
    DatabaseReflection,
    ExasolDatabaseReflection,
    SnowflakeDatabaseReflection,
    SynapseDatabaseReflection,
    TeradataDatabaseReflection,
)
from .sql.dialects import Dialect, get_sql_dialect
from .table.builders import (
    ExasolTableQueryBuilder,
    SnowflakeTableQueryBuilder,
    SynapseTableQueryBuilder,
    TableQueryBuilder,
    TeradataTableQueryBuilder,
)
from .table.reflection import (
    ExasolTableReflection,
    SnowflakeTableReflection,
    SynapseTableReflection,
    TableReflection,
    TeradataTableReflection,
)
from .utils.logging import get_logger

logger = get_logger(__name__)


class DialectComponents(NamedTuple):
    query_builder: Type[TableQueryBuilder]
    table_reflection: Type[TableReflection]
    database_reflection: Type[DatabaseReflection]
    schema_query_builder: Type[SchemaQueryBuilder]


_REGISTRY: Dict[Dialect, DialectComponents] = {
    Dialect.SYNAPSE: DialectComponents(
        SynapseTableQueryBuilder,
        SynapseTableReflection,
        SynapseDatabaseReflection,
        SynapseSchemaQueryBuilder,
    ),
    Dialect.TERADATA: DialectComponents(
        TeradataTableQueryBuilder,
        TeradataTableReflection,
        TeradataDatabaseReflection,
        TeradataDatabaseQueryBuilder,
    ),
    Dialect.EXASOL: DialectComponents(
        ExasolTableQueryBuilder,
        ExasolTableReflection,
        ExasolDatabaseReflection,
        ExasolSchemaQueryBuilder,
    ),
    Dialect.SNOWFLAKE: DialectComponents(
        SnowflakeTableQueryBuilder,
        SnowflakeTableReflection,
        SnowflakeDatabaseReflection,
        SnowflakeSchemaQueryBuilder,
    ),
}


def get_dialect(dialect: Optional[Union[str, Dialect]] = None) -> Dialect:
    """
    Resolve a dialect tag, falling back to ``Settings.default_dialect``.

    Raises:
        ValueError: If the dialect is not supported
    """
    if dialect is None:
        dialect = get_settings().default_dialect
        logger.debug("factory.default_dialect", dialect=dialect)
    return get_sql_dialect(dialect).name


def _components(dialect: Optional[Union[str, Dialect]]) -> DialectComponents:
    return _REGISTRY[get_dialect(dialect)]


def get_query_builder(dialect: Optional[Union[str, Dialect]] = None) -> TableQueryBuilder:
    return _components(dialect).query_builder()


def get_schema_query_builder(
    dialect: Optional[Union[str, Dialect]] = None,
) -> SchemaQueryBuilder:
    return _components(dialect).schema_query_builder()


def get_table_reflection(
    connection: Connection,
    schema_name: str,
    table_name: str,
    dialect: Optional[Union[str, Dialect]] = None,
) -> TableReflection:
    return _components(dialect).table_reflection(connection, schema_name, table_name)


def get_database_reflection(
    connection: Connection,
    dialect: Optional[Union[str, Dialect]] = None,
) -> DatabaseReflection:
    return _components(dialect).database_reflection(connection)
