"""Teradata database query builder."""

from ...exceptions import ErrorCode, QueryBuilderException
from ...sql.dialects import TeradataDialect
from .base import SchemaQueryBuilder

DEFAULT_PERM_SPACE = "1e9"
DEFAULT_SPOOL_SPACE = "1e9"


class TeradataDatabaseQueryBuilder(SchemaQueryBuilder):
    """
    Teradata has databases where other warehouses have schemas.

    Example:
        >>> TeradataDatabaseQueryBuilder().get_create_database_command("db")
        'CREATE DATABASE "db" AS PERMANENT = 1e9, SPOOL = 1e9;'
    """

    dialect = TeradataDialect()

    def get_create_database_command(
        self,
        database_name: str,
        perm_space: str = DEFAULT_PERM_SPACE,
        spool_space: str = DEFAULT_SPOOL_SPACE,
    ) -> str:
        self._validate_schema_name(database_name)
        return (
            f"CREATE DATABASE {self.dialect.quote(database_name)} "
            f"AS PERMANENT = {perm_space}, SPOOL = {spool_space};"
        )

    def get_drop_database_command(self, database_name: str) -> str:
        self._validate_schema_name(database_name)
        return f"DROP DATABASE {self.dialect.quote(database_name)}"

    def get_delete_database_command(self, database_name: str) -> str:
        """Build ``DELETE DATABASE``: removes every object so the database can be dropped."""
        self._validate_schema_name(database_name)
        return f"DELETE DATABASE {self.dialect.quote(database_name)} ALL"

    def get_create_schema_command(self, schema_name: str) -> str:
        return self.get_create_database_command(schema_name)

    def get_drop_schema_command(self, schema_name: str, cascade: bool = False) -> str:
        if cascade:
            raise QueryBuilderException(
                "Teradata cannot drop a non-empty database; delete its content first",
                ErrorCode.UNSUPPORTED_OPERATION,
            )
        return self.get_drop_database_command(schema_name)
