"""Base schema query builder."""

from abc import ABC, abstractmethod

from ...sql.dialects import SqlDialect
from ...utils.logging import get_logger

logger = get_logger(__name__)


class SchemaQueryBuilder(ABC):
    """Builds CREATE/DROP statements for schemas (Teradata: databases)."""

    dialect: SqlDialect

    @abstractmethod
    def get_create_schema_command(self, schema_name: str) -> str:
        """Build a statement creating an empty schema."""

    @abstractmethod
    def get_drop_schema_command(self, schema_name: str, cascade: bool = True) -> str:
        """Build a statement dropping a schema, with its objects when ``cascade``."""

    def _validate_schema_name(self, schema_name: str) -> None:
        self.dialect.validate_identifier(schema_name, "schema")
        logger.debug(
            "schema_query_builder.validated", dialect=self.dialect.name.value, schema=schema_name
        )


class QuotedSchemaQueryBuilder(SchemaQueryBuilder):
    """``CREATE SCHEMA "s"`` / ``DROP SCHEMA "s" [CASCADE]`` for Exasol and Snowflake."""

    def get_create_schema_command(self, schema_name: str) -> str:
        self._validate_schema_name(schema_name)
        return f"CREATE SCHEMA {self.dialect.quote(schema_name)}"

    def get_drop_schema_command(self, schema_name: str, cascade: bool = True) -> str:
        self._validate_schema_name(schema_name)
        sql = f"DROP SCHEMA {self.dialect.quote(schema_name)}"
        if cascade:
            sql += " CASCADE"
        return sql
