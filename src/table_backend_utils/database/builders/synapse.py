"""Synapse schema query builder."""

from ...exceptions import ErrorCode, QueryBuilderException
from ...sql.dialects import SynapseDialect
from .base import SchemaQueryBuilder


class SynapseSchemaQueryBuilder(SchemaQueryBuilder):
    """
    Synapse schemas.

    Synapse cannot drop a schema together with its objects, so ``DROP SCHEMA``
    is only emitted without cascade; the schema must already be empty.
    """

    dialect = SynapseDialect()

    def get_create_schema_command(self, schema_name: str) -> str:
        self._validate_schema_name(schema_name)
        return f"CREATE SCHEMA {self.dialect.quote(schema_name)}"

    def get_drop_schema_command(self, schema_name: str, cascade: bool = False) -> str:
        self._validate_schema_name(schema_name)
        if cascade:
            raise QueryBuilderException(
                "Synapse does not support dropping a schema with CASCADE",
                ErrorCode.UNSUPPORTED_OPERATION,
            )
        return f"DROP SCHEMA {self.dialect.quote(schema_name)}"
