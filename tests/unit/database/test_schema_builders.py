"""
Unit tests for schema (Teradata: database) query builders.
"""

import pytest

from table_backend_utils.database.builders import (
    ExasolSchemaQueryBuilder,
    SnowflakeSchemaQueryBuilder,
    SynapseSchemaQueryBuilder,
    TeradataDatabaseQueryBuilder,
)
from table_backend_utils.exceptions import ErrorCode, QueryBuilderException


@pytest.mark.unit
class TestSynapseSchemaQueryBuilder:
    def test_create_and_drop(self):
        qb = SynapseSchemaQueryBuilder()
        assert qb.get_create_schema_command("ref-schema") == "CREATE SCHEMA [ref-schema]"
        assert qb.get_drop_schema_command("ref-schema") == "DROP SCHEMA [ref-schema]"

    def test_cascade_unsupported(self):
        with pytest.raises(QueryBuilderException) as exc_info:
            SynapseSchemaQueryBuilder().get_drop_schema_command("s", cascade=True)
        assert exc_info.value.string_code == ErrorCode.UNSUPPORTED_OPERATION

    def test_invalid_schema_name(self):
        with pytest.raises(QueryBuilderException) as exc_info:
            SynapseSchemaQueryBuilder().get_create_schema_command("bad.schema")
        assert exc_info.value.message.startswith("Invalid schema name bad.schema:")


@pytest.mark.unit
@pytest.mark.parametrize("builder_class", [ExasolSchemaQueryBuilder, SnowflakeSchemaQueryBuilder])
def test_quoted_schema_builders(builder_class):
    qb = builder_class()
    assert qb.get_create_schema_command("s") == 'CREATE SCHEMA "s"'
    assert qb.get_drop_schema_command("s") == 'DROP SCHEMA "s" CASCADE'
    assert qb.get_drop_schema_command("s", cascade=False) == 'DROP SCHEMA "s"'


@pytest.mark.unit
class TestTeradataDatabaseQueryBuilder:
    def test_create_database(self):
        qb = TeradataDatabaseQueryBuilder()
        assert qb.get_create_database_command("db") == (
            'CREATE DATABASE "db" AS PERMANENT = 1e9, SPOOL = 1e9;'
        )
        assert qb.get_create_database_command("db", "5e8", "2e8") == (
            'CREATE DATABASE "db" AS PERMANENT = 5e8, SPOOL = 2e8;'
        )
        assert qb.get_create_schema_command("db") == qb.get_create_database_command("db")

    def test_drop_and_delete_database(self):
        qb = TeradataDatabaseQueryBuilder()
        assert qb.get_drop_database_command("db") == 'DROP DATABASE "db"'
        assert qb.get_drop_schema_command("db") == 'DROP DATABASE "db"'
        assert qb.get_delete_database_command("db") == 'DELETE DATABASE "db" ALL'

    def test_cascade_unsupported(self):
        with pytest.raises(QueryBuilderException):
            TeradataDatabaseQueryBuilder().get_drop_schema_command("db", cascade=True)
