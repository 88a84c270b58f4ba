"""
Unit tests for the per-dialect table query builders.

Builders are pure, so every test asserts the exact SQL text.
"""

import pytest

from table_backend_utils import (
    Column,
    ColumnCollection,
    ExasolColumn,
    SnowflakeColumn,
    SynapseColumn,
    SynapseTableDefinition,
    TableDefinition,
    TableDistribution,
    TableIndex,
    TeradataColumn,
)
from table_backend_utils.datatype import Exasol, Snowflake, Synapse, Teradata
from table_backend_utils.exceptions import ColumnException, ErrorCode, QueryBuilderException
from table_backend_utils.table.builders import (
    ExasolTableQueryBuilder,
    SnowflakeTableQueryBuilder,
    SynapseTableQueryBuilder,
    TeradataTableQueryBuilder,
)

SYNAPSE_GENERIC = "NVARCHAR(4000) NOT NULL DEFAULT ''"
TERADATA_GENERIC = "VARCHAR (32000) NOT NULL DEFAULT '' CHARACTER SET UNICODE"
EXASOL_GENERIC = "VARCHAR (2000000) DEFAULT '' NOT NULL"
SNOWFLAKE_GENERIC = "VARCHAR NOT NULL DEFAULT ''"


@pytest.fixture
def synapse_qb():
    return SynapseTableQueryBuilder()


@pytest.fixture
def synapse_columns():
    return ColumnCollection(
        [
            SynapseColumn.create_generic_column("col1"),
            SynapseColumn.create_generic_column("col2"),
        ]
    )


@pytest.mark.unit
class TestSynapseTableQueryBuilder:
    def test_create_table_single_column(self, synapse_qb):
        sql = synapse_qb.get_create_table_command(
            "schemaA", "t", ColumnCollection([SynapseColumn.create_generic_column("c1")])
        )
        assert sql == f"CREATE TABLE [schemaA].[t] ([c1] {SYNAPSE_GENERIC})"

    def test_create_table_with_primary_keys(self, synapse_qb, synapse_columns):
        sql = synapse_qb.get_create_table_command(
            "schemaA", "t", synapse_columns, ["col1", "col2"]
        )
        assert sql == (
            f"CREATE TABLE [schemaA].[t] ([col1] {SYNAPSE_GENERIC}, [col2] {SYNAPSE_GENERIC}, "
            "PRIMARY KEY NONCLUSTERED([col1],[col2]) NOT ENFORCED)"
        )

    def test_create_temp_table(self, synapse_qb, synapse_columns):
        sql = synapse_qb.get_create_temp_table_command("schemaA", "#tmp", synapse_columns)
        assert sql == (
            f"CREATE TABLE [schemaA].[#tmp] ([col1] {SYNAPSE_GENERIC}, [col2] {SYNAPSE_GENERIC}) "
            "WITH (HEAP, LOCATION = USER_DB)"
        )

    def test_temp_table_name_requires_hash(self, synapse_qb, synapse_columns):
        with pytest.raises(QueryBuilderException) as exc_info:
            synapse_qb.get_create_temp_table_command("schemaA", "tmp", synapse_columns)
        assert exc_info.value.string_code == ErrorCode.INVALID_IDENTIFIER

    def test_hash_name_rejected_for_permanent_table(self, synapse_qb, synapse_columns):
        with pytest.raises(QueryBuilderException) as exc_info:
            synapse_qb.get_create_table_command("schemaA", "#tmp", synapse_columns)
        assert exc_info.value.string_code == ErrorCode.INVALID_IDENTIFIER

    def test_hash_name_allowed_for_drop(self, synapse_qb):
        assert synapse_qb.get_drop_table_command("schemaA", "#tmp") == "DROP TABLE [schemaA].[#tmp]"

    def test_create_from_definition_with_distribution_and_index(self, synapse_qb):
        columns = ColumnCollection(
            [
                Column("id", Synapse("INT", nullable=False)),
                SynapseColumn.create_generic_column("name"),
            ]
        )
        definition = SynapseTableDefinition(
            "dbo",
            "orders",
            False,
            columns,
            ["id"],
            TableDistribution("HASH", ["id"]),
            TableIndex(TableIndex.CLUSTERED_COLUMNSTORE_INDEX),
        )
        expected_columns = f"[id] INT NOT NULL, [name] {SYNAPSE_GENERIC}"
        assert synapse_qb.get_create_table_command_from_definition(definition) == (
            f"CREATE TABLE [dbo].[orders] ({expected_columns}) "
            "WITH (CLUSTERED COLUMNSTORE INDEX, DISTRIBUTION = HASH([id]))"
        )
        assert synapse_qb.get_create_table_command_from_definition(definition, True) == (
            f"CREATE TABLE [dbo].[orders] ({expected_columns}, "
            "PRIMARY KEY NONCLUSTERED([id]) NOT ENFORCED) "
            "WITH (CLUSTERED COLUMNSTORE INDEX, DISTRIBUTION = HASH([id]))"
        )

    def test_create_from_definition_with_clustered_index(self, synapse_qb, synapse_columns):
        definition = SynapseTableDefinition(
            "dbo",
            "orders",
            False,
            synapse_columns,
            table_index=TableIndex(TableIndex.CLUSTERED_INDEX, ["col1", "col2"]),
        )
        assert synapse_qb.get_create_table_command_from_definition(definition).endswith(
            " WITH (CLUSTERED INDEX([col1],[col2]), DISTRIBUTION = ROUND_ROBIN)"
        )

    def test_create_from_default_definition(self, synapse_qb, synapse_columns):
        definition = SynapseTableDefinition("dbo", "orders", False, synapse_columns)
        assert synapse_qb.get_create_table_command_from_definition(definition).endswith(
            " WITH (HEAP, DISTRIBUTION = ROUND_ROBIN)"
        )

    def test_create_from_temporary_definition(self, synapse_qb, synapse_columns):
        definition = SynapseTableDefinition("dbo", "#orders", True, synapse_columns)
        assert synapse_qb.get_create_table_command_from_definition(definition).endswith(
            " WITH (HEAP, LOCATION = USER_DB)"
        )

    def test_distribution_column_must_be_in_columns(self, synapse_qb, synapse_columns):
        with pytest.raises(QueryBuilderException):
            synapse_qb.get_create_table_command(
                "dbo",
                "orders",
                synapse_columns,
                table_distribution=TableDistribution("HASH", ["missing"]),
            )

    def test_drop_truncate_rename(self, synapse_qb):
        assert synapse_qb.get_drop_table_command("schemaA", "t") == "DROP TABLE [schemaA].[t]"
        assert synapse_qb.get_truncate_table_command("schemaA", "t") == (
            "TRUNCATE TABLE [schemaA].[t]"
        )
        assert synapse_qb.get_rename_table_command("schemaA", "t", "t2") == (
            "RENAME OBJECT [schemaA].[t] TO [t2]"
        )

    def test_invalid_table_name(self, synapse_qb, synapse_columns):
        with pytest.raises(QueryBuilderException) as exc_info:
            synapse_qb.get_create_table_command("schemaA", "bad.name", synapse_columns)
        assert exc_info.value.string_code == ErrorCode.INVALID_IDENTIFIER
        assert exc_info.value.message.startswith("Invalid table name bad.name:")

    def test_invalid_column_name(self, synapse_qb):
        columns = ColumnCollection([SynapseColumn.create_generic_column("bad col")])
        with pytest.raises(QueryBuilderException) as exc_info:
            synapse_qb.get_create_table_command("schemaA", "t", columns)
        assert exc_info.value.message.startswith("Invalid column name bad col:")

    def test_too_many_columns(self, synapse_qb):
        columns = ColumnCollection(
            SynapseColumn.create_generic_column(f"col{i}") for i in range(1025)
        )
        with pytest.raises(ColumnException) as exc_info:
            synapse_qb.get_create_table_command("schemaA", "t", columns)
        assert exc_info.value.string_code == ErrorCode.TOO_MANY_COLUMNS
        assert exc_info.value.get_string_code() == "tooManyColumns"

    def test_column_of_other_dialect_rejected(self, synapse_qb):
        columns = ColumnCollection([TeradataColumn.create_generic_column("col1")])
        with pytest.raises(QueryBuilderException) as exc_info:
            synapse_qb.get_create_table_command("schemaA", "t", columns)
        assert exc_info.value.string_code == ErrorCode.INVALID_TYPE


@pytest.fixture
def teradata_columns():
    return ColumnCollection(
        [
            Column("id", Teradata("INTEGER", nullable=False)),
            TeradataColumn.create_generic_column("name"),
        ]
    )


@pytest.mark.unit
class TestTeradataTableQueryBuilder:
    def test_create_table_without_primary_key(self, teradata_columns):
        sql = TeradataTableQueryBuilder().get_create_table_command("db", "t", teradata_columns)
        assert sql == (
            'CREATE MULTISET TABLE "db"."t", FALLBACK\n'
            '("id" INTEGER NOT NULL,\n'
            f'"name" {TERADATA_GENERIC}) NO PRIMARY INDEX;'
        )

    def test_create_table_with_primary_key(self, teradata_columns):
        sql = TeradataTableQueryBuilder().get_create_table_command(
            "db", "t", teradata_columns, ["id", "name"]
        )
        assert sql == (
            'CREATE MULTISET TABLE "db"."t", FALLBACK\n'
            '("id" INTEGER NOT NULL,\n'
            f'"name" {TERADATA_GENERIC},\n'
            'PRIMARY KEY ("id", "name"));'
        )

    def test_create_temp_table(self, teradata_columns):
        sql = TeradataTableQueryBuilder().get_create_temp_table_command(
            "db", "t", teradata_columns
        )
        assert sql == (
            'CREATE MULTISET VOLATILE TABLE "db"."t", NO FALLBACK, NO LOG\n'
            '("id" INTEGER NOT NULL,\n'
            f'"name" {TERADATA_GENERIC}) NO PRIMARY INDEX ON COMMIT PRESERVE ROWS;'
        )

    def test_drop_truncate_rename(self):
        qb = TeradataTableQueryBuilder()
        assert qb.get_drop_table_command("db", "t") == 'DROP TABLE "db"."t"'
        assert qb.get_truncate_table_command("db", "t") == 'DELETE "db"."t" ALL'
        assert qb.get_rename_table_command("db", "t", "t2") == (
            'RENAME TABLE "db"."t" AS "db"."t2"'
        )

    def test_primary_key_on_nullable_column(self):
        columns = ColumnCollection([Column("col1", Teradata("INTEGER"))])
        with pytest.raises(QueryBuilderException) as exc_info:
            TeradataTableQueryBuilder().get_create_table_command("db", "t", columns, ["col1"])
        assert exc_info.value.string_code == ErrorCode.PRIMARY_KEY_ON_NULLABLE_COLUMN
        assert exc_info.value.message == (
            "Trying to set PK on column col1 but this column is nullable"
        )

    def test_from_definition_suppresses_primary_keys(self, teradata_columns):
        definition = TableDefinition("db", "t", False, teradata_columns, ["id"])
        sql = TeradataTableQueryBuilder().get_create_table_command_from_definition(definition)
        assert "PRIMARY KEY" not in sql
        assert sql.endswith(" NO PRIMARY INDEX;")


@pytest.fixture
def exasol_columns():
    return ColumnCollection(
        [
            Column("id", Exasol("INTEGER", nullable=False)),
            ExasolColumn.create_generic_column("name"),
        ]
    )


@pytest.mark.unit
class TestExasolTableQueryBuilder:
    def test_create_table_with_primary_keys(self, exasol_columns):
        sql = ExasolTableQueryBuilder().get_create_table_command(
            "s", "t", exasol_columns, ["id", "name"]
        )
        assert sql == (
            f'CREATE TABLE "s"."t" ("id" INTEGER NOT NULL, "name" {EXASOL_GENERIC}, '
            'CONSTRAINT PRIMARY KEY ("id","name"))'
        )

    def test_primary_key_not_in_columns(self, exasol_columns):
        with pytest.raises(QueryBuilderException) as exc_info:
            ExasolTableQueryBuilder().get_create_table_command(
                "s", "t", exasol_columns, ["colNotExisting"]
            )
        assert exc_info.value.string_code == ErrorCode.PRIMARY_KEY_NOT_IN_COLUMNS
        assert exc_info.value.message == (
            "Trying to set colNotExisting as PKs but not present in columns"
        )

    def test_temp_table_unsupported(self, exasol_columns):
        with pytest.raises(QueryBuilderException) as exc_info:
            ExasolTableQueryBuilder().get_create_temp_table_command("s", "t", exasol_columns)
        assert exc_info.value.string_code == ErrorCode.UNSUPPORTED_OPERATION

    def test_temporary_definition_unsupported(self, exasol_columns):
        definition = TableDefinition("s", "t", True, exasol_columns)
        with pytest.raises(QueryBuilderException):
            ExasolTableQueryBuilder().get_create_table_command_from_definition(definition)

    def test_drop_truncate_rename(self):
        qb = ExasolTableQueryBuilder()
        assert qb.get_drop_table_command("s", "t") == 'DROP TABLE "s"."t"'
        assert qb.get_truncate_table_command("s", "t") == 'TRUNCATE TABLE "s"."t"'
        assert qb.get_rename_table_command("s", "t", "t2") == 'RENAME TABLE "s"."t" TO "t2"'

    def test_invalid_rename_target(self):
        with pytest.raises(QueryBuilderException):
            ExasolTableQueryBuilder().get_rename_table_command("s", "t", "t.2")


@pytest.mark.unit
class TestSnowflakeTableQueryBuilder:
    @pytest.fixture
    def columns(self):
        return ColumnCollection(
            [
                Column("id", Snowflake("NUMBER", "38,0", nullable=False)),
                SnowflakeColumn.create_generic_column("name"),
            ]
        )

    def test_create_table_with_primary_key(self, columns):
        sql = SnowflakeTableQueryBuilder().get_create_table_command("s", "t", columns, ["id"])
        assert sql == (
            f'CREATE TABLE "s"."t" ("id" NUMBER(38,0) NOT NULL, "name" {SNOWFLAKE_GENERIC}, '
            'PRIMARY KEY ("id"))'
        )

    def test_create_from_temporary_definition(self, columns):
        definition = TableDefinition("s", "t", True, columns, ["id"])
        sql = SnowflakeTableQueryBuilder().get_create_table_command_from_definition(
            definition, define_primary_keys=True
        )
        assert sql == (
            f'CREATE TEMPORARY TABLE "s"."t" ("id" NUMBER(38,0) NOT NULL, '
            f'"name" {SNOWFLAKE_GENERIC})'
        )

    def test_no_column_limit(self):
        columns = ColumnCollection(
            SnowflakeColumn.create_generic_column(f"col{i}") for i in range(10001)
        )
        sql = SnowflakeTableQueryBuilder().get_create_table_command("s", "t", columns)
        assert sql.startswith('CREATE TABLE "s"."t" ("col0" ')

    def test_drop_truncate_rename(self):
        qb = SnowflakeTableQueryBuilder()
        assert qb.get_drop_table_command("s", "t") == 'DROP TABLE "s"."t"'
        assert qb.get_truncate_table_command("s", "t") == 'TRUNCATE TABLE "s"."t"'
        assert qb.get_rename_table_command("s", "t", "t2") == (
            'ALTER TABLE "s"."t" RENAME TO "s"."t2"'
        )
