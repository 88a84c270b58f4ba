"""
Unit tests for Column and ColumnCollection.
"""

import dataclasses

import pytest

from table_backend_utils import (
    Column,
    ColumnCollection,
    ExasolColumn,
    SnowflakeColumn,
    SynapseColumn,
    TeradataColumn,
)
from table_backend_utils.datatype import Synapse, Teradata
from table_backend_utils.exceptions import ColumnException, ErrorCode
from table_backend_utils.sql import Dialect


@pytest.mark.unit
class TestColumn:
    @pytest.mark.parametrize(
        "dialect,expected",
        [
            ("synapse", "NVARCHAR(4000) NOT NULL DEFAULT ''"),
            ("teradata", "VARCHAR (32000) NOT NULL DEFAULT '' CHARACTER SET UNICODE"),
            ("exasol", "VARCHAR (2000000) DEFAULT '' NOT NULL"),
            ("snowflake", "VARCHAR NOT NULL DEFAULT ''"),
        ],
    )
    def test_generic_column(self, dialect, expected):
        column = Column.create_generic_column("c1", dialect)
        assert column.name == "c1"
        assert column.sql_definition == expected
        assert not column.is_nullable()

    @pytest.mark.parametrize(
        "column_class,dialect",
        [
            (SynapseColumn, Dialect.SYNAPSE),
            (TeradataColumn, Dialect.TERADATA),
            (ExasolColumn, Dialect.EXASOL),
            (SnowflakeColumn, Dialect.SNOWFLAKE),
        ],
    )
    def test_dialect_bound_generic_column(self, column_class, dialect):
        column = column_class.create_generic_column("c1")
        assert column.dialect is dialect
        assert isinstance(column, column_class)

    def test_to_sql_quotes_name(self):
        assert SynapseColumn.create_generic_column("c1").to_sql() == (
            "[c1] NVARCHAR(4000) NOT NULL DEFAULT ''"
        )
        assert Column("id", Teradata("INTEGER")).to_sql() == '"id" INTEGER'

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError):
            Column("", Synapse("INT"))

    def test_column_is_immutable(self):
        column = Column("id", Synapse("INT"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            column.name = "other"  # type: ignore[misc]

    def test_accessors(self):
        definition = Synapse("INT", nullable=False)
        column = Column("id", definition)
        assert column.get_column_name() == "id"
        assert column.get_column_definition() is definition
        assert column.canonical() == ("id", "INT NOT NULL")


@pytest.fixture
def columns():
    return ColumnCollection(
        [
            Column("id", Synapse("INT", nullable=False)),
            Column("name", Synapse("NVARCHAR", "100")),
            Column("Name", Synapse("NVARCHAR", "50")),
        ]
    )


@pytest.mark.unit
class TestColumnCollection:
    def test_preserves_order(self, columns):
        assert columns.get_columns_names() == ["id", "name", "Name"]

    def test_is_restartable(self, columns):
        first = [column.name for column in columns]
        second = [column.name for column in columns]
        assert first == second == ["id", "name", "Name"]

    def test_size_and_membership(self, columns):
        assert len(columns) == 3
        assert columns.count() == 3
        assert "name" in columns
        assert "NAME" not in columns

    def test_get(self, columns):
        assert columns.get("Name").sql_definition == "NVARCHAR(50)"
        assert columns[0].name == "id"
        with pytest.raises(KeyError):
            columns.get("missing")

    def test_duplicate_names_rejected(self):
        with pytest.raises(ColumnException) as exc_info:
            ColumnCollection(
                [
                    SynapseColumn.create_generic_column("col1"),
                    SynapseColumn.create_generic_column("col1"),
                ]
            )
        assert exc_info.value.string_code == ErrorCode.DUPLICATE_COLUMN_NAME

    def test_equality_by_name_and_definition(self, columns):
        same = ColumnCollection(list(columns))
        different = ColumnCollection(list(columns)[:2])
        assert columns == same
        assert hash(columns) == hash(same)
        assert columns != different

    def test_empty_collection(self):
        empty = ColumnCollection()
        assert len(empty) == 0
        assert empty.get_columns_names() == []
