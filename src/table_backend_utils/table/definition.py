"""
Table definitions: the canonical, backend-agnostic model of a table.

A definition is an immutable value object. It is built either by a caller
that intends to create a table or by a reflection reader from observed
catalog state. Revisions create a new instance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from ..column import ColumnCollection
from ..exceptions import ColumnException, ErrorCode


def _validate_primary_keys(
    columns: ColumnCollection,
    primary_keys_names: Tuple[str, ...],
    validate_nullable: bool,
) -> None:
    missing = [name for name in primary_keys_names if name not in columns]
    if missing:
        raise ColumnException(
            f"Trying to set {', '.join(missing)} as PKs but not present in columns",
            ErrorCode.PRIMARY_KEY_NOT_IN_COLUMNS,
        )
    if not validate_nullable:
        return
    for name in primary_keys_names:
        if columns.get(name).is_nullable():
            raise ColumnException(
                f"Trying to set PK on column {name} but this column is nullable",
                ErrorCode.PRIMARY_KEY_ON_NULLABLE_COLUMN,
            )


@dataclass(frozen=True)
class TableDefinition:
    """
    Definition of a table for the quote-mark dialects (Teradata, Exasol, Snowflake).

    Attributes:
        schema_name: Schema (or Teradata database) the table lives in
        table_name: Table name
        is_temporary: Whether the table is session scoped
        columns: Table shape
        primary_keys_names: Ordered primary key column names
        validate_nullable: Reject nullable primary key columns; reflection
            passes False because catalog state is authoritative

    Raises:
        ColumnException: primaryKeyNotInColumns / primaryKeyOnNullableColumn
    """

    schema_name: str
    table_name: str
    is_temporary: bool
    columns: ColumnCollection
    primary_keys_names: Tuple[str, ...] = ()
    validate_nullable: bool = field(default=True, compare=False, repr=False, kw_only=True)

    def __post_init__(self) -> None:
        object.__setattr__(self, "primary_keys_names", tuple(self.primary_keys_names))
        _validate_primary_keys(self.columns, self.primary_keys_names, self.validate_nullable)

    def get_columns_names(self) -> List[str]:
        return self.columns.get_columns_names()

    def get_primary_keys_names(self) -> List[str]:
        return list(self.primary_keys_names)


class TableDistribution:
    """
    Synapse distribution strategy.

    HASH requires exactly one distribution column; ROUND_ROBIN and REPLICATE
    take none.
    """

    HASH = "HASH"
    ROUND_ROBIN = "ROUND_ROBIN"
    REPLICATE = "REPLICATE"

    AVAILABLE_DISTRIBUTIONS = (HASH, ROUND_ROBIN, REPLICATE)

    __slots__ = ("_distribution_name", "_distribution_columns_names")

    def __init__(
        self,
        distribution_name: str = ROUND_ROBIN,
        distribution_columns_names: Tuple[str, ...] = (),
    ):
        distribution_name = distribution_name.upper()
        if distribution_name not in self.AVAILABLE_DISTRIBUTIONS:
            raise ColumnException(
                f'Unknown table distribution "{distribution_name}" specified. '
                f"Available distributions: {', '.join(self.AVAILABLE_DISTRIBUTIONS)}",
                ErrorCode.INVALID_TABLE_DISTRIBUTION,
            )
        columns = tuple(distribution_columns_names)
        if distribution_name == self.HASH and len(columns) != 1:
            raise ColumnException(
                "HASH table distribution requires exactly one distribution column",
                ErrorCode.INVALID_TABLE_DISTRIBUTION,
            )
        if distribution_name != self.HASH and columns:
            raise ColumnException(
                f"{distribution_name} table distribution does not take distribution columns",
                ErrorCode.INVALID_TABLE_DISTRIBUTION,
            )
        self._distribution_name = distribution_name
        self._distribution_columns_names = columns

    @property
    def distribution_name(self) -> str:
        return self._distribution_name

    @property
    def distribution_columns_names(self) -> List[str]:
        return list(self._distribution_columns_names)

    def is_hash_distribution(self) -> bool:
        return self._distribution_name == self.HASH

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TableDistribution):
            return NotImplemented
        return (self._distribution_name, self._distribution_columns_names) == (
            other._distribution_name,
            other._distribution_columns_names,
        )

    def __hash__(self) -> int:
        return hash((self._distribution_name, self._distribution_columns_names))

    def __repr__(self) -> str:
        return f"TableDistribution({self._distribution_name!r}, {self._distribution_columns_names!r})"


class TableIndex:
    """
    Synapse table storage/index strategy.

    CLUSTERED INDEX requires at least one indexed column; HEAP and
    CLUSTERED COLUMNSTORE INDEX take none.
    """

    HEAP = "HEAP"
    CLUSTERED_COLUMNSTORE_INDEX = "CLUSTERED COLUMNSTORE INDEX"
    CLUSTERED_INDEX = "CLUSTERED INDEX"

    AVAILABLE_INDEX_TYPES = (HEAP, CLUSTERED_COLUMNSTORE_INDEX, CLUSTERED_INDEX)

    __slots__ = ("_index_type", "_indexed_columns_names")

    def __init__(
        self,
        index_type: str = HEAP,
        indexed_columns_names: Tuple[str, ...] = (),
    ):
        index_type = " ".join(index_type.split()).upper()
        if index_type not in self.AVAILABLE_INDEX_TYPES:
            raise ColumnException(
                f'Unknown table index type "{index_type}" specified. '
                f"Available index types: {', '.join(self.AVAILABLE_INDEX_TYPES)}",
                ErrorCode.INVALID_TABLE_INDEX,
            )
        columns = tuple(indexed_columns_names)
        if index_type == self.CLUSTERED_INDEX and not columns:
            raise ColumnException(
                "CLUSTERED INDEX requires at least one indexed column",
                ErrorCode.INVALID_TABLE_INDEX,
            )
        if index_type != self.CLUSTERED_INDEX and columns:
            raise ColumnException(
                f"{index_type} does not take indexed columns",
                ErrorCode.INVALID_TABLE_INDEX,
            )
        self._index_type = index_type
        self._indexed_columns_names = columns

    @property
    def index_type(self) -> str:
        return self._index_type

    @property
    def indexed_columns_names(self) -> List[str]:
        return list(self._indexed_columns_names)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TableIndex):
            return NotImplemented
        return (self._index_type, self._indexed_columns_names) == (
            other._index_type,
            other._indexed_columns_names,
        )

    def __hash__(self) -> int:
        return hash((self._index_type, self._indexed_columns_names))

    def __repr__(self) -> str:
        return f"TableIndex({self._index_type!r}, {self._indexed_columns_names!r})"


@dataclass(frozen=True)
class SynapseTableDefinition(TableDefinition):
    """
    Synapse table definition with distribution and index metadata.

    Distribution and index columns must exist in ``columns``.
    """

    table_distribution: TableDistribution = field(default_factory=TableDistribution)
    table_index: TableIndex = field(default_factory=TableIndex)

    def __post_init__(self) -> None:
        super().__post_init__()
        for name in self.table_distribution.distribution_columns_names:
            if name not in self.columns:
                raise ColumnException(
                    f"Distribution column {name} is not present in columns",
                    ErrorCode.INVALID_TABLE_DISTRIBUTION,
                )
        for name in self.table_index.indexed_columns_names:
            if name not in self.columns:
                raise ColumnException(
                    f"Indexed column {name} is not present in columns",
                    ErrorCode.INVALID_TABLE_INDEX,
                )

    def get_table_distribution(self) -> TableDistribution:
        return self.table_distribution

    def get_table_index(self) -> TableIndex:
        return self.table_index
