"""
ColumnCollection: the ordered, immutable shape of a table.

Iteration order is insertion order and is the column order of emitted DDL.
The collection can be iterated any number of times.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple, overload

from ..exceptions import ColumnException, ErrorCode
from .column import Column


class ColumnCollection:
    """
    Ordered sequence of columns, unique by exact (case-sensitive) name.

    Args:
        columns: Columns in table order

    Raises:
        ColumnException: duplicateColumnName when two columns share a name
    """

    __slots__ = ("_columns",)

    def __init__(self, columns: Iterable[Column] = ()):
        columns_tuple = tuple(columns)
        seen = set()
        for column in columns_tuple:
            if column.name in seen:
                raise ColumnException(
                    f"Column {column.name} is defined more than once",
                    ErrorCode.DUPLICATE_COLUMN_NAME,
                )
            seen.add(column.name)
        self._columns: Tuple[Column, ...] = columns_tuple

    def get_columns_names(self) -> List[str]:
        return [column.name for column in self._columns]

    def get_column_definitions(self) -> Iterator[Column]:
        return iter(self._columns)

    def get(self, name: str) -> Column:
        """
        Return the column called ``name``.

        Raises:
            KeyError: If no column has that name
        """
        for column in self._columns:
            if column.name == name:
                return column
        raise KeyError(name)

    def canonical(self) -> List[Tuple[str, str]]:
        return [column.canonical() for column in self._columns]

    def count(self) -> int:
        return len(self._columns)

    def __iter__(self) -> Iterator[Column]:
        return iter(self._columns)

    def __len__(self) -> int:
        return len(self._columns)

    def __contains__(self, name: object) -> bool:
        return any(column.name == name for column in self._columns)

    @overload
    def __getitem__(self, index: int) -> Column: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[Column, ...]: ...

    def __getitem__(self, index):
        return self._columns[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColumnCollection):
            return NotImplemented
        return self.canonical() == other.canonical()

    def __hash__(self) -> int:
        return hash(tuple(self.canonical()))

    def __repr__(self) -> str:
        return f"ColumnCollection({list(self._columns)!r})"
