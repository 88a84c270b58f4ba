"""
Helpers for reading catalog rows.

Drivers disagree on the case of result keys and on cell types (numbers may
arrive as strings, booleans as ``1``/``"Y"``/``"TRUE"``); reflection readers
go through these helpers instead of indexing rows directly.
"""

from decimal import Decimal
from typing import Any, Mapping, Optional

TRUE_VALUES = ("1", "Y", "YES", "T", "TRUE")


def row_value(row: Mapping[str, Any], key: str) -> Any:
    """
    Get a value from a row by case-insensitive key.

    Raises:
        KeyError: If the row has no such column

    Example:
        >>> row_value({"COLUMN_NAME": "id"}, "column_name")
        'id'
    """
    if key in row:
        return row[key]
    lowered = key.lower()
    for name, value in row.items():
        if name.lower() == lowered:
            return value
    raise KeyError(key)


def to_str(value: Any) -> Optional[str]:
    """Stringify a cell, trimming fixed-width padding. ``None`` stays ``None``."""
    if value is None:
        return None
    return str(value).strip()


def to_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    return int(Decimal(str(value).strip()))


def to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().upper() in TRUE_VALUES
