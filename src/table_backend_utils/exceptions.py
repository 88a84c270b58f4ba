"""
Exception taxonomy for table-backend-utils.

Every error raised by the library carries a stable ``string_code`` so callers
can branch on the cause instead of parsing the message text. Codes are members
of :class:`ErrorCode`, a ``str`` enum, so ``exc.string_code == "tooManyColumns"``
holds as well as ``exc.string_code is ErrorCode.TOO_MANY_COLUMNS``.
"""

from enum import Enum
from typing import Dict, Optional


class ErrorCode(str, Enum):
    """Machine-readable error codes shared by all library exceptions."""

    INVALID_IDENTIFIER = "invalidIdentifier"
    PRIMARY_KEY_NOT_IN_COLUMNS = "primaryKeyNotInColumns"
    PRIMARY_KEY_ON_NULLABLE_COLUMN = "primaryKeyOnNullableColumn"
    TOO_MANY_COLUMNS = "tooManyColumns"
    DUPLICATE_COLUMN_NAME = "duplicateColumnName"
    INVALID_TYPE = "invalidType"
    INVALID_TABLE_DISTRIBUTION = "invalidTableDistribution"
    INVALID_TABLE_INDEX = "invalidTableIndex"
    TABLE_NOT_EXISTS = "tableNotExists"
    UNSUPPORTED_OPERATION = "unsupportedOperation"


class TableBackendUtilsError(Exception):
    """
    Base exception for all table-backend-utils errors.

    Args:
        message: Human readable description
        string_code: Stable machine-readable code
        previous: Underlying error, if any
    """

    def __init__(
        self,
        message: str,
        string_code: ErrorCode,
        previous: Optional[BaseException] = None,
    ):
        self.message = message
        self.string_code = string_code
        self.previous = previous
        super().__init__(message)

    def get_string_code(self) -> str:
        return self.string_code.value

    def to_dict(self) -> Dict[str, str]:
        """Convert to structured dict for logging."""
        return {
            "error_type": type(self).__name__,
            "string_code": self.string_code.value,
            "message": self.message,
        }


class QueryBuilderException(TableBackendUtilsError):
    """Raised by query builders when a request would produce invalid SQL."""

    @classmethod
    def invalid_identifier(cls, kind: str, name: str) -> "QueryBuilderException":
        return cls(
            f"Invalid {kind} name {name}: "
            "Only alphanumeric characters dash and underscores are allowed.",
            ErrorCode.INVALID_IDENTIFIER,
        )

    @classmethod
    def primary_key_not_in_columns(cls, names: str) -> "QueryBuilderException":
        return cls(
            f"Trying to set {names} as PKs but not present in columns",
            ErrorCode.PRIMARY_KEY_NOT_IN_COLUMNS,
        )

    @classmethod
    def primary_key_on_nullable_column(cls, name: str) -> "QueryBuilderException":
        return cls(
            f"Trying to set PK on column {name} but this column is nullable",
            ErrorCode.PRIMARY_KEY_ON_NULLABLE_COLUMN,
        )


class ColumnException(TableBackendUtilsError):
    """Raised for invalid column sets (too many, duplicated, bad keys)."""

    STRING_CODE_TO_MANY_COLUMNS = ErrorCode.TOO_MANY_COLUMNS

    @classmethod
    def too_many_columns(cls, count: int, limit: int) -> "ColumnException":
        return cls(
            f"Too many columns. Maximum is {limit} columns, got {count}.",
            ErrorCode.TOO_MANY_COLUMNS,
        )


class InvalidTypeException(TableBackendUtilsError):
    """Raised when a datatype name or option is not valid for a dialect."""

    def __init__(self, message: str, previous: Optional[BaseException] = None):
        super().__init__(message, ErrorCode.INVALID_TYPE, previous)


class ReflectionException(TableBackendUtilsError):
    """Raised when catalog metadata cannot be interpreted."""


class TableNotExistsReflectionException(ReflectionException):
    """
    Raised when a reflected table cannot be resolved in the catalog.

    Args:
        schema_name: Schema or database of the missing table
        table_name: Name of the missing table
    """

    def __init__(
        self,
        schema_name: str,
        table_name: str,
        previous: Optional[BaseException] = None,
    ):
        self.schema_name = schema_name
        self.table_name = table_name
        super().__init__(
            f'Table "{schema_name}.{table_name}" does not exist.',
            ErrorCode.TABLE_NOT_EXISTS,
            previous,
        )


__all__ = [
    "ErrorCode",
    "TableBackendUtilsError",
    "QueryBuilderException",
    "ColumnException",
    "InvalidTypeException",
    "ReflectionException",
    "TableNotExistsReflectionException",
]
