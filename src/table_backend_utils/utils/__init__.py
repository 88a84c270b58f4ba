"""Shared utilities."""

from .logging import bind_context, get_logger, sanitize_for_logging
from .rows import row_value, to_bool, to_int, to_str

__all__ = [
    "get_logger",
    "bind_context",
    "sanitize_for_logging",
    "row_value",
    "to_bool",
    "to_int",
    "to_str",
]
