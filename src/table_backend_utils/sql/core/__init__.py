"""Core SQL utilities package."""

from .identifier import qualify_table, quote_identifier, quote_literal, unquote_identifier

__all__ = [
    "quote_identifier",
    "unquote_identifier",
    "quote_literal",
    "qualify_table",
]
