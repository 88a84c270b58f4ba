"""
SQL identifier and literal quoting utilities.

Two quoting families are supported:
- bracket dialects (Synapse): ``[name]``, embedded ``]`` doubled
- quote-mark dialects (Teradata, Exasol, Snowflake): ``"name"``, embedded
  ``"`` doubled

String literals are always single-quoted with embedded ``'`` doubled.
Snowflake additionally treats backslash as an escape character inside string
literals, so backslashes are doubled there.
"""

from typing import Optional

BRACKET_DIALECTS = ("synapse",)
BACKSLASH_ESCAPING_DIALECTS = ("snowflake",)


def quote_identifier(name: str, dialect: str) -> str:
    """
    Quote a SQL identifier (schema, table or column name).

    Args:
        name: The identifier to quote
        dialect: Database dialect ("synapse", "teradata", "exasol", "snowflake")

    Returns:
        Properly quoted identifier

    Examples:
        >>> quote_identifier("col1", "synapse")
        '[col1]'
        >>> quote_identifier("we]ird", "synapse")
        '[we]]ird]'
        >>> quote_identifier('my"col', "teradata")
        '"my""col"'
    """
    if dialect in BRACKET_DIALECTS:
        escaped = name.replace("]", "]]")
        return f"[{escaped}]"
    escaped = name.replace('"', '""')
    return f'"{escaped}"'


def unquote_identifier(quoted: str, dialect: str) -> str:
    """
    Reverse :func:`quote_identifier`.

    Raises:
        ValueError: If ``quoted`` is not wrapped in the dialect's quote characters
    """
    if dialect in BRACKET_DIALECTS:
        opening, closing = "[", "]"
    else:
        opening, closing = '"', '"'
    if len(quoted) < 2 or quoted[0] != opening or quoted[-1] != closing:
        raise ValueError(f"Identifier {quoted} is not quoted for dialect {dialect}")
    return quoted[1:-1].replace(closing * 2, closing)


def quote_literal(value: str, dialect: str) -> str:
    """
    Quote a SQL string literal.

    Examples:
        >>> quote_literal("it's", "exasol")
        "'it''s'"
        >>> quote_literal("%orders%", "snowflake")
        "'%orders%'"
    """
    escaped = value
    if dialect in BACKSLASH_ESCAPING_DIALECTS:
        escaped = escaped.replace("\\", "\\\\")
    escaped = escaped.replace("'", "''")
    return f"'{escaped}'"


def qualify_table(table: str, schema: Optional[str], dialect: str) -> str:
    """
    Create a fully qualified, quoted table name.

    Examples:
        >>> qualify_table("t", "schemaA", "synapse")
        '[schemaA].[t]'
        >>> qualify_table("t", "db", "teradata")
        '"db"."t"'
        >>> qualify_table("t", None, "exasol")
        '"t"'
    """
    quoted_table = quote_identifier(table, dialect)
    if schema:
        return f"{quote_identifier(schema, dialect)}.{quoted_table}"
    return quoted_table
