"""
Permissive dialect for engines without a dedicated strategy.
"""

from __future__ import annotations

from typing import Final


class PassthroughDialect:
    """
    Returns sentinel values so callers can detect the missing dialect themselves.

    Identifiers pass through unquoted; every other fragment is the empty string.
    """

    engine: Final[None] = None
    placeholder_style: Final[str] = ""

    def __init__(self, name: str) -> None:
        self.name = name

    def quote_identifier(self, identifier: str) -> str:
        return identifier

    def format_table(self, table_name: str, prefix: str = "") -> str:
        return prefix + table_name

    def parameter_placeholder(self, position: int) -> str:
        return ""

    def concat_aggregate(self, field: str, delimiter: str) -> str:
        return ""

    def contains_predicate(self, position: int, column: str) -> str:
        return ""

    def rebind(self, sql: str) -> str:
        return sql

    def __repr__(self) -> str:
        return f"PassthroughDialect(name={self.name!r})"
