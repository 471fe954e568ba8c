"""
MySQL dialect implementation.
"""

from __future__ import annotations

from typing import Final

from .base import EngineKind, check_position, quote_literal


class MySQLDialect:
    """
    MySQL dialect using positional question-mark placeholders.
    """

    name: Final[str] = "mysql"
    engine: Final[EngineKind] = EngineKind.MYSQL
    placeholder_style: Final[str] = "qmark"

    def quote_identifier(self, identifier: str) -> str:
        escaped = identifier.replace("`", "``")
        return f"`{escaped}`"

    def format_table(self, table_name: str, prefix: str = "") -> str:
        if "." in table_name:
            schema, table = table_name.split(".", 1)
            return f"{self.quote_identifier(schema)}.{self.quote_identifier(prefix + table)}"
        return self.quote_identifier(prefix + table_name)

    def parameter_placeholder(self, position: int) -> str:
        # The ordinal is only validated; MySQL binds strictly by order.
        check_position(position)
        return "?"

    def concat_aggregate(self, field: str, delimiter: str) -> str:
        return f"GROUP_CONCAT({field} SEPARATOR {quote_literal(delimiter)})"

    def contains_predicate(self, position: int, column: str) -> str:
        return f"instr({column}, {self.parameter_placeholder(position)}) > 0"

    def rebind(self, sql: str) -> str:
        return sql
