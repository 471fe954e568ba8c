"""
SQLite dialect implementation.
"""

from __future__ import annotations

from typing import Final

from .base import EngineKind, check_position, rebind_qmark


class SQLiteDialect:
    """
    SQLite dialect sharing the dollar-numbered placeholders used for Postgres.
    """

    name: Final[str] = "sqlite3"
    engine: Final[EngineKind] = EngineKind.SQLITE
    placeholder_style: Final[str] = "dollar"

    def quote_identifier(self, identifier: str) -> str:
        escaped = identifier.replace('"', '""')
        return f'"{escaped}"'

    def format_table(self, table_name: str, prefix: str = "") -> str:
        return self.quote_identifier(prefix + table_name)

    def parameter_placeholder(self, position: int) -> str:
        return f"${check_position(position)}"

    def concat_aggregate(self, field: str, delimiter: str) -> str:
        # group_concat takes no separator argument here and always joins with ",".
        return f"group_concat({field})"

    def contains_predicate(self, position: int, column: str) -> str:
        return f"instr({column}, {self.parameter_placeholder(position)}) > 0"

    def rebind(self, sql: str) -> str:
        return rebind_qmark(sql, self.parameter_placeholder)
