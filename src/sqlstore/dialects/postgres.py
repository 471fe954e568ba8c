"""
PostgreSQL dialect implementation.
"""

from __future__ import annotations

from typing import Final

from .base import EngineKind, check_position, quote_literal, rebind_qmark


class PostgresDialect:
    """
    PostgreSQL dialect using dollar-numbered parameters.
    """

    name: Final[str] = "postgres"
    engine: Final[EngineKind] = EngineKind.POSTGRES
    placeholder_style: Final[str] = "dollar"

    def quote_identifier(self, identifier: str) -> str:
        escaped = identifier.replace('"', '""')
        return f'"{escaped}"'

    def format_table(self, table_name: str, prefix: str = "") -> str:
        if "." in table_name:
            schema, table = table_name.split(".", 1)
            return f"{self.quote_identifier(schema)}.{self.quote_identifier(prefix + table)}"
        return self.quote_identifier(prefix + table_name)

    def parameter_placeholder(self, position: int) -> str:
        return f"${check_position(position)}"

    def concat_aggregate(self, field: str, delimiter: str) -> str:
        return f"string_agg({field}, {quote_literal(delimiter)})"

    def contains_predicate(self, position: int, column: str) -> str:
        return f"position({self.parameter_placeholder(position)} in {column}) > 0"

    def rebind(self, sql: str) -> str:
        return rebind_qmark(sql, self.parameter_placeholder)
