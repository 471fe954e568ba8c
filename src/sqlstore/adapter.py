"""
Dialect adapter translating logical SQL fragments into engine syntax.
"""

from __future__ import annotations

from datetime import datetime

from .dialects import Dialect, EngineKind, get_dialect
from .intervals import relative_timestamp
from .security.dsns import detect_binary_parameter_mode


class DialectAdapter:
    """
    Produces engine-correct SQL fragments for a fixed database engine.

    The engine and the flags derived from the connection string are resolved
    once at construction; afterwards the adapter is read-only and may be shared
    between threads freely.

    With ``strict=False`` an unrecognized engine is accepted and every fragment
    degrades to a sentinel (empty string, or the identifier unquoted).
    """

    __slots__ = ("_dialect", "_engine", "_binary_parameters", "_strict")

    def __init__(
        self,
        engine: "str | EngineKind",
        connection_string: str = "",
        *,
        strict: bool = True,
    ) -> None:
        self._dialect = get_dialect(engine, strict=strict)
        self._engine = self._dialect.engine if self._dialect.engine is not None else str(engine)
        self._binary_parameters = detect_binary_parameter_mode(engine, connection_string)
        self._strict = strict

    @property
    def engine(self) -> "EngineKind | str":
        return self._engine

    @property
    def dialect(self) -> Dialect:
        return self._dialect

    @property
    def binary_parameters(self) -> bool:
        return self._binary_parameters

    @property
    def placeholder_style(self) -> str:
        return self._dialect.placeholder_style

    @property
    def strict(self) -> bool:
        return self._strict

    def quote_identifier(self, name: str) -> str:
        return self._dialect.quote_identifier(name)

    def parameter_placeholder(self, position: int) -> str:
        return self._dialect.parameter_placeholder(position)

    def concat_aggregate(self, field: str, delimiter: str) -> str:
        return self._dialect.concat_aggregate(field, delimiter)

    def contains_predicate(self, position: int, column: str) -> str:
        return self._dialect.contains_predicate(position, column)

    def format_table(self, table_name: str, prefix: str = "") -> str:
        return self._dialect.format_table(table_name, prefix)

    def rebind(self, sql: str) -> str:
        return self._dialect.rebind(sql)

    @staticmethod
    def relative_timestamp(interval: str, *, now: datetime | None = None) -> str:
        return relative_timestamp(interval, now=now)

    def _key(self) -> tuple:
        return (self._engine, self._binary_parameters, self._strict)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DialectAdapter):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"DialectAdapter(engine={self._dialect.name!r}, "
            f"binary_parameters={self._binary_parameters})"
        )
