"""
Dialect strategy interfaces describing engine-specific SQL fragments.
"""

from __future__ import annotations

import enum
from typing import Callable, Protocol

_ENGINE_ALIASES = {
    "postgres": "postgres",
    "postgresql": "postgres",
    "mysql": "mysql",
    "sqlite": "sqlite3",
    "sqlite3": "sqlite3",
}


class EngineKind(str, enum.Enum):
    """
    Database engines with a dedicated dialect.
    """

    POSTGRES = "postgres"
    MYSQL = "mysql"
    SQLITE = "sqlite3"

    @classmethod
    def parse(cls, tag: "str | EngineKind | None") -> "EngineKind | None":
        """
        Resolve an engine tag (``postgresql``, ``sqlite`` and friends) or ``None`` if unknown.
        """
        if isinstance(tag, EngineKind):
            return tag
        if not tag:
            return None
        canonical = _ENGINE_ALIASES.get(str(tag).strip().lower())
        if canonical is None:
            return None
        return cls(canonical)


class Dialect(Protocol):
    """
    Strategy interface consumed by the adapter and store layers.
    """

    @property
    def name(self) -> str: ...

    @property
    def engine(self) -> EngineKind | None: ...

    @property
    def placeholder_style(self) -> str: ...

    def quote_identifier(self, identifier: str) -> str: ...

    def format_table(self, table_name: str, prefix: str = "") -> str: ...

    def parameter_placeholder(self, position: int) -> str: ...

    def concat_aggregate(self, field: str, delimiter: str) -> str: ...

    def contains_predicate(self, position: int, column: str) -> str: ...

    def rebind(self, sql: str) -> str: ...


def check_position(position: int) -> int:
    if position < 1:
        raise ValueError(f"Parameter positions are 1-based, got {position}")
    return position


def quote_literal(value: str) -> str:
    escaped = value.replace("'", "''")
    return f"'{escaped}'"


def _skip_to(sql: str, start: int, terminator: str, *, inclusive: bool = True) -> int:
    end = sql.find(terminator, start)
    if end == -1:
        return len(sql)
    return end + len(terminator) if inclusive else end


def rebind_qmark(sql: str, placeholder: Callable[[int], str]) -> str:
    """
    Rewrite ``?`` markers into ``placeholder(n)``.

    Quoted literals and identifiers, ``--`` line comments and ``/* */`` block
    comments are copied untouched. ``??`` produces a literal ``?`` (for
    operators such as jsonb ``?``).
    """
    parts: list[str] = []
    count = 0
    idx = 0
    length = len(sql)
    while idx < length:
        char = sql[idx]
        if char in ("'", '"', "`"):
            end = _skip_to(sql, idx + 1, char)
        elif sql.startswith("--", idx):
            end = _skip_to(sql, idx + 2, "\n", inclusive=False)
        elif sql.startswith("/*", idx):
            end = _skip_to(sql, idx + 2, "*/")
        elif sql.startswith("??", idx):
            parts.append("?")
            idx += 2
            continue
        elif char == "?":
            count += 1
            parts.append(placeholder(count))
            idx += 1
            continue
        else:
            end = idx + 1
        parts.append(sql[idx:end])
        idx = end
    return "".join(parts)
