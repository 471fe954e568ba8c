"""
Dialect strategy registry.
"""

from __future__ import annotations

from ..errors import UnsupportedDialectError
from .base import Dialect, EngineKind
from .mysql import MySQLDialect
from .passthrough import PassthroughDialect
from .postgres import PostgresDialect
from .sqlite import SQLiteDialect

_DIALECTS: dict[EngineKind, type] = {
    EngineKind.POSTGRES: PostgresDialect,
    EngineKind.MYSQL: MySQLDialect,
    EngineKind.SQLITE: SQLiteDialect,
}


def get_dialect(engine: "str | EngineKind", *, strict: bool = True) -> Dialect:
    """
    Return the dialect for ``engine``.

    Unknown engines raise ``UnsupportedDialectError`` unless ``strict`` is False,
    in which case a ``PassthroughDialect`` is returned.
    """
    kind = EngineKind.parse(engine)
    if kind is None:
        if strict:
            raise UnsupportedDialectError(str(engine))
        return PassthroughDialect(str(engine))
    return _DIALECTS[kind]()


__all__ = [
    "Dialect",
    "EngineKind",
    "MySQLDialect",
    "PassthroughDialect",
    "PostgresDialect",
    "SQLiteDialect",
    "get_dialect",
]
