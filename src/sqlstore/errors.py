"""
Error hierarchy shared across sqlstore packages.
"""

from __future__ import annotations


class SQLStoreError(RuntimeError):
    """Base error for sqlstore failures."""


class ConfigurationError(SQLStoreError):
    """Raised when store or connection configuration is invalid."""


class DSNParseError(ConfigurationError, ValueError):
    """Raised when a connection string cannot be parsed as a URL."""


class UnsupportedDialectError(SQLStoreError):
    """Raised when an operation is requested for an engine with no dialect."""

    def __init__(self, engine: str) -> None:
        super().__init__(f"Unsupported database engine: {engine!r}")
        self.engine = engine


class MalformedIntervalError(SQLStoreError, ValueError):
    """Raised when an interval string has no integer magnitude."""

    def __init__(self, interval: str, reason: str = "magnitude is not an integer") -> None:
        super().__init__(f"Malformed interval {interval!r}: {reason}")
        self.interval = interval
