"""
SQL store host owning a connection handle and its dialect adapter.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from .adapter import DialectAdapter
from .errors import ConfigurationError, DSNParseError, UnsupportedDialectError
from .security.dsns import parse_dsn
from .utils import correlation_scope, get_logger, new_correlation_id


@dataclass
class StoreParams:
    """
    Construction parameters for ``SQLStore``.

    ``db`` is an already opened DB-API connection; the store never opens one itself.
    """

    db_type: str
    connection_string: str
    db: Any = None
    table_prefix: str = ""
    is_plugin: bool = False
    is_single_user: bool = False
    strict_dialect: bool = True
    correlation_id: str | None = None

    def check_valid(self) -> None:
        if not self.db_type:
            raise ConfigurationError("db_type is required")
        if not self.connection_string:
            raise ConfigurationError("connection_string is required")
        if self.db is None:
            raise ConfigurationError("db handle is required")

    @classmethod
    def from_env(cls, db: Any, *, prefix: str = "SQLSTORE_", **kwargs: Any) -> "StoreParams":
        """
        Build params from ``<prefix>DBTYPE``, ``<prefix>DBCONFIG`` and ``<prefix>TABLE_PREFIX``.
        """

        values = {}
        for key in ("DBTYPE", "DBCONFIG"):
            value = os.getenv(prefix + key)
            if not value:
                raise ConfigurationError(f"Environment variable {prefix + key} is not set")
            values[key] = value
        return cls(
            db_type=values["DBTYPE"],
            connection_string=values["DBCONFIG"],
            db=db,
            table_prefix=os.getenv(prefix + "TABLE_PREFIX", ""),
            **kwargs,
        )


class SQLStore:
    """
    SQL-backed store. Query construction happens elsewhere; the store supplies
    the connection handle and the dialect used to render engine-specific SQL.

    Everything the store logs is tagged with its ``correlation_id``; wrap
    caller-side logging in ``log_context()`` to share it.
    """

    def __init__(self, params: StoreParams) -> None:
        params.check_valid()
        self.logger = get_logger("store")
        self.correlation_id = params.correlation_id or new_correlation_id()

        with self.log_context():
            self.logger.info(
                "connectDatabase dbType=%s dsn=%s",
                params.db_type,
                _safe_dsn(params.connection_string),
            )
            try:
                self.dialect = DialectAdapter(
                    params.db_type, params.connection_string, strict=params.strict_dialect
                )
            except DSNParseError:
                self.logger.error("Cannot compute binary parameter", exc_info=True)
                raise
            except UnsupportedDialectError:
                self.logger.error("No dialect for dbType=%s", params.db_type)
                raise

        self._db = params.db
        self._db_type = params.db_type
        self.table_prefix = params.table_prefix
        self.is_plugin = params.is_plugin
        self.is_single_user = params.is_single_user

    @property
    def db_type(self) -> str:
        return self._db_type

    @property
    def is_binary_param(self) -> bool:
        return self.dialect.binary_parameters

    def log_context(self):
        return correlation_scope(self.correlation_id)

    def db_handle(self) -> Any:
        """
        Return the raw connection handle for callers running their own SQL.
        """

        if self._db is None:
            raise ConfigurationError("Store has been shut down.")
        return self._db

    def table(self, name: str) -> str:
        return self.dialect.format_table(name, self.table_prefix)

    def shutdown(self) -> None:
        if self._db is None:
            return
        with self.log_context():
            try:
                self._db.close()
            finally:
                self._db = None
                self.logger.info("Store connection closed")


def _safe_dsn(dsn: str) -> str:
    # Driver-native strings such as "user:pw@tcp(host)/db" have no "//" and
    # urlparse would take the user name for the scheme.
    try:
        config = parse_dsn(dsn)
    except DSNParseError:
        return "<unparsable>"
    if "//" not in dsn:
        return "<unparsable>"
    return config.redacted()
