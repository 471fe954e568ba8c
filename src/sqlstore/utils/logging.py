"""Logging helpers for sqlstore.

Records emitted under the ``sqlstore`` logger carry a ``correlation_id``
attribute. A store binds its own id around everything it logs, and callers can
do the same through ``correlation_scope`` so their query logs line up with it.
"""

from __future__ import annotations

import logging
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

UNBOUND_CORRELATION_ID = "-"

_correlation_id: ContextVar[str | None] = ContextVar("sqlstore_correlation_id", default=None)


class CorrelationIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id()
        return True


def configure_logging(level: int = logging.INFO) -> None:
    logger = logging.getLogger("sqlstore")
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)s | %(correlation_id)s | %(name)s | %(message)s")
    )
    handler.addFilter(CorrelationIdFilter())
    logger.addHandler(handler)
    logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(f"sqlstore.{name}")


def new_correlation_id() -> str:
    return uuid.uuid4().hex


def get_correlation_id() -> str:
    return _correlation_id.get() or UNBOUND_CORRELATION_ID


@contextmanager
def correlation_scope(value: Optional[str] = None) -> Iterator[str]:
    """
    Bind ``value`` (or a fresh id) as the correlation id until the block exits.
    """
    bound = value or new_correlation_id()
    token = _correlation_id.set(bound)
    try:
        yield bound
    finally:
        _correlation_id.reset(token)
