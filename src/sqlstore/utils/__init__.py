"""
Utility helpers shared across sqlstore packages.
"""

from .logging import (
    configure_logging,
    correlation_scope,
    get_correlation_id,
    get_logger,
    new_correlation_id,
)

__all__ = [
    "configure_logging",
    "correlation_scope",
    "get_correlation_id",
    "get_logger",
    "new_correlation_id",
]
