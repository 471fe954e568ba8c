"""
sqlstore public package initialization.
"""

from .adapter import DialectAdapter  # noqa: F401
from .dialects import EngineKind, get_dialect  # noqa: F401
from .errors import (  # noqa: F401
    ConfigurationError,
    DSNParseError,
    MalformedIntervalError,
    SQLStoreError,
    UnsupportedDialectError,
)
from .intervals import relative_timestamp  # noqa: F401
from .security.dsns import detect_binary_parameter_mode  # noqa: F401
from .store import SQLStore, StoreParams  # noqa: F401

__all__ = [
    "DialectAdapter",
    "EngineKind",
    "get_dialect",
    "relative_timestamp",
    "detect_binary_parameter_mode",
    "SQLStore",
    "StoreParams",
    "SQLStoreError",
    "ConfigurationError",
    "DSNParseError",
    "UnsupportedDialectError",
    "MalformedIntervalError",
]
