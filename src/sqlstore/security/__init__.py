"""Security helpers for sqlstore."""

from .dsns import DSNConfig, detect_binary_parameter_mode, parse_dsn

__all__ = ["DSNConfig", "detect_binary_parameter_mode", "parse_dsn"]
