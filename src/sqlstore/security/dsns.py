"""DSN parsing, redaction and engine flag detection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import parse_qs, urlencode, urlparse

from ..dialects.base import EngineKind
from ..errors import DSNParseError
from .redaction import redact_query_params


@dataclass(frozen=True)
class DSNConfig:
    driver: str
    username: Optional[str]
    password: Optional[str]
    host: Optional[str]
    port: Optional[int]
    database: Optional[str]
    path: str
    query: dict[str, str]

    def redacted(self) -> str:
        """
        Return the DSN with credentials redacted but structure preserved.
        """

        netloc = ""
        if self.username:
            netloc += self.username
            if self.password:
                netloc += ":***"
            netloc += "@"
        if self.host:
            netloc += self.host
        if self.port:
            netloc += f":{self.port}"

        query_string = urlencode(redact_query_params(self.query)) if self.query else ""

        # Build manually so we retain the double slash prefix even when netloc is empty
        result = f"{self.driver}://"
        if netloc:
            result += netloc
        result += self.path or ""
        if query_string:
            result += f"?{query_string}"
        return result


def parse_dsn(dsn: str) -> DSNConfig:
    """
    Parse a URL-style connection string.

    Raises ``DSNParseError`` when the string has no scheme or its host/port part is invalid.
    """
    try:
        parsed = urlparse(dsn)
        port = parsed.port
    except ValueError as exc:
        raise DSNParseError(f"Cannot parse connection string: {exc}") from exc
    if not parsed.scheme:
        raise DSNParseError("Connection string is missing a scheme (e.g. postgres://...)")
    # Only the first value of a repeated key is kept.
    query = {k: v[0] for k, v in parse_qs(parsed.query, keep_blank_values=True).items()}
    return DSNConfig(
        driver=parsed.scheme,
        username=parsed.username,
        password=parsed.password,
        host=parsed.hostname,
        port=port,
        database=parsed.path.lstrip("/") or None,
        path=parsed.path or "",
        query=query,
    )


def detect_binary_parameter_mode(engine: "str | EngineKind", dsn: str) -> bool:
    """
    Return whether a Postgres DSN asks for binary parameter transmission.

    Only ``binary_parameters=yes`` enables it. Other engines are never parsed.
    """
    if EngineKind.parse(engine) is not EngineKind.POSTGRES:
        return False
    return parse_dsn(dsn).query.get("binary_parameters") == "yes"
