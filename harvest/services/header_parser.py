import re
from typing import Iterable

from harvest.exceptions import ConfigError

# RFC 7230 token characters
_HEADER_NAME = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")
_FORBIDDEN_VALUE_CHARS = ("\r", "\n", "\0")


def parse_header(raw: str) -> tuple[str, str]:
    """Parse a 'Name: Value' string into a (name, value) pair."""
    if not isinstance(raw, str) or ":" not in raw:
        raise ConfigError(f"Malformed header {raw!r}: expected 'Name: Value'")
    name, value = raw.split(":", 1)
    name = name.strip()
    value = value.strip()
    if not _HEADER_NAME.fullmatch(name):
        raise ConfigError(f"Invalid header name {name!r}")
    if any(c in value for c in _FORBIDDEN_VALUE_CHARS):
        raise ConfigError(f"Invalid value for header {name!r}")
    return name, value


def parse_headers(raw_headers: Iterable[str]) -> tuple[tuple[str, str], ...]:
    return tuple(parse_header(raw) for raw in raw_headers or ())
