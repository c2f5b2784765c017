from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from harvest.exceptions import ConfigError

# Each hop is one Python stack frame in the recursive crawl.
MAX_SUPPORTED_DEPTH = 200


@dataclass(frozen=True)
class CrawlConfig:
    """Settings for a single crawl.

    Built once at startup and threaded explicitly through the crawl; nothing
    mutates it afterwards. `headers` is an ordered sequence of (name, value)
    pairs so a header name may repeat.
    """

    max_depth: int
    common_word_limit: int
    follow_offsite: bool = False
    min_length: int = 3
    user_agent: Optional[str] = None
    headers: tuple[tuple[str, str], ...] = field(default_factory=tuple)
    min_count: Optional[int] = None
    common_words_path: str = "common_words.txt"

    def __post_init__(self):
        _require_non_negative_int("max_depth", self.max_depth)
        _require_non_negative_int("common_word_limit", self.common_word_limit)
        _require_non_negative_int("min_length", self.min_length)
        if self.min_count is not None:
            _require_non_negative_int("min_count", self.min_count)
        if self.max_depth > MAX_SUPPORTED_DEPTH:
            raise ConfigError(f"max_depth must be at most {MAX_SUPPORTED_DEPTH}, got {self.max_depth}")
        # Accept lists from callers but store an immutable tuple.
        object.__setattr__(self, "headers", tuple((str(n), str(v)) for n, v in self.headers))

    def header_dict(self) -> dict[str, str]:
        """Collapse the ordered headers into a mapping, joining repeated names with ', '."""
        merged: dict[str, str] = {}
        lookup: dict[str, str] = {}
        for name, value in self.headers:
            key = lookup.setdefault(name.lower(), name)
            if key in merged:
                merged[key] = f"{merged[key]}, {value}"
            else:
                merged[key] = value
        return merged


def _require_non_negative_int(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(f"{name} must be a non-negative integer, got {value!r}")
