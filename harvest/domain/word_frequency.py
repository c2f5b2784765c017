from __future__ import annotations

from typing import Iterable, Iterator, Optional


class WordFrequency:
    """Token -> occurrence count, accumulated across the pages of one crawl.

    Counts only ever grow. Merging is a per-token sum, so the order in which
    branch results are merged does not affect the totals.
    """

    def __init__(self, counts: Optional[dict[str, int]] = None):
        self._counts: dict[str, int] = {}
        if counts:
            for token, count in counts.items():
                self.add(token, count)

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> "WordFrequency":
        freq = cls()
        for token in tokens:
            freq.add(token)
        return freq

    def add(self, token: str, count: int = 1) -> None:
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        if count == 0:
            return
        self._counts[token] = self._counts.get(token, 0) + count

    def merge(self, other: "WordFrequency") -> "WordFrequency":
        """Add every count from `other` into this map and return self."""
        for token, count in other.items():
            self.add(token, count)
        return self

    def __add__(self, other: "WordFrequency") -> "WordFrequency":
        if not isinstance(other, WordFrequency):
            return NotImplemented
        return WordFrequency(self._counts).merge(other)

    def ranked(self, min_count: Optional[int] = None) -> list[tuple[str, int]]:
        """Return (token, count) pairs by descending count, ties broken alphabetically."""
        entries = [
            (token, count)
            for token, count in self._counts.items()
            if min_count is None or count >= min_count
        ]
        entries.sort(key=lambda entry: (-entry[1], entry[0]))
        return entries

    def items(self):
        return self._counts.items()

    def as_dict(self) -> dict[str, int]:
        return dict(self._counts)

    def __getitem__(self, token: str) -> int:
        return self._counts.get(token, 0)

    def __contains__(self, token: object) -> bool:
        return token in self._counts

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, WordFrequency):
            return self._counts == other._counts
        if isinstance(other, dict):
            return self._counts == other
        return NotImplemented

    def __repr__(self):
        return f"<WordFrequency tokens={len(self._counts)}>"
