import re
import unicodedata
from typing import FrozenSet, Iterable, Optional

# Letters plus apostrophe; anything else rejects the whole token.
DEFAULT_ALLOWED_PATTERN = r"[a-z']+"


class TokenFilter:
    """The single predicate deciding whether a raw token is counted.

    A token is NFC-normalized and lowercased, then rejected outright if any
    character falls outside `allowed_pattern`, if it is shorter than
    `min_length`, or if it is a common word. Offending characters are never
    stripped.
    """

    def __init__(self, min_length: int = 0, common_words: Iterable[str] = (), allowed_pattern: str = DEFAULT_ALLOWED_PATTERN):
        self.min_length = min_length
        self.common_words: FrozenSet[str] = frozenset(common_words)
        self._allowed = re.compile(allowed_pattern)

    @staticmethod
    def normalize(token: str) -> str:
        return unicodedata.normalize("NFC", token).lower()

    def accept(self, token: str) -> Optional[str]:
        """Return the normalized token if it should be counted, else None."""
        normalized = self.normalize(token)
        if not normalized or not self._allowed.fullmatch(normalized):
            return None
        if len(normalized) < self.min_length:
            return None
        if normalized in self.common_words:
            return None
        return normalized

    def tokens(self, text: str) -> list[str]:
        """Split `text` on whitespace and keep the accepted, normalized tokens."""
        text = unicodedata.normalize("NFC", text)
        accepted = []
        for raw in text.split():
            token = self.accept(raw)
            if token is not None:
                accepted.append(token)
        return accepted
