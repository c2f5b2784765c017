import logging
import os
from pathlib import Path
from typing import FrozenSet, Optional

from harvest.exceptions import ResourceError

logger = logging.getLogger(__name__)

PACKAGE_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class CommonWordsLoader:
    """Loads the common-word dictionary used to filter uninteresting tokens.

    The file is newline-delimited, one lowercase word per line. Only the first
    `limit` non-blank entries are kept. A relative path is looked up in the
    working directory first, then in the bundled data directory.
    """

    def __init__(self, data_dir: Optional[Path] = None):
        self.data_dir = Path(data_dir) if data_dir is not None else PACKAGE_DATA_DIR

    def resolve_path(self, path: str) -> Path:
        candidate = Path(path)
        if candidate.is_absolute() or candidate.exists():
            return candidate
        bundled = self.data_dir / candidate
        if bundled.exists():
            return bundled
        return candidate

    def load(self, path: str, limit: int) -> FrozenSet[str]:
        resolved = self.resolve_path(path)
        if not resolved.is_file():
            raise ResourceError(os.fspath(resolved))
        words = []
        try:
            with open(resolved, "r", encoding="utf-8") as f:
                for line in f:
                    if len(words) >= limit:
                        break
                    word = line.strip().lower()
                    if word:
                        words.append(word)
        except (OSError, UnicodeDecodeError) as e:
            raise ResourceError(os.fspath(resolved), f"unreadable: {e}") from e

        logger.debug("Loaded %s common words from %s", len(words), resolved)
        return frozenset(words)
