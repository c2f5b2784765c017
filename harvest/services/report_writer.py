import logging
from pathlib import Path
from typing import Iterable, TextIO, Union

logger = logging.getLogger(__name__)


def format_lines(words: Iterable[tuple[str, int]]) -> list[str]:
    """Render report entries as '<token>: <count>' lines."""
    return [f"{token}: {count}" for token, count in words]


class ReportWriter:
    """Writes the ranked word list as a flat text report, one token per line."""

    def write(self, words: Iterable[tuple[str, int]], path: Union[str, Path]) -> int:
        lines = format_lines(words)
        with open(path, "w", encoding="utf-8") as f:
            self._write_lines(lines, f)
        logger.info("Wrote %s words to %s", len(lines), path)
        return len(lines)

    def write_stream(self, words: Iterable[tuple[str, int]], stream: TextIO) -> int:
        lines = format_lines(words)
        self._write_lines(lines, stream)
        return len(lines)

    @staticmethod
    def _write_lines(lines: list[str], stream: TextIO) -> None:
        for line in lines:
            stream.write(line)
            stream.write("\n")
