from typing import NamedTuple

from harvest.domain.word_frequency import WordFrequency


class ExtractedPage(NamedTuple):
    """Tokens and outbound links found on one fetched page."""
    token_counts: WordFrequency
    links: list[str]
