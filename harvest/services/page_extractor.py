import logging
from typing import Callable, Iterator, Optional

from bs4 import BeautifulSoup, NavigableString, ParserRejectedMarkup, Tag
from bs4.element import PreformattedString

from harvest.domain.page import ExtractedPage
from harvest.domain.word_frequency import WordFrequency
from harvest.exceptions import PageParseError
from harvest.services.token_filter import TokenFilter
from harvest.services.url_utils import resolve_link

logger = logging.getLogger(__name__)

# Elements whose own text is counted. Everything else (script, style,
# noscript, template, div, nav, ...) is never scanned directly.
CONTENT_TAGS = (
    'h1', 'h2', 'h3', 'h4', 'h5', 'h6',   # Headings
    'p', 'blockquote', 'q', 'cite',       # Prose and quotations
    'li', 'dt', 'dd',                     # Lists
    'td', 'th', 'caption',                # Tables
    'pre', 'code',                        # Code
    'em', 'strong', 'b', 'i', 'span',     # Inline emphasis
    'a', 'title', 'label', 'figcaption',
)


class PageExtractor:
    """Turns one fetched HTML page into token counts and candidate outbound links.

    Each content element contributes only its own text nodes, so text nested
    in several allowed elements is counted once. Links are resolved against
    the page URL; the crawl executor decides which of them to follow.
    """

    def __init__(
        self,
        soup_factory: Optional[Callable[[str], BeautifulSoup]] = None,
        content_tags: tuple[str, ...] = CONTENT_TAGS,
    ):
        self._soup_factory = soup_factory or (lambda html: BeautifulSoup(html, "html.parser"))
        self._content_tags = list(content_tags)

    def extract(self, body: Optional[str], base_url: str, token_filter: TokenFilter) -> ExtractedPage:
        if not body:
            return ExtractedPage(WordFrequency(), [])

        try:
            soup = self._soup_factory(body)
        except ParserRejectedMarkup as e:
            raise PageParseError(base_url, e) from e
        counts = WordFrequency()
        for element in soup.find_all(self._content_tags):
            for text in self._own_text(element):
                for token in token_filter.tokens(text):
                    counts.add(token)

        return ExtractedPage(counts, self.extract_links(soup, base_url))

    def extract_links(self, soup: BeautifulSoup, base_url: str) -> list[str]:
        links: list[str] = []
        seen: set[str] = set()
        for a in soup.find_all("a", href=True):
            resolved = resolve_link(base_url, a.get("href"))
            if resolved is None:
                logger.debug("Dropping unresolvable link %r on %s", a.get("href"), base_url)
                continue
            if resolved in seen:
                continue
            seen.add(resolved)
            links.append(resolved)
        return links

    @staticmethod
    def _own_text(element: Tag) -> Iterator[str]:
        for child in element.children:
            # Comments, CDATA, doctypes etc. are PreformattedString subclasses
            if isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
                yield str(child)
