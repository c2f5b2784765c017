import logging
from typing import Callable, Optional

from harvest.domain.config import CrawlConfig
from harvest.domain.crawl_context import CrawlContext
from harvest.domain.crawl_result import CrawlResult
from harvest.domain.word_frequency import WordFrequency
from harvest.exceptions import FetchError, InvalidUrlError, PageParseError
from harvest.services.common_words import CommonWordsLoader
from harvest.services.crawl_policy import CrawlPolicy
from harvest.services.fetcher import Fetcher
from harvest.services.fetcher_factory import FetcherFactory
from harvest.services.link_processor import LinkProcessor
from harvest.services.page_extractor import PageExtractor
from harvest.services.token_filter import TokenFilter
from harvest.services.url_utils import normalize_url

logger = logging.getLogger(__name__)


class CrawlExecutor:
    """Executes a crawl given configured collaborators.

    This class owns the crawl control-flow: a synchronous depth-first
    recursion where each call fetches one page, tokenizes it and merges the
    frequency maps returned by its children. It intentionally does NOT
    construct dependencies (that stays in the DI layer).
    """

    def __init__(
        self,
        *,
        fetcher_factory: FetcherFactory,
        page_extractor: PageExtractor,
        link_processor: LinkProcessor,
        common_words_loader: CommonWordsLoader,
        crawl_policy: Optional[CrawlPolicy] = None,
        token_filter_factory: Callable[..., TokenFilter] = TokenFilter,
    ):
        self.fetcher_factory = fetcher_factory
        self.page_extractor = page_extractor
        self.link_processor = link_processor
        self.common_words_loader = common_words_loader
        self.crawl_policy = crawl_policy or link_processor.crawl_policy
        self.token_filter_factory = token_filter_factory

    def new_context(self, config: CrawlConfig) -> CrawlContext:
        """Load per-crawl resources once. Raises ResourceError if the word list is missing."""
        common_words = self.common_words_loader.load(config.common_words_path, config.common_word_limit)
        return CrawlContext(config, common_words=common_words)

    def crawl(self, seed_url: str, config: CrawlConfig) -> CrawlResult:
        """Crawl from `seed_url` and return the ranked report.

        Raises InvalidUrlError for a bad seed, ResourceError for a missing
        common-word list and FetchError if the seed itself cannot be fetched.
        Failures below the seed only drop the affected branch.
        """
        context = self.new_context(config)
        frequencies = self.crawl_frequencies(seed_url, context)
        logger.info(
            "Crawl of %s finished: %s pages fetched, %s failed, %s distinct tokens",
            context.seed_url,
            context.pages_crawled,
            context.pages_failed,
            len(frequencies),
        )
        return CrawlResult(
            words=frequencies.ranked(config.min_count),
            pages_crawled=context.pages_crawled,
            pages_failed=context.pages_failed,
        )

    def crawl_frequencies(self, seed_url: str, context: CrawlContext) -> WordFrequency:
        if context is None or context.config is None:
            raise ValueError("context.config is required for crawl")
        seed = normalize_url(seed_url)
        context.set_seed(seed)
        fetcher = self.fetcher_factory.get(context.config)
        token_filter = self.token_filter_factory(
            min_length=context.config.min_length,
            common_words=context.common_words,
        )
        return self.crawl_from(seed, 0, context, fetcher, token_filter)

    def crawl_from(self, url: str, depth: int, context: CrawlContext, fetcher: Fetcher, token_filter: TokenFilter) -> WordFrequency:
        """Fetch `url` and everything reachable from it within the depth limit.

        Errors for `url` itself propagate; errors in child branches are
        absorbed by `_crawl_child`.
        """
        url = normalize_url(url)
        if self.crawl_policy.should_skip_due_to_depth(depth, context.max_depth):
            return WordFrequency()
        if not context.mark_if_new(url):
            logger.debug("Skipping (visited) %s", url)
            return WordFrequency()

        response = fetcher.fetch(url)
        page_url = self._final_url(url, response)
        if page_url != url and not context.mark_if_new(page_url):
            logger.debug("Skipping %s: redirected to already visited %s", url, page_url)
            return WordFrequency()
        context.pages_crawled += 1

        if not response.is_html():
            logger.debug("Not tokenizing %s: content type %s", page_url, response.content_type)
            return WordFrequency()

        page = self.page_extractor.extract(response.text, page_url, token_filter)
        logger.info(
            "Fetched %s at depth %s -> %s tokens, %s links",
            page_url,
            depth,
            len(page.token_counts),
            len(page.links),
        )

        local = page.token_counts

        def cb(link_url, next_depth):
            local.merge(self._crawl_child(link_url, next_depth, context, fetcher, token_filter))

        self.link_processor.process(page_url, page.links, context, depth, crawl_callback=cb)
        return local

    @staticmethod
    def _final_url(url: str, response) -> str:
        """Where the body actually came from; relative links resolve against it."""
        if not response.url:
            return url
        try:
            return normalize_url(response.url)
        except InvalidUrlError:
            return url

    def _crawl_child(self, url: str, depth: int, context: CrawlContext, fetcher: Fetcher, token_filter: TokenFilter) -> WordFrequency:
        try:
            return self.crawl_from(url, depth, context, fetcher, token_filter)
        except InvalidUrlError as e:
            logger.warning("Skipping invalid link: %s", e)
        except FetchError as e:
            logger.warning("Fetch failed for %s: %s", e.url, e)
        except PageParseError as e:
            logger.warning("Skipping unparseable page %s: %s", e.url, e.original)
        context.pages_failed += 1
        return WordFrequency()
