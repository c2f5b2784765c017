import logging
from typing import Callable

from harvest.domain.crawl_context import CrawlContext
from harvest.services.crawl_policy import CrawlPolicy

logger = logging.getLogger(__name__)


class LinkProcessor:
    def __init__(self, crawl_policy: CrawlPolicy):
        self.crawl_policy = crawl_policy

    def process(self, page_url: str, links: list[str], context: CrawlContext, depth: int, crawl_callback: Callable[[str, int], None]) -> int:
        """Schedule crawling of the in-scope `links` found on `page_url`.

        `crawl_callback(link_url, next_depth)` is invoked in link order for
        every accepted link. Returns the number of links scheduled.
        """
        if not self.crawl_policy.should_expand(depth, context.max_depth):
            logger.debug("Not following %s links from %s at depth %s", len(links), page_url, depth)
            return 0

        scheduled = 0
        for link_url in links:
            if not self.crawl_policy.in_scope(page_url, link_url, context.config.follow_offsite):
                logger.debug("Skipping (offsite) %s -> not same host as %s", link_url, page_url)
                continue
            crawl_callback(link_url, depth + 1)
            scheduled += 1
        return scheduled
