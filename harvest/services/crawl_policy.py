import logging

from harvest.services.url_utils import hostname

logger = logging.getLogger(__name__)


class CrawlPolicy:
    """Encapsulates crawl decision rules: depth limits and domain scope.

    Separates policy decisions from crawl orchestration logic.
    """

    def should_skip_due_to_depth(self, depth: int, max_depth: int) -> bool:
        """Check if a page at `depth` lies beyond the configured hop limit."""
        if depth > max_depth:
            logger.debug("Skipping (max depth reached) at depth %s", depth)
            return True
        return False

    def should_expand(self, depth: int, max_depth: int) -> bool:
        """Check if links found on a page at `depth` may be followed."""
        return not self.should_skip_due_to_depth(depth + 1, max_depth)

    def in_scope(self, page_url: str, link_url: str, follow_offsite: bool) -> bool:
        """Check if `link_url` may be followed from the page at `page_url`."""
        if follow_offsite:
            return True
        page_host = hostname(page_url)
        link_host = hostname(link_url)
        if page_host is None or link_host is None:
            return False
        return page_host == link_host
