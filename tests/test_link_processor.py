from unittest.mock import MagicMock

from harvest.domain.config import CrawlConfig
from harvest.domain.crawl_context import CrawlContext
from harvest.services.crawl_policy import CrawlPolicy
from harvest.services.link_processor import LinkProcessor

LINKS = ["http://example.com/a", "http://other.org/b", "http://example.com/c"]


def _context(**kwargs):
    return CrawlContext(CrawlConfig(common_word_limit=0, **kwargs))


def test_process_schedules_same_host_links_in_order():
    processor = LinkProcessor(CrawlPolicy())
    callback = MagicMock()
    scheduled = processor.process("http://example.com/", LINKS, _context(max_depth=1), 0, callback)
    assert scheduled == 2
    assert [c.args for c in callback.call_args_list] == [
        ("http://example.com/a", 1),
        ("http://example.com/c", 1),
    ]


def test_process_schedules_offsite_links_when_enabled():
    processor = LinkProcessor(CrawlPolicy())
    callback = MagicMock()
    scheduled = processor.process("http://example.com/", LINKS, _context(max_depth=1, follow_offsite=True), 0, callback)
    assert scheduled == 3


def test_process_schedules_nothing_at_depth_limit():
    processor = LinkProcessor(CrawlPolicy())
    callback = MagicMock()
    scheduled = processor.process("http://example.com/", LINKS, _context(max_depth=1), 1, callback)
    assert scheduled == 0
    assert not callback.called


def test_process_uses_policy():
    policy = MagicMock()
    policy.should_expand.return_value = True
    policy.in_scope.return_value = False
    processor = LinkProcessor(policy)
    callback = MagicMock()
    processor.process("http://example.com/", LINKS, _context(max_depth=3), 0, callback)
    assert policy.in_scope.call_count == 3
    assert not callback.called
