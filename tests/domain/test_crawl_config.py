import dataclasses

import pytest

from harvest.domain.config import CrawlConfig, MAX_SUPPORTED_DEPTH
from harvest.domain.crawl_context import CrawlContext
from harvest.exceptions import ConfigError


def test_config_is_immutable():
    cfg = CrawlConfig(max_depth=1, common_word_limit=10)
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.max_depth = 5


@pytest.mark.parametrize("field", ["max_depth", "common_word_limit", "min_length"])
def test_negative_limits_are_rejected(field):
    kwargs = {"max_depth": 1, "common_word_limit": 10, field: -1}
    with pytest.raises(ConfigError):
        CrawlConfig(**kwargs)


def test_depth_beyond_supported_maximum_is_rejected():
    with pytest.raises(ConfigError):
        CrawlConfig(max_depth=MAX_SUPPORTED_DEPTH + 1, common_word_limit=10)


def test_headers_are_stored_as_tuple():
    cfg = CrawlConfig(max_depth=1, common_word_limit=10, headers=[("X-Test", "1")])
    assert cfg.headers == (("X-Test", "1"),)


def test_header_dict_joins_repeated_names():
    cfg = CrawlConfig(
        max_depth=1,
        common_word_limit=10,
        headers=(("Accept", "text/html"), ("X-Token", "abc"), ("accept", "application/xml")),
    )
    assert cfg.header_dict() == {"Accept": "text/html, application/xml", "X-Token": "abc"}


def test_context_tracks_seed_and_visited():
    cfg = CrawlConfig(max_depth=2, common_word_limit=10)
    context = CrawlContext(cfg, common_words=frozenset({"the"}))
    context.set_seed("http://example.com/")
    assert context.max_depth == 2
    assert context.seed_url == "http://example.com/"
    assert context.mark_if_new("http://example.com/")
    assert context.is_visited("http://example.com/")
    assert not context.mark_if_new("http://example.com/")
