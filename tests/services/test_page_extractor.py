import pytest
from bs4 import ParserRejectedMarkup

from harvest.exceptions import PageParseError
from harvest.services.page_extractor import PageExtractor
from harvest.services.token_filter import TokenFilter

BASE = "http://example.com/dir/page.html"


def _extract(html, min_length=3, common_words=()):
    return PageExtractor().extract(html, BASE, TokenFilter(min_length=min_length, common_words=common_words))


def test_empty_body_yields_nothing():
    page = _extract("")
    assert len(page.token_counts) == 0
    assert page.links == []


def test_counts_text_of_content_elements():
    page = _extract("<html><body><h1>Harvest</h1><p>Quick Quick fox</p><li>jumps</li></body></html>")
    assert page.token_counts == {"harvest": 1, "quick": 2, "fox": 1, "jumps": 1}


def test_scripts_styles_and_containers_are_not_scanned():
    html = (
        "<html><head><style>body color red</style><script>var secret = 'hidden';</script></head>"
        "<body><div>container words</div><noscript>noscript words</noscript><p>visible</p></body></html>"
    )
    page = _extract(html)
    assert page.token_counts == {"visible": 1}


def test_nested_content_elements_are_counted_once():
    page = _extract("<p>outer <em>inner <strong>deep</strong></em> tail</p>")
    assert page.token_counts == {"outer": 1, "inner": 1, "deep": 1, "tail": 1}


def test_comments_are_ignored():
    page = _extract("<p>shown <!-- hidden comment --></p>")
    assert page.token_counts == {"shown": 1}


def test_anchor_text_is_counted():
    page = _extract('<a href="/x">Anchor words</a>')
    assert page.token_counts == {"anchor": 1, "words": 1}


def test_filter_is_applied():
    page = _extract("<p>The fox and the hound 42 dogs</p>", common_words={"the", "and"})
    assert page.token_counts == {"fox": 1, "hound": 1, "dogs": 1}


def test_links_are_resolved_against_page_url():
    html = (
        '<a href="other.html">a</a>'
        '<a href="/root">b</a>'
        '<a href="https://elsewhere.org/x#frag">c</a>'
    )
    page = _extract(html)
    assert page.links == [
        "http://example.com/dir/other.html",
        "http://example.com/root",
        "https://elsewhere.org/x",
    ]


def test_links_deduplicated_by_first_appearance():
    html = '<a href="/b">1</a><a href="/a">2</a><a href="/b#top">3</a>'
    page = _extract(html)
    assert page.links == ["http://example.com/b", "http://example.com/a"]


def test_unresolvable_and_non_http_links_are_dropped():
    html = (
        '<a href="mailto:someone@example.com">m</a>'
        '<a href="javascript:void(0)">j</a>'
        '<a href="http://[broken">b</a>'
        '<a>no href</a>'
        '<a href="/ok">ok</a>'
    )
    page = _extract(html)
    assert page.links == ["http://example.com/ok"]


def test_soup_factory_is_injectable():
    calls = []

    def factory(html):
        from bs4 import BeautifulSoup
        calls.append(html)
        return BeautifulSoup(html, "html.parser")

    extractor = PageExtractor(soup_factory=factory)
    extractor.extract("<p>words</p>", BASE, TokenFilter(min_length=1))
    assert calls == ["<p>words</p>"]


def test_rejected_markup_raises_page_parse_error():
    def rejecting_factory(html):
        raise ParserRejectedMarkup("unknown status keyword 'a' in marked section")

    extractor = PageExtractor(soup_factory=rejecting_factory)
    with pytest.raises(PageParseError) as exc:
        extractor.extract("<p>broken</p><![a;", BASE, TokenFilter())
    assert exc.value.url == BASE
    assert isinstance(exc.value.original, ParserRejectedMarkup)


def test_links_resolve_against_given_base():
    page = PageExtractor().extract('<a href="intro.html">x</a>', "http://example.com/docs/", TokenFilter())
    assert page.links == ["http://example.com/docs/intro.html"]
