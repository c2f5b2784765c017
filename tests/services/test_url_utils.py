import pytest

from harvest.exceptions import InvalidUrlError
from harvest.services.url_utils import hostname, normalize_url, resolve_link


def test_normalize_lowercases_scheme_and_host_and_drops_fragment():
    assert normalize_url("HTTP://Example.COM/Path?q=1#frag") == "http://example.com/Path?q=1"


def test_normalize_adds_root_path():
    assert normalize_url("https://example.com") == "https://example.com/"


@pytest.mark.parametrize("url", ["", "   ", "example.com/page", "/relative", "ftp://example.com/", "mailto:a@b.c", "http://"])
def test_normalize_rejects_non_absolute_http_urls(url):
    with pytest.raises(InvalidUrlError):
        normalize_url(url)


def test_normalize_rejects_bad_port():
    with pytest.raises(InvalidUrlError):
        normalize_url("http://example.com:notaport/")


def test_resolve_link_relative_to_base():
    assert resolve_link("http://example.com/a/b.html", "../c.html") == "http://example.com/c.html"


def test_resolve_link_returns_none_for_unsupported():
    assert resolve_link("http://example.com/", "javascript:alert(1)") is None


def test_hostname_is_lowercased():
    assert hostname("http://WWW.Example.com:8080/x") == "www.example.com"
    assert hostname("not a url") is None
