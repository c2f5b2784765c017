from typing import Optional
from urllib.parse import urljoin, urlsplit, urlunsplit

from harvest.exceptions import InvalidUrlError

ALLOWED_SCHEMES = ("http", "https")


def normalize_url(url: str) -> str:
    """Return the canonical form of an absolute http(s) URL used as the visited key.

    Scheme and host are lowercased and the fragment is dropped; path and query
    are kept as-is. Raises InvalidUrlError for anything else.
    """
    if not isinstance(url, str) or not url.strip():
        raise InvalidUrlError(repr(url), "empty")
    try:
        parts = urlsplit(url.strip())
        hostname = parts.hostname
        # Accessing .port validates it
        parts.port
    except ValueError as e:
        raise InvalidUrlError(url, str(e)) from e
    scheme = parts.scheme.lower()
    if scheme not in ALLOWED_SCHEMES:
        raise InvalidUrlError(url, f"unsupported scheme {parts.scheme!r}" if scheme else "not an absolute URL")
    if not hostname:
        raise InvalidUrlError(url, "missing host")
    netloc = parts.netloc
    userinfo, sep, hostport = netloc.rpartition("@")
    netloc = f"{userinfo}{sep}{hostport.lower()}"
    path = parts.path or "/"
    return urlunsplit((scheme, netloc, path, parts.query, ""))


def resolve_link(base_url: str, href: str) -> Optional[str]:
    """Resolve `href` against `base_url`; None when the result is not a crawlable URL."""
    try:
        return normalize_url(urljoin(base_url, href.strip()))
    except (InvalidUrlError, ValueError):
        return None


def hostname(url: str) -> Optional[str]:
    try:
        host = urlsplit(url).hostname
    except ValueError:
        return None
    return host.lower() if host else None
