"""Custom exceptions for HARVEST."""


class HarvestError(Exception):
    """Base class for every error raised by HARVEST."""


class CrawlError(HarvestError):
    """Raised for failures scoped to a single crawl branch."""


class InvalidUrlError(CrawlError):
    """Raised when a seed or link does not parse as an absolute http(s) URL."""

    def __init__(self, url: str, reason: str = "not an absolute URL"):
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid URL {url!r}: {reason}")


class FetchError(CrawlError):
    """Raised when a page cannot be fetched."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(message)


class HttpFetchError(FetchError):
    """Raised when an HTTP fetch fails due to network/transport errors."""

    def __init__(self, url: str, original: Exception):
        self.original = original
        super().__init__(url, f"HTTP fetch failed for {url}: {original}")


class HttpStatusError(FetchError):
    """Raised when the server answers with a non-success status code."""

    def __init__(self, url: str, status_code: int):
        self.status_code = status_code
        super().__init__(url, f"HTTP fetch failed for {url}: status {status_code}")


class PageParseError(CrawlError):
    """Raised when a fetched page is markup the HTML parser refuses to build a tree from."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"Could not parse {url}: {original}")


class ResourceError(HarvestError):
    """Raised when a required local resource (e.g. the common-word list) is unusable."""

    def __init__(self, path: str, reason: str = "not found"):
        self.path = path
        self.reason = reason
        super().__init__(f"Resource '{path}' {reason}")


class ConfigError(HarvestError):
    """Raised for invalid crawl configuration, before any fetch happens."""
