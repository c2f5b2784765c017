from __future__ import annotations

from typing import Mapping, Optional, Protocol

from harvest.domain.http_response import HttpResponse


class Fetcher(Protocol):
    """Fetch a URL and return a normalized HTTP-like response.

    Implementations raise FetchError (or a subclass) on failure. Kept small
    so tests can substitute an in-memory site for the network.
    """

    def fetch(self, url: str) -> HttpResponse: ...


class HttpServiceFetcher:
    """Binds a crawl's request headers and user agent to a shared HttpService."""

    def __init__(self, http_service, headers: Optional[Mapping[str, str]] = None, user_agent: Optional[str] = None):
        self._http_service = http_service
        self._headers = dict(headers or {})
        self._user_agent = user_agent

    def fetch(self, url: str) -> HttpResponse:
        return self._http_service.fetch(url, headers=self._headers, user_agent=self._user_agent)
