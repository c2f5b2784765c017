import requests
from typing import Callable, Mapping, Optional

from harvest.domain.http_response import HttpResponse
from harvest.exceptions import HttpFetchError, HttpStatusError


class HttpService:
    """
    HTTP client wrapper for fetching web pages.

    Requires http_client callable for dependency injection (DIP compliance).
    This enables easy testing without patching and allows swapping HTTP libraries.
    """

    def __init__(self, user_agent: str, http_client: Callable, timeout: int = 10):
        self.user_agent = user_agent
        self.timeout = timeout
        self.http_client = http_client

    def build_headers(self, headers: Optional[Mapping[str, str]] = None, user_agent: Optional[str] = None) -> dict[str, str]:
        merged = {"User-Agent": user_agent or self.user_agent}
        for name, value in (headers or {}).items():
            if name.lower() == "user-agent":
                # An explicit user_agent override wins over a raw header
                if user_agent:
                    continue
                merged.pop("User-Agent", None)
            merged[name] = value
        return merged

    def fetch(self, url: str, headers: Optional[Mapping[str, str]] = None, user_agent: Optional[str] = None) -> HttpResponse:
        """Fetch URL and return response with status code, body text, and Content-Type.

        Transport and body-read failures raise HttpFetchError; a non-2xx
        status raises HttpStatusError.
        """
        request_headers = self.build_headers(headers, user_agent)
        try:
            resp = self.http_client(url, headers=request_headers, timeout=self.timeout)
            status = int(resp.status_code)
            if status < 200 or status >= 300:
                raise HttpStatusError(url, status)
            text = resp.text
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e

        # Extract Content-Type if response has headers; let real exceptions bubble up.
        ct = None
        if hasattr(resp, 'headers'):
            ct = resp.headers.get('Content-Type')

        # requests follows redirects; resp.url is where the body came from
        final_url = getattr(resp, 'url', None)
        if not isinstance(final_url, str) or not final_url:
            final_url = url

        return HttpResponse(status, text, ct, final_url)
