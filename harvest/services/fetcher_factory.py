from __future__ import annotations

from dataclasses import dataclass

from harvest.domain.config import CrawlConfig
from harvest.services.fetcher import Fetcher, HttpServiceFetcher
from harvest.services.http_service import HttpService


@dataclass(frozen=True)
class FetcherFactory:
    http_service: HttpService

    def get(self, config: CrawlConfig) -> Fetcher:
        """Return a fetcher that applies `config`'s headers and user agent to every request."""
        if config is None:
            raise ValueError("config is required")
        return HttpServiceFetcher(
            self.http_service,
            headers=config.header_dict(),
            user_agent=config.user_agent,
        )
