"""Dependency injection container for the application."""
from dependency_injector import containers, providers
import requests

from harvest.services.common_words import CommonWordsLoader
from harvest.services.crawl_executor import CrawlExecutor
from harvest.services.crawl_policy import CrawlPolicy
from harvest.services.fetcher_factory import FetcherFactory
from harvest.services.http_service import HttpService
from harvest.services.link_processor import LinkProcessor
from harvest.services.page_extractor import PageExtractor
from harvest.services.report_writer import ReportWriter
from harvest import config as env


# Environment variables used by the container (read via `harvest.config` helpers).
#
# USER_AGENT (str, default: "HARVEST/0.1")
#   Default User-Agent header for outbound HTTP requests. A crawl's own
#   user_agent setting takes precedence.
#
# HARVEST_HTTP_TIMEOUT (int seconds, default: 10)
#   Timeout for each outbound HTTP request. This is the only bound on a
#   hanging fetch; the crawl itself has no timeout.
#
# Crawl defaults (HARVEST_DEFAULT_DEPTH, HARVEST_COMMON_WORD_LIMIT,
# HARVEST_MIN_LENGTH, HARVEST_COMMON_WORDS_PATH, HARVEST_FOLLOW_OFFSITE) are
# applied by `harvest.configs.build_config`, not here.
ENV = {
    "USER_AGENT": env.USER_AGENT,
    "HTTP_TIMEOUT": env.HTTP_TIMEOUT,
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for HARVEST."""

    # Configuration
    config = providers.Configuration(default=ENV)

    # Services - Singleton instances
    http_service = providers.Singleton(
        HttpService,
        user_agent=config.USER_AGENT.as_(str),
        http_client=providers.Object(requests.get),
        timeout=config.HTTP_TIMEOUT.as_(int)
    )

    fetcher_factory = providers.Singleton(
        FetcherFactory,
        http_service=http_service,
    )

    page_extractor = providers.Singleton(
        PageExtractor
    )

    common_words_loader = providers.Singleton(
        CommonWordsLoader
    )

    crawl_policy = providers.Singleton(
        CrawlPolicy
    )

    link_processor = providers.Singleton(
        LinkProcessor,
        crawl_policy=crawl_policy,
    )

    report_writer = providers.Singleton(
        ReportWriter
    )

    # A fresh executor per crawl; it holds no crawl state itself
    crawl_executor = providers.Factory(
        CrawlExecutor,
        fetcher_factory=fetcher_factory,
        page_extractor=page_extractor,
        link_processor=link_processor,
        common_words_loader=common_words_loader,
        crawl_policy=crawl_policy,
    )
