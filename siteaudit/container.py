"""Dependency injection container for the application."""
from dependency_injector import containers, providers

from siteaudit import config as env
from siteaudit.services.artifact_store import ArtifactStore
from siteaudit.services.config_file_store import ConfigFileStore
from siteaudit.services.config_service import ConfigService
from siteaudit.services.crawl_executor import CrawlExecutor
from siteaudit.services.html_metadata_extractor import HtmlMetadataExtractor
from siteaudit.services.http_service import HttpService, make_session
from siteaudit.services.link_checker import LinkChecker
from siteaudit.services.page_fetcher import PageFetcher
from siteaudit.services.rate_limiter import fixed_delay
from siteaudit.services.robots_cache import RobotsCache
from siteaudit.services.robots_fetcher import RobotsFetcher
from siteaudit.services.robots_service import RobotsService
from siteaudit.services.site_crawler import SiteCrawler
from siteaudit.services.sitemap_resolver import SitemapResolver


# Environment variables used by the container (read via `siteaudit.config` helpers).
#
# USER_AGENT (str, default: "SiteAudit/0.1")
#   User-Agent header for page fetches, link probes, robots.txt and sitemap requests.
#
# ROBOTS_USER_AGENT (str, default: "Googlebot")
#   Crawler identity whose robots.txt group is obeyed.
#
# HTTP_TIMEOUT (float seconds, default: 30)
#   Timeout for page, robots.txt and sitemap fetches.
#
# MAX_REDIRECTS (int, default: 5)
#   Redirect hops followed before a request fails.
#
# REVIEW_WORK_DIR (str, default: ./.work/website-reviews)
#   Root directory for per-domain audit artifacts.
#
# SITEAUDIT_CONFIGS_DIR (str, default: ./configs)
#   Directory of YAML audit profiles.
#
# ROBOTS_CACHE_MAX_SIZE (int, default: 2048) / ROBOTS_CACHE_TTL_SECONDS (int, default: 3600)
#   Bounds for the in-memory robots.txt cache.
ENV = {
    "USER_AGENT": env.get_str_env("USER_AGENT", "SiteAudit/0.1"),
    "ROBOTS_USER_AGENT": env.get_str_env("ROBOTS_USER_AGENT", "Googlebot"),
    "HTTP_TIMEOUT": env.get_float_env("HTTP_TIMEOUT", 30.0),
    "MAX_REDIRECTS": env.get_int_env("MAX_REDIRECTS", 5),
    "REVIEW_WORK_DIR": env.review_work_dir(),
    "SITEAUDIT_CONFIGS_DIR": env.configs_dir(),
    "ROBOTS_CACHE_MAX_SIZE": env.get_int_env("ROBOTS_CACHE_MAX_SIZE", 2048),
    "ROBOTS_CACHE_TTL_SECONDS": env.get_int_env("ROBOTS_CACHE_TTL_SECONDS", 3600),
    "API_HOST": env.get_str_env("API_HOST", "0.0.0.0"),
    "API_PORT": env.get_int_env("API_PORT", 8000),
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for SiteAudit application."""

    config = providers.Configuration(default=ENV)

    # One session so crawl fetches and link probes share connections and the redirect bound
    http_session = providers.Singleton(
        make_session,
        max_redirects=config.MAX_REDIRECTS,
    )

    http_service = providers.Singleton(
        HttpService,
        user_agent=config.USER_AGENT,
        http_client=http_session.provided.get,
        probe_client=http_session.provided.head,
        timeout=config.HTTP_TIMEOUT,
    )

    artifact_store = providers.Singleton(
        ArtifactStore,
        work_dir=config.REVIEW_WORK_DIR,
    )

    config_file_store = providers.Singleton(
        ConfigFileStore,
        configs_dir=config.SITEAUDIT_CONFIGS_DIR,
    )

    config_service = providers.Singleton(
        ConfigService,
        file_store=config_file_store,
    )

    robots_cache = providers.Singleton(
        RobotsCache,
        max_size=config.ROBOTS_CACHE_MAX_SIZE,
        ttl_seconds=config.ROBOTS_CACHE_TTL_SECONDS,
    )

    robots_fetcher = providers.Singleton(
        RobotsFetcher,
        http_service=http_service,
        user_agent=config.ROBOTS_USER_AGENT,
    )

    robots_service = providers.Singleton(
        RobotsService,
        http_service=http_service,
        user_agent=config.ROBOTS_USER_AGENT,
        robots_fetcher=robots_fetcher,
        cache=robots_cache,
    )

    sitemap_resolver = providers.Singleton(
        SitemapResolver,
        http_service=http_service,
    )

    html_metadata_extractor = providers.Singleton(HtmlMetadataExtractor)

    page_fetcher = providers.Singleton(
        PageFetcher,
        http_service=http_service,
        extractor=html_metadata_extractor,
    )

    crawl_executor = providers.Factory(
        CrawlExecutor,
        page_fetcher=page_fetcher,
    )

    rate_limiter_factory = providers.Object(fixed_delay)

    site_crawler = providers.Factory(
        SiteCrawler,
        crawl_executor=crawl_executor,
        sitemap_resolver=sitemap_resolver,
        robots_service=robots_service,
        artifact_store=artifact_store,
        rate_limiter_factory=rate_limiter_factory,
    )

    link_checker = providers.Factory(
        LinkChecker,
        http_service=http_service,
        artifact_store=artifact_store,
        rate_limiter_factory=rate_limiter_factory,
    )
