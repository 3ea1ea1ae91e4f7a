import logging
import time
from typing import Callable

from siteaudit.domain.config import CrawlOptions
from siteaudit.domain.crawl_context import CrawlContext
from siteaudit.domain.crawl_result import CrawlResult
from siteaudit.exceptions import InvalidSeedUrlError
from siteaudit.services.crawl_executor import CrawlExecutor
from siteaudit.services.crawl_policy import CrawlPolicy
from siteaudit.services.rate_limiter import RateLimiter, fixed_delay
from siteaudit.utils.datetime_utils import utc_now_iso
from siteaudit.utils.url_utils import canonicalize_url, extract_domain, is_absolute_http_url, is_valid_url, origin_of

logger = logging.getLogger(__name__)


class SiteCrawler:
    """Sitemap-first site discovery.

    Tries `{origin}/sitemap.xml` first and fetches each listed URL once. When
    no sitemap URLs are available it falls back to a robots-compliant
    recursive crawl from the seed. The resulting `CrawlResult` is persisted
    through the artifact store when one is configured.
    """

    def __init__(
        self,
        *,
        crawl_executor: CrawlExecutor,
        sitemap_resolver,
        robots_service,
        artifact_store=None,
        rate_limiter_factory: Callable[[int], RateLimiter] = fixed_delay,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.crawl_executor = crawl_executor
        self.sitemap_resolver = sitemap_resolver
        self.robots_service = robots_service
        self.artifact_store = artifact_store
        self.rate_limiter_factory = rate_limiter_factory
        self.clock = clock

    def validate_seed(self, url: str) -> str:
        """Return the canonical seed URL or raise `InvalidSeedUrlError`."""
        if not isinstance(url, str) or not is_absolute_http_url(url.strip()) or not is_valid_url(url.strip()):
            raise InvalidSeedUrlError(url)
        return canonicalize_url(url.strip())

    def crawl_website(self, options: CrawlOptions) -> CrawlResult:
        seed_url = self.validate_seed(options.url)
        started = self.clock()
        domain = extract_domain(seed_url)
        rate_limiter = self.rate_limiter_factory(options.rate_limit_ms)
        context = CrawlContext(domain, max_depth=options.max_depth, max_pages=options.max_pages)

        logger.info(
            "Starting crawl: %s depth=%s pages=%s robots=%s",
            seed_url,
            options.max_depth,
            options.max_pages,
            options.respect_robots_txt,
        )

        sitemap = self.sitemap_resolver.resolve(origin_of(seed_url), rate_limiter=rate_limiter)
        sitemap_found = sitemap.usable
        if sitemap_found:
            self._crawl_sitemap_urls(sitemap.urls, context, rate_limiter)
        else:
            if not sitemap.available:
                logger.info("Sitemap unavailable for %s (%s); crawling links", domain, sitemap.reason)
            else:
                logger.info("Sitemap for %s lists no URLs; crawling links", domain)
            robots_policy = self.robots_service.policy_for(
                seed_url, options.respect_robots_txt, rate_limiter=rate_limiter
            )
            self.crawl_executor.crawl(
                seed_url,
                domain,
                CrawlPolicy(robots_policy),
                options.max_depth,
                options.max_pages,
                rate_limiter=rate_limiter,
                context=context,
            )

        result = CrawlResult(
            domain=domain,
            start_url=seed_url,
            timestamp=utc_now_iso(),
            pages=tuple(context.graph.pages()),
            sitemap_found=sitemap_found,
            crawl_duration=int(round(self.clock() - started)),
            errors=tuple(context.errors),
        )
        logger.info(
            "Crawl finished: %s -> %d pages, %d errors, sitemap=%s",
            seed_url,
            result.total_pages,
            len(result.errors),
            sitemap_found,
        )

        if self.artifact_store is not None:
            self.artifact_store.write_crawl_result(result)
        return result

    def _crawl_sitemap_urls(self, urls, context: CrawlContext, rate_limiter: RateLimiter) -> None:
        for url in urls[: context.max_pages]:
            if context.is_visited(url):
                continue
            context.mark_visited(url)
            self.crawl_executor.fetch_into(url, context, rate_limiter)
