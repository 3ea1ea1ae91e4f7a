import logging
from typing import Optional

from siteaudit.domain.crawl_context import CrawlContext
from siteaudit.domain.page import Page
from siteaudit.exceptions import PageFetchError
from siteaudit.services.crawl_policy import CrawlPolicy
from siteaudit.services.rate_limiter import NoDelayRateLimiter, RateLimiter

logger = logging.getLogger(__name__)


class CrawlExecutor:
    """Executes a bounded crawl given configured collaborators.

    Traversal is depth-first in link order, driven by an explicit stack of
    (url, depth) pairs. Each URL is attempted at most once; the page graph
    never exceeds `max_pages` and no page is discovered beyond `max_depth`.
    A failed fetch is recorded in the context's error log and the crawl
    continues.
    """

    def __init__(self, *, page_fetcher):
        self.page_fetcher = page_fetcher

    def fetch_into(self, url: str, context: CrawlContext, rate_limiter: RateLimiter) -> Optional[Page]:
        """Fetch `url` once and add it to the graph.

        Returns the page on success, or None on failure.
        """
        rate_limiter.wait()
        try:
            page = self.page_fetcher.fetch_page(url)
        except PageFetchError as e:
            logger.warning("Fetch failed for %s: %s", url, e.message)
            context.record_error(url, e.message)
            return None
        except Exception as e:
            logger.error("Fetch error for %s: %s", url, e, exc_info=True)
            context.record_error(url, str(e) or e.__class__.__name__)
            return None

        context.add_page(page)
        return page

    def crawl(
        self,
        seed_url: str,
        domain: str,
        policy: CrawlPolicy,
        max_depth: int,
        max_pages: int,
        rate_limiter: Optional[RateLimiter] = None,
        context: Optional[CrawlContext] = None,
    ) -> CrawlContext:
        """Crawl from `seed_url` and return the context holding the graph and errors.

        `domain` labels the crawl only; scope is enforced by following internal
        links exclusively.
        """
        rate_limiter = rate_limiter or NoDelayRateLimiter()
        if context is None:
            context = CrawlContext(domain, max_depth=max_depth, max_pages=max_pages)

        stack: list[tuple[str, int]] = [(seed_url, 0)]
        while stack:
            url, depth = stack.pop()

            if policy.should_stop_due_to_page_limit(context):
                break
            if policy.should_skip_due_to_depth(depth, context):
                continue
            if policy.should_skip_due_to_visited(url, context):
                continue
            context.mark_visited(url)

            if policy.should_skip_due_to_robots(url):
                continue

            page = self.fetch_into(url, context, rate_limiter)
            if page is None:
                continue

            next_depth = depth + 1
            if next_depth > context.max_depth:
                continue
            # reversed so the first extracted link is explored first
            for link in reversed(page.internal_links):
                if not context.is_visited(link):
                    stack.append((link, next_depth))

        logger.info(
            "Crawl of %s finished: %d pages, %d errors",
            domain,
            len(context.graph),
            len(context.errors),
        )
        return context
