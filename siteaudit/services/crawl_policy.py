import logging

from siteaudit.domain.crawl_context import CrawlContext
from siteaudit.domain.robots_policy import PERMIT_ALL, RobotsPolicy
from siteaudit.utils.url_utils import path_of

logger = logging.getLogger(__name__)


class CrawlPolicy:
    """Encapsulates crawl decision rules: depth and page limits, dedup, and robots.txt compliance.

    Separates policy decisions from traversal logic. A skip is never an error.
    """

    def __init__(self, robots_policy: RobotsPolicy = PERMIT_ALL):
        self.robots_policy = robots_policy

    def should_skip_due_to_depth(self, depth: int, context: CrawlContext) -> bool:
        """Check if URL should be skipped because it lies beyond max depth."""
        if depth > context.max_depth:
            logger.debug("Skipping (max depth reached) at depth %s", depth)
            return True
        return False

    def should_stop_due_to_page_limit(self, context: CrawlContext) -> bool:
        if context.is_full():
            logger.info("Page limit of %s reached", context.max_pages)
            return True
        return False

    def should_skip_due_to_visited(self, url: str, context: CrawlContext) -> bool:
        if context.is_visited(url):
            logger.debug("Skipping (visited) %s", url)
            return True
        return False

    def should_skip_due_to_robots(self, url: str) -> bool:
        """Check if URL should be skipped due to robots.txt restrictions or an unparseable URL."""
        path = path_of(url)
        if path is None:
            logger.debug("Skipping (unparseable) %s", url)
            return True
        if not self.robots_policy.can_crawl(path):
            logger.info("Skipping (robots) %s", url)
            return True
        return False
