import logging
from typing import Optional

from siteaudit.domain.robots_policy import PERMIT_ALL, RobotsPolicy
from siteaudit.services.robots_cache import RobotsCache
from siteaudit.services.robots_fetcher import RobotsFetcher
from siteaudit.utils.url_utils import origin_of

logger = logging.getLogger(__name__)


class RobotsService:
    """
    Service for resolving robots.txt permissions.

    Orchestrates fetching, caching, and permission checking. Missing or
    unreadable robots documents resolve to a permit-all policy.
    """

    def __init__(self, http_service, user_agent: str,
                 robots_fetcher: Optional[RobotsFetcher] = None,
                 cache: Optional[RobotsCache] = None):
        self.http_service = http_service
        self.user_agent = user_agent
        self.robots_fetcher = robots_fetcher if robots_fetcher is not None else RobotsFetcher(http_service, user_agent)
        self.cache = cache if cache is not None else RobotsCache()

    def policy_for(self, url: str, robots_enabled: bool = True, rate_limiter=None) -> RobotsPolicy:
        """Policy for the origin of `url`; `rate_limiter` is waited on before a robots.txt request."""
        if not robots_enabled:
            return PERMIT_ALL

        origin = origin_of(url)
        if origin is None:
            # Fail open: invalid/relative URLs should not block crawling.
            return PERMIT_ALL

        policy = self.cache.lookup(origin)
        if policy is RobotsCache.MISSING:
            policy = self.robots_fetcher.fetch(f"{origin}/robots.txt", rate_limiter=rate_limiter)
            self.cache.set(origin, policy)

        if policy is None:
            logger.info("No usable robots.txt for %s; permitting all paths", origin)
            return PERMIT_ALL
        return policy
