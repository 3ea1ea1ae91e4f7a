import logging
from typing import Optional

from siteaudit.domain.robots_policy import RobotsPolicy
from siteaudit.exceptions import HttpFetchError
from siteaudit.services.robots_parser import parse_robots_text

logger = logging.getLogger(__name__)


class RobotsFetcher:
    """Fetch robots.txt content and return a parsed RobotsPolicy or None.

    Uses an `http_service` with a `fetch_text(url)` method that returns
    an HttpResponse. None means no usable robots document.
    """
    def __init__(self, http_service, user_agent: str = "*"):
        self.http_service = http_service
        self.user_agent = user_agent

    def fetch(self, robots_url: str, rate_limiter=None) -> Optional[RobotsPolicy]:
        if rate_limiter is not None:
            rate_limiter.wait()
        try:
            response = self.http_service.fetch_text(robots_url)
        except HttpFetchError as e:
            logger.info("Could not fetch robots.txt from %s: %s", robots_url, e)
            return None

        if response.status_code != 200 or not response.text:
            logger.debug("No robots.txt at %s (status %s)", robots_url, response.status_code)
            return None

        return parse_robots_text(response.text, self.user_agent)
