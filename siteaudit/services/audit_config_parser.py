import logging
import os
from typing import Optional

from siteaudit.domain.config import (
    DEFAULT_CRAWL_RATE_LIMIT_MS,
    DEFAULT_LINK_RATE_LIMIT_MS,
    DEFAULT_LINK_TIMEOUT_MS,
    DEFAULT_MAX_DEPTH,
    DEFAULT_MAX_PAGES,
    AuditConfig,
    CrawlOptions,
    LinkCheckOptions,
)

logger = logging.getLogger(__name__)


class AuditConfigParser:
    """Parse a YAML dict into an AuditConfig.

    Responsibility: schema/validation for YAML profile files.
    It does NOT perform filesystem IO.

    Expected shape::

        name: example
        url: https://example.com
        max_depth: 3
        max_pages: 100
        robots: true
        rate_limit_ms: 1000
        link_check:
          include_external: false
          rate_limit_ms: 500
          internal_timeout_ms: 10000
          external_timeout_ms: 10000
    """

    def parse(self, *, config_path: str, data: dict) -> Optional[AuditConfig]:
        url = data.get("url")
        if not url:
            logger.warning("Config %s has no url", config_path)
            return None

        name = data.get("name") or os.path.splitext(os.path.basename(config_path))[0]
        link_data = data.get("link_check") or {}
        if not isinstance(link_data, dict):
            logger.warning("Config %s: link_check must be a mapping", config_path)
            return None

        try:
            crawl = CrawlOptions(
                url=str(url),
                max_depth=data.get("max_depth", DEFAULT_MAX_DEPTH),
                max_pages=data.get("max_pages", DEFAULT_MAX_PAGES),
                respect_robots_txt=bool(data.get("robots", True)),
                rate_limit_ms=data.get("rate_limit_ms", DEFAULT_CRAWL_RATE_LIMIT_MS),
            )
            link_check = LinkCheckOptions(
                include_external=bool(link_data.get("include_external", False)),
                rate_limit_ms=link_data.get("rate_limit_ms", DEFAULT_LINK_RATE_LIMIT_MS),
                internal_timeout_ms=link_data.get("internal_timeout_ms", DEFAULT_LINK_TIMEOUT_MS),
                external_timeout_ms=link_data.get("external_timeout_ms", DEFAULT_LINK_TIMEOUT_MS),
                urls=tuple(link_data.get("urls") or ()),
            )
        except ValueError as e:
            logger.warning("Invalid config %s: %s", config_path, e)
            return None

        return AuditConfig(
            name=str(name),
            config_path=os.path.basename(config_path),
            crawl=crawl,
            link_check=link_check,
            description=data.get("description"),
        )
