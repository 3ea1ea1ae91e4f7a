from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

DEFAULT_MAX_DEPTH = 3
DEFAULT_MAX_PAGES = 100
DEFAULT_CRAWL_RATE_LIMIT_MS = 1000
DEFAULT_LINK_RATE_LIMIT_MS = 500
DEFAULT_LINK_TIMEOUT_MS = 10_000

MAX_DEPTH_RANGE = (1, 10)
MAX_PAGES_RANGE = (1, 500)
RATE_LIMIT_RANGE = (0, 10_000)


def _check_range(name: str, value: int, bounds: tuple[int, int]) -> int:
    low, high = bounds
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < low or value > high:
        raise ValueError(f"{name} must be between {low} and {high}, got {value}")
    return value


@dataclass(frozen=True)
class CrawlOptions:
    """Crawl-behavior fields for one site crawl."""

    url: str
    max_depth: int = DEFAULT_MAX_DEPTH
    max_pages: int = DEFAULT_MAX_PAGES
    respect_robots_txt: bool = True
    rate_limit_ms: int = DEFAULT_CRAWL_RATE_LIMIT_MS

    def __post_init__(self):
        _check_range("max_depth", self.max_depth, MAX_DEPTH_RANGE)
        _check_range("max_pages", self.max_pages, MAX_PAGES_RANGE)
        _check_range("rate_limit_ms", self.rate_limit_ms, RATE_LIMIT_RANGE)


@dataclass(frozen=True)
class LinkCheckOptions:
    """Link-health check settings. `urls` are checked in addition to crawl links."""

    include_external: bool = False
    rate_limit_ms: int = DEFAULT_LINK_RATE_LIMIT_MS
    internal_timeout_ms: int = DEFAULT_LINK_TIMEOUT_MS
    external_timeout_ms: int = DEFAULT_LINK_TIMEOUT_MS
    urls: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        _check_range("rate_limit_ms", self.rate_limit_ms, RATE_LIMIT_RANGE)
        if self.internal_timeout_ms <= 0 or self.external_timeout_ms <= 0:
            raise ValueError("link check timeouts must be positive")


@dataclass(frozen=True)
class AuditConfig:
    """A named audit profile loaded from a YAML file."""

    name: str
    config_path: str
    crawl: CrawlOptions
    link_check: LinkCheckOptions = field(default_factory=LinkCheckOptions)
    description: Optional[str] = None

    def __repr__(self):
        return f"<AuditConfig name={self.name} path={self.config_path} url={self.crawl.url}>"
