from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SitemapResult:
    """URLs listed by a sitemap, or the reason no sitemap could be used.

    `available` is False when the sitemap could not be fetched or parsed, which
    callers treat as the signal to crawl recursively instead.
    """

    urls: tuple[str, ...] = ()
    available: bool = True
    reason: Optional[str] = None

    @classmethod
    def unavailable(cls, reason: str) -> "SitemapResult":
        return cls(urls=(), available=False, reason=reason)

    @property
    def usable(self) -> bool:
        return self.available and len(self.urls) > 0
