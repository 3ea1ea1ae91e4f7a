"""Crawl result data model."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from siteaudit.domain.page import Page
from siteaudit.domain.page_graph import PageGraph


@dataclass(frozen=True)
class CrawlError:
    url: str
    error: str
    timestamp: str

    def to_dict(self) -> dict[str, str]:
        return {"url": self.url, "error": self.error, "timestamp": self.timestamp}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CrawlError":
        return cls(url=data["url"], error=data.get("error", ""), timestamp=data.get("timestamp", ""))


@dataclass(frozen=True)
class CrawlResult:
    """Terminal snapshot of a crawl; the hand-off artifact for downstream tools.

    `pages` is in discovery order. `crawl_duration` is whole seconds.
    """

    domain: str
    start_url: str
    timestamp: str
    pages: tuple[Page, ...] = ()
    sitemap_found: bool = False
    crawl_duration: int = 0
    errors: tuple[CrawlError, ...] = field(default_factory=tuple)

    @property
    def total_pages(self) -> int:
        return len(self.pages)

    def graph(self) -> PageGraph:
        return PageGraph(self.pages)

    def to_dict(self) -> dict[str, Any]:
        return {
            "domain": self.domain,
            "start_url": self.start_url,
            "timestamp": self.timestamp,
            "pages": [p.to_dict() for p in self.pages],
            "sitemap_found": self.sitemap_found,
            "total_pages": self.total_pages,
            "crawl_duration": self.crawl_duration,
            "errors": [e.to_dict() for e in self.errors],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CrawlResult":
        return cls(
            domain=data.get("domain", ""),
            start_url=data.get("start_url", ""),
            timestamp=data.get("timestamp", ""),
            pages=tuple(Page.from_dict(p) for p in data.get("pages") or ()),
            sitemap_found=bool(data.get("sitemap_found", False)),
            crawl_duration=int(data.get("crawl_duration") or 0),
            errors=tuple(CrawlError.from_dict(e) for e in data.get("errors") or ()),
        )
