"""Domain objects for SiteAudit - explicit re-exports to satisfy linters."""
from .page import Page as Page, Headings as Headings
from .page_graph import PageGraph as PageGraph
from .crawl_result import CrawlResult as CrawlResult, CrawlError as CrawlError
from .link_status import LinkStatus as LinkStatus, BrokenLinkResult as BrokenLinkResult, BrokenLinkSummary as BrokenLinkSummary
from .robots_policy import RobotsPolicy as RobotsPolicy
from .sitemap_result import SitemapResult as SitemapResult
from .config import CrawlOptions as CrawlOptions, LinkCheckOptions as LinkCheckOptions, AuditConfig as AuditConfig

__all__ = [
    "Page",
    "Headings",
    "PageGraph",
    "CrawlResult",
    "CrawlError",
    "LinkStatus",
    "BrokenLinkResult",
    "BrokenLinkSummary",
    "RobotsPolicy",
    "SitemapResult",
    "CrawlOptions",
    "LinkCheckOptions",
    "AuditConfig",
]
