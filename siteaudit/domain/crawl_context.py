from typing import Optional

from siteaudit.domain.crawl_result import CrawlError
from siteaudit.domain.page import Page
from siteaudit.domain.page_graph import PageGraph
from siteaudit.domain.visited_tracker import VisitedTracker
from siteaudit.utils.datetime_utils import utc_now_iso


class CrawlContext:
    """Mutable state for one traversal: the page graph, error log and visited set.

    Only the single active traversal step mutates it.
    """

    def __init__(self, domain: str, max_depth: int, max_pages: int, visited_tracker: Optional[VisitedTracker] = None):
        self.domain = domain
        self.max_depth = max_depth
        self.max_pages = max_pages
        self.graph = PageGraph()
        self.errors: list[CrawlError] = []
        self.visited_tracker = visited_tracker if visited_tracker is not None else VisitedTracker()

    def mark_visited(self, url: str) -> None:
        self.visited_tracker.mark(url)

    def is_visited(self, url: str) -> bool:
        return url in self.graph or self.visited_tracker.is_visited(url)

    def is_full(self) -> bool:
        return len(self.graph) >= self.max_pages

    def add_page(self, page: Page) -> bool:
        return self.graph.add(page)

    def record_error(self, url: str, message: str) -> CrawlError:
        error = CrawlError(url=url, error=message, timestamp=utc_now_iso())
        self.errors.append(error)
        return error
