from typing import Iterator, Optional

from siteaudit.domain.page import Page


class PageGraph:
    """Pages keyed by canonical URL, in discovery order.

    An edge A -> B exists when B is in A's internal links. Keys are write-once:
    adding a URL that is already present leaves the first page in place.
    """

    def __init__(self, pages=None):
        self._pages: dict[str, Page] = {}
        for page in pages or ():
            self.add(page)

    def add(self, page: Page) -> bool:
        """Insert `page` if its URL is absent. Returns True when inserted."""
        if page.url in self._pages:
            return False
        self._pages[page.url] = page
        return True

    def get(self, url: str) -> Optional[Page]:
        return self._pages.get(url)

    def urls(self) -> list[str]:
        return list(self._pages)

    def pages(self) -> list[Page]:
        return list(self._pages.values())

    def referenced_urls(self) -> set[str]:
        """Union of every page's internal links."""
        referenced: set[str] = set()
        for page in self._pages.values():
            referenced.update(page.internal_links)
        return referenced

    def __contains__(self, url: object) -> bool:
        return url in self._pages

    def __iter__(self) -> Iterator[Page]:
        return iter(self._pages.values())

    def __len__(self) -> int:
        return len(self._pages)

    def __repr__(self):
        return f"<PageGraph pages={len(self._pages)}>"
