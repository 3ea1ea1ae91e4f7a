class VisitedTracker:
    """
    Tracks which URLs have been attempted during a crawl.

    A URL is attempted at most once, whether it was fetched, failed or was
    rejected by policy. Kept separate from CrawlContext so the traversal can be
    tested against a plain set-like object.
    """

    def __init__(self):
        self._visited: set[str] = set()

    def mark(self, url: str) -> None:
        """Mark a URL as visited."""
        self._visited.add(url)

    def is_visited(self, url: str) -> bool:
        """Check if a URL has been visited."""
        return url in self._visited

    def __len__(self) -> int:
        return len(self._visited)
