import logging
from typing import Optional

from siteaudit.domain.page import Page
from siteaudit.exceptions import HttpFetchError, PageFetchError
from siteaudit.services.html_metadata_extractor import HtmlMetadataExtractor

logger = logging.getLogger(__name__)

_HTML_TYPES = ("text/html", "application/xhtml+xml")


class PageFetcher:
    """Fetch a URL via `HttpService` and extract it into a `Page`.

    Raises `PageFetchError` for transport failures, non-2xx statuses and
    non-HTML responses.
    """

    def __init__(self, http_service, extractor: Optional[HtmlMetadataExtractor] = None):
        self.http_service = http_service
        self.extractor = extractor or HtmlMetadataExtractor()

    def _is_html(self, content_type: Optional[str]) -> bool:
        if not content_type or not isinstance(content_type, str):
            return True
        media_type = content_type.split(";", 1)[0].strip().lower()
        return media_type in _HTML_TYPES

    def fetch_page(self, url: str) -> Page:
        try:
            response = self.http_service.fetch(url)
        except HttpFetchError as e:
            raise PageFetchError(url, str(e.original) or str(e)) from e

        status = response.status_code
        if status < 200 or status >= 300:
            reason = f" {response.reason}" if response.reason else ""
            raise PageFetchError(url, f"HTTP {status}{reason}")
        if not self._is_html(response.content_type):
            raise PageFetchError(url, f"Unsupported content type: {response.content_type}")

        page = self.extractor.extract(url, response.text)
        logger.info(
            "Fetched %s -> status %s, %d internal / %d external links",
            url,
            status,
            len(page.internal_links),
            len(page.external_links),
        )
        return page
