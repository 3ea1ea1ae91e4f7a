import logging
import xml.etree.ElementTree as ET
from typing import Optional

from siteaudit.domain.sitemap_result import SitemapResult
from siteaudit.exceptions import HttpFetchError
from siteaudit.utils.url_utils import canonicalize_url, is_absolute_http_url, is_same_domain, origin_of

logger = logging.getLogger(__name__)


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1] if isinstance(tag, str) else ""


def _child_text(node: ET.Element, name: str) -> Optional[str]:
    for child in node:
        if _local_name(child.tag) == name and child.text:
            text = child.text.strip()
            if text:
                return text
    return None


def parse_urlset(xml_text: str, sitemap_url: str) -> SitemapResult:
    """Extract same-domain `<loc>` entries from a `<urlset>` document."""
    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as exc:
        return SitemapResult.unavailable(f"malformed XML: {exc}")

    root_name = _local_name(root.tag)
    if root_name != "urlset":
        return SitemapResult.unavailable(f"unsupported root element <{root_name}>")

    urls: dict[str, None] = {}
    for url_node in root:
        if _local_name(url_node.tag) != "url":
            continue
        loc = _child_text(url_node, "loc")
        if not loc or not is_absolute_http_url(loc):
            continue
        if not is_same_domain(loc, sitemap_url):
            logger.debug("Skipping (external) sitemap entry %s", loc)
            continue
        urls.setdefault(canonicalize_url(loc), None)
    return SitemapResult(urls=tuple(urls))


class SitemapResolver:
    """Fetch and parse `{origin}/sitemap.xml`.

    Every failure (network, non-2xx, malformed XML, wrong root element) comes
    back as an unavailable result rather than an exception.
    """

    def __init__(self, http_service):
        self.http_service = http_service

    def resolve(self, origin_url: str, rate_limiter=None) -> SitemapResult:
        origin = origin_of(origin_url)
        if origin is None:
            return SitemapResult.unavailable(f"invalid origin {origin_url!r}")
        sitemap_url = f"{origin}/sitemap.xml"
        if rate_limiter is not None:
            rate_limiter.wait()

        try:
            response = self.http_service.fetch_text(sitemap_url)
        except HttpFetchError as e:
            logger.info("Sitemap fetch failed for %s: %s", sitemap_url, e)
            return SitemapResult.unavailable(str(e))

        if response.status_code < 200 or response.status_code >= 300:
            return SitemapResult.unavailable(f"HTTP {response.status_code} for {sitemap_url}")
        if not response.text:
            return SitemapResult.unavailable(f"empty response for {sitemap_url}")

        result = parse_urlset(response.text, sitemap_url)
        if result.available:
            logger.info("Sitemap %s lists %d same-domain URLs", sitemap_url, len(result.urls))
        return result
