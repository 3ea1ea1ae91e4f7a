import logging
from typing import Callable, Optional

from bs4 import BeautifulSoup

from siteaudit.domain.page import Headings, Page
from siteaudit.utils.url_utils import canonicalize_url, is_absolute_http_url, is_same_domain, normalize_url

logger = logging.getLogger(__name__)


def _meta_content(soup: BeautifulSoup, **attrs) -> str:
    tag = soup.find("meta", attrs=attrs)
    if tag is None:
        return ""
    content = tag.get("content")
    return content.strip() if isinstance(content, str) else ""


def _texts(soup: BeautifulSoup, name: str) -> tuple[str, ...]:
    texts = []
    for el in soup.find_all(name):
        text = el.get_text(strip=True)
        if text:
            texts.append(text)
    return tuple(texts)


class HtmlMetadataExtractor:
    """Turn a fetched HTML document into a `Page`.

    Anchors are resolved against the page URL, canonicalized and partitioned
    into internal/external by comparing full URLs with the page URL.
    """

    def __init__(
        self,
        soup_factory: Optional[Callable[[str], BeautifulSoup]] = None,
    ):
        self._soup_factory = soup_factory or (lambda html: BeautifulSoup(html, "html.parser"))

    def extract(self, url: str, html: str) -> Page:
        soup = self._soup_factory(html or "")

        og_title = _meta_content(soup, property="og:title")
        og_description = _meta_content(soup, property="og:description")
        title_tag = soup.find("title")
        title = title_tag.get_text(strip=True) if title_tag is not None else ""
        description = _meta_content(soup, name="description")

        first_h1 = soup.find("h1")
        canonical_tag = soup.find("link", rel="canonical")
        canonical = canonical_tag.get("href", "") if canonical_tag is not None else ""

        internal, external = self.extract_links(url, soup)

        robots = _meta_content(soup, name="robots")
        body = soup.find("body")
        body_text = body.get_text(separator=" ") if body is not None else ""

        return Page(
            url=url,
            title=title or og_title,
            description=description or og_description,
            h1=first_h1.get_text(strip=True) if first_h1 is not None else "",
            canonical=canonical.strip(),
            og_image=_meta_content(soup, property="og:image"),
            og_title=og_title,
            og_description=og_description,
            word_count=len(body_text.split()),
            internal_links=internal,
            external_links=external,
            headings=Headings(h1=_texts(soup, "h1"), h2=_texts(soup, "h2"), h3=_texts(soup, "h3")),
            noindex="noindex" in robots.lower(),
        )

    def extract_links(self, url: str, soup: BeautifulSoup) -> tuple[tuple[str, ...], tuple[str, ...]]:
        """Return (internal, external) absolute links, unique and in first-seen order."""
        internal: dict[str, None] = {}
        external: dict[str, None] = {}
        for a in soup.find_all("a", href=True):
            href = a.get("href", "").strip()
            if not href:
                continue
            resolved = normalize_url(href, url)
            if not is_absolute_http_url(resolved):
                logger.debug("Skipping (unresolvable) %r on %s", href, url)
                continue
            link = canonicalize_url(resolved)
            if is_same_domain(link, url):
                internal.setdefault(link, None)
            else:
                external.setdefault(link, None)
        return tuple(internal), tuple(external)
