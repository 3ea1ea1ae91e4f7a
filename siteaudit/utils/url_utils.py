"""URL resolution, canonical identity and domain scope helpers.

None of these raise: parse failures come back as the original input (for
resolution) or as a fail-closed answer (for scope checks).
"""
import logging
import re
from typing import Optional
from urllib.parse import urljoin, urlsplit, urlunsplit

logger = logging.getLogger(__name__)

_ABSOLUTE_PREFIXES = ("http://", "https://")


def is_absolute_http_url(url: str) -> bool:
    return isinstance(url, str) and url.startswith(_ABSOLUTE_PREFIXES)


def normalize_url(href: str, base_url: Optional[str] = None) -> str:
    """Resolve `href` against `base_url` the way a browser resolves links.

    - absolute http(s) URLs are returned unchanged
    - `/path` resolves against the base origin, dropping the base path
    - `#frag` and `?query` are appended verbatim to the base URL
    - anything else resolves against the base directory (`.`/`..` collapse)

    Returns `href` unchanged when it cannot be resolved; callers must skip
    results that are not absolute.
    """
    try:
        if is_absolute_http_url(href):
            return href
        if not base_url:
            return href
        base = urlsplit(base_url)
        if not base.scheme or not base.netloc:
            return href
        if href.startswith("/") and not href.startswith("//"):
            return f"{base.scheme}://{base.netloc}{href}"
        if href.startswith("#") or href.startswith("?"):
            return f"{base_url}{href}"
        return urljoin(base_url, href)
    except (ValueError, TypeError, AttributeError):
        logger.debug("Could not normalize %r against %r", href, base_url)
        return href


def canonicalize_url(url: str) -> str:
    """Identity form of an absolute URL: lower-case scheme/host, no fragment, `/` for an empty path."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return url
    if not parts.scheme or not parts.netloc:
        return url
    netloc = parts.netloc
    host = parts.hostname
    if host:
        userinfo, _, hostport = netloc.rpartition("@")
        hostport = hostport.lower()
        netloc = f"{userinfo}@{hostport}" if userinfo else hostport
    path = parts.path or "/"
    return urlunsplit((parts.scheme.lower(), netloc, path, parts.query, ""))


def _hostname(url: str) -> Optional[str]:
    try:
        parts = urlsplit(url)
    except ValueError:
        return None
    if not parts.scheme or not parts.netloc:
        return None
    return parts.hostname


def is_same_domain(url_a: str, url_b: str) -> bool:
    """True when both URLs have the same hostname. Invalid URLs are never the same domain."""
    host_a = _hostname(url_a)
    host_b = _hostname(url_b)
    if not host_a or not host_b:
        return False
    return host_a == host_b


def is_valid_url(url: str) -> bool:
    return _hostname(url) is not None


def extract_domain(url: str) -> str:
    """Crawl domain label: the hostname without a leading `www.`."""
    host = _hostname(url)
    if not host:
        return "unknown-domain"
    return re.sub(r"^www\.", "", host)


def origin_of(url: str) -> Optional[str]:
    try:
        parts = urlsplit(url)
    except ValueError:
        return None
    if not parts.scheme or not parts.netloc:
        return None
    return f"{parts.scheme}://{parts.netloc}"


def path_of(url: str) -> Optional[str]:
    """Path used for robots matching, or None if `url` does not parse."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return None
    if not parts.scheme or not parts.netloc:
        return None
    return parts.path or "/"
