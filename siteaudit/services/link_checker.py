import logging
from typing import Callable, Iterable, Optional

from siteaudit.domain.config import LinkCheckOptions
from siteaudit.domain.crawl_result import CrawlResult
from siteaudit.domain.link_status import BrokenLinkResult, BrokenLinkSummary, LinkStatus
from siteaudit.domain.page_graph import PageGraph
from siteaudit.exceptions import HttpFetchError, HttpTimeoutError, NoLinksToCheckError
from siteaudit.services.orphan_detector import find_orphans
from siteaudit.services.rate_limiter import RateLimiter, fixed_delay
from siteaudit.utils.datetime_utils import utc_now_iso
from siteaudit.utils.url_utils import is_same_domain

logger = logging.getLogger(__name__)


def collect_candidates(graph: Optional[PageGraph], include_external: bool = False, urls: Iterable[str] = ()) -> list[str]:
    """Union of every page's internal links (plus external ones when asked) and `urls`, first-seen order."""
    candidates: dict[str, None] = {}
    if graph is not None:
        for page in graph:
            for link in page.internal_links:
                candidates.setdefault(link, None)
            if include_external:
                for link in page.external_links:
                    candidates.setdefault(link, None)
    for url in urls or ():
        candidates.setdefault(url, None)
    return list(candidates)


def summarize(broken: list[LinkStatus], checked: list[LinkStatus]) -> BrokenLinkSummary:
    return BrokenLinkSummary(
        total_404=sum(1 for s in broken if s.status == 404),
        total_timeouts=sum(1 for s in broken if s.is_timeout),
        total_redirect_chains=sum(1 for s in checked if s.is_long_redirect_chain),
    )


class LinkChecker:
    """Probe every link of a page graph and report the broken ones.

    Probes run one at a time, each preceded by the rate limiter. A failing
    probe becomes a broken `LinkStatus`; it never aborts the batch.
    """

    def __init__(
        self,
        *,
        http_service,
        artifact_store=None,
        rate_limiter_factory: Callable[[int], RateLimiter] = fixed_delay,
    ):
        self.http_service = http_service
        self.artifact_store = artifact_store
        self.rate_limiter_factory = rate_limiter_factory

    def check_link(self, url: str, timeout_ms: int) -> LinkStatus:
        try:
            response = self.http_service.probe(url, timeout=timeout_ms / 1000.0)
        except HttpTimeoutError as e:
            return LinkStatus(
                url=url,
                status=0,
                status_text="Timeout",
                is_working=False,
                response_time_ms=timeout_ms,
                error=f"Request timeout: {e.original}",
            )
        except HttpFetchError as e:
            return LinkStatus(
                url=url,
                status=0,
                status_text="Error",
                is_working=False,
                error=str(e.original) or e.original.__class__.__name__,
            )

        redirected = response.url is not None and response.url != url
        hops = response.redirect_count
        if redirected and hops == 0:
            hops = 1
        return LinkStatus(
            url=url,
            status=response.status_code,
            status_text=response.reason or "",
            is_working=200 <= response.status_code < 400,
            redirect_chain_length=hops,
            response_time_ms=response.elapsed_ms,
            redirect_url=response.url if redirected else None,
        )

    def check_links(
        self,
        graph: Optional[PageGraph],
        options: LinkCheckOptions,
        *,
        domain: str,
        start_url: Optional[str] = None,
    ) -> BrokenLinkResult:
        candidates = collect_candidates(graph, options.include_external, options.urls)
        if not candidates:
            raise NoLinksToCheckError(domain)

        # internal vs external timeout is decided against a full URL, never a bare hostname
        reference_url = start_url or candidates[0]
        rate_limiter = self.rate_limiter_factory(options.rate_limit_ms)
        logger.info("Checking %d links for %s", len(candidates), domain)

        checked: list[LinkStatus] = []
        broken: list[LinkStatus] = []
        for url in candidates:
            rate_limiter.wait()
            internal = is_same_domain(url, reference_url)
            timeout_ms = options.internal_timeout_ms if internal else options.external_timeout_ms
            try:
                status = self.check_link(url, timeout_ms)
            except Exception as e:
                logger.error("Link check error for %s: %s", url, e, exc_info=True)
                status = LinkStatus(url=url, status=0, status_text="Error", is_working=False, error=str(e))
            checked.append(status)
            if status.is_working:
                logger.debug("OK %s %s", status.status, url)
            else:
                logger.warning("Broken link %s: %s %s", url, status.status, status.error or status.status_text)
                broken.append(status)

        orphans = find_orphans(graph, start_url) if graph is not None and start_url else []
        result = BrokenLinkResult(
            domain=domain,
            timestamp=utc_now_iso(),
            broken_links=tuple(broken),
            working_links=len(checked) - len(broken),
            total_checked=len(checked),
            summary=summarize(broken, checked),
            orphaned_pages=tuple(orphans),
        )
        logger.info(
            "Link check complete for %s: %d/%d working, %d broken, %d orphaned",
            domain,
            result.working_links,
            result.total_checked,
            len(broken),
            len(orphans),
        )
        return result

    def candidates_for_domain(self, domain: str, options: LinkCheckOptions) -> tuple[Optional[CrawlResult], list[str]]:
        """Load the stored crawl for `domain` and list what would be checked. No network I/O."""
        crawl_result = self.artifact_store.read_crawl_result(domain) if self.artifact_store is not None else None
        graph = crawl_result.graph() if crawl_result is not None else None
        candidates = collect_candidates(graph, options.include_external, options.urls)
        if not candidates:
            raise NoLinksToCheckError(domain)
        return crawl_result, candidates

    def check_domain(self, domain: str, options: LinkCheckOptions) -> BrokenLinkResult:
        """Check links from the stored crawl of `domain` and persist the report."""
        if not domain:
            raise NoLinksToCheckError(domain)
        crawl_result, _ = self.candidates_for_domain(domain, options)
        result = self.check_links(
            crawl_result.graph() if crawl_result is not None else None,
            options,
            domain=domain,
            start_url=crawl_result.start_url if crawl_result is not None else None,
        )
        if self.artifact_store is not None:
            self.artifact_store.write_link_report(result)
        return result
