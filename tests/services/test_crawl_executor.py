from unittest.mock import MagicMock

from siteaudit.domain.crawl_context import CrawlContext
from siteaudit.domain.page import Page
from siteaudit.exceptions import PageFetchError
from siteaudit.services.crawl_executor import CrawlExecutor
from siteaudit.services.crawl_policy import CrawlPolicy
from siteaudit.services.robots_parser import parse_robots_text

ROOT = 'https://example.com/'


class FakeFetcher:
    """Serves pages from a {url: [internal links]} map; unknown URLs fail with 404."""

    def __init__(self, site):
        self.site = site
        self.fetched = []

    def fetch_page(self, url):
        self.fetched.append(url)
        if url not in self.site:
            raise PageFetchError(url, 'HTTP 404 Not Found')
        return Page(url=url, internal_links=tuple(self.site[url]))


def _u(path):
    return f'https://example.com{path}'


def _crawl(site, max_depth=3, max_pages=100, policy=None, rate_limiter=None):
    fetcher = FakeFetcher(site)
    executor = CrawlExecutor(page_fetcher=fetcher)
    context = executor.crawl(
        ROOT,
        'example.com',
        policy or CrawlPolicy(),
        max_depth,
        max_pages,
        rate_limiter=rate_limiter,
    )
    return context, fetcher


def test_self_linking_page_appears_once():
    context, fetcher = _crawl({ROOT: [ROOT]})
    assert context.graph.urls() == [ROOT]
    assert fetcher.fetched == [ROOT]


def test_depth_first_in_link_order():
    site = {
        ROOT: [_u('/b'), _u('/c')],
        _u('/b'): [_u('/d')],
        _u('/c'): [],
        _u('/d'): [],
    }
    context, _ = _crawl(site)
    assert context.graph.urls() == [ROOT, _u('/b'), _u('/d'), _u('/c')]


def test_page_limit_bounds_the_graph():
    site = {ROOT: [_u(f'/p{i}') for i in range(20)]}
    site.update({_u(f'/p{i}'): [ROOT] for i in range(20)})
    context, fetcher = _crawl(site, max_pages=5)
    assert len(context.graph) == 5
    assert len(fetcher.fetched) == 5


def test_no_page_beyond_max_depth():
    site = {
        ROOT: [_u('/1')],
        _u('/1'): [_u('/2')],
        _u('/2'): [_u('/3')],
        _u('/3'): [],
    }
    context, fetcher = _crawl(site, max_depth=2)
    assert context.graph.urls() == [ROOT, _u('/1'), _u('/2')]
    assert _u('/3') not in fetcher.fetched


def test_failed_fetch_is_recorded_and_crawl_continues():
    site = {ROOT: [_u('/missing'), _u('/ok')], _u('/ok'): []}
    context, _ = _crawl(site)
    assert context.graph.urls() == [ROOT, _u('/ok')]
    assert [e.url for e in context.errors] == [_u('/missing')]
    assert context.errors[0].error == 'HTTP 404 Not Found'


def test_failed_url_is_not_retried():
    site = {ROOT: [_u('/missing')], _u('/a'): [_u('/missing')]}
    site[ROOT] = [_u('/missing'), _u('/a')]
    context, fetcher = _crawl(site)
    assert fetcher.fetched.count(_u('/missing')) == 1
    assert len(context.errors) == 1


def test_robots_disallowed_urls_are_skipped_silently():
    robots = parse_robots_text('User-agent: *\nDisallow: /private', user_agent='Googlebot')
    site = {ROOT: [_u('/private/x'), _u('/public')], _u('/public'): [], _u('/private/x'): []}
    context, fetcher = _crawl(site, policy=CrawlPolicy(robots))
    assert context.graph.urls() == [ROOT, _u('/public')]
    assert _u('/private/x') not in fetcher.fetched
    assert context.errors == []


def test_rate_limiter_waits_before_every_fetch():
    limiter = MagicMock()
    site = {ROOT: [_u('/a')], _u('/a'): []}
    _, fetcher = _crawl(site, rate_limiter=limiter)
    assert limiter.wait.call_count == len(fetcher.fetched) == 2


def test_unexpected_fetch_error_is_recorded():
    fetcher = MagicMock()
    fetcher.fetch_page.side_effect = RuntimeError('parser exploded')
    context = CrawlContext('example.com', max_depth=3, max_pages=10)
    page = CrawlExecutor(page_fetcher=fetcher).fetch_into(ROOT, context, MagicMock())
    assert page is None
    assert context.errors[0].error == 'parser exploded'
