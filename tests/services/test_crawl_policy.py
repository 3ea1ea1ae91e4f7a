from siteaudit.domain.crawl_context import CrawlContext
from siteaudit.domain.page import Page
from siteaudit.services.crawl_policy import CrawlPolicy
from siteaudit.services.robots_parser import parse_robots_text


def _context(max_depth=2, max_pages=2):
    return CrawlContext('example.com', max_depth=max_depth, max_pages=max_pages)


def test_depth_limit_is_inclusive():
    policy = CrawlPolicy()
    ctx = _context(max_depth=2)
    assert not policy.should_skip_due_to_depth(2, ctx)
    assert policy.should_skip_due_to_depth(3, ctx)


def test_page_limit():
    policy = CrawlPolicy()
    ctx = _context(max_pages=1)
    assert not policy.should_stop_due_to_page_limit(ctx)
    ctx.add_page(Page(url='https://example.com/'))
    assert policy.should_stop_due_to_page_limit(ctx)


def test_visited_covers_attempted_and_fetched_urls():
    policy = CrawlPolicy()
    ctx = _context()
    ctx.mark_visited('https://example.com/a')
    ctx.add_page(Page(url='https://example.com/b'))
    assert policy.should_skip_due_to_visited('https://example.com/a', ctx)
    assert policy.should_skip_due_to_visited('https://example.com/b', ctx)
    assert not policy.should_skip_due_to_visited('https://example.com/c', ctx)


def test_robots_rules_apply_to_path():
    policy = CrawlPolicy(parse_robots_text('User-agent: *\nDisallow: /admin\nAllow: /admin/public'))
    assert policy.should_skip_due_to_robots('https://example.com/admin/secret')
    assert not policy.should_skip_due_to_robots('https://example.com/admin/public/page')
    assert not policy.should_skip_due_to_robots('https://example.com/')


def test_unparseable_url_is_skipped():
    assert CrawlPolicy().should_skip_due_to_robots('not a url')
