from siteaudit.domain.crawl_result import CrawlError, CrawlResult
from siteaudit.domain.page import Headings, Page


def _result():
    page = Page(
        url='https://example.com/',
        title='Home',
        internal_links=('https://example.com/about',),
        external_links=('https://other.com/',),
        headings=Headings(h1=('Welcome',), h2=('One', 'Two')),
        noindex=True,
    )
    return CrawlResult(
        domain='example.com',
        start_url='https://example.com/',
        timestamp='2024-01-01T00:00:00.000Z',
        pages=(page,),
        sitemap_found=False,
        crawl_duration=3,
        errors=(CrawlError('https://example.com/x', 'HTTP 500', '2024-01-01T00:00:01.000Z'),),
    )


def test_to_dict_has_hand_off_shape():
    data = _result().to_dict()
    assert data['total_pages'] == 1
    assert data['pages'][0]['links'] == {'internal': ['https://example.com/about'], 'external': ['https://other.com/']}
    assert data['pages'][0]['is_indexed'] is False
    assert data['errors'][0]['error'] == 'HTTP 500'


def test_from_dict_restores_pages_and_graph():
    restored = CrawlResult.from_dict(_result().to_dict())
    assert restored == _result()
    graph = restored.graph()
    assert graph.get('https://example.com/').headings.h2 == ('One', 'Two')
