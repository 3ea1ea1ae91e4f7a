from siteaudit.domain.page import Page
from siteaudit.domain.page_graph import PageGraph


def test_add_is_insert_if_absent():
    graph = PageGraph()
    first = Page(url='https://example.com/', title='first')
    assert graph.add(first)
    assert not graph.add(Page(url='https://example.com/', title='second'))
    assert len(graph) == 1
    assert graph.get('https://example.com/').title == 'first'


def test_iteration_keeps_discovery_order():
    graph = PageGraph([Page(url='https://example.com/b'), Page(url='https://example.com/a')])
    assert graph.urls() == ['https://example.com/b', 'https://example.com/a']
    assert [p.url for p in graph] == graph.urls()


def test_referenced_urls_unions_internal_links_only():
    graph = PageGraph([
        Page(url='https://example.com/', internal_links=('https://example.com/a',), external_links=('https://other.com/',)),
        Page(url='https://example.com/a', internal_links=('https://example.com/b', 'https://example.com/')),
    ])
    assert graph.referenced_urls() == {'https://example.com/a', 'https://example.com/b', 'https://example.com/'}
    assert 'https://example.com/a' in graph
    assert 'https://example.com/b' not in graph
