from siteaudit.domain.page_graph import PageGraph
from siteaudit.utils.url_utils import canonicalize_url


def find_orphans(graph: PageGraph, root_url: str) -> list[str]:
    """Pages no other page links to internally, excluding the site root.

    Pure derivation over the graph; keeps discovery order.
    """
    referenced = graph.referenced_urls()
    root = canonicalize_url(root_url) if root_url else root_url
    return [url for url in graph.urls() if url != root and url not in referenced]
