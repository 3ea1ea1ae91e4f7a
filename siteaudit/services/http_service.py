import time
from typing import Callable, Optional

import requests

from siteaudit.domain.http_response import HttpResponse
from siteaudit.exceptions import HttpFetchError, HttpTimeoutError


class HttpService:
    """
    HTTP client wrapper for fetching pages and probing links.

    Requires http_client / probe_client callables for dependency injection
    (typically `session.get` and `session.head` of a configured
    `requests.Session`). This enables easy testing without patching.
    """

    def __init__(self, user_agent: str, http_client: Callable, probe_client: Optional[Callable] = None, timeout: float = 30):
        self.user_agent = user_agent
        self.timeout = timeout
        self.http_client = http_client
        self.probe_client = probe_client or http_client

    def _headers(self) -> dict:
        return {"User-Agent": self.user_agent}

    def _send(self, client: Callable, url: str, timeout: float, **kwargs):
        try:
            return client(url, headers=self._headers(), timeout=timeout, **kwargs)
        except requests.exceptions.Timeout as e:
            raise HttpTimeoutError(url, e) from e
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e

    def fetch(self, url: str) -> HttpResponse:
        """GET `url` and return response with status code, body text, and Content-Type."""
        started = time.monotonic()
        resp = self._send(self.http_client, url, self.timeout)
        return self._to_response(url, resp, started, include_body=True)

    def fetch_text(self, url: str) -> HttpResponse:
        """Fetch a plain-text or XML resource (robots.txt, sitemap.xml) - delegates to fetch()."""
        return self.fetch(url)

    def probe(self, url: str, timeout: Optional[float] = None) -> HttpResponse:
        """HEAD `url`, following redirects, without reading a body."""
        started = time.monotonic()
        resp = self._send(
            self.probe_client,
            url,
            timeout if timeout is not None else self.timeout,
            allow_redirects=True,
        )
        return self._to_response(url, resp, started, include_body=False)

    def _to_response(self, url: str, resp, started: float, include_body: bool) -> HttpResponse:
        # Extract headers/history if present; let real exceptions bubble up.
        ct = None
        if hasattr(resp, 'headers'):
            ct = resp.headers.get('Content-Type')
        history = getattr(resp, 'history', None)
        if not isinstance(history, (list, tuple)):
            history = []
        final_url = getattr(resp, 'url', None)
        if not isinstance(final_url, str):
            final_url = url
        reason = getattr(resp, 'reason', None)
        return HttpResponse(
            status_code=resp.status_code,
            text=resp.text if include_body else "",
            content_type=ct,
            url=final_url,
            redirect_count=len(history),
            reason=reason if isinstance(reason, str) else "",
            elapsed_ms=int((time.monotonic() - started) * 1000),
        )


def make_session(max_redirects: int = 5) -> requests.Session:
    """Session shared by crawl fetches and link probes, with a bounded redirect chain."""
    session = requests.Session()
    session.max_redirects = max_redirects
    return session
