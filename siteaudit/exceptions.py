"""Custom exceptions for SiteAudit services."""


class InvalidSeedUrlError(ValueError):
    """Raised before any network activity when the crawl seed is not an absolute URL."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Invalid URL: {url}")


class NoLinksToCheckError(ValueError):
    """Raised when a link check has no candidate URLs."""

    def __init__(self, domain: str = None):
        self.domain = domain
        suffix = f" for {domain}" if domain else ""
        super().__init__(f"No links found to check{suffix}")


class ConfigNotFoundError(Exception):
    """Raised when a requested audit profile cannot be found on disk."""

    def __init__(self, config_name: str, reason: str = "not found"):
        self.config_name = config_name
        self.reason = reason
        super().__init__(f"Config '{config_name}' {reason}")


class HttpFetchError(Exception):
    """Raised when an HTTP fetch fails due to network/transport errors."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")


class HttpTimeoutError(HttpFetchError):
    """Transport failure caused by the request exceeding its timeout."""


class PageFetchError(Exception):
    """Raised when a page cannot be fetched or is not usable as an HTML page."""

    def __init__(self, url: str, message: str):
        self.url = url
        self.message = message
        super().__init__(message)
