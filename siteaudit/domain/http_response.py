from typing import NamedTuple, Optional


class HttpResponse(NamedTuple):
    """Response from HTTP fetch or probe operation."""
    status_code: int
    text: str
    content_type: Optional[str] = None
    url: Optional[str] = None
    redirect_count: int = 0
    reason: str = ""
    elapsed_ms: int = 0
