from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

# Chains longer than this many hops are reported in the summary.
SHORT_CHAIN_MAX_HOPS = 2


@dataclass(frozen=True)
class LinkStatus:
    """Outcome of a single link-health probe. `status` is 0 when no response arrived."""

    url: str
    status: int
    status_text: str
    is_working: bool
    redirect_chain_length: int = 0
    response_time_ms: int = 0
    redirect_url: Optional[str] = None
    error: Optional[str] = None

    @property
    def is_timeout(self) -> bool:
        return self.status_text == "Timeout" or (self.error is not None and "timeout" in self.error.lower())

    @property
    def is_long_redirect_chain(self) -> bool:
        return self.redirect_chain_length > SHORT_CHAIN_MAX_HOPS

    def to_dict(self) -> dict[str, Any]:
        d = {
            "url": self.url,
            "status": self.status,
            "status_text": self.status_text,
            "is_working": self.is_working,
            "redirect_chain_length": self.redirect_chain_length,
            "response_time_ms": self.response_time_ms,
        }
        if self.redirect_url is not None:
            d["redirect_url"] = self.redirect_url
        if self.error is not None:
            d["error"] = self.error
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LinkStatus":
        return cls(
            url=data["url"],
            status=int(data.get("status") or 0),
            status_text=data.get("status_text", ""),
            is_working=bool(data.get("is_working", False)),
            redirect_chain_length=int(data.get("redirect_chain_length") or 0),
            response_time_ms=int(data.get("response_time_ms") or 0),
            redirect_url=data.get("redirect_url"),
            error=data.get("error"),
        )


@dataclass(frozen=True)
class BrokenLinkSummary:
    total_404: int = 0
    total_timeouts: int = 0
    total_redirect_chains: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "total_404": self.total_404,
            "total_timeouts": self.total_timeouts,
            "total_redirect_chains": self.total_redirect_chains,
        }


@dataclass(frozen=True)
class BrokenLinkResult:
    domain: str
    timestamp: str
    broken_links: tuple[LinkStatus, ...]
    working_links: int
    total_checked: int
    summary: BrokenLinkSummary
    orphaned_pages: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "domain": self.domain,
            "timestamp": self.timestamp,
            "broken_links": [s.to_dict() for s in self.broken_links],
            "working_links": self.working_links,
            "total_checked": self.total_checked,
            "orphaned_pages": list(self.orphaned_pages),
            "summary": self.summary.to_dict(),
        }
