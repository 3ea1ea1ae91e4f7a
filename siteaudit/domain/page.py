from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Headings:
    h1: tuple[str, ...] = ()
    h2: tuple[str, ...] = ()
    h3: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, list[str]]:
        return {"h1": list(self.h1), "h2": list(self.h2), "h3": list(self.h3)}

    @classmethod
    def from_dict(cls, data: dict | None) -> "Headings":
        data = data or {}
        return cls(
            h1=tuple(data.get("h1") or ()),
            h2=tuple(data.get("h2") or ()),
            h3=tuple(data.get("h3") or ()),
        )


@dataclass(frozen=True)
class Page:
    """One successfully fetched and parsed URL.

    `internal_links` and `external_links` hold canonical absolute URLs, unique
    per page, in first-seen order.
    """

    url: str
    title: str = ""
    description: str = ""
    h1: str = ""
    canonical: str = ""
    og_image: str = ""
    og_title: str = ""
    og_description: str = ""
    word_count: int = 0
    internal_links: tuple[str, ...] = ()
    external_links: tuple[str, ...] = ()
    headings: Headings = field(default_factory=Headings)
    noindex: bool = False

    @property
    def is_indexed(self) -> bool:
        return not self.noindex

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "title": self.title,
            "description": self.description,
            "h1": self.h1,
            "canonical": self.canonical,
            "og_image": self.og_image,
            "og_title": self.og_title,
            "og_description": self.og_description,
            "word_count": self.word_count,
            "links": {
                "internal": list(self.internal_links),
                "external": list(self.external_links),
            },
            "headings": self.headings.to_dict(),
            "is_indexed": self.is_indexed,
            "noindex": self.noindex,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Page":
        links = data.get("links") or {}
        return cls(
            url=data["url"],
            title=data.get("title") or "",
            description=data.get("description") or "",
            h1=data.get("h1") or "",
            canonical=data.get("canonical") or "",
            og_image=data.get("og_image") or "",
            og_title=data.get("og_title") or "",
            og_description=data.get("og_description") or "",
            word_count=int(data.get("word_count") or 0),
            internal_links=tuple(links.get("internal") or ()),
            external_links=tuple(links.get("external") or ()),
            headings=Headings.from_dict(data.get("headings")),
            noindex=bool(data.get("noindex", False)),
        )

    def __repr__(self):
        return f"<Page url={self.url} internal={len(self.internal_links)} external={len(self.external_links)}>"
