import re
from dataclasses import dataclass


@dataclass(frozen=True)
class RobotsPolicy:
    """Allow/disallow prefix patterns in scope for one crawler identity.

    Disallow is checked first and an allow match overrides it; a path matching
    neither is permitted.
    """

    allow: tuple[re.Pattern, ...] = ()
    disallow: tuple[re.Pattern, ...] = ()
    can_use_sitemap: bool = False

    def can_crawl(self, path: str) -> bool:
        if not any(p.match(path) for p in self.disallow):
            return True
        return any(p.match(path) for p in self.allow)


PERMIT_ALL = RobotsPolicy()
