import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Optional

from siteaudit.domain.robots_policy import RobotsPolicy


@dataclass(frozen=True)
class _RobotsCacheEntry:
    policy: Optional[RobotsPolicy]
    stored_at: float


_MISSING = object()


class RobotsCache:
    """
    Cache for RobotsPolicy instances keyed by origin (`scheme://host`).

    A stored None records that the origin has no usable robots.txt, so it is
    not fetched again while the entry is fresh.
    """

    def __init__(self, *, max_size: int = 2048, ttl_seconds: int = 3600, clock=time.monotonic):
        """Create a robots.txt cache.

        - `max_size` bounds the number of origins cached (LRU eviction).
        - `ttl_seconds` bounds staleness; entries older than TTL are treated as missing.
        """
        self._max_size = int(max_size) if max_size is not None else 2048
        if self._max_size <= 0:
            self._max_size = 1

        self._ttl_seconds = int(ttl_seconds) if ttl_seconds is not None else 3600
        if self._ttl_seconds <= 0:
            # Treat non-positive TTL as "don't cache" by expiring immediately.
            self._ttl_seconds = 0

        self._clock = clock
        self._cache: "OrderedDict[str, _RobotsCacheEntry]" = OrderedDict()

    def _is_expired(self, entry: _RobotsCacheEntry) -> bool:
        if self._ttl_seconds == 0:
            return True
        return (self._clock() - entry.stored_at) > self._ttl_seconds

    def _evict_if_needed(self) -> None:
        while len(self._cache) > self._max_size:
            self._cache.popitem(last=False)

    def lookup(self, origin: str):
        """Return the cached policy (possibly None), or `RobotsCache.MISSING` on a miss."""
        entry = self._cache.get(origin)
        if entry is None:
            return _MISSING
        if self._is_expired(entry):
            self._cache.pop(origin, None)
            return _MISSING
        # Refresh LRU order on hit
        self._cache.move_to_end(origin)
        return entry.policy

    def set(self, origin: str, policy: Optional[RobotsPolicy]) -> None:
        """Cache a policy for an origin. None indicates no usable robots.txt."""
        self._cache[origin] = _RobotsCacheEntry(policy=policy, stored_at=self._clock())
        self._cache.move_to_end(origin)
        self._evict_if_needed()

    def clear(self) -> None:
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)


RobotsCache.MISSING = _MISSING
