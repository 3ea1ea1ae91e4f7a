from siteaudit.domain.robots_policy import RobotsPolicy
from siteaudit.services.robots_cache import RobotsCache


def test_cache_miss():
    cache = RobotsCache()
    assert cache.lookup("https://example.com") is RobotsCache.MISSING


def test_cache_stores_and_retrieves_policy():
    cache = RobotsCache()
    policy = RobotsPolicy()
    cache.set("https://example.com", policy)
    assert cache.lookup("https://example.com") is policy


def test_cache_stores_none_for_failed_fetch():
    cache = RobotsCache()
    cache.set("https://example.com", None)
    assert cache.lookup("https://example.com") is None


def test_entries_expire_after_ttl():
    now = [100.0]
    cache = RobotsCache(ttl_seconds=10, clock=lambda: now[0])
    cache.set("https://example.com", RobotsPolicy())
    now[0] = 111.0
    assert cache.lookup("https://example.com") is RobotsCache.MISSING


def test_lru_eviction():
    cache = RobotsCache(max_size=2)
    cache.set("https://a.com", RobotsPolicy())
    cache.set("https://b.com", RobotsPolicy())
    cache.lookup("https://a.com")
    cache.set("https://c.com", RobotsPolicy())
    assert cache.lookup("https://b.com") is RobotsCache.MISSING
    assert cache.lookup("https://a.com") is not RobotsCache.MISSING
    assert len(cache) == 2


def test_clear_removes_all_entries():
    cache = RobotsCache()
    cache.set("https://example.com", RobotsPolicy())
    cache.clear()
    assert len(cache) == 0
