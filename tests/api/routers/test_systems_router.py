from unittest.mock import Mock

from siteaudit.api.routers.systems import create_systems_router
from siteaudit.domain.config import AuditConfig, CrawlOptions


def _get_endpoint(router, path: str, method: str):
    for route in router.routes:
        if getattr(route, "path", None) == path and method.upper() in getattr(route, "methods", set()):
            return route.endpoint
    raise AssertionError(f"No route found for {method} {path}")


SETTINGS = {
    "USER_AGENT": "TestBot",
    "ROBOTS_USER_AGENT": "Googlebot",
    "REVIEW_WORK_DIR": "/tmp/reviews",
    "SITEAUDIT_CONFIGS_DIR": "/tmp/configs",
    "API_PORT": 8000,
}


def test_health():
    router = create_systems_router(SETTINGS, Mock())
    assert _get_endpoint(router, "/systems/health", "GET")() == {"status": "ok"}


def test_config_reports_agents_and_directories():
    router = create_systems_router(SETTINGS, Mock())
    body = _get_endpoint(router, "/systems/config", "GET")()
    assert body["robots_user_agent"] == "Googlebot"
    assert body["work_dir"] == "/tmp/reviews"
    assert body["configs_dir"] == "/tmp/configs"
    assert body["settings"]["API_PORT"] == 8000


def test_profiles_lists_audit_configs():
    profile = AuditConfig(
        name="shop",
        config_path="shop.yml",
        crawl=CrawlOptions(url="https://shop.example.com"),
        description="Storefront",
    )
    router = create_systems_router(SETTINGS, Mock(list_configs=Mock(return_value=[profile])))
    assert _get_endpoint(router, "/systems/profiles", "GET")() == [
        {"name": "shop", "config_path": "shop.yml", "url": "https://shop.example.com", "description": "Storefront"}
    ]
