from fastapi import APIRouter


def create_systems_router(settings: dict, config_service):
    """Health, effective settings and the audit profiles found on disk."""
    router = APIRouter(prefix="/systems", tags=["System"])

    @router.get("/health")
    def health():
        return {"status": "ok"}

    @router.get("/config")
    def get_config():
        return {
            "user_agent": settings.get("USER_AGENT"),
            "robots_user_agent": settings.get("ROBOTS_USER_AGENT"),
            "work_dir": settings.get("REVIEW_WORK_DIR"),
            "configs_dir": settings.get("SITEAUDIT_CONFIGS_DIR"),
            "settings": dict(settings),
        }

    @router.get("/profiles")
    def list_profiles():
        return [
            {
                "name": cfg.name,
                "config_path": cfg.config_path,
                "url": cfg.crawl.url,
                "description": cfg.description,
            }
            for cfg in config_service.list_configs()
        ]

    return router
