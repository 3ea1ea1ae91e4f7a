from fastapi import FastAPI

from siteaudit.api.routers import create_crawls_router, create_link_checks_router, create_systems_router


def create_app(container) -> FastAPI:
    """Build the FastAPI application from a configured `Container`."""
    app = FastAPI(title="SiteAudit", version="0.1.0")
    artifact_store = container.artifact_store()
    config_service = container.config_service()

    app.include_router(create_systems_router(container.config(), config_service))
    app.include_router(
        create_crawls_router(
            site_crawler_factory=container.site_crawler,
            config_service=config_service,
            artifact_store=artifact_store,
        )
    )
    app.include_router(
        create_link_checks_router(
            link_checker_factory=container.link_checker,
            config_service=config_service,
            artifact_store=artifact_store,
        )
    )
    return app
