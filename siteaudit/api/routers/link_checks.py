import logging
from typing import Callable, Optional

from fastapi import APIRouter, BackgroundTasks, HTTPException
from pydantic import BaseModel, Field

from siteaudit.domain.config import AuditConfig, LinkCheckOptions
from siteaudit.exceptions import ConfigNotFoundError, NoLinksToCheckError
from siteaudit.utils.url_utils import extract_domain

logger = logging.getLogger(__name__)


class LinkCheckRequest(BaseModel):
    domain: Optional[str] = None
    config: Optional[str] = None
    urls: list[str] = Field(default_factory=list)
    include_external: Optional[bool] = None
    rate_limit_ms: Optional[int] = Field(default=None, ge=0, le=10_000)
    internal_timeout_ms: Optional[int] = Field(default=None, gt=0)
    external_timeout_ms: Optional[int] = Field(default=None, gt=0)


def _merge_options(profile: Optional[AuditConfig], request: LinkCheckRequest) -> LinkCheckOptions:
    base = profile.link_check if profile else LinkCheckOptions()

    def pick(value, fallback):
        return value if value is not None else fallback

    return LinkCheckOptions(
        include_external=pick(request.include_external, base.include_external),
        rate_limit_ms=pick(request.rate_limit_ms, base.rate_limit_ms),
        internal_timeout_ms=pick(request.internal_timeout_ms, base.internal_timeout_ms),
        external_timeout_ms=pick(request.external_timeout_ms, base.external_timeout_ms),
        urls=tuple(request.urls) or base.urls,
    )


def create_link_checks_router(link_checker_factory: Callable, config_service, artifact_store):
    router = APIRouter(prefix="/link-checks", tags=["Link checks"])

    def _run_check(domain: str, options: LinkCheckOptions) -> None:
        try:
            link_checker_factory().check_domain(domain, options)
        except Exception:
            logger.exception("Link check failed for %s", domain)

    @router.post("", status_code=202)
    def start_link_check(request: LinkCheckRequest, background_tasks: BackgroundTasks):
        profile = None
        if request.config:
            try:
                profile = config_service.get_config(request.config)
            except ConfigNotFoundError:
                raise HTTPException(status_code=404, detail="config not found")

        options = _merge_options(profile, request)
        domain = request.domain
        if request.urls:
            domain = extract_domain(request.urls[0])
        elif not domain and profile is not None:
            domain = extract_domain(profile.crawl.url)
        if not domain:
            raise HTTPException(status_code=400, detail="Must provide domain, config or URLs for link checking")

        try:
            _, candidates = link_checker_factory().candidates_for_domain(domain, options)
        except NoLinksToCheckError as e:
            raise HTTPException(status_code=400, detail=str(e))

        background_tasks.add_task(_run_check, domain, options)
        return {
            "status": "started",
            "domain": domain,
            "total_links": len(candidates),
            "result_path": artifact_store.link_report_path(domain),
        }

    @router.get("/{domain}")
    def get_link_check(domain: str):
        report = artifact_store.read_link_report(domain)
        if report is None:
            raise HTTPException(status_code=404, detail="link report not found")
        return report

    return router
