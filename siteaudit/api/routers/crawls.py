import logging
from typing import Callable, Optional

from fastapi import APIRouter, BackgroundTasks, HTTPException
from pydantic import BaseModel, Field

from siteaudit.domain.config import (
    DEFAULT_CRAWL_RATE_LIMIT_MS,
    DEFAULT_MAX_DEPTH,
    DEFAULT_MAX_PAGES,
    CrawlOptions,
)
from siteaudit.exceptions import ConfigNotFoundError, InvalidSeedUrlError
from siteaudit.utils.url_utils import extract_domain

logger = logging.getLogger(__name__)


class CrawlRequest(BaseModel):
    url: Optional[str] = None
    config: Optional[str] = None
    max_depth: Optional[int] = Field(default=None, ge=1, le=10)
    max_pages: Optional[int] = Field(default=None, ge=1, le=500)
    respect_robots_txt: Optional[bool] = None
    rate_limit_ms: Optional[int] = Field(default=None, ge=0, le=10_000)


def _merge_options(base: Optional[CrawlOptions], request: CrawlRequest) -> CrawlOptions:
    def pick(value, fallback):
        return value if value is not None else fallback

    return CrawlOptions(
        url=request.url or base.url,
        max_depth=pick(request.max_depth, base.max_depth if base else DEFAULT_MAX_DEPTH),
        max_pages=pick(request.max_pages, base.max_pages if base else DEFAULT_MAX_PAGES),
        respect_robots_txt=pick(request.respect_robots_txt, base.respect_robots_txt if base else True),
        rate_limit_ms=pick(request.rate_limit_ms, base.rate_limit_ms if base else DEFAULT_CRAWL_RATE_LIMIT_MS),
    )


def create_crawls_router(site_crawler_factory: Callable, config_service, artifact_store):
    router = APIRouter(prefix="/crawls", tags=["Crawls"])

    def _run_crawl(options: CrawlOptions) -> None:
        try:
            site_crawler_factory().crawl_website(options)
        except Exception:
            logger.exception("Crawl failed for %s", options.url)

    @router.post("", status_code=202)
    def start_crawl(request: CrawlRequest, background_tasks: BackgroundTasks):
        if not (request.url or request.config):
            raise HTTPException(status_code=400, detail="missing url or config")

        base = None
        if request.config:
            try:
                base = config_service.get_config(request.config).crawl
            except ConfigNotFoundError:
                raise HTTPException(status_code=404, detail="config not found")

        try:
            options = _merge_options(base, request)
            seed_url = site_crawler_factory().validate_seed(options.url)
        except (InvalidSeedUrlError, ValueError) as e:
            raise HTTPException(status_code=400, detail=str(e))

        background_tasks.add_task(_run_crawl, options)
        domain = extract_domain(seed_url)
        return {
            "status": "started",
            "url": seed_url,
            "domain": domain,
            "result_path": artifact_store.crawl_result_path(domain),
        }

    @router.get("/{domain}")
    def get_crawl(domain: str):
        result = artifact_store.read_crawl_result(domain)
        if result is None:
            raise HTTPException(status_code=404, detail="crawl result not found")
        return result.to_dict()

    return router
