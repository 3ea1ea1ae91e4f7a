import json
import logging
import os
from typing import Any, Optional

from siteaudit.domain.crawl_result import CrawlResult
from siteaudit.domain.link_status import BrokenLinkResult

logger = logging.getLogger(__name__)

CRAWL_RESULTS_FILE = "crawl-results.json"
LINKS_DIR = "links"
BROKEN_LINKS_FILE = "broken-links.json"
# Directories the screenshot, performance, accessibility and diff tools write into.
ANALYSIS_DIRS = ("screenshots", "lighthouse", LINKS_DIR, "accessibility", "baselines", "diffs")


class ArtifactStore:
    """Filesystem/JSON IO for per-domain audit artifacts.

    Responsibility: lay out `<work_dir>/<domain-slug>/` and read/write the
    crawl hand-off file and the link-health report. It knows nothing about HTTP.
    """

    def __init__(self, *, work_dir: str):
        self.work_dir = work_dir

    def domain_dir(self, domain: str) -> str:
        return os.path.join(self.work_dir, domain.replace(".", "-"))

    def ensure_layout(self, domain: str) -> str:
        base = self.domain_dir(domain)
        os.makedirs(base, exist_ok=True)
        for name in ANALYSIS_DIRS:
            os.makedirs(os.path.join(base, name), exist_ok=True)
        return base

    def crawl_result_path(self, domain: str) -> str:
        return os.path.join(self.domain_dir(domain), CRAWL_RESULTS_FILE)

    def link_report_path(self, domain: str) -> str:
        return os.path.join(self.domain_dir(domain), LINKS_DIR, BROKEN_LINKS_FILE)

    def _write_json(self, path: str, data: Any) -> str:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        return path

    def _read_json(self, path: str) -> Optional[Any]:
        """Return parsed JSON for `path`, or None if missing/invalid."""
        if not os.path.isfile(path):
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError):
            logger.warning("Could not read artifact %s", path, exc_info=True)
            return None

    def write_crawl_result(self, result: CrawlResult) -> str:
        self.ensure_layout(result.domain)
        path = self._write_json(self.crawl_result_path(result.domain), result.to_dict())
        logger.info("Wrote crawl result for %s to %s", result.domain, path)
        return path

    def read_crawl_result(self, domain: str) -> Optional[CrawlResult]:
        data = self._read_json(self.crawl_result_path(domain))
        if not isinstance(data, dict):
            return None
        try:
            return CrawlResult.from_dict(data)
        except (KeyError, TypeError, ValueError):
            logger.warning("Malformed crawl result for %s", domain, exc_info=True)
            return None

    def write_link_report(self, result: BrokenLinkResult) -> str:
        self.ensure_layout(result.domain)
        path = self._write_json(self.link_report_path(result.domain), result.to_dict())
        logger.info("Wrote link report for %s to %s", result.domain, path)
        return path

    def read_link_report(self, domain: str) -> Optional[dict]:
        data = self._read_json(self.link_report_path(domain))
        return data if isinstance(data, dict) else None
