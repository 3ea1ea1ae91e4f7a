"""Line-oriented robots.txt parsing into a `RobotsPolicy` for one crawler identity."""
import logging
import re
from typing import Optional

from siteaudit.domain.robots_policy import PERMIT_ALL, RobotsPolicy

logger = logging.getLogger(__name__)


def _directive(line: str) -> Optional[tuple[str, str]]:
    line = line.split("#", 1)[0].strip()
    if ":" not in line:
        return None
    name, _, value = line.partition(":")
    return name.strip().lower(), value.strip()


def compile_pattern(value: str) -> re.Pattern:
    """Prefix pattern where `*` matches any characters and a trailing `$` anchors the end of the path.

    Every other character is literal.
    """
    anchored = value.endswith("$")
    if anchored:
        value = value[:-1]
    body = ".*".join(re.escape(part) for part in value.split("*"))
    return re.compile("^" + body + (r"\Z" if anchored else ""))


def parse_robots_text(robots_text: Optional[str], user_agent: str = "*") -> RobotsPolicy:
    """Build the policy that applies to `user_agent`.

    A group applies when one of its `User-agent` lines equals `user_agent`
    (case-insensitive) or is `*`. Starting a new applicable group discards the
    rules collected so far, so the last applicable group wins. Never raises: a
    missing or malformed document permits everything.
    """
    if not robots_text or not isinstance(robots_text, str):
        return PERMIT_ALL

    agent = (user_agent or "*").strip().lower()
    allow: list[re.Pattern] = []
    disallow: list[re.Pattern] = []
    has_sitemap = False
    in_scope = False
    # consecutive User-agent lines form one group
    previous_was_agent = False

    try:
        for raw_line in robots_text.lstrip("\ufeff").splitlines():
            parsed = _directive(raw_line)
            if parsed is None:
                continue
            name, value = parsed

            if name == "user-agent":
                matches = value.lower() == agent or value == "*"
                if previous_was_agent:
                    if matches and not in_scope:
                        in_scope = True
                        allow, disallow = [], []
                elif matches:
                    in_scope = True
                    allow, disallow = [], []
                else:
                    in_scope = False
                previous_was_agent = True
                continue

            previous_was_agent = False
            if name == "sitemap":
                has_sitemap = True
            elif name == "allow" and in_scope and value:
                allow.append(compile_pattern(value))
            elif name == "disallow" and in_scope and value:
                disallow.append(compile_pattern(value))
    except Exception:
        logger.exception("Error parsing robots.txt; permitting all paths")
        return PERMIT_ALL

    return RobotsPolicy(allow=tuple(allow), disallow=tuple(disallow), can_use_sitemap=has_sitemap)
