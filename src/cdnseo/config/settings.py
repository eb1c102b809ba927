"""Audit settings resolved from configuration sources."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from pathlib import Path

from cdnseo.modules.fetcher import DEFAULT_USER_AGENT, GOOGLEBOT_USER_AGENT
from cdnseo.modules.rules import DEFAULT_HTML_MAX_AGE

from .getters import get_bool, get_config, get_float, get_int

logger = logging.getLogger(__name__)

METHODS = ("GET", "HEAD")


@dataclass(frozen=True)
class AuditSettings:
    """Everything an audit run needs besides the target."""

    timeout: float = 10.0
    concurrency: int = 4
    max_redirects: int = 10
    html_max_age: int = DEFAULT_HTML_MAX_AGE
    acceptable_hops: int = 1
    method: str = "GET"
    user_agent: str = DEFAULT_USER_AGENT
    crawler_user_agent: str = GOOGLEBOT_USER_AGENT
    include_crawler: bool = True
    include_trailing_slash: bool = True
    verify_ssl: bool = True

    def with_overrides(self, **changes) -> AuditSettings:
        """Return a copy with every non-None keyword applied."""
        return dataclasses.replace(
            self, **{key: value for key, value in changes.items() if value is not None}
        )


def normalize_method(method: str | None, default: str = "GET") -> str:
    """Normalize and validate the request method."""
    name = method.strip().upper() if isinstance(method, str) else default
    return name if name in METHODS else default


def _method_setting(project_dir: Path | None, default: str) -> str:
    raw = get_config("CDNSEO_METHOD", project_dir)
    method = normalize_method(raw, default)
    if raw is not None and method != str(raw).strip().upper():
        logger.warning("Ignoring CDNSEO_METHOD=%r: use one of %s", raw, ", ".join(METHODS))
    return method


def load_settings(project_dir: Path | None = None) -> AuditSettings:
    """Resolve settings from env vars, project .env, global config and defaults."""
    defaults = AuditSettings()
    return AuditSettings(
        timeout=get_float("CDNSEO_TIMEOUT", defaults.timeout, project_dir),
        concurrency=get_int("CDNSEO_CONCURRENCY", defaults.concurrency, project_dir, minimum=1),
        max_redirects=get_int("CDNSEO_MAX_REDIRECTS", defaults.max_redirects, project_dir),
        html_max_age=get_int("CDNSEO_HTML_MAX_AGE", defaults.html_max_age, project_dir),
        acceptable_hops=get_int("CDNSEO_ACCEPTABLE_HOPS", defaults.acceptable_hops, project_dir),
        method=_method_setting(project_dir, defaults.method),
        user_agent=get_config("CDNSEO_USER_AGENT", project_dir, defaults.user_agent),
        crawler_user_agent=get_config(
            "CDNSEO_CRAWLER_USER_AGENT", project_dir, defaults.crawler_user_agent
        ),
        verify_ssl=get_bool("CDNSEO_VERIFY_SSL", defaults.verify_ssl, project_dir),
    )
