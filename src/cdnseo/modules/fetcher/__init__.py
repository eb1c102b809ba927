"""Fetcher stage: request variants and header snapshots."""

from .errors import classify_error
from .fetcher import Fetcher
from .models import (
    FetchErrorKind,
    FetchFailure,
    FetchOutcome,
    HeaderSnapshot,
    RedirectHop,
    RequestVariant,
)
from .variants import (
    CRAWLER_VARIANT,
    DEFAULT_USER_AGENT,
    DEFAULT_VARIANT,
    GOOGLEBOT_USER_AGENT,
    TRAILING_SLASH_VARIANT,
    apply_path_suffix,
    build_url,
    default_variants,
    normalize_path,
    normalize_target,
)

__all__ = [
    "CRAWLER_VARIANT",
    "DEFAULT_USER_AGENT",
    "DEFAULT_VARIANT",
    "GOOGLEBOT_USER_AGENT",
    "TRAILING_SLASH_VARIANT",
    "FetchErrorKind",
    "FetchFailure",
    "FetchOutcome",
    "Fetcher",
    "HeaderSnapshot",
    "RedirectHop",
    "RequestVariant",
    "apply_path_suffix",
    "build_url",
    "classify_error",
    "default_variants",
    "normalize_path",
    "normalize_target",
]
