"""Built-in request variants and URL helpers."""

from urllib.parse import urlsplit, urlunsplit

from .models import RequestVariant

DEFAULT_VARIANT = "default"
CRAWLER_VARIANT = "googlebot"
TRAILING_SLASH_VARIANT = "trailing_slash"

# Literal string Google publishes for its crawler; servers match on "Googlebot/2.1".
GOOGLEBOT_USER_AGENT = "Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/126.0.0.0 Safari/537.36"
)


def default_variants(
    user_agent: str = DEFAULT_USER_AGENT,
    crawler_user_agent: str = GOOGLEBOT_USER_AGENT,
    include_crawler: bool = True,
    include_trailing_slash: bool = True,
) -> tuple[RequestVariant, ...]:
    """Return the variants fetched for every sampled path."""
    variants = [RequestVariant(name=DEFAULT_VARIANT, user_agent=user_agent)]
    if include_crawler:
        variants.append(RequestVariant(name=CRAWLER_VARIANT, user_agent=crawler_user_agent))
    if include_trailing_slash:
        variants.append(
            RequestVariant(name=TRAILING_SLASH_VARIANT, user_agent=user_agent, path_suffix="/")
        )
    return tuple(variants)


def apply_path_suffix(path: str, suffix: str) -> str | None:
    """Return the path to request for a variant, or None when it does not apply.

    A "/" suffix toggles the trailing slash: it is added when missing and
    removed when present. The root path has no slash-less form. Any query
    string is kept after the changed path.
    """
    if not suffix:
        return path
    base, sep, query = path.partition("?")
    if suffix != "/":
        return base + suffix + sep + query
    if base in ("", "/"):
        return None
    if base.endswith("/"):
        toggled = base.rstrip("/")
        if not toggled:
            return None
    else:
        toggled = base + "/"
    return toggled + sep + query


def normalize_target(target: str) -> tuple[str, str]:
    """Split a target URL into its origin and path.

    Raises ValueError for URLs without an http(s) scheme or host.
    """
    parts = urlsplit(target.strip())
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ValueError(f"Target must be an absolute http(s) URL: {target!r}")
    origin = urlunsplit((parts.scheme, parts.netloc, "", "", ""))
    path = parts.path or "/"
    return origin, f"{path}?{parts.query}" if parts.query else path


def normalize_path(path: str) -> str:
    path = path.strip()
    if not path:
        return "/"
    return path if path.startswith("/") else f"/{path}"


def build_url(origin: str, path: str) -> str:
    return origin.rstrip("/") + normalize_path(path)
