"""Differential check between the default and declared-crawler responses."""

from cdnseo.models import Finding, Severity
from cdnseo.modules.fetcher import HeaderSnapshot
from cdnseo.modules.rules import resolve_category

from .formatting import display_header

# Per-hit CDN diagnostics; their presence says nothing about cloaking.
VOLATILE_HEADERS = frozenset(
    {
        "age",
        "date",
        "cf-ray",
        "cf-cache-status",
        "x-amz-cf-id",
        "x-amz-cf-pop",
        "x-cache",
        "x-cache-hits",
        "x-served-by",
        "x-timer",
        "x-vercel-id",
        "x-vercel-cache",
        "x-nf-request-id",
        "x-request-id",
        "server-timing",
    }
)

# Compared by value as well as presence.
SIGNIFICANT_HEADERS = (
    "x-robots-tag",
    "link",
    "content-type",
    "content-language",
    "location",
)


def header_divergences(default: HeaderSnapshot, crawler: HeaderSnapshot) -> list[tuple[str, str]]:
    """Return (header, description) for every header that differs."""
    default_names = default.header_names() - VOLATILE_HEADERS
    crawler_names = crawler.header_names() - VOLATILE_HEADERS
    divergences: list[tuple[str, str]] = []
    for name in sorted(default_names - crawler_names):
        divergences.append((name, f"{display_header(name)} sent to browsers only"))
    for name in sorted(crawler_names - default_names):
        divergences.append((name, f"{display_header(name)} sent to the crawler only"))
    for name in SIGNIFICANT_HEADERS:
        if name not in default_names or name not in crawler_names:
            continue
        browser_value = default.get(name)
        crawler_value = crawler.get(name)
        if browser_value != crawler_value:
            divergences.append(
                (
                    name,
                    f"{display_header(name)} differs: {browser_value!r} vs {crawler_value!r}",
                )
            )
    return divergences


def _chain(snapshot: HeaderSnapshot) -> str:
    if not snapshot.redirects:
        return "no redirects"
    return " -> ".join(str(hop.status_code) for hop in snapshot.redirects)


def redirect_divergences(default: HeaderSnapshot, crawler: HeaderSnapshot) -> list[str]:
    """Describe differences in the redirect chains and where they end."""
    differences: list[str] = []
    default_statuses = [hop.status_code for hop in default.redirects]
    crawler_statuses = [hop.status_code for hop in crawler.redirects]
    if default_statuses != crawler_statuses:
        differences.append(f"redirects {_chain(default)} vs {_chain(crawler)}")
    if default.final_url != crawler.final_url:
        differences.append(f"final URL {default.final_url} vs {crawler.final_url}")
    return differences


def check_parity(default: HeaderSnapshot, crawler: HeaderSnapshot) -> list[Finding]:
    """Return one critical content-parity finding if the responses diverge, else none."""
    differences: list[str] = []
    if default.status_code != crawler.status_code:
        differences.append(f"status {default.status_code} vs {crawler.status_code}")

    divergences = header_divergences(default, crawler)
    redirects = redirect_divergences(default, crawler)
    differences.extend(redirects)
    differences.extend(description for _, description in divergences)
    if not differences:
        return []

    names = [name for name, _ in divergences]
    if redirects and "location" not in names:
        names.insert(0, "location")
    headers = ", ".join(display_header(name) for name in names)
    return [
        Finding(
            rule_id="content-parity",
            title="Crawler receives a different response than browsers",
            severity=Severity.CRITICAL,
            category=resolve_category(default),
            url=default.final_url,
            variant=crawler.variant,
            header=headers,
            explanation="; ".join(differences) + ".",
            evidence=f"browser status {default.status_code}, crawler status {crawler.status_code}",
            remediation=(
                "Remove user-agent based rules in CDN workers, edge functions or origin "
                "config so crawlers and browsers get identical headers."
            ),
        )
    ]
