"""Built-in checks that look at a whole response rather than one header."""

import re

from cdnseo.models import ContentCategory, Finding, Severity
from cdnseo.modules.fetcher import FetchFailure, HeaderSnapshot
from cdnseo.modules.rules import resolve_category

from .links import parse_link_header

TEMPORARY_REDIRECTS = frozenset({302, 303, 307})

_HREFLANG_RE = re.compile(
    r"^(x-default|[a-z]{2,3}(-[a-z]{4})?(-([a-z]{2}|\d{3}))?)$",
    re.IGNORECASE,
)


def check_redirect_chain(snapshot: HeaderSnapshot, acceptable_hops: int = 1) -> list[Finding]:
    """Informational finding when a redirect chain is longer than acceptable."""
    hops = snapshot.redirect_count
    if hops <= acceptable_hops:
        return []
    chain = " -> ".join(
        [f"{hop.url} ({hop.status_code})" for hop in snapshot.redirects] + [snapshot.final_url]
    )
    plural = "hop" if acceptable_hops == 1 else "hops"
    return [
        Finding(
            rule_id="redirect-chain",
            title=f"Redirect chain longer than {acceptable_hops} {plural}",
            severity=Severity.INFO,
            category=resolve_category(snapshot),
            url=snapshot.requested_url,
            variant=snapshot.variant,
            explanation=f"{hops} redirects before reaching {snapshot.final_url}.",
            evidence=chain,
            remediation="Point the first redirect straight at the final URL.",
        )
    ]


def check_temporary_redirects(snapshot: HeaderSnapshot) -> list[Finding]:
    temporary = [hop for hop in snapshot.redirects if hop.status_code in TEMPORARY_REDIRECTS]
    if not temporary:
        return []
    evidence = ", ".join(f"{hop.status_code} {hop.url}" for hop in temporary)
    return [
        Finding(
            rule_id="temporary-redirect",
            title="Temporary redirect used in redirect chain",
            severity=Severity.LOW,
            category=resolve_category(snapshot),
            url=snapshot.requested_url,
            variant=snapshot.variant,
            header="Location",
            explanation=(
                f"{len(temporary)} temporary redirect(s); search engines may keep indexing "
                "the source URL."
            ),
            evidence=evidence,
            remediation="Use 301 or 308 for permanent moves.",
        )
    ]


def check_link_header(snapshot: HeaderSnapshot) -> list[Finding]:
    """Validate hreflang alternates and canonical declarations in the Link header."""
    links = parse_link_header(snapshot.get("link"))
    if not links:
        return []

    findings: list[Finding] = []
    category = resolve_category(snapshot)
    invalid = [
        link.params["hreflang"]
        for link in links
        if "alternate" in link.rel
        and "hreflang" in link.params
        and not _HREFLANG_RE.match(link.params["hreflang"])
    ]
    if invalid:
        findings.append(
            Finding(
                rule_id="hreflang-invalid",
                title="Link header declares invalid hreflang values",
                severity=Severity.MEDIUM,
                category=category,
                url=snapshot.final_url,
                variant=snapshot.variant,
                header="Link",
                explanation=f"Not a language(-region) code or x-default: {', '.join(invalid)}.",
                evidence=snapshot.get("link") or "",
                remediation="Use ISO 639-1 language codes with optional ISO 3166-1 regions.",
            )
        )

    canonicals = sorted({link.url for link in links if "canonical" in link.rel})
    if len(canonicals) > 1:
        findings.append(
            Finding(
                rule_id="canonical-multiple",
                title="Link header declares more than one canonical URL",
                severity=Severity.MEDIUM,
                category=category,
                url=snapshot.final_url,
                variant=snapshot.variant,
                header="Link",
                explanation=f"{len(canonicals)} canonical URLs: {', '.join(canonicals)}.",
                evidence=snapshot.get("link") or "",
                remediation="Emit a single rel=canonical from either the CDN or the origin.",
            )
        )
    return findings


def _has_canonical(snapshot: HeaderSnapshot) -> bool:
    return any("canonical" in link.rel for link in parse_link_header(snapshot.get("link")))


def check_trailing_slash(default: HeaderSnapshot, slashed: HeaderSnapshot) -> list[Finding]:
    """Flag both slash forms of a URL answering 200 as separate, uncanonicalised pages."""
    if default.status_code != 200 or slashed.status_code != 200:
        return []
    if default.final_url == slashed.final_url:
        return []
    if _has_canonical(default) or _has_canonical(slashed):
        return []
    return [
        Finding(
            rule_id="trailing-slash-duplicate",
            title="URL answers both with and without a trailing slash",
            severity=Severity.MEDIUM,
            category=resolve_category(default),
            url=default.final_url,
            variant=slashed.variant,
            explanation=(
                f"{default.final_url} and {slashed.final_url} both return 200 without "
                "a redirect or canonical Link header."
            ),
            remediation="Redirect one form to the other with a 301 or add a canonical Link header.",
        )
    ]


def failure_finding(failure: FetchFailure) -> Finding:
    """Report a variant that could not be fetched."""
    return Finding(
        rule_id="fetch-unavailable",
        title=f"Variant '{failure.variant}' could not be fetched",
        severity=Severity.MEDIUM,
        category=ContentCategory.UNKNOWN,
        url=failure.requested_url,
        variant=failure.variant,
        explanation=f"{failure.kind.value}: {failure.message}",
        remediation="Check DNS, TLS and redirect configuration for this URL and retry.",
    )
