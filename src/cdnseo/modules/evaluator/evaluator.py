"""Rule table evaluation against header snapshots."""

from cdnseo.models import ContentCategory, Finding
from cdnseo.modules.fetcher import (
    CRAWLER_VARIANT,
    DEFAULT_VARIANT,
    TRAILING_SLASH_VARIANT,
    FetchFailure,
    FetchOutcome,
    HeaderSnapshot,
)
from cdnseo.modules.rules import ExpectationRule, RuleTable, resolve_category

from .checks import (
    check_link_header,
    check_redirect_chain,
    check_temporary_redirects,
    check_trailing_slash,
    failure_finding,
)
from .parity import check_parity


def applicable_rules(
    snapshot: HeaderSnapshot,
    table: RuleTable,
    category: ContentCategory,
) -> list[ExpectationRule]:
    """Rules that apply to ``snapshot``, most-specific-matcher-wins per header.

    When several rules target the same header, only those whose matching
    specificity equals the highest one for that header are kept. Table
    order is preserved.
    """
    matched: list[tuple[ExpectationRule, int]] = []
    best: dict[str, int] = {}
    for rule in table:
        specificity = rule.specificity_for(snapshot, category)
        if specificity is None:
            continue
        header = rule.header.lower()
        matched.append((rule, specificity))
        best[header] = max(best.get(header, specificity), specificity)
    return [rule for rule, specificity in matched if specificity == best[rule.header.lower()]]


def evaluate_snapshot(snapshot: HeaderSnapshot, table: RuleTable) -> list[Finding]:
    """Evaluate every applicable rule; each failed predicate yields one finding."""
    category = resolve_category(snapshot)
    findings: list[Finding] = []
    for rule in applicable_rules(snapshot, table, category):
        value = snapshot.get(rule.header)
        if rule.predicate.evaluate(value):
            continue
        observed = "absent" if value is None else repr(value)
        findings.append(
            Finding(
                rule_id=rule.id,
                title=rule.title,
                severity=rule.severity,
                category=category,
                url=snapshot.final_url,
                variant=snapshot.variant,
                header=rule.header,
                explanation=(
                    f"{rule.header} should be {rule.predicate.describe()}, but is {observed}."
                ),
                evidence=f"{rule.header}: {value}" if value is not None else "",
                remediation=rule.remediation,
            )
        )
    return findings


def _by_variant(outcomes: list[FetchOutcome]) -> dict[str, HeaderSnapshot]:
    return {
        outcome.variant: outcome
        for outcome in outcomes
        if isinstance(outcome, HeaderSnapshot)
    }


def evaluate_outcomes(
    outcomes: list[FetchOutcome],
    table: RuleTable,
    acceptable_hops: int = 1,
) -> list[Finding]:
    """Evaluate all variant outcomes of one sampled path.

    Order: per-snapshot findings in outcome order, then the parity check,
    then the trailing-slash comparison, then unavailable variants.
    """
    findings: list[Finding] = []
    for outcome in outcomes:
        if isinstance(outcome, FetchFailure):
            continue
        findings.extend(evaluate_snapshot(outcome, table))
        findings.extend(check_redirect_chain(outcome, acceptable_hops))
        findings.extend(check_temporary_redirects(outcome))
        findings.extend(check_link_header(outcome))

    snapshots = _by_variant(outcomes)
    default = snapshots.get(DEFAULT_VARIANT)
    if default is not None:
        crawler = snapshots.get(CRAWLER_VARIANT)
        if crawler is not None:
            findings.extend(check_parity(default, crawler))
        slashed = snapshots.get(TRAILING_SLASH_VARIANT)
        if slashed is not None:
            findings.extend(check_trailing_slash(default, slashed))

    findings.extend(
        failure_finding(outcome) for outcome in outcomes if isinstance(outcome, FetchFailure)
    )
    return findings
