"""Helpers for grouping findings."""

from cdnseo.models import SEVERITY_ORDER, Finding


def group_by_severity(findings: list[Finding]) -> dict[str, list[Finding]]:
    """Group findings by severity, most urgent first. Empty severities are kept."""
    grouped: dict[str, list[Finding]] = {severity.value: [] for severity in SEVERITY_ORDER}
    for finding in findings:
        grouped[finding.severity.value].append(finding)
    return grouped


def group_by_category(findings: list[Finding]) -> dict[str, list[Finding]]:
    """Group findings by content category, categories sorted by name."""
    grouped: dict[str, list[Finding]] = {}
    for finding in findings:
        grouped.setdefault(finding.category.value, []).append(finding)
    return {category: grouped[category] for category in sorted(grouped)}


def group_findings(findings: list[Finding]) -> dict[str, dict[str, list[Finding]]]:
    """Severity -> category -> findings, skipping severities with no findings."""
    return {
        severity: group_by_category(scoped)
        for severity, scoped in group_by_severity(findings).items()
        if scoped
    }
