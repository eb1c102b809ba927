"""JSON report rendering."""

import json
from typing import Any

from cdnseo import __version__
from cdnseo.models import Finding

from .models import Report, ReportConfig


def _finding_dict(finding: Finding, config: ReportConfig) -> dict[str, Any]:
    return {
        "rule_id": finding.rule_id,
        "title": finding.title,
        "severity": finding.severity.value,
        "category": finding.category.value,
        "url": finding.url,
        "variant": finding.variant,
        "header": finding.header or None,
        "explanation": finding.explanation,
        "evidence": finding.evidence if config.include_evidence else None,
        "remediation": finding.remediation if config.include_remediation else None,
    }


def report_to_dict(report: Report, config: ReportConfig | None = None) -> dict[str, Any]:
    """Convert a report into JSON-serialisable data. Contains no timestamps."""
    config = config or ReportConfig(format="json")
    return {
        "report_metadata": {
            "tool": "cdnseo",
            "version": __version__,
        },
        "target": report.target,
        "summary": {"total_findings": report.total, **report.counts},
        "snapshots": [
            {
                "path": snapshot.path,
                "variant": snapshot.variant,
                "url": snapshot.url,
                "status_code": snapshot.status_code,
                "final_url": snapshot.final_url,
                "redirects": snapshot.redirects,
                "content_type": snapshot.content_type,
                "cdn": snapshot.cdn,
            }
            for snapshot in report.snapshots
        ],
        "unavailable": [
            {
                "path": failure.path,
                "variant": failure.variant,
                "url": failure.requested_url,
                "error": failure.kind.value,
                "message": failure.message,
            }
            for failure in report.unavailable
        ],
        "findings": {
            severity: {
                category: [_finding_dict(finding, config) for finding in findings]
                for category, findings in categories.items()
            }
            for severity, categories in report.groups.items()
        },
    }


def render_json(report: Report, config: ReportConfig | None = None) -> str:
    return json.dumps(report_to_dict(report, config), indent=2)
