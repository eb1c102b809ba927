"""Report building and output."""

from pathlib import Path

from cdnseo.models import SEVERITY_ORDER, Finding
from cdnseo.modules.fetcher import FetchFailure, FetchOutcome, HeaderSnapshot

from .cdn import detect_cdn
from .grouping import group_by_severity, group_findings
from .json_report import render_json
from .models import Report, ReportConfig, SnapshotSummary
from .text_report import render_text

FORMATS = ("text", "json")


def summarize_snapshot(snapshot: HeaderSnapshot) -> SnapshotSummary:
    return SnapshotSummary(
        path=snapshot.path,
        variant=snapshot.variant,
        url=snapshot.requested_url,
        status_code=snapshot.status_code,
        final_url=snapshot.final_url,
        redirects=snapshot.redirect_count,
        content_type=snapshot.content_type,
        cdn=detect_cdn(snapshot),
    )


def build_report(
    target: str,
    findings: list[Finding],
    outcomes: list[FetchOutcome] | None = None,
) -> Report:
    """Group findings into a report. Same input always gives the same report."""
    outcomes = outcomes or []
    counts = {
        severity: len(scoped) for severity, scoped in group_by_severity(findings).items()
    }
    return Report(
        target=target,
        groups=group_findings(findings),
        counts=counts,
        snapshots=[
            summarize_snapshot(outcome)
            for outcome in outcomes
            if isinstance(outcome, HeaderSnapshot)
        ],
        unavailable=[outcome for outcome in outcomes if isinstance(outcome, FetchFailure)],
    )


def render_report(report: Report, config: ReportConfig | None = None) -> str:
    """Render a report in the configured format."""
    config = config or ReportConfig()
    if config.format == "json":
        return render_json(report, config)
    if config.format == "text":
        return render_text(report, config)
    raise ValueError(f"Unsupported format: {config.format}")


def write_report(report: Report, output: Path, config: ReportConfig | None = None) -> Path:
    """Render and write a report file, creating parent directories."""
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(render_report(report, config), encoding="utf-8")
    return output


def highest_severity(report: Report) -> str | None:
    for severity in SEVERITY_ORDER:
        if report.counts.get(severity.value):
            return severity.value
    return None
