"""Plain-text report rendering with rich."""

import io

from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import Report, ReportConfig

SEVERITY_STYLES = {
    "critical": "bold red",
    "high": "red",
    "medium": "yellow",
    "low": "cyan",
    "info": "dim",
}


def _summary(report: Report) -> Panel:
    counts = " | ".join(
        f"[{SEVERITY_STYLES[severity]}]{severity.capitalize()}: {count}[/]"
        for severity, count in report.counts.items()
    )
    return Panel(
        f"Target: {report.target}\nTotal: {report.total} | {counts}",
        title="CDN SEO Audit",
        border_style="cyan",
    )


def _snapshots_table(report: Report) -> Table:
    table = Table(title="Fetched variants", show_lines=False)
    table.add_column("Path")
    table.add_column("Variant")
    table.add_column("Status", justify="right")
    table.add_column("Redirects", justify="right")
    table.add_column("Content-Type")
    table.add_column("CDN")
    for snapshot in report.snapshots:
        table.add_row(
            snapshot.path,
            snapshot.variant,
            str(snapshot.status_code),
            str(snapshot.redirects),
            snapshot.content_type or "-",
            snapshot.cdn or "-",
        )
    for failure in report.unavailable:
        table.add_row(
            failure.path,
            failure.variant,
            "[red]unavailable[/]",
            "-",
            failure.kind.value,
            "-",
        )
    return table


def _severity_table(severity: str, category: str, findings, config: ReportConfig) -> Table:
    table = Table(
        title=f"{severity.upper()} / {category}",
        title_style=SEVERITY_STYLES[severity],
        show_lines=True,
    )
    table.add_column("Rule")
    table.add_column("Variant")
    table.add_column("URL")
    table.add_column("Explanation")
    if config.include_remediation:
        table.add_column("Remediation")
    for finding in findings:
        explanation = finding.explanation
        if config.include_evidence and finding.evidence:
            explanation = f"{explanation}\n{finding.evidence}"
        row = [finding.rule_id, finding.variant, Text(finding.url), Text(explanation)]
        if config.include_remediation:
            row.append(Text(finding.remediation))
        table.add_row(*row)
    return table


def build_renderables(report: Report, config: ReportConfig | None = None) -> list[RenderableType]:
    """Return rich renderables for the whole report, in print order."""
    config = config or ReportConfig()
    renderables: list[RenderableType] = [_summary(report), _snapshots_table(report)]
    if not report.groups:
        renderables.append(Text("No findings.", style="green"))
        return renderables
    for severity, categories in report.groups.items():
        for category, findings in categories.items():
            renderables.append(_severity_table(severity, category, findings, config))
    return renderables


def render_text(report: Report, config: ReportConfig | None = None, width: int = 120) -> str:
    """Render the report to uncoloured text."""
    buffer = io.StringIO()
    console = Console(file=buffer, width=width, color_system=None, force_terminal=False)
    console.print(Group(*build_renderables(report, config)))
    return buffer.getvalue()
