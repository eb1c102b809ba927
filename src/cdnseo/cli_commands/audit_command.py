"""Audit CLI command."""

import asyncio
from pathlib import Path
from typing import Optional

import typer

from cdnseo.config import METHODS, load_settings, normalize_method
from cdnseo.modules.audit import Auditor
from cdnseo.modules.report import (
    FORMATS,
    ReportConfig,
    build_renderables,
    highest_severity,
    render_json,
    write_report,
)
from cdnseo.modules.rules import RuleTableError

from .shared import app, console, normalize_verbose, setup_logging

FAILING_SEVERITIES = {"critical", "high"}


@app.command()
def audit(
    target: str = typer.Argument(..., help="URL to audit, e.g. https://example.com"),
    path: Optional[list[str]] = typer.Option(
        None,
        "--path",
        "-p",
        help="Path to sample (repeatable). Defaults to the target URL's path.",
    ),
    output_format: str = typer.Option("text", "--format", "-f", help="Report format: text, json"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write report to a file"),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Per-request timeout (s)"),
    concurrency: Optional[int] = typer.Option(
        None, "--concurrency", help="Concurrent requests in flight"
    ),
    max_redirects: Optional[int] = typer.Option(
        None, "--max-redirects", help="Redirects followed before reporting a loop"
    ),
    html_max_age: Optional[int] = typer.Option(
        None, "--html-max-age", help="Longest acceptable HTML max-age (s)"
    ),
    acceptable_hops: Optional[int] = typer.Option(
        None, "--acceptable-hops", help="Longest redirect chain not reported"
    ),
    method: Optional[str] = typer.Option(None, "--method", help="Request method: GET or HEAD"),
    no_crawler: bool = typer.Option(False, "--no-crawler", help="Skip the Googlebot variant"),
    no_trailing_slash: bool = typer.Option(
        False, "--no-trailing-slash", help="Skip the trailing-slash variant"
    ),
    insecure: bool = typer.Option(False, "--insecure", help="Do not verify TLS certificates"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging to stderr"),
) -> None:
    """Fetch TARGET as a browser and as Googlebot and check its headers."""
    setup_logging(normalize_verbose(verbose))

    output_format = output_format.strip().lower()
    if output_format not in FORMATS:
        console.print(f"[red]Unsupported format: {output_format}. Use: {', '.join(FORMATS)}[/red]")
        raise typer.Exit(2)

    if method is not None and method.strip().upper() not in METHODS:
        console.print(f"[red]Unsupported method: {method}. Use: {', '.join(METHODS)}[/red]")
        raise typer.Exit(2)

    settings = load_settings().with_overrides(
        timeout=timeout,
        concurrency=concurrency,
        max_redirects=max_redirects,
        html_max_age=html_max_age,
        acceptable_hops=acceptable_hops,
        method=normalize_method(method) if method else None,
        include_crawler=False if no_crawler else None,
        include_trailing_slash=False if no_trailing_slash else None,
        verify_ssl=False if insecure else None,
    )

    try:
        auditor = Auditor(settings)
    except RuleTableError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(2) from exc

    try:
        report = asyncio.run(auditor.audit(target, path))
    except ValueError as exc:
        console.print(f"[red]Error: {exc}[/red]")
        raise typer.Exit(2) from exc

    config = ReportConfig(format=output_format)
    if output:
        written = write_report(report, output, config)
        console.print(f"[green]Report written:[/green] {written}")
    elif output_format == "json":
        typer.echo(render_json(report, config))
    else:
        for renderable in build_renderables(report, config):
            console.print(renderable)

    if highest_severity(report) in FAILING_SEVERITIES:
        raise typer.Exit(1)
