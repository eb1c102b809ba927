"""Rules CLI command."""

import json
from typing import Optional

import typer
from rich.table import Table

from cdnseo.config import load_settings
from cdnseo.modules.rules import RuleTableError, default_rules, validate_rule_table

from .shared import app, console


@app.command()
def rules(
    html_max_age: Optional[int] = typer.Option(
        None, "--html-max-age", help="Longest acceptable HTML max-age (s)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the rule table as JSON"),
) -> None:
    """List the built-in header expectations."""
    max_age = html_max_age if html_max_age is not None else load_settings().html_max_age
    try:
        table = validate_rule_table(default_rules(max_age))
    except RuleTableError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(2) from exc

    if as_json:
        typer.echo(
            json.dumps(
                [
                    {
                        "id": rule.id,
                        "title": rule.title,
                        "severity": rule.severity.value,
                        "header": rule.header,
                        "expects": rule.predicate.describe(),
                        "applies_to": [matcher.describe() for matcher in rule.matchers],
                    }
                    for rule in table
                ],
                indent=2,
            )
        )
        return

    output = Table(title=f"Rule table ({len(table)} rules)")
    output.add_column("ID", style="bold")
    output.add_column("Severity")
    output.add_column("Header")
    output.add_column("Expects")
    output.add_column("Applies to")
    for rule in table:
        output.add_row(
            rule.id,
            rule.severity.value,
            rule.header,
            rule.predicate.describe(),
            ", ".join(matcher.describe() for matcher in rule.matchers),
        )
    console.print(output)
