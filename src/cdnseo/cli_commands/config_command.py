"""Configuration CLI command."""

import dataclasses

import typer
import yaml
from rich.table import Table

from cdnseo.config import (
    find_project_dir,
    get_global_config_path,
    get_project_env_path,
    load_global_config,
    load_settings,
)

from .shared import app, console


@app.command()
def config(
    global_config: bool = typer.Option(
        False,
        "--global",
        help="Show the global config file instead of effective settings",
    ),
) -> None:
    """Show effective audit settings and where they come from."""
    if global_config:
        console.print(f"[bold]Global Configuration ({get_global_config_path()}):[/bold]")
        console.print(yaml.dump(load_global_config(), default_flow_style=False))
        return

    project_dir = find_project_dir()
    if project_dir:
        console.print(f"[dim]Project config:[/dim] {get_project_env_path(project_dir)}")
    else:
        console.print("[dim]No project .cdnseo/.env found; using env vars and global config.[/dim]")

    table = Table(title="Effective settings")
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    settings = load_settings(project_dir)
    for field in dataclasses.fields(settings):
        table.add_row(field.name, str(getattr(settings, field.name)))
    console.print(table)
