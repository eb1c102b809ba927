"""Shared CLI app objects and logging setup."""

import logging
import os

import typer
from rich.console import Console
from rich.logging import RichHandler

app = typer.Typer(
    name="cdnseo",
    help="Audit CDN response headers for SEO regressions",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def normalize_verbose(verbose: bool) -> bool:
    """Resolve effective verbose flag from CLI arg and env var."""
    effective = verbose if isinstance(verbose, bool) else False
    if effective:
        return True
    env_verbose = os.environ.get("CDNSEO_VERBOSE", "").lower()
    return env_verbose in {"1", "true", "yes", "on"}


def setup_logging(verbose: bool) -> None:
    """Send log records to stderr through rich; DEBUG when verbose, else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
    # httpx logs every request at INFO; keep it to our own records.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
