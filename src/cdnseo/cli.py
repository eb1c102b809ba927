"""cdnseo CLI - audit CDN response headers for SEO regressions."""

from cdnseo.cli_commands import audit_command, config_command, rules_command  # noqa: F401
from cdnseo.cli_commands.shared import app, console


@app.command()
def version() -> None:
    """Show the installed cdnseo version."""
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as pkg_version

    try:
        current_version = pkg_version("cdnseo")
    except PackageNotFoundError:
        current_version = "0.0.0+unknown"

    console.print(f"cdnseo {current_version}")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
