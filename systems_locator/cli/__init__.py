"""CLI commands for systems-locator."""

import typer

from systems_locator.cli.configuration import app as config_app

main_app = typer.Typer(
    name="systems-locator",
    help="Systems locator CLI",
    no_args_is_help=True,
)
main_app.add_typer(config_app, name="config")


def main() -> None:
    """Entry point for the CLI."""
    main_app()


__all__ = ["main", "main_app"]
