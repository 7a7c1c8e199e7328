"""Command-line interface for anki-table."""

from __future__ import annotations

import typer

from .cli_commands import conversion_commands

app = typer.Typer(
    name="anki-table",
    help="Convert CSV tables to cloze-deletion HTML tables for Anki.",
    no_args_is_help=True,
)

conversion_commands.register(app)


def cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
