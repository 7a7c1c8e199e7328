"""Conversion CLI commands: convert, batch, check."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .convert_handler import run_batch, run_check, run_convert
from .shared import get_config_and_logger

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to anki-table.yaml", exists=True),
]
LogLevelOption = Annotated[
    str | None,
    typer.Option("--log-level", help="Log level (DEBUG, INFO, WARN, ERROR)"),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Show all log messages on terminal"),
]


def register(app: typer.Typer) -> None:
    """Register conversion commands on the given Typer app."""

    @app.command()
    def convert(
        input_path: Annotated[
            Path, typer.Argument(help="CSV file to convert", metavar="INPUT")
        ],
        output_path: Annotated[
            Path, typer.Argument(help="HTML file to write", metavar="OUTPUT")
        ],
        title: Annotated[
            str | None,
            typer.Option(
                "--title",
                "-t",
                help="Title above the table (default: #title= directive or file name)",
            ),
        ] = None,
        config_path: ConfigOption = None,
        log_level: LogLevelOption = None,
        verbose: VerboseOption = False,
    ) -> None:
        """Convert one CSV file to a cloze-annotated HTML table."""
        config, logger = get_config_and_logger(config_path, log_level, verbose)
        run_convert(config, logger, input_path, output_path, title)

    @app.command()
    def batch(
        directory: Annotated[
            Path, typer.Argument(help="Directory containing .csv files")
        ],
        config_path: ConfigOption = None,
        log_level: LogLevelOption = None,
        verbose: VerboseOption = False,
    ) -> None:
        """Convert every .csv file in a directory to .html next to it."""
        config, logger = get_config_and_logger(config_path, log_level, verbose)
        run_batch(config, logger, directory)

    @app.command()
    def check(
        document: Annotated[
            Path, typer.Argument(help="Rendered HTML file to check", exists=True)
        ],
        config_path: ConfigOption = None,
        log_level: LogLevelOption = None,
        verbose: VerboseOption = False,
    ) -> None:
        """Check that a rendered HTML table is consistent."""
        config, logger = get_config_and_logger(config_path, log_level, verbose)
        run_check(config, logger, document)
