"""Convert, batch and check command implementation logic."""

from pathlib import Path
from typing import Any

import typer
from rich.table import Table

from anki_table.config import Config
from anki_table.converter import convert_directory, convert_file
from anki_table.exceptions import AnkiTableError
from anki_table.table.html_validator import validate_table_html

from .shared import console


def _print_error(error: AnkiTableError) -> None:
    console.print(f"[bold red]Error:[/bold red] {error.message}")
    if error.suggestion:
        console.print(f"[yellow]Suggestion:[/yellow] {error.suggestion}")


def run_convert(
    config: Config,
    logger: Any,
    input_path: Path,
    output_path: Path,
    title: str | None,
) -> None:
    """Execute the single-file conversion.

    Raises:
        typer.Exit: On conversion failure
    """
    try:
        result = convert_file(input_path, output_path, title=title, config=config)
    except AnkiTableError as e:
        logger.error("conversion_failed", file=str(input_path), **e.to_dict())
        _print_error(e)
        raise typer.Exit(code=1)

    console.print(
        f"[green]Wrote {result.output_path}[/green] "
        f"({result.data_rows} rows x {result.columns} columns, title: {result.title})"
    )


def run_batch(config: Config, logger: Any, directory: Path) -> None:
    """Convert every CSV file in a directory and print a summary.

    Raises:
        typer.Exit: If the directory is unusable or any file failed
    """
    try:
        batch = convert_directory(directory, config=config)
    except AnkiTableError as e:
        logger.error("batch_failed", directory=str(directory), **e.to_dict())
        _print_error(e)
        raise typer.Exit(code=1)

    if batch.total == 0:
        console.print(f"[yellow]No .csv files found in {directory}[/yellow]")
        return

    summary = Table(title=f"Converted {len(batch.converted)}/{batch.total} files")
    summary.add_column("Input")
    summary.add_column("Result")
    for result in batch.converted:
        summary.add_row(result.input_path.name, f"[green]{result.output_path.name}[/green]")
    for path, error in batch.failed.items():
        summary.add_row(path.name, f"[red]{error.message}[/red]")
    console.print(summary)

    if not batch.ok:
        raise typer.Exit(code=1)


def run_check(config: Config, logger: Any, document_path: Path) -> None:
    """Validate the structure of a rendered HTML document.

    Raises:
        typer.Exit: If the document cannot be read or has structural errors
    """
    try:
        document = document_path.read_text(encoding=config.output_encoding)
    except OSError as e:
        console.print(f"[bold red]Error:[/bold red] Cannot read {document_path}: {e}")
        raise typer.Exit(code=1)

    errors = validate_table_html(document, table_class=config.render.table_class)
    logger.info("check_completed", file=str(document_path), errors=len(errors))

    if errors:
        for error in errors:
            console.print(f"[red]FAIL[/red] {error}")
        raise typer.Exit(code=1)
    console.print(f"[green]PASS[/green] {document_path}")
