"""Shared utilities for CLI commands."""

from pathlib import Path
from typing import Any

import typer
from rich.console import Console

from anki_table.config import Config, load_config, set_config
from anki_table.exceptions import ConfigurationError
from anki_table.utils.logging import configure_logging, get_logger

# Shared console for all commands
console = Console()


def get_config_and_logger(
    config_path: Path | None = None,
    log_level: str | None = None,
    verbose: bool = False,
) -> tuple[Config, Any]:
    """Load configuration and logger (dependency injection helper).

    Args:
        config_path: Optional path to a YAML config file
        log_level: Console log level, overrides the configured one
        verbose: Show all log messages on terminal

    Returns:
        Tuple of (Config, Logger)

    Raises:
        typer.Exit: If the configuration cannot be loaded
    """
    try:
        config = load_config(config_path)
    except ConfigurationError as e:
        console.print(f"[bold red]Configuration error:[/bold red] {e.message}")
        if e.suggestion:
            console.print(f"[yellow]Suggestion:[/yellow] {e.suggestion}")
        raise typer.Exit(code=1)
    set_config(config)

    configure_logging(
        log_level or config.log_level,
        log_file=config.log_file,
        verbose=verbose,
    )
    return config, get_logger("cli")
