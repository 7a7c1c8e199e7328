"""CLI command modules for anki-table.

- shared.py: Common utilities (config/logger loading, console)
- convert_handler.py: convert, batch and check implementations
- conversion_commands.py: Typer registration for those commands
"""

from .convert_handler import run_batch, run_check, run_convert
from .shared import console, get_config_and_logger

__all__ = [
    "console",
    "get_config_and_logger",
    "run_batch",
    "run_check",
    "run_convert",
]
