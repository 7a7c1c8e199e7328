"""anki-table: turn CSV tables into cloze-deletion HTML tables for Anki."""

__version__ = "0.1.0"

from anki_table.converter import convert_directory, convert_file, convert_text
from anki_table.table import Table, TableRenderer, parse, render

__all__ = [
    "Table",
    "TableRenderer",
    "convert_directory",
    "convert_file",
    "convert_text",
    "parse",
    "render",
]
