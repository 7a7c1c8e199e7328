"""Core conversion pipeline: CSV records to cloze-annotated HTML.

- parser.py: delimited text to Table
- renderer.py: Table to HTML document with numbered cloze deletions
- transforms.py: string escapes applied to cells
- html_validator.py: structural checks on an emitted document
"""

from anki_table.table.html_validator import validate_table_html
from anki_table.table.models import (
    Cell,
    ClozeCell,
    LiteralCell,
    Record,
    Table,
    classify_cell,
)
from anki_table.table.parser import iter_records, parse
from anki_table.table.renderer import (
    TableRenderer,
    build_stylesheet,
    render,
    validate_column_counts,
)

__all__ = [
    "Cell",
    "ClozeCell",
    "LiteralCell",
    "Record",
    "Table",
    "TableRenderer",
    "build_stylesheet",
    "classify_cell",
    "iter_records",
    "parse",
    "render",
    "validate_column_counts",
    "validate_table_html",
]
