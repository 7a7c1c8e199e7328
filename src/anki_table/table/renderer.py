"""Cloze table renderer - Convert a parsed Table to an Anki-ready HTML table.

The output is a fixed stylesheet, a title div and one table whose header row
holds plain ``<th>`` cells and whose data rows hold ``{{cN::...}}`` cloze
deletions, numbered in row-major order across the whole table.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from anki_table.config_models import RenderOptions
from anki_table.error_codes import ErrorCode
from anki_table.exceptions import ColumnCountMismatchError, EmptyTableError
from anki_table.table.models import LiteralCell, Table, classify_cell
from anki_table.table.transforms import (
    format_cloze,
    transform_cloze_text,
    transform_header,
    transform_literal_text,
)
from anki_table.utils.logging import get_logger

logger = get_logger(__name__)

STYLE_TEMPLATE = """<style>
table.{cls} {{
  margin: auto;
  border-collapse: collapse;
}}
table.{cls},
table.{cls} th,
table.{cls} td {{
  border: 1px solid white;
}}
table.{cls} th,
table.{cls} td {{
  padding: 10px;
  text-align: left;
}}
</style>"""


def build_stylesheet(table_class: str) -> str:
    """Render the fixed stylesheet for the given table class selector."""
    return STYLE_TEMPLATE.format(cls=table_class)


def validate_column_counts(table: Table) -> int:
    """Check that every record has the header's width.

    Returns:
        The validated column count

    Raises:
        EmptyTableError: If the table has no header record
        ColumnCountMismatchError: On the first record of a different width
    """
    if not table.records:
        raise EmptyTableError(
            "Table has no header record",
            suggestion="The input must contain at least one non-comment line",
            error_code=ErrorCode.TBL_EMPTY.value,
        )

    expected = table.column_count
    for row_number, record in enumerate(table.records, start=1):
        if len(record) != expected:
            raise ColumnCountMismatchError(
                f"Inconsistent number of columns: row {row_number} has "
                f"{len(record)} cells, expected {expected}",
                row_number=row_number,
                expected=expected,
                actual=len(record),
                suggestion="Quote cells that contain the delimiter",
                error_code=ErrorCode.TBL_COLUMN_MISMATCH.value,
            )
    return expected


class TableRenderer:
    """Convert a Table to cloze-annotated HTML.

    The renderer is stateless between calls; the cloze counter lives only
    for the duration of one ``render`` call.
    """

    def __init__(self, options: RenderOptions | None = None) -> None:
        self.options = options or RenderOptions()

    @property
    def stylesheet(self) -> str:
        if self.options.style is not None:
            return self.options.style
        return build_stylesheet(self.options.table_class)

    def render(self, table: Table | Iterable[Sequence[str]], title: str) -> str:
        """Render a table to a complete HTML document body.

        Args:
            table: Parsed table, or any rows of cells
            title: Title shown above the table; inserted verbatim

        Returns:
            Document text ending with a newline

        Raises:
            EmptyTableError: If there is no header record
            ColumnCountMismatchError: If record widths differ
        """
        if not isinstance(table, Table):
            table = Table.from_rows(table)
        columns = validate_column_counts(table)

        lines = [
            self.stylesheet,
            f"<div>{title}</div>",
            f'<table class="{self.options.table_class}">',
            *self._render_header(table.header or ()),
        ]

        cloze_number = 1
        for record in table.data_records:
            row_lines, cloze_number = self._render_row(record, cloze_number)
            lines.extend(row_lines)

        lines.append("</table>")

        logger.debug(
            "table_rendered",
            title=title,
            columns=columns,
            data_rows=len(table.data_records),
            clozes=cloze_number - 1,
        )
        return "\n".join(lines) + "\n"

    def _render_header(self, header: Sequence[str]) -> list[str]:
        cells = [f"  <th>{transform_header(cell)}</th>" for cell in header]
        return ["<tr>", *cells, "</tr>"]

    def _render_row(
        self, record: Sequence[str], cloze_number: int
    ) -> tuple[list[str], int]:
        """Render one data row, returning its lines and the next cloze number."""
        lines = ["<tr>"]
        for raw in record:
            cell = classify_cell(raw, self.options.literal_sentinel)
            if isinstance(cell, LiteralCell):
                content = transform_literal_text(cell.text)
                if self.options.literal_cells_reserve_number:
                    cloze_number += 1
            else:
                content = format_cloze(cloze_number, transform_cloze_text(cell.text))
                cloze_number += 1
            lines.append(f"  <td>{content}</td>")
        lines.append("</tr>")
        return lines, cloze_number


def render(
    table: Table | Iterable[Sequence[str]],
    title: str,
    options: RenderOptions | None = None,
) -> str:
    """Render ``table`` with a default or given set of render options."""
    return TableRenderer(options).render(table, title)
