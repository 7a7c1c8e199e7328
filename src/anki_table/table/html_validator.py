"""HTML structure validation for rendered cloze tables."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

_CLOZE_RE = re.compile(r"\{\{c(\d+)::")


def validate_table_html(document: str, table_class: str = "fred") -> list[str]:
    """Validate the structure of a rendered cloze table document.

    Args:
        document: HTML document text as written by the renderer
        table_class: CSS class the table is expected to carry

    Returns:
        List of validation error messages (empty if the document looks
        importable).
    """
    errors: list[str] = []
    soup = BeautifulSoup(document, "html5lib")

    table = soup.find("table", class_=table_class)
    if table is None:
        errors.append(f'No <table class="{table_class}"> element found')
        return errors

    rows = table.find_all("tr")
    if not rows:
        errors.append("Table has no rows")
        return errors

    header_cells = rows[0].find_all("th")
    if not header_cells:
        errors.append("First row has no <th> header cells")
        return errors

    width = len(header_cells)
    last_number = 0
    for index, row in enumerate(rows[1:], start=2):
        cells = row.find_all("td")
        if len(cells) != width:
            errors.append(f"Row {index} has {len(cells)} <td> cells, expected {width}")
        for cell in cells:
            for match in _CLOZE_RE.finditer(cell.get_text()):
                number = int(match.group(1))
                if number <= last_number:
                    errors.append(
                        f"Row {index}: cloze c{number} does not follow c{last_number}"
                    )
                last_number = number

    return errors
