"""String transforms applied to cells before they are embedded in HTML.

The order in which the renderer chains these matters: a later transform must
never re-trigger an earlier one. In particular HTML escaping runs before
cloze-delimiter escaping for data cells, so a literal ``&lt;`` in the input
is never double-escaped.
"""

from anki_table.error_codes import ErrorCode
from anki_table.exceptions import InvalidArgumentError

CLOZE_DELIMITER = "::"
ZERO_WIDTH_SPACE = "\u200b"
ESCAPED_CLOZE_DELIMITER = f":{ZERO_WIDTH_SPACE}:"

LINE_BREAK = "<br />"
LINE_BREAK_MARKER = "\u00a1"  # inverted exclamation mark
# UTF-8 bytes of the marker decoded as Latin-1
MISDECODED_LINE_BREAK_MARKER = "\u00c2\u00a1"


def _require_text(s: str | None, name: str) -> str:
    if s is None:
        raise InvalidArgumentError(
            f"{name}() requires a string, got None",
            error_code=ErrorCode.ARG_NONE.value,
        )
    return s


def unwrap_double_quotes(s: str) -> str:
    """Remove one pair of surrounding double quotes.

    ``"foo"`` becomes ``foo``; text that is not quoted on both sides, or is
    shorter than two characters, is returned unchanged.

    Raises:
        InvalidArgumentError: If ``s`` is None
    """
    s = _require_text(s, "unwrap_double_quotes")
    if len(s) >= 2 and s.startswith('"') and s.endswith('"'):
        return s[1:-1]
    return s


def escape_html(s: str) -> str:
    """Escape ``<`` and ``>``. No other character is touched."""
    s = _require_text(s, "escape_html")
    return s.replace("<", "&lt;").replace(">", "&gt;")


def escape_cloze_delimiter(s: str) -> str:
    """Break up ``::`` so Anki does not read it as a cloze hint separator."""
    s = _require_text(s, "escape_cloze_delimiter")
    return s.replace(CLOZE_DELIMITER, ESCAPED_CLOZE_DELIMITER)


def interpret_line_break_markup(s: str) -> str:
    """Turn the ``¡`` line-break marker into ``<br />``.

    Input may carry the marker either correctly decoded or as the ``Â¡``
    mis-decoding artifact. When the artifact is present only the artifact is
    replaced.
    """
    s = _require_text(s, "interpret_line_break_markup")
    if MISDECODED_LINE_BREAK_MARKER in s:
        return s.replace(MISDECODED_LINE_BREAK_MARKER, LINE_BREAK)
    if LINE_BREAK_MARKER in s:
        return s.replace(LINE_BREAK_MARKER, LINE_BREAK)
    return s


def transform_header(s: str) -> str:
    """Header cell pipeline: unwrap quotes, escape ``::``, escape HTML."""
    return escape_html(escape_cloze_delimiter(unwrap_double_quotes(s)))


def transform_cloze_text(s: str) -> str:
    """Data cell pipeline, without the cloze wrapper itself."""
    s = unwrap_double_quotes(s)
    s = escape_html(s)
    s = escape_cloze_delimiter(s)
    s = interpret_line_break_markup(s)
    # Second unwrap only matters for cells quoted twice in the source
    return unwrap_double_quotes(s)


def transform_literal_text(s: str) -> str:
    """Literal cell pipeline: HTML escaping only."""
    return escape_html(s)


def format_cloze(number: int, content: str) -> str:
    return f"{{{{c{number}::{content}}}}}"


__all__ = [
    "CLOZE_DELIMITER",
    "ESCAPED_CLOZE_DELIMITER",
    "LINE_BREAK",
    "LINE_BREAK_MARKER",
    "MISDECODED_LINE_BREAK_MARKER",
    "ZERO_WIDTH_SPACE",
    "escape_cloze_delimiter",
    "escape_html",
    "format_cloze",
    "interpret_line_break_markup",
    "transform_cloze_text",
    "transform_header",
    "transform_literal_text",
    "unwrap_double_quotes",
]
