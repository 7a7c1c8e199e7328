"""Record parser: delimited text to a Table."""

from __future__ import annotations

import csv
import io
from collections.abc import Iterator

from anki_table.config_models import CsvFormat
from anki_table.error_codes import ErrorCode
from anki_table.exceptions import MalformedInputError
from anki_table.table.models import Record, Table
from anki_table.utils.logging import get_logger

logger = get_logger(__name__)

# Whitespace removed by trimming: space and every control character below it
_TRIM_CHARS = "".join(chr(c) for c in range(0x21))

DEFAULT_CSV_FORMAT = CsvFormat()


class _RecordLines:
    """Line iterator feeding csv.reader.

    Drops comment lines and rewrites each remaining line so that csv.reader
    reads it the way the input format means it:

    - whitespace between a closing quote and the next delimiter or line end
      is removed
    - an escape character in front of anything other than the delimiter, the
      quote or another escape is kept as text, by doubling it

    A line is only a comment when it starts a new record, so a ``#`` line
    inside a quoted multi-line field stays part of that field. The caller
    flips ``at_record_start`` back on after each record it receives.
    """

    def __init__(self, raw_text: str, csv_format: CsvFormat) -> None:
        self._lines = io.StringIO(raw_text, newline="")
        self._format = csv_format
        self.at_record_start = True
        self.line_number = 0
        # Lexer state, carried across lines for multi-line fields
        self._in_quotes = False
        self._field_start = True
        self._after_quote = False

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        marker = self._format.comment_marker
        while True:
            line = next(self._lines)
            self.line_number += 1
            if (
                self.at_record_start
                and marker is not None
                and line.lstrip().startswith(marker)
            ):
                continue
            self.at_record_start = False
            return self._normalize(line)

    def _normalize(self, line: str) -> str:
        delimiter = self._format.delimiter
        quote = self._format.quote_char
        escape = self._format.escape_char
        out: list[str] = []
        i = 0
        while i < len(line):
            c = line[i]
            if c in "\r\n":
                if not self._in_quotes:
                    self._field_start = True
                    self._after_quote = False
                out.append(line[i:])
                break

            if self._after_quote:
                if c != delimiter and c <= " ":
                    i += 1
                    continue
                self._after_quote = False
                if c != delimiter:
                    # Text after a closing quote; left for csv.reader to reject
                    out.append(line[i:])
                    break

            if c == escape:
                following = line[i + 1 : i + 2]
                self._field_start = False
                if following in ("", "\r", "\n"):
                    # Escaped line break, the field continues on the next line
                    out.append(line[i:])
                    break
                if following in (delimiter, quote, escape):
                    out.append(c + following)
                    i += 2
                else:
                    out.append(c + c)
                    i += 1
                continue

            if self._in_quotes:
                if c == quote:
                    if line[i + 1 : i + 2] == quote:
                        out.append(c + c)
                        i += 2
                        continue
                    self._in_quotes = False
                    self._after_quote = True
            elif c == delimiter:
                self._field_start = True
            elif c == quote and self._field_start:
                self._in_quotes = True
                self._field_start = False
            else:
                self._field_start = False
            out.append(c)
            i += 1
        return "".join(out)


def _ends_with_dangling_escape(line: str, escape_char: str | None) -> bool:
    if escape_char is None:
        return False
    stripped = line.rstrip("\r\n")
    run = len(stripped) - len(stripped.rstrip(escape_char))
    return run % 2 == 1


def _check_trailing_escape(raw_text: str, csv_format: CsvFormat) -> None:
    """Reject input whose last record ends in an unpaired escape character."""
    body = raw_text.rstrip("\r\n")
    if not body or csv_format.escape_char is None:
        return
    physical_lines = io.StringIO(body, newline="").readlines()
    last_line = physical_lines[-1]
    marker = csv_format.comment_marker
    if marker is not None and last_line.lstrip().startswith(marker):
        return
    if _ends_with_dangling_escape(last_line, csv_format.escape_char):
        raise MalformedInputError(
            "Input ends with a dangling escape character",
            line_number=len(physical_lines),
            suggestion=f"Escape a literal {csv_format.escape_char!r} by doubling it",
            error_code=ErrorCode.PRS_DANGLING_ESCAPE.value,
        )


def _malformed(
    exc: csv.Error, lines: _RecordLines, csv_format: CsvFormat
) -> MalformedInputError:
    message = str(exc)
    if "unexpected end of data" in message:
        return MalformedInputError(
            "Quoted field is not terminated before end of input",
            line_number=lines.line_number,
            suggestion=f"Close the field with {csv_format.quote_char!r}",
            error_code=ErrorCode.PRS_UNTERMINATED_QUOTE.value,
        )
    return MalformedInputError(
        f"Invalid delimited input: {message}",
        line_number=lines.line_number,
        error_code=ErrorCode.PRS_INVALID_CSV.value,
    )


def iter_records(
    raw_text: str, csv_format: CsvFormat | None = None
) -> Iterator[Record]:
    """Yield records from ``raw_text`` in file order.

    Comment lines and empty lines are skipped. Fields are trimmed after
    unescaping when the format asks for it.

    Raises:
        MalformedInputError: On unterminated quotes, a dangling escape, or
            any other input the CSV reader rejects
    """
    csv_format = csv_format or DEFAULT_CSV_FORMAT
    _check_trailing_escape(raw_text, csv_format)
    lines = _RecordLines(raw_text, csv_format)
    reader = csv.reader(
        lines,
        delimiter=csv_format.delimiter,
        quotechar=csv_format.quote_char,
        escapechar=csv_format.escape_char,
        doublequote=True,
        skipinitialspace=False,
        strict=True,
    )

    while True:
        try:
            row = next(reader)
        except StopIteration:
            return
        except csv.Error as e:
            raise _malformed(e, lines, csv_format) from e

        lines.at_record_start = True
        if not row:
            continue
        if csv_format.trim:
            yield tuple(cell.strip(_TRIM_CHARS) for cell in row)
        else:
            yield tuple(row)


def parse(raw_text: str, csv_format: CsvFormat | None = None) -> Table:
    """Parse delimited text into a fully materialized Table.

    Args:
        raw_text: Decoded contents of one input file
        csv_format: Delimited format, defaults to comma/double-quote/backslash
            with ``#`` comments and trimming

    Returns:
        Table with records in file order

    Raises:
        MalformedInputError: If the text is not valid delimited input
    """
    table = Table(records=tuple(iter_records(raw_text, csv_format)))
    logger.debug(
        "records_parsed",
        records=len(table),
        columns=table.column_count,
    )
    return table
