"""Tests for the delimited record parser."""

import pytest

from anki_table.config_models import CsvFormat
from anki_table.error_codes import ErrorCode
from anki_table.exceptions import MalformedInputError, ParserError
from anki_table.table.parser import iter_records, parse


def test_parses_records_in_file_order():
    table = parse("a,b,c\n1,2,3\n4,5,6\n")

    assert table.records == (("a", "b", "c"), ("1", "2", "3"), ("4", "5", "6"))
    assert table.header == ("a", "b", "c")
    assert table.column_count == 3
    assert len(table.data_records) == 2


def test_last_line_without_newline():
    assert parse("a,b\n1,2").records == (("a", "b"), ("1", "2"))


def test_crlf_line_endings():
    assert parse("a,b\r\n1,2\r\n").records == (("a", "b"), ("1", "2"))


def test_empty_input_gives_empty_table():
    table = parse("")

    assert table.records == ()
    assert table.header is None
    assert table.column_count == 0


def test_comment_lines_are_skipped():
    text = "#title=Capitals\nCountry,Capital\n# a note\n  # indented note\nFrance,Paris\n"

    assert parse(text).records == (("Country", "Capital"), ("France", "Paris"))


def test_blank_lines_are_skipped():
    assert parse("a,b\n\n1,2\n\n").records == (("a", "b"), ("1", "2"))


def test_hash_inside_quoted_multiline_field_is_content():
    text = 'a,b\n"first\n# not a comment",x\n'

    assert parse(text).records == (("a", "b"), ("first\n# not a comment", "x"))


def test_hash_after_first_character_is_content():
    assert parse("a,b\nC#,F#\n").records == (("a", "b"), ("C#", "F#"))


def test_quoted_field_keeps_delimiter():
    assert parse('a,b\n"x, y",z\n').data_records == (("x, y", "z"),)


def test_backslash_escapes_quote_inside_quoted_field():
    text = 'a,b\n"say \\"hi\\"",z\n'

    assert parse(text).data_records == (('say "hi"', "z"),)


def test_doubled_quote_inside_quoted_field():
    assert parse('a,b\n"a ""b""",z\n').data_records == (('a "b"', "z"),)


def test_doubled_backslash_is_one_backslash():
    assert parse("a,b\nC:\\\\dir,z\n").data_records == (("C:\\dir", "z"),)


def test_fields_are_trimmed_after_unescaping():
    text = 'a,b\n  x  ,"  y  "\n'

    assert parse(text).data_records == (("x", "y"),)


def test_whitespace_after_closing_quote_before_delimiter():
    assert parse('a,b\n"x, y" ,z\n').data_records == (("x, y", "z"),)


def test_whitespace_after_closing_quote_at_line_end():
    assert parse('a,b\nx,"y" \t\n').data_records == (("x", "y"),)


def test_whitespace_after_quoted_multiline_field():
    text = 'a,b\n"first\nsecond"  ,x\n'

    assert parse(text).data_records == (("first\nsecond", "x"),)


def test_backslash_before_ordinary_character_is_kept():
    assert parse("a,b\nC:\\dir,x\n").data_records == (("C:\\dir", "x"),)


def test_backslash_before_ordinary_character_in_quoted_field():
    text = 'a,b\n"\\frac{1}{2}, \\alpha",x\n'

    assert parse(text).data_records == (("\\frac{1}{2}, \\alpha", "x"),)


def test_backslash_escapes_delimiter_outside_quotes():
    assert parse("a,b\nx\\,y,z\n").data_records == (("x,y", "z"),)


def test_quote_after_leading_space_is_kept_for_the_renderer():
    # The field does not start with the quote, so it is not a quoted field
    assert parse('a,b\nx, "y"\n').data_records == (("x", '"y"'),)


def test_non_ascii_cells_survive():
    assert parse("a,b\n¿skip,x¡y\n").data_records == (("¿skip", "x¡y"),)


def test_trim_disabled_keeps_whitespace():
    fmt = CsvFormat(trim=False)

    assert parse("a, b \n", fmt).records == (("a", " b "),)


def test_custom_delimiter():
    fmt = CsvFormat(delimiter=";")

    assert parse("a;b,c\n1;2\n", fmt).records == (("a", "b,c"), ("1", "2"))


def test_comment_marker_disabled():
    fmt = CsvFormat(comment_marker=None)

    assert parse("#a,b\n1,2\n", fmt).records == (("#a", "b"), ("1", "2"))


def test_inconsistent_widths_are_not_rejected_by_the_parser():
    assert parse("a,b,c\n1,2\n").records == (("a", "b", "c"), ("1", "2"))


def test_iter_records_is_lazy():
    records = iter_records("a,b\n1,2\n")

    assert next(records) == ("a", "b")
    assert next(records) == ("1", "2")
    with pytest.raises(StopIteration):
        next(records)


class TestMalformedInput:
    def test_unterminated_quote(self):
        with pytest.raises(MalformedInputError) as exc_info:
            parse('a,b\n"open,x\n')

        assert exc_info.value.error_code == ErrorCode.PRS_UNTERMINATED_QUOTE.value

    def test_unterminated_quote_reports_line(self):
        with pytest.raises(MalformedInputError) as exc_info:
            parse('a,b\n1,2\n"open\nmore\n')

        assert exc_info.value.line_number == 4

    def test_dangling_escape_at_end_of_input(self):
        with pytest.raises(MalformedInputError) as exc_info:
            parse("a,b\n1,2\\")

        assert exc_info.value.error_code == ErrorCode.PRS_DANGLING_ESCAPE.value
        assert exc_info.value.line_number == 2

    def test_dangling_escape_before_final_newline(self):
        with pytest.raises(MalformedInputError):
            parse("a,b\n1,2\\\n")

    def test_escaped_backslash_at_end_is_fine(self):
        assert parse("a,b\n1,2\\\\").data_records == (("1", "2\\"),)

    def test_trailing_backslash_in_final_comment_is_ignored(self):
        assert parse("a,b\n1,2\n# C:\\").records == (("a", "b"), ("1", "2"))

    def test_text_after_closing_quote(self):
        with pytest.raises(MalformedInputError) as exc_info:
            parse('a,b\n"x"y,z\n')

        assert exc_info.value.error_code == ErrorCode.PRS_INVALID_CSV.value

    def test_is_a_parser_error(self):
        with pytest.raises(ParserError):
            parse('"open')


def test_table_iterates_records_in_order():
    table = parse("a,b\n1,2\n")

    assert list(table) == [("a", "b"), ("1", "2")]
