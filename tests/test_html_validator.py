"""Tests for rendered document validation."""

from anki_table.table.html_validator import validate_table_html
from anki_table.table.parser import parse
from anki_table.table.renderer import render


def test_rendered_document_is_valid(happy_input):
    assert validate_table_html(render(parse(happy_input), "Title")) == []


def test_header_only_document_is_valid():
    assert validate_table_html(render([["a", "b"]], "Title")) == []


def test_missing_table():
    errors = validate_table_html("<div>Title</div>")

    assert errors == ['No <table class="fred"> element found']


def test_table_class_must_match():
    document = render([["h"], ["x"]], "Title")

    errors = validate_table_html(document, table_class="deck")

    assert len(errors) == 1
    assert "deck" in errors[0]


def test_table_without_rows():
    errors = validate_table_html('<table class="fred"></table>')

    assert errors == ["Table has no rows"]


def test_first_row_must_hold_headers():
    errors = validate_table_html('<table class="fred"><tr><td>x</td></tr></table>')

    assert errors == ["First row has no <th> header cells"]


def test_row_width_mismatch():
    document = (
        '<table class="fred">'
        "<tr><th>a</th><th>b</th></tr>"
        "<tr><td>{{c1::x}}</td></tr>"
        "</table>"
    )

    errors = validate_table_html(document)

    assert errors == ["Row 2 has 1 <td> cells, expected 2"]


def test_cloze_numbers_must_increase():
    document = (
        '<table class="fred">'
        "<tr><th>a</th><th>b</th></tr>"
        "<tr><td>{{c2::x}}</td><td>{{c1::y}}</td></tr>"
        "</table>"
    )

    errors = validate_table_html(document)

    assert errors == ["Row 2: cloze c1 does not follow c2"]


def test_gaps_in_numbering_are_allowed():
    document = render([["a", "b", "c"], ["x", "¿lit", "z"]], "Title")

    assert validate_table_html(document) == []
