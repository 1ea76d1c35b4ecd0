"""Unit tests for the CSV line tokenizer."""

import pytest

from jobmatcher.csv_line import join_line, tokenize_line


@pytest.mark.unit
def test_plain_fields():
    assert tokenize_line("a,b,c") == ["a", "b", "c"]


@pytest.mark.unit
def test_empty_line_is_single_empty_field():
    assert tokenize_line("") == [""]


@pytest.mark.unit
def test_trailing_comma_yields_empty_last_field():
    assert tokenize_line("a,b,") == ["a", "b", ""]


@pytest.mark.unit
def test_quoted_field_keeps_commas():
    assert tokenize_line('"Acme hiring Dev in Berlin, Germany",https://x') == [
        "Acme hiring Dev in Berlin, Germany",
        "https://x",
    ]


@pytest.mark.unit
def test_doubled_quote_inside_quotes_is_literal():
    assert tokenize_line('"say ""hi"", ok",next') == ['say "hi", ok', "next"]


@pytest.mark.unit
def test_unterminated_quote_runs_to_end_of_line():
    assert tokenize_line('a,"b,c') == ["a", "b,c"]


@pytest.mark.unit
@pytest.mark.parametrize(
    "fields",
    [
        ["Acme", "https://example.com/1", "", "plain"],
        ["Comma, inside", 'with "quotes"', "both, \"here\""],
        [""],
    ],
)
def test_join_then_tokenize_reproduces_fields(fields):
    assert tokenize_line(join_line(fields)) == fields
