"""Tests for identifier validation and single-quote escaping."""

from __future__ import annotations

import pytest

from pgkit.engine.errors import BadSymbolError, PgkitError
from pgkit.engine.utils import (
    escape_single_quotes,
    is_identifier_good,
    validate_identifier,
    validate_procedure_name,
    validate_table_name,
)


class TestValidateIdentifier:
    def test_good_identifier(self):
        assert validate_identifier("xB_9") == "xB_9"

    def test_empty_identifier_passes(self):
        assert validate_identifier("") == ""

    def test_leading_digit_is_allowed(self):
        assert validate_identifier("9lives") == "9lives"

    @pytest.mark.parametrize(
        "name, symbol",
        [
            ("xB_9куку", "к"),
            ("xB_9!@", "!"),
            ("DROP TABLE xyz;", " "),
            ("users'--", "'"),
            ("a-b", "-"),
            ("naïve", "ï"),
        ],
    )
    def test_rejects_first_bad_symbol(self, name, symbol):
        with pytest.raises(BadSymbolError) as exc_info:
            validate_identifier(name)
        assert exc_info.value.symbol == symbol
        assert str(exc_info.value) == f"Bad Symbol: '{symbol}'."

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            validate_identifier("a;b")
        with pytest.raises(PgkitError):
            validate_identifier("a;b")

    def test_label_is_recorded(self):
        with pytest.raises(BadSymbolError) as exc_info:
            validate_identifier("a b", "column")
        assert exc_info.value.label == "column"


class TestNameAliases:
    def test_table_name(self):
        assert validate_table_name("TableA") == "TableA"
        with pytest.raises(BadSymbolError) as exc_info:
            validate_table_name("Table A")
        assert exc_info.value.label == "table name"

    def test_procedure_name(self):
        assert validate_procedure_name("procedure_simulator") == "procedure_simulator"
        with pytest.raises(BadSymbolError) as exc_info:
            validate_procedure_name("proc()")
        assert exc_info.value.label == "procedure name"
        assert exc_info.value.symbol == "("


def test_is_identifier_good():
    assert is_identifier_good("xB_9")
    assert is_identifier_good("")
    assert not is_identifier_good("xB_9!@")
    assert not is_identifier_good("DROP TABLE xyz;")


class TestEscapeSingleQuotes:
    def test_no_quotes(self):
        assert escape_single_quotes("John") == "John"

    def test_one_quote(self):
        assert escape_single_quotes("John's Car") == "John''s Car"

    def test_every_quote_is_doubled(self):
        assert escape_single_quotes("John''x") == "John''''x"

    def test_other_characters_untouched(self):
        assert escape_single_quotes('a"b;c\\d') == 'a"b;c\\d'

    def test_empty(self):
        assert escape_single_quotes("") == ""
