"""Tests for number parsing and display formatting."""

import pytest

from bimprops.formatting.number_formatter import (
    NumberParseError,
    coerce_number,
    format_display,
    parse_number,
)


class TestDisplayFormatting:
    """Tests for the fixed two-digit display format."""

    def test_two_fraction_digits(self):
        """Test a value with two decimals is shown unchanged."""
        assert format_display(123.45) == "123.45"

    def test_pads_integers(self):
        """Test whole numbers get two zero decimals."""
        assert format_display(2) == "2.00"
        assert format_display(0.0) == "0.00"

    def test_negative(self):
        assert format_display(-1.5) == "-1.50"

    def test_no_grouping_separator(self):
        """Test large numbers are not grouped."""
        assert format_display(1234567.891) == "1234567.89"

    def test_absent_number_is_empty(self):
        assert format_display(None) == ""

    @pytest.mark.parametrize(
        "value,expected",
        [(0.125, "0.13"), (-0.125, "-0.13"), (1.375, "1.38"), (0.135, "0.14"), (2.5, "2.50")],
    )
    def test_midpoints_round_away_from_zero(self, value, expected):
        assert format_display(value) == expected

    def test_very_large_number(self):
        """Test values beyond default decimal precision still format."""
        assert format_display(1e300) == str(int(1e300)) + ".00"


class TestInvariantParsing:
    """Tests for parsing with invariant separators."""

    def test_plain_decimal(self):
        assert parse_number("456.78") == 456.78

    def test_surrounding_whitespace_ignored(self):
        assert parse_number("  42 ") == 42.0

    def test_grouping_separator_accepted(self):
        assert parse_number("1,234.5") == 1234.5

    def test_exponent(self):
        assert parse_number("1e3") == 1000.0

    def test_negative(self):
        assert parse_number("-0.25") == -0.25

    @pytest.mark.parametrize("text", ["abc", "", "   ", "12abc", "NaN", "sNaN", "Infinity", "1e400", "-1e400"])
    def test_rejects_non_numbers(self, text):
        """Test text that is not a finite number is rejected."""
        with pytest.raises(NumberParseError):
            parse_number(text)

    def test_error_names_text_and_locales(self):
        with pytest.raises(NumberParseError) as exc_info:
            parse_number("abc")
        assert exc_info.value.text == "abc"
        assert exc_info.value.locales == ["en_US"]
        assert "abc" in str(exc_info.value)

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_number("not a number")


class TestLocaleFallback:
    """Tests for trying a current locale after invariant rules."""

    def test_current_locale_used_when_invariant_fails(self):
        assert parse_number("1.234.567,8", ["en_US", "de_DE"]) == 1234567.8

    def test_invariant_wins_when_both_succeed(self):
        """Test invariant rules are tried first."""
        assert parse_number("1.5", ["en_US", "de_DE"]) == 1.5

    def test_fails_when_no_locale_matches(self):
        with pytest.raises(NumberParseError):
            parse_number("1.234.567,8", ["en_US"])


class TestCoerceNumber:
    """Tests for converting raw JSON values to numbers."""

    def test_native_float(self):
        assert coerce_number(123.45) == 123.45

    def test_native_int(self):
        result = coerce_number(5)
        assert result == 5.0
        assert isinstance(result, float)

    def test_textual_number(self):
        assert coerce_number("123.45") == 123.45

    def test_textual_number_in_current_locale(self):
        assert coerce_number("1.234.567,8", current_locale="de_DE") == 1234567.8

    def test_textual_number_without_current_locale(self):
        assert coerce_number("1.234.567,8") is None

    @pytest.mark.parametrize("raw", [None, True, False, "abc", "", [1], {"a": 1}])
    def test_non_numbers_are_absent(self, raw):
        assert coerce_number(raw) is None

    def test_non_finite_native_numbers_are_absent(self):
        assert coerce_number(float("nan")) is None
        assert coerce_number(float("inf")) is None

    def test_overflowing_text_is_absent(self):
        assert coerce_number("1e400") is None
        assert coerce_number("-1e400", current_locale="de_DE") is None
