"""Tests for amount parsing, rounding and formatting."""

from decimal import Decimal

import pytest

from offer_letter.calculators.amounts import (
    PLACEHOLDER,
    format_inr,
    group_indian,
    parse_amount,
    round_js,
)


class TestParseAmount:
    """Test lenient numeric parsing."""

    def test_blank_and_garbage_are_zero(self):
        """Empty, non-numeric and missing input parse to zero."""
        assert parse_amount("") == Decimal("0")
        assert parse_amount("abc") == Decimal("0")
        assert parse_amount(None) == Decimal("0")
        assert parse_amount(".") == Decimal("0")
        assert parse_amount("Infinity") == Decimal("0")

    def test_plain_numbers(self):
        assert parse_amount("12000.5") == Decimal("12000.5")
        assert parse_amount("30000") == Decimal("30000")
        assert parse_amount(".5") == Decimal("0.5")
        assert parse_amount("-250") == Decimal("-250")

    def test_leading_prefix_is_used(self):
        """Only the leading numeric prefix counts."""
        assert parse_amount("12abc") == Decimal("12")
        assert parse_amount("  42  ") == Decimal("42")
        assert parse_amount("1,00,000") == Decimal("1")
        assert parse_amount("7.5.3") == Decimal("7.5")

    def test_exponent(self):
        assert parse_amount("1e3") == Decimal("1000")
        assert parse_amount("2.5E-1") == Decimal("0.25")
        # Dangling exponent marker is ignored
        assert parse_amount("4e") == Decimal("4")

    def test_non_string_input(self):
        assert parse_amount(Decimal("12.25")) == Decimal("12.25")
        assert parse_amount(1500) == Decimal("1500")
        assert parse_amount(Decimal("NaN")) == Decimal("0")


class TestRoundJs:
    """Test Math.round style rounding."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2.5", "3"),
            ("2.4", "2"),
            ("-2.5", "-2"),
            ("-2.6", "-3"),
            ("24997.9166", "24998"),
            ("649992", "649992"),
        ],
    )
    def test_rounding(self, value, expected):
        assert round_js(Decimal(value)) == Decimal(expected)


class TestFormatInr:
    """Test Indian-grouped display formatting."""

    def test_grouping(self):
        assert group_indian("999") == "999"
        assert group_indian("1000") == "1,000"
        assert group_indian("100000") == "1,00,000"
        assert group_indian("12345678") == "1,23,45,678"

    def test_format_positive(self):
        assert format_inr(Decimal("100000")) == "1,00,000"
        assert format_inr(Decimal("649992")) == "6,49,992"
        assert format_inr(Decimal("54166")) == "54,166"
        assert format_inr(Decimal("500")) == "500"

    def test_fraction_digits(self):
        """At most three fraction digits, trailing zeros dropped."""
        assert format_inr(Decimal("1000.50")) == "1,000.5"
        assert format_inr(Decimal("650000") / Decimal("12")) == "54,166.667"
        assert format_inr(Decimal("12.0004")) == "12"

    def test_placeholder(self):
        """Zero, negative and missing amounts show a dash."""
        assert format_inr(Decimal("0")) == PLACEHOLDER
        assert format_inr(Decimal("-5")) == PLACEHOLDER
        assert format_inr(None) == PLACEHOLDER
        assert PLACEHOLDER == "—"


class TestOutOfRange:
    """Magnitudes a browser number cannot hold are treated as unparsable."""

    def test_huge_and_tiny_exponents(self):
        assert parse_amount("1e400") == Decimal("0")
        assert parse_amount("1e-400") == Decimal("0")
        assert parse_amount("1e300") == Decimal("1e300")

    def test_unicode_digits_are_not_numbers(self):
        assert parse_amount("٣٠٠") == Decimal("0")

    def test_large_amount_formats(self):
        assert format_inr(Decimal("1e30")).startswith("10,00,00")
