"""Tests for price input validation."""

from decimal import Decimal

import pytest

from bargainwala.tools.validation import parse_price


class TestParsePrice:
    def test_plain_decimal(self):
        assert parse_price("3.50") == Decimal("3.50")

    def test_integer(self):
        assert parse_price("3") == Decimal("3")

    def test_strips_whitespace(self):
        assert parse_price("  2.75 ") == Decimal("2.75")

    def test_comma_separator(self):
        assert parse_price("3,50") == Decimal("3.50")

    def test_zero_is_allowed(self):
        assert parse_price("0") == Decimal("0")

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_empty(self, text):
        with pytest.raises(ValueError, match="Enter price"):
            parse_price(text)

    @pytest.mark.parametrize("text", ["abc", "3.5.0", "NaN", "Infinity", "$3"])
    def test_not_a_number(self, text):
        with pytest.raises(ValueError, match="Valid number"):
            parse_price(text)

    def test_negative(self):
        with pytest.raises(ValueError, match="negative"):
            parse_price("-1.00")
