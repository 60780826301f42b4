"""Tests for yield and amount display helpers."""

from decimal import Decimal

import pytest

from ethena_engine.exceptions import InvalidArgumentError
from ethena_engine.yields import format_large_number, format_yield, parse_yield


class TestFormatYield:
    def test_two_decimals(self) -> None:
        assert format_yield(Decimal("0.1234")) == "12.34%"

    def test_pads_to_precision(self) -> None:
        assert format_yield(Decimal("0.05")) == "5.00%"

    def test_rounds_half_up(self) -> None:
        assert format_yield(Decimal("0.123456"), 3) == "12.346%"
        assert format_yield(Decimal("0.00125")) == "0.13%"

    def test_negative(self) -> None:
        assert format_yield(Decimal("-0.015")) == "-1.50%"


class TestParseYield:
    def test_percent_sign(self) -> None:
        assert parse_yield("12.34%") == Decimal("0.1234")

    def test_bare_percentage(self) -> None:
        assert parse_yield("12.34") == Decimal("0.1234")

    def test_bare_fraction(self) -> None:
        assert parse_yield("0.05") == Decimal("0.05")

    def test_small_percent_with_sign(self) -> None:
        assert parse_yield(" 0.5% ") == Decimal("0.005")

    def test_parses_formatted_output(self) -> None:
        assert parse_yield(format_yield(Decimal("0.1234"))) == Decimal("0.1234")

    @pytest.mark.parametrize("text", ["", "abc", "%", "nan%", "12..3"])
    def test_invalid(self, text: str) -> None:
        with pytest.raises(InvalidArgumentError):
            parse_yield(text)


class TestFormatLargeNumber:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (Decimal("1500000000"), "1.50B"),
            (Decimal("2345678"), "2.35M"),
            (Decimal("1000"), "1.00K"),
            (Decimal("1500"), "1.50K"),
            (Decimal("999"), "999.00"),
            (Decimal("12.345"), "12.35"),
        ],
    )
    def test_suffixes(self, value: Decimal, expected: str) -> None:
        assert format_large_number(value) == expected


class TestLargeMagnitudes:
    """Values wider than the default 28-digit context still format."""

    def test_large_number(self) -> None:
        assert format_large_number(Decimal("1e32")) == "100000000000000000000000.00B"

    def test_large_yield(self) -> None:
        assert format_yield(Decimal("1e30")) == "100000000000000000000000000000000.00%"
