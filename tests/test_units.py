"""Tests for Decimal coercion and base-unit scaling."""

from decimal import Decimal

import pytest

from ethena_engine.exceptions import EngineError, InvalidArgumentError
from ethena_engine.units import from_base_units, quantize_half_up, to_base_units, to_decimal


class TestToDecimal:
    """to_decimal accepts Decimal, int, float and numeric strings."""

    def test_decimal_passthrough(self) -> None:
        value = Decimal("1.23")
        assert to_decimal(value) is value

    def test_int(self) -> None:
        assert to_decimal(1000) == Decimal("1000")

    def test_float_goes_through_str(self) -> None:
        """0.1 must not pick up its binary expansion."""
        assert to_decimal(0.1) == Decimal("0.1")

    def test_string_is_stripped(self) -> None:
        assert to_decimal(" 1.5 ") == Decimal("1.5")

    @pytest.mark.parametrize("bad", [True, None, [1], "abc", "", float("nan"), float("inf"), "Infinity"])
    def test_rejects_non_numeric(self, bad: object) -> None:
        with pytest.raises(InvalidArgumentError):
            to_decimal(bad)  # type: ignore[arg-type]

    def test_error_is_value_error(self) -> None:
        """Callers guarding with ValueError or EngineError both catch it."""
        with pytest.raises(ValueError):
            to_decimal("abc")
        with pytest.raises(EngineError):
            to_decimal("abc")


class TestBaseUnits:
    """Conversion between token amounts and integer base units."""

    def test_one_and_a_half_usde(self) -> None:
        assert to_base_units("1.5") == 1_500_000_000_000_000_000

    def test_six_decimal_token(self) -> None:
        assert to_base_units(Decimal("12.345678"), 6) == 12_345_678

    def test_large_balance_keeps_every_digit(self) -> None:
        """Balances wider than the default 28-digit context are exact."""
        amount = "123456789012345678901234567890.123456789012345678"
        assert to_base_units(amount) == int("123456789012345678901234567890123456789012345678")

    def test_too_many_fractional_digits(self) -> None:
        with pytest.raises(InvalidArgumentError):
            to_base_units("0.1234567", 6)

    @pytest.mark.parametrize("decimals", [-1, 37])
    def test_decimals_out_of_range(self, decimals: int) -> None:
        with pytest.raises(InvalidArgumentError):
            to_base_units("1", decimals)
        with pytest.raises(InvalidArgumentError):
            from_base_units(1, decimals)

    def test_from_base_units(self) -> None:
        assert from_base_units(1_500_000_000_000_000_000) == Decimal("1.5")

    def test_smallest_unit(self) -> None:
        assert from_base_units(1) == Decimal("1E-18")

    def test_zero_decimals(self) -> None:
        assert to_base_units(42, 0) == 42
        assert from_base_units(42, 0) == Decimal("42")

    @pytest.mark.parametrize(
        "amount,decimals",
        [("0", 18), ("1", 18), ("0.000000000000000001", 18), ("1000000.5", 6), ("99.99", 2)],
    )
    def test_scaling_is_reversible(self, amount: str, decimals: int) -> None:
        assert from_base_units(to_base_units(amount, decimals), decimals) == Decimal(amount)


class TestQuantizeHalfUp:
    def test_rounds_half_up(self) -> None:
        assert quantize_half_up(Decimal("2.345"), 2) == Decimal("2.35")
        assert quantize_half_up(Decimal("12.5"), 0) == Decimal("13")

    def test_keeps_exponent(self) -> None:
        assert quantize_half_up(Decimal("5"), 2).as_tuple().exponent == -2

    def test_beyond_default_precision(self) -> None:
        value = Decimal("123456789012345678901234567890.125")
        assert quantize_half_up(value, 2) == Decimal("123456789012345678901234567890.13")
