"""Display helpers for yields and large USD amounts."""

from decimal import Decimal, InvalidOperation

from ethena_engine.exceptions import InvalidArgumentError
from ethena_engine.units import HUNDRED, ONE, Numeric, quantize_half_up, to_decimal

_SUFFIXES = (
    (Decimal("1e9"), "B"),
    (Decimal("1e6"), "M"),
    (Decimal("1e3"), "K"),
)


def format_yield(value: Numeric, decimals: int = 2) -> str:
    """Render a fractional yield as a percentage, e.g. 0.1234 -> "12.34%"."""
    return f"{quantize_half_up(to_decimal(value) * HUNDRED, decimals)}%"


def parse_yield(text: str) -> Decimal:
    """Parse a yield string into a fraction.

    "12.34%" -> 0.1234. Bare numbers greater than 1 are read as percentages
    ("12.34" -> 0.1234); anything else is already a fraction.

    Raises:
        InvalidArgumentError: If the text is not a number.
    """
    cleaned = text.replace("%", "").strip()
    try:
        value = Decimal(cleaned)
    except InvalidOperation as exc:
        raise InvalidArgumentError(f"Cannot parse yield from {text!r}") from exc
    if not value.is_finite():
        raise InvalidArgumentError(f"Cannot parse yield from {text!r}")

    if "%" in text or value > ONE:
        return value / HUNDRED
    return value


def format_large_number(value: Numeric) -> str:
    """Abbreviate a large amount: 1.5e9 -> "1.50B", 1500 -> "1.50K"."""
    amount = to_decimal(value)
    for threshold, suffix in _SUFFIXES:
        if amount >= threshold:
            return f"{quantize_half_up(amount / threshold, 2)}{suffix}"
    return str(quantize_half_up(amount, 2))
