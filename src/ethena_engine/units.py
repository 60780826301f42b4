"""Numeric coercion and base-unit scaling.

All engine math runs on Decimal. Callers hand in whatever the transport
layer produced (int balances, float rates from JSON, numeric strings) and
every public function routes its scalars through to_decimal first.

Token balances cross the transfer boundary as integer base units (wei for
18-decimal tokens). to_base_units / from_base_units are the only sanctioned
conversions between the two representations.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Final

from ethena_engine.exceptions import InvalidArgumentError

Numeric = Decimal | int | float | str

#: Largest token precision accepted by the scaling helpers.
MAX_DECIMALS: Final[int] = 36

#: Working precision for base-unit scaling; wide enough for uint256 balances.
_SCALING_PRECISION: Final[int] = 100

#: Precision of USDe, sUSDe and ENA.
DEFAULT_TOKEN_DECIMALS: Final[int] = 18

ZERO: Final[Decimal] = Decimal("0")
ONE: Final[Decimal] = Decimal("1")
HUNDRED: Final[Decimal] = Decimal("100")
DAYS_PER_YEAR: Final[Decimal] = Decimal("365")


def to_decimal(value: Numeric) -> Decimal:
    """Coerce a plain numeric input to a finite Decimal.

    Floats go through ``str()`` so 0.1 becomes Decimal("0.1") rather than
    its binary expansion.

    Args:
        value: Decimal, int, float or numeric string.

    Returns:
        The value as a Decimal.

    Raises:
        InvalidArgumentError: If the value is not numeric, is a bool, or is
            NaN / infinite.
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Expected a number, got bool: {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as exc:
            raise InvalidArgumentError(f"Not a number: {value!r}") from exc
    else:
        raise InvalidArgumentError(
            f"Expected a number, got {type(value).__name__}: {value!r}"
        )

    if not result.is_finite():
        raise InvalidArgumentError(f"Value must be finite, got {value!r}")
    return result


def _check_decimals(decimals: int) -> None:
    if not 0 <= decimals <= MAX_DECIMALS:
        raise InvalidArgumentError(
            f"decimals must be in 0..{MAX_DECIMALS}, got {decimals}"
        )


def to_base_units(amount: Numeric, decimals: int = DEFAULT_TOKEN_DECIMALS) -> int:
    """Scale a human-readable token amount to integer base units.

    Example: to_base_units("1.5", 18) == 1_500_000_000_000_000_000

    Args:
        amount: Token amount (e.g., "1.5" USDe).
        decimals: Token precision, 0..36.

    Returns:
        Integer amount in base units.

    Raises:
        InvalidArgumentError: If decimals is out of range or the amount has
            more fractional digits than the token supports.
    """
    _check_decimals(decimals)
    with localcontext() as ctx:
        ctx.prec = _SCALING_PRECISION
        scaled = to_decimal(amount).scaleb(decimals)
    if scaled != scaled.to_integral_value():
        raise InvalidArgumentError(
            f"Amount {amount} has more than {decimals} fractional digits"
        )
    return int(scaled)


def from_base_units(base_units: int, decimals: int = DEFAULT_TOKEN_DECIMALS) -> Decimal:
    """Scale integer base units back to a token amount.

    Args:
        base_units: Raw on-chain balance.
        decimals: Token precision, 0..36.

    Returns:
        Token amount as a Decimal (exact, no rounding).
    """
    _check_decimals(decimals)
    with localcontext() as ctx:
        ctx.prec = _SCALING_PRECISION
        return Decimal(int(base_units)).scaleb(-decimals)


def quantize_half_up(value: Decimal, places: int) -> Decimal:
    """Round to ``places`` fractional digits, half-up, for display.

    Runs at the scaling precision so very large amounts (1e32 sats) keep
    every integer digit instead of raising InvalidOperation.
    """
    with localcontext() as ctx:
        ctx.prec = _SCALING_PRECISION
        return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
