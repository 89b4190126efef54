"""Conversion between raw amounts and human-readable decimals.

Raw amounts are integers in the token's smallest unit. Everything that
returns a Decimal here is for display; only parse_units() produces a
value that may feed a transaction, and it does so without floats.
"""

from __future__ import annotations

import decimal
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from swapcore.models.types import require_raw_amounts
from swapcore.safe_int import S, Uint256Overflow

# uint256 needs 78 significant digits; the rest covers fractional places
DECIMAL_HIGH_PREC_CONTEXT = decimal.Context(prec=96)

MAX_DECIMALS = 255


def _check_decimals(decimals: int) -> None:
    if not 0 <= decimals <= MAX_DECIMALS:
        raise ValueError(f"Token decimals must be in [0, {MAX_DECIMALS}]: {decimals}")


def parse_units(value: str, decimals: int) -> int:
    """Parse a decimal string into a raw amount ("1.5", 6 -> 1500000).

    An empty string parses as 0. Fractional digits beyond `decimals`
    are rounded half up.

    Raises:
        ValueError: If value is not a finite non-negative number, or the
            raw amount does not fit in a uint256
    """
    _check_decimals(decimals)
    text = value.strip()
    if text == "":
        return 0
    try:
        amount = Decimal(text)
    except InvalidOperation as err:
        raise ValueError(f"Not a decimal amount: '{value}'") from err
    if not amount.is_finite():
        raise ValueError(f"Amount must be finite: '{value}'")
    if amount < 0:
        raise ValueError(f"Amount cannot be negative: '{value}'")

    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        try:
            raw = amount.scaleb(decimals).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        except (InvalidOperation, decimal.Overflow) as err:
            raise ValueError(f"Amount too large: '{value}'") from err
    try:
        return S(int(raw)).to_uint256()
    except Uint256Overflow as err:
        raise ValueError(f"Amount too large: '{value}'") from err


def format_units(raw: int, decimals: int) -> str:
    """Exact decimal string for a raw amount (1500000, 6 -> "1.5")."""
    require_raw_amounts(raw=raw)
    _check_decimals(decimals)
    if decimals == 0:
        return str(raw)

    whole, fraction = divmod(raw, 10**decimals)
    fraction_str = str(fraction).rjust(decimals, "0").rstrip("0")
    if not fraction_str:
        return str(whole)
    return f"{whole}.{fraction_str}"


def to_decimal(raw: int, decimals: int) -> Decimal:
    """Exact Decimal value of a raw amount."""
    require_raw_amounts(raw=raw)
    _check_decimals(decimals)
    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        return Decimal(raw).scaleb(-decimals)


def spot_rate(reserve_in: int, reserve_out: int, decimals_in: int, decimals_out: int) -> Decimal:
    """Units of output token per unit of input token at current reserves.

    Display only: excludes the fee and price impact. Returns 0 for an
    empty input reserve.
    """
    if reserve_in == 0:
        return Decimal(0)
    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        return to_decimal(reserve_out, decimals_out) / to_decimal(reserve_in, decimals_in)


def usd_value(raw: int, decimals: int, price_usd: Decimal | str | int) -> Decimal:
    """Display value of an amount given an externally supplied USD price."""
    try:
        price = Decimal(str(price_usd))
    except InvalidOperation as err:
        raise ValueError(f"USD price is not a number: {price_usd!r}") from err
    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        return to_decimal(raw, decimals) * price


__all__ = [
    "DECIMAL_HIGH_PREC_CONTEXT",
    "parse_units",
    "format_units",
    "to_decimal",
    "spot_rate",
    "usd_value",
]
