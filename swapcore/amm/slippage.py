"""Slippage tolerance handling.

Tolerances are basis points in [0, 10000]. Bounds derived from them are
always rounded down: a guard that is too strict makes the transaction
revert, one that is too loose only costs the user the tolerance they
already accepted.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum

from swapcore.config import DEFAULT_AMM_CONFIG, AmmConfig
from swapcore.constants import BPS_DENOMINATOR, DEFAULT_SLIPPAGE_BPS
from swapcore.errors import InvalidSlippage
from swapcore.models.types import require_raw_amounts


class SlippageWarning(Enum):
    """Advisory classification of a user-chosen tolerance."""

    TOO_LOW = "too_low"
    TOO_HIGH = "too_high"

    @property
    def message(self) -> str:
        if self is SlippageWarning.TOO_LOW:
            return "Slippage too low: your transaction might fail."
        return "Slippage too high: you might lose funds."


def validate_slippage_bps(slippage_bps: int) -> int:
    """Return slippage_bps unchanged if it is a valid tolerance.

    Raises:
        InvalidSlippage: If not an integer in [0, 10000]
    """
    if isinstance(slippage_bps, bool) or not isinstance(slippage_bps, int):
        raise InvalidSlippage(f"Slippage must be integer bps, got {type(slippage_bps).__name__}")
    if not 0 <= slippage_bps <= BPS_DENOMINATOR:
        raise InvalidSlippage(f"Slippage must be in [0, {BPS_DENOMINATOR}] bps: {slippage_bps}")
    return slippage_bps


def min_amount_after_slippage(amount: int, slippage_bps: int = DEFAULT_SLIPPAGE_BPS) -> int:
    """Worst-case acceptable amount for a nominal amount.

    Formula: amount * (10000 - slippage_bps) / 10000, truncated.

    Used for swap outputs (amountOutMin) and for liquidity deposits and
    withdrawals (amountAMin / amountBMin).

    Raises:
        NegativeAmount: If amount is negative
        InvalidSlippage: If slippage_bps is outside [0, 10000]
    """
    require_raw_amounts(amount=amount)
    validate_slippage_bps(slippage_bps)
    return amount * (BPS_DENOMINATOR - slippage_bps) // BPS_DENOMINATOR


def percent_to_bps(percent: Decimal | str | int | float) -> int:
    """Convert a percentage to basis points, rounding half up (0.5 -> 50).

    Floats are converted through their string form so 0.1 stays 10 bps.

    Raises:
        InvalidSlippage: If the value is not numeric or falls outside [0, 100]%
    """
    try:
        value = Decimal(str(percent))
    except (ValueError, InvalidOperation) as err:
        raise InvalidSlippage(f"Slippage percent is not a number: {percent!r}") from err
    if not value.is_finite():
        raise InvalidSlippage(f"Slippage percent is not finite: {percent!r}")
    if not 0 <= value <= 100:
        raise InvalidSlippage(f"Slippage percent must be in [0, 100]: {percent!r}")

    bps = int((value * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    return validate_slippage_bps(bps)


def bps_to_percent(slippage_bps: int) -> Decimal:
    """Display form of a tolerance (50 -> Decimal('0.5'))."""
    validate_slippage_bps(slippage_bps)
    return Decimal(slippage_bps) / 100


def classify_slippage(
    slippage_bps: int,
    config: AmmConfig = DEFAULT_AMM_CONFIG,
) -> SlippageWarning | None:
    """Flag tolerances likely to revert or to leak value.

    Zero is deliberate (exact execution) and is not flagged.
    """
    validate_slippage_bps(slippage_bps)
    if 0 < slippage_bps < config.slippage_warn_low_bps:
        return SlippageWarning.TOO_LOW
    if slippage_bps > config.slippage_warn_high_bps:
        return SlippageWarning.TOO_HIGH
    return None


def custom_slippage_accepted(slippage_bps: int, config: AmmConfig = DEFAULT_AMM_CONFIG) -> bool:
    """Whether a typed-in tolerance is within the allowed custom range."""
    return 0 <= slippage_bps <= config.max_custom_slippage_bps


__all__ = [
    "SlippageWarning",
    "validate_slippage_bps",
    "min_amount_after_slippage",
    "percent_to_bps",
    "bps_to_percent",
    "classify_slippage",
    "custom_slippage_accepted",
]
