"""Swap preview: the complementary amount and guard for a swap form.

Forward mode takes the amount the user sells and derives what they
receive plus the slippage-bounded minimum. Reverse mode takes the amount
the user wants and derives the input needed. Missing data while the user
is mid-edit yields a zeroed preview instead of an exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from swapcore.amm.pricing import ConstantProductAMM, constant_product
from swapcore.amm.slippage import min_amount_after_slippage
from swapcore.constants import DEFAULT_SLIPPAGE_BPS


class SwapMode(str, Enum):
    """Which side of the swap the user entered."""

    FORWARD = "forward"
    REVERSE = "reverse"


class PreviewError(Enum):
    """Reasons a preview could not be computed."""

    MISSING_LIQUIDITY_OR_INPUT = "missing_liquidity_or_input"

    @property
    def message(self) -> str:
        return "Missing input or liquidity"


@dataclass(frozen=True)
class SwapPreview:
    """Preview amounts for a swap form.

    Attributes:
        amount_in: Amount sold (given in forward mode, computed in reverse)
        amount_out: Amount bought (computed in forward mode, given in reverse)
        min_amount_out: Slippage-bounded output in forward mode; 0 in
            reverse mode, where the caller passes the desired output as the
            contract's minimum
        error: Set when the preview could not be computed
    """

    amount_in: int
    amount_out: int
    min_amount_out: int
    error: PreviewError | None = None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    @classmethod
    def missing(cls) -> SwapPreview:
        return cls(
            amount_in=0,
            amount_out=0,
            min_amount_out=0,
            error=PreviewError.MISSING_LIQUIDITY_OR_INPUT,
        )


def swap_preview(
    mode: SwapMode | str | bool,
    amount: int | None,
    reserve_in: int,
    reserve_out: int,
    slippage_bps: int = DEFAULT_SLIPPAGE_BPS,
    amm: ConstantProductAMM = constant_product,
) -> SwapPreview:
    """Compute a swap preview in either direction.

    Args:
        mode: SwapMode, or a bool where True means reverse
        amount: Input amount (forward) or desired output amount (reverse)
        reserve_in: Reserve of the token being sold
        reserve_out: Reserve of the token being bought
        slippage_bps: Tolerance for min_amount_out (forward mode only)
        amm: Pricing engine (override for non-default fee tiers)

    Raises:
        InsufficientLiquidity: In reverse mode, if amount >= reserve_out
    """
    if isinstance(mode, bool):
        mode = SwapMode.REVERSE if mode else SwapMode.FORWARD
    mode = SwapMode(mode)

    if not amount or reserve_in == 0 or reserve_out == 0:
        return SwapPreview.missing()

    if mode is SwapMode.REVERSE:
        amount_in = amm.get_amount_in(amount, reserve_in, reserve_out)
        return SwapPreview(amount_in=amount_in, amount_out=amount, min_amount_out=0)

    amount_out = amm.get_amount_out(amount, reserve_in, reserve_out)
    return SwapPreview(
        amount_in=amount,
        amount_out=amount_out,
        min_amount_out=min_amount_after_slippage(amount_out, slippage_bps),
    )


__all__ = ["SwapMode", "PreviewError", "SwapPreview", "swap_preview"]
