"""Liquidity ratio math for deposits and withdrawals.

Deposits into a non-empty pair must follow the current reserve ratio.
The router takes the desired amounts and per-side floors, keeps the
binding side as offered and shrinks the other to the ratio. The helpers
here reproduce that decision locally so the client can warn before
submitting a deposit the router would reject.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from swapcore.amm.slippage import min_amount_after_slippage
from swapcore.constants import DEFAULT_SLIPPAGE_BPS, SHARE_PRECISION
from swapcore.errors import InsufficientBalance, InsufficientLiquidity
from swapcore.models.types import require_raw_amounts
from swapcore.safe_int import S


def quote(amount_a: int, reserve_a: int, reserve_b: int) -> int:
    """Amount of token B worth amount_a of token A at the reserve ratio.

    No fee is applied; this is a ratio projection, not a trade.
    Returns 0 if any argument is 0.
    """
    require_raw_amounts(amount_a=amount_a, reserve_a=reserve_a, reserve_b=reserve_b)
    if amount_a == 0 or reserve_a == 0 or reserve_b == 0:
        return 0
    return (S(amount_a) * S(reserve_b) // S(reserve_a)).value


def calculate_optimal_amounts(
    amount_a_desired: int,
    amount_b_desired: int,
    amount_a_min: int,
    amount_b_min: int,
    reserve_a: int,
    reserve_b: int,
) -> tuple[int, int] | None:
    """Deposit pair that preserves the reserve ratio, as the router computes it.

    An empty pool accepts the desired amounts as-is (the first depositor
    sets the ratio). Otherwise the smaller implied deposit is used:

    - If quote(a_desired) <= b_desired, A binds: (a_desired, b_optimal),
      accepted iff b_optimal >= b_min.
    - Else B binds: (a_optimal, b_desired), accepted iff
      a_optimal <= a_desired and a_optimal >= a_min.

    Returns:
        (amount_a, amount_b), or None if the amounts are too imbalanced to
        satisfy the pool ratio within the given floors
    """
    require_raw_amounts(
        amount_a_desired=amount_a_desired,
        amount_b_desired=amount_b_desired,
        amount_a_min=amount_a_min,
        amount_b_min=amount_b_min,
    )
    if reserve_a == 0 and reserve_b == 0:
        return amount_a_desired, amount_b_desired

    amount_b_optimal = quote(amount_a_desired, reserve_a, reserve_b)
    if amount_b_optimal <= amount_b_desired:
        if amount_b_optimal >= amount_b_min:
            return amount_a_desired, amount_b_optimal
        return None

    amount_a_optimal = quote(amount_b_desired, reserve_b, reserve_a)
    if amount_a_optimal <= amount_a_desired and amount_a_optimal >= amount_a_min:
        return amount_a_optimal, amount_b_desired
    return None


class DepositError(Enum):
    """Reasons a deposit cannot be planned."""

    MISSING_INPUT = "missing_input"
    RATIO_INFEASIBLE = "ratio_infeasible"
    INSUFFICIENT_LIQUIDITY = "insufficient_liquidity"

    @property
    def message(self) -> str:
        return _DEPOSIT_MESSAGES[self]


_DEPOSIT_MESSAGES = {
    DepositError.MISSING_INPUT: "At least one token amount is required.",
    DepositError.RATIO_INFEASIBLE: (
        "The token amounts are too imbalanced to maintain the pool ratio. Please adjust them."
    ),
    DepositError.INSUFFICIENT_LIQUIDITY: "Insufficient liquidity for this amount.",
}


@dataclass(frozen=True)
class DepositPlan:
    """Arguments for the router's addLiquidity call."""

    amount_a: int
    amount_b: int
    amount_a_min: int
    amount_b_min: int


@dataclass(frozen=True)
class DepositResult:
    """Outcome of planning a two-sided deposit.

    A failed plan is a user-correctable warning, not an exception.
    """

    plan: DepositPlan | None
    error: DepositError | None = None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    @classmethod
    def with_error(cls, error: DepositError) -> DepositResult:
        return cls(plan=None, error=error)


def plan_deposit(
    amount_a_desired: int,
    amount_b_desired: int,
    reserve_a: int,
    reserve_b: int,
    slippage_bps: int = DEFAULT_SLIPPAGE_BPS,
) -> DepositResult:
    """Validate a user's two-sided deposit and compute the router arguments.

    The per-side floors passed to the ratio check are the slippage floors
    of the desired amounts; the returned minimums are the slippage floors
    of the corrected amounts.
    """
    require_raw_amounts(reserve_a=reserve_a, reserve_b=reserve_b)
    if amount_a_desired == 0 and amount_b_desired == 0:
        return DepositResult.with_error(DepositError.MISSING_INPUT)

    optimal = calculate_optimal_amounts(
        amount_a_desired,
        amount_b_desired,
        min_amount_after_slippage(amount_a_desired, slippage_bps),
        min_amount_after_slippage(amount_b_desired, slippage_bps),
        reserve_a,
        reserve_b,
    )
    if optimal is None:
        return DepositResult.with_error(DepositError.RATIO_INFEASIBLE)

    amount_a, amount_b = optimal
    return DepositResult(
        plan=DepositPlan(
            amount_a=amount_a,
            amount_b=amount_b,
            amount_a_min=min_amount_after_slippage(amount_a, slippage_bps),
            amount_b_min=min_amount_after_slippage(amount_b, slippage_bps),
        )
    )


@dataclass(frozen=True)
class PairedAmount:
    """Suggested counterpart amount for a one-sided deposit entry."""

    amount: int | None
    error: DepositError | None = None


def paired_amount(amount: int, reserve_this: int, reserve_other: int) -> PairedAmount:
    """Fill in the other side of a deposit form at the pool ratio.

    No suggestion is made for an empty input or a pool without
    liquidity on both sides; the first depositor picks the ratio.
    """
    require_raw_amounts(amount=amount)
    if amount == 0 or reserve_this == 0 or reserve_other == 0:
        return PairedAmount(amount=None)

    counterpart = quote(amount, reserve_this, reserve_other)
    if counterpart == 0:
        return PairedAmount(amount=None, error=DepositError.INSUFFICIENT_LIQUIDITY)
    return PairedAmount(amount=counterpart)


@dataclass(frozen=True)
class LiquidityPosition:
    """A holder's claim on a pool, derived from LP token balance."""

    share_ppm: int
    amount0: int
    amount1: int

    @property
    def share_percent(self) -> Decimal:
        """Display-only share of the pool in percent."""
        return Decimal(self.share_ppm) / (SHARE_PRECISION // 100)


def position_share(
    balance_lp: int,
    total_supply: int,
    reserve0: int,
    reserve1: int,
) -> LiquidityPosition:
    """Pool share and underlying amounts for an LP balance.

    A pool with no LP supply yields an empty position.
    """
    require_raw_amounts(
        balance_lp=balance_lp, total_supply=total_supply, reserve0=reserve0, reserve1=reserve1
    )
    if total_supply == 0:
        return LiquidityPosition(share_ppm=0, amount0=0, amount1=0)

    return LiquidityPosition(
        share_ppm=(S(balance_lp) * S(SHARE_PRECISION) // S(total_supply)).value,
        amount0=(S(reserve0) * S(balance_lp) // S(total_supply)).value,
        amount1=(S(reserve1) * S(balance_lp) // S(total_supply)).value,
    )


@dataclass(frozen=True)
class RemovalPreview:
    """Expected withdrawal and the router's removeLiquidity floors."""

    liquidity: int
    amount0: int
    amount1: int
    amount0_min: int
    amount1_min: int


def preview_removal(
    liquidity: int,
    balance_lp: int,
    total_supply: int,
    reserve0: int,
    reserve1: int,
    slippage_bps: int = DEFAULT_SLIPPAGE_BPS,
) -> RemovalPreview:
    """Preview burning `liquidity` LP tokens.

    Raises:
        InsufficientBalance: If liquidity exceeds the holder's LP balance
        InsufficientLiquidity: If the pool has no LP supply
    """
    require_raw_amounts(liquidity=liquidity, balance_lp=balance_lp)
    if liquidity > balance_lp:
        raise InsufficientBalance(f"Burning {liquidity} LP but balance is {balance_lp}")
    if total_supply == 0:
        raise InsufficientLiquidity("Pool has no LP supply")

    position = position_share(liquidity, total_supply, reserve0, reserve1)
    return RemovalPreview(
        liquidity=liquidity,
        amount0=position.amount0,
        amount1=position.amount1,
        amount0_min=min_amount_after_slippage(position.amount0, slippage_bps),
        amount1_min=min_amount_after_slippage(position.amount1, slippage_bps),
    )


__all__ = [
    "quote",
    "calculate_optimal_amounts",
    "DepositError",
    "DepositPlan",
    "DepositResult",
    "plan_deposit",
    "PairedAmount",
    "paired_amount",
    "LiquidityPosition",
    "position_share",
    "RemovalPreview",
    "preview_removal",
]
