"""Constant-product AMM math: pricing, slippage and liquidity."""

from swapcore.amm.liquidity import (
    DepositError,
    DepositPlan,
    DepositResult,
    LiquidityPosition,
    PairedAmount,
    RemovalPreview,
    calculate_optimal_amounts,
    paired_amount,
    plan_deposit,
    position_share,
    preview_removal,
    quote,
)
from swapcore.amm.pricing import (
    ConstantProductAMM,
    SwapResult,
    constant_product,
    get_amount_in,
    get_amount_out,
)
from swapcore.amm.slippage import (
    SlippageWarning,
    bps_to_percent,
    classify_slippage,
    custom_slippage_accepted,
    min_amount_after_slippage,
    percent_to_bps,
    validate_slippage_bps,
)

__all__ = [
    # Pricing
    "ConstantProductAMM",
    "SwapResult",
    "constant_product",
    "get_amount_out",
    "get_amount_in",
    # Slippage
    "SlippageWarning",
    "min_amount_after_slippage",
    "percent_to_bps",
    "bps_to_percent",
    "classify_slippage",
    "custom_slippage_accepted",
    "validate_slippage_bps",
    # Liquidity
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
