"""Constant-product AMM math and routing engine for an exchange client."""

from swapcore.amm import (
    calculate_optimal_amounts,
    get_amount_in,
    get_amount_out,
    min_amount_after_slippage,
    plan_deposit,
    quote,
)
from swapcore.preview import SwapMode, SwapPreview, swap_preview
from swapcore.routing import best_path

__version__ = "0.1.0"
__all__ = [
    "get_amount_out",
    "get_amount_in",
    "min_amount_after_slippage",
    "quote",
    "calculate_optimal_amounts",
    "plan_deposit",
    "swap_preview",
    "SwapMode",
    "SwapPreview",
    "best_path",
    "__version__",
]
