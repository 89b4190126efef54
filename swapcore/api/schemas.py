"""Pydantic models for the preview API.

Amounts travel as decimal strings so uint256 values survive JSON.
"""

from typing import Any

from pydantic import BaseModel, Field

from swapcore.constants import BPS_DENOMINATOR, DEFAULT_SLIPPAGE_BPS
from swapcore.models.types import Address, Uint256
from swapcore.preview import SwapMode


def _slippage_field() -> Any:
    return Field(
        default=DEFAULT_SLIPPAGE_BPS,
        ge=0,
        le=BPS_DENOMINATOR,
        alias="slippageBps",
        description="Slippage tolerance in basis points",
    )


class SwapPreviewRequest(BaseModel):
    """Swap form state to preview."""

    mode: SwapMode = SwapMode.FORWARD
    amount: Uint256 | None = Field(
        default=None,
        description="Input amount (forward) or desired output amount (reverse)",
    )
    reserve_in: Uint256 = Field(alias="reserveIn")
    reserve_out: Uint256 = Field(alias="reserveOut")
    slippage_bps: int = _slippage_field()

    model_config = {"populate_by_name": True}


class SwapPreviewResponse(BaseModel):
    """Preview amounts; `error` is set when input or liquidity is missing."""

    amount_in: Uint256 = Field(alias="amountIn")
    amount_out: Uint256 = Field(alias="amountOut")
    min_amount_out: Uint256 = Field(alias="minAmountOut")
    error: str | None = None

    model_config = {"populate_by_name": True}


class LiquidityPlanRequest(BaseModel):
    """A two-sided deposit to validate against the pool ratio."""

    amount_a_desired: Uint256 = Field(alias="amountADesired")
    amount_b_desired: Uint256 = Field(alias="amountBDesired")
    reserve_a: Uint256 = Field(alias="reserveA")
    reserve_b: Uint256 = Field(alias="reserveB")
    slippage_bps: int = _slippage_field()

    model_config = {"populate_by_name": True}


class LiquidityPlanResponse(BaseModel):
    """Router arguments for the deposit, or the reason it is infeasible."""

    amount_a: Uint256 | None = Field(default=None, alias="amountA")
    amount_b: Uint256 | None = Field(default=None, alias="amountB")
    amount_a_min: Uint256 | None = Field(default=None, alias="amountAMin")
    amount_b_min: Uint256 | None = Field(default=None, alias="amountBMin")
    error: str | None = None
    message: str | None = None

    model_config = {"populate_by_name": True}


class PoolEdge(BaseModel):
    """A pool as an edge between two tokens."""

    token0: Address
    token1: Address


class RouteRequest(BaseModel):
    """Pool snapshot and the pair to route between."""

    pools: list[PoolEdge]
    token_in: Address = Field(alias="tokenIn")
    token_out: Address = Field(alias="tokenOut")

    model_config = {"populate_by_name": True}


class RouteResponse(BaseModel):
    """Minimum-hop path, or null when the tokens are not connected."""

    path: list[str] | None
    is_multihop: bool = Field(alias="isMultihop")

    model_config = {"populate_by_name": True}


class ErrorResponse(BaseModel):
    """Error body for rejected previews."""

    error: str
    detail: str
