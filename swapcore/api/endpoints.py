"""API endpoints for swap, liquidity and route previews."""

import structlog
from fastapi import APIRouter, Depends

from swapcore.amm.liquidity import plan_deposit
from swapcore.amm.pricing import ConstantProductAMM
from swapcore.api.schemas import (
    ErrorResponse,
    LiquidityPlanRequest,
    LiquidityPlanResponse,
    RouteRequest,
    RouteResponse,
    SwapPreviewRequest,
    SwapPreviewResponse,
)
from swapcore.config import AmmConfig
from swapcore.preview import swap_preview
from swapcore.routing.pathfinding import best_path

logger = structlog.get_logger()

router = APIRouter()


def get_amm() -> ConstantProductAMM:
    """Dependency provider for the pricing engine.

    Override this in tests to inject a different fee tier:
        app.dependency_overrides[get_amm] = lambda: ConstantProductAMM(config)
    """
    return ConstantProductAMM(AmmConfig.from_env())


@router.post("/swap/preview", responses={409: {"model": ErrorResponse}})
def preview_swap(
    request: SwapPreviewRequest,
    amm: ConstantProductAMM = Depends(get_amm),
) -> SwapPreviewResponse:
    """Preview a swap in forward (exact input) or reverse (exact output) mode.

    Error Handling:
        - Missing amount or empty reserves: 200 with zeroed amounts and `error`
        - Reverse output >= reserve: 409 (InsufficientLiquidity handler)
    """
    preview = swap_preview(
        request.mode,
        int(request.amount) if request.amount is not None else None,
        int(request.reserve_in),
        int(request.reserve_out),
        request.slippage_bps,
        amm=amm,
    )

    if not preview.is_valid:
        logger.debug("swap_preview_incomplete", mode=request.mode.value)

    return SwapPreviewResponse(
        amount_in=preview.amount_in,
        amount_out=preview.amount_out,
        min_amount_out=preview.min_amount_out,
        error=preview.error.value if preview.error else None,
    )


@router.post("/liquidity/plan", response_model_exclude_none=True)
def plan_liquidity(request: LiquidityPlanRequest) -> LiquidityPlanResponse:
    """Validate a two-sided deposit and return the addLiquidity arguments."""
    result = plan_deposit(
        int(request.amount_a_desired),
        int(request.amount_b_desired),
        int(request.reserve_a),
        int(request.reserve_b),
        request.slippage_bps,
    )

    plan = result.plan
    if plan is not None:
        return LiquidityPlanResponse(
            amount_a=plan.amount_a,
            amount_b=plan.amount_b,
            amount_a_min=plan.amount_a_min,
            amount_b_min=plan.amount_b_min,
        )

    error = result.error
    logger.info(
        "liquidity_plan_rejected",
        error=error.value if error else None,
        amount_a_desired=request.amount_a_desired,
        amount_b_desired=request.amount_b_desired,
    )
    return LiquidityPlanResponse(
        error=error.value if error else None,
        message=error.message if error else None,
    )


@router.post("/route")
def find_route(request: RouteRequest) -> RouteResponse:
    """Find a minimum-hop path between two tokens over the given pools."""
    path = best_path(
        [(pool.token0, pool.token1) for pool in request.pools],
        request.token_in,
        request.token_out,
    )

    logger.info(
        "route_found" if path else "route_not_found",
        token_in=request.token_in,
        token_out=request.token_out,
        pool_count=len(request.pools),
        hops=len(path) - 1 if path else None,
    )

    return RouteResponse(path=path, is_multihop=path is not None and len(path) > 2)
