"""FastAPI application serving AMM previews.

The service only computes; it never reads chain state or submits
transactions. Callers supply reserves and pool snapshots with each request.
"""

import os

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from swapcore import __version__
from swapcore.api.endpoints import router
from swapcore.config import AmmConfig
from swapcore.errors import AmmError, InsufficientLiquidity

logger = structlog.get_logger()

# Configuration from environment variables with sensible defaults
HOST = os.environ.get("SWAPCORE_HOST", "127.0.0.1")
PORT = int(os.environ.get("SWAPCORE_PORT", "8000"))
DEBUG = os.environ.get("SWAPCORE_DEBUG", "false").lower() in ("true", "1", "yes")

app = FastAPI(
    title="swapcore",
    description="Constant-product AMM pricing, liquidity and routing previews",
    version=__version__,
)

app.include_router(router)


@app.exception_handler(InsufficientLiquidity)
async def insufficient_liquidity_handler(
    request: Request, exc: InsufficientLiquidity
) -> JSONResponse:
    """Reverse quotes asking for more than the reserve are a conflict, not a crash."""
    logger.info("insufficient_liquidity", path=request.url.path, detail=str(exc))
    return JSONResponse(
        status_code=409,
        content={"error": "insufficient_liquidity", "detail": str(exc)},
    )


@app.exception_handler(AmmError)
async def amm_error_handler(request: Request, exc: AmmError) -> JSONResponse:
    """Invalid numeric preconditions indicate a bad request."""
    logger.warning("amm_error", path=request.url.path, error=type(exc).__name__, detail=str(exc))
    return JSONResponse(
        status_code=422,
        content={"error": type(exc).__name__, "detail": str(exc)},
    )


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint, reporting the active fee tier."""
    config = AmmConfig.from_env()
    return {"status": "ok", "fee": f"{config.fee_numerator}/{config.fee_denominator}"}


def run() -> None:
    """Run the preview API server.

    Configuration via environment variables:
    - SWAPCORE_HOST: Host to bind to (default: 127.0.0.1)
    - SWAPCORE_PORT: Port to bind to (default: 8000)
    - SWAPCORE_DEBUG: Enable debug/reload mode (default: false)
    """
    uvicorn.run(
        "swapcore.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
