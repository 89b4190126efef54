"""Pytest configuration and fixtures."""

import pytest

from swapcore.models.pool import Pool
from tests.helpers.constants import TOKEN_A, TOKEN_B, TOKEN_C, USDC, WETH


@pytest.fixture
def weth_usdc_pool() -> Pool:
    """A WETH/USDC pool with 1 WETH = 2500 USDC."""
    return Pool.from_unordered(
        WETH,
        USDC,
        10_000 * 10**18,  # 10,000 WETH
        25_000_000 * 10**6,  # 25M USDC
        decimals_a=18,
        decimals_b=6,
    )


@pytest.fixture
def chain_pools() -> list[Pool]:
    """A -> B -> C with balanced 1000/1000 reserves and no direct A/C pool."""
    return [
        Pool(token0=TOKEN_A, token1=TOKEN_B, reserve0=1000, reserve1=1000),
        Pool(token0=TOKEN_B, token1=TOKEN_C, reserve0=1000, reserve1=1000),
    ]
