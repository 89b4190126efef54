"""Tests for pool snapshots."""

import pytest

from swapcore.models.pool import Pool, find_pool, reserves_for_tokens, sort_tokens
from tests.helpers.constants import TOKEN_A, TOKEN_B, TOKEN_C, USDC, WETH


class TestSortTokens:
    def test_ascending(self) -> None:
        assert sort_tokens(TOKEN_B, TOKEN_A) == (TOKEN_A, TOKEN_B)
        assert sort_tokens(TOKEN_A, TOKEN_B) == (TOKEN_A, TOKEN_B)

    def test_case_insensitive(self) -> None:
        assert sort_tokens(WETH.upper().replace("0X", "0x"), USDC) == (USDC, WETH)

    def test_identical_raises(self) -> None:
        with pytest.raises(ValueError, match="Identical"):
            sort_tokens(TOKEN_A, TOKEN_A.upper().replace("0X", "0x"))


class TestPool:
    """Tests for Pool orientation helpers."""

    def test_from_unordered_swaps_reserves(self, weth_usdc_pool: Pool) -> None:
        """USDC sorts below WETH, so it becomes token0."""
        assert weth_usdc_pool.token0 == USDC
        assert weth_usdc_pool.reserve0 == 25_000_000 * 10**6
        assert weth_usdc_pool.decimals0 == 6
        assert weth_usdc_pool.token1 == WETH
        assert weth_usdc_pool.decimals1 == 18

    def test_get_reserves(self, weth_usdc_pool: Pool) -> None:
        assert weth_usdc_pool.get_reserves(WETH) == (10_000 * 10**18, 25_000_000 * 10**6)
        assert weth_usdc_pool.get_reserves(USDC) == (25_000_000 * 10**6, 10_000 * 10**18)

    def test_get_token_out(self, weth_usdc_pool: Pool) -> None:
        assert weth_usdc_pool.get_token_out(WETH) == USDC
        assert weth_usdc_pool.get_token_out(USDC) == WETH

    def test_unknown_token(self, weth_usdc_pool: Pool) -> None:
        with pytest.raises(ValueError, match="not in pool"):
            weth_usdc_pool.get_reserves(TOKEN_A)
        with pytest.raises(ValueError, match="not in pool"):
            weth_usdc_pool.get_token_out(TOKEN_A)

    def test_connects(self, weth_usdc_pool: Pool) -> None:
        assert weth_usdc_pool.connects(USDC, WETH)
        assert weth_usdc_pool.connects(WETH, USDC)
        assert not weth_usdc_pool.connects(WETH, WETH)
        assert not weth_usdc_pool.connects(WETH, TOKEN_A)

    def test_has_liquidity(self) -> None:
        assert Pool(token0=TOKEN_A, token1=TOKEN_B, reserve0=1, reserve1=1).has_liquidity
        assert not Pool(token0=TOKEN_A, token1=TOKEN_B, reserve0=1).has_liquidity


class TestPoolLookup:
    def test_find_pool(self, chain_pools: list[Pool]) -> None:
        assert find_pool(chain_pools, TOKEN_C, TOKEN_B) is chain_pools[1]
        assert find_pool(chain_pools, TOKEN_A, TOKEN_C) is None

    def test_reserves_for_tokens(self) -> None:
        pools = [Pool(token0=TOKEN_A, token1=TOKEN_B, reserve0=100, reserve1=300)]

        assert reserves_for_tokens(pools, TOKEN_B, TOKEN_A) == (300, 100)
        assert reserves_for_tokens(pools, TOKEN_A, TOKEN_C) is None
        assert reserves_for_tokens(pools, None, TOKEN_A) is None
