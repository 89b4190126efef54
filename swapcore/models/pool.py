"""Pool snapshots as supplied by the chain-read layer.

A Pool is an unordered token pair stored in canonical order: token0 is
the token with the lower address, matching the pair contract. Callers
reorient reserves with get_reserves() when their direction differs.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from swapcore.models.types import normalize_address


def sort_tokens(token_a: str, token_b: str) -> tuple[str, str]:
    """Return two token identities in canonical (ascending address) order.

    Raises:
        ValueError: If both identities refer to the same token
    """
    norm_a = normalize_address(token_a)
    norm_b = normalize_address(token_b)
    if norm_a == norm_b:
        raise ValueError(f"Identical tokens: {token_a}")
    # Same-length lowercase hex compares like the address bytes
    return (norm_a, norm_b) if norm_a < norm_b else (norm_b, norm_a)


@dataclass(frozen=True)
class Pool:
    """A constant-product pair and its current reserves."""

    token0: str
    token1: str
    reserve0: int = 0
    reserve1: int = 0
    # Pair contract address, when known
    address: str | None = None
    # Display-only token decimals
    decimals0: int = 18
    decimals1: int = 18
    # Total supply of the pair's LP token
    lp_total_supply: int = 0

    @classmethod
    def from_unordered(
        cls,
        token_a: str,
        token_b: str,
        reserve_a: int = 0,
        reserve_b: int = 0,
        *,
        address: str | None = None,
        decimals_a: int = 18,
        decimals_b: int = 18,
        lp_total_supply: int = 0,
    ) -> Pool:
        """Build a pool from a pair in arbitrary order, sorting it canonically."""
        token0, _ = sort_tokens(token_a, token_b)
        if token0 == normalize_address(token_a):
            return cls(
                token0=normalize_address(token_a),
                token1=normalize_address(token_b),
                reserve0=reserve_a,
                reserve1=reserve_b,
                address=address,
                decimals0=decimals_a,
                decimals1=decimals_b,
                lp_total_supply=lp_total_supply,
            )
        return cls(
            token0=normalize_address(token_b),
            token1=normalize_address(token_a),
            reserve0=reserve_b,
            reserve1=reserve_a,
            address=address,
            decimals0=decimals_b,
            decimals1=decimals_a,
            lp_total_supply=lp_total_supply,
        )

    def has_token(self, token: str) -> bool:
        token_norm = normalize_address(token)
        return token_norm in (normalize_address(self.token0), normalize_address(self.token1))

    def connects(self, token_a: str, token_b: str) -> bool:
        """Check if this pool trades token_a against token_b (either order)."""
        norm_a = normalize_address(token_a)
        norm_b = normalize_address(token_b)
        return norm_a != norm_b and self.has_token(norm_a) and self.has_token(norm_b)

    def get_reserves(self, token_in: str) -> tuple[int, int]:
        """Get reserves ordered as (reserve_in, reserve_out)."""
        token_in_norm = normalize_address(token_in)
        if token_in_norm == normalize_address(self.token0):
            return self.reserve0, self.reserve1
        elif token_in_norm == normalize_address(self.token1):
            return self.reserve1, self.reserve0
        else:
            raise ValueError(f"Token {token_in} not in pool")

    def get_token_out(self, token_in: str) -> str:
        """Get the output token for a given input token."""
        token_in_norm = normalize_address(token_in)
        if token_in_norm == normalize_address(self.token0):
            return self.token1
        elif token_in_norm == normalize_address(self.token1):
            return self.token0
        else:
            raise ValueError(f"Token {token_in} not in pool")

    @property
    def has_liquidity(self) -> bool:
        """True when both reserves are strictly positive."""
        return self.reserve0 > 0 and self.reserve1 > 0


def find_pool(pools: Iterable[Pool], token_a: str, token_b: str) -> Pool | None:
    """Return the first pool trading token_a against token_b, if any."""
    for pool in pools:
        if pool.connects(token_a, token_b):
            return pool
    return None


def reserves_for_tokens(
    pools: Iterable[Pool],
    token_in: str | None,
    token_out: str | None,
) -> tuple[int, int] | None:
    """Look up (reserve_in, reserve_out) for a swap direction.

    Returns None when either token is missing or no pool connects them.
    """
    if not token_in or not token_out:
        return None
    pool = find_pool(pools, token_in, token_out)
    if pool is None:
        return None
    return pool.get_reserves(token_in)


__all__ = ["Pool", "sort_tokens", "find_pool", "reserves_for_tokens"]
