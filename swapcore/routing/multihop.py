"""Quoting a token path hop by hop.

The route finder only proves that pools connect the path. Before a route
is submitted each hop is priced against its own reserves, with the
output of one hop feeding the next.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from swapcore.amm.pricing import ConstantProductAMM, constant_product
from swapcore.errors import PoolNotFound
from swapcore.models.pool import Pool, find_pool


@dataclass(frozen=True)
class HopResult:
    """Result of a single hop in a route."""

    pool: Pool
    token_in: str
    token_out: str
    amount_in: int
    amount_out: int


@dataclass(frozen=True)
class RouteQuote:
    """Amounts along a full token path."""

    path: list[str]
    amount_in: int
    amount_out: int
    hops: list[HopResult]

    @property
    def is_multihop(self) -> bool:
        """True when the route needs the multi-hop router call."""
        return len(self.path) > 2

    @property
    def is_executable(self) -> bool:
        """True when every hop produces a non-zero output."""
        return bool(self.hops) and all(hop.amount_out > 0 for hop in self.hops)


def _pools_along(pools: list[Pool], path: list[str]) -> list[Pool]:
    if len(path) < 2:
        raise ValueError(f"Path needs at least two tokens: {path}")
    hop_pools = []
    for token_a, token_b in zip(path, path[1:]):
        pool = find_pool(pools, token_a, token_b)
        if pool is None:
            raise PoolNotFound(f"No pool for {token_a} -> {token_b}")
        hop_pools.append(pool)
    return hop_pools


def quote_route(
    pools: Iterable[Pool],
    path: list[str],
    amount_in: int,
    amm: ConstantProductAMM = constant_product,
) -> RouteQuote:
    """Quote an exact-input swap along `path`.

    A hop through an empty pool yields 0, which then propagates to the
    end of the route; check RouteQuote.is_executable before submitting.

    Raises:
        PoolNotFound: If two consecutive tokens share no pool
    """
    hop_pools = _pools_along(list(pools), path)

    hops: list[HopResult] = []
    current_amount = amount_in
    for pool, token_in, token_out in zip(hop_pools, path, path[1:]):
        reserve_in, reserve_out = pool.get_reserves(token_in)
        amount_out = amm.get_amount_out(current_amount, reserve_in, reserve_out)
        hops.append(HopResult(pool, token_in, token_out, current_amount, amount_out))
        current_amount = amount_out

    return RouteQuote(path=list(path), amount_in=amount_in, amount_out=current_amount, hops=hops)


def quote_route_exact_output(
    pools: Iterable[Pool],
    path: list[str],
    amount_out: int,
    amm: ConstantProductAMM = constant_product,
) -> RouteQuote:
    """Quote the input needed to receive exactly `amount_out` at the end of `path`.

    Walks the path backwards with get_amount_in.

    Raises:
        PoolNotFound: If two consecutive tokens share no pool
        InsufficientLiquidity: If any hop cannot provide its required output
    """
    hop_pools = _pools_along(list(pools), path)

    reversed_hops: list[HopResult] = []
    current_amount = amount_out
    for pool, token_in, token_out in reversed(list(zip(hop_pools, path, path[1:]))):
        reserve_in, reserve_out = pool.get_reserves(token_in)
        amount_in = amm.get_amount_in(current_amount, reserve_in, reserve_out)
        reversed_hops.append(HopResult(pool, token_in, token_out, amount_in, current_amount))
        current_amount = amount_in

    return RouteQuote(
        path=list(path),
        amount_in=current_amount,
        amount_out=amount_out,
        hops=list(reversed(reversed_hops)),
    )


__all__ = ["HopResult", "RouteQuote", "quote_route", "quote_route_exact_output"]
