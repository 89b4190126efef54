"""Routing: minimum-hop paths through the pool graph and per-hop quotes."""

from swapcore.routing.multihop import (
    HopResult,
    RouteQuote,
    quote_route,
    quote_route_exact_output,
)
from swapcore.routing.pathfinding import PoolLike, TokenGraph, best_path

__all__ = [
    "PoolLike",
    "TokenGraph",
    "best_path",
    "HopResult",
    "RouteQuote",
    "quote_route",
    "quote_route_exact_output",
]
