"""Token graph and minimum-hop pathfinding.

Every pool is an undirected edge between its two tokens. An edge models
pool existence, not current tradability: reserves are checked when the
route is quoted, not here.

Ties between equally short paths are broken by neighbor insertion order,
which follows the order pools first appear in the snapshot.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping
from typing import Any, Union

from swapcore.models.pool import Pool
from swapcore.models.types import normalize_address

# A pool snapshot entry: a Pool, a (token0, token1) pair, or a mapping
# with "token0"/"token1" keys
PoolLike = Union[Pool, tuple[str, str], Mapping[str, Any]]


def _pool_tokens(pool: PoolLike) -> tuple[str, str]:
    if isinstance(pool, Pool):
        return pool.token0, pool.token1
    if isinstance(pool, Mapping):
        return pool["token0"], pool["token1"]
    token_a, token_b = pool
    return token_a, token_b


class TokenGraph:
    """Adjacency list of tokens connected by pools.

    Neighbors are kept in insertion order (dict keys) so traversal is
    deterministic for a given pool snapshot.
    """

    def __init__(self) -> None:
        self._adjacency: dict[str, dict[str, None]] = {}

    @classmethod
    def from_pools(cls, pools: Iterable[PoolLike]) -> TokenGraph:
        """Build a graph with one bidirectional edge per pool."""
        graph = cls()
        for pool in pools:
            token_a, token_b = _pool_tokens(pool)
            graph._add_edge(normalize_address(token_a), normalize_address(token_b))
        return graph

    def _add_edge(self, token_a: str, token_b: str) -> None:
        self._adjacency.setdefault(token_a, {})[token_b] = None
        self._adjacency.setdefault(token_b, {})[token_a] = None

    def get_neighbors(self, token: str) -> list[str]:
        """Tokens directly tradeable with `token`, in insertion order."""
        return list(self._adjacency.get(normalize_address(token), ()))

    def has_token(self, token: str) -> bool:
        return normalize_address(token) in self._adjacency

    @property
    def token_count(self) -> int:
        """Number of unique tokens in the graph."""
        return len(self._adjacency)

    def shortest_path(self, token_in: str, token_out: str) -> list[str] | None:
        """Breadth-first search for a minimum-hop path.

        The path is returned the first time token_out is dequeued.

        Returns:
            Normalized token path from token_in to token_out, or None
        """
        start = normalize_address(token_in)
        target = normalize_address(token_out)
        if start not in self._adjacency or target not in self._adjacency:
            return None

        queue: deque[list[str]] = deque([[start]])
        visited = {start}

        while queue:
            path = queue.popleft()
            current = path[-1]
            if current == target:
                return path

            for neighbor in self._adjacency[current]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(path + [neighbor])

        return None


def best_path(
    pools: Iterable[PoolLike],
    token_in: str | None,
    token_out: str | None,
) -> list[str] | None:
    """Find a minimum-hop path of tokens from token_in to token_out.

    A path of length 2 is a direct swap; longer paths are multi-hop.

    Returns:
        The token path, or None if either token is missing, both are the
        same token, or no sequence of pools connects them
    """
    if not token_in or not token_out:
        return None
    if normalize_address(token_in) == normalize_address(token_out):
        return None
    return TokenGraph.from_pools(pools).shortest_path(token_in, token_out)


__all__ = ["PoolLike", "TokenGraph", "best_path"]
