"""Data models for pools, token identities and raw amounts."""

from swapcore.models.pool import Pool, find_pool, reserves_for_tokens, sort_tokens
from swapcore.models.types import (
    Address,
    Uint256,
    is_valid_address,
    normalize_address,
    require_raw_amounts,
    validate_uint256,
)

__all__ = [
    "Pool",
    "find_pool",
    "reserves_for_tokens",
    "sort_tokens",
    "Address",
    "Uint256",
    "is_valid_address",
    "normalize_address",
    "require_raw_amounts",
    "validate_uint256",
]
