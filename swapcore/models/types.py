"""Shared type definitions: token identities and raw amounts."""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from swapcore.constants import UINT256_MAX
from swapcore.errors import NegativeAmount


def validate_uint256(value: Any) -> str:
    """Validate that a value is a uint256, returning it as a decimal string.

    Raises:
        ValueError: If value is not a non-negative integer within uint256 range
    """
    if isinstance(value, bool):
        raise ValueError("Uint256 cannot be a boolean")
    if isinstance(value, int):
        int_value = value
    elif isinstance(value, str):
        try:
            int_value = int(value)
        except ValueError as err:
            raise ValueError(f"Uint256 must be a decimal integer string: '{value}'") from err
    else:
        raise ValueError(f"Uint256 must be string or int, got {type(value).__name__}")

    if int_value < 0:
        raise ValueError(f"Uint256 cannot be negative: {value}")
    if int_value > UINT256_MAX:
        raise ValueError(f"Uint256 overflow: {value} > 2^256-1")

    return str(int_value)


# Token or pair address (40 hex chars after 0x prefix)
Address = Annotated[str, Field(pattern=r"^0x[a-fA-F0-9]{40}$")]

# Raw token amount as decimal string (validated)
Uint256 = Annotated[
    str,
    BeforeValidator(validate_uint256),
    Field(description="256-bit unsigned integer as decimal string"),
]


def normalize_address(address: str) -> str:
    """Normalize a token identity to lowercase with a 0x prefix.

    Two identities are the same token iff their normalized forms match.
    No validation is performed; see is_valid_address().
    """
    addr = address.lower()
    if not addr.startswith("0x"):
        addr = "0x" + addr
    return addr


def is_valid_address(address: str) -> bool:
    """Check if a string is a 0x-prefixed 20-byte hex address."""
    if not isinstance(address, str):
        return False
    if not address.startswith("0x") or len(address) != 42:
        return False
    try:
        int(address, 16)
        return True
    except ValueError:
        return False


def require_raw_amounts(**amounts: int) -> None:
    """Reject negative raw amounts.

    Raises:
        NegativeAmount: Naming the first negative argument
    """
    for name, value in amounts.items():
        if value < 0:
            raise NegativeAmount(f"{name} cannot be negative: {value}")
