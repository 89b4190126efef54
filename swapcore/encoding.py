"""ABI encoding of router calls.

Turns the amounts and paths computed by the core into calldata for the
exchange router. Nothing here signs or sends a transaction.
"""

from __future__ import annotations

from typing import ClassVar

from eth_abi import encode  # type: ignore[attr-defined]
from eth_utils import function_signature_to_4byte_selector

from swapcore.constants import UINT256_MAX
from swapcore.models.types import is_valid_address


def _selector(signature: str) -> str:
    return "0x" + function_signature_to_4byte_selector(signature).hex()


def _address_bytes(name: str, address: str) -> bytes:
    if not is_valid_address(address):
        raise ValueError(f"Invalid {name} address: {address}")
    return bytes.fromhex(address[2:])


class RouterEncoder:
    """Calldata builder for the exchange router and ERC20 approvals."""

    SWAP_TOKEN_FOR_TOKEN_SIGNATURE: ClassVar[str] = (
        "swapTokenForToken(address,address,uint256,uint256)"
    )
    MULTI_HOP_SWAP_SIGNATURE: ClassVar[str] = "multiHopSwap(address[],uint256,uint256)"
    ADD_LIQUIDITY_SIGNATURE: ClassVar[str] = (
        "addLiquidity(address,address,uint256,uint256,uint256,uint256,address)"
    )
    REMOVE_LIQUIDITY_SIGNATURE: ClassVar[str] = (
        "removeLiquidity(address,address,uint256,uint256,uint256,address)"
    )
    CREATE_PAIR_SIGNATURE: ClassVar[str] = "createPair(address,address)"
    APPROVE_SIGNATURE: ClassVar[str] = "approve(address,uint256)"

    SWAP_TOKEN_FOR_TOKEN_SELECTOR: ClassVar[str] = _selector(SWAP_TOKEN_FOR_TOKEN_SIGNATURE)
    MULTI_HOP_SWAP_SELECTOR: ClassVar[str] = _selector(MULTI_HOP_SWAP_SIGNATURE)
    ADD_LIQUIDITY_SELECTOR: ClassVar[str] = _selector(ADD_LIQUIDITY_SIGNATURE)
    REMOVE_LIQUIDITY_SELECTOR: ClassVar[str] = _selector(REMOVE_LIQUIDITY_SIGNATURE)
    CREATE_PAIR_SELECTOR: ClassVar[str] = _selector(CREATE_PAIR_SIGNATURE)
    APPROVE_SELECTOR: ClassVar[str] = _selector(APPROVE_SIGNATURE)

    def __init__(self, router_address: str, factory_address: str | None = None) -> None:
        _address_bytes("router", router_address)
        if factory_address is not None:
            _address_bytes("factory", factory_address)
        self.router_address = router_address.lower()
        self.factory_address = factory_address.lower() if factory_address else None

    def encode_swap(self, path: list[str], amount_in: int, amount_out_min: int) -> tuple[str, str]:
        """Encode a swap along `path`.

        A two-token path uses swapTokenForToken; longer paths use
        multiHopSwap with the full token sequence.

        Returns:
            Tuple of (router_address, calldata)

        Raises:
            ValueError: If the path is too short or has an invalid address
        """
        if len(path) < 2:
            raise ValueError(f"Swap path needs at least two tokens: {path}")
        path_bytes = [_address_bytes(f"path[{i}]", addr) for i, addr in enumerate(path)]

        if len(path) == 2:
            encoded_args = encode(
                ["address", "address", "uint256", "uint256"],
                [path_bytes[0], path_bytes[1], amount_in, amount_out_min],
            )
            return self.router_address, self.SWAP_TOKEN_FOR_TOKEN_SELECTOR + encoded_args.hex()

        encoded_args = encode(
            ["address[]", "uint256", "uint256"],
            [path_bytes, amount_in, amount_out_min],
        )
        return self.router_address, self.MULTI_HOP_SWAP_SELECTOR + encoded_args.hex()

    def encode_add_liquidity(
        self,
        token_a: str,
        token_b: str,
        amount_a: int,
        amount_b: int,
        amount_a_min: int,
        amount_b_min: int,
        recipient: str,
    ) -> tuple[str, str]:
        """Encode addLiquidity with the amounts of a DepositPlan."""
        encoded_args = encode(
            ["address", "address", "uint256", "uint256", "uint256", "uint256", "address"],
            [
                _address_bytes("token_a", token_a),
                _address_bytes("token_b", token_b),
                amount_a,
                amount_b,
                amount_a_min,
                amount_b_min,
                _address_bytes("recipient", recipient),
            ],
        )
        return self.router_address, self.ADD_LIQUIDITY_SELECTOR + encoded_args.hex()

    def encode_remove_liquidity(
        self,
        token_a: str,
        token_b: str,
        liquidity: int,
        amount_a_min: int,
        amount_b_min: int,
        recipient: str,
    ) -> tuple[str, str]:
        """Encode removeLiquidity with the floors of a RemovalPreview."""
        encoded_args = encode(
            ["address", "address", "uint256", "uint256", "uint256", "address"],
            [
                _address_bytes("token_a", token_a),
                _address_bytes("token_b", token_b),
                liquidity,
                amount_a_min,
                amount_b_min,
                _address_bytes("recipient", recipient),
            ],
        )
        return self.router_address, self.REMOVE_LIQUIDITY_SELECTOR + encoded_args.hex()

    def encode_create_pair(self, token_a: str, token_b: str) -> tuple[str, str]:
        """Encode createPair on the factory.

        Raises:
            ValueError: If no factory address was configured
        """
        if self.factory_address is None:
            raise ValueError("Factory address not configured")
        encoded_args = encode(
            ["address", "address"],
            [_address_bytes("token_a", token_a), _address_bytes("token_b", token_b)],
        )
        return self.factory_address, self.CREATE_PAIR_SELECTOR + encoded_args.hex()

    def encode_approve(self, token: str, amount: int = UINT256_MAX) -> tuple[str, str]:
        """Encode an ERC20 approval of the router (unlimited by default)."""
        _address_bytes("token", token)
        encoded_args = encode(
            ["address", "uint256"],
            [_address_bytes("router", self.router_address), amount],
        )
        return token.lower(), self.APPROVE_SELECTOR + encoded_args.hex()


def needs_approval(allowance: int, required_amount: int) -> bool:
    """Whether the current allowance is too low to spend required_amount."""
    return allowance < required_amount


__all__ = ["RouterEncoder", "needs_approval"]
