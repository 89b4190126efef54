"""Constant-product pricing.

The pair contract enforces x * y = k with a proportional fee on the
input side. Every formula here multiplies before dividing and truncates,
in the same order as the contract, so previews match execution exactly.
"""

from __future__ import annotations

from dataclasses import dataclass

from swapcore.config import DEFAULT_AMM_CONFIG, AmmConfig
from swapcore.errors import InsufficientLiquidity
from swapcore.models.pool import Pool
from swapcore.models.types import require_raw_amounts
from swapcore.safe_int import S


@dataclass(frozen=True)
class SwapResult:
    """Result of simulating a swap through a single pool."""

    amount_in: int
    amount_out: int
    token_in: str
    token_out: str
    pool_address: str | None = None


class ConstantProductAMM:
    """Constant-product swap math.

    Formula: amount_out = (amount_in * 997 * reserve_out) / (reserve_in * 1000 + amount_in * 997)

    The 997/1000 factor is the 0.3% fee; other fee tiers are set through AmmConfig.
    """

    def __init__(self, config: AmmConfig = DEFAULT_AMM_CONFIG) -> None:
        self.config = config

    def get_amount_out(self, amount_in: int, reserve_in: int, reserve_out: int) -> int:
        """Calculate output amount for an exact input.

        Args:
            amount_in: Input token amount
            reserve_in: Reserve of input token in pool
            reserve_out: Reserve of output token in pool

        Returns:
            Output token amount, or 0 if the input or either reserve is 0
        """
        require_raw_amounts(amount_in=amount_in, reserve_in=reserve_in, reserve_out=reserve_out)
        if amount_in == 0 or reserve_in == 0 or reserve_out == 0:
            return 0

        amount_in_with_fee = S(amount_in) * S(self.config.fee_numerator)
        numerator = amount_in_with_fee * S(reserve_out)
        denominator = S(reserve_in) * S(self.config.fee_denominator) + amount_in_with_fee

        return (numerator // denominator).value

    def get_amount_in(self, amount_out: int, reserve_in: int, reserve_out: int) -> int:
        """Calculate required input for an exact output.

        Formula: amount_in = (res_in * out * 1000) / ((res_out - out) * 997) + 1

        The trailing +1 rounds up, so feeding the result back through
        get_amount_out yields at least amount_out.

        Raises:
            InsufficientLiquidity: If amount_out >= reserve_out
        """
        require_raw_amounts(amount_out=amount_out, reserve_in=reserve_in, reserve_out=reserve_out)
        if amount_out >= reserve_out:
            raise InsufficientLiquidity(
                f"Requested {amount_out} but output reserve is {reserve_out}"
            )

        numerator = S(reserve_in) * S(amount_out) * S(self.config.fee_denominator)
        denominator = (S(reserve_out) - S(amount_out)) * S(self.config.fee_numerator)

        return ((numerator // denominator) + S(1)).value

    def simulate_swap(self, pool: Pool, token_in: str, amount_in: int) -> SwapResult:
        """Simulate an exact-input swap through a pool."""
        reserve_in, reserve_out = pool.get_reserves(token_in)
        amount_out = self.get_amount_out(amount_in, reserve_in, reserve_out)
        return SwapResult(
            amount_in=amount_in,
            amount_out=amount_out,
            token_in=token_in,
            token_out=pool.get_token_out(token_in),
            pool_address=pool.address,
        )

    def simulate_swap_exact_output(self, pool: Pool, token_in: str, amount_out: int) -> SwapResult:
        """Simulate an exact-output swap through a pool.

        Raises:
            InsufficientLiquidity: If the pool cannot provide amount_out
        """
        reserve_in, reserve_out = pool.get_reserves(token_in)
        amount_in = self.get_amount_in(amount_out, reserve_in, reserve_out)
        return SwapResult(
            amount_in=amount_in,
            amount_out=amount_out,
            token_in=token_in,
            token_out=pool.get_token_out(token_in),
            pool_address=pool.address,
        )


# Singleton instance with the default 0.3% fee
constant_product = ConstantProductAMM()


def get_amount_out(amount_in: int, reserve_in: int, reserve_out: int) -> int:
    """Output for an exact input at the default fee. See ConstantProductAMM."""
    return constant_product.get_amount_out(amount_in, reserve_in, reserve_out)


def get_amount_in(amount_out: int, reserve_in: int, reserve_out: int) -> int:
    """Input for an exact output at the default fee. See ConstantProductAMM."""
    return constant_product.get_amount_in(amount_out, reserve_in, reserve_out)


__all__ = [
    "SwapResult",
    "ConstantProductAMM",
    "constant_product",
    "get_amount_out",
    "get_amount_in",
]
