"""Error classes for AMM math and routing.

Only genuinely invalid preconditions are raised. Expected UI states
(no quote yet, infeasible ratio, no route) are returned as sentinel
results instead.
"""


class AmmError(Exception):
    """Base error for AMM operations."""

    pass


class InsufficientLiquidity(AmmError):
    """Requested output is not available in the pool reserves."""

    pass


class NegativeAmount(AmmError, ValueError):
    """A raw token amount or reserve was negative."""

    pass


class InvalidSlippage(AmmError, ValueError):
    """Slippage tolerance is outside [0, 10000] bps."""

    pass


class InsufficientBalance(AmmError):
    """User balance is lower than the amount being spent."""

    pass


class PoolNotFound(AmmError, LookupError):
    """No pool connects two consecutive tokens of a path."""

    pass
