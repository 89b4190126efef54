"""Configuration for AMM math.

The fee is exposed so the math can be validated against a deployment
with a different fee tier. Defaults match the standard 0.3% pair.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

import structlog

from swapcore.constants import (
    BPS_DENOMINATOR,
    DEFAULT_SLIPPAGE_BPS,
    FEE_DENOMINATOR,
    FEE_NUMERATOR,
    MAX_CUSTOM_SLIPPAGE_BPS,
    SLIPPAGE_WARN_HIGH_BPS,
    SLIPPAGE_WARN_LOW_BPS,
)

logger = structlog.get_logger()


@dataclass(frozen=True)
class AmmConfig:
    """Centralized configuration for pricing and slippage.

    Attributes:
        fee_numerator: Multiplier applied to swap inputs (default: 997)
        fee_denominator: Fee scale (default: 1000)
        default_slippage_bps: Tolerance used when none is given (default: 50)
        slippage_warn_low_bps: Non-zero tolerances below this are flagged
        slippage_warn_high_bps: Tolerances above this are flagged
        max_custom_slippage_bps: Largest tolerance a user may type in
    """

    fee_numerator: int = FEE_NUMERATOR
    fee_denominator: int = FEE_DENOMINATOR

    default_slippage_bps: int = DEFAULT_SLIPPAGE_BPS
    slippage_warn_low_bps: int = SLIPPAGE_WARN_LOW_BPS
    slippage_warn_high_bps: int = SLIPPAGE_WARN_HIGH_BPS
    max_custom_slippage_bps: int = MAX_CUSTOM_SLIPPAGE_BPS

    def __post_init__(self) -> None:
        if self.fee_denominator <= 0:
            raise ValueError(f"fee_denominator must be positive: {self.fee_denominator}")
        if not 0 < self.fee_numerator <= self.fee_denominator:
            raise ValueError(
                f"fee_numerator must be in (0, {self.fee_denominator}]: {self.fee_numerator}"
            )
        if not 0 <= self.default_slippage_bps <= BPS_DENOMINATOR:
            raise ValueError(f"default_slippage_bps out of range: {self.default_slippage_bps}")

    @property
    def fee_bps(self) -> int:
        """Trading fee in basis points (30 for 997/1000)."""
        fee = self.fee_denominator - self.fee_numerator
        return fee * BPS_DENOMINATOR // self.fee_denominator

    @classmethod
    def from_env(cls) -> AmmConfig:
        """Build a config from environment variables.

        - SWAPCORE_FEE_NUMERATOR
        - SWAPCORE_FEE_DENOMINATOR
        - SWAPCORE_DEFAULT_SLIPPAGE_BPS

        Unset or unparsable values fall back to the defaults.
        """
        return cls(
            fee_numerator=_env_int("SWAPCORE_FEE_NUMERATOR", FEE_NUMERATOR),
            fee_denominator=_env_int("SWAPCORE_FEE_DENOMINATOR", FEE_DENOMINATOR),
            default_slippage_bps=_env_int("SWAPCORE_DEFAULT_SLIPPAGE_BPS", DEFAULT_SLIPPAGE_BPS),
        )


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("config_parse_failed", variable=name, raw_value=raw, using_default=default)
        return default


# Default configuration instance
DEFAULT_AMM_CONFIG = AmmConfig()
