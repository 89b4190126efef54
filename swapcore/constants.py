"""Protocol constants for the constant-product exchange.

Values mirror the deployed pair and router contracts.
"""

# Fee applied to swap inputs: amount_in * 997 / 1000 (0.3%)
FEE_NUMERATOR = 997
FEE_DENOMINATOR = 1000

# Basis point denominator (10_000 bps = 100%)
BPS_DENOMINATOR = 10_000

# Default slippage tolerance (50 bps = 0.5%)
DEFAULT_SLIPPAGE_BPS = 50

# Slippage warning thresholds for user-entered tolerances
SLIPPAGE_WARN_LOW_BPS = 10  # below 0.1% the transaction may revert
SLIPPAGE_WARN_HIGH_BPS = 500  # above 5% the trade may be front-run
MAX_CUSTOM_SLIPPAGE_BPS = 1_000  # custom entries are capped at 10%

# LP share precision: shares are expressed in parts per million
SHARE_PRECISION = 1_000_000

# Maximum uint256 value (approval amount and overflow bound)
UINT256_MAX = 2**256 - 1
