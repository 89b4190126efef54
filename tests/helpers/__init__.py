"""Test helpers module for shared test utilities.

- constants: Token addresses used across tests
"""

from tests.helpers.constants import TOKEN_A, TOKEN_B, TOKEN_C, TOKEN_D, USDC, WETH

__all__ = ["TOKEN_A", "TOKEN_B", "TOKEN_C", "TOKEN_D", "USDC", "WETH"]
