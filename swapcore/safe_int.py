"""Checked integer wrapper for raw token amounts.

Mirrors the arithmetic the pair contract performs on uint256 values:
- Division by zero raises DivisionByZero
- Subtraction below zero raises Underflow
- Results outside uint256 raise Uint256Overflow on to_uint256()

Usage pattern:
    from swapcore.safe_int import S

    def ratio(amount: int, reserve_a: int, reserve_b: int) -> int:
        return (S(amount) * S(reserve_b) // S(reserve_a)).value
"""

from __future__ import annotations

from swapcore.constants import UINT256_MAX


class SafeIntError(ArithmeticError):
    """Base class for checked arithmetic errors."""

    pass


class DivisionByZero(SafeIntError):
    """Division by zero."""

    pass


class Underflow(SafeIntError):
    """Subtraction would produce a negative amount."""

    pass


class Uint256Overflow(SafeIntError):
    """Value does not fit in a uint256."""

    pass


class SafeInt:
    """Integer with contract-style checked arithmetic.

    Only the operations the constant-product formulas need are provided.
    Every operation returns a new SafeInt; unwrap with ``.value``.
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        if isinstance(value, SafeInt):
            self._value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            self._value = value
        else:
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")

    @property
    def value(self) -> int:
        """The wrapped integer."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __add__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value + _unwrap(other))

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Subtract, raising Underflow on a negative result."""
        other_val = _unwrap(other)
        result = self._value - other_val
        if result < 0:
            raise Underflow(f"Underflow: {self._value} - {other_val} = {result}")
        return SafeInt(result)

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value * _unwrap(other))

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Truncating division, raising DivisionByZero on a zero divisor."""
        other_val = _unwrap(other)
        if other_val == 0:
            raise DivisionByZero(f"Division by zero: {self._value} // 0")
        return SafeInt(self._value // other_val)

    def to_uint256(self) -> int:
        """Return the value, validating uint256 bounds.

        Raises:
            Uint256Overflow: If value is negative or exceeds 2^256-1
        """
        if self._value < 0:
            raise Uint256Overflow(f"Negative value cannot be uint256: {self._value}")
        if self._value > UINT256_MAX:
            raise Uint256Overflow(f"Value exceeds uint256 max: {self._value}")
        return self._value


def _unwrap(x: SafeInt | int) -> int:
    if isinstance(x, SafeInt):
        return x._value
    return x


# Convenience alias for concise formulas
S = SafeInt
