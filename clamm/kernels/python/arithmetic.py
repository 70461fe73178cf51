"""
Checked uint256 arithmetic (LowGasSafeMath / FullMath / UnsafeMath semantics).

Intermediate products are exact Python ints, so `mul_div_*` never overflows
before the division; only the final quotient is range-checked.
"""

from __future__ import annotations

from ...errors import MathError
from .evm import is_uint256


def checked_add(x: int, y: int) -> int:
    total = x + y
    if not is_uint256(total):
        raise MathError("sum overflows uint256")
    return total


def checked_sub(x: int, y: int) -> int:
    difference = x - y
    if not is_uint256(difference):
        raise MathError("difference underflows uint256")
    return difference


def checked_mul(x: int, y: int) -> int:
    product = x * y
    if not is_uint256(product):
        raise MathError("product overflows uint256")
    return product


def mul_div_floor(x: int, y: int, z: int) -> int:
    """
    Return `floor(x * y / z)`, rejecting a zero divisor and a quotient above uint256.

    Operands are unsigned. A negative product floors below zero and is rejected
    as out of range rather than truncated towards zero.
    """
    if not z:
        raise MathError("division by zero")
    quotient = (x * y) // z
    if not is_uint256(quotient):
        raise MathError("quotient overflows uint256")
    return quotient


def mul_div_ceil(x: int, y: int, z: int) -> int:
    """Return `ceil(x * y / z)`; the overflow check applies to the floor quotient."""
    if not z:
        raise MathError("division by zero")
    product = x * y
    quotient = product // z
    if not is_uint256(quotient):
        raise MathError("quotient overflows uint256")
    return quotient + (1 if product % z else 0)


def unsafe_div_ceil(x: int, y: int) -> int:
    """
    Return `ceil(x / y)` without any domain check.

    A zero divisor yields 0 instead of raising, as the on-chain `UnsafeMath`
    division does.
    """
    if not y:
        return 0
    return x // y + (1 if x % y else 0)
