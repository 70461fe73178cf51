"""Liquidity delta arithmetic (LiquidityMath semantics)."""

from __future__ import annotations

from ...errors import MathError
from .evm import is_uint128


def add_delta(x: int, y: int) -> int:
    """
    Add a signed liquidity delta `y` to liquidity `x`.

    Raises MathError when the sum leaves uint128 (in either direction).
    """
    total = x + y
    if not is_uint128(total):
        raise MathError("sum overflows uint128")
    return total
