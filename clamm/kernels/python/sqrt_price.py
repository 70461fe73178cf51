"""
Sqrt-price delta math (SqrtPriceMath semantics).

Prices are Q64.96 fixed-point square roots (`sqrt(price) * 2**96`).

Rounding is part of the contract:
- amounts the pool *receives* are rounded up (`ceil=True`),
- amounts the pool *pays out* are rounded down,
- next prices are rounded so the pool never gives away more than it was paid for.
"""

from __future__ import annotations

from ...errors import MathError
from .arithmetic import checked_add, mul_div_ceil, mul_div_floor, unsafe_div_ceil
from .cast import to_uint160
from .evm import is_uint160, uint160, uint256

RESOLUTION = 96
Q96 = 1 << RESOLUTION


def _require_positive(sqrt_price: int, liquidity: int) -> None:
    if sqrt_price <= 0:
        raise MathError("sqrt price must be positive")
    if liquidity <= 0:
        raise MathError("liquidity must be positive")


def amount0_delta(sqrt_price_a: int, sqrt_price_b: int, liquidity: int, ceil: bool) -> int:
    """
    Token0 amount between two sqrt prices at a liquidity level.

        amount0 = L * 2**96 * (b - a) / b / a

    The two divisions are staged so that each intermediate stays within uint256.
    """
    if sqrt_price_a > sqrt_price_b:
        sqrt_price_a, sqrt_price_b = sqrt_price_b, sqrt_price_a

    if not sqrt_price_a or not sqrt_price_b:
        raise MathError("sqrt prices cannot be zero")

    numerator1 = liquidity << RESOLUTION
    numerator2 = sqrt_price_b - sqrt_price_a

    if ceil:
        return unsafe_div_ceil(mul_div_ceil(numerator1, numerator2, sqrt_price_b), sqrt_price_a)
    return mul_div_floor(numerator1, numerator2, sqrt_price_b) // sqrt_price_a


def amount1_delta(sqrt_price_a: int, sqrt_price_b: int, liquidity: int, ceil: bool) -> int:
    """Token1 amount between two sqrt prices: `L * (b - a) / 2**96`."""
    if sqrt_price_a > sqrt_price_b:
        sqrt_price_a, sqrt_price_b = sqrt_price_b, sqrt_price_a

    if ceil:
        return mul_div_ceil(liquidity, sqrt_price_b - sqrt_price_a, Q96)
    return mul_div_floor(liquidity, sqrt_price_b - sqrt_price_a, Q96)


def next_sqrt_price_from_input(sqrt_price: int, liquidity: int, amount: int, zero_for_one: bool) -> int:
    """Sqrt price after adding `amount` of the sold token to the pool."""
    _require_positive(sqrt_price, liquidity)

    if zero_for_one:
        if amount == 0:
            return sqrt_price

        numerator1 = liquidity << RESOLUTION
        product = uint256(amount * sqrt_price)

        # Precise form L * P / (L + x * P) while x * P fits 256 bits.
        if product // amount == sqrt_price:
            denominator = uint256(numerator1 + product)
            if denominator >= numerator1:
                return uint160(mul_div_ceil(numerator1, sqrt_price, denominator))

        # Equivalent L / (L / P + x), never overflows.
        return uint160(unsafe_div_ceil(numerator1, checked_add(numerator1 // sqrt_price, amount)))

    if is_uint160(amount):
        quotient = uint256((amount << RESOLUTION) // liquidity)
    else:
        quotient = uint256(mul_div_floor(amount, Q96, liquidity))

    return to_uint160(checked_add(sqrt_price, quotient))


def next_sqrt_price_from_output(sqrt_price: int, liquidity: int, amount: int, zero_for_one: bool) -> int:
    """Sqrt price after removing `amount` of the bought token from the pool."""
    _require_positive(sqrt_price, liquidity)

    if zero_for_one:
        if is_uint160(amount):
            quotient = uint256(unsafe_div_ceil(amount << RESOLUTION, liquidity))
        else:
            quotient = uint256(mul_div_ceil(amount, Q96, liquidity))

        if sqrt_price <= quotient:
            raise MathError("quotient exceeds sqrt price")

        return uint160(sqrt_price - quotient)

    if amount == 0:
        return sqrt_price

    numerator1 = liquidity << RESOLUTION
    product = uint256(amount * sqrt_price)

    if product // amount != sqrt_price or numerator1 <= product:
        raise MathError("product overflows uint256")

    denominator = numerator1 - product
    return to_uint160(mul_div_ceil(numerator1, sqrt_price, denominator))
