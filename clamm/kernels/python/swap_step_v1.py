"""
Concentrated-liquidity swap step kernel (v1 semantics).

This implements the semantics described in `clamm/kernels/dex/swap_step_v1.yaml`
(SwapMath semantics):
- One step moves the price from `sqrt_price_current` towards `sqrt_price_target`
  within a single liquidity range, stopping early if the remaining amount runs out.
- Direction is derived, never passed: `zero_for_one = current >= target`.
- Fees are in pips (1/1_000_000) and charged on the input token.
- Amounts the pool receives round up, amounts it pays round down.

"buy" is the exact-input step (caller supplies what it sells and buys as much as
possible); "sell" is the exact-output step (caller names what it buys).
"""

from __future__ import annotations

from dataclasses import dataclass

from .arithmetic import mul_div_ceil, mul_div_floor
from .sqrt_price import (
    amount0_delta,
    amount1_delta,
    next_sqrt_price_from_input,
    next_sqrt_price_from_output,
)

FEE_DENOMINATOR = 1_000_000


@dataclass(frozen=True)
class SwapStepResult:
    sqrt_price: int
    quantity_sell: int
    quantity_buy: int
    quantity_fee: int


def compute_swap_step_buy(
    sqrt_price_current: int,
    sqrt_price_target: int,
    liquidity: int,
    quantity_sell_remaining: int,
    fee: int,
) -> SwapStepResult:
    """
    Exact-input swap step.

    `quantity_sell_remaining` is the gross amount still to sell, fee included.
    When the target is reached (`max`), the fee is derived from the net sold
    amount; otherwise the whole remainder is consumed and the fee is what is
    left over after the net amount.
    """
    zero_for_one = sqrt_price_current >= sqrt_price_target

    remaining_less_fee = mul_div_floor(quantity_sell_remaining, FEE_DENOMINATOR - fee, FEE_DENOMINATOR)

    if zero_for_one:
        quantity_sell = amount0_delta(sqrt_price_target, sqrt_price_current, liquidity, True)
    else:
        quantity_sell = amount1_delta(sqrt_price_current, sqrt_price_target, liquidity, True)

    if remaining_less_fee >= quantity_sell:
        sqrt_price = sqrt_price_target
        max_reached = True
    else:
        sqrt_price = next_sqrt_price_from_input(sqrt_price_current, liquidity, remaining_less_fee, zero_for_one)
        max_reached = False

    if zero_for_one:
        if not max_reached:
            quantity_sell = amount0_delta(sqrt_price, sqrt_price_current, liquidity, True)
        quantity_buy = amount1_delta(sqrt_price, sqrt_price_current, liquidity, False)
    else:
        if not max_reached:
            quantity_sell = amount1_delta(sqrt_price_current, sqrt_price, liquidity, True)
        quantity_buy = amount0_delta(sqrt_price_current, sqrt_price, liquidity, False)

    if max_reached:
        quantity_fee = mul_div_ceil(quantity_sell, fee, FEE_DENOMINATOR - fee)
    else:
        quantity_fee = quantity_sell_remaining - quantity_sell

    return SwapStepResult(
        sqrt_price=sqrt_price,
        quantity_sell=quantity_sell,
        quantity_buy=quantity_buy,
        quantity_fee=quantity_fee,
    )


def compute_swap_step_sell(
    sqrt_price_current: int,
    sqrt_price_target: int,
    liquidity: int,
    quantity_buy_remaining: int,
    fee: int,
) -> SwapStepResult:
    """Exact-output swap step; `quantity_buy` is capped at `quantity_buy_remaining`."""
    zero_for_one = sqrt_price_current >= sqrt_price_target

    if zero_for_one:
        quantity_buy = amount1_delta(sqrt_price_target, sqrt_price_current, liquidity, False)
    else:
        quantity_buy = amount0_delta(sqrt_price_current, sqrt_price_target, liquidity, False)

    if quantity_buy_remaining >= quantity_buy:
        sqrt_price = sqrt_price_target
        max_reached = True
    else:
        sqrt_price = next_sqrt_price_from_output(sqrt_price_current, liquidity, quantity_buy_remaining, zero_for_one)
        max_reached = False

    if zero_for_one:
        quantity_sell = amount0_delta(sqrt_price, sqrt_price_current, liquidity, True)
        if not max_reached:
            quantity_buy = amount1_delta(sqrt_price, sqrt_price_current, liquidity, False)
    else:
        quantity_sell = amount1_delta(sqrt_price_current, sqrt_price, liquidity, True)
        if not max_reached:
            quantity_buy = amount0_delta(sqrt_price_current, sqrt_price, liquidity, False)

    # Output can round above the request; never pay out more than asked for.
    quantity_buy = min(quantity_buy, quantity_buy_remaining)

    quantity_fee = mul_div_ceil(quantity_sell, fee, FEE_DENOMINATOR - fee)

    return SwapStepResult(
        sqrt_price=sqrt_price,
        quantity_sell=quantity_sell,
        quantity_buy=quantity_buy,
        quantity_fee=quantity_fee,
    )
