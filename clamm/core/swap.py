"""
Swap step helpers for quoting code.

Keyword-only wrappers over the v1 swap step kernel with input validation.
Use these when a failure should raise; use ``clamm.core.engine.step`` to get a
``StepResult`` instead.

Algorithm Design:
- Type: Fixed-Point Integer Arithmetic / Deterministic Rounding
- Time Complexity: O(1) per step (tick conversion is a fixed 20-bit loop)
- Invariant: the pool never receives less, nor pays out more, than the exact
  real-valued swap at the resulting price
"""

from __future__ import annotations

from ..kernels.python.swap_step_v1 import FEE_DENOMINATOR, SwapStepResult
from ..kernels.python.swap_step_v1 import compute_swap_step_buy as _kernel_swap_step_buy_v1
from ..kernels.python.swap_step_v1 import compute_swap_step_sell as _kernel_swap_step_sell_v1


def _require_int(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")


def _validate(sqrt_price_current: int, sqrt_price_target: int, liquidity: int, amount: int, fee_pips: int) -> None:
    for name, v in (
        ("sqrt_price_current", sqrt_price_current),
        ("sqrt_price_target", sqrt_price_target),
        ("liquidity", liquidity),
        ("amount", amount),
        ("fee_pips", fee_pips),
    ):
        _require_int(name, v)

    if sqrt_price_current <= 0 or sqrt_price_target <= 0:
        raise ValueError(f"sqrt prices must be positive: ({sqrt_price_current}, {sqrt_price_target})")
    if liquidity < 0:
        raise ValueError(f"liquidity must be non-negative: {liquidity}")
    if amount < 0:
        raise ValueError(f"amount must be non-negative: {amount}")
    if not (0 <= fee_pips < FEE_DENOMINATOR):
        raise ValueError(f"fee_pips must be in [0, {FEE_DENOMINATOR}): {fee_pips}")


def swap_exact_in(
    *,
    sqrt_price_current: int,
    sqrt_price_target: int,
    liquidity: int,
    amount_in: int,
    fee_pips: int,
) -> SwapStepResult:
    """
    Swap step for a known input amount (fee included in `amount_in`).

    Args:
        sqrt_price_current: Current Q64.96 sqrt price
        sqrt_price_target: Price at which the step must stop (range boundary or limit)
        liquidity: Active liquidity in the range
        amount_in: Gross input still to sell
        fee_pips: Pool fee in parts per million

    Returns:
        SwapStepResult with the resulting price, net input, output and fee

    Raises:
        TypeError / ValueError: on malformed inputs
        MathError: if a fixed-width bound is exceeded
    """
    _validate(sqrt_price_current, sqrt_price_target, liquidity, amount_in, fee_pips)
    return _kernel_swap_step_buy_v1(sqrt_price_current, sqrt_price_target, liquidity, amount_in, fee_pips)


def swap_exact_out(
    *,
    sqrt_price_current: int,
    sqrt_price_target: int,
    liquidity: int,
    amount_out: int,
    fee_pips: int,
) -> SwapStepResult:
    """Swap step for a requested output amount. Same conventions as `swap_exact_in`."""
    _validate(sqrt_price_current, sqrt_price_target, liquidity, amount_out, fee_pips)
    return _kernel_swap_step_sell_v1(sqrt_price_current, sqrt_price_target, liquidity, amount_out, fee_pips)
