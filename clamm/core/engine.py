"""Dispatch-table engine for the swap step.

``step(params)`` is the single entry point. It:

1. Checks the kernel spec is in sync with the Python kernels.
2. Validates parameter domains (from the YAML param bounds).
3. Dispatches to the kernel for the swap mode.
4. Returns a ``StepResult`` (accepted, or rejected with a reason).

Arithmetic failures inside a kernel become ``math:<message>`` rejections, so
``step()`` never raises for bad inputs. ``step_or_raise()`` is for callers
that prefer exceptions.
"""

from __future__ import annotations

from typing import Callable

from loguru import logger

from ..errors import MathError
from ..kernels.python.swap_step_v1 import SwapStepResult, compute_swap_step_buy, compute_swap_step_sell
from .kernel_spec import check_kernel_spec, param_bounds
from .types import StepResult, SwapMode, SwapStepParams

KernelFn = Callable[[int, int, int, int, int], SwapStepResult]

_DISPATCH: dict[SwapMode, KernelFn] = {
    SwapMode.EXACT_IN: compute_swap_step_buy,
    SwapMode.EXACT_OUT: compute_swap_step_sell,
}


def _ensure_spec_in_sync() -> None:
    mismatches = check_kernel_spec()
    if mismatches:
        raise RuntimeError(f"swap step kernel spec mismatch: {', '.join(mismatches)}")


def _validate_params(params: SwapStepParams) -> str | None:
    """Check parameter domain bounds. Returns rejection reason or None."""
    for field, (lo, hi) in param_bounds().items():
        val = getattr(params, field)
        if not isinstance(val, int) or isinstance(val, bool) or val < lo or val > hi:
            return f"param_domain:{field}"
    return None


def _reject(params: SwapStepParams, reason: str) -> StepResult:
    logger.debug(f"Swap step rejected ({reason}): {params}")
    return StepResult(accepted=False, rejection=reason)


def step(params: SwapStepParams) -> StepResult:
    """Compute one swap step.

    Returns ``StepResult`` with ``accepted=True`` and the kernel result on
    success, or ``accepted=False`` with a ``rejection`` reason string.
    """
    _ensure_spec_in_sync()

    kernel = _DISPATCH.get(params.mode) if isinstance(params.mode, SwapMode) else None
    if kernel is None:
        return _reject(params, f"unknown_mode:{params.mode}")

    domain_err = _validate_params(params)
    if domain_err is not None:
        return _reject(params, domain_err)

    try:
        result = kernel(
            params.sqrt_price_current,
            params.sqrt_price_target,
            params.liquidity,
            params.amount_remaining,
            params.fee_pips,
        )
    except MathError as exc:
        return _reject(params, f"math:{exc}")

    return StepResult(accepted=True, result=result)


def step_or_raise(params: SwapStepParams) -> StepResult:
    """Like ``step()`` but raises ``MathError`` on rejection instead of returning a result."""
    result = step(params)
    if result.accepted:
        return result
    raise MathError(result.rejection or "rejected")
