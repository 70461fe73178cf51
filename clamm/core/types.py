"""Data types for the swap step engine.

All types are frozen dataclasses (immutable). Field names match the `params`
section of `clamm/kernels/dex/swap_step_v1.yaml`.

Units/conventions:
- `sqrt_price_*` are Q64.96 fixed-point square roots of token1/token0.
- `fee_pips` is parts per million of the input amount.
- `amount_remaining` is the input still to sell (EXACT_IN) or the output
  still to buy (EXACT_OUT).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique
from typing import Optional

from ..kernels.python.swap_step_v1 import SwapStepResult


@unique
class SwapMode(Enum):
    EXACT_IN = "exact_in"
    EXACT_OUT = "exact_out"


@dataclass(frozen=True)
class SwapStepParams:
    mode: SwapMode
    sqrt_price_current: int
    sqrt_price_target: int
    liquidity: int
    amount_remaining: int
    fee_pips: int

    @property
    def zero_for_one(self) -> bool:
        return self.sqrt_price_current >= self.sqrt_price_target


@dataclass(frozen=True)
class StepResult:
    """Outcome of ``step()``: accepted with a result, or rejected with a reason."""

    accepted: bool
    result: Optional[SwapStepResult] = None
    rejection: Optional[str] = None
