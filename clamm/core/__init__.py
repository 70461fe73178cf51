"""
Core swap step API.

Public API:
- `step(params) -> StepResult`
- `step_or_raise(params) -> StepResult` (raises on rejection)
- `swap_exact_in(...)` / `swap_exact_out(...)` (raise on invalid input)
"""

from .engine import step, step_or_raise
from .kernel_spec import check_kernel_spec, load_kernel_spec, param_bounds
from .swap import swap_exact_in, swap_exact_out
from .types import StepResult, SwapMode, SwapStepParams
from ..kernels.python.swap_step_v1 import SwapStepResult

__all__ = [
    "step",
    "step_or_raise",
    "check_kernel_spec",
    "load_kernel_spec",
    "param_bounds",
    "swap_exact_in",
    "swap_exact_out",
    "StepResult",
    "SwapMode",
    "SwapStepParams",
    "SwapStepResult",
]
