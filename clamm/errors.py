"""Exception types for the clamm math engine.

Kernels raise ``MathError``; ``clamm.core.engine.step()`` converts it into a
``StepResult`` rejection for callers that prefer result inspection.
"""

from __future__ import annotations


class ClammError(Exception):
    """Generic library error."""

    code = "CLAMM_ERR"


class MathError(ClammError):
    """Raised on overflow, underflow, division by zero or an out-of-domain cast."""

    code = "CLAMM_ERR_MATH"
