"""
clamm: off-chain concentrated-liquidity AMM math.

Bit-exact integer reproductions of the on-chain tick, sqrt-price and swap step
math, for quoting and simulation.
"""

from .errors import ClammError, MathError

__all__ = [
    "ClammError",
    "MathError",
]
