"""
Fixed-width integer domains of the EVM.

Values are plain Python ints. Each domain is an immutable descriptor that knows
its bounds and offers two ways in:
- ``cast()`` is checked and returns the value unchanged or raises ``MathError``,
- ``wrap()`` truncates modulo ``2**bits`` (two's complement), unsigned only.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...errors import MathError


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class IntDomain:
    bits: int
    signed: bool

    @property
    def name(self) -> str:
        return f"{'int' if self.signed else 'uint'}{self.bits}"

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    @property
    def mask(self) -> int:
        return (1 << self.bits) - 1

    def contains(self, value: object) -> bool:
        return _is_int(value) and self.min_value <= value <= self.max_value

    def cast(self, value: int) -> int:
        if not self.contains(value):
            raise MathError(f"result overflows or underflows {self.name}")
        return value

    def wrap(self, value: int) -> int:
        if self.signed:
            raise TypeError(f"wraparound cast is only defined for unsigned domains, got {self.name}")
        return value & self.mask


UINT128 = IntDomain(bits=128, signed=False)
UINT160 = IntDomain(bits=160, signed=False)
UINT256 = IntDomain(bits=256, signed=False)
INT128 = IntDomain(bits=128, signed=True)
INT160 = IntDomain(bits=160, signed=True)
INT256 = IntDomain(bits=256, signed=True)

UINT128_MIN = UINT128.min_value
UINT128_MAX = UINT128.max_value
UINT160_MIN = UINT160.min_value
UINT160_MAX = UINT160.max_value
UINT256_MIN = UINT256.min_value
UINT256_MAX = UINT256.max_value

INT128_MIN = INT128.min_value
INT128_MAX = INT128.max_value
INT160_MIN = INT160.min_value
INT160_MAX = INT160.max_value
INT256_MIN = INT256.min_value
INT256_MAX = INT256.max_value


def is_uint128(value: object) -> bool:
    return UINT128.contains(value)


def is_uint160(value: object) -> bool:
    return UINT160.contains(value)


def is_uint256(value: object) -> bool:
    return UINT256.contains(value)


def is_int128(value: object) -> bool:
    return INT128.contains(value)


def is_int160(value: object) -> bool:
    return INT160.contains(value)


def is_int256(value: object) -> bool:
    return INT256.contains(value)


def uint128(value: int) -> int:
    """Wraparound cast to uint128."""
    return UINT128.wrap(value)


def uint160(value: int) -> int:
    """Wraparound cast to uint160."""
    return UINT160.wrap(value)


def uint256(value: int) -> int:
    """Wraparound cast to uint256."""
    return UINT256.wrap(value)
