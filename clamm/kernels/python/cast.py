"""Checked narrowing casts (SafeCast semantics): the value passes through unchanged or the call fails."""

from __future__ import annotations

from .evm import INT128, INT256, UINT128, UINT160


def to_uint128(x: int) -> int:
    return UINT128.cast(x)


def to_uint160(x: int) -> int:
    return UINT160.cast(x)


def to_int128(x: int) -> int:
    return INT128.cast(x)


def to_int256(x: int) -> int:
    return INT256.cast(x)
