"""
Tick <-> sqrt price conversion (TickMath semantics).

`sqrt_price_at_tick` evaluates `sqrt(1.0001) ** tick` in Q128 by binary
exponentiation over the 20 bits of `|tick|`, one precomputed factor per bit.
`tick_at_sqrt_price` inverts it through an integer log2 and picks the greatest
tick whose price does not exceed the input.
"""

from __future__ import annotations

from ...errors import MathError
from .evm import UINT256_MAX, uint160

TICK_MIN = -887272
TICK_MAX = 887272
SQRT_RATIO_MIN = 4295128739
SQRT_RATIO_MAX = 1461446703485210103287273052203988822378723970342

Q128 = 1 << 128

# Ratio for |tick| bit 0; otherwise the accumulator starts at Q128.
_TICK_RATIO_ODD = 0xFFFCB933BD6FAD37AA2D162D1A594001

# (bit, 1 / sqrt(1.0001) ** bit in Q128) for the remaining 19 bits.
_TICK_RATIO_FACTORS: tuple[tuple[int, int], ...] = (
    (0x2, 0xFFF97272373D413259A46990580E213A),
    (0x4, 0xFFF2E50F5F656932EF12357CF3C7FDCC),
    (0x8, 0xFFE5CACA7E10E4E61C3624EAA0941CD0),
    (0x10, 0xFFCB9843D60F6159C9DB58835C926644),
    (0x20, 0xFF973B41FA98C081472E6896DFB254C0),
    (0x40, 0xFF2EA16466C96A3843EC78B326B52861),
    (0x80, 0xFE5DEE046A99A2A811C461F1969C3053),
    (0x100, 0xFCBE86C7900A88AEDCFFC83B479AA3A4),
    (0x200, 0xF987A7253AC413176F2B074CF7815E54),
    (0x400, 0xF3392B0822B70005940C7A398E4B70F3),
    (0x800, 0xE7159475A2C29B7443B29C7FA6E889D9),
    (0x1000, 0xD097F3BDFD2022B8845AD8F792AA5825),
    (0x2000, 0xA9F746462D870FDF8A65DC1F90E061E5),
    (0x4000, 0x70D869A156D2A1B890BB3DF62BAF32F7),
    (0x8000, 0x31BE135F97D08FD981231505542FCFA6),
    (0x10000, 0x9AA508B5B7A84E1C677DE54F3E99BC9),
    (0x20000, 0x5D6AF8DEDB81196699C329225EE604),
    (0x40000, 0x2216E584F5FA1EA926041BEDFE98),
    (0x80000, 0x48A170391F7DC42444E8FA2),
)

# 1 / log2(sqrt(1.0001)) in Q64; turns a Q64.64 log2 into a Q128.128 tick.
_LOG_SQRT10001_MULTIPLIER = 255738958999603826347141
_TICK_LOW_ERROR = 3402992956809132418596140100660247210
_TICK_HIGH_ERROR = 291339464771989622907027621153398088495


def sqrt_price_at_tick(tick: int) -> int:
    """Return the Q64.96 sqrt price of `1.0001 ** tick`, rounded up."""
    if not isinstance(tick, int) or isinstance(tick, bool):
        raise TypeError("tick must be an int")
    if tick < TICK_MIN or tick > TICK_MAX:
        raise MathError("tick is outside the range")

    abs_tick = -tick if tick < 0 else tick

    ratio = _TICK_RATIO_ODD if abs_tick & 0x1 else Q128
    for bit, factor in _TICK_RATIO_FACTORS:
        if abs_tick & bit:
            ratio = (ratio * factor) >> 128

    if tick > 0:
        ratio = UINT256_MAX // ratio

    # Q128.128 -> Q64.96, rounding up so the result never undershoots.
    return uint160((ratio >> 32) + (0 if ratio % (1 << 32) == 0 else 1))


def _most_significant_bit(value: int) -> int:
    msb = 0
    r = value
    for shift in (7, 6, 5, 4, 3, 2, 1):
        f = (1 if r > (1 << (1 << shift)) - 1 else 0) << shift
        msb |= f
        r >>= f
    return msb | (1 if r > 0x1 else 0)


def tick_at_sqrt_price(sqrt_price: int) -> int:
    """
    Return the greatest tick `t` with `sqrt_price_at_tick(t) <= sqrt_price`.

    Raises MathError unless `SQRT_RATIO_MIN <= sqrt_price < SQRT_RATIO_MAX`.
    """
    if sqrt_price < SQRT_RATIO_MIN or sqrt_price >= SQRT_RATIO_MAX:
        raise MathError("sqrt ratio is outside the range")

    ratio = sqrt_price << 32

    msb = _most_significant_bit(ratio)
    r = ratio >> (msb - 127) if msb >= 128 else ratio << (127 - msb)

    log2 = (msb - 128) << 64

    # Square-and-shift: each round yields the next fractional bit of log2.
    for bit in range(63, 49, -1):
        r = (r * r) >> 127
        f = r >> 128
        log2 |= f << bit
        r >>= f

    log_sqrt10001 = log2 * _LOG_SQRT10001_MULTIPLIER

    tick_low = (log_sqrt10001 - _TICK_LOW_ERROR) >> 128
    tick_high = (log_sqrt10001 + _TICK_HIGH_ERROR) >> 128

    if tick_low == tick_high or sqrt_price_at_tick(tick_high) > sqrt_price:
        return tick_low
    return tick_high
