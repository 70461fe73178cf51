# [TESTER] v1

from __future__ import annotations

import pytest

from clamm.errors import MathError
from clamm.kernels.python.cast import to_int128, to_int256, to_uint128, to_uint160
from clamm.kernels.python.evm import (
    INT128,
    INT128_MAX,
    INT128_MIN,
    INT160_MAX,
    INT160_MIN,
    INT256_MAX,
    INT256_MIN,
    UINT128_MAX,
    UINT160_MAX,
    UINT256_MAX,
    is_int128,
    is_int160,
    is_int256,
    is_uint128,
    is_uint160,
    is_uint256,
    uint128,
    uint160,
    uint256,
)


class TestDomainBounds:
    def test_unsigned_bounds(self):
        assert UINT128_MAX == 2**128 - 1
        assert UINT160_MAX == 2**160 - 1
        assert UINT256_MAX == 2**256 - 1

    def test_signed_bounds(self):
        assert (INT128_MIN, INT128_MAX) == (-(2**127), 2**127 - 1)
        assert (INT160_MIN, INT160_MAX) == (-(2**159), 2**159 - 1)
        assert (INT256_MIN, INT256_MAX) == (-(2**255), 2**255 - 1)

    def test_domain_name(self):
        assert INT128.name == "int128"


class TestPredicates:
    @pytest.mark.parametrize(
        "predicate, lo, hi",
        [
            (is_uint128, 0, UINT128_MAX),
            (is_uint160, 0, UINT160_MAX),
            (is_uint256, 0, UINT256_MAX),
            (is_int128, INT128_MIN, INT128_MAX),
            (is_int160, INT160_MIN, INT160_MAX),
            (is_int256, INT256_MIN, INT256_MAX),
        ],
    )
    def test_inclusive_bounds(self, predicate, lo, hi):
        assert predicate(lo)
        assert predicate(hi)
        assert not predicate(lo - 1)
        assert not predicate(hi + 1)

    def test_non_integers_are_rejected(self):
        for value in (1.0, "1", None, True, False):
            assert not is_uint256(value)
            assert not is_int256(value)


class TestCasts:
    def test_in_range_values_pass_through(self):
        assert to_uint128(UINT128_MAX) == UINT128_MAX
        assert to_uint160(0) == 0
        assert to_int128(INT128_MIN) == INT128_MIN
        assert to_int256(INT256_MAX) == INT256_MAX

    @pytest.mark.parametrize(
        "cast, value, domain",
        [
            (to_uint128, UINT128_MAX + 1, "uint128"),
            (to_uint128, -1, "uint128"),
            (to_uint160, UINT160_MAX + 1, "uint160"),
            (to_int128, INT128_MAX + 1, "int128"),
            (to_int128, INT128_MIN - 1, "int128"),
            (to_int256, INT256_MIN - 1, "int256"),
        ],
    )
    def test_out_of_range_names_domain(self, cast, value, domain):
        with pytest.raises(MathError, match=f"result overflows or underflows {domain}"):
            cast(value)


class TestWraparound:
    def test_truncates_high_bits(self):
        assert uint128(UINT128_MAX + 5) == 4
        assert uint160(1 << 160) == 0
        assert uint256((1 << 256) + 7) == 7

    def test_negative_is_twos_complement(self):
        assert uint128(-1) == UINT128_MAX
        assert uint256(-2) == UINT256_MAX - 1

    def test_signed_domain_has_no_wraparound(self):
        with pytest.raises(TypeError):
            INT128.wrap(1)
