# [TESTER] v1

from __future__ import annotations

import pytest

from clamm.core import swap_exact_in, swap_exact_out
from clamm.errors import MathError
from clamm.kernels.python.swap_step_v1 import compute_swap_step_sell

Q96 = 1 << 96
PRICE_UP = Q96 * 11 // 10


def _kwargs(**overrides) -> dict:
    kwargs = {
        "sqrt_price_current": Q96,
        "sqrt_price_target": PRICE_UP,
        "liquidity": 10**18,
        "fee_pips": 3000,
    }
    kwargs.update(overrides)
    return kwargs


def test_swap_exact_in_golden() -> None:
    r = swap_exact_in(amount_in=10**17, **_kwargs())
    assert (r.sqrt_price, r.quantity_sell, r.quantity_buy, r.quantity_fee) == (
        87127210316936492051620282184,
        99700000000000000,
        90661089388014913,
        300000000000000,
    )


def test_swap_exact_in_charges_the_whole_input() -> None:
    # Partial step: net input plus fee is exactly what was offered.
    r = swap_exact_in(amount_in=10**17, **_kwargs())
    assert r.quantity_sell + r.quantity_fee == 10**17


def test_swap_exact_out_matches_kernel() -> None:
    r = swap_exact_out(amount_out=10**16, **_kwargs())
    assert r == compute_swap_step_sell(Q96, PRICE_UP, 10**18, 10**16, 3000)
    assert r.quantity_buy == 10**16


def test_arguments_are_keyword_only() -> None:
    with pytest.raises(TypeError):
        swap_exact_in(Q96, PRICE_UP, 10**18, 10**17, 3000)  # type: ignore[misc]


@pytest.mark.parametrize(
    "field, value",
    [
        ("sqrt_price_current", 1.5),
        ("liquidity", True),
        ("fee_pips", "3000"),
    ],
)
def test_rejects_non_int(field: str, value: object) -> None:
    with pytest.raises(TypeError, match=field):
        swap_exact_in(amount_in=10**17, **_kwargs(**{field: value}))


@pytest.mark.parametrize(
    "overrides, amount",
    [
        ({"sqrt_price_current": 0}, 10**17),
        ({"sqrt_price_target": -1}, 10**17),
        ({"liquidity": -1}, 10**17),
        ({"fee_pips": 1_000_000}, 10**17),
        ({"fee_pips": -1}, 10**17),
        ({}, -1),
    ],
)
def test_rejects_out_of_range(overrides: dict, amount: int) -> None:
    with pytest.raises(ValueError):
        swap_exact_out(amount_out=amount, **_kwargs(**overrides))


def test_math_error_propagates() -> None:
    # Prices this far above uint160 push the token1 delta past uint256.
    with pytest.raises(MathError, match="quotient overflows uint256"):
        swap_exact_in(
            sqrt_price_current=1 << 250,
            sqrt_price_target=1 << 255,
            liquidity=1 << 128,
            amount_in=0,
            fee_pips=0,
        )
