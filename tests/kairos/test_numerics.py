from __future__ import annotations

from fractions import Fraction

import pytest

from kairos.errors import KairosInvariantError
from kairos.numerics import (
    MAX_SAFE_INTEGER,
    MIN_SAFE_INTEGER,
    clamp_index,
    euclid_div,
    euclid_divmod,
    euclid_mod,
    mul_div_round_half_even,
    round_half_even,
    to_safe_int,
)


def test_euclid_divmod_differs_from_truncation_for_negatives():
    assert euclid_divmod(-7, 3) == (-3, 2)
    # Truncating division would give -2 with remainder -1
    assert int(-7 / 3) == -2
    assert euclid_div(-1, 6) == -1
    assert euclid_mod(-1, 6) == 5
    assert euclid_mod(-42, 42) == 0


def test_euclid_remainder_always_in_range():
    for a in range(-50, 50):
        q, r = euclid_divmod(a, 7)
        assert 0 <= r < 7
        assert q * 7 + r == a


def test_euclid_rejects_non_positive_divisor():
    with pytest.raises(ValueError):
        euclid_div(5, 0)
    with pytest.raises(ValueError):
        euclid_mod(5, -3)


@pytest.mark.parametrize(
    "value, expected",
    [
        (Fraction(5, 2), 2),
        (Fraction(7, 2), 4),
        (Fraction(-5, 2), -2),
        (Fraction(-7, 2), -4),
        (Fraction(1, 2), 0),
        (Fraction(3, 2), 2),
        (Fraction(5, 3), 2),
        (Fraction(-5, 3), -2),
        (10, 10),
    ],
)
def test_round_half_even(value, expected):
    assert round_half_even(value) == expected


def test_mul_div_round_half_even_is_symmetric():
    assert mul_div_round_half_even(5, 1, 2) == 2
    assert mul_div_round_half_even(-5, 1, 2) == -2
    assert mul_div_round_half_even(5, -1, 2) == -2
    assert mul_div_round_half_even(7, 1, 2) == 4
    assert mul_div_round_half_even(-1, 1, 3) == 0
    with pytest.raises(ValueError):
        mul_div_round_half_even(1, 1, 0)


def test_clamp_index_tolerates_one_unit():
    assert clamp_index("step", 44, 0, 43) == 43
    assert clamp_index("step", -1, 0, 43) == 0
    assert clamp_index("step", 20, 0, 43) == 20


def test_clamp_index_raises_beyond_tolerance():
    with pytest.raises(KairosInvariantError) as exc:
        clamp_index("beat", 37, 0, 35)
    assert exc.value.name == "beat"
    assert exc.value.value == 37
    assert isinstance(exc.value, ArithmeticError)


def test_to_safe_int_saturates():
    assert to_safe_int(2**60) == MAX_SAFE_INTEGER
    assert to_safe_int(-(2**60)) == MIN_SAFE_INTEGER
    assert to_safe_int(MAX_SAFE_INTEGER) == MAX_SAFE_INTEGER
    assert to_safe_int(-12) == -12
