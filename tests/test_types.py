from __future__ import annotations

import math

import pytest

from rootfind import Bounds, Bracket, InvalidBoundsError, NotABracketError, RealFn
from rootfind.types import brackets_root, is_sign_change


def test_bounds_helpers():
    b = Bounds(-1.0, 3.0)
    assert b.width == 4.0
    assert b.middle() == 1.0
    assert b.contains(-1.0) and b.contains(3.0) and b.contains(0.5)
    assert not b.contains(3.0000001)


@pytest.mark.parametrize(
    "lo,hi",
    [(1.0, 1.0), (2.0, 1.0), (math.nan, 1.0), (0.0, math.inf), (-math.inf, 0.0)],
    ids=["equal", "reversed", "nan", "inf_hi", "inf_lo"],
)
def test_bounds_rejects_invalid(lo: float, hi: float):
    with pytest.raises(InvalidBoundsError):
        Bounds(lo, hi)


def test_invalid_bounds_is_a_value_error():
    with pytest.raises(ValueError):
        Bounds(1.0, 0.0)


def test_bracket_allows_degenerate_but_not_reversed():
    b = Bracket(2.0, 2.0)
    assert b.is_degenerate
    assert b.width == 0.0
    with pytest.raises(NotABracketError):
        Bracket(2.0, 1.0)


def test_bracket_from_evaluator_checks_sign_invariant():
    f = RealFn(lambda x: x - 1.0)
    b = Bracket.from_evaluator(f, 0.0, 2.0)
    assert b.as_tuple() == (0.0, 2.0)
    assert b.contains(1.0)
    assert b.middle() == 1.0

    # an exact zero at an endpoint satisfies f(lo) * f(hi) <= 0
    assert Bracket.from_evaluator(f, 1.0, 2.0).lo == 1.0

    with pytest.raises(NotABracketError):
        Bracket.from_evaluator(f, 2.0, 3.0)


@pytest.mark.parametrize(
    "a,b,expected",
    [
        (1.0, -1.0, True),
        (-1.0, 1.0, True),
        (1e-200, -1e-200, True),
        (1.0, 2.0, False),
        (-1.0, -2.0, False),
        (0.0, 1.0, False),
        (math.nan, 1.0, False),
    ],
    ids=["pos_neg", "neg_pos", "underflow", "both_pos", "both_neg", "zero", "nan"],
)
def test_is_sign_change(a: float, b: float, expected: bool):
    assert is_sign_change(a, b) is expected


def test_brackets_root_accepts_exact_zeros():
    assert brackets_root(0.0, 5.0)
    assert brackets_root(-5.0, 0.0)
    assert not brackets_root(5.0, 5.0)
