from __future__ import annotations

import math

import numpy as np
import pytest

from rootfind import (
    Bounds,
    BracketGenerator,
    InvalidWindowError,
    NotABracketError,
    expand_bracket,
    first_bracket,
)
from rootfind.bracket import window_boundaries
from rootfind.types import brackets_root


def test_sin_yields_three_brackets(sin_fn):
    brackets = list(BracketGenerator(sin_fn, Bounds(-0.1, 6.3), 0.1))
    assert len(brackets) == 3

    targets = [0.0, math.pi, 2.0 * math.pi]
    for bracket, root in zip(brackets, targets):
        assert bracket.lo <= root + 1e-12 and root - 1e-12 <= bracket.hi
        assert bracket.width <= 0.1 + 1e-12
        assert brackets_root(sin_fn.eval(bracket.lo), sin_fn.eval(bracket.hi))


def test_brackets_are_ordered_and_in_bounds(sin_fn):
    bounds = Bounds(-10.0, 10.0)
    brackets = list(BracketGenerator(sin_fn, bounds, 0.3))
    assert len(brackets) == 7
    for left, right in zip(brackets, brackets[1:]):
        assert left.hi <= right.lo
    assert all(bounds.contains(b.lo) and bounds.contains(b.hi) for b in brackets)


def test_generator_is_restartable(sin_fn):
    gen = BracketGenerator(sin_fn, Bounds(-0.1, 6.3), 0.1)
    assert list(gen) == list(gen)


def test_exact_zero_on_boundary_is_emitted_once():
    # boundaries 0, 0.5, 1.0, 1.5, 2.0; f(1.0) == 0 exactly
    brackets = list(BracketGenerator(lambda x: x - 1.0, Bounds(0.0, 2.0), 0.5))
    assert [b.as_tuple() for b in brackets] == [(1.0, 1.0)]
    assert brackets[0].is_degenerate


def test_exact_zero_on_lower_bound():
    brackets = list(BracketGenerator(lambda x: x, Bounds(0.0, 1.0), 0.25))
    assert [b.as_tuple() for b in brackets] == [(0.0, 0.0)]


def test_touching_root_is_not_detected():
    gen = BracketGenerator(lambda x: x * x, Bounds(-1.0, 1.0), 0.3)
    assert list(gen) == []
    assert first_bracket(lambda x: x * x, Bounds(-1.0, 1.0), 0.3) is None


def test_two_roots_in_one_window_are_missed():
    # roots at 0.4 and 0.6 share the window [0, 1]
    f = lambda x: (x - 0.4) * (x - 0.6)  # noqa: E731
    assert list(BracketGenerator(f, Bounds(0.0, 2.0), 1.0)) == []


@pytest.mark.parametrize(
    "window",
    [0.0, -0.1, math.nan, math.inf, 2.5],
    ids=["zero", "negative", "nan", "inf", "wider_than_bounds"],
)
def test_invalid_window_raises_on_construction(window: float, counting):
    f = counting(math.sin)
    with pytest.raises(InvalidWindowError):
        BracketGenerator(f, Bounds(0.0, 2.0), window)
    assert f.calls == 0


def test_window_equal_to_bounds_is_allowed():
    brackets = list(BracketGenerator(lambda x: x - 0.3, Bounds(0.0, 1.0), 1.0))
    assert [b.as_tuple() for b in brackets] == [(0.0, 1.0)]


def test_window_boundaries_clip_last_window():
    grid = window_boundaries(Bounds(0.0, 1.0), 0.3)
    np.testing.assert_allclose(grid, [0.0, 0.3, 0.6, 0.9, 1.0])
    assert grid[-1] == 1.0
    assert np.all(np.diff(grid) > 0.0)


def test_lazy_evaluation(counting):
    f = counting(math.sin)
    gen = BracketGenerator(f, Bounds(-0.1, 6.3), 0.1)
    assert f.calls == 0

    first = next(iter(gen))
    assert first.contains(0.0)
    assert f.calls == 2


def test_first_bracket(sin_fn):
    b = first_bracket(sin_fn, Bounds(1.0, 6.0), 0.5)
    assert b is not None and b.contains(math.pi)


def test_repr_mentions_bounds(sin_fn):
    assert "window_size=0.1" in repr(BracketGenerator(sin_fn, Bounds(0.0, 1.0), 0.1))


def test_expand_bracket_grows_hi():
    b = expand_bracket(lambda x: x - 7.0, 0.0, 1.0, hi_max=100.0)
    assert b.lo == 0.0
    assert b.hi == 8.0


def test_expand_bracket_gives_up():
    with pytest.raises(NotABracketError) as excinfo:
        expand_bracket(lambda x: x + 1.0, 0.0, 1.0, hi_max=50.0)
    assert excinfo.value.x == 50.0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"lo": 1.0, "hi": 1.0},
        {"lo": -2.0, "hi": -1.0},
        {"lo": 0.0, "hi": 1.0, "grow": 1.0},
    ],
    ids=["empty", "non_positive_hi", "no_growth"],
)
def test_expand_bracket_rejects_bad_arguments(kwargs):
    with pytest.raises(ValueError):
        expand_bracket(lambda x: x, **kwargs)


def test_first_bracket_on_huge_domain_is_found_lazily(counting):
    # 1e12 windows; only the first two boundaries are ever evaluated
    f = counting(lambda x: x - 5e-4)
    gen = BracketGenerator(f, Bounds(0.0, 1e9), 1e-3)

    first = next(iter(gen))
    assert first.as_tuple() == (0.0, 1e-3)
    assert f.calls == 2

    b = first_bracket(lambda x: x - 5e-4, Bounds(0.0, 1e9), 1e-3)
    assert b is not None and b.contains(5e-4)


def test_generator_walks_the_window_grid(sin_fn):
    bounds = Bounds(-10.0, 10.0)
    grid = window_boundaries(bounds, 0.3)
    brackets = list(BracketGenerator(sin_fn, bounds, 0.3))
    edges = set(grid.tolist())
    assert all(b.lo in edges and b.hi in edges for b in brackets)
