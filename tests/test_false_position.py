from __future__ import annotations

import math

import pytest

from rootfind import (
    Bracket,
    FunctionTolerance,
    MaxIterationsExceededError,
    NotABracketError,
    StepTolerance,
    bisection_result,
    false_position,
    false_position_illinois,
    false_position_illinois_result,
    false_position_result,
)
from rootfind.types import brackets_root

SOLVERS = [false_position_result, false_position_illinois_result]
SOLVER_IDS = ["plain", "illinois"]


@pytest.mark.parametrize("solve", SOLVERS, ids=SOLVER_IDS)
def test_finds_sqrt2(solve, sqrt2_fn):
    res = solve(sqrt2_fn, (0.0, 2.0), max_iterations=200)
    assert res.root == pytest.approx(math.sqrt(2.0), abs=1e-10)
    assert res.bracket is not None


@pytest.mark.parametrize("solve", SOLVERS, ids=SOLVER_IDS)
def test_sign_invariant_and_bracket_never_widens(solve, cubic_fn):
    seen: list[Bracket] = []

    def check(b: Bracket) -> None:
        assert brackets_root(cubic_fn.eval(b.lo), cubic_fn.eval(b.hi))
        if seen:
            assert seen[-1].lo <= b.lo and b.hi <= seen[-1].hi
        seen.append(b)

    solve(
        cubic_fn,
        (-1.0, 10.0),
        max_iterations=20_000,
        policy=FunctionTolerance(1e-3),
        callback=check,
    )
    assert seen


def test_illinois_beats_plain_false_position_on_convex_function(cubic_fn):
    policy = FunctionTolerance(1e-3)
    plain = false_position_result(cubic_fn, (-1.0, 10.0), 20_000, policy)
    illinois = false_position_illinois_result(cubic_fn, (-1.0, 10.0), 20_000, policy)

    assert abs(plain.f_at_root) <= 1e-3
    assert abs(illinois.f_at_root) <= 1e-3
    # plain regula falsi never moves the right endpoint
    assert plain.bracket is not None and plain.bracket.hi == 10.0
    assert illinois.iterations < plain.iterations
    assert illinois.iterations < 50


def test_illinois_is_faster_than_bisection(sqrt2_fn):
    policy = StepTolerance(1e-12)
    illinois = false_position_illinois_result(sqrt2_fn, (0.0, 2.0), policy=policy)
    bisect = bisection_result(sqrt2_fn, (0.0, 2.0), policy=policy)
    assert illinois.root == pytest.approx(math.sqrt(2.0), abs=1e-11)
    assert illinois.iterations < bisect.iterations


def test_plain_stalls_where_illinois_converges(cubic_fn):
    with pytest.raises(MaxIterationsExceededError):
        false_position(cubic_fn, (-1.0, 10.0), 100, FunctionTolerance(1e-3))
    assert abs(false_position_illinois(cubic_fn, (-1.0, 10.0), 100, FunctionTolerance(1e-3))) < 0.1


@pytest.mark.parametrize("solve", SOLVERS, ids=SOLVER_IDS)
def test_first_previous_point_is_hi(solve):
    calls = []

    def record(prev_x, cur_x, f_cur_x, iteration):
        calls.append(prev_x)
        return iteration == 2

    solve(lambda x: x * x - 0.3, (0.0, 1.0), policy=record)
    assert calls[0] == 1.0


@pytest.mark.parametrize("solve", SOLVERS, ids=SOLVER_IDS)
def test_not_a_bracket(solve, counting):
    f = counting(lambda x: x * x + 1.0)
    with pytest.raises(NotABracketError):
        solve(f, (-1.0, 1.0))
    assert f.calls == 2


@pytest.mark.parametrize("solve", SOLVERS, ids=SOLVER_IDS)
def test_exact_endpoint_root(solve):
    res = solve(lambda x: x - 2.0, (0.0, 2.0))
    assert (res.root, res.iterations) == (2.0, 0)


def test_linear_function_solved_in_one_step():
    res = false_position_illinois_result(lambda x: 2.0 * x - 1.0, (0.0, 4.0))
    assert res.root == 0.5
    assert res.iterations == 1


def test_infinite_endpoint_value_falls_back_to_midpoint():
    # f(hi) is inf, so the secant formula has no finite answer
    f = lambda x: math.inf if x > 3.0 else math.exp(x) - 2.0  # noqa: E731
    res = false_position_illinois_result(f, (0.0, 4.0))
    assert res.root == pytest.approx(math.log(2.0), abs=1e-10)
