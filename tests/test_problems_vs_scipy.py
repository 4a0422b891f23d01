"""Cross-checks of every method against scipy.optimize.brentq on published problems."""

from __future__ import annotations

import math

import pytest
from scipy.optimize import brentq

from rootfind import (
    StepTolerance,
    bisection_result,
    false_position_illinois_result,
    halley_naive_result,
    newton_raphson_naive_result,
)
from rootfind.diagnostics import (
    RootProblem,
    all_problems,
    costabile06_problems,
    misc_problems,
)


def _cases(problems: list[RootProblem]):
    out = []
    for p in problems:
        for i in range(len(p.roots)):
            out.append(pytest.param(p, i, id=f"{p.name} [{i}]"))
    return out


def _brentq(p: RootProblem, i: int) -> float:
    b = p.brackets[i]
    return float(brentq(p.f, b.lo, b.hi, xtol=1e-15, maxiter=500))


# Problems on which the unguarded derivative methods behave from the listed guess
_WELL_BEHAVED = {
    "Costabile06 Example One",
    "Costabile06 Example Sixteen",
    "Costabile06 Example Seventeen",
    "Costabile06 Example Eighteen",
    "Costabile06 Examples Nineteen to Twenty One",
    "Wikipedia NR Parabola",
    "Wikipedia NR Trigonometry",
    "Wikipedia Bisection Cubic",
    "Newton's Secant Example",
}


def _well_behaved() -> list[RootProblem]:
    return [p for p in costabile06_problems() + misc_problems() if p.name in _WELL_BEHAVED]


def test_catalogue_is_consistent():
    problems = all_problems()
    assert len({p.name for p in problems}) == len(problems)
    for p in problems:
        for root, guess, bracket in p.cases():
            assert math.isfinite(guess)
            assert bracket.lo < bracket.hi
            assert bracket.contains(root)


@pytest.mark.parametrize("problem,i", _cases(all_problems()))
def test_brackets_hold_the_published_root(problem: RootProblem, i: int):
    ref = _brentq(problem, i)
    assert ref == pytest.approx(problem.roots[i], rel=1e-6, abs=1e-9)


@pytest.mark.parametrize("problem,i", _cases(all_problems()))
def test_bisection_matches_brentq(problem: RootProblem, i: int):
    res = bisection_result(problem.evaluator, problem.brackets[i], policy=StepTolerance(1e-12))
    assert res.root == pytest.approx(_brentq(problem, i), rel=1e-12, abs=1e-11)


@pytest.mark.parametrize("problem,i", _cases(_well_behaved()))
def test_illinois_matches_brentq(problem: RootProblem, i: int):
    res = false_position_illinois_result(
        problem.evaluator, problem.brackets[i], policy=StepTolerance(1e-13)
    )
    assert res.root == pytest.approx(_brentq(problem, i), rel=1e-12, abs=1e-11)


@pytest.mark.parametrize("solve", [newton_raphson_naive_result, halley_naive_result])
@pytest.mark.parametrize("problem,i", _cases(_well_behaved()))
def test_derivative_methods_match_brentq(problem: RootProblem, i: int, solve):
    res = solve(problem.evaluator, problem.guesses[i])
    assert res.root == pytest.approx(_brentq(problem, i), rel=1e-10, abs=1e-10)
