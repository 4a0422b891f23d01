from __future__ import annotations

import math

import pytest

from rootfind import (
    Bounds,
    InvalidWindowError,
    MaxIterationsExceededError,
    RootMethod,
    StepTolerance,
    find_root_results,
    find_roots,
    get_root_method,
)

BRACKETING = [RootMethod.BISECTION, RootMethod.FALSE_POSITION, RootMethod.ILLINOIS]


@pytest.mark.parametrize("method", BRACKETING, ids=lambda m: m.value)
def test_sin_roots(sin_fn, method: RootMethod):
    roots = find_roots(sin_fn, Bounds(-0.1, 6.3), 0.1, method=method)
    assert roots == pytest.approx([0.0, math.pi, 2.0 * math.pi], abs=1e-11)


def test_results_carry_diagnostics(sin_fn):
    results = find_root_results(
        sin_fn, Bounds(-0.1, 6.3), 0.1, method="false_position_illinois"
    )
    assert [r.method for r in results] == ["false_position_illinois"] * 3
    # the root at 0 sits on a window boundary and needs no iteration
    assert results[0].iterations == 0
    assert all(r.iterations > 0 for r in results[1:])


def test_polynomial_roots_in_increasing_order():
    f = lambda x: (x + 2.0) * (x - 0.5) * (x - 3.0)  # noqa: E731
    roots = find_roots(f, Bounds(-5.0, 5.0), 0.7, policy=StepTolerance(1e-13))
    assert roots == pytest.approx([-2.0, 0.5, 3.0], abs=1e-12)


def test_no_roots_gives_empty_list():
    assert find_roots(lambda x: x * x + 1.0, Bounds(-3.0, 3.0), 0.5) == []


def test_invalid_window_propagates(sin_fn):
    with pytest.raises(InvalidWindowError):
        find_roots(sin_fn, Bounds(0.0, 1.0), 2.0)


def test_solver_failure_propagates(sin_fn):
    with pytest.raises(MaxIterationsExceededError):
        find_roots(sin_fn, Bounds(3.0, 3.5), 0.5, max_iterations=3, policy=StepTolerance(1e-12))


@pytest.mark.parametrize("method", [RootMethod.NEWTON_RAPHSON_NAIVE, "halley_naive"])
def test_derivative_methods_rejected(sin_fn, method):
    with pytest.raises(ValueError):
        find_roots(sin_fn, Bounds(0.0, 4.0), 0.5, method=method)


def test_method_registry():
    assert {m.value for m in RootMethod} == {
        "bisection",
        "false_position",
        "false_position_illinois",
        "newton_raphson_naive",
        "halley_naive",
    }
    assert [m for m in RootMethod if m.is_bracketing] == BRACKETING
    assert get_root_method("bisection") is get_root_method(RootMethod.BISECTION)
    with pytest.raises(ValueError):
        get_root_method("secant")
