"""Pytest helpers for the rootfind library."""

from __future__ import annotations

import math

import pytest

from rootfind import RealFn, RealFnD1, RealFnD2


@pytest.fixture
def sin_fn() -> RealFn:
    return RealFn(math.sin)


@pytest.fixture
def sqrt2_fn() -> RealFnD2:
    """``x**2 - 2`` with both derivatives; roots at +-sqrt(2)."""
    return RealFnD2(lambda x: x * x - 2.0, lambda x: 2.0 * x, lambda x: 2.0)


@pytest.fixture
def cubic_fn() -> RealFnD1:
    """``x**3``: a single root at 0 and a strongly convex right half."""
    return RealFnD1(lambda x: x**3, lambda x: 3.0 * x * x)


@pytest.fixture
def counting():
    """Factory wrapping a callable so its evaluations are counted."""

    class _Counting:
        def __init__(self, f):
            self.f = f
            self.calls = 0

        def eval(self, x: float) -> float:
            self.calls += 1
            return float(self.f(x))

    return _Counting
