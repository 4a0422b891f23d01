"""Function evaluators with explicit derivative capabilities.

Solvers consume an evaluator rather than a bare callable so the derivatives a
method needs are part of its signature:

* :class:`SupportsEval` computes ``f(x)``,
* :class:`SupportsEvalD1` also computes ``f'(x)``,
* :class:`SupportsEvalD2` also computes ``f''(x)``.

The protocols let a static type checker reject, say, a ``RealFn`` passed to
Halley's method. The same check is repeated at runtime when a solver is
called, before any function evaluation, so the mismatch never surfaces as a
late ``AttributeError`` halfway through an iteration.

Any object with the right methods qualifies; the wrappers below adapt plain
callables:

    >>> import math
    >>> f = RealFnD1(math.sin, math.cos)
    >>> isinstance(f, SupportsEvalD1), isinstance(f, SupportsEvalD2)
    (True, False)

Evaluators must be deterministic and free of side effects: solvers evaluate
freely, possibly more than once at the same point.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from rootfind.exceptions import MissingCapabilityError
from rootfind.typing import ScalarFn


@runtime_checkable
class SupportsEval(Protocol):
    def eval(self, x: float) -> float: ...


@runtime_checkable
class SupportsEvalD1(SupportsEval, Protocol):
    def eval_d1(self, x: float) -> float: ...


@runtime_checkable
class SupportsEvalD2(SupportsEvalD1, Protocol):
    def eval_d2(self, x: float) -> float: ...


@dataclass(frozen=True, slots=True)
class RealFn:
    """Wraps ``f`` to provide :class:`SupportsEval`."""

    f: ScalarFn

    def eval(self, x: float) -> float:
        return float(self.f(x))

    def __call__(self, x: float) -> float:
        return self.eval(x)


@dataclass(frozen=True, slots=True)
class RealFnD1:
    """Wraps ``f`` and ``df`` to provide :class:`SupportsEvalD1`."""

    f: ScalarFn
    df: ScalarFn

    def eval(self, x: float) -> float:
        return float(self.f(x))

    def eval_d1(self, x: float) -> float:
        return float(self.df(x))

    def __call__(self, x: float) -> float:
        return self.eval(x)


@dataclass(frozen=True, slots=True)
class RealFnD2:
    """Wraps ``f``, ``df`` and ``d2f`` to provide :class:`SupportsEvalD2`."""

    f: ScalarFn
    df: ScalarFn
    d2f: ScalarFn

    def eval(self, x: float) -> float:
        return float(self.f(x))

    def eval_d1(self, x: float) -> float:
        return float(self.df(x))

    def eval_d2(self, x: float) -> float:
        return float(self.d2f(x))

    def __call__(self, x: float) -> float:
        return self.eval(x)


def make_evaluator(
    f: ScalarFn,
    df: ScalarFn | None = None,
    d2f: ScalarFn | None = None,
) -> RealFn | RealFnD1 | RealFnD2:
    """Return the most capable wrapper for the supplied functions."""
    if d2f is not None:
        if df is None:
            raise ValueError("A second derivative requires the first derivative")
        return RealFnD2(f, df, d2f)
    if df is not None:
        return RealFnD1(f, df)
    return RealFn(f)


def as_evaluator(obj: SupportsEval | ScalarFn) -> SupportsEval:
    """Accept an evaluator as is, or wrap a bare callable with :class:`RealFn`."""
    if isinstance(obj, SupportsEval):
        return obj
    if callable(obj):
        return RealFn(obj)
    raise MissingCapabilityError(
        f"Expected an evaluator or a callable, got {type(obj).__name__}"
    )


def require_d1(evaluator: object, method: str) -> SupportsEvalD1:
    if not isinstance(evaluator, SupportsEvalD1):
        raise MissingCapabilityError(
            f"{method} requires an evaluator providing eval_d1 (e.g. RealFnD1); "
            f"got {type(evaluator).__name__}"
        )
    return evaluator


def require_d2(evaluator: object, method: str) -> SupportsEvalD2:
    if not isinstance(evaluator, SupportsEvalD2):
        raise MissingCapabilityError(
            f"{method} requires an evaluator providing eval_d1 and eval_d2 "
            f"(e.g. RealFnD2); got {type(evaluator).__name__}"
        )
    return evaluator


__all__ = [
    "SupportsEval",
    "SupportsEvalD1",
    "SupportsEvalD2",
    "RealFn",
    "RealFnD1",
    "RealFnD2",
    "make_evaluator",
    "as_evaluator",
    "require_d1",
    "require_d2",
]
