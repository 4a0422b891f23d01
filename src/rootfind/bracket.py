"""Bracket discovery.

A bracket is a closed interval ``[lo, hi]`` with ``f(lo) * f(hi) <= 0``. For a
continuous function the intermediate value theorem guarantees it holds a root;
for a discontinuous one it may hold a pole instead.

Brackets are found by sweeping fixed-width windows over the search bounds and
looking for sign changes at the window boundaries:

    >>> import math
    >>> from rootfind import Bounds, BracketGenerator
    >>> brackets = list(BracketGenerator(math.sin, Bounds(-0.1, 6.3), 0.1))
    >>> len(brackets)  # 0, pi, 2*pi
    3

Pitfalls of the sweep, all of which are left to the caller's choice of
window size:

* roots that touch but do not cross the x-axis (``x**2`` at 0) are invisible,
* a window holding an even number of roots shows no sign change and is missed,
* a window holding an odd number of roots is reported once; a bracketing
  solver then converges to only one of them.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator

import numpy as np

from rootfind.evaluator import SupportsEval, as_evaluator
from rootfind.exceptions import InvalidWindowError, NotABracketError
from rootfind.types import Bounds, Bracket, brackets_root, is_sign_change
from rootfind.typing import FloatArray, ScalarFn

logger = logging.getLogger(__name__)

__all__ = [
    "BracketGenerator",
    "first_bracket",
    "expand_bracket",
    "window_boundaries",
]


def _validate_window(bounds: Bounds, window_size: float) -> float:
    window_size = float(window_size)
    if not math.isfinite(window_size) or window_size <= 0.0:
        raise InvalidWindowError(f"window_size must be finite and > 0, got {window_size!r}")
    if window_size > bounds.width:
        raise InvalidWindowError(
            f"window_size={window_size!r} exceeds the bounds width {bounds.width!r}"
        )
    return window_size


def _iter_boundaries(bounds: Bounds, window_size: float) -> Iterator[float]:
    # one boundary at a time; the grid is never materialized
    k = 0
    x = float(bounds.lo)
    while x < bounds.hi:
        yield x
        k += 1
        x = bounds.lo + window_size * float(k)
    yield float(bounds.hi)


def window_boundaries(bounds: Bounds, window_size: float) -> FloatArray:
    """Boundaries ``lo, lo + w, lo + 2w, ...`` strictly below ``hi``, then ``hi``.

    The last window is clipped to ``hi`` and may be shorter than ``w``. This
    builds the whole grid; :class:`BracketGenerator` walks the same boundaries
    one at a time.
    """
    window_size = _validate_window(bounds, window_size)
    return np.fromiter(_iter_boundaries(bounds, window_size), dtype=float)


class BracketGenerator:
    """Lazy, restartable scan of ``bounds`` for root-holding brackets.

    Parameters
    ----------
    evaluator : SupportsEval or callable
        The function to scan.
    bounds : Bounds
        Search domain.
    window_size : float
        Width of each window; must satisfy ``0 < window_size <= bounds.width``.

    Raises
    ------
    InvalidWindowError
        On construction, if ``window_size`` is out of range.

    Notes
    -----
    Each call to :meth:`__iter__` starts a fresh pass over the domain, so with
    a deterministic evaluator iterating twice yields the same brackets.

    An exact zero on a window boundary ``x`` is emitted once, as the degenerate
    bracket ``[x, x]``. It belongs to the window that ends at ``x`` and does not
    open a bracket for the window that starts there.
    """

    def __init__(
        self,
        evaluator: SupportsEval | ScalarFn,
        bounds: Bounds,
        window_size: float,
    ) -> None:
        self.evaluator = as_evaluator(evaluator)
        self.bounds = bounds
        self.window_size = _validate_window(bounds, window_size)

    def __iter__(self) -> Iterator[Bracket]:
        f = self.evaluator
        boundaries = _iter_boundaries(self.bounds, self.window_size)

        a = next(boundaries)
        f_a = f.eval(a)
        if f_a == 0.0:
            logger.debug("Exact root on lower bound x=%s", a)
            yield Bracket(a, a)

        for b in boundaries:
            f_b = f.eval(b)
            if f_b == 0.0:
                logger.debug("Exact root on window boundary x=%s", b)
                yield Bracket(b, b)
            elif is_sign_change(f_a, f_b):
                logger.debug("Sign change on [%s, %s]: f=%s, %s", a, b, f_a, f_b)
                yield Bracket(a, b)
            a, f_a = b, f_b

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(bounds={self.bounds!r}, "
            f"window_size={self.window_size!r})"
        )


def first_bracket(
    evaluator: SupportsEval | ScalarFn,
    bounds: Bounds,
    window_size: float,
) -> Bracket | None:
    """First bracket found scanning ``bounds`` from ``lo``, or ``None``."""
    return next(iter(BracketGenerator(evaluator, bounds, window_size)), None)


def expand_bracket(
    evaluator: SupportsEval | ScalarFn,
    lo: float,
    hi: float,
    *,
    hi_max: float = 10.0,
    grow: float = 2.0,
    max_steps: int = 60,
) -> Bracket:
    """Grow ``hi`` by factors of ``grow`` until ``[lo, hi]`` straddles a sign change.

    Useful when only a lower end of the domain is known, e.g. for a positive
    parameter whose scale is uncertain. Growth multiplies ``hi``, so ``hi`` must
    be positive.

    The search stops at ``hi_max`` or after ``max_steps`` growths, whichever
    comes first, and raises :class:`~rootfind.exceptions.NotABracketError`
    there. The returned bracket satisfies the usual sign invariant.
    """
    if hi <= lo:
        raise ValueError(f"expand_bracket needs lo < hi, got [{lo!r}, {hi!r}]")
    if hi <= 0.0:
        raise ValueError(f"hi must be > 0 for geometric growth, got {hi!r}")
    if grow <= 1.0:
        raise ValueError(f"grow must be > 1, got {grow!r}")
    if hi_max <= hi:
        # no room to grow; only the initial interval is tested
        hi_max = hi

    f = as_evaluator(evaluator)
    lo, hi = float(lo), float(hi)
    f_lo = f.eval(lo)
    f_hi = f.eval(hi)

    steps = 0
    while not brackets_root(f_lo, f_hi):
        if hi >= hi_max or steps >= max_steps:
            logger.debug(
                "expand_bracket gave up after %d steps at hi=%s (f_lo=%s, f_hi=%s)",
                steps,
                hi,
                f_lo,
                f_hi,
            )
            side = "positive" if f_lo > 0 else "negative"
            raise NotABracketError(
                f"No bracket found: f(lo) and f(hi) stayed {side} while expanding hi "
                f"to {hi!r}. Increase hi_max or check that a root exists above lo.",
                x=hi,
                iterations=steps,
            )
        hi = min(hi * grow, hi_max)
        f_hi = f.eval(hi)
        steps += 1

    return Bracket(lo, hi)
