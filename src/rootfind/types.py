from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rootfind.exceptions import InvalidBoundsError, NotABracketError

if TYPE_CHECKING:
    from rootfind.evaluator import SupportsEval


def is_sign_change(lhs: float, rhs: float) -> bool:
    """True if ``lhs`` and ``rhs`` are non-zero with opposite signs.

    Compares signs directly instead of testing ``lhs * rhs < 0``, which
    underflows to zero for values such as ``1e-200`` and ``-1e-200``. NaN is
    never a sign change.
    """
    return (lhs < 0.0 < rhs) or (rhs < 0.0 < lhs)


def brackets_root(f_lo: float, f_hi: float) -> bool:
    """Sign invariant of a bracket: ``f_lo * f_hi <= 0`` without underflow."""
    return f_lo == 0.0 or f_hi == 0.0 or is_sign_change(f_lo, f_hi)


@dataclass(frozen=True, slots=True)
class Bounds:
    """The caller's full search domain, the closed interval ``[lo, hi]``.

    Parameters
    ----------
    lo, hi : float
        Finite endpoints with ``lo < hi``.

    Raises
    ------
    InvalidBoundsError
        If either endpoint is not finite or ``lo >= hi``.
    """

    lo: float
    hi: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.lo) and math.isfinite(self.hi)):
            raise InvalidBoundsError(
                f"Bounds must be finite, got [{self.lo!r}, {self.hi!r}]"
            )
        if not self.lo < self.hi:
            raise InvalidBoundsError(
                f"Bounds require lo < hi, got [{self.lo!r}, {self.hi!r}]"
            )

    @property
    def width(self) -> float:
        return self.hi - self.lo

    def middle(self) -> float:
        return self.lo + (self.hi - self.lo) * 0.5

    def contains(self, x: float) -> bool:
        return self.lo <= x <= self.hi


@dataclass(frozen=True, slots=True)
class Bracket:
    """A closed interval ``[lo, hi]`` believed to hold a root.

    Direct construction only checks ordering (``lo == hi`` is allowed for an
    exact root found on a grid point). The sign invariant
    ``f(lo) * f(hi) <= 0`` depends on the function, so it is checked by
    :meth:`from_evaluator` and again by every bracketing solver on entry.
    Solvers narrow a bracket by replacing one endpoint; a bracket is never
    widened.
    """

    lo: float
    hi: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.lo) and math.isfinite(self.hi)):
            raise NotABracketError(
                f"Bracket endpoints must be finite, got [{self.lo!r}, {self.hi!r}]"
            )
        if self.lo > self.hi:
            raise NotABracketError(
                f"Bracket requires lo <= hi, got [{self.lo!r}, {self.hi!r}]"
            )

    @classmethod
    def from_evaluator(cls, evaluator: SupportsEval, lo: float, hi: float) -> Bracket:
        """Build a bracket, verifying the sign invariant of ``evaluator`` on it."""
        bracket = cls(float(lo), float(hi))
        f_lo = evaluator.eval(bracket.lo)
        f_hi = evaluator.eval(bracket.hi)
        if not brackets_root(f_lo, f_hi):
            raise NotABracketError(
                f"f(lo)={f_lo!r} and f(hi)={f_hi!r} do not bracket a root "
                f"on [{bracket.lo!r}, {bracket.hi!r}]"
            )
        return bracket

    @property
    def width(self) -> float:
        return self.hi - self.lo

    @property
    def is_degenerate(self) -> bool:
        return self.lo == self.hi

    def middle(self) -> float:
        return self.lo + (self.hi - self.lo) * 0.5

    def contains(self, x: float) -> bool:
        return self.lo <= x <= self.hi

    def as_tuple(self) -> tuple[float, float]:
        return (self.lo, self.hi)


@dataclass(frozen=True, slots=True)
class RootResult:
    """Diagnostics of a successful root search.

    Parameters
    ----------
    root : float
        The root estimate.
    iterations : int
        Number of completed iterations (0 when a bracket endpoint was already
        an exact root).
    method : str
        Name of the method that produced ``root``.
    f_at_root : float
        ``f(root)``.
    bracket : Bracket or None
        Final bracket for bracketing methods, ``None`` otherwise.
    """

    root: float
    iterations: int
    method: str
    f_at_root: float
    bracket: Bracket | None = None


__all__ = [
    "Bounds",
    "Bracket",
    "RootResult",
    "is_sign_change",
    "brackets_root",
]
