"""Error taxonomy for root finding.

Every failure is local to the call that produced it. Numerical failures carry
the last relevant abscissa (``x``) and, where meaningful, the number of
completed iterations so callers can decide whether to retry with a different
bracket, guess or iteration cap.
"""

from __future__ import annotations


class RootFindingError(Exception):
    """Base class for root-finding failures."""

    def __init__(
        self, message: str, *, x: float | None = None, iterations: int | None = None
    ) -> None:
        super().__init__(message)
        self.x = x
        self.iterations = iterations


class NotABracketError(RootFindingError, ValueError):
    """Raised when an interval does not satisfy ``f(lo) * f(hi) <= 0``."""


class InvalidWindowError(RootFindingError, ValueError):
    """Raised when a bracket scan window is not positive or exceeds the bounds."""


class InvalidBoundsError(RootFindingError, ValueError):
    """Raised when search bounds are not finite with ``lo < hi``."""


class MaxIterationsExceededError(RootFindingError):
    """Raised when a method does not converge within ``max_iterations``."""


class DerivativeTooSmallError(RootFindingError):
    """Raised when a derivative-based step would divide by a vanishing quantity.

    For Newton-Raphson this is ``f'(x)``; for Halley's method it is the
    denominator ``2 f'(x)^2 - f(x) f''(x)``.
    """


class NonFiniteError(RootFindingError, ArithmeticError):
    """Raised when an iterate (or the value that drives it) is NaN or infinite."""


class MissingCapabilityError(RootFindingError, TypeError):
    """Raised when an evaluator lacks a derivative capability a solver requires."""


__all__ = [
    "RootFindingError",
    "NotABracketError",
    "InvalidWindowError",
    "InvalidBoundsError",
    "MaxIterationsExceededError",
    "DerivativeTooSmallError",
    "NonFiniteError",
    "MissingCapabilityError",
]
