from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from rootfind.convergence import Combined, ConvergencePolicy

_EPS = float(np.finfo(float).eps)
_TINY = float(np.finfo(float).tiny)


@dataclass(frozen=True, slots=True)
class SolverConfig:
    """Numerical defaults shared by every solver.

    Parameters
    ----------
    max_iter : int, default 100
        Iteration cap used where the caller does not pass one.
    x_tol : float, default 1e-12
        Step tolerance of the default convergence policy.
    f_tol : float, default 1e-12
        Residual tolerance of the default convergence policy.
    derivative_rtol : float, default machine epsilon
        Relative threshold for :class:`~rootfind.exceptions.DerivativeTooSmallError`.
        A derivative-based step is refused when the divisor satisfies
        ``|d| <= derivative_rtol * |n| / max(1, |x|)`` where ``n`` is the
        numerator of the step. Equivalently, the step would exceed
        ``max(1, |x|) / derivative_rtol`` and carry no significant digit of ``x``.
    derivative_atol : float, default smallest normal double
        Absolute floor of the same threshold; divisors in the subnormal range
        are always refused.
    """

    max_iter: int = 100
    x_tol: float = 1e-12
    f_tol: float = 1e-12
    derivative_rtol: float = _EPS
    derivative_atol: float = _TINY

    def __post_init__(self) -> None:
        if self.max_iter <= 0:
            raise ValueError("max_iter must be > 0")
        if not (self.x_tol > 0 and self.f_tol >= 0):
            raise ValueError("x_tol must be > 0 and f_tol must be >= 0")
        if self.derivative_rtol < 0 or self.derivative_atol < 0:
            raise ValueError("derivative thresholds must be >= 0")

    def default_policy(self) -> ConvergencePolicy:
        return Combined(step_epsilon=self.x_tol, f_epsilon=self.f_tol)

    def divisor_too_small(self, divisor: float, numerator: float, x: float) -> bool:
        """True if ``numerator / divisor`` is not a usable step from ``x``."""
        if divisor == 0.0:
            return True
        threshold = max(
            self.derivative_atol,
            self.derivative_rtol * abs(numerator) / max(1.0, abs(x)),
        )
        return abs(divisor) <= threshold


DEFAULT_CONFIG = SolverConfig()
