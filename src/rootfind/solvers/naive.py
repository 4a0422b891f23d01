"""Naive derivative-based root finders.

"Naive" means there is no bracket and no global-convergence safeguard: from a
good initial guess near a simple root these methods converge quadratically
(Newton-Raphson) or cubically (Halley), but from a poor one they may diverge,
oscillate, or jump far outside any domain of interest. They stay separate,
distinctly named operations so that a bracket-guarded variant can be added
later without a caller silently swapping one for the other.

Failures:

* :class:`~rootfind.exceptions.DerivativeTooSmallError` when the divisor of
  the step vanishes (see :class:`~rootfind.config.SolverConfig`),
* :class:`~rootfind.exceptions.NonFiniteError` when the next iterate, or
  ``f`` at it, is not finite (checked before the policy is consulted),
* :class:`~rootfind.exceptions.MaxIterationsExceededError` otherwise.

Two pathologies are worth knowing when choosing a convergence policy. With a
step tolerance, a huge derivative yields tiny steps, so the method can
"converge" far from the root (``f(x) = 1e-3 * exp(1/x) - 1`` from
``x0 = 0.00142``). Functions that flat-line, such as ``exp(-x**100) - 0.5``
near ``|x| = 1``, send the iterate into a region where it never recovers.
"""

from __future__ import annotations

import logging

from rootfind.config import SolverConfig
from rootfind.convergence import ConvergencePolicy
from rootfind.evaluator import SupportsEvalD1, SupportsEvalD2, require_d1, require_d2
from rootfind.exceptions import DerivativeTooSmallError
from rootfind.solvers._driver import (
    PolicyCallable,
    finite_step,
    iterate_from_guess,
    resolve_options,
)
from rootfind.types import RootResult

logger = logging.getLogger(__name__)

__all__ = [
    "newton_raphson_naive_result",
    "newton_raphson_naive",
    "halley_naive_result",
    "halley_naive",
]

NEWTON = "newton_raphson_naive"
HALLEY = "halley_naive"


def _too_small(method: str, what: str, value: float, x_cur: float) -> DerivativeTooSmallError:
    logger.debug("%s: %s=%r too small at x=%r", method, what, value, x_cur)
    return DerivativeTooSmallError(
        f"{method} failed: {what} = {value!r} too small at x = {x_cur!r}.", x=x_cur
    )


def newton_raphson_naive_result(
    evaluator: SupportsEvalD1,
    x0: float,
    max_iterations: int = 100,
    policy: ConvergencePolicy | PolicyCallable | None = None,
    *,
    config: SolverConfig | None = None,
) -> RootResult:
    """Newton-Raphson iteration ``x_{n+1} = x_n - f(x_n) / f'(x_n)``.

    Parameters
    ----------
    evaluator : SupportsEvalD1
        Function and first derivative, e.g. :class:`~rootfind.evaluator.RealFnD1`.
    x0 : float
        Initial guess; must be finite.
    max_iterations : int, default 100
        Iteration cap, must be > 0.
    policy : ConvergencePolicy or callable, optional
        Stopping rule, called as ``policy(x_n, x_{n+1}, f(x_{n+1}), n + 1)``.
        Defaults to ``config.default_policy()``.
    config : SolverConfig, optional
        Supplies the default policy and the derivative threshold.

    Returns
    -------
    RootResult

    Raises
    ------
    MissingCapabilityError
        If ``evaluator`` has no ``eval_d1``; raised before any evaluation.
    DerivativeTooSmallError, NonFiniteError, MaxIterationsExceededError
        See the module docstring.

    Notes
    -----
    See Ypma (1995), "Historical development of the Newton-Raphson method",
    SIAM Review 37(4), for how Newton, Raphson and Simpson each contributed.
    """
    f = require_d1(evaluator, NEWTON)
    policy, cfg = resolve_options(policy, config)

    def step(x_cur: float, f_cur: float) -> float:
        df_cur = f.eval_d1(x_cur)
        if cfg.divisor_too_small(df_cur, f_cur, x_cur):
            raise _too_small(NEWTON, "f'(x)", df_cur, x_cur)
        return finite_step(x_cur - f_cur / df_cur, x_cur, NEWTON)

    return iterate_from_guess(f, step, x0, max_iterations, policy, method=NEWTON)


def newton_raphson_naive(
    evaluator: SupportsEvalD1,
    x0: float,
    max_iterations: int = 100,
    policy: ConvergencePolicy | PolicyCallable | None = None,
    *,
    config: SolverConfig | None = None,
) -> float:
    return newton_raphson_naive_result(
        evaluator, x0, max_iterations, policy, config=config
    ).root


def halley_naive_result(
    evaluator: SupportsEvalD2,
    x0: float,
    max_iterations: int = 100,
    policy: ConvergencePolicy | PolicyCallable | None = None,
    *,
    config: SolverConfig | None = None,
) -> RootResult:
    """Halley iteration ``x_{n+1} = x_n - 2 f f' / (2 f'^2 - f f'')``.

    Same parameters and failure taxonomy as :func:`newton_raphson_naive_result`,
    but ``evaluator`` must also provide ``eval_d2``. The step is refused when
    ``f'(x) == 0`` or when the denominator ``2 f'^2 - f f''`` is too small
    relative to the numerator ``2 f f'``.

    Notes
    -----
    Scavo & Thoo (1995), "On the geometry of Halley's method", American
    Mathematical Monthly 102(5), gives the derivation and a geometric reading
    of the method.
    """
    f = require_d2(evaluator, HALLEY)
    policy, cfg = resolve_options(policy, config)

    def step(x_cur: float, f_cur: float) -> float:
        df_cur = f.eval_d1(x_cur)
        if df_cur == 0.0:
            raise _too_small(HALLEY, "f'(x)", df_cur, x_cur)
        d2f_cur = f.eval_d2(x_cur)

        numerator = 2.0 * f_cur * df_cur
        denominator = 2.0 * df_cur * df_cur - f_cur * d2f_cur
        if cfg.divisor_too_small(denominator, numerator, x_cur):
            raise _too_small(HALLEY, "2f'^2 - f f''", denominator, x_cur)
        return finite_step(x_cur - numerator / denominator, x_cur, HALLEY)

    return iterate_from_guess(f, step, x0, max_iterations, policy, method=HALLEY)


def halley_naive(
    evaluator: SupportsEvalD2,
    x0: float,
    max_iterations: int = 100,
    policy: ConvergencePolicy | PolicyCallable | None = None,
    *,
    config: SolverConfig | None = None,
) -> float:
    return halley_naive_result(evaluator, x0, max_iterations, policy, config=config).root
