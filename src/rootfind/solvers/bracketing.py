"""Bracketing root finders: bisection and false position.

All methods start from a bracket with ``f(lo) * f(hi) <= 0`` and narrow it by
replacing whichever endpoint shares the sign of ``f`` at the new point, so the
sign invariant holds after every step and the bracket never widens. They need
no derivatives, and a bare callable is accepted in place of an evaluator.

Every iteration calls the convergence policy with
``(previous point, new point, f(new point), iteration)``. A new point where
``f`` is exactly zero ends the search immediately.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from typing import TypeAlias

from rootfind.config import SolverConfig
from rootfind.convergence import ConvergencePolicy
from rootfind.evaluator import SupportsEval, as_evaluator
from rootfind.exceptions import (
    MaxIterationsExceededError,
    NonFiniteError,
    NotABracketError,
)
from rootfind.solvers._driver import (
    PolicyCallable,
    check_max_iterations,
    resolve_options,
)
from rootfind.types import Bounds, Bracket, RootResult, brackets_root
from rootfind.typing import ScalarFn

logger = logging.getLogger(__name__)

__all__ = [
    "bisection_result",
    "bisection",
    "bisection_iteration_bound",
    "false_position_result",
    "false_position",
    "false_position_illinois_result",
    "false_position_illinois",
]

BracketLike: TypeAlias = Bracket | Bounds | tuple[float, float]
BracketCallback: TypeAlias = Callable[[Bracket], None]

BISECTION = "bisection"
FALSE_POSITION = "false_position"
ILLINOIS = "false_position_illinois"


# ---------------------------
# Shared helpers
# ---------------------------


def _as_bracket(bracket: BracketLike) -> Bracket:
    if isinstance(bracket, Bracket):
        return bracket
    if isinstance(bracket, Bounds):
        return Bracket(bracket.lo, bracket.hi)
    lo, hi = bracket
    return Bracket(float(lo), float(hi))


def _open_bracket(
    f: SupportsEval, bracket: Bracket, method: str
) -> tuple[float, float, float, float, RootResult | None]:
    """Evaluate the endpoints and check the sign invariant.

    Returns ``(a, b, f_a, f_b, done)`` where ``done`` is set when an endpoint is
    already an exact root.
    """
    a, b = bracket.lo, bracket.hi
    f_a = f.eval(a)
    f_b = f.eval(b)
    if not brackets_root(f_a, f_b):
        logger.debug("%s: [%r, %r] is not a bracket (f=%r, %r)", method, a, b, f_a, f_b)
        raise NotABracketError(
            f"{method} requires f(lo) and f(hi) of opposite signs; "
            f"f({a!r}) = {f_a!r}, f({b!r}) = {f_b!r}.",
            x=a,
            iterations=0,
        )
    if f_a == 0.0:
        return a, b, f_a, f_b, RootResult(a, 0, method, f_a, Bracket(a, a))
    if f_b == 0.0:
        return a, b, f_a, f_b, RootResult(b, 0, method, f_b, Bracket(b, b))
    return a, b, f_a, f_b, None


def _check_nan(f_x: float, x: float, method: str, it: int) -> None:
    if math.isnan(f_x):
        logger.debug("%s iter %d: f(%r) is NaN", method, it, x)
        raise NonFiniteError(f"{method}: f({x!r}) is NaN.", x=x, iterations=it)


def _max_iterations_error(method: str, max_iterations: int, x: float) -> MaxIterationsExceededError:
    logger.debug("%s hit max_iterations=%d at x=%r", method, max_iterations, x)
    return MaxIterationsExceededError(
        f"{method} did not converge within {max_iterations} iterations.",
        x=x,
        iterations=max_iterations,
    )


# ---------------------------
# Bisection
# ---------------------------


def bisection_iteration_bound(bracket: BracketLike, target_width: float) -> int:
    """Iterations bisection needs to shrink ``bracket`` to ``target_width``.

    ``ceil(log2(width / target_width))``, or 0 if the bracket is already narrow
    enough.
    """
    if target_width <= 0.0:
        raise ValueError("target_width must be > 0")
    width = _as_bracket(bracket).width
    if width <= target_width:
        return 0
    return int(math.ceil(math.log2(width / target_width)))


def bisection_result(
    evaluator: SupportsEval | ScalarFn,
    bracket: BracketLike,
    max_iterations: int = 100,
    policy: ConvergencePolicy | PolicyCallable | None = None,
    *,
    config: SolverConfig | None = None,
    callback: BracketCallback | None = None,
) -> RootResult:
    """Root finding by repeated halving of a bracket.

    Each iteration evaluates the midpoint ``m`` and keeps the half whose
    endpoints still straddle the root. The width halves every iteration
    regardless of the shape of ``f``: convergence is linear but guaranteed,
    and ``k`` iterations leave a width of ``(hi - lo) / 2**k``.

    Parameters
    ----------
    evaluator : SupportsEval or callable
        The function.
    bracket : Bracket, Bounds or (lo, hi)
        Starting interval with ``f(lo) * f(hi) <= 0``.
    max_iterations : int, default 100
        Iteration cap, must be > 0.
    policy : ConvergencePolicy or callable, optional
        Called as ``policy(m_prev, m, f(m), k)``; the first ``m_prev`` is
        ``lo``. With :class:`~rootfind.convergence.StepTolerance` ``eps`` the
        step equals the width of the narrowed bracket, which has ``m`` as an
        endpoint, so the returned ``m`` is within ``eps`` of a root.
        Defaults to ``config.default_policy()``.
    config : SolverConfig, optional
        Supplies the default policy.
    callback : callable, optional
        Called with the narrowed :class:`~rootfind.types.Bracket` after every
        iteration.

    Returns
    -------
    RootResult
        ``root`` is the last midpoint; ``bracket`` the final bracket.

    Raises
    ------
    NotABracketError
        If the sign invariant fails on entry, before any iteration.
    NonFiniteError
        If ``f`` evaluates to NaN at a midpoint.
    MaxIterationsExceededError
        If the policy never fires within ``max_iterations``.
    """
    f = as_evaluator(evaluator)
    policy, _ = resolve_options(policy, config)
    max_iterations = check_max_iterations(max_iterations)

    a, b, f_a, _f_b, done = _open_bracket(f, _as_bracket(bracket), BISECTION)
    if done is not None:
        return done

    m_pre = a
    m = a
    for it in range(1, max_iterations + 1):
        m = a + (b - a) / 2.0
        f_m = f.eval(m)
        _check_nan(f_m, m, BISECTION, it)
        logger.debug("%s iter %d: [%r, %r] m=%r f(m)=%r", BISECTION, it, a, b, m, f_m)

        if f_m == 0.0:
            return RootResult(m, it, BISECTION, f_m, Bracket(m, m))

        # Maintain the bracket
        if (f_m < 0.0) == (f_a < 0.0):
            a, f_a = m, f_m
        else:
            b = m

        if callback is not None:
            callback(Bracket(a, b))

        if policy.is_converged(m_pre, m, f_m, it):
            return RootResult(m, it, BISECTION, f_m, Bracket(a, b))
        m_pre = m

    raise _max_iterations_error(BISECTION, max_iterations, m)


def bisection(
    evaluator: SupportsEval | ScalarFn,
    bracket: BracketLike,
    max_iterations: int = 100,
    policy: ConvergencePolicy | PolicyCallable | None = None,
    *,
    config: SolverConfig | None = None,
) -> float:
    return bisection_result(evaluator, bracket, max_iterations, policy, config=config).root


# ---------------------------
# False position / Illinois
# ---------------------------


def _retained_weight(retained: int) -> float:
    # halved on the second consecutive retention, and again on each further one
    return 0.5 ** (retained - 1) if retained >= 2 else 1.0


def _false_position(
    evaluator: SupportsEval | ScalarFn,
    bracket: BracketLike,
    max_iterations: int,
    policy: ConvergencePolicy | PolicyCallable | None,
    config: SolverConfig | None,
    callback: BracketCallback | None,
    *,
    illinois: bool,
) -> RootResult:
    method = ILLINOIS if illinois else FALSE_POSITION
    f = as_evaluator(evaluator)
    policy, _ = resolve_options(policy, config)
    max_iterations = check_max_iterations(max_iterations)

    a, b, f_a, f_b, done = _open_bracket(f, _as_bracket(bracket), method)
    if done is not None:
        return done

    # consecutive iterations each endpoint has survived unreplaced
    kept_a = kept_b = 0
    x_pre = b
    x = b
    for it in range(1, max_iterations + 1):
        g_a, g_b = f_a, f_b
        if illinois:
            g_a *= _retained_weight(kept_a)
            g_b *= _retained_weight(kept_b)

        denom = g_b - g_a
        x = b - g_b * (b - a) / denom if denom != 0.0 else math.nan
        if not (a < x < b):
            # rounding (or an infinite endpoint value) put the secant root on
            # or outside the bracket
            x = a + (b - a) / 2.0

        f_x = f.eval(x)
        _check_nan(f_x, x, method, it)
        logger.debug("%s iter %d: [%r, %r] x=%r f(x)=%r", method, it, a, b, x, f_x)

        if f_x == 0.0:
            return RootResult(x, it, method, f_x, Bracket(x, x))

        if (f_x < 0.0) == (f_a < 0.0):
            a, f_a = x, f_x
            kept_a, kept_b = 0, kept_b + 1
        else:
            b, f_b = x, f_x
            kept_a, kept_b = kept_a + 1, 0

        if callback is not None:
            callback(Bracket(a, b))

        if policy.is_converged(x_pre, x, f_x, it):
            return RootResult(x, it, method, f_x, Bracket(a, b))
        x_pre = x

    raise _max_iterations_error(method, max_iterations, x)


def false_position_result(
    evaluator: SupportsEval | ScalarFn,
    bracket: BracketLike,
    max_iterations: int = 100,
    policy: ConvergencePolicy | PolicyCallable | None = None,
    *,
    config: SolverConfig | None = None,
    callback: BracketCallback | None = None,
) -> RootResult:
    """Plain regula falsi.

    Each iteration takes the secant root
    ``x = b - f(b) * (b - a) / (f(b) - f(a))`` of the current bracket instead of
    the midpoint. On convex or concave stretches one endpoint is never
    replaced and convergence degrades badly; see
    :func:`false_position_illinois_result`. Parameters, return value and
    failures are those of :func:`bisection_result`; the first "previous point"
    handed to the policy is ``hi``.
    """
    return _false_position(
        evaluator, bracket, max_iterations, policy, config, callback, illinois=False
    )


def false_position(
    evaluator: SupportsEval | ScalarFn,
    bracket: BracketLike,
    max_iterations: int = 100,
    policy: ConvergencePolicy | PolicyCallable | None = None,
    *,
    config: SolverConfig | None = None,
) -> float:
    return false_position_result(
        evaluator, bracket, max_iterations, policy, config=config
    ).root


def false_position_illinois_result(
    evaluator: SupportsEval | ScalarFn,
    bracket: BracketLike,
    max_iterations: int = 100,
    policy: ConvergencePolicy | PolicyCallable | None = None,
    *,
    config: SolverConfig | None = None,
    callback: BracketCallback | None = None,
) -> RootResult:
    """Illinois variant of false position.

    Tracks how many consecutive iterations each endpoint has been retained.
    From the second consecutive retention on, the endpoint's function value
    is halved (cumulatively: 1/2, 1/4, ...) in the interpolation formula only;
    the stored value is untouched and the counter resets when the endpoint is
    replaced. This pulls the secant root away from a stagnant endpoint and
    restores superlinear convergence.

    Parameters, return value and failures are those of
    :func:`false_position_result`.

    Notes
    -----
    Ford (1995), "Improved algorithms of Illinois-type for the numerical
    solution of nonlinear equations", University of Essex, analyses this
    family of methods.
    """
    return _false_position(
        evaluator, bracket, max_iterations, policy, config, callback, illinois=True
    )


def false_position_illinois(
    evaluator: SupportsEval | ScalarFn,
    bracket: BracketLike,
    max_iterations: int = 100,
    policy: ConvergencePolicy | PolicyCallable | None = None,
    *,
    config: SolverConfig | None = None,
) -> float:
    return false_position_illinois_result(
        evaluator, bracket, max_iterations, policy, config=config
    ).root
