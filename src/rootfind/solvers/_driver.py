from __future__ import annotations

import logging
import math
from collections.abc import Callable
from typing import TypeAlias

from rootfind.config import DEFAULT_CONFIG, SolverConfig
from rootfind.convergence import ConvergencePolicy, as_policy
from rootfind.evaluator import SupportsEval
from rootfind.exceptions import MaxIterationsExceededError, NonFiniteError
from rootfind.types import RootResult

logger = logging.getLogger(__name__)

# step(x_cur, f_cur) -> x_new; raises RootFindingError subclasses on failure
StepFn: TypeAlias = Callable[[float, float], float]
PolicyCallable: TypeAlias = Callable[[float, float, float, int], bool]


def resolve_options(
    policy: ConvergencePolicy | PolicyCallable | None,
    config: SolverConfig | None,
) -> tuple[ConvergencePolicy, SolverConfig]:
    cfg = DEFAULT_CONFIG if config is None else config
    return (cfg.default_policy() if policy is None else as_policy(policy)), cfg


def check_max_iterations(max_iterations: int) -> int:
    if max_iterations <= 0:
        raise ValueError(f"max_iterations must be > 0, got {max_iterations!r}")
    return int(max_iterations)


def iterate_from_guess(
    evaluator: SupportsEval,
    step: StepFn,
    x0: float,
    max_iterations: int,
    policy: ConvergencePolicy,
    *,
    method: str,
) -> RootResult:
    """Drive ``x_{n+1} = step(x_n, f(x_n))`` until ``policy`` accepts an iterate.

    The policy sees ``(x_n, x_{n+1}, f(x_{n+1}), n + 1)``. No safeguard keeps
    the iterates anywhere in particular.
    """
    max_iterations = check_max_iterations(max_iterations)
    x0 = float(x0)
    if not math.isfinite(x0):
        logger.debug("%s: non-finite initial guess %r", method, x0)
        raise NonFiniteError(f"{method}: initial guess must be finite, got {x0!r}", x=x0)

    x_pre = x0
    f_pre = finite_value(evaluator.eval(x_pre), x_pre, method, 0)
    x_cur = x_pre

    for it in range(1, max_iterations + 1):
        x_cur = step(x_pre, f_pre)
        f_cur = evaluator.eval(x_cur)
        logger.debug("%s iter %d: x=%r f=%r", method, it, x_cur, f_cur)
        # a policy must never accept an iterate with a non-finite residual
        finite_value(f_cur, x_cur, method, it)

        if policy.is_converged(x_pre, x_cur, f_cur, it):
            return RootResult(root=x_cur, iterations=it, method=method, f_at_root=f_cur)

        x_pre, f_pre = x_cur, f_cur

    logger.debug("%s hit max_iterations=%d at x=%r", method, max_iterations, x_cur)
    raise MaxIterationsExceededError(
        f"{method} did not converge within {max_iterations} iterations.",
        x=x_cur,
        iterations=max_iterations,
    )


def finite_value(f_x: float, x: float, method: str, iterations: int) -> float:
    if not math.isfinite(f_x):
        logger.debug("%s: f(x)=%r is not finite at x=%r", method, f_x, x)
        raise NonFiniteError(
            f"{method}: f({x!r}) = {f_x!r} is not finite.", x=x, iterations=iterations
        )
    return f_x


def finite_step(x_new: float, x_cur: float, method: str) -> float:
    if not math.isfinite(x_new):
        logger.debug("%s stepped to non-finite %r from x=%r", method, x_new, x_cur)
        raise NonFiniteError(
            f"{method} produced a non-finite iterate {x_new!r} from x={x_cur!r}.",
            x=x_cur,
        )
    return x_new
