from __future__ import annotations

import logging

from rootfind.bracket import BracketGenerator
from rootfind.config import SolverConfig
from rootfind.convergence import ConvergencePolicy
from rootfind.evaluator import SupportsEval, as_evaluator
from rootfind.solvers import RootMethod, get_root_method
from rootfind.solvers._driver import PolicyCallable
from rootfind.types import Bounds, RootResult
from rootfind.typing import ScalarFn

logger = logging.getLogger(__name__)

__all__ = ["find_roots", "find_root_results"]


def find_root_results(
    evaluator: SupportsEval | ScalarFn,
    bounds: Bounds,
    window_size: float,
    *,
    method: RootMethod | str = RootMethod.BISECTION,
    max_iterations: int = 100,
    policy: ConvergencePolicy | PolicyCallable | None = None,
    config: SolverConfig | None = None,
) -> list[RootResult]:
    """Scan ``bounds`` for brackets and solve each with a bracketing method.

    Failures propagate: a bracket the solver cannot resolve within
    ``max_iterations`` raises, it is not skipped.
    """
    method = RootMethod(method)
    if not method.is_bracketing:
        raise ValueError(f"find_roots needs a bracketing method, got {method.value!r}")

    f = as_evaluator(evaluator)
    solve = get_root_method(method)
    results = []
    for bracket in BracketGenerator(f, bounds, window_size):
        res = solve(f, bracket, max_iterations, policy, config=config)
        logger.debug("%s on [%r, %r] -> %r", method.value, bracket.lo, bracket.hi, res.root)
        results.append(res)
    return results


def find_roots(
    evaluator: SupportsEval | ScalarFn,
    bounds: Bounds,
    window_size: float,
    *,
    method: RootMethod | str = RootMethod.BISECTION,
    max_iterations: int = 100,
    policy: ConvergencePolicy | PolicyCallable | None = None,
    config: SolverConfig | None = None,
) -> list[float]:
    """All roots detected on ``bounds``, in increasing order.

    Example
    -------
    >>> import math
    >>> roots = find_roots(math.sin, Bounds(-0.1, 6.3), 0.1)
    >>> [round(r, 9) for r in roots]
    [0.0, 3.141592654, 6.283185307]
    """
    return [
        r.root
        for r in find_root_results(
            evaluator,
            bounds,
            window_size,
            method=method,
            max_iterations=max_iterations,
            policy=policy,
            config=config,
        )
    ]
