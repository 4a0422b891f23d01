"""
rootfind.diagnostics.benchmarks

Diagnostics helpers for:
- sweeping every method over the published test problems (one row per run)
- recording the convergence history of several methods on one problem

Failures are recorded in the output rather than raised, so a sweep always
completes; the ``error`` column holds ``"<ExceptionType>: <message>"``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import pandas as pd
from scipy.optimize import brentq

from rootfind.config import DEFAULT_CONFIG, SolverConfig
from rootfind.convergence import ConvergencePolicy
from rootfind.diagnostics.problems import RootProblem, all_problems
from rootfind.diagnostics.trace import ConvergenceTrace
from rootfind.solvers import RootMethod, get_root_method
from rootfind.types import Bracket, RootResult

logger = logging.getLogger(__name__)

__all__ = ["reference_root", "solve_case", "run_benchmarks", "trace_case"]


def reference_root(problem: RootProblem, bracket: Bracket) -> float:
    """Root on ``bracket`` from :func:`scipy.optimize.brentq`, NaN if it fails."""
    try:
        return float(brentq(problem.f, bracket.lo, bracket.hi, xtol=1e-15, maxiter=500))
    except (ValueError, RuntimeError) as e:
        logger.debug("brentq reference failed for %s on %s: %s", problem.name, bracket, e)
        return float("nan")


def solve_case(
    problem: RootProblem,
    index: int,
    method: RootMethod | str,
    *,
    max_iterations: int,
    policy: ConvergencePolicy | None,
    config: SolverConfig | None = None,
) -> RootResult:
    """Run ``method`` on case ``index`` of ``problem`` (bracket or guess as appropriate)."""
    method = RootMethod(method)
    start = problem.brackets[index] if method.is_bracketing else problem.guesses[index]
    solve = get_root_method(method)
    return solve(problem.evaluator, start, max_iterations, policy, config=config)


def run_benchmarks(
    problems: Sequence[RootProblem] | None = None,
    methods: Sequence[RootMethod | str] | None = None,
    *,
    max_iterations: int = 100,
    policy: ConvergencePolicy | None = None,
    config: SolverConfig | None = None,
) -> pd.DataFrame:
    """One row per (problem, root, method).

    ``abs_error`` is measured against the SciPy ``brentq`` reference on the
    case's bracket. A run counts as ``ok`` when the method returned a root,
    whether or not that root is the one the case was designed for.
    """
    problems = all_problems() if problems is None else list(problems)
    methods = list(RootMethod) if methods is None else [RootMethod(m) for m in methods]
    cfg = DEFAULT_CONFIG if config is None else config

    rows: list[dict[str, Any]] = []
    for problem in problems:
        for i, (published, guess, bracket) in enumerate(problem.cases()):
            ref = reference_root(problem, bracket)

            for method in methods:
                try:
                    res = solve_case(
                        problem,
                        i,
                        method,
                        max_iterations=max_iterations,
                        policy=policy,
                        config=cfg,
                    )
                    root = res.root
                    ok = True
                    err = ""
                    iterations = res.iterations
                    f_at_root = res.f_at_root
                except Exception as e:
                    root = float("nan")
                    ok = False
                    err = f"{type(e).__name__}: {e}"
                    iterations = int(getattr(e, "iterations", None) or 0)
                    f_at_root = float("nan")

                rows.append(
                    {
                        "problem": problem.name,
                        "case": i,
                        "method": method.value,
                        "published_root": float(published),
                        "reference_root": ref,
                        "root": float(root),
                        "abs_error": abs(float(root) - ref),
                        "iterations": int(iterations),
                        "f_at_root": float(f_at_root),
                        "ok": ok,
                        "error": err,
                        "guess": float(guess),
                        "bracket": bracket.as_tuple(),
                    }
                )

    return pd.DataFrame(rows)


def trace_case(
    problem: RootProblem,
    index: int = 0,
    methods: Sequence[RootMethod | str] | None = None,
    *,
    policy: ConvergencePolicy | None = None,
    max_iterations: int = 100,
    config: SolverConfig | None = None,
) -> list[ConvergenceTrace]:
    """Convergence history of each method on one case, ready for plotting.

    A method that fails still contributes the iterations it made before
    failing.
    """
    methods = list(RootMethod) if methods is None else [RootMethod(m) for m in methods]
    cfg = DEFAULT_CONFIG if config is None else config
    base = cfg.default_policy() if policy is None else policy

    traces = []
    for method in methods:
        trace = ConvergenceTrace(base, label=method.value)
        try:
            solve_case(
                problem, index, method, max_iterations=max_iterations, policy=trace, config=cfg
            )
        except Exception as e:
            logger.debug("%s failed on %s[%d]: %s", method.value, problem.name, index, e)
        traces.append(trace)
    return traces
