"""
rootfind.diagnostics

Benchmark problems, convergence traces, method sweeps and plots.

Plotting needs matplotlib (``pip install rootfind[plot]``); everything else
only needs the core dependencies.
"""

from .benchmarks import reference_root, run_benchmarks, solve_case, trace_case
from .plots import plot_benchmark_iterations, plot_convergence
from .problems import (
    RootProblem,
    all_problems,
    costabile06_problems,
    ford95_problems,
    misc_problems,
)
from .trace import ConvergenceTrace, TraceRow

__all__ = [
    # Problems
    "RootProblem",
    "ford95_problems",
    "costabile06_problems",
    "misc_problems",
    "all_problems",
    # Traces
    "ConvergenceTrace",
    "TraceRow",
    # Benchmarks
    "reference_root",
    "solve_case",
    "run_benchmarks",
    "trace_case",
    # Plots
    "plot_convergence",
    "plot_benchmark_iterations",
]
