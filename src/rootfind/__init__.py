"""
rootfind

Real roots of continuous single-variable functions on bounded intervals.

The package exposes the everyday API at the top level, so you can write, for
example:

    from rootfind import Bounds, BracketGenerator, StepTolerance, bisection

Bracketing methods take a :class:`Bracket` produced by
:class:`BracketGenerator`; the naive derivative methods take an evaluator
with derivative capabilities and an initial guess.
"""

import logging

from .bracket import BracketGenerator, expand_bracket, first_bracket
from .config import DEFAULT_CONFIG, SolverConfig
from .convergence import (
    AllOf,
    AnyOf,
    Combined,
    ConvergencePolicy,
    FunctionTolerance,
    PolicyFn,
    StepTolerance,
)
from .evaluator import (
    RealFn,
    RealFnD1,
    RealFnD2,
    SupportsEval,
    SupportsEvalD1,
    SupportsEvalD2,
    make_evaluator,
)
from .exceptions import (
    DerivativeTooSmallError,
    InvalidBoundsError,
    InvalidWindowError,
    MaxIterationsExceededError,
    MissingCapabilityError,
    NonFiniteError,
    NotABracketError,
    RootFindingError,
)
from .roots import find_root_results, find_roots
from .solvers import (
    RootMethod,
    bisection,
    bisection_result,
    false_position,
    false_position_illinois,
    false_position_illinois_result,
    false_position_result,
    get_root_method,
    halley_naive,
    halley_naive_result,
    newton_raphson_naive,
    newton_raphson_naive_result,
)
from .types import Bounds, Bracket, RootResult

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Types
    "Bounds",
    "Bracket",
    "RootResult",
    # Evaluators
    "SupportsEval",
    "SupportsEvalD1",
    "SupportsEvalD2",
    "RealFn",
    "RealFnD1",
    "RealFnD2",
    "make_evaluator",
    # Brackets
    "BracketGenerator",
    "first_bracket",
    "expand_bracket",
    # Convergence
    "ConvergencePolicy",
    "StepTolerance",
    "FunctionTolerance",
    "Combined",
    "AllOf",
    "AnyOf",
    "PolicyFn",
    # Config
    "SolverConfig",
    "DEFAULT_CONFIG",
    # Solvers
    "RootMethod",
    "get_root_method",
    "bisection",
    "bisection_result",
    "false_position",
    "false_position_result",
    "false_position_illinois",
    "false_position_illinois_result",
    "newton_raphson_naive",
    "newton_raphson_naive_result",
    "halley_naive",
    "halley_naive_result",
    "find_roots",
    "find_root_results",
    # Errors
    "RootFindingError",
    "NotABracketError",
    "InvalidWindowError",
    "InvalidBoundsError",
    "MaxIterationsExceededError",
    "DerivativeTooSmallError",
    "NonFiniteError",
    "MissingCapabilityError",
]
