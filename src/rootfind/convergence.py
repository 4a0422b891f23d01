"""Convergence policies.

A policy decides, once per iteration, whether an iterative root finder should
stop. Solvers call :meth:`ConvergencePolicy.is_converged` with the previous
iterate, the current iterate, ``f`` at the current iterate and the 1-based
iteration index, and treat every policy the same way.

Canned policies:

* :class:`StepTolerance` stops when ``|x_cur - x_prev| <= epsilon``.
* :class:`FunctionTolerance` stops when ``|f(x_cur)| <= epsilon``.
* :class:`Combined` stops when either of the two fires.

Policies compose with ``&`` (all must fire) and ``|`` (any may fire):

    >>> policy = StepTolerance(1e-6) & FunctionTolerance(1e-9)
    >>> policy.is_converged(0.1, 0.1 + 1e-7, 1e-8, 3)
    False
    >>> policy.is_converged(0.1, 0.1 + 1e-7, 1e-12, 3)
    True

Custom rules subclass :class:`ConvergencePolicy`, or wrap a plain function
with :class:`PolicyFn`.

Both canned tolerances have failure modes worth knowing. A step tolerance can
fire far from the root when a huge derivative makes Newton-Raphson take tiny
steps. A residual tolerance can fire far from the root of a flat function:
``f(x) = -1e-7 x + 0.01`` has its root at ``1e5`` yet ``|f| <= 1e-3`` anywhere
in ``[9e4, 1.1e5]``.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass


class ConvergencePolicy(ABC):
    """Decision interface invoked once per solver iteration."""

    __slots__ = ()

    @abstractmethod
    def is_converged(
        self, prev_x: float, cur_x: float, f_cur_x: float, iteration: int
    ) -> bool:
        """Return True to stop and accept ``cur_x`` as the root."""

    def __and__(self, other: ConvergencePolicy) -> AllOf:
        return AllOf((self, other))

    def __or__(self, other: ConvergencePolicy) -> AnyOf:
        return AnyOf((self, other))


def _check_epsilon(name: str, epsilon: float, *, allow_zero: bool) -> None:
    if not math.isfinite(epsilon):
        raise ValueError(f"{name} epsilon must be finite, got {epsilon!r}")
    if epsilon < 0.0 or (epsilon == 0.0 and not allow_zero):
        bound = ">= 0" if allow_zero else "> 0"
        raise ValueError(f"{name} epsilon must be {bound}, got {epsilon!r}")


@dataclass(frozen=True, slots=True)
class StepTolerance(ConvergencePolicy):
    epsilon: float

    def __post_init__(self) -> None:
        _check_epsilon("StepTolerance", self.epsilon, allow_zero=False)

    def is_converged(
        self, prev_x: float, cur_x: float, f_cur_x: float, iteration: int
    ) -> bool:
        return abs(cur_x - prev_x) <= self.epsilon


@dataclass(frozen=True, slots=True)
class FunctionTolerance(ConvergencePolicy):
    epsilon: float

    def __post_init__(self) -> None:
        _check_epsilon("FunctionTolerance", self.epsilon, allow_zero=True)

    def is_converged(
        self, prev_x: float, cur_x: float, f_cur_x: float, iteration: int
    ) -> bool:
        return abs(f_cur_x) <= self.epsilon


@dataclass(frozen=True, slots=True)
class AllOf(ConvergencePolicy):
    policies: tuple[ConvergencePolicy, ...]

    def __post_init__(self) -> None:
        if not self.policies:
            raise ValueError("AllOf needs at least one policy")

    def is_converged(
        self, prev_x: float, cur_x: float, f_cur_x: float, iteration: int
    ) -> bool:
        return all(
            p.is_converged(prev_x, cur_x, f_cur_x, iteration) for p in self.policies
        )


@dataclass(frozen=True, slots=True)
class AnyOf(ConvergencePolicy):
    policies: tuple[ConvergencePolicy, ...]

    def __post_init__(self) -> None:
        if not self.policies:
            raise ValueError("AnyOf needs at least one policy")

    def is_converged(
        self, prev_x: float, cur_x: float, f_cur_x: float, iteration: int
    ) -> bool:
        return any(
            p.is_converged(prev_x, cur_x, f_cur_x, iteration) for p in self.policies
        )


@dataclass(frozen=True, slots=True)
class Combined(ConvergencePolicy):
    """Stop when either the step or the residual tolerance fires."""

    step_epsilon: float
    f_epsilon: float

    def __post_init__(self) -> None:
        _check_epsilon("Combined step", self.step_epsilon, allow_zero=False)
        _check_epsilon("Combined residual", self.f_epsilon, allow_zero=True)

    def is_converged(
        self, prev_x: float, cur_x: float, f_cur_x: float, iteration: int
    ) -> bool:
        return abs(cur_x - prev_x) <= self.step_epsilon or abs(f_cur_x) <= self.f_epsilon


@dataclass(frozen=True, slots=True)
class PolicyFn(ConvergencePolicy):
    """Adapts ``fn(prev_x, cur_x, f_cur_x, iteration) -> bool`` to a policy."""

    fn: Callable[[float, float, float, int], bool]

    def is_converged(
        self, prev_x: float, cur_x: float, f_cur_x: float, iteration: int
    ) -> bool:
        return bool(self.fn(prev_x, cur_x, f_cur_x, iteration))


def as_policy(
    policy: ConvergencePolicy | Callable[[float, float, float, int], bool],
) -> ConvergencePolicy:
    if isinstance(policy, ConvergencePolicy):
        return policy
    if callable(policy):
        return PolicyFn(policy)
    raise TypeError(f"Expected a ConvergencePolicy, got {type(policy).__name__}")


__all__ = [
    "ConvergencePolicy",
    "StepTolerance",
    "FunctionTolerance",
    "AllOf",
    "AnyOf",
    "Combined",
    "PolicyFn",
    "as_policy",
]
