"""
Root-finding methods.

Bracketing methods (bisection, false position, Illinois) take a bracket and
never leave it. The naive derivative methods (Newton-Raphson, Halley) take an
initial guess and carry no safeguard.

Each method comes in two forms: ``<name>_result`` returns a
:class:`~rootfind.types.RootResult` with diagnostics, ``<name>`` returns the
root as a float.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from rootfind.types import RootResult

from .bracketing import (
    bisection,
    bisection_iteration_bound,
    bisection_result,
    false_position,
    false_position_illinois,
    false_position_illinois_result,
    false_position_result,
)
from .naive import (
    halley_naive,
    halley_naive_result,
    newton_raphson_naive,
    newton_raphson_naive_result,
)


class RootMethod(str, Enum):
    BISECTION = "bisection"
    FALSE_POSITION = "false_position"
    ILLINOIS = "false_position_illinois"
    NEWTON_RAPHSON_NAIVE = "newton_raphson_naive"
    HALLEY_NAIVE = "halley_naive"

    @property
    def is_bracketing(self) -> bool:
        return self in _BRACKETING


_BRACKETING = frozenset(
    {RootMethod.BISECTION, RootMethod.FALSE_POSITION, RootMethod.ILLINOIS}
)

_METHODS: dict[RootMethod, Callable[..., RootResult]] = {
    RootMethod.BISECTION: bisection_result,
    RootMethod.FALSE_POSITION: false_position_result,
    RootMethod.ILLINOIS: false_position_illinois_result,
    RootMethod.NEWTON_RAPHSON_NAIVE: newton_raphson_naive_result,
    RootMethod.HALLEY_NAIVE: halley_naive_result,
}


def get_root_method(method: RootMethod | str) -> Callable[..., RootResult]:
    """Return the ``*_result`` solver registered for ``method``."""
    try:
        return _METHODS[RootMethod(method)]
    except ValueError:
        known = ", ".join(m.value for m in RootMethod)
        raise ValueError(f"Unknown root method {method!r}; expected one of: {known}") from None


__all__ = [
    "RootMethod",
    "get_root_method",
    "bisection",
    "bisection_result",
    "bisection_iteration_bound",
    "false_position",
    "false_position_result",
    "false_position_illinois",
    "false_position_illinois_result",
    "newton_raphson_naive",
    "newton_raphson_naive_result",
    "halley_naive",
    "halley_naive_result",
]
