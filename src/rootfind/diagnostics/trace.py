from __future__ import annotations

from dataclasses import dataclass, field

import pandas as pd

from rootfind.convergence import ConvergencePolicy

__all__ = ["TraceRow", "ConvergenceTrace"]


@dataclass(frozen=True, slots=True)
class TraceRow:
    iteration: int
    prev_x: float
    x: float
    f_x: float
    converged: bool


@dataclass(slots=True)
class ConvergenceTrace(ConvergencePolicy):
    """Records every decision of ``policy`` while delegating to it.

    Pass the trace to a solver in place of the policy, then inspect
    :attr:`rows` or :meth:`to_frame`. A trace accumulates across calls; use
    :meth:`clear` (or a fresh trace) per solve.
    """

    policy: ConvergencePolicy
    label: str = ""
    rows: list[TraceRow] = field(default_factory=list)

    def is_converged(
        self, prev_x: float, cur_x: float, f_cur_x: float, iteration: int
    ) -> bool:
        converged = self.policy.is_converged(prev_x, cur_x, f_cur_x, iteration)
        self.rows.append(TraceRow(iteration, prev_x, cur_x, f_cur_x, converged))
        return converged

    def clear(self) -> None:
        self.rows.clear()

    def __len__(self) -> int:
        return len(self.rows)

    def to_frame(self) -> pd.DataFrame:
        df = pd.DataFrame(
            [
                {
                    "iteration": r.iteration,
                    "prev_x": r.prev_x,
                    "x": r.x,
                    "f_x": r.f_x,
                    "step": abs(r.x - r.prev_x),
                    "abs_f": abs(r.f_x),
                    "converged": r.converged,
                }
                for r in self.rows
            ],
            columns=["iteration", "prev_x", "x", "f_x", "step", "abs_f", "converged"],
        )
        if self.label:
            df.insert(0, "label", self.label)
        return df
