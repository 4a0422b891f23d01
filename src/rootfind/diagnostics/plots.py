from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np
import pandas as pd

from rootfind.diagnostics.trace import ConvergenceTrace

__all__ = ["plot_convergence", "plot_benchmark_iterations"]


def _get_plt():
    try:
        import matplotlib.pyplot as plt
    except ModuleNotFoundError as e:
        raise ModuleNotFoundError(
            "Plotting requires matplotlib. Install it with: pip install rootfind[plot]"
        ) from e
    return plt


def _style(ax) -> None:
    ax.grid(axis="both", alpha=0.25)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    if ax.get_legend() is not None:
        ax.get_legend().set_frame_on(True)


def _as_frame(data: ConvergenceTrace | Sequence[ConvergenceTrace] | pd.DataFrame) -> pd.DataFrame:
    if isinstance(data, pd.DataFrame):
        df = data
    elif isinstance(data, ConvergenceTrace):
        df = data.to_frame()
    else:
        df = pd.concat([t.to_frame() for t in data], ignore_index=True)

    missing = [c for c in ("iteration", "step", "abs_f") if c not in df.columns]
    if missing:
        raise ValueError(f"DataFrame missing required columns: {missing}")
    if "label" not in df.columns:
        df = df.assign(label="")
    return df


def plot_convergence(
    data: ConvergenceTrace | Sequence[ConvergenceTrace] | pd.DataFrame,
    *,
    y: str = "abs_f",
    ax: Any | None = None,
    title: str = "Convergence history",
):
    """
    Semilog plot of ``|f(x_k)|`` (or the step ``|x_k - x_{k-1}|``) per iteration.

    Parameters
    ----------
    data :
        One trace, several traces (one line per trace label), or the
        concatenated output of :meth:`ConvergenceTrace.to_frame`.
    y :
        ``"abs_f"`` or ``"step"``.
    ax :
        Optional matplotlib axes.

    Returns
    -------
    (fig, ax)
    """
    if y not in ("abs_f", "step"):
        raise ValueError(f"y must be 'abs_f' or 'step', got {y!r}")
    df = _as_frame(data)
    plt = _get_plt()

    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(7, 4), constrained_layout=True)
    else:
        fig = ax.figure

    # zeros would vanish from a log axis
    floor = np.finfo(float).tiny
    for label, grp in df.groupby("label", sort=False):
        vals = np.maximum(grp[y].to_numpy(dtype=float), floor)
        ax.semilogy(grp["iteration"].to_numpy(), vals, marker="o", ms=3, label=label or y)

    ax.set_title(title)
    ax.set_xlabel("iteration")
    ax.set_ylabel("|f(x)|" if y == "abs_f" else "|x_k - x_{k-1}|")
    ax.legend()
    _style(ax)
    return fig, ax


def plot_benchmark_iterations(
    df: pd.DataFrame,
    *,
    ax: Any | None = None,
    title: str = "Iterations per method",
):
    """Bar chart of mean iterations of successful runs, one bar per method."""
    for col in ("method", "iterations", "ok"):
        if col not in df.columns:
            raise ValueError(f"DataFrame missing required column: {col!r}")
    plt = _get_plt()

    summary = df[df["ok"]].groupby("method", sort=False)["iterations"].mean()

    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(7, 4), constrained_layout=True)
    else:
        fig = ax.figure

    ax.bar(summary.index.astype(str), summary.to_numpy(dtype=float))
    ax.set_title(title)
    ax.set_ylabel("mean iterations (converged runs)")
    _style(ax)
    return fig, ax
