# charts/plots.py
# ------------------------------------------------------------
# Plotting utilities for the clearance calculator.
#
# Design principles
# -----------------
# - No imports from the core app → no circular deps.
# - Pure matplotlib; caller supplies numbers (clearances, masses).
# - Functions return a matplotlib Figure for UI layers to render
#   (e.g., Streamlit st.pyplot(fig)).
#
# Usage (example in Streamlit)
# ----------------------------
#   from charts.plots import plot_clearance_comparison
#   fig = plot_clearance_comparison(180.0, 170.1)
#   st.pyplot(fig)
#
from __future__ import annotations

import math
from typing import Sequence, Union

import matplotlib.pyplot as plt


Number = Union[int, float]

CLEARANCE_LABELS = ("Initial clearance", "New clearance")
_BAR_FILL = ["#4bc0c099", "#ff638499"]
_BAR_EDGE = ["#4bc0c0", "#ff6384"]


def _validate_xy(x: Sequence[Number], y: Sequence[Number], name: str = "") -> None:
    if x is None or y is None:
        raise ValueError(f"{name}: x and y must be provided.")
    if len(x) != len(y):
        raise ValueError(f"{name}: x and y must be the same length (got {len(x)} vs {len(y)}).")
    if len(x) < 2:
        raise ValueError(f"{name}: need at least 2 points to plot (got {len(x)}).")


def plot_clearance_comparison(
    initial_clearance_mm: Number,
    new_clearance_mm: Number,
    *,
    title: str = "Clearance before and after loading",
) -> plt.Figure:
    """
    Two-bar chart: initial vs new clearance.

    Parameters
    ----------
    initial_clearance_mm : ride height before loading [mm]
    new_clearance_mm     : ride height under the vehicle's weight [mm]
    title                : figure title

    Returns
    -------
    matplotlib.figure.Figure
    """
    values = (float(initial_clearance_mm), float(new_clearance_mm))
    if not all(math.isfinite(v) for v in values):
        raise ValueError(f"plot_clearance_comparison: values must be finite (got {values}).")

    fig, ax = plt.subplots(figsize=(5, 3.5))
    bars = ax.bar(list(CLEARANCE_LABELS), values, color=_BAR_FILL, edgecolor=_BAR_EDGE, linewidth=1)
    ax.bar_label(bars, fmt="%.1f")
    ax.set_ylabel("Clearance (mm)")
    # Start at zero unless a soft spring pushes the new clearance below it
    lower = min(0.0, values[1])
    ax.set_ylim(bottom=lower, top=max(values) * 1.15 if max(values) > 0 else 1.0)
    ax.grid(True, axis="y", alpha=0.35)
    ax.set_title(title)
    fig.tight_layout()
    return fig


def plot_clearance_vs_mass(
    masses_kg: Sequence[Number],
    new_clearances_mm: Sequence[Number],
    *,
    initial_clearance_mm: Union[Number, None] = None,
    current_mass_kg: Union[Number, None] = None,
    title: str = "New clearance vs vehicle mass",
) -> plt.Figure:
    """
    Curve of the loaded clearance across a mass range.

    Parameters
    ----------
    masses_kg            : list/array of masses [kg]
    new_clearances_mm    : new clearance at each mass [mm]; NaN marks failed points
    initial_clearance_mm : optional dashed reference line (unloaded height)
    current_mass_kg      : optional vertical marker for the current mass
    title                : figure title

    Returns
    -------
    matplotlib.figure.Figure
    """
    _validate_xy(masses_kg, new_clearances_mm, "plot_clearance_vs_mass")

    fig, ax = plt.subplots()
    ax.plot(masses_kg, new_clearances_mm, linewidth=2, label="New clearance")
    if initial_clearance_mm is not None:
        ax.axhline(float(initial_clearance_mm), linestyle="--", linewidth=1, label="Initial clearance")
    if current_mass_kg is not None:
        ax.axvline(float(current_mass_kg), linestyle=":", linewidth=1, color="grey")

    ax.set_xlabel("Vehicle mass (kg)")
    ax.set_ylabel("Clearance (mm)")
    ax.grid(True, which="both", alpha=0.35)
    ax.legend()
    ax.set_title(title)
    fig.tight_layout()
    return fig


__all__ = [
    "CLEARANCE_LABELS",
    "plot_clearance_comparison",
    "plot_clearance_vs_mass",
]
