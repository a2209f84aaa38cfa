"""Plot simulated efficiency curves against the point-source approximation."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np

from efficiency.analytic import point_source_efficiency
from efficiency.sweep import SweepResult


def _absolute_errors(result: SweepResult) -> np.ndarray:
    err = result.efficiency * result.relative_error / 100.0
    return np.where(np.isfinite(err), err, 0.0)


def plot_efficiency_curves(
    results: Mapping[str, SweepResult],
    output_path: Path | str,
    title: str | None = None,
) -> Path:
    """
    Save one figure with every labelled result and a dense point-source reference.

    Error bars are the relative uncertainty converted to absolute efficiency.
    """
    fig, ax = plt.subplots(figsize=(6, 4))
    z_all = np.concatenate([r.z for r in results.values()]) if results else np.zeros(1)
    z_ref = np.linspace(float(np.min(z_all)), float(np.max(z_all)), 200)
    ax.plot(z_ref, point_source_efficiency(z_ref), color="k", linestyle="--", label="Point source")
    for label, result in results.items():
        ax.errorbar(
            result.z,
            result.efficiency,
            yerr=_absolute_errors(result),
            marker="o",
            markersize=3,
            capsize=2,
            linestyle="-",
            label=label,
        )
    ax.set_xlabel("z / r_d")
    ax.set_ylabel("Geometric efficiency (%)")
    ax.set_ylim(bottom=0.0)
    if title:
        ax.set_title(title)
    ax.legend()
    fig.tight_layout()
    out_path = Path(output_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out_path, dpi=150)
    plt.close(fig)
    return out_path


def plot_efficiency_curve(result: SweepResult, output_path: Path | str, label: str = "Model") -> Path:
    """Single-result convenience wrapper."""
    return plot_efficiency_curves({label: result}, output_path)
