"""Efficiency curve plotting."""

from pathlib import Path

import numpy as np

from efficiency.sweep import SweepResult
from visualization.curves import plot_efficiency_curves


def test_plot_handles_infinite_errors(tmp_path: Path):
    """Infinite relative errors are drawn without error bars and the PNG is saved."""
    result = SweepResult(
        z=np.array([0.0, 1.0, 2.0]),
        point_source=np.array([50.0, 14.6, 5.3]),
        efficiency=np.array([49.0, 14.0, 0.0]),
        relative_error=np.array([0.2, 1.0, np.inf]),
    )
    out = plot_efficiency_curves({"a": result, "b": result}, tmp_path / "plots" / "eff.png", title="test")
    assert out.exists()
    assert out.stat().st_size > 0
