"""Closed-form helpers: distance grids and the point-source efficiency."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray


def linspace(start: float, stop: float, num_points: int) -> NDArray[np.float64]:
    """Evenly spaced grid including both end points (a single point returns [start])."""
    if num_points < 1:
        raise ValueError("num_points must be at least 1")
    return np.linspace(float(start), float(stop), int(num_points))


def point_source_efficiency(z: ArrayLike) -> NDArray[np.float64] | float:
    """
    Geometric efficiency (%) of an on-axis point source at distance z (in detector radii).

    ps(z) = 50 - 50 z / sqrt(1 + z^2); 50 at contact, tending to 0 far away.
    """
    z_arr = np.asarray(z, dtype=float)
    ps = 50.0 - 50.0 * z_arr / np.sqrt(1.0 + z_arr**2)
    if ps.ndim == 0:
        return float(ps)
    return ps
