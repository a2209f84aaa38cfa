"""Monte Carlo estimate of the geometric efficiency at one source-detector distance."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from geometry.field import Point2DField, add_fields, squared_radius
from geometry.sampling import ISOTROPIC, SOURCE_KINDS, SamplingParameters, check_kind, generate_points

# Detector radius in normalized units (distances are given in detector radii).
DETECTOR_RADIUS_SQ = 1.0


@dataclass(frozen=True)
class TrialResult:
    """Efficiency (%) in [0, 50] and its relative uncertainty (%)."""

    efficiency: float
    relative_error: float
    hits: int
    n: int


def count_hits(positions: Point2DField, radius_sq: float = DETECTOR_RADIUS_SQ) -> int:
    """Number of points on the detector disk (r^2 <= radius_sq)."""
    return int(np.count_nonzero(squared_radius(positions) <= radius_sq))


def relative_uncertainty(efficiency: float, n: int) -> float:
    """
    Poisson relative error (%) of an efficiency obtained from n emissions.

    100 / sqrt(2 n eff / 100); infinite when nothing was counted.
    """
    expected_hits = 2.0 * n * efficiency / 100.0
    if expected_hits <= 0.0:
        return math.inf
    return 100.0 / math.sqrt(expected_hits)


def estimate_efficiency(z: float, source_scale: float, n: int, seed: int, source_kind: str) -> TrialResult:
    """
    Run one trial batch of n emissions at distance z.

    Source points use ``seed``, emission offsets ``seed + 1``. Only the forward
    hemisphere reaches the detector, hence 50 * hits / n instead of 100.
    """
    check_kind(source_kind, SOURCE_KINDS)
    if n < 1:
        raise ValueError("n must be at least 1")
    source = generate_points(n, SamplingParameters(kind=source_kind, scale=source_scale, seed=seed))
    emission = generate_points(n, SamplingParameters(kind=ISOTROPIC, scale=z, seed=seed + 1))
    hits = count_hits(add_fields(source, emission))
    efficiency = 50.0 * hits / n
    return TrialResult(efficiency=efficiency, relative_error=relative_uncertainty(efficiency, n), hits=hits, n=n)
