"""Sweep the efficiency estimator over a grid of source-detector distances.

Circular detectors use one trial per grid point. Annular detectors subtract the
efficiency of the inner (hole) disk from that of the outer disk; in inner-radius
units both z and the source scale are multiplied by the outer/inner fraction.
Relative errors of the two trials are combined in quadrature.
"""

from __future__ import annotations

import math
import warnings
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Callable, Iterator, List, NamedTuple, Optional, Sequence

import numpy as np
from numpy.typing import NDArray

from efficiency.analytic import linspace, point_source_efficiency
from efficiency.estimator import estimate_efficiency
from geometry.sampling import SOURCE_KINDS, ConfigurationError, check_kind

CIRCULAR = "circular"
ANNULAR = "annular"
DETECTOR_KINDS = (CIRCULAR, ANNULAR)

DEFAULT_SEED = 15763027
# Each grid point consumes two consecutive seeds (source, emission).
SEED_STRIDE = 2


@dataclass(frozen=True)
class SweepConfig:
    """All parameters of one efficiency sweep."""

    z_min: float
    z_max: float
    num_points: int
    source_scale: float
    power: int
    source_kind: str = "uniform"
    detector_kind: str = CIRCULAR
    detector_fraction: Optional[float] = None  # outer/inner radius, annular only
    seed: int = DEFAULT_SEED
    workers: int = 1

    @property
    def samples_per_point(self) -> int:
        return 10 ** int(self.power)

    def validate(self) -> "SweepConfig":
        """Raise ConfigurationError for anything that would fail mid-sweep."""
        try:
            check_kind(self.source_kind, SOURCE_KINDS)
        except ConfigurationError:
            raise ConfigurationError(
                f"Not a valid source type: {self.source_kind!r}. Choose 'uniform' or 'gaussian'"
            ) from None
        if self.detector_kind not in DETECTOR_KINDS:
            raise ConfigurationError(
                f"Detector types can only be circular/annular, got {self.detector_kind!r}"
            )
        if self.num_points < 1:
            raise ConfigurationError("number of points must be at least 1")
        if self.power < 0:
            raise ConfigurationError("power must be non-negative")
        for name in ("z_min", "z_max", "source_scale"):
            if not math.isfinite(getattr(self, name)):
                raise ConfigurationError(f"{name} must be a finite number")
        if self.source_scale < 0:
            raise ConfigurationError("source scale must be non-negative")
        if self.seed < 0:
            raise ConfigurationError("seed must be non-negative")
        if self.workers < 1:
            raise ConfigurationError("workers must be at least 1")
        if self.detector_kind == ANNULAR:
            if self.detector_fraction is None:
                raise ConfigurationError("annular detector requires an outer/inner fraction")
            if not math.isfinite(self.detector_fraction) or not self.detector_fraction > 1.0:
                raise ConfigurationError("detector outer/inner fraction must be greater than 1")
        return self

    def grid(self) -> NDArray[np.float64]:
        return linspace(self.z_min, self.z_max, self.num_points)


class SweepRow(NamedTuple):
    """One line of the result table."""

    z: float
    point_source: float
    efficiency: float
    relative_error: float


@dataclass
class SweepResult:
    """Column arrays of a completed sweep, in grid order."""

    z: NDArray[np.float64]
    point_source: NDArray[np.float64]
    efficiency: NDArray[np.float64]
    relative_error: NDArray[np.float64]

    def __len__(self) -> int:
        return int(self.z.size)

    def rows(self) -> Iterator[SweepRow]:
        for values in zip(self.z, self.point_source, self.efficiency, self.relative_error):
            yield SweepRow(*(float(v) for v in values))

    def as_array(self) -> NDArray[np.float64]:
        """(N, 4) array with columns z, point source, model, relative uncertainty."""
        return np.column_stack([self.z, self.point_source, self.efficiency, self.relative_error])


@dataclass(frozen=True)
class SweepProgress:
    """Progress event emitted once per grid point."""

    index: int
    completion: float
    z: float
    efficiency: float
    relative_error: float


ProgressCallback = Callable[[SweepProgress], None]


def derive_seed(base_seed: int, index: int) -> int:
    """Seed of grid point ``index``; index 0 keeps the base seed."""
    return int(base_seed) + SEED_STRIDE * int(index)


def evaluate_point(
    z: float,
    source_scale: float,
    n: int,
    seed: int,
    source_kind: str,
    detector_kind: str,
    detector_fraction: Optional[float] = None,
) -> tuple[float, float]:
    """Return (efficiency, relative error) for one grid point."""
    if detector_kind == CIRCULAR:
        trial = estimate_efficiency(z, source_scale, n, seed, source_kind)
        return trial.efficiency, trial.relative_error
    if detector_kind == ANNULAR:
        if detector_fraction is None:
            raise ConfigurationError("annular detector requires an outer/inner fraction")
        outer = estimate_efficiency(z, source_scale, n, seed, source_kind)
        inner = estimate_efficiency(
            z * detector_fraction, source_scale * detector_fraction, n, seed, source_kind
        )
        combined = math.sqrt(outer.relative_error**2 + inner.relative_error**2)
        return outer.efficiency - inner.efficiency, combined
    raise ConfigurationError(f"Detector types can only be circular/annular, got {detector_kind!r}")


def _completion(grid: NDArray[np.float64], index: int) -> float:
    last = float(grid[-1])
    if last == 0.0:
        return (index + 1) / grid.size
    return float(grid[index]) / last


def run_sweep(
    config: SweepConfig,
    grid: Sequence[float] | None = None,
    progress: ProgressCallback | None = None,
) -> SweepResult:
    """
    Estimate the efficiency at every grid point.

    Args:
        config: Sweep parameters (validated before sampling starts).
        grid: Distances to evaluate; defaults to linspace(z_min, z_max, num_points).
        progress: Optional callback receiving one SweepProgress per point, in grid order.

    Returns:
        SweepResult with point-source reference values alongside the simulation.
    """
    config.validate()
    z_grid = config.grid() if grid is None else np.asarray(grid, dtype=float)
    if z_grid.ndim != 1 or z_grid.size == 0:
        raise ConfigurationError("distance grid must be a non-empty 1D sequence")
    n = config.samples_per_point
    jobs = [
        (
            float(z),
            config.source_scale,
            n,
            derive_seed(config.seed, i),
            config.source_kind,
            config.detector_kind,
            config.detector_fraction,
        )
        for i, z in enumerate(z_grid)
    ]

    outcomes: List[tuple[float, float]]
    if config.workers > 1 and len(jobs) > 1:
        with ProcessPoolExecutor(max_workers=config.workers) as executor:
            futures = [executor.submit(evaluate_point, *job) for job in jobs]
            outcomes = []
            for i, future in enumerate(futures):
                outcomes.append(future.result())
                _report(progress, z_grid, i, outcomes[-1])
    else:
        outcomes = []
        for i, job in enumerate(jobs):
            outcomes.append(evaluate_point(*job))
            _report(progress, z_grid, i, outcomes[-1])

    efficiency = np.array([o[0] for o in outcomes], dtype=float)
    rel_err = np.array([o[1] for o in outcomes], dtype=float)
    for z, err in zip(z_grid, rel_err):
        if not np.isfinite(err):
            warnings.warn(f"No hits at z={z:g}; relative uncertainty is infinite", RuntimeWarning, stacklevel=2)
    return SweepResult(
        z=z_grid,
        point_source=np.asarray(point_source_efficiency(z_grid), dtype=float),
        efficiency=efficiency,
        relative_error=rel_err,
    )


def _report(
    progress: ProgressCallback | None, grid: NDArray[np.float64], index: int, outcome: tuple[float, float]
) -> None:
    if progress is None:
        return
    progress(
        SweepProgress(
            index=index,
            completion=_completion(grid, index),
            z=float(grid[index]),
            efficiency=outcome[0],
            relative_error=outcome[1],
        )
    )
