"""Run a batch of efficiency sweeps without prompts.

Each scenario is one (source kind, detector kind, source size, fraction) setting
evaluated on a common distance grid. One tab-separated table per scenario is
written to the output directory, named after the scenario.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from efficiency.sweep import ANNULAR, CIRCULAR, DEFAULT_SEED, SweepConfig, SweepResult, run_sweep
from reporting.table import write_efficiency_table


@dataclass(frozen=True)
class EfficiencyScenario:
    """Named source/detector combination."""

    name: str
    source_kind: str
    detector_kind: str
    source_scale: float
    detector_fraction: Optional[float] = None


def default_scenarios() -> List[EfficiencyScenario]:
    """Small and large uniform/gaussian sources on circular and annular detectors."""
    return [
        EfficiencyScenario("uniform_small_circular", "uniform", CIRCULAR, source_scale=0.1),
        EfficiencyScenario("uniform_large_circular", "uniform", CIRCULAR, source_scale=1.0),
        EfficiencyScenario("gaussian_small_circular", "gaussian", CIRCULAR, source_scale=0.1),
        EfficiencyScenario("uniform_small_annular", "uniform", ANNULAR, source_scale=0.1, detector_fraction=4.0),
    ]


def run_scenarios(
    output_dir: Path,
    z_min: float = 0.0,
    z_max: float = 5.0,
    num_points: int = 11,
    power: int = 5,
    seed: int = DEFAULT_SEED,
    workers: int = 1,
    scenarios: Iterable[EfficiencyScenario] | None = None,
) -> Dict[str, SweepResult]:
    """Sweep every scenario and write <output_dir>/<name>.txt."""
    output_dir.mkdir(parents=True, exist_ok=True)
    scenarios = list(scenarios) if scenarios is not None else default_scenarios()
    results: Dict[str, SweepResult] = {}
    for scn in scenarios:
        config = SweepConfig(
            z_min=z_min,
            z_max=z_max,
            num_points=num_points,
            source_scale=scn.source_scale,
            power=power,
            source_kind=scn.source_kind,
            detector_kind=scn.detector_kind,
            detector_fraction=scn.detector_fraction,
            seed=seed,
            workers=workers,
        )
        result = run_sweep(config)
        write_efficiency_table(output_dir / f"{scn.name}.txt", result, verbose=False)
        results[scn.name] = result
    return results


def main() -> None:
    parser = argparse.ArgumentParser(description="Run a batch of geometric efficiency sweeps.")
    parser.add_argument("--output", type=Path, default=Path("results/efficiency"), help="Directory for the tables.")
    parser.add_argument("--z-min", type=float, default=0.0, help="Smallest distance (detector radii).")
    parser.add_argument("--z-max", type=float, default=5.0, help="Largest distance (detector radii).")
    parser.add_argument("--points", type=int, default=11, help="Number of grid points.")
    parser.add_argument("--power", type=int, default=5, help="10**power emissions per grid point.")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Base random seed.")
    parser.add_argument("--workers", type=int, default=1, help="Worker processes per sweep.")
    args = parser.parse_args()
    results = run_scenarios(
        output_dir=args.output,
        z_min=args.z_min,
        z_max=args.z_max,
        num_points=args.points,
        power=args.power,
        seed=args.seed,
        workers=args.workers,
    )
    print(f"Tables for {len(results)} scenarios written to: {args.output}")


if __name__ == "__main__":
    main()
