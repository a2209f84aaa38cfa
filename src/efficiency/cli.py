"""Command-line entry point: prompt for parameters, sweep, write the table."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Sequence

from efficiency.sweep import DEFAULT_SEED, DETECTOR_KINDS, run_sweep
from geometry.field import FieldLengthError
from geometry.sampling import SOURCE_KINDS, ConfigurationError
from reporting.progress import ProgressTable
from reporting.prompts import prompt_sweep_parameters
from reporting.table import write_efficiency_table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="detector-efficiency",
        description="Monte Carlo geometric efficiency of an extended source facing a circular/annular detector.",
    )
    parser.add_argument("source", choices=SOURCE_KINDS, help="Source distribution ('uniform' or 'gaussian').")
    parser.add_argument("detector", choices=DETECTOR_KINDS, help="Detector shape ('circular' or 'annular').")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Base random seed.")
    parser.add_argument("--workers", type=int, default=1, help="Worker processes for the sweep.")
    parser.add_argument("--plot", type=Path, default=None, help="Optional PNG path for the efficiency curve.")
    return parser


def main(argv: Sequence[str] | None = None, input_fn: Callable[[], str] = input) -> int:
    """Run the interactive sweep; returns the process exit status."""
    args = build_parser().parse_args(argv)
    try:
        config, filename = prompt_sweep_parameters(
            args.source, args.detector, seed=args.seed, workers=args.workers, input_fn=input_fn
        )
        result = run_sweep(config, progress=ProgressTable())
    except (ConfigurationError, FieldLengthError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    except EOFError:
        print("ERROR: input ended before all parameters were given", file=sys.stderr)
        return 1
    write_efficiency_table(filename, result)
    if args.plot is not None:
        from visualization.curves import plot_efficiency_curve

        out = plot_efficiency_curve(result, args.plot, label=f"{args.source} source, {args.detector} detector")
        print(f"Saved plot to {out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
