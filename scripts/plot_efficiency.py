"""Plot efficiency tables (simulation vs. point-source approximation)."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Dict, List

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from efficiency.sweep import SweepResult
from reporting.table import read_efficiency_table
from visualization.curves import plot_efficiency_curves


def _load_tables(paths: List[Path]) -> Dict[str, SweepResult]:
    tables: Dict[str, SweepResult] = {}
    for path in paths:
        files = sorted(path.glob("*.txt")) if path.is_dir() else [path]
        for file in files:
            tables[file.stem] = read_efficiency_table(file)
    return tables


def main() -> None:
    parser = argparse.ArgumentParser(description="Plot geometric efficiency tables.")
    parser.add_argument("tables", type=Path, nargs="+", help="Table files or directories of tables.")
    parser.add_argument("--output", type=Path, default=Path("results/efficiency/efficiency.png"), help="PNG path.")
    parser.add_argument("--title", default=None, help="Figure title.")
    args = parser.parse_args()
    tables = _load_tables(args.tables)
    if not tables:
        raise SystemExit(f"No tables found under {', '.join(str(p) for p in args.tables)}")
    out_path = plot_efficiency_curves(tables, args.output, title=args.title)
    print(f"Saved plot to {out_path}")


if __name__ == "__main__":
    main()
