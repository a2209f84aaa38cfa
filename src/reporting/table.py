"""Tab-separated export/import of efficiency-vs-distance tables."""

from __future__ import annotations

from pathlib import Path

import numpy as np

from efficiency.sweep import SweepResult

HEADER_COLUMNS = ("z/rd", "point source", "Model", "Relative uncertainty")
HEADER = "\t".join(HEADER_COLUMNS)


def write_efficiency_table(path: Path | str, result: SweepResult, verbose: bool = True) -> Path:
    """Write the header plus one row per grid point (6 significant digits)."""
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    np.savetxt(out_path, result.as_array(), fmt="%.6g", delimiter="\t", header=HEADER, comments="")
    if verbose:
        print("Wrote output file")
    return out_path


def read_efficiency_table(path: Path | str) -> SweepResult:
    """Load a table written by write_efficiency_table."""
    data = np.loadtxt(Path(path), delimiter="\t", skiprows=1, ndmin=2)
    if data.shape[1] != len(HEADER_COLUMNS):
        raise ValueError(f"expected {len(HEADER_COLUMNS)} columns, found {data.shape[1]}")
    return SweepResult(
        z=data[:, 0],
        point_source=data[:, 1],
        efficiency=data[:, 2],
        relative_error=data[:, 3],
    )
