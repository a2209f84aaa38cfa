"""Geometric detection efficiency of an extended source by Monte Carlo.

Run `python main.py uniform circular` (or `gaussian` / `annular`) and answer the
prompts: z range in detector radii, number of grid points, source size, power
(10**power emissions per point), outer/inner fraction for annular detectors and
the output file name. The result is a tab-separated table comparing the
simulation with the point-source approximation.
"""

from __future__ import annotations

from pathlib import Path
import sys

# Ensure src/ is on sys.path for direct script execution.
ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from efficiency.cli import main


if __name__ == "__main__":
    sys.exit(main())
