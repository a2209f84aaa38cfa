"""Console progress table printed while a sweep runs."""

from __future__ import annotations

from typing import Callable

from efficiency.sweep import SweepProgress


class ProgressTable:
    """Callable progress sink: header on first use, one row per grid point."""

    header = "Completion(%)\tEfficiency (%)\t\tRelative error (%)"

    def __init__(self, write: Callable[[str], None] = print) -> None:
        self.write = write
        self._started = False

    def start(self) -> None:
        if not self._started:
            self.write(self.header)
            self._started = True

    def __call__(self, event: SweepProgress) -> None:
        self.start()
        self.write(f"{100.0 * event.completion:.1f}\t\t{event.efficiency:.6g}\t\t{event.relative_error:.6g}")
