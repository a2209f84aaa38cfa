"""Interactive entry of sweep parameters."""

from __future__ import annotations

from typing import Callable, Tuple

from efficiency.sweep import ANNULAR, DEFAULT_SEED, SweepConfig
from geometry.sampling import ConfigurationError

InputFn = Callable[[], str]
OutputFn = Callable[[str], None]


def _read(label: str, cast, input_fn: InputFn, output_fn: OutputFn):
    output_fn(label)
    raw = input_fn().strip()
    try:
        return cast(raw)
    except ValueError:
        raise ConfigurationError(f"invalid value for {label.rstrip(':')}: {raw!r}") from None


def prompt_sweep_parameters(
    source_kind: str,
    detector_kind: str,
    seed: int = DEFAULT_SEED,
    workers: int = 1,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> Tuple[SweepConfig, str]:
    """
    Ask for z range, grid size, source scale, power, fraction (annular) and file name.

    Returns:
        (validated SweepConfig, output filename)
    """
    z_min = _read("z_min/rd:", float, input_fn, output_fn)
    z_max = _read("z_max/rd:", float, input_fn, output_fn)
    num_points = _read("number of points:", int, input_fn, output_fn)
    source_scale = _read("source/rd:", float, input_fn, output_fn)
    power = _read("Power:", int, input_fn, output_fn)
    fraction = None
    if detector_kind == ANNULAR:
        fraction = _read("Detector outer/inner:", float, input_fn, output_fn)
    filename = _read("Filename:", str, input_fn, output_fn)
    if not filename:
        raise ConfigurationError("output filename must not be empty")
    config = SweepConfig(
        z_min=z_min,
        z_max=z_max,
        num_points=num_points,
        source_scale=source_scale,
        power=power,
        source_kind=source_kind,
        detector_kind=detector_kind,
        detector_fraction=fraction,
        seed=seed,
        workers=workers,
    )
    return config.validate(), filename
