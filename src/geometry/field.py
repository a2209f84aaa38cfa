"""Hold index-aligned 2D point sets and the arithmetic used by the hit test."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


class FieldLengthError(ValueError):
    """Raised when two point fields of different length are combined."""


@dataclass(frozen=True)
class Point2DField:
    """
    Parallel x/y coordinate arrays; index i is one logical point.

    Fields are built once by a sampler and only read afterwards.
    """

    x: NDArray[np.float64]
    y: NDArray[np.float64]

    def __post_init__(self) -> None:
        x = np.asarray(self.x, dtype=float)
        y = np.asarray(self.y, dtype=float)
        if x.ndim != 1 or y.ndim != 1:
            raise ValueError("x and y must be one-dimensional")
        if x.shape != y.shape:
            raise FieldLengthError(f"x and y lengths differ: {x.size} != {y.size}")
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    def __len__(self) -> int:
        return int(self.x.size)

    @classmethod
    def from_polar(cls, r: NDArray[np.float64], phi: NDArray[np.float64]) -> "Point2DField":
        """Build a field from radius/azimuth pairs."""
        return cls(x=r * np.cos(phi), y=r * np.sin(phi))


def add_fields(base: Point2DField, offset: Point2DField) -> Point2DField:
    """
    Elementwise vector addition of two fields.

    Raises:
        FieldLengthError: if the fields do not hold the same number of points.
    """
    if len(base) != len(offset):
        raise FieldLengthError(f"vector addition with different sizes: {len(base)} != {len(offset)}")
    return Point2DField(x=base.x + offset.x, y=base.y + offset.y)


def squared_radius(field: Point2DField) -> NDArray[np.float64]:
    """Return x_i^2 + y_i^2 for every point."""
    return field.x**2 + field.y**2
