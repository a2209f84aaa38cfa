"""Random 2D point generators for extended sources and isotropic emission.

Three policies are supported:
- uniform disk: area-uniform points inside a disk of radius r_s,
- gaussian disk: circularly symmetric points with a Gaussian radial draw,
- isotropic: planar offsets of isotropically emitted rays at distance z.

Every call owns its generator (``numpy.random.default_rng(seed)``), so calls with
different seeds draw from independent streams.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from geometry.field import Point2DField

UNIFORM = "uniform"
GAUSSIAN = "gaussian"
ISOTROPIC = "isotropic"

SOURCE_KINDS = (UNIFORM, GAUSSIAN)
SAMPLING_KINDS = (UNIFORM, GAUSSIAN, ISOTROPIC)


class ConfigurationError(ValueError):
    """Raised for unknown distribution/detector kinds and invalid run parameters."""


@dataclass(frozen=True)
class SamplingParameters:
    """Per-call sampler configuration.

    scale is the disk radius (uniform), sigma (gaussian) or distance z (isotropic).
    """

    kind: str
    scale: float
    seed: int


def _azimuth(rng: np.random.Generator, n: int) -> np.ndarray:
    return rng.uniform(0.0, 2.0 * np.pi, size=n)


def uniform_disk(n: int, radius: float, seed: int) -> Point2DField:
    """Area-uniform points in a disk: r = r_s * sqrt(U)."""
    rng = np.random.default_rng(seed)
    phi = _azimuth(rng, n)
    r = radius * np.sqrt(rng.random(n))
    return Point2DField.from_polar(r, phi)


def gaussian_disk(n: int, sigma: float, seed: int) -> Point2DField:
    """
    Gaussian source points.

    The radius is a signed Normal(0, sigma) draw combined with a uniform azimuth.
    A negative radius mirrors the point through the origin, which leaves the
    distribution circularly symmetric.
    """
    rng = np.random.default_rng(seed)
    phi = _azimuth(rng, n)
    r = rng.normal(0.0, sigma, size=n)
    return Point2DField.from_polar(r, phi)


def isotropic_offsets(n: int, z: float, seed: int) -> Point2DField:
    """
    Planar offsets of isotropic emission projected onto a plane at distance z.

    theta = acos(1 - 2U) gives a uniform direction on the sphere; the offset is
    (z tan(theta) cos(phi), z tan(theta) sin(phi)). Backward directions land
    mirrored on the plane, which is why the estimator halves the hit fraction.
    """
    rng = np.random.default_rng(seed)
    phi = _azimuth(rng, n)
    theta = np.arccos(1.0 - 2.0 * rng.random(n))
    return Point2DField.from_polar(z * np.tan(theta), phi)


_SAMPLERS = {
    UNIFORM: uniform_disk,
    GAUSSIAN: gaussian_disk,
    ISOTROPIC: isotropic_offsets,
}


def check_kind(kind: str, allowed: tuple[str, ...] = SAMPLING_KINDS) -> str:
    """Return kind unchanged or raise ConfigurationError."""
    if kind not in allowed:
        raise ConfigurationError(f"Unknown distribution kind: {kind!r} (choose from {', '.join(allowed)})")
    return kind


def generate_points(n: int, params: SamplingParameters) -> Point2DField:
    """
    Draw n points according to params.

    The kind is checked before any random number is drawn.
    """
    sampler = _SAMPLERS[check_kind(params.kind)]
    if n < 0:
        raise ValueError("n must be non-negative")
    return sampler(int(n), float(params.scale), int(params.seed))
