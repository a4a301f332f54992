#!/usr/bin/env python3
"""
Scale transform: raw diameters and distances to normalized screen units.

Responsibilities
- Normalize every diameter and semi-major axis by the smallest diameter in the catalog,
  so the smallest body has size 1.0.
- Optionally compress both with a square root and exaggerate diameters by an empirical
  factor, so that planets become visible next to their orbits.
- Compute the pixel coefficient that makes the largest distance fill the available extent.

Numerical notes
- True-to-ratio (linear) scale is intentionally kept: at that scale every planet is far
  below one pixel, which is the point the scale view makes.
- The square root is monotonic, so distance ordering is the same in both modes.
- Exaggeration only touches diameters; distances stay fixed when the slider moves.
"""

import math
from typing import List, Sequence

from .data_models import CelestialBody, ScaledBody, ScaleParameters
from .vector_utils import clamp


def exaggeration_multiplier(fraction: float, exaggeration: float) -> float:
    """
    Diameter multiplier for a slider position.

    Interpolates linearly between 1 (fraction 0) and exaggeration (fraction 1):
    1 + f * (K - 1). Fractions outside [0, 1] are clamped.
    """
    f = clamp(float(fraction), 0.0, 1.0)
    return 1.0 + f * (exaggeration - 1.0)


def normalize(bodies: Sequence[CelestialBody], params: ScaleParameters,
              exaggeration: float) -> List[ScaledBody]:
    """
    Map bodies to dimensionless (diameter, distance) pairs.

    Args:
        bodies: Catalog bodies; must not be empty.
        params: Root scaling switch and exaggeration fraction.
        exaggeration: Empirical constant K of the current view.

    Returns:
        ScaledBody list, same order as bodies.

    Raises:
        ValueError: if bodies is empty.
    """
    if not bodies:
        raise ValueError("cannot scale an empty body collection")

    divisor = min(b.diameter for b in bodies)
    multiplier = exaggeration_multiplier(params.exaggeration_fraction, exaggeration)

    scaled: List[ScaledBody] = []
    for b in bodies:
        diameter = b.diameter / divisor
        distance = b.semi_major_axis / divisor
        if params.use_root_scaling:
            diameter = math.sqrt(diameter) * multiplier
            distance = math.sqrt(distance)
        scaled.append(ScaledBody(b, diameter, distance))
    return scaled


def pixel_coefficient(scaled: Sequence[ScaledBody], extent: float) -> float:
    """
    Pixels per normalized unit so that the farthest body lands exactly on extent.

    Returns 0.0 for a non-positive extent or when every body sits at distance 0;
    callers treat that as nothing drawable.
    """
    if not scaled:
        raise ValueError("cannot scale an empty body collection")
    farthest = max(s.normalized_distance for s in scaled)
    if extent <= 0 or farthest <= 0:
        return 0.0
    return extent / farthest
