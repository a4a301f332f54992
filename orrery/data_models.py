#!/usr/bin/env python3
"""
Data models for the Solar System Orrery.

This module defines the records shared between the catalog, the transforms
and the renderer.

Units and usage
- CelestialBody stores raw measurements: mass in kg, diameter and semi-major axis in km,
  sidereal year in days. Instances are frozen and shared read-only.
- ScaledBody stores dimensionless values (multiples of the smallest diameter).
- BodyDrawable and OrbitAnimation are in pixels and seconds; they are rebuilt every frame.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class CelestialBody:
    """
    One row of the body catalog.

    Fields:
    - name: Unique identifier for the body
    - mass: Mass in kilograms (informational, not used by the transforms)
    - diameter: Mean diameter in kilometers
    - semi_major_axis: Mean orbital distance from the Sun in kilometers (0 for the Sun)
    - sidereal_year: Time for one full orbit in days (0 for the Sun)
    """
    name: str
    mass: float
    diameter: float
    semi_major_axis: float
    sidereal_year: float


@dataclass(frozen=True)
class ScaleParameters:
    """UI-driven scaling options."""
    use_root_scaling: bool = False
    exaggeration_fraction: float = 0.0


@dataclass(frozen=True)
class ScaledBody:
    body: CelestialBody
    normalized_diameter: float
    normalized_distance: float


@dataclass(frozen=True)
class Viewport:
    width: float
    height: float

    @property
    def center(self) -> Tuple[float, float]:
        return (self.width / 2.0, self.height / 2.0)


@dataclass(frozen=True)
class ViewProfile:
    """
    Per-presentation constants.

    Fields:
    - title: Label shown in the view selector
    - exaggeration: Empirical diameter exaggeration constant (K)
    - star_count: Number of background stars
    - animated: Whether bodies orbit the viewport center
    """
    title: str
    exaggeration: float
    star_count: int
    animated: bool


@dataclass(frozen=True)
class OrbitAnimation:
    pivot: Tuple[float, float]
    orbit_radius: float
    cycle_seconds: float
    active: bool
    angle_deg: float = 0.0


@dataclass(frozen=True)
class BodyDrawable:
    """A filled circle ready to be drawn by the host."""
    name: str
    radius: float
    center: Tuple[float, float]
    color: Tuple[int, int, int]
    animation: Optional[OrbitAnimation] = None


@dataclass
class Frame:
    viewport: Viewport
    coefficient: float = 0.0
    bodies: List[BodyDrawable] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.bodies
