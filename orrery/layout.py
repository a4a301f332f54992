#!/usr/bin/env python3
"""
Layout adapter: catalog bodies to drawable circles.

compute_frame() is a pure function of (bodies, scale parameters, viewport, time, view
profile, clock). The renderer calls it once per tick and draws the result; nothing here
touches pygame.

Views
- Scale view: bodies on a horizontal line through the middle of the viewport, the Sun's
  center on the left edge and the farthest body on the right edge.
- Orbit view: bodies on concentric circles around the viewport center, always root scaled
  with the full exaggeration, rotating according to the OrbitClock.
"""
import random
from typing import Dict, List, Optional, Sequence, Tuple

from .constants import (
    DEFAULT_BODY_COLOR,
    ORBIT_VIEW_EXAGGERATION,
    ORBIT_VIEW_STAR_COUNT,
    SCALE_VIEW_EXAGGERATION,
    SCALE_VIEW_STAR_COUNT,
)
from .data_models import (
    BodyDrawable,
    CelestialBody,
    Frame,
    OrbitAnimation,
    ScaleParameters,
    ViewProfile,
    Viewport,
)
from .scaling import normalize, pixel_coefficient
from .timing import OrbitClock
from .vector_utils import orbit_point

SCALE_VIEW = ViewProfile(
    title="Scale",
    exaggeration=SCALE_VIEW_EXAGGERATION,
    star_count=SCALE_VIEW_STAR_COUNT,
    animated=False,
)
ORBIT_VIEW = ViewProfile(
    title="Orbits",
    exaggeration=ORBIT_VIEW_EXAGGERATION,
    star_count=ORBIT_VIEW_STAR_COUNT,
    animated=True,
)
VIEW_PROFILES: Dict[str, ViewProfile] = {p.title: p for p in (SCALE_VIEW, ORBIT_VIEW)}

# The orbit view ignores the UI scaling controls
ORBIT_VIEW_PARAMS = ScaleParameters(use_root_scaling=True, exaggeration_fraction=1.0)

BODY_COLORS: Dict[str, Tuple[int, int, int]] = {
    "Sun": (246, 243, 87),
    "Mercury": (195, 189, 189),
    "Venus": (201, 197, 188),
    "Earth": (97, 101, 152),
    "Mars": (180, 133, 82),
    "Jupiter": (156, 137, 123),
    "Saturn": (208, 182, 149),
    "Uranus": (195, 233, 236),
    "Neptune": (105, 132, 177),
    "Pluto": (212, 177, 143),
}


def body_color(name: str) -> Tuple[int, int, int]:
    return BODY_COLORS.get(name, DEFAULT_BODY_COLOR)


def star_field(count: int, viewport: Viewport,
               rng: Optional[random.Random] = None) -> List[Tuple[float, float]]:
    """Uniformly random star positions inside the viewport (decoration only)."""
    if count <= 0 or viewport.width <= 0 or viewport.height <= 0:
        return []
    rng = rng or random.Random()
    return [(rng.uniform(0.0, viewport.width), rng.uniform(0.0, viewport.height))
            for _ in range(count)]


def _scale_view_frame(bodies: Sequence[CelestialBody], params: ScaleParameters,
                      viewport: Viewport, profile: ViewProfile) -> Frame:
    scaled = normalize(bodies, params, profile.exaggeration)
    coef = pixel_coefficient(scaled, viewport.width)
    frame = Frame(viewport=viewport, coefficient=coef)
    if coef <= 0:
        return frame
    y = viewport.height / 2.0
    for s in scaled:
        frame.bodies.append(BodyDrawable(
            name=s.body.name,
            radius=coef * s.normalized_diameter / 2.0,
            center=(coef * s.normalized_distance, y),
            color=body_color(s.body.name),
        ))
    return frame


def _orbit_view_frame(bodies: Sequence[CelestialBody], viewport: Viewport, now: float,
                      profile: ViewProfile, clock: OrbitClock) -> Frame:
    scaled = normalize(bodies, ORBIT_VIEW_PARAMS, profile.exaggeration)
    coef = pixel_coefficient(scaled, min(viewport.width, viewport.height))
    frame = Frame(viewport=viewport, coefficient=coef)
    if coef <= 0:
        return frame
    pivot = viewport.center
    for s in scaled:
        orbit_radius = coef * s.normalized_distance / 2.0
        angle = clock.angle_deg(s.body, now)
        animation = OrbitAnimation(
            pivot=pivot,
            orbit_radius=orbit_radius,
            cycle_seconds=clock.duration_for(s.body),
            active=clock.active,
            angle_deg=angle,
        )
        frame.bodies.append(BodyDrawable(
            name=s.body.name,
            radius=coef * s.normalized_diameter / 2.0,
            center=orbit_point(pivot, orbit_radius, angle),
            color=body_color(s.body.name),
            animation=animation,
        ))
    return frame


def compute_frame(bodies: Sequence[CelestialBody], params: ScaleParameters, viewport: Viewport,
                  now: float = 0.0, profile: ViewProfile = SCALE_VIEW,
                  clock: Optional[OrbitClock] = None) -> Frame:
    """
    Build the drawables for one render tick.

    Args:
        bodies: Catalog bodies; must not be empty.
        params: UI scaling options (used by the scale view only).
        viewport: Drawable area in pixels. A zero extent yields an empty frame.
        now: Current time in seconds on the clock's time base.
        profile: SCALE_VIEW or ORBIT_VIEW.
        clock: Animation clock for animated profiles; a dormant clock is used if omitted.

    Returns:
        Frame with one BodyDrawable per body, in catalog order.
    """
    if viewport.width <= 0 or viewport.height <= 0:
        return Frame(viewport=viewport)
    if profile.animated:
        return _orbit_view_frame(bodies, viewport, now, profile, clock or OrbitClock())
    return _scale_view_frame(bodies, params, viewport, profile)
