#!/usr/bin/env python3
"""
Orbit timing: sidereal years to animation cycles.

One Earth year maps to a fixed wall-clock duration and every other period is scaled by the
same ratio. The rotation is linear and repeats forever; all bodies start at angle 0 and
drift apart because their periods differ. Real orbital phases are not modelled.

Activation
- The animation is dormant until activated (the orbit view appearing) and then runs until
  the view is torn down.
- Switching it off and on again restarts every cycle at angle 0. The host sees a jump back
  to the start instead of a smooth resume.
"""
import logging
import time
from typing import Optional

from .constants import EARTH_YEAR_DAYS, WALL_SECONDS_PER_EARTH_YEAR
from .data_models import CelestialBody

logger = logging.getLogger(__name__)


def cycle_seconds(sidereal_year_days: float,
                  wall_seconds_per_earth_year: float = WALL_SECONDS_PER_EARTH_YEAR) -> float:
    """Wall-clock seconds for one full orbit of a body with the given sidereal year."""
    return wall_seconds_per_earth_year * (sidereal_year_days / EARTH_YEAR_DAYS)


def rotation_angle(elapsed_seconds: float, cycle: float) -> float:
    """Angle in degrees [0, 360) after elapsed_seconds of a linear cycle; 0 for a 0 cycle."""
    if cycle <= 0 or elapsed_seconds <= 0:
        return 0.0
    return 360.0 * ((elapsed_seconds / cycle) % 1.0)


class OrbitClock:
    """
    Activation state and time base of the orbit animation.

    The clock is not thread-safe on its own; the host keeps it behind its controller lock.
    """

    def __init__(self, wall_seconds_per_earth_year: float = WALL_SECONDS_PER_EARTH_YEAR):
        if wall_seconds_per_earth_year <= 0:
            raise ValueError("wall_seconds_per_earth_year must be positive")
        self.wall_seconds_per_earth_year = float(wall_seconds_per_earth_year)
        self.active = False
        self.started_at: Optional[float] = None

    def activate(self, now: Optional[float] = None) -> None:
        """Start all cycles from angle 0. Does nothing while already active."""
        if self.active:
            return
        self.active = True
        self.started_at = time.perf_counter() if now is None else now
        logger.debug("Orbit animation started at %.3f", self.started_at)

    def deactivate(self) -> None:
        self.active = False
        self.started_at = None
        logger.debug("Orbit animation stopped")

    def toggle(self, now: Optional[float] = None) -> bool:
        """Flip the activation flag; returns the new state."""
        if self.active:
            self.deactivate()
        else:
            self.activate(now)
        return self.active

    def elapsed(self, now: float) -> float:
        if not self.active or self.started_at is None:
            return 0.0
        return max(0.0, now - self.started_at)

    def duration_for(self, body: CelestialBody) -> float:
        """Cycle duration handed to the host: the full cycle while active, 0.0 while dormant."""
        if not self.active:
            return 0.0
        return cycle_seconds(body.sidereal_year, self.wall_seconds_per_earth_year)

    def angle_deg(self, body: CelestialBody, now: float) -> float:
        return rotation_angle(self.elapsed(now), self.duration_for(body))
