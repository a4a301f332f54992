"""Tests for orbit timing and the orbit clock."""

from __future__ import annotations

import pytest

from orrery.catalog import BODIES_CSV, find_body, parse_catalog
from orrery.constants import EARTH_YEAR_DAYS, WALL_SECONDS_PER_EARTH_YEAR
from orrery.timing import OrbitClock, cycle_seconds, rotation_angle

BODIES = parse_catalog(BODIES_CSV)
EARTH = find_body(BODIES, 'Earth')
MARS = find_body(BODIES, 'Mars')
SUN = find_body(BODIES, 'Sun')


def test_earth_cycle_is_wall_seconds() -> None:
    """One Earth year takes exactly the configured wall-clock time."""
    assert cycle_seconds(EARTH.sidereal_year) == WALL_SECONDS_PER_EARTH_YEAR
    assert cycle_seconds(EARTH.sidereal_year, 12.0) == 12.0


def test_cycle_is_linear_in_sidereal_year() -> None:
    """Cycle ratios equal sidereal year ratios for every body."""
    earth_cycle = cycle_seconds(EARTH.sidereal_year)
    for body in BODIES:
        ratio = cycle_seconds(body.sidereal_year) / earth_cycle
        assert ratio == pytest.approx(body.sidereal_year / EARTH_YEAR_DAYS)


def test_rotation_angle_wraps() -> None:
    """The angle grows linearly and wraps every cycle."""
    assert rotation_angle(0.0, 30.0) == 0.0
    assert rotation_angle(7.5, 30.0) == pytest.approx(90.0)
    assert rotation_angle(37.5, 30.0) == pytest.approx(90.0)
    assert rotation_angle(10.0, 0.0) == 0.0


def test_clock_is_dormant_until_activated() -> None:
    """A new clock reports no rotation and zero durations."""
    clock = OrbitClock()
    assert not clock.active
    assert clock.duration_for(EARTH) == 0.0
    assert clock.angle_deg(EARTH, 100.0) == 0.0


def test_active_clock_rotates_bodies_from_zero() -> None:
    """After activation every body starts at 0 and turns at its own rate."""
    clock = OrbitClock()
    clock.activate(now=10.0)
    assert clock.duration_for(EARTH) == WALL_SECONDS_PER_EARTH_YEAR
    assert clock.angle_deg(EARTH, 10.0) == 0.0
    assert clock.angle_deg(EARTH, 17.5) == pytest.approx(90.0)
    assert clock.angle_deg(MARS, 17.5) < clock.angle_deg(EARTH, 17.5)
    assert clock.angle_deg(SUN, 17.5) == 0.0


def test_activate_twice_keeps_start() -> None:
    """Activating a running clock does not restart it."""
    clock = OrbitClock()
    clock.activate(now=1.0)
    clock.activate(now=5.0)
    assert clock.started_at == 1.0


def test_toggle_restarts_from_zero() -> None:
    """Implementation-defined: toggling off and on jumps every orbit back to angle 0."""
    clock = OrbitClock()
    clock.activate(now=0.0)
    assert clock.angle_deg(EARTH, 7.5) == pytest.approx(90.0)
    assert clock.toggle(now=7.5) is False
    assert clock.angle_deg(EARTH, 8.0) == 0.0
    assert clock.toggle(now=8.0) is True
    assert clock.angle_deg(EARTH, 8.0) == 0.0


def test_clock_rejects_non_positive_speed() -> None:
    """The wall-clock time per Earth year must be positive."""
    with pytest.raises(ValueError):
        OrbitClock(0.0)
