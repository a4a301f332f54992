"""Tests for the host application's shared view state (no display needed)."""

from __future__ import annotations

import pytest

from orrery.catalog import BODIES_CSV, find_body, parse_catalog
from orrery.constants import STAR_SIZE

orrery_view = pytest.importorskip('orrery_view')

BODIES = parse_catalog(BODIES_CSV)
EARTH = find_body(BODIES, 'Earth')


def _controller():  # type: ignore[no-untyped-def]
    return orrery_view.ViewController(BODIES, 30.0)


def test_starts_in_scale_view_with_dormant_clock() -> None:
    """A fresh controller shows the scale view and does not animate."""
    ctrl = _controller()
    ctrl.view_appeared(0.0)
    state = ctrl.snapshot()
    assert state.profile.title == 'Scale'
    assert state.animating is False
    assert state.generation == 0
    assert state.seconds_per_earth_year == 30.0


def test_orbit_view_activates_on_first_frame() -> None:
    """The orbits start when the orbit view first appears, from angle 0."""
    ctrl = _controller()
    ctrl.set_profile('Orbits')
    assert ctrl.snapshot().animating is False
    ctrl.view_appeared(10.0)
    assert ctrl.snapshot().animating is True
    assert ctrl.clock.angle_deg(EARTH, 10.0) == 0.0
    assert ctrl.clock.angle_deg(EARTH, 17.5) == pytest.approx(90.0)


def test_leaving_orbit_view_stops_the_clock() -> None:
    """Switching away from the orbit view tears its animation down."""
    ctrl = _controller()
    ctrl.set_profile('Orbits')
    ctrl.view_appeared(0.0)
    ctrl.set_profile('Scale')
    ctrl.view_appeared(7.5)
    assert ctrl.snapshot().animating is False


def test_orbit_view_reentry_restarts_from_zero() -> None:
    """Showing the orbit view again starts every orbit over at angle 0."""
    ctrl = _controller()
    ctrl.set_profile('Orbits')
    ctrl.view_appeared(0.0)
    ctrl.set_profile('Scale')
    ctrl.view_appeared(7.5)
    ctrl.set_profile('Orbits')
    ctrl.view_appeared(100.0)
    assert ctrl.clock.angle_deg(EARTH, 100.0) == 0.0
    assert ctrl.clock.angle_deg(EARTH, 107.5) == pytest.approx(90.0)


def test_view_change_bumps_generation_once() -> None:
    """Selecting the current view again is not a view change."""
    ctrl = _controller()
    ctrl.set_profile('Orbits')
    ctrl.set_profile('Orbits')
    assert ctrl.snapshot().generation == 1


def test_animation_toggle_restarts_from_zero() -> None:
    """Implementation-defined: unchecking and rechecking the animation resets every orbit."""
    ctrl = _controller()
    ctrl.set_profile('Orbits')
    ctrl.view_appeared(0.0)
    ctrl.set_animation_enabled(False, now=7.5)
    assert ctrl.snapshot().animating is False
    assert ctrl.clock.angle_deg(EARTH, 8.0) == 0.0
    ctrl.set_animation_enabled(True, now=8.0)
    assert ctrl.snapshot().animating is True
    assert ctrl.clock.angle_deg(EARTH, 8.0) == 0.0


def test_disabled_animation_stays_off_when_view_appears() -> None:
    """With the animation unchecked, entering the orbit view leaves the clock dormant."""
    ctrl = _controller()
    ctrl.set_animation_enabled(False, now=0.0)
    ctrl.set_profile('Orbits')
    ctrl.view_appeared(1.0)
    assert ctrl.snapshot().animating is False


def test_enabling_animation_in_scale_view_does_not_start_clock() -> None:
    """The clock only runs while the orbit view is shown."""
    ctrl = _controller()
    ctrl.set_animation_enabled(True, now=0.0)
    assert ctrl.snapshot().animating is False


def test_exaggeration_fraction_is_clamped() -> None:
    """Slider values outside [0, 1] are clamped; root scaling is kept."""
    ctrl = _controller()
    ctrl.set_root_scaling(True)
    ctrl.set_exaggeration_fraction(1.7)
    assert ctrl.snapshot().params.exaggeration_fraction == 1.0
    ctrl.set_exaggeration_fraction(-0.2)
    assert ctrl.snapshot().params.exaggeration_fraction == 0.0
    ctrl.set_exaggeration_fraction(0.25)
    params = ctrl.snapshot().params
    assert params.exaggeration_fraction == 0.25
    assert params.use_root_scaling is True


def test_star_rect_is_star_size_square() -> None:
    """Stars are STAR_SIZE pixels wide and tall, centered on their position."""
    left, top, width, height = orrery_view.star_rect(100.0, 50.0)
    assert (width, height) == (int(STAR_SIZE), int(STAR_SIZE))
    assert (left, top) == (99, 49)


def test_hud_line_uses_snapshot_values() -> None:
    """The HUD text comes from the locked snapshot."""
    ctrl = _controller()
    ctrl.set_profile('Orbits')
    ctrl.view_appeared(0.0)
    line = orrery_view._hud_line(ctrl.snapshot())
    assert '30 s' in line
    assert '[running]' in line
    ctrl.set_animation_enabled(False, now=1.0)
    assert '[stopped]' in orrery_view._hud_line(ctrl.snapshot())
