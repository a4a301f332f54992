#!/usr/bin/env python3
"""
Solar System Orrery application entry point and UI/renderer coordination.

What this module does
- Starts two event loops: a Pygame rendering thread (viewport) and the Dear PyGui UI
  (running on the main thread).
- Maintains a shared ViewController that owns the catalog, the selected view, the scaling
  options and the orbit clock; all access is guarded by a re-entrant lock.
- Each render tick snapshots the controller and calls orrery.layout.compute_frame; the
  renderer only draws what that pure function returns.

Views
- Scale: the Sun and the planets on one line at true distance ratios. Nothing is visible at
  linear scale; the square root toggle and the exaggeration slider make the bodies appear.
- Orbits: the bodies circle the Sun; 365 days on Earth take 30 seconds.

Running
1) Install dependencies: `pip install pygame dearpygui`
2) Run this module: `python orrery_view.py`

Windows/OS notes
- Two windows will open: the viewport (Pygame) and the controls (Dear PyGui). Closing either
  will shut down the application cleanly.
"""

import logging
import threading
import time
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

# GUI and Rendering libs
import pygame
from pygame import gfxdraw
import dearpygui.dearpygui as dpg

from orrery.catalog import load_catalog
from orrery.config import get_log_file, get_log_level, get_seconds_per_earth_year
from orrery.constants import (
    BACKGROUND_COLOR,
    HUD_TEXT_COLOR,
    MIN_VISIBLE_RADIUS,
    SAFE_COORD_LIMIT,
    STAR_COLOR,
    STAR_SIZE,
    TARGET_FPS,
    VIEW_HEIGHT,
    VIEW_WIDTH,
)
from orrery.data_models import CelestialBody, Frame, ScaleParameters, ViewProfile, Viewport
from orrery.layout import ORBIT_VIEW, SCALE_VIEW, VIEW_PROFILES, compute_frame, star_field
from orrery.logging_config import setup_logging
from orrery.timing import OrbitClock
from orrery.vector_utils import clamp

logger = logging.getLogger("orrery.app")

# ============================================================
# View Controller (Shared State)
# ============================================================

@dataclass(frozen=True)
class ViewState:
    """Consistent copy of the controller state for one render tick."""
    profile: ViewProfile
    params: ScaleParameters
    generation: int
    animating: bool
    seconds_per_earth_year: float


class ViewController:
    """
    Shared state between UI thread (DearPyGui) and rendering thread (Pygame).
    Includes thread-safe operations guarded by a lock.
    """
    def __init__(self, bodies: Sequence[CelestialBody], seconds_per_earth_year: float):
        self.lock = threading.RLock()
        self.bodies: Tuple[CelestialBody, ...] = tuple(bodies)
        self.running = True  # app running
        self.profile: ViewProfile = SCALE_VIEW
        self.params = ScaleParameters()
        self.clock = OrbitClock(seconds_per_earth_year)
        self.animation_enabled = True  # start orbits when the orbit view appears
        self.view_generation = 0  # bumped on view change so the renderer rebuilds stars

    def set_profile(self, title: str):
        with self.lock:
            profile = VIEW_PROFILES.get(title, SCALE_VIEW)
            if profile is self.profile:
                return
            # Leaving the orbit view tears its animation down; re-entry starts from 0
            if self.profile.animated:
                self.clock.deactivate()
            self.profile = profile
            self.view_generation += 1
            logger.info("Switched to %s view", profile.title)

    def set_root_scaling(self, enabled: bool):
        with self.lock:
            self.params = ScaleParameters(bool(enabled), self.params.exaggeration_fraction)
            logger.debug("Root scaling %s", "on" if enabled else "off")

    def set_exaggeration_fraction(self, fraction: float):
        with self.lock:
            f = clamp(float(fraction), 0.0, 1.0)
            self.params = ScaleParameters(self.params.use_root_scaling, f)

    def view_appeared(self, now: float):
        """Called by the renderer on the first tick of a view; starts the orbits."""
        with self.lock:
            if self.profile.animated and self.animation_enabled:
                self.clock.activate(now)

    def set_animation_enabled(self, enabled: bool, now: Optional[float] = None):
        """
        Turn the orbit animation on or off.
        Turning it back on restarts every orbit at angle 0.
        """
        now = time.perf_counter() if now is None else now
        with self.lock:
            self.animation_enabled = bool(enabled)
            if not enabled:
                self.clock.deactivate()
            elif self.profile.animated:
                self.clock.activate(now)
            logger.info("Orbit animation %s", "enabled" if enabled else "disabled")

    def snapshot(self) -> ViewState:
        with self.lock:
            return ViewState(
                profile=self.profile,
                params=self.params,
                generation=self.view_generation,
                animating=self.clock.active,
                seconds_per_earth_year=self.clock.wall_seconds_per_earth_year,
            )

# ============================================================
# Pygame Renderer Thread
# ============================================================

class PygameRenderer(threading.Thread):
    """
    Pygame loop: draws the star field and one filled circle per body.
    """
    def __init__(self, ctrl: ViewController):
        super().__init__(daemon=True)
        self.ctrl = ctrl
        self.surface = None
        self.clock = None
        self.viewport = Viewport(VIEW_WIDTH, VIEW_HEIGHT)
        self.stars: List[Tuple[float, float]] = []
        self._stars_key = None
        self._shown_generation = None
        self.running = True

    def run(self):
        pygame.init()
        pygame.display.set_caption("Solar System Orrery - Viewport")
        self.surface = pygame.display.set_mode((VIEW_WIDTH, VIEW_HEIGHT), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()

        while self.running and self.ctrl.running:
            self.handle_events()

            now = time.perf_counter()
            with self.ctrl.lock:
                state = self.ctrl.snapshot()
                if state.generation != self._shown_generation:
                    self._shown_generation = state.generation
                    self.ctrl.view_appeared(now)
                    state = self.ctrl.snapshot()
                frame = compute_frame(self.ctrl.bodies, state.params, self.viewport, now,
                                      state.profile, self.ctrl.clock)
            self.draw(frame, state)

            # Limit FPS
            self.clock.tick(TARGET_FPS)

        pygame.quit()

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.ctrl.running = False
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.surface = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                self.viewport = Viewport(event.w, event.h)

    def _refresh_stars(self, profile: ViewProfile):
        key = (profile.title, self.viewport)
        if key != self._stars_key:
            self._stars_key = key
            self.stars = star_field(profile.star_count, self.viewport)

    def draw(self, frame: Frame, state: ViewState):
        surf = self.surface
        surf.fill(BACKGROUND_COLOR)

        self._refresh_stars(state.profile)
        for x, y in self.stars:
            surf.fill(STAR_COLOR, star_rect(x, y))

        for b in frame.bodies:
            if b.radius < MIN_VISIBLE_RADIUS:
                continue
            center_s = _safe_point(b.center)
            if center_s is None:
                continue
            r = int(min(round(b.radius), SAFE_COORD_LIMIT))
            try:
                gfxdraw.filled_circle(surf, center_s[0], center_s[1], r, b.color)
                gfxdraw.aacircle(surf, center_s[0], center_s[1], r, b.color)
            except OverflowError:
                logger.debug("Skipped %s: radius %d out of range", b.name, r)

        draw_text(surf, _hud_line(state), 10, 10, HUD_TEXT_COLOR)

        pygame.display.flip()


def star_rect(x: float, y: float) -> Tuple[int, int, int, int]:
    """Square of STAR_SIZE pixels centered on (x, y), as (left, top, width, height)."""
    size = int(STAR_SIZE)
    return (int(x - STAR_SIZE / 2.0), int(y - STAR_SIZE / 2.0), size, size)


def _hud_line(state: ViewState) -> str:
    if state.profile.animated:
        running = "running" if state.animating else "stopped"
        return (f"Orbits of the planets, and Pluto | 365 days on Earth take "
                f"{state.seconds_per_earth_year:g} s [{running}]")
    return "The scale of the solar system | Toggle square root scaling in the controls"

_cached_font = None

def draw_text(surface, text, x, y, color):
    global _cached_font
    if not pygame.font.get_init():
        pygame.font.init()
    if _cached_font is None:
        _cached_font = pygame.font.SysFont("consolas", 16)
    img = _cached_font.render(text, True, color)
    surface.blit(img, (x, y))

def _safe_point(pt):
    x, y = int(pt[0]), int(pt[1])
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (x, y)
    return None

# ============================================================
# Dear PyGui UI
# ============================================================

class UI:
    """
    Control window: view selector, scaling toggle, exaggeration slider, animation toggle.
    """
    def __init__(self, ctrl: ViewController):
        self.ctrl = ctrl
        self._build_ui()

    def _build_ui(self):
        dpg.create_context()
        dpg.create_viewport(title='Solar System Orrery - Controls', width=420, height=260)

        with dpg.window(tag="main_window"):
            dpg.add_text("View")
            dpg.add_radio_button([SCALE_VIEW.title, ORBIT_VIEW.title], default_value=SCALE_VIEW.title,
                                 horizontal=True, callback=lambda s, a, u: self._on_view(a))
            dpg.add_separator()

            with dpg.group(tag="scale_controls"):
                dpg.add_checkbox(label="Take the square root of all measurements", default_value=False,
                                 tag="root_checkbox", callback=lambda s, a, u: self._on_root(a))
                with dpg.group(tag="exaggeration_group", show=False):
                    dpg.add_slider_float(min_value=0.0, max_value=1.0, default_value=0.0, width=200,
                                         tag="exaggeration_slider",
                                         callback=lambda s, a, u: self.ctrl.set_exaggeration_fraction(a))
                    dpg.add_text("Scale bodies by an empirical factor")

            with dpg.group(tag="orbit_controls", show=False):
                dpg.add_checkbox(label="Animate orbits", default_value=True, tag="animate_checkbox",
                                 callback=lambda s, a, u: self.ctrl.set_animation_enabled(a))
                dpg.add_text("Can you even see Neptune moving?")

        dpg.setup_dearpygui()
        dpg.show_viewport()
        dpg.set_primary_window("main_window", True)

    def _on_view(self, title: str):
        self.ctrl.set_profile(title)
        animated = VIEW_PROFILES.get(title, SCALE_VIEW).animated
        dpg.configure_item("scale_controls", show=not animated)
        dpg.configure_item("orbit_controls", show=animated)

    def _on_root(self, enabled: bool):
        self.ctrl.set_root_scaling(enabled)
        dpg.configure_item("exaggeration_group", show=bool(enabled))

# ============================================================
# Application Entry
# ============================================================

def main():
    setup_logging(get_log_level(), get_log_file())

    # A malformed catalog is fatal: let CatalogError propagate before any window opens
    bodies = load_catalog()
    ctrl = ViewController(bodies, get_seconds_per_earth_year())

    renderer = PygameRenderer(ctrl)

    # Start Pygame renderer thread
    renderer.start()

    UI(ctrl)

    # Run Dear PyGui event loop
    try:
        while dpg.is_dearpygui_running() and ctrl.running:
            dpg.render_dearpygui_frame()
    finally:
        ctrl.running = False
        renderer.running = False
        renderer.join(timeout=2.0)
        dpg.destroy_context()
        logger.info("Shut down")

if __name__ == "__main__":
    main()
