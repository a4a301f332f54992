#!/usr/bin/env python3
"""
Shared constants for the Solar System Orrery.

Astronomical values use kilometers and days unless stated otherwise. Keeping
the tuning values in one place makes it easy to adjust the two views.
"""

# Astronomical constants
KM_PER_AU = 149_597_870.7  # km
EARTH_YEAR_DAYS = 365.256  # d, sidereal

# Orbit animation: one Earth year of wall-clock time
WALL_SECONDS_PER_EARTH_YEAR = 30.0  # s

# Empirical diameter exaggeration (K) per view. The static view can afford
# bigger bodies; the animated view must keep Pluto's orbit inside the square.
SCALE_VIEW_EXAGGERATION = 13.0
ORBIT_VIEW_EXAGGERATION = SCALE_VIEW_EXAGGERATION / 2.0

# Star field
SCALE_VIEW_STAR_COUNT = 500
ORBIT_VIEW_STAR_COUNT = 200
STAR_SIZE = 2.0  # px, diameter
STAR_COLOR = (255, 255, 255)

# Rendering (viewport)
VIEW_WIDTH = 1100
VIEW_HEIGHT = 800
TARGET_FPS = 60
BACKGROUND_COLOR = (0, 0, 0)
HUD_TEXT_COLOR = (200, 200, 200)
DEFAULT_BODY_COLOR = (200, 200, 255)

# Bodies smaller than this radius are not drawn (linear scale is invisible)
MIN_VISIBLE_RADIUS = 0.5  # px

# Safety: avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000
