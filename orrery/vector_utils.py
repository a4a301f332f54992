#!/usr/bin/env python3
"""
Vector helper functions for 2D screen-space operations.

These are small, fast functions used by the layout adapter and the renderer.
"""
import math
from typing import Tuple


def clamp(x: float, a: float, b: float) -> float:
    """Clamp x to the inclusive range [a, b]."""
    return max(a, min(b, x))


def vec_add(a: Tuple[float, float], b: Tuple[float, float]) -> Tuple[float, float]:
    return (a[0] + b[0], a[1] + b[1])


def polar(radius: float, angle_deg: float) -> Tuple[float, float]:
    """
    Offset of length radius at angle_deg, measured clockwise from +x.

    Screen y grows downwards, so a positive angle turns clockwise on screen.
    """
    rad = math.radians(angle_deg)
    return (radius * math.cos(rad), radius * math.sin(rad))


def orbit_point(pivot: Tuple[float, float], radius: float, angle_deg: float) -> Tuple[float, float]:
    """Point on a circle of the given radius around pivot."""
    return vec_add(pivot, polar(radius, angle_deg))
