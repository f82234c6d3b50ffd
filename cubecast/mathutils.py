"""Angle and distance helpers used by the ray caster."""

import math

PI = 3.14159


def degree_to_radian(degree: float) -> float:
    """Convert degrees to radians using the engine's fixed value of pi."""
    return degree * PI / 180.0


def replace_angle_360(degree: float) -> float:
    """Fold an angle that stepped just outside [0, 360) back into range.

    Only one turn is added or removed. Angles in (-1, 0) are left alone.
    """
    if degree >= 360:
        return degree - 360
    if degree <= -1:
        return degree + 360
    return degree


def calc_dist(ra: float, rx: float, ry: float, px: float, py: float) -> float:
    """Distance from (px, py) to (rx, ry) projected onto the ray at angle ``ra``.

    The y axis points down the screen, so a positive angle looks towards
    smaller y.
    """
    rad = degree_to_radian(ra)
    return math.cos(rad) * (rx - px) - math.sin(rad) * (ry - py)