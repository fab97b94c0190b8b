"""Trigonometric helpers shared by the great-circle and rhumb formulas."""

from __future__ import annotations

import logging
import math

from spherogeo.config import EARTH_RADIUS, Number

logger = logging.getLogger(__name__)

TWO_PI = 2 * math.pi


def resolve_radius(radius: Number | None) -> float:
    """Return the sphere radius as a float, defaulting to the Earth's mean radius."""
    if radius is None:
        return EARTH_RADIUS
    return float(radius)


def wrap_longitude(lon: float) -> float:
    """Normalise a longitude in radians to [-π, π)."""
    return (lon + 3 * math.pi) % TWO_PI - math.pi


def wrap_delta(delta: float) -> float:
    """Take the shorter way round when a longitude difference exceeds π."""
    if abs(delta) > math.pi:
        return -(TWO_PI - delta) if delta > 0 else TWO_PI + delta
    return delta


def _clamp(value: float, name: str) -> float:
    if value > 1.0 or value < -1.0:
        logger.debug("%s argument %r clamped to [-1, 1]", name, value)
        return max(-1.0, min(1.0, value))
    return value


def asin(value: float) -> float:
    """``math.asin`` with its argument clamped against rounding drift past ±1."""
    return math.asin(_clamp(value, "asin"))


def acos(value: float) -> float:
    """``math.acos`` with its argument clamped against rounding drift past ±1."""
    return math.acos(_clamp(value, "acos"))


def stretched_latitude(phi: float) -> float:
    """Mercator ψ = ln(tan(π/4 + φ/2)); -inf at the south pole, NaN beyond it."""
    t = math.tan(math.pi / 4 + phi / 2)
    if t > 0.0:
        return math.log(t)
    return -math.inf if t == 0.0 else math.nan
