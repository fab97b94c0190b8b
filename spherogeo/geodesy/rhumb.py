"""Rhumb-line (loxodrome) geodesy on a spherical Earth.

A rhumb line keeps a constant compass bearing, which makes it a straight
line on a Mercator projection. The formulas below work in that projection:
ψ = ln(tan(π/4 + φ/2)) is the Mercator "stretched" latitude, and
q = Δφ/Δψ converts longitude differences back to true distance. Along an
east-west line Δψ tends to 0 and q becomes 0/0, so below RHUMB_TOLERANCE
q is taken as cos φ instead.

Longitude differences larger than 180° are taken the short way across the
antimeridian.

Example:
    >>> from spherogeo import LatLon
    >>> dover, calais = LatLon(51.127, 1.338), LatLon(50.964, 1.853)
    >>> round(rhumb_distance_between(dover, calais))
    40308
    >>> round(rhumb_bearing_between(dover, calais), 1)
    116.7
"""

from __future__ import annotations

import math

from spherogeo.config import RHUMB_TOLERANCE, Number
from spherogeo.geo import LatLon

from ._spherical import resolve_radius, stretched_latitude, wrap_delta, wrap_longitude


def _stretch_factor(delta_phi: float, delta_psi: float, phi1: float) -> float:
    if abs(delta_psi) > RHUMB_TOLERANCE:
        return delta_phi / delta_psi
    return math.cos(phi1)


def rhumb_distance_between(
    source: LatLon, destination: LatLon, radius: Number | None = None
) -> float:
    """Return the distance along the rhumb line between two points.

    Δψ = ln(tan(π/4 + φ2/2) / tan(π/4 + φ1/2))
    q  = Δφ/Δψ (or cos φ1 on an east-west line)
    d  = √(Δφ² + q²⋅Δλ²) ⋅ R

    Returns:
        Distance in the same units as ``radius``.
    """
    r = resolve_radius(radius)
    phi1 = math.radians(source.latitude)
    phi2 = math.radians(destination.latitude)
    delta_phi = phi2 - phi1
    delta_lambda = wrap_delta(math.radians(destination.longitude - source.longitude))

    delta_psi = stretched_latitude(phi2) - stretched_latitude(phi1)
    q = _stretch_factor(delta_phi, delta_psi, phi1)

    delta = math.sqrt(delta_phi**2 + q**2 * delta_lambda**2)
    return delta * r


def rhumb_bearing_between(source: LatLon, destination: LatLon) -> float:
    """Return the constant bearing of the rhumb line between two points.

    θ = atan2(Δλ, Δψ)

    Returns:
        float: Degrees clockwise from north, in [0, 360).
    """
    phi1 = math.radians(source.latitude)
    phi2 = math.radians(destination.latitude)
    delta_lambda = wrap_delta(math.radians(destination.longitude - source.longitude))

    delta_psi = stretched_latitude(phi2) - stretched_latitude(phi1)
    theta = math.atan2(delta_lambda, delta_psi)
    return (math.degrees(theta) + 360) % 360


def rhumb_destination_point(
    source: LatLon,
    distance: Number,
    bearing: Number,
    radius: Number | None = None,
) -> LatLon:
    """Return the point reached by following a rhumb line for ``distance``.

    δ  = d/R
    φ2 = φ1 + δ ⋅ cos θ  (reflected back if it passes a pole)
    λ2 = λ1 + δ ⋅ sin θ / q

    Example:
        >>> p = rhumb_destination_point(LatLon(51.127, 1.338), 40300, 116.7)
        >>> p.to_string("d")
        '50.9642°N,001.8530°E'
    """
    delta = distance / resolve_radius(radius)
    phi1 = math.radians(source.latitude)
    lambda1 = math.radians(source.longitude)
    theta = math.radians(bearing)

    delta_phi = delta * math.cos(theta)
    phi2 = phi1 + delta_phi
    if abs(phi2) > math.pi / 2:
        phi2 = math.pi - phi2 if phi2 > 0 else -math.pi - phi2

    delta_psi = stretched_latitude(phi2) - stretched_latitude(phi1)
    q = _stretch_factor(delta_phi, delta_psi, phi1)

    # A rhumb line ending on a pole has no defined longitude.
    delta_lambda = delta * math.sin(theta) / q if q else math.nan
    return LatLon.from_rad(phi2, wrap_longitude(lambda1 + delta_lambda))


def rhumb_midpoint_between(source: LatLon, destination: LatLon) -> LatLon:
    """Return the point half-way along the rhumb line between two points.

    φm = (φ1 + φ2) / 2
    λm = ((λ2 − λ1) ⋅ ψm + λ1 ⋅ ψ2 − λ2 ⋅ ψ1) / (ψ2 − ψ1)

    Falls back to the mean longitude when the latitudes are equal and the
    logarithmic mean is undefined.

    Example:
        >>> p = rhumb_midpoint_between(LatLon(51.127, 1.338), LatLon(50.964, 1.853))
        >>> p.to_string("d")
        '51.0455°N,001.5957°E'
    """
    phi1 = math.radians(source.latitude)
    lambda1 = math.radians(source.longitude)
    phi2 = math.radians(destination.latitude)
    lambda2 = math.radians(destination.longitude)

    if abs(lambda2 - lambda1) > math.pi:
        lambda1 += 2 * math.pi

    phi_m = (phi1 + phi2) / 2
    psi1 = stretched_latitude(phi1)
    psi2 = stretched_latitude(phi2)
    psi_m = stretched_latitude(phi_m)

    denominator = psi2 - psi1
    if denominator:
        lambda_m = ((lambda2 - lambda1) * psi_m + lambda1 * psi2 - lambda2 * psi1) / denominator
    else:
        lambda_m = math.nan
    if not math.isfinite(lambda_m):
        lambda_m = (lambda1 + lambda2) / 2

    return LatLon.from_rad(phi_m, wrap_longitude(lambda_m))
