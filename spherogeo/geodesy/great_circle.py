"""Great-circle geodesy on a spherical Earth.

All functions take LatLon points in degrees and return degrees, or a
distance in the same units as ``radius`` (metres by default).

Functions:
    distance_between: Haversine distance.
    bearing_between: Initial bearing.
    final_bearing_to: Bearing on arrival.
    midpoint_between: Half-way point along the great circle.
    destination_point: Point reached from a start, bearing and distance.
    intersection: Crossing point of two paths given by point and bearing.
    cross_track_distance_to: Signed distance from a point to a path.

Example:
    >>> from spherogeo import LatLon
    >>> cambridge, paris = LatLon(52.205, 0.119), LatLon(48.857, 2.351)
    >>> round(distance_between(cambridge, paris) / 1000, 1)
    404.3
    >>> round(bearing_between(cambridge, paris), 1)
    156.2
    >>> midpoint_between(cambridge, paris).to_string("d")
    '50.5363°N,001.2746°E'
"""

from __future__ import annotations

import logging
import math

from spherogeo.config import Number
from spherogeo.geo import LatLon

from ._spherical import TWO_PI, acos, asin, resolve_radius, wrap_longitude

logger = logging.getLogger(__name__)


def distance_between(
    source: LatLon, destination: LatLon, radius: Number | None = None
) -> float:
    """Return the great-circle distance between two points.

    Uses the haversine formula, which stays well conditioned for both very
    close and nearly antipodal points::

        a = sin²(Δφ/2) + cos φ1 ⋅ cos φ2 ⋅ sin²(Δλ/2)
        c = 2 ⋅ atan2(√a, √(1−a))
        d = R ⋅ c

    Args:
        source (LatLon): Start point.
        destination (LatLon): End point.
        radius: Sphere radius; defaults to 6 371 000 (metres).

    Returns:
        Distance in the same units as ``radius``.
    """
    r = resolve_radius(radius)
    phi1 = math.radians(source.latitude)
    phi2 = math.radians(destination.latitude)
    delta_phi = phi2 - phi1
    delta_lambda = math.radians(destination.longitude) - math.radians(source.longitude)

    a = (
        math.sin(delta_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return r * c


def bearing_between(source: LatLon, destination: LatLon) -> float:
    """Return the initial bearing from ``source`` to ``destination``.

    θ = atan2(sin Δλ ⋅ cos φ2, cos φ1 ⋅ sin φ2 − sin φ1 ⋅ cos φ2 ⋅ cos Δλ)

    Returns:
        float: Degrees clockwise from north, in [0, 360).
    """
    phi1 = math.radians(source.latitude)
    phi2 = math.radians(destination.latitude)
    delta_lambda = math.radians(destination.longitude - source.longitude)

    y = math.sin(delta_lambda) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(delta_lambda)
    theta = math.atan2(y, x)
    return (math.degrees(theta) + 360) % 360


def final_bearing_to(source: LatLon, destination: LatLon) -> float:
    """Return the bearing on arrival at ``destination`` travelling from ``source``.

    The final bearing differs from the initial one by an amount that grows
    with distance and latitude.
    """
    return (bearing_between(destination, source) + 180) % 360


def midpoint_between(source: LatLon, destination: LatLon) -> LatLon:
    """Return the point half-way along the great circle between two points.

    Bx = cos φ2 ⋅ cos Δλ, By = cos φ2 ⋅ sin Δλ
    φm = atan2(sin φ1 + sin φ2, √((cos φ1 + Bx)² + By²))
    λm = λ1 + atan2(By, cos φ1 + Bx)
    """
    phi1 = math.radians(source.latitude)
    lambda1 = math.radians(source.longitude)
    phi2 = math.radians(destination.latitude)
    delta_lambda = math.radians(destination.longitude - source.longitude)

    bx = math.cos(phi2) * math.cos(delta_lambda)
    by = math.cos(phi2) * math.sin(delta_lambda)

    phi_m = math.atan2(
        math.sin(phi1) + math.sin(phi2),
        math.sqrt((math.cos(phi1) + bx) ** 2 + by**2),
    )
    lambda_m = wrap_longitude(lambda1 + math.atan2(by, math.cos(phi1) + bx))
    return LatLon.from_rad(phi_m, lambda_m)


def destination_point(
    source: LatLon,
    distance: Number,
    bearing: Number,
    radius: Number | None = None,
) -> LatLon:
    """Return the point reached by travelling ``distance`` on an initial ``bearing``.

    φ2 = asin(sin φ1 ⋅ cos δ + cos φ1 ⋅ sin δ ⋅ cos θ)
    λ2 = λ1 + atan2(sin θ ⋅ sin δ ⋅ cos φ1, cos δ − sin φ1 ⋅ sin φ2)

    Args:
        source (LatLon): Start point.
        distance: Distance travelled, in the same units as ``radius``.
        bearing: Initial bearing in degrees from north.
        radius: Sphere radius; defaults to 6 371 000 (metres).

    Example:
        >>> p = destination_point(LatLon(51.4778, -0.0015), 7794, 300.7)
        >>> p.to_string("d")
        '51.5135°N,000.0983°W'
    """
    delta = distance / resolve_radius(radius)
    theta = math.radians(bearing)
    phi1 = math.radians(source.latitude)
    lambda1 = math.radians(source.longitude)

    phi2 = asin(
        math.sin(phi1) * math.cos(delta) + math.cos(phi1) * math.sin(delta) * math.cos(theta)
    )
    lambda2 = lambda1 + math.atan2(
        math.sin(theta) * math.sin(delta) * math.cos(phi1),
        math.cos(delta) - math.sin(phi1) * math.sin(phi2),
    )
    return LatLon.from_rad(phi2, wrap_longitude(lambda2))


def intersection(
    point1: LatLon,
    bearing1: Number,
    point2: LatLon,
    bearing2: Number,
) -> LatLon | None:
    """Return where two great-circle paths, each given by a point and bearing, cross.

    Solves the spherical triangle formed by the two points and the
    intersection::

        δ12 = 2 ⋅ asin(√(sin²(Δφ/2) + cos φ1 ⋅ cos φ2 ⋅ sin²(Δλ/2)))
        θa  = acos((sin φ2 − sin φ1 ⋅ cos δ12) / (sin δ12 ⋅ cos φ1))
        θb  = acos((sin φ1 − sin φ2 ⋅ cos δ12) / (sin δ12 ⋅ cos φ2))
        α1  = θ13 − θ12,  α2 = θ21 − θ23
        α3  = acos(−cos α1 ⋅ cos α2 + sin α1 ⋅ sin α2 ⋅ cos δ12)
        δ13 = atan2(sin δ12 ⋅ sin α1 ⋅ sin α2, cos α2 + cos α1 ⋅ cos α3)

    and projects δ13 from ``point1`` along ``bearing1``.

    Args:
        point1 (LatLon): First point.
        bearing1: Initial bearing from ``point1``, degrees.
        point2 (LatLon): Second point.
        bearing2: Initial bearing from ``point2``, degrees.

    Returns:
        LatLon | None: The intersection, or None if the points coincide, the
        paths lie on the same great circle (infinite intersections), or the
        intersection is ambiguous.

    Example:
        >>> p = intersection(LatLon(51.8853, 0.2545), 108.547,
        ...                  LatLon(49.0034, 2.5735), 32.435)
        >>> p.to_string("d")
        '50.9078°N,004.5084°E'
    """
    phi1 = math.radians(point1.latitude)
    lambda1 = math.radians(point1.longitude)
    phi2 = math.radians(point2.latitude)
    lambda2 = math.radians(point2.longitude)
    theta13 = math.radians(bearing1)
    theta23 = math.radians(bearing2)
    delta_phi = phi2 - phi1
    delta_lambda = lambda2 - lambda1

    delta12 = 2 * asin(
        math.sqrt(
            math.sin(delta_phi / 2) ** 2
            + math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
        )
    )
    if delta12 == 0.0:
        logger.debug("No intersection: %s and %s coincide", point1, point2)
        return None

    theta_a = acos(
        (math.sin(phi2) - math.sin(phi1) * math.cos(delta12))
        / (math.sin(delta12) * math.cos(phi1))
    )
    theta_b = acos(
        (math.sin(phi1) - math.sin(phi2) * math.cos(delta12))
        / (math.sin(delta12) * math.cos(phi2))
    )

    if math.sin(delta_lambda) > 0:
        theta12 = theta_a
        theta21 = TWO_PI - theta_b
    else:
        theta12 = TWO_PI - theta_a
        theta21 = theta_b

    alpha1 = (theta13 - theta12 + math.pi) % TWO_PI - math.pi  # angle 2-1-3
    alpha2 = (theta21 - theta23 + math.pi) % TWO_PI - math.pi  # angle 1-2-3

    if math.sin(alpha1) == 0.0 and math.sin(alpha2) == 0.0:
        logger.debug("No intersection: paths lie on the same great circle")
        return None
    if math.sin(alpha1) * math.sin(alpha2) < 0:
        logger.debug("No intersection: paths diverge on opposite sides")
        return None

    alpha3 = acos(
        -math.cos(alpha1) * math.cos(alpha2)
        + math.sin(alpha1) * math.sin(alpha2) * math.cos(delta12)
    )
    delta13 = math.atan2(
        math.sin(delta12) * math.sin(alpha1) * math.sin(alpha2),
        math.cos(alpha2) + math.cos(alpha1) * math.cos(alpha3),
    )
    phi3 = asin(
        math.sin(phi1) * math.cos(delta13)
        + math.cos(phi1) * math.sin(delta13) * math.cos(theta13)
    )
    delta_lambda13 = math.atan2(
        math.sin(theta13) * math.sin(delta13) * math.cos(phi1),
        math.cos(delta13) - math.sin(phi1) * math.sin(phi3),
    )
    return LatLon.from_rad(phi3, wrap_longitude(lambda1 + delta_lambda13))


def cross_track_distance_to(
    point: LatLon,
    path_start: LatLon,
    path_end: LatLon,
    radius: Number | None = None,
) -> float:
    """Return the signed distance from ``point`` to the great circle through a path.

    dxt = asin(sin δ13 ⋅ sin(θ13 − θ12)) ⋅ R

    where δ13 is the angular distance from the path start to ``point``, and
    θ13, θ12 are the initial bearings from the path start to ``point`` and
    to the path end.

    Returns:
        Distance in the same units as ``radius``; negative when ``point`` is
        left of the path, positive when right.

    Example:
        >>> d = cross_track_distance_to(LatLon(53.2611, -0.7972),
        ...                             LatLon(53.3206, -1.7297),
        ...                             LatLon(53.1887, 0.1334))
        >>> round(d, 1)
        -307.5
    """
    r = resolve_radius(radius)
    delta13 = distance_between(path_start, point, r) / r
    theta13 = math.radians(bearing_between(path_start, point))
    theta12 = math.radians(bearing_between(path_start, path_end))
    return asin(math.sin(delta13) * math.sin(theta13 - theta12)) * r
