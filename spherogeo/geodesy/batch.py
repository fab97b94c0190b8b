"""Vectorised great-circle distance and bearing over NumPy arrays.

These mirror :func:`distance_between` and :func:`bearing_between` for many
points at once. Inputs broadcast against each other, so one origin can be
measured against an array of targets, or every pair in two point sets via
:func:`distance_matrix`.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from spherogeo.config import BASE_TYPE
from spherogeo.geo import LatLon

from ._spherical import resolve_radius


def haversine_distance(
    lat1: BASE_TYPE,
    lon1: BASE_TYPE,
    lat2: BASE_TYPE,
    lon2: BASE_TYPE,
    radius: float | None = None,
) -> np.ndarray:
    """Great-circle distance between broadcastable arrays of degrees.

    Returns:
        np.ndarray: Distances in the units of ``radius``, metres when it is omitted.
    """
    phi1, phi2 = np.radians(lat1), np.radians(lat2)
    dphi = phi2 - phi1
    dlam = np.radians(lon2) - np.radians(lon1)
    a = np.sin(dphi / 2) ** 2 + np.cos(phi1) * np.cos(phi2) * np.sin(dlam / 2) ** 2
    a = np.clip(a, 0.0, 1.0)
    return resolve_radius(radius) * 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))


def initial_bearing(
    lat1: BASE_TYPE, lon1: BASE_TYPE, lat2: BASE_TYPE, lon2: BASE_TYPE
) -> np.ndarray:
    """Initial great-circle bearing, degrees in [0, 360), between broadcastable arrays."""
    phi1, phi2 = np.radians(lat1), np.radians(lat2)
    dlam = np.radians(np.subtract(lon2, lon1))
    y = np.sin(dlam) * np.cos(phi2)
    x = np.cos(phi1) * np.sin(phi2) - np.sin(phi1) * np.cos(phi2) * np.cos(dlam)
    return (np.degrees(np.arctan2(y, x)) + 360) % 360


def _as_arrays(points: Sequence[LatLon]) -> tuple[np.ndarray, np.ndarray]:
    lats = np.fromiter((p.latitude for p in points), dtype=float, count=len(points))
    lons = np.fromiter((p.longitude for p in points), dtype=float, count=len(points))
    return lats, lons


def distances_from(
    origin: LatLon, points: Sequence[LatLon], radius: float | None = None
) -> np.ndarray:
    """Distance from ``origin`` to each of ``points``, as a 1-D array."""
    lats, lons = _as_arrays(points)
    return haversine_distance(origin.latitude, origin.longitude, lats, lons, radius)


def bearings_from(origin: LatLon, points: Sequence[LatLon]) -> np.ndarray:
    """Initial bearing from ``origin`` to each of ``points``, as a 1-D array."""
    lats, lons = _as_arrays(points)
    return initial_bearing(origin.latitude, origin.longitude, lats, lons)


def distance_matrix(
    sources: Sequence[LatLon],
    targets: Sequence[LatLon] | None = None,
    radius: float | None = None,
) -> np.ndarray:
    """Pairwise distances, shape ``(len(sources), len(targets))``.

    With ``targets`` omitted the matrix is square over ``sources`` and has a
    zero diagonal.

    Example:
        >>> pts = [LatLon(52.205, 0.119), LatLon(48.857, 2.351)]
        >>> m = distance_matrix(pts)
        >>> m.shape
        (2, 2)
    """
    if targets is None:
        targets = sources
    src_lat, src_lon = _as_arrays(sources)
    dst_lat, dst_lon = _as_arrays(targets)
    return haversine_distance(
        src_lat[:, np.newaxis], src_lon[:, np.newaxis], dst_lat, dst_lon, radius
    )
