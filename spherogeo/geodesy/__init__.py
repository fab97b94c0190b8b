"""Spherical geodesy: great-circle and rhumb-line formulas.

Every function is pure and keeps no state between calls. Points are
:class:`~spherogeo.geo.LatLon` values in degrees; bearings are degrees from
north; distances are in the units of ``radius``, which defaults to the
Earth's mean radius in metres.

Components:
    great_circle: Shortest-path distance, bearings, midpoint, destination,
                  intersection and cross-track distance.
    rhumb: Constant-bearing distance, bearing, destination and midpoint.
    batch: NumPy versions of distance and bearing for many points at once.

Typical Usage:
    >>> from spherogeo import LatLon
    >>> from spherogeo.geodesy import destination_point, rhumb_distance_between
    >>>
    >>> greenwich = LatLon(51.4778, -0.0015)
    >>> destination_point(greenwich, 7794, 300.7).to_string("d")
    '51.5135°N,000.0983°W'
"""

from .batch import bearings_from, distance_matrix, distances_from, haversine_distance, initial_bearing
from .great_circle import (
    bearing_between,
    cross_track_distance_to,
    destination_point,
    distance_between,
    final_bearing_to,
    intersection,
    midpoint_between,
)
from .rhumb import (
    rhumb_bearing_between,
    rhumb_destination_point,
    rhumb_distance_between,
    rhumb_midpoint_between,
)

__all__ = [
    # Great circle
    "distance_between",
    "bearing_between",
    "final_bearing_to",
    "midpoint_between",
    "destination_point",
    "intersection",
    "cross_track_distance_to",
    # Rhumb line
    "rhumb_distance_between",
    "rhumb_bearing_between",
    "rhumb_destination_point",
    "rhumb_midpoint_between",
    # Batch
    "haversine_distance",
    "initial_bearing",
    "distances_from",
    "bearings_from",
    "distance_matrix",
]
