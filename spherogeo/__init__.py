"""Spherical-Earth geodesy and degrees/minutes/seconds conversion.

spherogeo answers the everyday navigation questions on a spherical Earth:
how far apart two points are, which way to head, where the half-way point
is, where a course ends up, where two courses cross, and how far a point
lies off a track. It does so for both great-circle (shortest) paths and
rhumb lines (constant bearing). Alongside the formulas it reads and writes
angles in degrees/minutes/seconds notation.

Package Components:
    Coordinates (spherogeo.geo):
        • LatLon: Immutable latitude/longitude point in decimal degrees

    Geodesy (spherogeo.geodesy):
        • Great circle: distance, initial/final bearing, midpoint,
          destination, intersection, cross-track distance
        • Rhumb line: distance, bearing, destination, midpoint
        • Batch: NumPy distance and bearing over arrays of points

    Angle notation (spherogeo.dms):
        • parse: "40° 44′ 55″ N" → 40.748611
        • to_dms / to_lat / to_lon / to_brng: degrees → formatted strings
        • compass_point: bearing → "NNE"

Failure Model:
    Questions without a meaningful answer return None: an unparseable
    angle string, a value that cannot be formatted, or an intersection that
    is undefined or ambiguous. Callers should treat None as "no answer",
    never as zero.

Usage:
    >>> from spherogeo import LatLon, dms
    >>> from spherogeo.geodesy import distance_between, bearing_between
    >>>
    >>> bangalore = LatLon(12.97194, 77.59369)
    >>> chennai = LatLon(13.08784, 80.27847)
    >>> print(f"{distance_between(bangalore, chennai) / 1000:.1f} km")
    291.1 km
    >>> dms.compass_point(bearing_between(bangalore, chennai))
    'E'
    >>> str(bangalore)
    '12°58′19″N,077°35′37″E'

Logging:
    Modules log through ``logging.getLogger(__name__)`` at DEBUG level only,
    when a result comes back as None or a trigonometric argument is
    clamped. No handlers are configured by the library.
"""

from spherogeo.geo import LatLon

__all__ = ["LatLon"]
