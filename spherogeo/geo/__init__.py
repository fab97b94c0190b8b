"""Geographic coordinate value for spherical geodesy.

Components:
    LatLon: Immutable latitude/longitude point in decimal degrees, rendered
            through the DMS formatter.

Typical Usage:
    >>> from spherogeo.geo import LatLon
    >>>
    >>> cambridge = LatLon(52.205, 0.119)
    >>> print(cambridge.to_string("d"))
    52.2050°N,000.1190°E
    >>> paris = LatLon.from_dms("48° 51′ 25″ N", "2° 21′ 04″ E")
"""

from .geo_point import LatLon

__all__ = ["LatLon"]
