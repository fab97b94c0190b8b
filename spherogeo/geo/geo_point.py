"""Latitude/longitude coordinate value.

LatLon is the point type every geodesy function takes and returns. It holds
plain float degrees, performs no range clamping, and is frozen once built.
Its only behaviour is rendering itself through the DMS formatter.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from spherogeo import dms
from spherogeo.config import DEFAULT_FORMAT


@dataclass(frozen=True)
class LatLon:
    """A point on the sphere, in decimal degrees.

    Values outside -90..90 / -180..180 are kept as given; the formulas are
    defined for them modulo the trigonometric domain.

    Attributes:
        latitude (float): Degrees north (negative for south).
        longitude (float): Degrees east (negative for west).

    Example:
        >>> greenwich = LatLon(51.4778, -0.0015)
        >>> str(greenwich)
        '51°28′40″N,000°00′05″W'
        >>> greenwich.to_string("d", 2)
        '51.48°N,000.00°W'
    """

    latitude: float
    longitude: float

    @classmethod
    def from_rad(cls, lat: float, lon: float) -> LatLon:
        """Create a LatLon from latitude and longitude in radians.

        Example:
            >>> LatLon.from_rad(math.pi / 4, math.pi / 3)
            LatLon(latitude=45.0, longitude=59.99999999999999)
        """
        return cls(math.degrees(lat), math.degrees(lon))

    @classmethod
    def from_dms(cls, lat: str, lon: str) -> LatLon | None:
        """Create a LatLon from two degree strings.

        Each string is read with :func:`spherogeo.dms.parse`, so compass
        suffixes set the sign.

        Returns:
            LatLon | None: The point, or None if either string is unparseable.

        Example:
            >>> p = LatLon.from_dms("51° 28′ 40″ N", "000° 00′ 05″ W")
            >>> p.to_string("d")
            '51.4778°N,000.0014°W'
            >>> LatLon.from_dms("north", "west") is None
            True
        """
        latitude = dms.parse(lat)
        longitude = dms.parse(lon)
        if latitude is None or longitude is None:
            return None
        return cls(latitude, longitude)

    def to_string(self, fmt: str | None = DEFAULT_FORMAT, precision: int | None = None) -> str:
        """Render as ``"<lat>,<lon>"`` in the given DMS notation.

        Args:
            fmt: ``"d"``, ``"dm"`` or ``"dms"``. Defaults to ``"dms"``.
            precision: Decimal places on the last field; defaults per notation.

        Returns:
            str: e.g. ``"50.5363°N,001.2746°E"`` for ``fmt="d"``.
        """
        return f"{dms.to_lat(self.latitude, fmt, precision)},{dms.to_lon(self.longitude, fmt, precision)}"

    def __str__(self) -> str:
        return self.to_string()
