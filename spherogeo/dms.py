"""Conversion between decimal degrees and degrees/minutes/seconds notation.

Parsing is deliberately lenient: plain signed decimals are accepted as-is,
and otherwise any run of non-numeric characters is treated as a separator,
so ``40°44′55″N``, ``40 44 55 N`` and ``40:44:55N`` all read the same.
Formatting is strict: degrees are zero-padded to three digits (two for
latitudes), minutes and seconds to two, and the sign is never written
into the number itself. Latitude and longitude strings carry an N/S or
E/W suffix instead.

Unparseable input and unformattable values produce ``None`` (or the
``ABSENT`` placeholder for the suffixed renderings) rather than raising.

Functions:
    parse: Free-form degree string to decimal degrees.
    to_dms: Decimal degrees to ``d``, ``dm`` or ``dms`` notation.
    to_lat: Latitude string with N/S suffix.
    to_lon: Longitude string with E/W suffix.
    to_brng: Bearing string normalised to 0°..360°.
    compass_point: Compass point name for a bearing.

Example:
    >>> round(parse("51° 28′ 40.12″ N"), 6)
    51.477811
    >>> to_dms(51.4778, "dm")
    '051°28.67′'
    >>> to_lat(-33.8688, "d", 2)
    '33.87°S'
    >>> compass_point(24)
    'NNE'
"""

from __future__ import annotations

import logging
import math
import re

from spherogeo.config import (
    ABSENT,
    COMPASS_PRECISION,
    DEFAULT_FORMAT,
    DEFAULT_PRECISION,
    FORMAT_ALIASES,
    Number,
)

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[^0-9.,]+")
_LEADING_SIGN = re.compile(r"^-")
_TRAILING_COMPASS = re.compile(r"[NSEW]$", re.IGNORECASE)
_NEGATIVE = re.compile(r"^-|[WS]$", re.IGNORECASE)

_COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE",
    "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW",
    "W", "WNW", "NW", "NNW",
)


def parse(text: str | None) -> float | None:
    """Parse a degree string into decimal degrees.

    A string that is already a finite signed decimal is returned as a float.
    Anything else is read as up to three numeric fields (degrees, minutes,
    seconds) separated by arbitrary non-numeric characters, optionally
    prefixed with ``-`` or suffixed with a compass letter. A leading ``-`` or
    a trailing ``S``/``W`` makes the result negative.

    Args:
        text: Degrees in decimal or deg/min/sec form, e.g. ``"3° 37′ 09″W"``.

    Returns:
        float | None: Decimal degrees, or None if the string has no usable
        numeric fields.
    """
    if not isinstance(text, str):
        return None

    try:
        value = float(text)
    except ValueError:
        pass
    else:
        if math.isfinite(value):
            return value

    trimmed = text.strip()
    body = _TRAILING_COMPASS.sub("", _LEADING_SIGN.sub("", trimmed))
    fields = _SEPARATORS.split(body)
    if fields and not fields[-1]:
        fields.pop()

    if not 1 <= len(fields) <= 3:
        logger.debug("No degree fields in %r", text)
        return None

    try:
        parts = [float(field) for field in fields]
    except ValueError:
        logger.debug("Malformed degree field in %r", text)
        return None

    weights = (1, 60, 3600)
    degrees = sum(part / weight for part, weight in zip(parts, weights))
    if _NEGATIVE.search(trimmed):
        degrees = -degrees
    return degrees


def _canonical_format(fmt: str | None) -> str | None:
    if not fmt:
        return DEFAULT_FORMAT
    return FORMAT_ALIASES.get(fmt.lower())


def _scaled_round(value: float, precision: int) -> int:
    """Round a non-negative value half away from zero, in units of 10**-precision."""
    return math.floor(value * 10**precision + 0.5)


def _fixed(units: int, precision: int, width: int) -> str:
    """Render an integer count of 10**-precision units as a padded decimal."""
    whole, frac = divmod(units, 10**precision)
    if precision == 0:
        return f"{whole:0{width}d}"
    return f"{whole:0{width}d}.{frac:0{precision}d}"


def to_dms(
    deg: Number | None,
    fmt: str | None = DEFAULT_FORMAT,
    precision: int | None = None,
) -> str | None:
    """Format decimal degrees as degrees, deg+min, or deg+min+sec.

    The sign is discarded and no compass letter is added; degrees are padded
    to three digits. The value is rounded half away from zero at the
    requested precision of the smallest field before it is split up, so a
    carry (59.6″ at precision 0) propagates into minutes and degrees.

    Args:
        deg: Degrees to format.
        fmt: ``"d"``, ``"dm"`` or ``"dms"`` (or ``"deg"``, ``"deg+min"``,
            ``"deg+min+sec"``). Defaults to ``"dms"``.
        precision: Decimal places on the last field. Defaults to 4 for
            ``d``, 2 for ``dm`` and 0 for ``dms``.

    Returns:
        str | None: Formatted string, or None if ``deg`` is None or not
        finite, ``fmt`` is not a known notation, or ``precision`` is negative.

    Example:
        >>> to_dms(40.74861111111111, "dms", 2)
        '040°44′55.00″'
    """
    if deg is None:
        return None

    canonical = _canonical_format(fmt)
    if canonical is None:
        logger.debug("Unknown degree format %r", fmt)
        return None

    if precision is None:
        precision = DEFAULT_PRECISION[canonical]
    if precision < 0:
        logger.debug("Negative precision %r", precision)
        return None

    deg = abs(deg)
    if not math.isfinite(deg):
        logger.debug("Cannot format non-finite degrees %r", deg)
        return None

    scale = 10**precision
    if canonical == "d":
        units = _scaled_round(deg, precision)
        return f"{_fixed(units, precision, 3)}°"

    if canonical == "dm":
        units = _scaled_round(deg * 60, precision)
        degrees, minutes = divmod(units, 60 * scale)
        return f"{degrees:03d}°{_fixed(minutes, precision, 2)}′"

    units = _scaled_round(deg * 3600, precision)
    degrees, remainder = divmod(units, 3600 * scale)
    minutes, seconds = divmod(remainder, 60 * scale)
    return f"{degrees:03d}°{minutes:02d}′{_fixed(seconds, precision, 2)}″"


def to_lat(
    deg: Number | None,
    fmt: str | None = DEFAULT_FORMAT,
    precision: int | None = None,
) -> str:
    """Format degrees as a latitude: two-digit degrees suffixed with N or S.

    Returns:
        str: e.g. ``"51°28′40″N"``, or ``ABSENT`` if the value cannot be formatted.
    """
    lat = to_dms(deg, fmt, precision)
    if lat is None:
        return ABSENT
    if lat.startswith("0"):
        lat = lat[1:]
    return lat + ("S" if deg < 0 else "N")


def to_lon(
    deg: Number | None,
    fmt: str | None = DEFAULT_FORMAT,
    precision: int | None = None,
) -> str:
    """Format degrees as a longitude: three-digit degrees suffixed with E or W.

    Returns:
        str: e.g. ``"000°00′05″W"``, or ``ABSENT`` if the value cannot be formatted.
    """
    lon = to_dms(deg, fmt, precision)
    if lon is None:
        return ABSENT
    return lon + ("W" if deg < 0 else "E")


def to_brng(
    deg: Number | None,
    fmt: str | None = DEFAULT_FORMAT,
    precision: int | None = None,
) -> str:
    """Format degrees as a bearing in the range 0°..360°.

    Negative values are normalised first. If rounding takes the value up to
    360 the first ``"360"`` in the output is rewritten as ``"0"``, so
    ``359.9999`` at ``d``/2 renders as ``"0.00°"``.

    Returns:
        str: Formatted bearing, or ``ABSENT`` if the value cannot be formatted.
    """
    if deg is None:
        return ABSENT
    brng = to_dms((deg + 360) % 360, fmt, precision)
    if brng is None:
        return ABSENT
    return brng.replace("360", "0", 1)


def compass_point(bearing: Number, precision: int | None = COMPASS_PRECISION) -> str | None:
    """Return the compass point nearest to a bearing.

    Args:
        bearing: Bearing in degrees from north.
        precision: 1 for the 4 cardinal points, 2 to add the intercardinals
            (8 points), 3 for the full 16-point rose. Values above 3 are
            treated as 3. Defaults to 3.

    Returns:
        str | None: Compass point name such as ``"N"``, ``"NE"`` or
        ``"NNE"``, or None if ``precision`` is below 1 or ``bearing`` is not
        finite.

    Example:
        >>> compass_point(24)
        'NNE'
        >>> compass_point(24, 1)
        'N'
    """
    if precision is None:
        precision = COMPASS_PRECISION
    precision = min(precision, COMPASS_PRECISION)
    if precision < 1:
        logger.debug("Compass precision %r below 1", precision)
        return None
    if not math.isfinite(bearing):
        logger.debug("No compass point for bearing %r", bearing)
        return None

    points = 4 * 2 ** (precision - 1)
    bearing %= 360
    index = math.floor(bearing * points / 360 + 0.5) % points
    return _COMPASS_POINTS[index * (len(_COMPASS_POINTS) // points)]
