"""Library-wide defaults and numeric type aliases for spherical geodesy.

Every function in the package that takes an optional radius, format tag or
precision falls back to the values defined here. Nothing in this module is
mutated at runtime; callers override a default by passing the keyword
argument explicitly rather than by patching the module.

Constants:
    EARTH_RADIUS: Mean radius of the Earth sphere, in metres.
    DEFAULT_FORMAT: DMS notation used when none is given ("dms").
    DEFAULT_PRECISION: Decimal places used per notation when none is given.
    FORMAT_ALIASES: Accepted notation tags (lower case) mapped to their
                    canonical short form.
    RHUMB_TOLERANCE: Below this |Δψ| a rhumb line is treated as east-west and
                     the Mercator stretch factor falls back to cos φ.
    COMPASS_PRECISION: Default (and maximum) compass rose precision.
    ABSENT: Placeholder rendered when a coordinate cannot be formatted.

Type Definitions:
    Number: Scalar numeric input accepted by the scalar formulas.
    BASE_TYPE: Scalar or NumPy array input accepted by the batch formulas.

Example:
    >>> from spherogeo.config import EARTH_RADIUS, DEFAULT_PRECISION
    >>> EARTH_RADIUS
    6371000.0
    >>> DEFAULT_PRECISION["dm"]
    2
"""

from numpy import ndarray

EARTH_RADIUS = 6_371_000.0

DEFAULT_FORMAT = "dms"

DEFAULT_PRECISION = {"d": 4, "dm": 2, "dms": 0}

FORMAT_ALIASES = {
    "d": "d",
    "deg": "d",
    "dm": "dm",
    "deg+min": "dm",
    "dms": "dms",
    "deg+min+sec": "dms",
}

RHUMB_TOLERANCE = 1e-11

COMPASS_PRECISION = 3

ABSENT = "–"

Number = int | float

BASE_TYPE = int | float | ndarray
