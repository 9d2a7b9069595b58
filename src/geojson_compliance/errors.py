"""Exception types raised by geojson_compliance.

All derive from `ValueError` so callers that already guard against bad input
with `except ValueError` keep working.
"""


class GeoJsonError(ValueError):
    """Base class for GeoJSON model and compliance errors."""


class InvalidRingError(GeoJsonError):
    """A ring is missing or has too few positions to bound an area."""


class OrientationViolationError(GeoJsonError):
    """A polygon ring does not follow the right-hand rule."""


class GeoJsonDecodeError(GeoJsonError):
    """Input could not be decoded into a GeoJSON object."""
