"""
geojson_compliance
==================

GeoJSON object model with an RFC 7946 compliance engine: polygon winding
normalization (right-hand rule) and antimeridian cutting.

    from geojson_compliance import ProcessingOptions, process, loads

    obj = process(loads(text), ProcessingOptions.rfc7946())
"""

from geojson_compliance.config import ProcessingOptions
from geojson_compliance.errors import (
    GeoJsonDecodeError,
    GeoJsonError,
    InvalidRingError,
    OrientationViolationError,
)
from geojson_compliance.model import (
    Crs,
    Feature,
    FeatureCollection,
    GeoJsonObject,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Position,
)
from geojson_compliance.compliance import process
from geojson_compliance.io import GeoJsonMapper, dumps, loads

__version__ = "0.1.0"

__all__ = [
    "Crs",
    "Feature",
    "FeatureCollection",
    "GeoJsonDecodeError",
    "GeoJsonError",
    "GeoJsonMapper",
    "GeoJsonObject",
    "Geometry",
    "GeometryCollection",
    "InvalidRingError",
    "LineString",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "OrientationViolationError",
    "Point",
    "Polygon",
    "Position",
    "ProcessingOptions",
    "dumps",
    "loads",
    "process",
]
