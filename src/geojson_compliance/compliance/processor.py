"""RFC 7946 processing of GeoJSON object graphs.

`process(obj, options)` walks Features, FeatureCollections and
GeometryCollections, fixing or validating polygon winding and cutting
geometries at the antimeridian as `options` asks. Containers are updated in
place and returned; a cut Polygon or LineString is replaced by the new
MultiPolygon or MultiLineString.
"""
import logging
from typing import Optional

from geojson_compliance.config import ProcessingOptions
from geojson_compliance.compliance.cutting import cut_line_string, cut_polygon
from geojson_compliance.compliance.orientation import fix_orientation, validate_orientation
from geojson_compliance.model import (
    Feature,
    FeatureCollection,
    GeoJsonObject,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from geojson_compliance.utils import describe

logger = logging.getLogger(__name__)


def process_polygon(polygon: Polygon, options: ProcessingOptions):
    if options.auto_fix_orientation and polygon.coordinates:
        polygon.coordinates = fix_orientation(polygon.coordinates)
    if options.validate_orientation:
        validate_orientation(polygon.coordinates)
    if options.cut_antimeridian:
        return cut_polygon(polygon)
    return polygon


def process_line_string(line: LineString, options: ProcessingOptions):
    if options.cut_antimeridian:
        return cut_line_string(line)
    return line


def process_feature(feature: Feature, options: ProcessingOptions) -> Feature:
    if feature.geometry is not None:
        feature.geometry = process(feature.geometry, options)
    return feature


def process_feature_collection(collection: FeatureCollection, options: ProcessingOptions) -> FeatureCollection:
    collection.features[:] = [process(f, options) for f in collection.features]
    return collection


def process_geometry_collection(collection: GeometryCollection, options: ProcessingOptions) -> GeometryCollection:
    collection.geometries[:] = [process(g, options) for g in collection.geometries]
    return collection


def _warn_legacy_crs(obj: GeoJsonObject, options: ProcessingOptions) -> None:
    if not options.warn_on_legacy_crs or obj.crs is None:
        return
    if obj.crs.is_wgs84():
        logger.warning('%s carries a crs member; RFC 7946 removed crs (WGS84 is implied)', describe(obj))
    else:
        logger.warning('%s uses non-WGS84 crs %r; RFC 7946 requires WGS84 coordinates', describe(obj), obj.crs.properties)


def process(obj: Optional[GeoJsonObject], options: ProcessingOptions):
    """Apply `options` to `obj` and return the processed object.

    With every option off the input is returned untouched.

    Raises:
    - `OrientationViolationError` if validation is on, auto-fix is off and a
      polygon breaks the right-hand rule
    - `InvalidRingError` for polygons with undersized rings when validating
      or fixing
    - `TypeError` for objects outside the GeoJSON model
    """
    if isinstance(obj, GeoJsonObject):
        _warn_legacy_crs(obj, options)

    match obj:
        case Polygon():
            return process_polygon(obj, options)
        case LineString():
            return process_line_string(obj, options)
        case Feature():
            return process_feature(obj, options)
        case FeatureCollection():
            return process_feature_collection(obj, options)
        case GeometryCollection():
            return process_geometry_collection(obj, options)
        case Point() | MultiPoint() | MultiLineString() | MultiPolygon() | None:
            return obj
        case _:
            raise TypeError(f'Cannot process {type(obj).__name__}; expected a GeoJSON object')
