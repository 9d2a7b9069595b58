"""GeoJSON encoding and decoding.

Converts between the dataclass model and the RFC 7946 wire form:

- `to_dict(obj)` / `from_dict(data)` : plain Python dicts and lists
- `dumps(obj)` / `loads(text)` : JSON text via the standard `json` module
- `to_shapely(obj)` / `from_shapely(geom)` : shapely geometries

Positions are written as ``[lon, lat]``, ``[lon, lat, alt]`` or
``[lon, lat, alt, *extra]``. Decoding accepts tuples as well as lists.
"""

import json
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from geojson_compliance.errors import GeoJsonDecodeError
from geojson_compliance.model import (
    Crs,
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
    Position,
)
from geojson_compliance.utils import safe_log_exception

logger = logging.getLogger(__name__)


def position_to_list(p: Position) -> List[float]:
    out = [p.longitude, p.latitude]
    if p.altitude is not None:
        out.append(p.altitude)
        out.extend(p.additional_elements)
    return out


def position_from_list(values: Sequence[Any]) -> Position:
    if len(values) < 2:
        raise GeoJsonDecodeError(f'A position needs at least 2 elements, got {len(values)}')
    try:
        nums = [float(v) for v in values]
    except (TypeError, ValueError) as e:
        raise GeoJsonDecodeError(f'Position elements must be numbers: {values!r}') from e
    altitude = nums[2] if len(nums) > 2 else None
    return Position(nums[0], nums[1], altitude, tuple(nums[3:]))


def _bbox_from_list(values) -> List[float]:
    try:
        return [float(v) for v in values]
    except (TypeError, ValueError) as e:
        raise GeoJsonDecodeError(f'bbox must be a list of numbers: {values!r}') from e


def _positions(values) -> List[Position]:
    return [position_from_list(v) for v in values]


def _nested(values) -> List[List[Position]]:
    return [_positions(v) for v in values]


def _positions_out(positions) -> List[List[float]]:
    return [position_to_list(p) for p in positions]


def _nested_out(rings) -> List[List[List[float]]]:
    return [_positions_out(r) for r in rings]


def _crs_to_dict(crs: Crs) -> Dict[str, Any]:
    return {'type': crs.type, 'properties': dict(crs.properties)}


def _crs_from_dict(data: Mapping[str, Any]) -> Crs:
    return Crs(type=data.get('type', 'name'), properties=dict(data.get('properties') or {}))


def to_dict(obj: GeoJsonObject) -> Dict[str, Any]:
    """Return the wire-form dict for any model object."""
    out: Dict[str, Any] = {'type': obj.type}
    if isinstance(obj, Point):
        if obj.coordinates is not None:
            out['coordinates'] = position_to_list(obj.coordinates)
    elif isinstance(obj, (LineString, MultiPoint)):
        out['coordinates'] = _positions_out(obj.coordinates)
    elif isinstance(obj, (Polygon, MultiLineString)):
        out['coordinates'] = _nested_out(obj.coordinates)
    elif isinstance(obj, MultiPolygon):
        out['coordinates'] = [_nested_out(p) for p in obj.coordinates]
    elif isinstance(obj, GeometryCollection):
        out['geometries'] = [to_dict(g) for g in obj.geometries]
    elif isinstance(obj, Feature):
        out['geometry'] = to_dict(obj.geometry) if obj.geometry is not None else None
        out['properties'] = obj.properties
        if obj.id is not None:
            out['id'] = obj.id
    elif isinstance(obj, FeatureCollection):
        out['features'] = [to_dict(f) for f in obj.features]
    else:
        raise TypeError(f'Cannot encode {type(obj).__name__} as GeoJSON')
    if obj.bbox is not None:
        out['bbox'] = list(obj.bbox)
    if obj.crs is not None:
        out['crs'] = _crs_to_dict(obj.crs)
    return out


def _point(data):
    coords = data.get('coordinates')
    return Point(coordinates=position_from_list(coords) if coords else None)


def _feature(data):
    geometry = data.get('geometry')
    return Feature(
        geometry=from_dict(geometry) if geometry is not None else None,
        properties=dict(data.get('properties') or {}),
        id=data.get('id'),
    )


_DECODERS: Dict[str, Callable[[Mapping[str, Any]], GeoJsonObject]] = {
    'Point': _point,
    'MultiPoint': lambda d: MultiPoint(coordinates=_positions(d.get('coordinates', []))),
    'LineString': lambda d: LineString(coordinates=_positions(d.get('coordinates', []))),
    'MultiLineString': lambda d: MultiLineString(coordinates=_nested(d.get('coordinates', []))),
    'Polygon': lambda d: Polygon(coordinates=_nested(d.get('coordinates', []))),
    'MultiPolygon': lambda d: MultiPolygon(coordinates=[_nested(p) for p in d.get('coordinates', [])]),
    'GeometryCollection': lambda d: GeometryCollection(geometries=[from_dict(g) for g in d.get('geometries', [])]),
    'Feature': _feature,
    'FeatureCollection': lambda d: FeatureCollection(features=[from_dict(f) for f in d.get('features', [])]),
}


def from_dict(data: Mapping[str, Any]) -> GeoJsonObject:
    """Build a model object from its wire-form mapping.

    Raises `GeoJsonDecodeError` for a missing or unknown ``type``.
    """
    if not isinstance(data, Mapping):
        raise GeoJsonDecodeError(f'Expected a JSON object, got {type(data).__name__}')
    kind = data.get('type')
    decoder = _DECODERS.get(kind)
    if decoder is None:
        raise GeoJsonDecodeError(f'Unknown GeoJSON type {kind!r}')
    try:
        obj = decoder(data)
    except GeoJsonDecodeError:
        raise
    except (TypeError, AttributeError) as e:
        safe_log_exception('Malformed GeoJSON member', e, type=kind)
        raise GeoJsonDecodeError(f'Malformed {kind}: {e}') from e
    if data.get('bbox') is not None:
        obj.bbox = _bbox_from_list(data['bbox'])
    if data.get('crs') is not None:
        obj.crs = _crs_from_dict(data['crs'])
    return obj


def dumps(obj: GeoJsonObject, **kwargs: Any) -> str:
    """Serialize `obj` to JSON text; `kwargs` go to `json.dumps`."""
    return json.dumps(to_dict(obj), **kwargs)


def loads(text: str) -> GeoJsonObject:
    """Parse JSON text into a model object.

    Raises `GeoJsonDecodeError` for invalid JSON or GeoJSON.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        safe_log_exception('Failed to parse GeoJSON text', e, length=len(text))
        raise GeoJsonDecodeError(f'Invalid JSON: {e}') from e
    return from_dict(data)


def to_shapely(obj: GeoJsonObject):
    """Return the shapely geometry for a geometry or a Feature's geometry."""
    from shapely.geometry import shape

    if isinstance(obj, Feature):
        obj = obj.geometry
    if obj is None:
        return None
    if isinstance(obj, FeatureCollection):
        raise TypeError('A FeatureCollection has no single shapely geometry')
    return shape(to_dict(obj))


def from_shapely(geom) -> Optional[GeoJsonObject]:
    """Build a model geometry from a shapely geometry (or None)."""
    if geom is None:
        return None
    from shapely.geometry import mapping

    return from_dict(mapping(geom))
