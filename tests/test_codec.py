import json

import pytest

from geojson_compliance.errors import GeoJsonDecodeError
from geojson_compliance.io import codec
from geojson_compliance.model import (
    Crs,
    Feature,
    FeatureCollection,
    GeometryCollection,
    LineString,
    MultiPolygon,
    Point,
    Polygon,
    Position,
)


def test_position_with_altitude_serialization():
    point = Point(Position(49.43245, 52.42345, 120.34626))
    assert json.loads(codec.dumps(point))['coordinates'] == [49.43245, 52.42345, 120.34626]


def test_position_altitude_absent_vs_zero():
    assert codec.position_to_list(Position(1, 2)) == [1, 2]
    assert codec.position_to_list(Position(1, 2, 0.0)) == [1, 2, 0.0]
    assert codec.position_from_list([1, 2]).altitude is None
    assert codec.position_from_list([1, 2, 0]).altitude == 0.0


def test_position_additional_elements():
    p = codec.position_from_list([1, 2, 3, 4, 5])
    assert p.altitude == 3.0
    assert p.additional_elements == (4.0, 5.0)
    assert codec.position_to_list(p) == [1.0, 2.0, 3.0, 4.0, 5.0]


def test_position_decode_errors():
    with pytest.raises(GeoJsonDecodeError):
        codec.position_from_list([1])
    with pytest.raises(GeoJsonDecodeError):
        codec.position_from_list([1, 'north'])


def test_polygon_decode():
    text = json.dumps({
        'type': 'Polygon',
        'coordinates': [[[100, 0], [101, 0], [101, 1], [100, 1], [100, 0]]],
    })
    polygon = codec.loads(text)
    assert isinstance(polygon, Polygon)
    assert polygon.exterior_ring[1] == Position(101, 0)
    assert polygon.interior_rings == []


def test_feature_members():
    data = {
        'type': 'Feature',
        'geometry': {'type': 'Point', 'coordinates': [100.0, 5.0]},
        'properties': {'name': 'spot'},
        'id': 7,
        'bbox': [100.0, 5.0, 100.0, 5.0],
    }
    feature = codec.from_dict(data)
    assert isinstance(feature, Feature)
    assert feature.id == 7
    assert feature.bbox == [100.0, 5.0, 100.0, 5.0]
    assert codec.to_dict(feature) == data


def test_feature_null_geometry_and_properties():
    feature = codec.from_dict({'type': 'Feature', 'geometry': None, 'properties': None})
    assert feature.geometry is None
    assert feature.properties == {}
    assert codec.to_dict(feature) == {'type': 'Feature', 'geometry': None, 'properties': {}}


def test_crs_with_link():
    text = ('{"crs": {"type": "link", "properties": {"href": "http://example.com/crs/42", "type": "proj4"}},'
            '"type": "Point", "coordinates": [100.0, 5.0]}')
    point = codec.loads(text)
    assert point.crs.type == 'link'
    assert point.crs.properties['type'] == 'proj4'
    assert codec.to_dict(point)['crs']['type'] == 'link'


def test_nested_collections():
    data = {
        'type': 'FeatureCollection',
        'features': [
            {
                'type': 'Feature',
                'properties': {},
                'geometry': {
                    'type': 'GeometryCollection',
                    'geometries': [
                        {'type': 'LineString', 'coordinates': [[0, 0], [1, 1]]},
                        {'type': 'MultiPolygon', 'coordinates': [[[[0, 0], [1, 0], [1, 1], [0, 0]]]]},
                    ],
                },
            }
        ],
    }
    fc = codec.from_dict(data)
    assert isinstance(fc, FeatureCollection)
    gc = fc.features[0].geometry
    assert isinstance(gc, GeometryCollection)
    assert isinstance(gc.geometries[0], LineString)
    assert isinstance(gc.geometries[1], MultiPolygon)


def test_unknown_type_and_bad_json():
    with pytest.raises(GeoJsonDecodeError, match='Unknown GeoJSON type'):
        codec.from_dict({'type': 'Circle'})
    with pytest.raises(GeoJsonDecodeError):
        codec.loads('{not json')
    with pytest.raises(GeoJsonDecodeError):
        codec.from_dict([1, 2])


def test_malformed_coordinates():
    with pytest.raises(GeoJsonDecodeError):
        codec.from_dict({'type': 'Polygon', 'coordinates': [1, 2]})


def test_non_numeric_bbox_is_decode_error():
    with pytest.raises(GeoJsonDecodeError, match='bbox'):
        codec.from_dict({'type': 'Point', 'coordinates': [1, 2], 'bbox': ['west', 0, 1, 1]})
    with pytest.raises(GeoJsonDecodeError):
        codec.from_dict({'type': 'Point', 'coordinates': [1, 2], 'bbox': 5})


def test_encode_rejects_foreign_objects():
    with pytest.raises(TypeError):
        codec.to_dict(object())


def test_crs_wgs84_roundtrip():
    point = Point(Position(1, 2), crs=Crs.wgs84())
    decoded = codec.loads(codec.dumps(point))
    assert decoded.crs == Crs.wgs84()


def test_shapely_interop():
    from shapely.geometry import Polygon as ShapelyPolygon

    polygon = Polygon([[Position(0, 0), Position(2, 0), Position(2, 2), Position(0, 2), Position(0, 0)]])
    geom = codec.to_shapely(polygon)
    assert geom.area == pytest.approx(4.0)

    back = codec.from_shapely(ShapelyPolygon([(0, 0), (1, 0), (1, 1)]))
    assert isinstance(back, Polygon)
    assert back.exterior_ring[0] == Position(0.0, 0.0)
    assert codec.from_shapely(None) is None


def test_geo_interface_accepted_by_shapely():
    from shapely.geometry import shape

    line = LineString([Position(0, 0), Position(3, 4)])
    assert shape(line).length == pytest.approx(5.0)
