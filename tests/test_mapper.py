import json

import pytest

from geojson_compliance import GeoJsonMapper, OrientationViolationError, ProcessingOptions
from geojson_compliance.io import to_shapely
from geojson_compliance.model import LineString, MultiLineString, MultiPolygon, Polygon


CROSSING_POLYGON = json.dumps({
    'type': 'Polygon',
    'coordinates': [[[170, 0], [170, 10], [-170, 10], [-170, 0], [170, 0]]],
})

CW_SQUARE = json.dumps({
    'type': 'Polygon',
    'coordinates': [[[0, 0], [0, 1], [1, 1], [1, 0], [0, 0]]],
})


def test_default_mapper_is_legacy():
    mapper = GeoJsonMapper()
    assert mapper.options == ProcessingOptions.legacy()
    assert isinstance(mapper.loads(CROSSING_POLYGON), Polygon)


def test_rfc7946_mapper_cuts_on_load():
    mapper = GeoJsonMapper.rfc7946()
    result = mapper.loads(CROSSING_POLYGON)
    assert isinstance(result, MultiPolygon)
    east, west = (Polygon(rings) for rings in result.coordinates)
    assert to_shapely(east).area == pytest.approx(100.0)
    assert to_shapely(west).area == pytest.approx(100.0)


def test_loads_without_processing():
    mapper = GeoJsonMapper.rfc7946()
    assert isinstance(mapper.loads(CROSSING_POLYGON, process=False), Polygon)


def test_with_options_returns_new_mapper():
    mapper = GeoJsonMapper.rfc7946()
    strict = mapper.with_options(auto_fix_orientation=False)
    assert strict is not mapper
    assert mapper.options.auto_fix_orientation is True
    with pytest.raises(OrientationViolationError):
        strict.loads(CW_SQUARE)


def test_process_linestring():
    line = GeoJsonMapper.rfc7946().loads(json.dumps({
        'type': 'LineString', 'coordinates': [[170, 45], [-170, 45]],
    }))
    assert isinstance(line, MultiLineString)


def test_read_write_roundtrip(tmp_path):
    mapper = GeoJsonMapper.rfc7946()
    src = tmp_path / 'line.geojson'
    src.write_text(json.dumps({'type': 'LineString', 'coordinates': [[0, 0], [5, 5]]}), encoding='utf-8')
    line = mapper.read(src)
    assert isinstance(line, LineString)
    out = mapper.write(line, tmp_path / 'out.geojson')
    assert json.loads(out.read_text(encoding='utf-8')) == {'type': 'LineString', 'coordinates': [[0.0, 0.0], [5.0, 5.0]]}
