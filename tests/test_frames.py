import pytest

from geojson_compliance import ProcessingOptions, process
from geojson_compliance.io import to_geodataframe
from geojson_compliance.model import Feature, FeatureCollection, LineString, Point, Position


def test_feature_collection_to_geodataframe():
    fc = FeatureCollection([
        Feature(geometry=Point(Position(-79.38, 43.65)), properties={'name': 'a', 'capacity': 4}),
        Feature(geometry=Point(Position(-79.40, 43.66)), properties={'name': 'b', 'capacity': 8}),
    ])
    gdf = to_geodataframe(fc)
    assert len(gdf) == 2
    assert list(gdf['capacity']) == [4, 8]
    assert gdf.crs.to_epsg() == 4326
    assert gdf.geometry.iloc[0].x == pytest.approx(-79.38)


def test_cut_feature_to_geodataframe():
    feature = Feature(geometry=LineString([Position(170, 45), Position(-170, 45)]), properties={'route': 1})
    process(feature, ProcessingOptions.rfc7946())
    gdf = to_geodataframe(feature)
    assert gdf.geometry.iloc[0].geom_type == 'MultiLineString'


def test_rejects_bare_geometry():
    with pytest.raises(TypeError):
        to_geodataframe(Point(Position(0, 0)))
