"""Tabular export of features as a geopandas GeoDataFrame."""

from geojson_compliance.io.codec import to_dict
from geojson_compliance.model import Feature, FeatureCollection


def to_geodataframe(obj, crs="EPSG:4326"):
    """Return a GeoDataFrame with one row per feature.

    Accepts a Feature or a FeatureCollection; properties become columns and
    the geometry column is built by shapely.
    """
    import geopandas

    if isinstance(obj, Feature):
        obj = FeatureCollection(features=[obj])
    if not isinstance(obj, FeatureCollection):
        raise TypeError(f"Expected a Feature or FeatureCollection, got {type(obj).__name__}")
    return geopandas.GeoDataFrame.from_features(to_dict(obj), crs=crs)
