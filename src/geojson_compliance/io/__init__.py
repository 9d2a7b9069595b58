"""Encoding, decoding and export helpers."""

from geojson_compliance.io.codec import dumps, from_dict, from_shapely, loads, to_dict, to_shapely
from geojson_compliance.io.frames import to_geodataframe
from geojson_compliance.io.mapper import GeoJsonMapper

__all__ = [
    "GeoJsonMapper",
    "dumps",
    "from_dict",
    "from_shapely",
    "loads",
    "to_dict",
    "to_geodataframe",
    "to_shapely",
]
