"""
model.py

GeoJSON object model: positions, the seven geometry types and the two
feature containers. Classes are plain dataclasses; coordinate containers are
ordinary lists so the compliance helpers can edit rings in place.

Every class exposes its wire tag as the class attribute `type` and supports
`__geo_interface__`, so shapely and geopandas accept instances directly.

Public names:
- `Position`, `Crs`
- `Point`, `LineString`, `Polygon`, `MultiPoint`, `MultiLineString`,
  `MultiPolygon`, `GeometryCollection`
- `Feature`, `FeatureCollection`
- `Geometry` : union of the seven geometry classes
"""
from dataclasses import dataclass, field, replace
from typing import Any, ClassVar, Dict, Iterator, List, Optional, Tuple, Union

from geojson_compliance.config import WGS84_CRS_NAME

Ring = List['Position']


@dataclass(frozen=True)
class Position:
    """A longitude/latitude pair with optional altitude and extra ordinates.

    `altitude=None` means "no altitude", which is not the same as 0.0.
    """
    longitude: float
    latitude: float
    altitude: Optional[float] = None
    additional_elements: Tuple[float, ...] = ()

    def __post_init__(self):
        if self.additional_elements and self.altitude is None:
            raise ValueError('additional_elements require an altitude')
        object.__setattr__(self, 'additional_elements', tuple(float(v) for v in self.additional_elements))

    def same_location(self, other: 'Position') -> bool:
        """True when longitude and latitude are equal (altitude ignored)."""
        return self.longitude == other.longitude and self.latitude == other.latitude

    def with_longitude(self, longitude: float) -> 'Position':
        return replace(self, longitude=longitude)


@dataclass
class Crs:
    """Legacy (pre RFC 7946) coordinate reference system member."""
    type: str = 'name'
    properties: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def wgs84(cls) -> 'Crs':
        return cls(type='name', properties={'name': WGS84_CRS_NAME})

    def is_wgs84(self) -> bool:
        """Resolve a named CRS with pyproj and compare it to WGS84.

        Axis order is ignored, so both EPSG:4326 and OGC CRS84 count as WGS84.
        Linked or unresolvable CRS definitions are not WGS84.
        """
        name = self.properties.get('name')
        if self.type != 'name' or not name:
            return False
        from pyproj import CRS
        from pyproj.exceptions import CRSError
        try:
            crs = CRS.from_user_input(name)
        except CRSError:
            return False
        return crs.equals(CRS.from_epsg(4326), ignore_axis_order=True)


@dataclass
class GeoJsonObject:
    """Members shared by every GeoJSON object."""
    type: ClassVar[str] = ''
    crs: Optional[Crs] = field(default=None, kw_only=True)
    bbox: Optional[List[float]] = field(default=None, kw_only=True)

    @property
    def __geo_interface__(self) -> dict:
        from geojson_compliance.io.codec import to_dict
        return to_dict(self)


@dataclass
class Point(GeoJsonObject):
    type: ClassVar[str] = 'Point'
    coordinates: Optional[Position] = None


@dataclass
class MultiPoint(GeoJsonObject):
    type: ClassVar[str] = 'MultiPoint'
    coordinates: List[Position] = field(default_factory=list)


@dataclass
class LineString(GeoJsonObject):
    type: ClassVar[str] = 'LineString'
    coordinates: List[Position] = field(default_factory=list)


@dataclass
class MultiLineString(GeoJsonObject):
    type: ClassVar[str] = 'MultiLineString'
    coordinates: List[List[Position]] = field(default_factory=list)

    def add(self, line: List[Position]) -> 'MultiLineString':
        self.coordinates.append(line)
        return self


@dataclass
class Polygon(GeoJsonObject):
    """Polygon made of an exterior ring followed by zero or more holes."""
    type: ClassVar[str] = 'Polygon'
    coordinates: List[Ring] = field(default_factory=list)

    @property
    def exterior_ring(self) -> Ring:
        self._require_exterior()
        return self.coordinates[0]

    @exterior_ring.setter
    def exterior_ring(self, ring: Ring) -> None:
        if self.coordinates:
            self.coordinates[0] = ring
        else:
            self.coordinates.append(ring)

    @property
    def interior_rings(self) -> List[Ring]:
        self._require_exterior()
        return self.coordinates[1:]

    def add_interior_ring(self, ring: Ring) -> 'Polygon':
        self._require_exterior()
        self.coordinates.append(ring)
        return self

    def _require_exterior(self) -> None:
        if not self.coordinates:
            raise ValueError('No exterior ring defined')


@dataclass
class MultiPolygon(GeoJsonObject):
    type: ClassVar[str] = 'MultiPolygon'
    coordinates: List[List[Ring]] = field(default_factory=list)

    def add(self, polygon: Polygon) -> 'MultiPolygon':
        self.coordinates.append(polygon.coordinates)
        return self


@dataclass
class GeometryCollection(GeoJsonObject):
    type: ClassVar[str] = 'GeometryCollection'
    geometries: List['Geometry'] = field(default_factory=list)

    def add(self, geometry: 'Geometry') -> 'GeometryCollection':
        self.geometries.append(geometry)
        return self


Geometry = Union[Point, LineString, Polygon, MultiPoint, MultiLineString, MultiPolygon, GeometryCollection]


@dataclass
class Feature(GeoJsonObject):
    type: ClassVar[str] = 'Feature'
    geometry: Optional[Geometry] = None
    properties: Dict[str, Any] = field(default_factory=dict)
    id: Optional[Union[str, int, float]] = None


@dataclass
class FeatureCollection(GeoJsonObject):
    type: ClassVar[str] = 'FeatureCollection'
    features: List[Feature] = field(default_factory=list)

    def add(self, feature: Feature) -> 'FeatureCollection':
        self.features.append(feature)
        return self

    def __iter__(self) -> Iterator[Feature]:
        return iter(self.features)

    def __len__(self) -> int:
        return len(self.features)
