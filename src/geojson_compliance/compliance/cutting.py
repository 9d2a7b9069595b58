"""
cutting.py

Split LineStrings and Polygons that cross the antimeridian, as recommended by
RFC 7946 section 3.1.9. Cutting never raises: input that cannot be split
sensibly is returned unchanged.

Public functions:
- `split_line_coordinates(coords)` -> list of line segments
- `cut_line_string(line)` -> LineString (unchanged) or MultiLineString
- `cut_ring(ring)` -> [ring] or [east_ring, west_ring]
- `cut_polygon(polygon)` -> Polygon (unchanged) or MultiPolygon [east, west]

Known limitation: a hole that does not itself cross is assigned to a side by
its circular mean longitude, not by a point-in-polygon test. Holes spanning a
wide longitude range may land on the wrong side.
"""
import logging
from typing import List, Sequence, Union

from geojson_compliance.config import ANTIMERIDIAN, MIN_OPEN_RING_POSITIONS
from geojson_compliance.compliance.antimeridian import (
    circular_mean_longitude,
    crosses_antimeridian,
    crossing_longitude,
    interpolate_latitude,
    normalize_longitude,
    polygon_crosses_antimeridian,
)
from geojson_compliance.compliance.orientation import ensure_ring_closed
from geojson_compliance.model import LineString, MultiLineString, MultiPolygon, Polygon, Position, Ring

logger = logging.getLogger(__name__)


def split_line_coordinates(coords: Sequence[Position]) -> List[List[Position]]:
    """Split an open coordinate sequence at every antimeridian crossing.

    Each crossing closes the current segment at +/-180 and opens the next one
    on the opposite side at the same latitude. A sequence without crossings
    comes back as a single segment.
    """
    if len(coords) < 2:
        return [list(coords)]

    segments = []
    current = [coords[0]]
    for i in range(1, len(coords)):
        p1 = coords[i - 1]
        p2 = coords[i]
        if crosses_antimeridian(p1, p2):
            lat = interpolate_latitude(p1, p2)
            side = crossing_longitude(p1.longitude, p2.longitude)
            current.append(Position(side, lat))
            segments.append(current)
            current = [Position(-side, lat)]
        current.append(p2)
    segments.append(current)
    return segments


def cut_line_string(line: LineString) -> Union[LineString, MultiLineString]:
    """Cut `line` at the antimeridian.

    Returns `line` itself when it has fewer than 2 positions or does not
    cross; otherwise a new MultiLineString.
    """
    coords = line.coordinates
    if len(coords) < 2:
        return line
    segments = split_line_coordinates(coords)
    if len(segments) == 1:
        return line
    logger.debug('LineString of %d positions cut into %d segments', len(coords), len(segments))
    return MultiLineString(coordinates=segments)


def cut_ring(ring: Ring) -> List[Ring]:
    """Cut a closed ring into an east ring and a west ring.

    Positions with normalized longitude >= 0 go east, the rest west. Every
    crossing adds (180, lat) to the east ring and (-180, lat) to the west
    ring. Both rings are closed before returning.

    Returns `[ring]` (the same object) if the ring does not cross or if a
    side would be left with fewer than 3 positions.
    """
    crossing = any(crosses_antimeridian(ring[i], ring[i + 1]) for i in range(len(ring) - 1))
    if not crossing:
        return [ring]

    east = []
    west = []
    for i in range(len(ring) - 1):
        p1 = ring[i]
        p2 = ring[i + 1]
        lon1 = normalize_longitude(p1.longitude)
        if lon1 >= 0:
            east.append(p1.with_longitude(lon1))
        else:
            west.append(p1.with_longitude(lon1))
        if crosses_antimeridian(p1, p2):
            lat = interpolate_latitude(p1, p2)
            east.append(Position(ANTIMERIDIAN, lat))
            west.append(Position(-ANTIMERIDIAN, lat))

    last = ring[-1]
    last_lon = normalize_longitude(last.longitude)
    if last_lon >= 0:
        east.append(last.with_longitude(last_lon))
    else:
        west.append(last.with_longitude(last_lon))

    if len(east) < MIN_OPEN_RING_POSITIONS or len(west) < MIN_OPEN_RING_POSITIONS:
        logger.debug('degenerate ring split (east=%d, west=%d positions); ring left uncut', len(east), len(west))
        return [ring]
    return [ensure_ring_closed(east), ensure_ring_closed(west)]


def cut_polygon(polygon: Polygon) -> Union[Polygon, MultiPolygon]:
    """Cut `polygon` at the antimeridian into a MultiPolygon [east, west].

    The polygon is returned unchanged when it has no rings, when no ring
    crosses, or when the exterior ring does not split. In the last case holes
    that cross are left as they are.
    """
    rings = polygon.coordinates
    if not rings or not polygon_crosses_antimeridian(rings):
        return polygon

    exterior_parts = cut_ring(rings[0])
    if len(exterior_parts) == 1:
        logger.debug('exterior ring did not split; polygon left uncut')
        return polygon
    east_exterior, west_exterior = exterior_parts

    east_holes = []
    west_holes = []
    for hole in rings[1:]:
        parts = cut_ring(hole)
        if len(parts) == 2:
            east_holes.append(parts[0])
            west_holes.append(parts[1])
        elif circular_mean_longitude(parts[0]) > 0:
            east_holes.append(parts[0])
        else:
            west_holes.append(parts[0])

    logger.debug('Polygon cut: east holes=%d, west holes=%d', len(east_holes), len(west_holes))
    east = Polygon(coordinates=[east_exterior] + east_holes)
    west = Polygon(coordinates=[west_exterior] + west_holes)
    return MultiPolygon().add(east).add(west)
