"""
RFC 7946 compliance engine.

- orientation : winding tests, ring reversal, closing, validate/fix
- antimeridian : longitude normalization and crossing arithmetic
- cutting : LineString / ring / Polygon splitting at 180°
- processor : recursive application of `ProcessingOptions`
"""

from geojson_compliance.compliance.antimeridian import (
    circular_mean_longitude,
    crosses_antimeridian,
    crossing_longitude,
    interpolate_latitude,
    normalize_longitude,
    polygon_crosses_antimeridian,
)
from geojson_compliance.compliance.cutting import cut_line_string, cut_polygon, cut_ring, split_line_coordinates
from geojson_compliance.compliance.orientation import (
    ensure_ring_closed,
    fix_orientation,
    is_counter_clockwise,
    reverse_ring,
    validate_orientation,
)
from geojson_compliance.compliance.processor import process

__all__ = [
    "circular_mean_longitude",
    "crosses_antimeridian",
    "crossing_longitude",
    "cut_line_string",
    "cut_polygon",
    "cut_ring",
    "ensure_ring_closed",
    "fix_orientation",
    "interpolate_latitude",
    "is_counter_clockwise",
    "normalize_longitude",
    "polygon_crosses_antimeridian",
    "process",
    "reverse_ring",
    "split_line_coordinates",
    "validate_orientation",
]
