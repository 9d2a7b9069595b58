"""
antimeridian.py

Longitude wrap arithmetic around the 180° branch cut.

Public functions:
- `normalize_longitude(lon)` -> lon in [-180, 180]
- `crosses_antimeridian(p1, p2)` -> bool
- `crossing_longitude(lon1, lon2)` -> +180.0 or -180.0
- `interpolate_latitude(p1, p2)` -> latitude where the segment meets the cut
- `circular_mean_longitude(ring)` -> mean longitude on the unit circle
- `polygon_crosses_antimeridian(rings)` -> bool

"""
import math
from typing import List, Sequence

import numpy as np

from geojson_compliance.config import ANTIMERIDIAN, FULL_CIRCLE
from geojson_compliance.model import Position


def normalize_longitude(longitude: float) -> float:
    """Reduce a longitude to [-180, 180].

    Uses a truncated remainder so the sign of the input is kept: 370 -> 10,
    -370 -> -10, 180 -> 180 and -180 -> -180.
    """
    normalized = math.fmod(longitude, FULL_CIRCLE)
    if normalized > ANTIMERIDIAN:
        normalized -= FULL_CIRCLE
    elif normalized < -ANTIMERIDIAN:
        normalized += FULL_CIRCLE
    return normalized


def crosses_antimeridian(p1: Position, p2: Position) -> bool:
    """True when the shortest path from `p1` to `p2` passes through 180°."""
    lon1 = normalize_longitude(p1.longitude)
    lon2 = normalize_longitude(p2.longitude)
    return abs(lon1 - lon2) > ANTIMERIDIAN


def crossing_longitude(lon1: float, lon2: float) -> float:
    """Side of the cut on which a segment leaving `lon1` meets it.

    +180 for a positive-to-negative crossing, -180 for negative-to-positive.
    For a segment that does not cross, the side of `lon1` is returned.
    """
    lon1 = normalize_longitude(lon1)
    lon2 = normalize_longitude(lon2)
    if abs(lon1 - lon2) > ANTIMERIDIAN:
        if lon1 > 0 and lon2 < 0:
            return ANTIMERIDIAN
        return -ANTIMERIDIAN
    return ANTIMERIDIAN if lon1 >= 0 else -ANTIMERIDIAN


def interpolate_latitude(p1: Position, p2: Position) -> float:
    """Latitude at which the segment `p1` -> `p2` meets the antimeridian.

    The end longitude is unwrapped by 360° so the segment is continuous
    across the cut, then latitude is interpolated linearly.
    """
    lon1 = normalize_longitude(p1.longitude)
    lon2 = normalize_longitude(p2.longitude)
    lat1 = p1.latitude
    lat2 = p2.latitude

    cut = crossing_longitude(lon1, lon2)
    if lon1 > 0 and lon2 < 0:
        lon2 += FULL_CIRCLE
    elif lon1 < 0 and lon2 > 0:
        lon2 -= FULL_CIRCLE

    if lon1 != lon2:
        fraction = abs((cut - lon1) / (lon2 - lon1))
        fraction = max(0.0, min(1.0, fraction))
    else:
        fraction = 0.5
    return lat1 + fraction * (lat2 - lat1)


def circular_mean_longitude(ring: Sequence[Position]) -> float:
    """Mean longitude of `ring` computed on the unit circle.

    Averaging unit vectors keeps rings near 180° from averaging to 0°.
    Returns 0.0 for an empty ring.
    """
    if not ring:
        return 0.0
    lons = np.radians([normalize_longitude(p.longitude) for p in ring])
    mean_x = float(np.mean(np.cos(lons)))
    mean_y = float(np.mean(np.sin(lons)))
    return normalize_longitude(math.degrees(math.atan2(mean_y, mean_x)))


def polygon_crosses_antimeridian(rings: List[List[Position]]) -> bool:
    """True when any segment of any ring crosses the antimeridian."""
    for ring in rings:
        for i in range(1, len(ring)):
            if crosses_antimeridian(ring[i - 1], ring[i]):
                return True
    return False
