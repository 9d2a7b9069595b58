"""
orientation.py

Ring winding helpers for the RFC 7946 right-hand rule: exterior rings are
counterclockwise, interior rings (holes) clockwise.

Public functions:
- `is_counter_clockwise(ring)` -> bool
- `reverse_ring(ring)` : in place
- `ensure_ring_closed(ring)` -> closed ring
- `validate_orientation(rings)` : raises on a violation
- `fix_orientation(rings)` -> rings with corrected winding

"""
from typing import List, Optional

import numpy as np

from geojson_compliance.config import MIN_OPEN_RING_POSITIONS, MIN_RING_POSITIONS
from geojson_compliance.errors import InvalidRingError, OrientationViolationError
from geojson_compliance.model import Ring


def is_counter_clockwise(ring: Optional[Ring]) -> bool:
    """Return True if `ring` winds counterclockwise.

    Shoelace sum of (lon2 - lon1) * (lat2 + lat1) over consecutive pairs. With
    longitude on the x axis a negative sum means counterclockwise.

    Raises `InvalidRingError` for a missing ring or fewer than 4 positions.
    """
    if ring is None:
        raise InvalidRingError('Ring cannot be None')
    if len(ring) < MIN_RING_POSITIONS:
        raise InvalidRingError('Ring must have at least 4 points (3 unique points + closure)')

    lons = np.array([p.longitude for p in ring], dtype=float)
    lats = np.array([p.latitude for p in ring], dtype=float)
    total = np.sum((lons[1:] - lons[:-1]) * (lats[1:] + lats[:-1]))
    return bool(total < 0)


def reverse_ring(ring: Optional[Ring]) -> None:
    """Reverse the winding of `ring` in place.

    Everything but the final position is reversed and the final position is
    put back. The ring therefore starts at its former second-to-last vertex
    and may end with two equal positions; re-close it before relying on
    first == last.
    """
    if ring is None or len(ring) <= 1:
        return
    last = ring[-1]
    i, j = 0, len(ring) - 2
    while i < j:
        ring[i], ring[j] = ring[j], ring[i]
        i += 1
        j -= 1
    ring[-1] = last


def ensure_ring_closed(ring: Optional[Ring]) -> Optional[Ring]:
    """Return `ring` closed.

    An already closed (or empty) ring is returned as is. Otherwise a new list
    is returned with a copy of the first position appended; the input is left
    untouched.

    Raises `InvalidRingError` for 1 or 2 positions.
    """
    if not ring:
        return ring
    if len(ring) < MIN_OPEN_RING_POSITIONS:
        raise InvalidRingError('Ring must have at least 3 points (plus closure)')
    first = ring[0]
    if first.same_location(ring[-1]):
        return ring
    return list(ring) + [first]


def _role(index: int) -> str:
    return 'Exterior ring' if index == 0 else f'Interior ring {index}'


def validate_orientation(rings: Optional[List[Ring]]) -> None:
    """Check the right-hand rule without modifying `rings`.

    Each ring is closed (on a copy when needed) before its winding is tested.

    Raises:
    - `InvalidRingError` when a ring has fewer than 4 positions
    - `OrientationViolationError` naming the first ring with the wrong winding
    """
    if not rings:
        return
    for index, ring in enumerate(rings):
        role = _role(index)
        if ring is None or len(ring) < MIN_RING_POSITIONS:
            raise InvalidRingError(f'{role} must have at least 4 points (3 unique points + closure)')
        closed = ensure_ring_closed(ring)
        ccw = is_counter_clockwise(closed)
        if index == 0 and not ccw:
            raise OrientationViolationError(f'{role} must be counterclockwise according to RFC 7946')
        if index > 0 and ccw:
            raise OrientationViolationError(f'{role} must be clockwise according to RFC 7946')


def fix_orientation(rings: Optional[List[Ring]]) -> Optional[List[Ring]]:
    """Return a new ring list following the right-hand rule.

    Rings are closed first. A ring that is already a list and needs reversing
    is reversed in place, so callers sharing ring lists see the change, and
    is then closed again on a new list since reversal moves its first vertex.
    """
    if not rings:
        return rings
    fixed = []
    for index, ring in enumerate(rings):
        closed = ensure_ring_closed(ring)
        if not isinstance(closed, list):
            closed = list(closed)
        ccw = is_counter_clockwise(closed)
        if ccw != (index == 0):
            reverse_ring(closed)
            closed = ensure_ring_closed(closed)
        fixed.append(closed)
    return fixed
