import pytest

from geojson_compliance.model import Position


def _ring(*pairs):
    return [Position(lon, lat) for lon, lat in pairs]


@pytest.fixture
def make_ring():
    """Factory turning (lon, lat) pairs into a list of Positions."""
    return _ring


@pytest.fixture
def ccw_square():
    return _ring((0, 0), (1, 0), (1, 1), (0, 1), (0, 0))


@pytest.fixture
def cw_square():
    return _ring((0, 0), (0, 1), (1, 1), (1, 0), (0, 0))


@pytest.fixture
def crossing_ring():
    # 20° wide box straddling 180°, counterclockwise in lon/lat space
    return _ring((170, 0), (170, 10), (-170, 10), (-170, 0), (170, 0))
