import pytest

from geojson_compliance.config import ProcessingOptions


@pytest.fixture
def rfc_options():
    """RFC 7946 preset: validate, auto-fix winding and cut at the antimeridian."""
    return ProcessingOptions.rfc7946()


@pytest.fixture
def legacy_options():
    return ProcessingOptions.legacy()
