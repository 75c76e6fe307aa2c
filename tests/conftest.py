"""Shared fixtures for H3 query facade tests."""

import pytest

from h3query.grid import identifiers, addresses, h3_to_string


# Reference location whose resolution 4 cell has a published centroid and boundary
REFERENCE_LAT = 50.0
REFERENCE_LNG = -43.0
REFERENCE_RES = 4

# Location used for hierarchy and path checks, far from any pentagon
HIERARCHY_LAT = 52.0
HIERARCHY_LNG = -4.3

FRANCE_POLYGON_WKT = (
    "POLYGON ((1.444209 43.604652, -1.553621 47.218371, 3.05726 50.62925, "
    "2.349014 48.864716, 7.27178 43.6961, 1.444209 43.604652))"
)

FRANCE_LATLNGS = [
    (43.604652, 1.444209),
    (47.218371, -1.553621),
    (50.62925, 3.05726),
    (48.864716, 2.349014),
    (43.6961, 7.27178),
    (43.604652, 1.444209),
]


@pytest.fixture(params=["identifier", "address"])
def queries(request):
    """The facade for each cell representation in turn."""
    return identifiers if request.param == "identifier" else addresses


@pytest.fixture
def reference_cell(queries):
    """Resolution 4 cell containing (50.0, -43.0), in the facade's representation."""
    return queries.latlng_to_cell(REFERENCE_LAT, REFERENCE_LNG, REFERENCE_RES)


@pytest.fixture
def hierarchy_cell(queries):
    """Resolution 5 cell containing (52.0, -4.3), in the facade's representation."""
    return queries.latlng_to_cell(HIERARCHY_LAT, HIERARCHY_LNG, 5)


def as_addresses(value):
    """Convert identifier results (scalars or lists) to address form for comparison."""
    if isinstance(value, list):
        return [as_addresses(item) for item in value]
    if isinstance(value, int) and not isinstance(value, bool):
        return h3_to_string(value)
    return value
