# =============================================================================
# Unit Tests: WKT exterior ring extraction
# =============================================================================

import pytest

from osmload.spatial_utils import exterior_ring_from_wkt


def test_denmark_exterior_ring_keeps_order_and_closure(denmark_wkt):
    ring = exterior_ring_from_wkt(denmark_wkt)

    assert ring == (
        (7.87, 54.69), (7.78, 57.25),
        (9.63, 58.08), (10.71, 58.11),
        (12.05, 56.69), (13.15, 56.42),
        (14.2, 55.47), (15.5, 55.33),
        (15.28, 54.64), (12.98, 54.94),
        (12.29, 54.35), (12.46, 53.64),
        (11.41, 53.42), (10.07, 53.18),
        (8.78, 53.52), (7.87, 54.69),
    )
    assert ring[0] == ring[-1]


def test_holes_are_ignored():
    wkt = "POLYGON ((0 0, 0 10, 10 10, 10 0, 0 0), (4 4, 4 6, 6 6, 6 4, 4 4))"
    ring = exterior_ring_from_wkt(wkt)
    assert ring == ((0.0, 0.0), (0.0, 10.0), (10.0, 10.0), (10.0, 0.0), (0.0, 0.0))


def test_z_coordinates_are_dropped():
    ring = exterior_ring_from_wkt("POLYGON Z ((0 0 1, 0 1 1, 1 1 1, 0 0 1))")
    assert ring == ((0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (0.0, 0.0))


@pytest.mark.parametrize("wkt", [
    "",
    "   ",
    "not wkt at all",
    "POINT (1 2)",
    "LINESTRING (0 0, 1 1)",
    "POLYGON EMPTY",
    "MULTIPOLYGON (((0 0, 0 1, 1 1, 0 0)))",
])
def test_invalid_polygons_raise_value_error(wkt):
    with pytest.raises(ValueError):
        exterior_ring_from_wkt(wkt)
