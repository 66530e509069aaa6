"""
Shared pytest fixtures for osmload tests.

Provides reusable rings, filters, elements and in-memory sinks.
"""

import pytest

from osmload.models import Member, MemberKind, Point, Relation, Way
from osmload.sinks import memory_sinks


# =============================================================================
# Environment
# =============================================================================

IMPORT_ENV_VARS = (
    "OSMLOAD_INPUT",
    "OSMLOAD_BBOX",
    "OSMLOAD_POLYGON",
    "OSMLOAD_SCHEMA",
    "OSMLOAD_SRID",
    "OSMLOAD_BUFFER_ROWS",
)


@pytest.fixture(autouse=True)
def clean_import_env(monkeypatch):
    """Keep the host OSMLOAD_* environment out of every test."""
    for var in IMPORT_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


# =============================================================================
# Spatial Fixtures
# =============================================================================

@pytest.fixture
def unit_square_ring():
    """Closed unit square ring, clockwise."""
    return ((0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0), (0.0, 0.0))


@pytest.fixture
def unit_square_wkt():
    return "POLYGON ((0 0, 0 1, 1 1, 1 0, 0 0))"


@pytest.fixture
def denmark_wkt():
    """Coarse outline of Denmark."""
    return (
        "POLYGON ((7.87 54.69, 7.78 57.25, 9.63 58.08, 10.71 58.11, 12.05 56.69, "
        "13.15 56.42, 14.2 55.47, 15.5 55.33, 15.28 54.64, 12.98 54.94, 12.29 54.35, "
        "12.46 53.64, 11.41 53.42, 10.07 53.18, 8.78 53.52, 7.87 54.69))"
    )


@pytest.fixture
def valid_bbox_dict():
    return {"xmin": 8.0, "ymin": 54.5, "xmax": 15.0, "ymax": 58.0}


# =============================================================================
# Element Fixtures
# =============================================================================

@pytest.fixture
def sample_elements():
    """Ordered element stream: points, then ways, then relations."""
    return [
        Point(1, 0.0, 0.0),
        Point(2, 1.0, 1.0, (("amenity", "bench"),)),
        Point(3, 5.0, 5.0),
        Way(10, (1, 2), (("highway", "residential"),)),
        Way(11, (1, 99)),
        Relation(
            100,
            (
                Member(1, MemberKind.POINT, "stop"),
                Member(10, MemberKind.WAY, ""),
                Member(500, MemberKind.RELATION, "sub"),
            ),
            (("type", "route"), ("route", "bus")),
        ),
        Relation(
            101,
            (
                Member(1, MemberKind.POINT, "a"),
                Member(11, MemberKind.WAY, "b"),
                Member(2, MemberKind.POINT, "c"),
            ),
            (("type", "multipolygon"),),
        ),
    ]


# =============================================================================
# Sink Fixtures
# =============================================================================

@pytest.fixture
def sinks():
    """Fresh in-memory OutputSinks."""
    return memory_sinks()


# =============================================================================
# File Fixtures
# =============================================================================

SAMPLE_OSM_XML = """<?xml version='1.0' encoding='UTF-8'?>
<osm version="0.6" generator="osmload-tests">
  <node id="1" version="1" lat="0.0" lon="0.0"/>
  <node id="2" version="1" lat="1.0" lon="1.0">
    <tag k="amenity" v="bench"/>
  </node>
  <node id="3" version="1" lat="5.0" lon="5.0"/>
  <way id="10" version="1">
    <nd ref="1"/>
    <nd ref="2"/>
    <tag k="highway" v="residential"/>
  </way>
  <way id="11" version="1">
    <nd ref="1"/>
    <nd ref="3"/>
  </way>
  <relation id="100" version="1">
    <member type="node" ref="1" role="stop"/>
    <member type="way" ref="10" role=""/>
    <member type="relation" ref="500" role="sub"/>
    <tag k="type" v="route"/>
  </relation>
  <relation id="101" version="1">
    <member type="node" ref="1" role="a"/>
    <member type="way" ref="11" role="b"/>
    <tag k="type" v="multipolygon"/>
  </relation>
</osm>
"""


@pytest.fixture
def sample_osm_file(tmp_path):
    """Small OSM XML extract readable by osmium, sorted nodes/ways/relations."""
    path = tmp_path / "sample.osm"
    path.write_text(SAMPLE_OSM_XML, encoding="utf-8")
    return path
