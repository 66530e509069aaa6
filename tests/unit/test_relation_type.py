# =============================================================================
# Unit Tests: Relation Type Classification
# =============================================================================

import pytest

from osmload.models import RelationType, classify_relation_type
from osmload.models.relation_type import pascal_case


@pytest.mark.parametrize("value,expected", [
    ("multipolygon", RelationType.MULTIPOLYGON),
    ("route", RelationType.ROUTE),
    ("route_master", RelationType.ROUTE_MASTER),
    ("restriction", RelationType.RESTRICTION),
    ("boundary", RelationType.BOUNDARY),
    ("public_transport", RelationType.PUBLIC_TRANSPORT),
    ("destination_sign", RelationType.DESTINATION_SIGN),
    ("waterway", RelationType.WATERWAY),
    ("enforcement", RelationType.ENFORCEMENT),
    ("connectivity", RelationType.CONNECTIVITY),
])
def test_known_types(value, expected):
    assert classify_relation_type(value) == expected


def test_type_ids_are_stable():
    assert int(classify_relation_type("multipolygon")) == 2
    assert int(classify_relation_type("bogus_type")) == 1
    assert int(classify_relation_type(None)) == 1


@pytest.mark.parametrize("value", [None, "", "bogus_type", "site", "associatedStreet", "___"])
def test_unknown_types(value):
    assert classify_relation_type(value) is RelationType.UNKNOWN


def test_separator_and_case_variants_match():
    assert classify_relation_type("public-transport") is RelationType.PUBLIC_TRANSPORT
    assert classify_relation_type("Route Master") is RelationType.ROUTE_MASTER
    assert classify_relation_type("MULTIPOLYGON") is RelationType.MULTIPOLYGON


@pytest.mark.parametrize("value,expected", [
    ("PublicTransport", RelationType.PUBLIC_TRANSPORT),
    ("routeMaster", RelationType.ROUTE_MASTER),
    ("destinationSign", RelationType.DESTINATION_SIGN),
    ("Multipolygon", RelationType.MULTIPOLYGON),
])
def test_camel_case_values_match(value, expected):
    assert classify_relation_type(value) is expected


def test_every_value_has_unique_db_name():
    names = [member.db_name for member in RelationType]
    assert len(names) == len(set(names))
    assert RelationType.PUBLIC_TRANSPORT.db_name == "public_transport"
    assert RelationType.UNKNOWN.db_name == "unknown"


@pytest.mark.parametrize("value,expected", [
    ("public_transport", "PublicTransport"),
    ("route-master", "RouteMaster"),
    ("multipolygon", "Multipolygon"),
    ("__a__b__", "AB"),
    ("PublicTransport", "PublicTransport"),
    ("routeMaster", "RouteMaster"),
    ("ROUTE_MASTER", "RouteMaster"),
    ("", ""),
])
def test_pascal_case(value, expected):
    assert pascal_case(value) == expected
