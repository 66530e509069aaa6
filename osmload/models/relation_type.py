# =============================================================================
# Relation Type Classification
# =============================================================================
# Maps a relation's "type" tag to a closed enumeration. The enumeration
# values are the type_id stored in the relations table and the identity
# values of the rel_types lookup table.
# =============================================================================

import re
from enum import IntEnum
from typing import Dict, Optional

__all__ = ["RelationType", "classify_relation_type", "pascal_case"]


class RelationType(IntEnum):
    """Known relation types; anything else is UNKNOWN."""
    UNKNOWN = 1
    MULTIPOLYGON = 2
    ROUTE = 3
    ROUTE_MASTER = 4
    RESTRICTION = 5
    BOUNDARY = 6
    PUBLIC_TRANSPORT = 7
    DESTINATION_SIGN = 8
    WATERWAY = 9
    ENFORCEMENT = 10
    CONNECTIVITY = 11

    @property
    def db_name(self) -> str:
        """Snake-case name as seeded into the rel_types table."""
        return self.name.lower()

    @property
    def pascal_name(self) -> str:
        """PascalCase variant name (e.g. ``PublicTransport``)."""
        return pascal_case(self.name)


_SEPARATORS = re.compile(r"[^0-9A-Za-z]+")
_CASE_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def pascal_case(value: str) -> str:
    """
    Split on non-alphanumeric separators and lower-to-upper case boundaries,
    title-case each segment and join.

    Example:
        >>> pascal_case("public_transport")
        'PublicTransport'
        >>> pascal_case("route-master")
        'RouteMaster'
        >>> pascal_case("routeMaster")
        'RouteMaster'
    """
    parts = _SEPARATORS.split(_CASE_BOUNDARY.sub(" ", value))
    return "".join(part[:1].upper() + part[1:].lower() for part in parts if part)


# Built once at import time: PascalCase name -> variant
_LOOKUP: Dict[str, RelationType] = {member.pascal_name: member for member in RelationType}


def classify_relation_type(value: Optional[str]) -> RelationType:
    """
    Classify a relation from the value of its "type" tag.

    Args:
        value: Value of the "type" tag, or None when the tag is absent

    Returns:
        Matching RelationType, or RelationType.UNKNOWN when absent or unmatched
    """
    if not value:
        return RelationType.UNKNOWN
    return _LOOKUP.get(pascal_case(value), RelationType.UNKNOWN)
