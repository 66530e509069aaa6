# =============================================================================
# Output Row Shapes
# =============================================================================
# One named tuple per logical output table. Column order matches the
# database tables and the COPY column lists.
# =============================================================================

from typing import Dict, NamedTuple, Optional, Tuple

__all__ = [
    "PointRow",
    "WayRow",
    "RelationRow",
    "MemberRow",
    "TABLE_COLUMNS",
    "POINTS",
    "WAYS",
    "RELATIONS",
    "RELATION_MEMBERS",
]

POINTS = "points"
WAYS = "ways"
RELATIONS = "relations"
RELATION_MEMBERS = "relation_members"


class PointRow(NamedTuple):
    id: int
    lon: float
    lat: float
    tags: Optional[Dict[str, str]]


class WayRow(NamedTuple):
    id: int
    refs: Tuple[int, ...]
    tags: Optional[Dict[str, str]]


class RelationRow(NamedTuple):
    id: int
    type_id: int
    tags: Optional[Dict[str, str]]


class MemberRow(NamedTuple):
    rel_id: int
    member_id: int
    member_type_id: int
    role: str
    sequence_id: int


TABLE_COLUMNS: Dict[str, Tuple[str, ...]] = {
    POINTS: PointRow._fields,
    WAYS: WayRow._fields,
    RELATIONS: RelationRow._fields,
    RELATION_MEMBERS: MemberRow._fields,
}
