# =============================================================================
# Element Models
# =============================================================================
# Typed, read-only shapes of the decoded element stream:
# - Point: identity, coordinates, tags
# - Way: identity, ordered point references, tags
# - Relation: identity, ordered members, tags
# =============================================================================

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple, Union

__all__ = [
    "MemberKind",
    "Member",
    "Point",
    "Way",
    "Relation",
    "Element",
    "TagPairs",
]

TagPairs = Tuple[Tuple[str, str], ...]


class MemberKind(IntEnum):
    """Kind of entity referenced by a relation member (value is the member_type_id)."""
    POINT = 1
    WAY = 2
    RELATION = 3

    @property
    def db_name(self) -> str:
        """Name stored in the rel_member_types lookup table."""
        return {
            MemberKind.POINT: "node",
            MemberKind.WAY: "way",
            MemberKind.RELATION: "relation",
        }[self]


@dataclass(frozen=True, slots=True)
class Member:
    """
    One member of a relation.

    Attributes:
        member_id: ID of the referenced entity
        kind: Kind of the referenced entity
        role: Role string (may be empty)
    """
    member_id: int
    kind: MemberKind
    role: str = ""


@dataclass(frozen=True, slots=True)
class Point:
    """A located point (OSM node). Dense and plain encodings share this shape."""
    id: int
    lon: float
    lat: float
    tags: TagPairs = ()


@dataclass(frozen=True, slots=True)
class Way:
    """An ordered chain of point references."""
    id: int
    refs: Tuple[int, ...] = ()
    tags: TagPairs = ()


@dataclass(frozen=True, slots=True)
class Relation:
    """An ordered group of members referencing points, ways or relations."""
    id: int
    members: Tuple[Member, ...] = ()
    tags: TagPairs = ()


Element = Union[Point, Way, Relation]
