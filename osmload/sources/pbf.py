# =============================================================================
# PBF Element Source
# =============================================================================
# Lazy, forward-only element sequence read from an .osm.pbf file with
# pyosmium. Each osmium object is copied into an immutable element model
# because osmium buffers are only valid during the iteration step.
# =============================================================================

import logging
from pathlib import Path
from typing import Iterator, Union

import osmium

from osmload.errors import ElementDecodeError
from osmload.models import Element, Member, MemberKind, Point, Relation, TagPairs, Way

__all__ = ["iter_pbf_elements", "convert_osmium_object", "MEMBER_KINDS"]

logger = logging.getLogger(__name__)

MEMBER_KINDS = {
    "n": MemberKind.POINT,
    "w": MemberKind.WAY,
    "r": MemberKind.RELATION,
}


def _tags(obj) -> TagPairs:
    return tuple((tag.k, tag.v) for tag in obj.tags)


def _point(node) -> Point:
    location = node.location
    if not location.valid():
        raise ElementDecodeError(f"Node {node.id} has no valid location")
    return Point(id=node.id, lon=location.lon, lat=location.lat, tags=_tags(node))


def _way(way) -> Way:
    return Way(id=way.id, refs=tuple(n.ref for n in way.nodes), tags=_tags(way))


def _relation(relation) -> Relation:
    members = []
    for m in relation.members:
        kind = MEMBER_KINDS.get(m.type)
        if kind is None:
            raise ElementDecodeError(f"Relation {relation.id} has member of unknown type {m.type!r}")
        members.append(Member(member_id=m.ref, kind=kind, role=m.role))
    return Relation(id=relation.id, members=tuple(members), tags=_tags(relation))


def convert_osmium_object(obj) -> Element:
    """
    Copy one osmium object into an element model.

    Raises:
        ElementDecodeError: If text is not valid UTF-8, a node has no
            location, or the object kind is not node/way/relation
    """
    try:
        if obj.is_node():
            return _point(obj)
        if obj.is_way():
            return _way(obj)
        if obj.is_relation():
            return _relation(obj)
    except UnicodeDecodeError as e:
        raise ElementDecodeError(f"Invalid text in element {getattr(obj, 'id', '?')}: {e}") from e
    raise ElementDecodeError(f"Unsupported osmium object: {obj!r}")


def iter_pbf_elements(path: Union[str, Path]) -> Iterator[Element]:
    """
    Lazily yield the points, ways and relations of a PBF file in file order.

    Standard extracts are sorted by kind (nodes, ways, relations) and id,
    which is the ordering the router relies on. The ordering is not
    verified.

    Args:
        path: Path to an .osm.pbf (or any format osmium reads)

    Returns:
        Iterator of Point, Way and Relation instances

    Raises:
        FileNotFoundError: If the path does not exist
        ElementDecodeError: If an element cannot be decoded
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {path}")

    logger.info(f"Reading {path}")
    return _iterate(path)


def _iterate(path: Path) -> Iterator[Element]:
    processor = osmium.FileProcessor(
        str(path), osmium.osm.NODE | osmium.osm.WAY | osmium.osm.RELATION
    )
    for obj in processor:
        yield convert_osmium_object(obj)
