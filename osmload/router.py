# =============================================================================
# Element Router
# =============================================================================
# Single-pass dispatcher: decides admission of every element, normalizes
# tags, appends rows to the output sinks and maintains the referential
# index. Admission of ways and relations depends on decisions made earlier
# in the same pass, so elements must arrive points, then ways, then
# relations.
# =============================================================================

from dataclasses import dataclass
from typing import Iterable, List, Optional
import logging

from osmload.errors import ElementDecodeError
from osmload.index import ReferentialIndex
from osmload.models import (
    MemberKind,
    MemberRow,
    Point,
    PointRow,
    Relation,
    RelationRow,
    Way,
    WayRow,
    classify_relation_type,
)
from osmload.normalization import normalize_tags
from osmload.sinks import OutputSinks
from osmload.spatial_utils import SpatialPredicate

__all__ = ["ElementRouter", "RouterStats"]

logger = logging.getLogger(__name__)


@dataclass
class RouterStats:
    """Per-kind counters for one pass."""
    points_seen: int = 0
    points_admitted: int = 0
    ways_seen: int = 0
    ways_admitted: int = 0
    relations_seen: int = 0
    relations_admitted: int = 0
    members_admitted: int = 0

    @property
    def points_rejected(self) -> int:
        return self.points_seen - self.points_admitted

    @property
    def ways_dropped(self) -> int:
        return self.ways_seen - self.ways_admitted

    @property
    def relations_dropped(self) -> int:
        return self.relations_seen - self.relations_admitted

    @property
    def elements_seen(self) -> int:
        return self.points_seen + self.ways_seen + self.relations_seen


class ElementRouter:
    """
    Routes decoded elements to the four output sinks.

    The router owns its ReferentialIndex for the lifetime of the pass; a new
    router (and index) is created for every pass.

    Args:
        predicate: Spatial predicate selected for the pass
        sinks: Output destinations
        index: Referential index (default: a fresh, empty one)
        log_every: Log a progress line every N elements (0 disables)

    Example:
        >>> router = ElementRouter(UnboundedPredicate(), memory_sinks())
        >>> router.run([Point(1, 0.0, 0.0), Way(10, (1,))])
        RouterStats(points_seen=1, points_admitted=1, ways_seen=1, ways_admitted=1, ...)
    """

    def __init__(
        self,
        predicate: SpatialPredicate,
        sinks: OutputSinks,
        index: Optional[ReferentialIndex] = None,
        log_every: int = 1_000_000,
    ):
        self.predicate = predicate
        self.sinks = sinks
        self.index = index if index is not None else ReferentialIndex()
        self.log_every = log_every
        self.stats = RouterStats()

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def route(self, element) -> None:
        """
        Route one element.

        Raises:
            ElementDecodeError: If the element is not a Point, Way or Relation
            SinkError: If a sink rejects a row
        """
        if isinstance(element, Point):
            self._route_point(element)
        elif isinstance(element, Way):
            self._route_way(element)
        elif isinstance(element, Relation):
            self._route_relation(element)
        else:
            raise ElementDecodeError(f"Unsupported element type: {type(element).__name__}")

    def run(self, elements: Iterable) -> RouterStats:
        """
        Consume the element sequence in order, once.

        Returns:
            Counters for the pass
        """
        log_every = self.log_every
        for n, element in enumerate(elements, start=1):
            self.route(element)
            if log_every and n % log_every == 0:
                logger.info(
                    f"Processed {n} elements ({self.index.point_count} points, "
                    f"{self.index.way_count} ways admitted)"
                )

        s = self.stats
        logger.info(
            f"Routed {s.elements_seen} elements: "
            f"points {s.points_admitted}/{s.points_seen}, "
            f"ways {s.ways_admitted}/{s.ways_seen}, "
            f"relations {s.relations_admitted}/{s.relations_seen}"
        )
        return s

    # -------------------------------------------------------------------------
    # Per-kind handlers
    # -------------------------------------------------------------------------

    def _route_point(self, point: Point) -> None:
        self.stats.points_seen += 1
        if not self.predicate.admits(point.lon, point.lat):
            return
        self.sinks.points.write(PointRow(point.id, point.lon, point.lat, normalize_tags(point.tags)))
        self.index.record_point(point.id)
        self.stats.points_admitted += 1

    def _route_way(self, way: Way) -> None:
        self.stats.ways_seen += 1
        if not self.index.has_all_points(way.refs):
            return
        self.sinks.ways.write(WayRow(way.id, tuple(way.refs), normalize_tags(way.tags)))
        self.index.record_way(way.id)
        self.stats.ways_admitted += 1

    def _route_relation(self, relation: Relation) -> None:
        self.stats.relations_seen += 1
        index = self.index

        # Member rows are held back until every member has resolved
        pending: List[MemberRow] = []
        for sequence_id, member in enumerate(relation.members):
            kind = member.kind
            if kind == MemberKind.POINT:
                resolved = index.has_point(member.member_id)
            elif kind == MemberKind.WAY:
                resolved = index.has_way(member.member_id)
            elif kind == MemberKind.RELATION:
                resolved = True
            else:
                raise ElementDecodeError(
                    f"Relation {relation.id} member {sequence_id} has unknown kind {kind!r}"
                )
            if not resolved:
                return
            pending.append(
                MemberRow(relation.id, member.member_id, int(kind), member.role, sequence_id)
            )

        tags = normalize_tags(relation.tags)
        type_id = int(classify_relation_type(tags.get("type") if tags else None))
        self.sinks.relations.write(RelationRow(relation.id, type_id, tags))
        members = self.sinks.relation_members
        for row in pending:
            members.write(row)
        self.stats.relations_admitted += 1
        self.stats.members_admitted += len(pending)
