# =============================================================================
# Referential Index
# =============================================================================
# Pass-scoped record of admitted point and way IDs. Sets only grow; a way or
# relation member can only resolve against IDs admitted earlier in the pass.
# =============================================================================

from typing import Set

__all__ = ["ReferentialIndex"]


class ReferentialIndex:
    """
    Insert-only membership sets of admitted point and way IDs.

    One instance belongs to one import pass and is owned by the router
    driving it. IDs are sparse 64-bit integers, hence hash sets.

    Example:
        >>> index = ReferentialIndex()
        >>> index.record_point(42)
        >>> index.has_point(42), index.has_way(42)
        (True, False)
    """

    __slots__ = ("points", "ways")

    def __init__(self) -> None:
        self.points: Set[int] = set()
        self.ways: Set[int] = set()

    def record_point(self, point_id: int) -> None:
        self.points.add(point_id)

    def record_way(self, way_id: int) -> None:
        self.ways.add(way_id)

    def has_point(self, point_id: int) -> bool:
        return point_id in self.points

    def has_way(self, way_id: int) -> bool:
        return way_id in self.ways

    def has_all_points(self, point_ids) -> bool:
        """True when every ID in ``point_ids`` has been recorded (vacuously true if empty)."""
        points = self.points
        return all(pid in points for pid in point_ids)

    @property
    def point_count(self) -> int:
        return len(self.points)

    @property
    def way_count(self) -> int:
        return len(self.ways)

    def __repr__(self) -> str:
        return f"ReferentialIndex(points={self.point_count}, ways={self.way_count})"
