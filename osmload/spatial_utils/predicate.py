# =============================================================================
# Spatial Predicates
# =============================================================================
# Decide whether a (lon, lat) coordinate is admissible for an import pass.
# One predicate is selected per pass from the configured SpatialFilter:
# - UnboundedPredicate: admits everything
# - BoxPredicate: inclusive axis-aligned box
# - PolygonPredicate: winding-number test against a closed ring
# =============================================================================

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence, Tuple
import logging

from .wkt import Ring, exterior_ring_from_wkt

if TYPE_CHECKING:
    from osmload.models import SpatialFilter

__all__ = [
    "SpatialPredicate",
    "UnboundedPredicate",
    "BoxPredicate",
    "PolygonPredicate",
    "winding_number",
    "build_predicate",
]

logger = logging.getLogger(__name__)


def _is_left(x0: float, y0: float, x1: float, y1: float, x2: float, y2: float) -> float:
    # > 0: (x2, y2) left of the line through (x0, y0)->(x1, y1); < 0: right; 0: on it
    return (x1 - x0) * (y2 - y0) - (x2 - x0) * (y1 - y0)


def winding_number(ring: Sequence[Tuple[float, float]], x: float, y: float) -> int:
    """
    Winding number of a closed ring around the point (x, y).

    Counts upward crossings of the horizontal line through y with the point
    strictly left of the edge (+1) and downward crossings with the point
    strictly right of the edge (-1). Horizontal edges never count.

    The ring must be closed (first vertex equals last). Results on
    self-intersecting rings are not meaningful for containment.

    Args:
        ring: Sequence of (x, y) vertices
        x: Query x (longitude)
        y: Query y (latitude)

    Returns:
        Signed winding number; non-zero means the point is enclosed
    """
    wn = 0
    for i in range(len(ring) - 1):
        x0, y0 = ring[i]
        x1, y1 = ring[i + 1]
        if y0 <= y:
            if y1 > y and _is_left(x0, y0, x1, y1, x, y) > 0:
                wn += 1
        elif y1 <= y and _is_left(x0, y0, x1, y1, x, y) < 0:
            wn -= 1
    return wn


class SpatialPredicate(ABC):
    """
    Base class for spatial admissibility predicates.

    Subclasses implement ``admits`` and hold no mutable state, so one
    instance can serve a whole pass.
    """

    @abstractmethod
    def admits(self, lon: float, lat: float) -> bool:
        """Return True when the coordinate is admissible."""


class UnboundedPredicate(SpatialPredicate):
    """Admits every coordinate."""

    def admits(self, lon: float, lat: float) -> bool:
        return True

    def __repr__(self) -> str:
        return "UnboundedPredicate()"


class BoxPredicate(SpatialPredicate):
    """Admits coordinates inside an axis-aligned box, bounds inclusive."""

    __slots__ = ("xmin", "ymin", "xmax", "ymax")

    def __init__(self, xmin: float, ymin: float, xmax: float, ymax: float):
        self.xmin = xmin
        self.ymin = ymin
        self.xmax = xmax
        self.ymax = ymax

    def admits(self, lon: float, lat: float) -> bool:
        return self.xmin <= lon <= self.xmax and self.ymin <= lat <= self.ymax

    def __repr__(self) -> str:
        return f"BoxPredicate({self.xmin}, {self.ymin}, {self.xmax}, {self.ymax})"


class PolygonPredicate(SpatialPredicate):
    """
    Admits coordinates enclosed by a closed ring (non-zero winding number).

    Coordinates outside the ring's envelope are rejected without walking
    the edges; the winding number there is always zero.
    """

    def __init__(self, ring: Ring):
        if len(ring) < 4:
            raise ValueError(f"Ring needs at least 4 vertices, got {len(ring)}")
        if ring[0] != ring[-1]:
            raise ValueError("Ring must be closed (first vertex equal to last)")
        self.ring = tuple(ring)
        xs = [p[0] for p in self.ring]
        ys = [p[1] for p in self.ring]
        self._envelope = BoxPredicate(min(xs), min(ys), max(xs), max(ys))

    @classmethod
    def from_wkt(cls, wkt: str) -> "PolygonPredicate":
        """Build from a WKT polygon, using its exterior ring only."""
        return cls(exterior_ring_from_wkt(wkt))

    def admits(self, lon: float, lat: float) -> bool:
        if not self._envelope.admits(lon, lat):
            return False
        return winding_number(self.ring, lon, lat) != 0

    def __repr__(self) -> str:
        return f"PolygonPredicate(<{len(self.ring)} vertices>)"


def build_predicate(spatial_filter: "SpatialFilter | None") -> SpatialPredicate:
    """
    Select the predicate variant for a configured filter.

    Args:
        spatial_filter: Validated SpatialFilter, or None for no filtering

    Returns:
        SpatialPredicate instance for the whole pass
    """
    if spatial_filter is None:
        predicate: SpatialPredicate = UnboundedPredicate()
    elif spatial_filter.polygon is not None:
        predicate = PolygonPredicate.from_wkt(spatial_filter.polygon)
    elif spatial_filter.bbox is not None:
        predicate = BoxPredicate(*spatial_filter.bbox.as_tuple())
    else:
        predicate = UnboundedPredicate()

    logger.info(f"Using spatial predicate: {predicate!r}")
    return predicate
