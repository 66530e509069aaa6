# =============================================================================
# WKT Helpers
# =============================================================================
# Extracts the exterior ring of a WKT polygon for the winding-number
# predicate. Holes are ignored.
# =============================================================================

import logging
from typing import Tuple

from shapely import wkt as shapely_wkt
from shapely.errors import ShapelyError
from shapely.geometry import Polygon

__all__ = ["Ring", "exterior_ring_from_wkt"]

logger = logging.getLogger(__name__)

Ring = Tuple[Tuple[float, float], ...]


def exterior_ring_from_wkt(wkt: str) -> Ring:
    """
    Parse a WKT polygon and return its exterior ring.

    The ring keeps the source vertex order and its closure (the first
    coordinate repeated as the last). Interior rings are dropped.

    Args:
        wkt: Polygon in well-known text, e.g. "POLYGON ((0 0, 0 1, 1 1, 1 0, 0 0))"

    Returns:
        Tuple of (x, y) pairs

    Raises:
        ValueError: If the text is not a valid, non-empty polygon
    """
    if not isinstance(wkt, str) or not wkt.strip():
        raise ValueError("Polygon WKT must be a non-empty string")

    try:
        geom = shapely_wkt.loads(wkt)
    except ShapelyError as e:
        raise ValueError(f"Invalid polygon WKT: {e}") from e

    if not isinstance(geom, Polygon):
        raise ValueError(f"Expected a POLYGON, got {geom.geom_type}")
    if geom.is_empty:
        raise ValueError("Polygon WKT is empty")

    ring = tuple((float(c[0]), float(c[1])) for c in geom.exterior.coords)
    if len(ring) < 4:
        raise ValueError(f"Polygon exterior ring needs at least 4 coordinates, got {len(ring)}")

    if geom.interiors:
        logger.warning(
            f"Polygon has {len(geom.interiors)} interior ring(s); holes are ignored by the filter"
        )
    return ring
