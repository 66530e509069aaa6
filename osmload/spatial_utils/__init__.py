# =============================================================================
# Spatial Utils Library
# =============================================================================
# Spatial admissibility predicates and WKT helpers.
# =============================================================================

"""
Spatial utilities for osmload.

This library provides:
- SpatialPredicate variants: UnboundedPredicate, BoxPredicate, PolygonPredicate
- winding_number: point-in-ring test
- build_predicate: pick the predicate for a SpatialFilter
- exterior_ring_from_wkt: WKT polygon to closed exterior ring
"""

from .predicate import (
    BoxPredicate,
    PolygonPredicate,
    SpatialPredicate,
    UnboundedPredicate,
    build_predicate,
    winding_number,
)
from .wkt import Ring, exterior_ring_from_wkt

__all__ = [
    "BoxPredicate",
    "PolygonPredicate",
    "SpatialPredicate",
    "UnboundedPredicate",
    "build_predicate",
    "winding_number",
    "Ring",
    "exterior_ring_from_wkt",
]
