# =============================================================================
# Import Pass Driver
# =============================================================================
# Runs one import pass end to end: select the spatial predicate, route the
# element sequence through a fresh router, then finalize every sink once
# traversal has completed.
# =============================================================================

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional
import logging

from osmload.index import ReferentialIndex
from osmload.models import SpatialFilter
from osmload.router import ElementRouter, RouterStats
from osmload.sinks import OutputSinks
from osmload.spatial_utils import build_predicate

__all__ = ["ImportResult", "run_import"]

logger = logging.getLogger(__name__)


@dataclass
class ImportResult:
    """Outcome of one pass: committed rows per table and router counters."""
    row_counts: Dict[str, int] = field(default_factory=dict)
    stats: RouterStats = field(default_factory=RouterStats)

    def to_dict(self) -> Dict[str, object]:
        return {
            "row_counts": dict(self.row_counts),
            "points_rejected": self.stats.points_rejected,
            "ways_dropped": self.stats.ways_dropped,
            "relations_dropped": self.stats.relations_dropped,
        }


def run_import(
    elements: Iterable,
    sinks: OutputSinks,
    spatial_filter: Optional[SpatialFilter] = None,
    log_every: int = 1_000_000,
) -> ImportResult:
    """
    Run one single-pass import.

    Elements must be ordered: every point before the ways that reference
    it, every point and way before the relations that reference them.

    Args:
        elements: Lazy element sequence, consumed exactly once
        sinks: The four output destinations
        spatial_filter: Spatial filter (None admits every point)
        log_every: Progress log interval in elements

    Returns:
        ImportResult with per-table row counts

    Raises:
        ElementDecodeError: If an element cannot be decoded (pass aborted)
        SinkError: If a destination fails (pass aborted, nothing rolled back)
    """
    predicate = build_predicate(spatial_filter)
    router = ElementRouter(predicate, sinks, ReferentialIndex(), log_every=log_every)

    try:
        stats = router.run(elements)
    except Exception:
        logger.error(f"Import aborted; rows written before failure: {sinks.row_counts()}")
        raise

    row_counts = sinks.finish_all()
    for table, count in row_counts.items():
        logger.info(f"Imported {count} {table}")

    return ImportResult(row_counts=row_counts, stats=stats)
