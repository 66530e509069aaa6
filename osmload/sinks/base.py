# =============================================================================
# Base Classes for Output Sinks
# =============================================================================
# Append-only row destinations. Each destination accepts rows one at a time
# and is finalized exactly once after the element sequence is exhausted.
# =============================================================================

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Iterator, Tuple
import logging

from osmload.errors import SinkError
from osmload.models.rows import POINTS, RELATION_MEMBERS, RELATIONS, WAYS

__all__ = ["RowSink", "OutputSinks"]

logger = logging.getLogger(__name__)


class RowSink(ABC):
    """
    Base class for all output destinations.

    Subclasses implement ``_write_row`` and ``_finalize``. This base class
    counts rows and enforces the lifecycle: no writes after finish, and
    finish at most once.
    """

    def __init__(self, table: str):
        self.table = table
        self._row_count = 0
        self._finished = False

    @abstractmethod
    def _write_row(self, row: tuple) -> None:
        """Append one row to the destination."""

    @abstractmethod
    def _finalize(self) -> None:
        """Flush and commit everything written so far."""

    def write(self, row: tuple) -> None:
        """
        Append one row.

        Raises:
            SinkError: If the sink was already finalized or the write fails
        """
        if self._finished:
            raise SinkError(f"Cannot write to {self.table}: sink already finalized")
        self._write_row(row)
        self._row_count += 1

    def finish(self) -> int:
        """
        Finalize the destination.

        Returns:
            Total number of rows written

        Raises:
            SinkError: If called twice or the flush fails
        """
        if self._finished:
            raise SinkError(f"Sink for {self.table} already finalized")
        self._finished = True
        self._finalize()
        logger.debug(f"Finalized {self.table} sink with {self._row_count} rows")
        return self._row_count

    @property
    def row_count(self) -> int:
        return self._row_count

    @property
    def finished(self) -> bool:
        return self._finished


@dataclass
class OutputSinks:
    """The four destinations of one import pass."""
    points: RowSink
    ways: RowSink
    relations: RowSink
    relation_members: RowSink

    def __iter__(self) -> Iterator[Tuple[str, RowSink]]:
        yield POINTS, self.points
        yield WAYS, self.ways
        yield RELATIONS, self.relations
        yield RELATION_MEMBERS, self.relation_members

    def row_counts(self) -> Dict[str, int]:
        """Rows written so far per table (also meaningful after a failure)."""
        return {table: sink.row_count for table, sink in self}

    def finish_all(self) -> Dict[str, int]:
        """
        Finalize each destination once, in table order.

        Stops at the first failing destination; earlier destinations stay
        committed.

        Returns:
            Row count per table

        Raises:
            SinkError: If any destination fails to finalize
        """
        return {table: sink.finish() for table, sink in self}
