"""In-memory sink, used for tests and dry runs."""

from typing import List

from osmload.models.rows import POINTS, RELATION_MEMBERS, RELATIONS, WAYS

from .base import OutputSinks, RowSink

__all__ = ["MemorySink", "memory_sinks"]


class MemorySink(RowSink):
    """Keeps every written row in a list."""

    def __init__(self, table: str):
        super().__init__(table)
        self.rows: List[tuple] = []

    def _write_row(self, row: tuple) -> None:
        self.rows.append(row)

    def _finalize(self) -> None:
        pass


def memory_sinks() -> OutputSinks:
    return OutputSinks(
        points=MemorySink(POINTS),
        ways=MemorySink(WAYS),
        relations=MemorySink(RELATIONS),
        relation_members=MemorySink(RELATION_MEMBERS),
    )
