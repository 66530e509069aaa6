# =============================================================================
# Parquet Sink
# =============================================================================
# Writes one Parquet file per logical table with PyArrow, flushing a row
# group every ``buffer_rows`` rows. Tags are stored as JSON text.
# =============================================================================

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

import pyarrow as pa
import pyarrow.parquet as pq

from osmload.errors import SinkError
from osmload.models.rows import (
    POINTS,
    RELATION_MEMBERS,
    RELATIONS,
    TABLE_COLUMNS,
    WAYS,
)
from osmload.normalization import tags_to_json

from .base import OutputSinks, RowSink

__all__ = ["ParquetSink", "parquet_sinks", "ARROW_SCHEMAS"]

logger = logging.getLogger(__name__)


ARROW_SCHEMAS: Dict[str, pa.Schema] = {
    POINTS: pa.schema([
        pa.field("id", pa.int64(), nullable=False),
        pa.field("lon", pa.float64(), nullable=False),
        pa.field("lat", pa.float64(), nullable=False),
        pa.field("tags", pa.string()),
    ]),
    WAYS: pa.schema([
        pa.field("id", pa.int64(), nullable=False),
        pa.field("refs", pa.list_(pa.int64()), nullable=False),
        pa.field("tags", pa.string()),
    ]),
    RELATIONS: pa.schema([
        pa.field("id", pa.int64(), nullable=False),
        pa.field("type_id", pa.int16(), nullable=False),
        pa.field("tags", pa.string()),
    ]),
    RELATION_MEMBERS: pa.schema([
        pa.field("rel_id", pa.int64(), nullable=False),
        pa.field("member_id", pa.int64(), nullable=False),
        pa.field("member_type_id", pa.int16(), nullable=False),
        pa.field("role", pa.string()),
        pa.field("sequence_id", pa.int32(), nullable=False),
    ]),
}


class ParquetSink(RowSink):
    """
    Append-only destination writing ``<directory>/<table>.parquet``.

    Args:
        directory: Output directory (created if missing)
        table: One of the four logical tables
        buffer_rows: Rows per row group
    """

    def __init__(self, directory: Union[str, Path], table: str, buffer_rows: int = 50000):
        super().__init__(table)
        if table not in ARROW_SCHEMAS:
            raise ValueError(f"Unknown table: {table}")
        if buffer_rows < 1:
            raise ValueError(f"buffer_rows must be positive, got {buffer_rows}")
        self.path = Path(directory) / f"{table}.parquet"
        self.schema = ARROW_SCHEMAS[table]
        self.buffer_rows = buffer_rows
        self._columns = TABLE_COLUMNS[table]
        self._tags_index = self._columns.index("tags") if "tags" in self._columns else None
        self._pending: Dict[str, List] = {c: [] for c in self._columns}
        self._pending_count = 0
        self._writer: Optional[pq.ParquetWriter] = None

    def _open_writer(self) -> pq.ParquetWriter:
        if self._writer is None:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._writer = pq.ParquetWriter(str(self.path), self.schema)
        return self._writer

    def _write_row(self, row: tuple) -> None:
        for i, column in enumerate(self._columns):
            value = row[i]
            if i == self._tags_index:
                value = tags_to_json(value)
            elif column == "refs":
                value = list(value)
            self._pending[column].append(value)
        self._pending_count += 1
        if self._pending_count >= self.buffer_rows:
            self._flush()

    def _flush(self) -> None:
        if self._pending_count == 0:
            return
        try:
            batch = pa.Table.from_pydict(self._pending, schema=self.schema)
            self._open_writer().write_table(batch)
        except (pa.ArrowException, OSError) as e:
            raise SinkError(f"Writing {self.path} failed: {e}") from e
        self._pending = {c: [] for c in self._columns}
        self._pending_count = 0

    def _finalize(self) -> None:
        self._flush()
        try:
            self._open_writer().close()
        except (pa.ArrowException, OSError) as e:
            raise SinkError(f"Closing {self.path} failed: {e}") from e
        logger.info(f"Wrote {self.row_count} rows to {self.path}")


def parquet_sinks(directory: Union[str, Path], buffer_rows: int = 50000) -> OutputSinks:
    """Build the four Parquet destinations under one directory."""
    return OutputSinks(
        points=ParquetSink(directory, POINTS, buffer_rows),
        ways=ParquetSink(directory, WAYS, buffer_rows),
        relations=ParquetSink(directory, RELATIONS, buffer_rows),
        relation_members=ParquetSink(directory, RELATION_MEMBERS, buffer_rows),
    )
