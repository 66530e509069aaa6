# =============================================================================
# PostgreSQL COPY Sink
# =============================================================================
# Streams rows into a PostGIS table with COPY ... FROM STDIN (text format).
# Rows are encoded into an in-memory buffer and shipped in chunks; the
# transaction is committed once, when the sink is finalized.
# =============================================================================

import io
import json
import logging
from typing import Any, Optional, Sequence

import psycopg2

from osmload.errors import SinkError
from osmload.models.rows import TABLE_COLUMNS
from osmload.schema import quote_identifier

from .base import RowSink

__all__ = ["PostgresCopySink", "encode_copy_value", "encode_copy_row"]

logger = logging.getLogger(__name__)

NULL = "\\N"

_ESCAPES = str.maketrans({
    "\\": "\\\\",
    "\t": "\\t",
    "\n": "\\n",
    "\r": "\\r",
})


def _escape(text: str) -> str:
    return text.translate(_ESCAPES)


def encode_copy_value(value: Any) -> str:
    """
    Encode one column value in PostgreSQL COPY text format.

    - None → \\N
    - int, float → decimal text (floats round-trip via repr)
    - tuple/list of ints → array literal {1,2,3}
    - dict → compact JSON text (for jsonb)
    - str → escaped text
    """
    if value is None:
        return NULL
    if isinstance(value, bool):
        return "t" if value else "f"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, (tuple, list)):
        return "{" + ",".join(str(int(v)) for v in value) + "}"
    if isinstance(value, dict):
        return _escape(json.dumps(value, ensure_ascii=False, separators=(",", ":")))
    if isinstance(value, str):
        return _escape(value)
    raise SinkError(f"Cannot encode value of type {type(value).__name__} for COPY")


def encode_copy_row(row: Sequence[Any]) -> str:
    return "\t".join(encode_copy_value(v) for v in row) + "\n"


class PostgresCopySink(RowSink):
    """
    Append-only destination backed by one psycopg2 connection.

    The connection is used exclusively by this sink for the duration of the
    pass; closing it is left to the owner.

    Args:
        connection: psycopg2 connection (autocommit off)
        schema: Target schema
        table: Target table (one of the four logical tables)
        buffer_rows: Rows encoded per COPY chunk

    Example:
        >>> sink = PostgresCopySink(conn, "osm", "points", buffer_rows=10000)
        >>> sink.write(PointRow(1, 9.5, 55.2, None))
        >>> sink.finish()
        1
    """

    def __init__(self, connection, schema: str, table: str, buffer_rows: int = 50000):
        super().__init__(table)
        if table not in TABLE_COLUMNS:
            raise ValueError(f"Unknown table: {table}")
        if buffer_rows < 1:
            raise ValueError(f"buffer_rows must be positive, got {buffer_rows}")
        self.connection = connection
        self.schema = schema
        self.buffer_rows = buffer_rows
        columns = ", ".join(TABLE_COLUMNS[table])
        self.copy_sql = (
            f"COPY {quote_identifier(schema, 'schema')}.{quote_identifier(table, 'table')} "
            f"({columns}) FROM STDIN"
        )
        self._buffer: Optional[io.StringIO] = io.StringIO()
        self._buffered = 0
        self._flushed = 0

    def _write_row(self, row: tuple) -> None:
        self._buffer.write(encode_copy_row(row))
        self._buffered += 1
        if self._buffered >= self.buffer_rows:
            self._flush()

    def _flush(self) -> None:
        if self._buffered == 0:
            return
        self._buffer.seek(0)
        try:
            with self.connection.cursor() as cur:
                cur.copy_expert(self.copy_sql, self._buffer)
        except psycopg2.Error as e:
            raise SinkError(f"COPY into {self.schema}.{self.table} failed: {e}") from e
        self._flushed += self._buffered
        logger.debug(f"Copied {self._buffered} rows into {self.schema}.{self.table}")
        self._buffer = io.StringIO()
        self._buffered = 0

    def _finalize(self) -> None:
        self._flush()
        try:
            self.connection.commit()
        except psycopg2.Error as e:
            raise SinkError(f"Commit of {self.schema}.{self.table} failed: {e}") from e
        self._buffer = None
        logger.info(f"Committed {self._flushed} rows into {self.schema}.{self.table}")
