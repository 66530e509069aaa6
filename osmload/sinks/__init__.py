"""
Output sinks for osmload.

This library provides:
- RowSink: base class for append-only destinations
- OutputSinks: the four destinations of one pass
- MemorySink, PostgresCopySink, ParquetSink: concrete destinations
"""

from .base import OutputSinks, RowSink
from .memory import MemorySink, memory_sinks
from .parquet import ParquetSink, parquet_sinks
from .postgis import PostgresCopySink

__all__ = [
    "OutputSinks",
    "RowSink",
    "MemorySink",
    "memory_sinks",
    "ParquetSink",
    "parquet_sinks",
    "PostgresCopySink",
]
