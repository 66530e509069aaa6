"""Dagster Ops - Reusable Computation Units."""

from .prepare_op import ImportConfig, prepare_osm_schema
from .import_op import import_osm_elements
from .materialize_op import materialize_osm_geometries
from .export_op import ParquetExportConfig, export_osm_parquet

__all__ = [
    "ImportConfig",
    "prepare_osm_schema",
    "import_osm_elements",
    "materialize_osm_geometries",
    "ParquetExportConfig",
    "export_osm_parquet",
]
