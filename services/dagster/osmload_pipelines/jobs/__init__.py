"""Dagster Jobs - Executable Workflows."""

from .import_job import osm_import_job, osm_parquet_export_job

__all__ = ["osm_import_job", "osm_parquet_export_job"]
