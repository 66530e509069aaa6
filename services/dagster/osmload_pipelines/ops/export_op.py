# =============================================================================
# Export Op - Parquet Export
# =============================================================================
# Runs the same single-pass filter-and-route import into Parquet files
# instead of PostGIS (one file per table).
# =============================================================================

from typing import Any, Callable, Dict, Iterable, Optional

from dagster import Config, OpExecutionContext, Out, op
from pydantic import Field

from osmload.models import ImportSettings
from osmload.pipeline import run_import
from osmload.sinks import parquet_sinks
from osmload.sources import iter_pbf_elements


class ParquetExportConfig(Config):
    """
    Run configuration of a Parquet export.

    Unset fields fall back to the OSMLOAD_* environment (ImportSettings).
    """

    input_path: Optional[str] = Field(None, description="Path to the .osm.pbf input file (default: OSMLOAD_INPUT)")
    output_dir: str = Field(..., description="Directory receiving <table>.parquet files")
    bbox: Optional[str] = Field(None, description="Bounding box filter 'xmin,ymin,xmax,ymax'")
    polygon: Optional[str] = Field(None, description="Polygon filter as WKT (exterior ring only)")
    buffer_rows: Optional[int] = Field(None, description="Rows per Parquet row group (default: OSMLOAD_BUFFER_ROWS)")


def _export_parquet(
    config: ParquetExportConfig,
    log,
    element_source: Optional[Callable[[str], Iterable]] = None,
) -> Dict[str, Any]:
    """
    Core logic for the Parquet export.

    Args:
        config: Export run configuration
        log: Logger instance (context.log)
        element_source: Callable returning the element sequence for a path
            (default: iter_pbf_elements)

    Returns:
        Dict with output_dir and per-table row counts

    Raises:
        pydantic.ValidationError: If the input path is missing or the
            spatial filter is invalid
    """
    if element_source is None:
        element_source = iter_pbf_elements
    settings = ImportSettings.with_overrides(
        input_path=config.input_path,
        bbox=config.bbox,
        polygon=config.polygon,
        buffer_rows=config.buffer_rows,
    )
    spatial_filter = settings.spatial_filter()
    sinks = parquet_sinks(config.output_dir, settings.buffer_rows)

    log.info(f"Exporting {settings.input_path} to {config.output_dir}")
    result = run_import(element_source(settings.input_path), sinks, spatial_filter)

    return {"output_dir": config.output_dir, **result.to_dict()}


@op(out={"export_result": Out(dagster_type=dict)})
def export_osm_parquet(context: OpExecutionContext, config: ParquetExportConfig) -> dict:
    """Import a PBF file into Parquet files (points, ways, relations, relation_members)."""
    return _export_parquet(config=config, log=context.log)
