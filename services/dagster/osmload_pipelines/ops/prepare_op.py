# =============================================================================
# Prepare Op - Import Schema Preparation
# =============================================================================
# Validates the run configuration and (re)creates the target schema.
# Runs before the import pass.
# =============================================================================

from typing import Any, Dict, Optional

from dagster import Config, OpExecutionContext, Out, op
from pydantic import Field

from osmload.models import ImportSettings


class ImportConfig(Config):
    """
    Run configuration of an OSM import.

    Unset fields fall back to the OSMLOAD_* environment (ImportSettings),
    then to the ImportSettings defaults.
    """

    input_path: Optional[str] = Field(None, description="Path to the .osm.pbf input file (default: OSMLOAD_INPUT)")
    bbox: Optional[str] = Field(None, description="Bounding box filter 'xmin,ymin,xmax,ymax'")
    polygon: Optional[str] = Field(None, description="Polygon filter as WKT (exterior ring only)")
    schema_name: Optional[str] = Field(None, description="Target schema (default: OSMLOAD_SCHEMA or 'osm')")
    srid: Optional[int] = Field(None, description="SRID of the geometry tables (default: OSMLOAD_SRID or 4326)")
    buffer_rows: Optional[int] = Field(None, description="Rows per COPY chunk (default: OSMLOAD_BUFFER_ROWS or 50000)")


def _prepare_schema(
    postgis,
    config: ImportConfig,
    log,
) -> Dict[str, Any]:
    """
    Core logic for schema preparation.

    This function is extracted for easier unit testing without Dagster context.

    Args:
        postgis: PostGISResource instance
        config: Import run configuration
        log: Logger instance (context.log)

    Returns:
        Import plan dict passed to the import op

    Raises:
        pydantic.ValidationError: If the input path is missing, a tuning
            value is invalid or the spatial filter is invalid
        ValueError: If schema name or srid are invalid
    """
    settings = ImportSettings.with_overrides(
        input_path=config.input_path,
        bbox=config.bbox,
        polygon=config.polygon,
        schema_name=config.schema_name,
        srid=config.srid,
        buffer_rows=config.buffer_rows,
    )

    # Validate the filter before touching the database (fail-fast)
    spatial_filter = settings.spatial_filter()
    log.info(f"Spatial filter: {spatial_filter.kind.value}")

    log.info(f"Creating schema {settings.schema_name}")
    postgis.prepare_schema(settings.schema_name, settings.srid)

    return {
        "input_path": settings.input_path,
        "bbox": settings.bbox or None,
        "polygon": settings.polygon or None,
        "schema": settings.schema_name,
        "srid": settings.srid,
        "buffer_rows": settings.buffer_rows,
    }


@op(
    out={"import_plan": Out(dagster_type=dict)},
    required_resource_keys={"postgis"},
)
def prepare_osm_schema(context: OpExecutionContext, config: ImportConfig) -> dict:
    """
    Validate the import configuration and prepare the target schema.

    Args:
        context: Dagster op execution context
        config: Import run configuration

    Returns:
        Import plan dict (input path, filter, schema, srid, buffer size)
    """
    return _prepare_schema(
        postgis=context.resources.postgis,
        config=config,
        log=context.log,
    )
