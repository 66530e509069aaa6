# =============================================================================
# Import Op - Single-Pass Element Import
# =============================================================================
# Streams the PBF elements through the router into the four COPY
# destinations of the prepared schema.
# =============================================================================

from typing import Any, Callable, Dict, Iterable, Optional

from dagster import In, OpExecutionContext, Out, op

from osmload.models import SpatialFilter
from osmload.pipeline import run_import
from osmload.sources import iter_pbf_elements


def _import_elements(
    postgis,
    import_plan: Dict[str, Any],
    log,
    element_source: Optional[Callable[[str], Iterable]] = None,
) -> Dict[str, Any]:
    """
    Core logic for the import pass.

    This function is extracted for easier unit testing without Dagster context.

    Args:
        postgis: PostGISResource instance
        import_plan: Plan dict from prepare_osm_schema
        log: Logger instance (context.log)
        element_source: Callable returning the element sequence for a path
            (default: iter_pbf_elements)

    Returns:
        Import plan extended with per-table row counts and drop counters

    Raises:
        FileNotFoundError: If the input file does not exist
        ElementDecodeError: If an element cannot be decoded
        SinkError: If a COPY destination fails
    """
    if element_source is None:
        element_source = iter_pbf_elements
    schema = import_plan["schema"]
    spatial_filter = SpatialFilter(bbox=import_plan.get("bbox"), polygon=import_plan.get("polygon"))

    elements = element_source(import_plan["input_path"])
    log.info(f"Importing {import_plan['input_path']} into schema {schema}")

    with postgis.copy_sinks(schema, import_plan.get("buffer_rows", 50000)) as sinks:
        result = run_import(elements, sinks, spatial_filter)

    for table, count in result.row_counts.items():
        log.info(f"Imported {count} {table}")

    return {**import_plan, **result.to_dict()}


@op(
    ins={"import_plan": In(dagster_type=dict)},
    out={"import_result": Out(dagster_type=dict)},
    required_resource_keys={"postgis"},
)
def import_osm_elements(context: OpExecutionContext, import_plan: dict) -> dict:
    """
    Run the single-pass import into the prepared schema.

    Args:
        context: Dagster op execution context
        import_plan: Plan dict from prepare_osm_schema

    Returns:
        Import result dict containing the plan plus:
        - row_counts: rows committed per table
        - points_rejected, ways_dropped, relations_dropped
    """
    return _import_elements(
        postgis=context.resources.postgis,
        import_plan=import_plan,
        log=context.log,
    )
