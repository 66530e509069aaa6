# =============================================================================
# Materialize Op - Post-Import Geometry Derivation
# =============================================================================
# Runs the post-import recipe (indexes, statistics, point/line/polygon
# geometry tables) once the import pass has completed.
# =============================================================================

from typing import Any, Dict

from dagster import In, OpExecutionContext, Out, op

from osmload.transformations import GEOMETRY_TABLES, PostImportRecipe


def _materialize_geometries(
    postgis,
    import_result: Dict[str, Any],
    log,
) -> Dict[str, Any]:
    """
    Core logic for post-import materialization.

    This function is extracted for easier unit testing without Dagster context.

    Args:
        postgis: PostGISResource instance
        import_result: Result dict from import_osm_elements
        log: Logger instance (context.log)

    Returns:
        Import result extended with geometry_counts per geometry table

    Raises:
        Exception: If any post-import statement fails
    """
    schema = import_result["schema"]
    recipe = PostImportRecipe.get_recipe(import_result.get("srid", 4326))

    for step in recipe:
        log.info(step.description)
        postgis.execute_sql(step.generate_sql(schema), autocommit=step.requires_autocommit)

    geometry_counts = {}
    for table in GEOMETRY_TABLES:
        geometry_counts[table] = postgis.table_row_count(schema, table)
        log.info(f"Created {geometry_counts[table]} {table}")

    return {**import_result, "geometry_counts": geometry_counts}


@op(
    ins={"import_result": In(dagster_type=dict)},
    out={"materialize_result": Out(dagster_type=dict)},
    required_resource_keys={"postgis"},
)
def materialize_osm_geometries(context: OpExecutionContext, import_result: dict) -> dict:
    """
    Derive geometry tables, indexes and statistics after the import pass.

    Args:
        context: Dagster op execution context
        import_result: Result dict from import_osm_elements

    Returns:
        Import result dict plus geometry_counts
    """
    return _materialize_geometries(
        postgis=context.resources.postgis,
        import_result=import_result,
        log=context.log,
    )
