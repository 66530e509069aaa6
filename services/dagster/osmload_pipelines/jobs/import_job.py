"""OSM import jobs (op-based)."""

from dagster import job

from ..ops import (
    export_osm_parquet,
    import_osm_elements,
    materialize_osm_geometries,
    prepare_osm_schema,
)


@job(
    name="osm_import_job",
    description="Imports an OSM PBF file into PostGIS: prepares the schema, streams the elements, materializes geometries",
)
def osm_import_job():
    """
    Main import job.

    Pipeline flow:
    1. prepare_osm_schema: validates config and (re)creates the target schema
    2. import_osm_elements: single-pass filter-and-route import via COPY
    3. materialize_osm_geometries: indexes, statistics and geometry tables

    Steps are strictly sequential; materialization never overlaps the pass.
    """
    import_plan = prepare_osm_schema()
    import_result = import_osm_elements(import_plan)
    materialize_osm_geometries(import_result)


@job(
    name="osm_parquet_export_job",
    description="Exports the filtered elements of an OSM PBF file to Parquet",
)
def osm_parquet_export_job():
    export_osm_parquet()
