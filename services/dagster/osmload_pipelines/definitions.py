"""Dagster Definitions - Repository Configuration.

Defines jobs and resources for the OSM import pipeline.
"""

from dagster import Definitions, EnvVar

from .jobs import osm_import_job, osm_parquet_export_job
from .resources import PostGISResource


# =============================================================================
# Definitions
# =============================================================================

defs = Definitions(
    jobs=[
        osm_import_job,
        osm_parquet_export_job,
    ],
    resources={
        "postgis": PostGISResource(
            host=EnvVar("POSTGRES_HOST"),
            user=EnvVar("POSTGRES_USER"),
            password=EnvVar("POSTGRES_PASSWORD"),
            port=5432,
            database=EnvVar("POSTGRES_DB"),
        ),
    },
)
