"""Integration test fixtures for a running PostGIS database.

Connection settings come from the POSTGRES_* environment variables.
"""

import pytest
import psycopg2

from osmload.models import PostGISSettings
from services.dagster.osmload_pipelines.resources import PostGISResource

INTEGRATION_SCHEMA = "osmload_it"


@pytest.fixture(scope="module")
def postgis_settings() -> PostGISSettings:
    """Load PostGIS settings from environment."""
    return PostGISSettings()


@pytest.fixture(scope="module")
def postgis_resource(postgis_settings) -> PostGISResource:
    return PostGISResource(
        host=postgis_settings.host,
        port=postgis_settings.port,
        user=postgis_settings.user,
        password=postgis_settings.password,
        database=postgis_settings.database,
    )


@pytest.fixture
def postgis_connection(postgis_settings):
    """Plain psycopg2 connection for assertions."""
    conn = psycopg2.connect(postgis_settings.connection_string, connect_timeout=5)
    yield conn
    conn.close()


@pytest.fixture
def integration_schema(postgis_resource):
    """Prepared import schema, dropped after the test."""
    postgis_resource.prepare_schema(INTEGRATION_SCHEMA)
    yield INTEGRATION_SCHEMA
    postgis_resource.execute_sql(f'drop schema if exists "{INTEGRATION_SCHEMA}" cascade')
