"""Dagster Resources - External Service Connections."""

from .postgis_resource import PostGISResource

__all__ = [
    "PostGISResource",
]
