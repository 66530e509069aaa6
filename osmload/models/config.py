# =============================================================================
# Configuration Models Module
# =============================================================================
# Provides Pydantic Settings models for service and import configuration:
# - PostGISSettings: target PostGIS database
# - ImportSettings: input file, spatial filter and load tuning
# =============================================================================

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .spatial import SpatialFilter

__all__ = [
    "PostGISSettings",
    "ImportSettings",
]


# =============================================================================
# PostGIS Settings (Target Database)
# =============================================================================

class PostGISSettings(BaseSettings):
    """
    Configuration for the PostGIS database that receives the import.

    Maps environment variables with prefix "POSTGRES_":
    - POSTGRES_HOST → host
    - POSTGRES_PORT → port
    - POSTGRES_USER → user
    - POSTGRES_PASSWORD → password
    - POSTGRES_DB → database

    Attributes:
        host: PostGIS host (default: "postgis")
        port: PostGIS port (default: 5432)
        user: PostgreSQL user
        password: PostgreSQL password
        database: Database name (default: "osm")
    """

    host: str = Field("postgis", validation_alias="POSTGRES_HOST", description="PostGIS host")
    port: int = Field(5432, validation_alias="POSTGRES_PORT", description="PostGIS port")
    user: str = Field(..., validation_alias="POSTGRES_USER", description="PostgreSQL user")
    password: str = Field(..., validation_alias="POSTGRES_PASSWORD", description="PostgreSQL password")
    database: str = Field("osm", validation_alias="POSTGRES_DB", description="Database name")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",  # Ignore unrelated env vars from shared .env files
    )

    @property
    def connection_string(self) -> str:
        """
        Build PostgreSQL connection URI.

        Format: postgresql://[user]:[password]@[host]:[port]/[database]

        Returns:
            PostgreSQL connection URI string
        """
        return (
            f"postgresql://{self.user}:{self.password}@"
            f"{self.host}:{self.port}/{self.database}"
        )


# =============================================================================
# Import Settings (One Pass)
# =============================================================================

class ImportSettings(BaseSettings):
    """
    Configuration for one import pass.

    Maps environment variables with prefix "OSMLOAD_":
    - OSMLOAD_INPUT → input_path
    - OSMLOAD_BBOX → bbox ("xmin,ymin,xmax,ymax")
    - OSMLOAD_POLYGON → polygon (WKT)
    - OSMLOAD_SCHEMA → schema_name
    - OSMLOAD_SRID → srid
    - OSMLOAD_BUFFER_ROWS → buffer_rows

    Attributes:
        input_path: Path to the .osm.pbf input file
        bbox: Optional bounding box filter
        polygon: Optional polygon filter (WKT, exterior ring only)
        schema_name: Target database schema (default: "osm")
        srid: SRID of the materialized geometry tables (default: 4326)
        buffer_rows: Rows buffered per COPY chunk (default: 50000)
    """

    input_path: str = Field(..., validation_alias="OSMLOAD_INPUT", description="Input .osm.pbf path")
    bbox: Optional[str] = Field(None, validation_alias="OSMLOAD_BBOX", description="Bounding box filter")
    polygon: Optional[str] = Field(None, validation_alias="OSMLOAD_POLYGON", description="Polygon filter (WKT)")
    schema_name: str = Field("osm", validation_alias="OSMLOAD_SCHEMA", description="Target schema")
    srid: int = Field(4326, validation_alias="OSMLOAD_SRID", description="Geometry SRID")
    buffer_rows: int = Field(50000, validation_alias="OSMLOAD_BUFFER_ROWS", description="Rows per COPY chunk")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("buffer_rows")
    @classmethod
    def validate_buffer_rows(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"buffer_rows must be positive, got {v}")
        return v

    @field_validator("srid")
    @classmethod
    def validate_srid(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"srid must be a positive EPSG code, got {v}")
        return v

    def spatial_filter(self) -> SpatialFilter:
        """
        Build the validated spatial filter for this pass.

        Raises:
            pydantic.ValidationError: If the bbox/polygon values are invalid
                or both are set
        """
        return SpatialFilter(bbox=self.bbox or None, polygon=self.polygon or None)

    @classmethod
    def with_overrides(cls, **overrides) -> "ImportSettings":
        """
        Load settings from the environment, then apply explicit overrides.

        Overrides are given by field name; None values are skipped so the
        environment (or the field default) applies.

        Example:
            >>> ImportSettings.with_overrides(input_path="/data/dk.osm.pbf", srid=None)
            ImportSettings(input_path='/data/dk.osm.pbf', ..., srid=4326, ...)

        Raises:
            pydantic.ValidationError: If a required value is missing or invalid
        """
        values = {
            cls.model_fields[name].validation_alias: value
            for name, value in overrides.items()
            if value is not None
        }
        return cls(**values)
