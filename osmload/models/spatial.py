# =============================================================================
# Spatial Filter Types Module
# =============================================================================
# Provides the validated configuration of the spatial admissibility filter:
# - BoundingBox: axis-aligned lon/lat box
# - SpatialFilter: none, a bounding box, or a WKT polygon
# - FilterKind: which of the three variants a filter selects
# =============================================================================

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

__all__ = ["BoundingBox", "SpatialFilter", "FilterKind", "parse_bbox"]


class FilterKind(str, Enum):
    """Spatial filter variant."""
    NONE = "none"
    BBOX = "bbox"
    POLYGON = "polygon"


# =============================================================================
# BoundingBox
# =============================================================================

def parse_bbox(value: str) -> "BoundingBox":
    """
    Parse a bounding box from four comma-separated numbers.

    Order is xmin,ymin,xmax,ymax (lon/lat degrees).

    Args:
        value: String such as "7.8,54.5,15.5,58.1"

    Returns:
        BoundingBox instance

    Raises:
        ValueError: If the string does not hold exactly four numbers
    """
    parts = [p.strip() for p in value.split(",")]
    if len(parts) != 4:
        raise ValueError(
            f"Bounding box must be 'xmin,ymin,xmax,ymax', got {len(parts)} values: {value!r}"
        )
    try:
        xmin, ymin, xmax, ymax = (float(p) for p in parts)
    except ValueError:
        raise ValueError(f"Bounding box values must be numbers: {value!r}")
    return BoundingBox(xmin=xmin, ymin=ymin, xmax=xmax, ymax=ymax)


class BoundingBox(BaseModel):
    """
    Axis-aligned bounding box in lon/lat degrees.

    Validates that xmin <= xmax and ymin <= ymax (degenerate boxes allowed).

    Attributes:
        xmin: Minimum longitude (west)
        ymin: Minimum latitude (south)
        xmax: Maximum longitude (east)
        ymax: Maximum latitude (north)
    """

    xmin: float = Field(..., description="Minimum longitude (west)")
    ymin: float = Field(..., description="Minimum latitude (south)")
    xmax: float = Field(..., description="Maximum longitude (east)")
    ymax: float = Field(..., description="Maximum latitude (north)")

    @model_validator(mode='after')
    def validate_bounds(self) -> 'BoundingBox':
        """
        Validate that xmin <= xmax and ymin <= ymax.

        Raises:
            ValueError: If bounds are invalid (min > max)
        """
        if self.xmin > self.xmax:
            raise ValueError(
                f"Invalid bounds: xmin ({self.xmin}) must be less than or equal to xmax ({self.xmax})"
            )
        if self.ymin > self.ymax:
            raise ValueError(
                f"Invalid bounds: ymin ({self.ymin}) must be less than or equal to ymax ({self.ymax})"
            )
        return self

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.xmin, self.ymin, self.xmax, self.ymax)


# =============================================================================
# SpatialFilter
# =============================================================================

class SpatialFilter(BaseModel):
    """
    Configured spatial admissibility filter for one import pass.

    At most one of ``bbox`` and ``polygon`` may be set; neither means every
    point is admitted. ``bbox`` also accepts the "xmin,ymin,xmax,ymax"
    string form. ``polygon`` is WKT; only its exterior ring is used.

    Attributes:
        bbox: Optional bounding box
        polygon: Optional polygon as WKT
    """

    bbox: Optional[BoundingBox] = Field(None, description="Axis-aligned bounding box")
    polygon: Optional[str] = Field(None, description="Polygon WKT (exterior ring only)")

    @field_validator("bbox", mode="before")
    @classmethod
    def coerce_bbox(cls, v):
        if isinstance(v, str):
            return parse_bbox(v)
        if isinstance(v, (list, tuple)):
            if len(v) != 4:
                raise ValueError(f"Bounding box must have 4 values, got {len(v)}")
            return BoundingBox(xmin=v[0], ymin=v[1], xmax=v[2], ymax=v[3])
        return v

    @field_validator("polygon")
    @classmethod
    def validate_polygon(cls, v: Optional[str]) -> Optional[str]:
        """Parse the WKT eagerly so bad input fails before the pass starts."""
        if v is None:
            return v
        # Import here to avoid circular dependency
        from osmload.spatial_utils.wkt import exterior_ring_from_wkt

        exterior_ring_from_wkt(v)
        return v.strip()

    @model_validator(mode='after')
    def validate_exclusive(self) -> 'SpatialFilter':
        if self.bbox is not None and self.polygon is not None:
            raise ValueError("Specify either bbox or polygon, not both")
        return self

    @property
    def kind(self) -> FilterKind:
        if self.polygon is not None:
            return FilterKind.POLYGON
        if self.bbox is not None:
            return FilterKind.BBOX
        return FilterKind.NONE
