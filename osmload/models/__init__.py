# =============================================================================
# Data Models Library
# =============================================================================
# Element dataclasses, output row shapes, relation types and Pydantic
# configuration models for osmload.
# =============================================================================

"""
Data models for osmload.

This library provides:
- Elements: Point, Way, Relation, Member, MemberKind
- Rows: PointRow, WayRow, RelationRow, MemberRow
- RelationType classification
- Spatial filter types: BoundingBox, SpatialFilter
- Configuration models
"""

# Element models
from .elements import (
    Element,
    Member,
    MemberKind,
    Point,
    Relation,
    TagPairs,
    Way,
)

# Row models
from .rows import (
    MemberRow,
    PointRow,
    RelationRow,
    TABLE_COLUMNS,
    WayRow,
)

# Relation types
from .relation_type import (
    RelationType,
    classify_relation_type,
)

# Spatial filter types
from .spatial import (
    BoundingBox,
    FilterKind,
    SpatialFilter,
    parse_bbox,
)

# Configuration models
from .config import (
    ImportSettings,
    PostGISSettings,
)

__all__ = [
    # Element models
    "Element",
    "Member",
    "MemberKind",
    "Point",
    "Relation",
    "TagPairs",
    "Way",
    # Row models
    "MemberRow",
    "PointRow",
    "RelationRow",
    "TABLE_COLUMNS",
    "WayRow",
    # Relation types
    "RelationType",
    "classify_relation_type",
    # Spatial filter types
    "BoundingBox",
    "FilterKind",
    "SpatialFilter",
    "parse_bbox",
    # Configuration models
    "ImportSettings",
    "PostGISSettings",
]
