# =============================================================================
# Transformations Library
# =============================================================================
# Post-import steps that derive geometries, indexes and statistics from the
# imported element tables.
# =============================================================================

"""
Post-import transformations for osmload.

This library provides:
- PostImportStep: Base class for all post-import steps
- Index, analyze, vacuum and geometry materialization steps
- PostImportRecipe: the ordered step list run after a pass
"""

from .base import PostImportStep
from .steps import (
    AnalyzeTableStep,
    CreateIndexStep,
    CreateSpatialIndexStep,
    MaterializeLinesStep,
    MaterializePointsStep,
    MaterializePolygonsStep,
    VacuumTableStep,
)
from .registry import GEOMETRY_TABLES, PostImportRecipe

__all__ = [
    "PostImportStep",
    "AnalyzeTableStep",
    "CreateIndexStep",
    "CreateSpatialIndexStep",
    "MaterializeLinesStep",
    "MaterializePointsStep",
    "MaterializePolygonsStep",
    "VacuumTableStep",
    "GEOMETRY_TABLES",
    "PostImportRecipe",
]
