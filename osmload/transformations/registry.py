# =============================================================================
# Post-Import Recipe
# =============================================================================
# Ordered list of post-import steps run after a pass has completed.
# =============================================================================

from typing import List

from osmload.models.rows import POINTS, RELATION_MEMBERS, RELATIONS, WAYS

from .base import PostImportStep
from .steps import (
    SOURCE_SRID,
    AnalyzeTableStep,
    CreateIndexStep,
    CreateSpatialIndexStep,
    MaterializeLinesStep,
    MaterializePointsStep,
    MaterializePolygonsStep,
    VacuumTableStep,
)

__all__ = ["PostImportRecipe", "GEOMETRY_TABLES"]

GEOMETRY_TABLES = ("points_geom", "ways_lines", "ways_polygons")


class PostImportRecipe:
    """
    Registry for the post-import recipe.

    Steps are instantiated fresh each time (no shared state).
    """

    @staticmethod
    def get_recipe(srid: int = SOURCE_SRID) -> List[PostImportStep]:
        """
        Get the post-import steps in execution order.

        Args:
            srid: SRID of the geometry tables

        Returns:
            List of PostImportStep instances to execute
        """
        steps: List[PostImportStep] = [
            CreateIndexStep(RELATIONS, ["type_id"]),
            AnalyzeTableStep(POINTS),
            AnalyzeTableStep(WAYS),
            AnalyzeTableStep(RELATIONS),
            MaterializePointsStep(srid),
            MaterializeLinesStep(srid),
            MaterializePolygonsStep(),
            VacuumTableStep("ways_lines"),
            CreateIndexStep(RELATION_MEMBERS, ["rel_id", "member_id", "member_type_id"]),
            AnalyzeTableStep(RELATION_MEMBERS),
        ]
        steps += [CreateSpatialIndexStep(table) for table in GEOMETRY_TABLES]
        steps += [AnalyzeTableStep(table) for table in GEOMETRY_TABLES]
        return steps
