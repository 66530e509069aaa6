# =============================================================================
# Base Class for Post-Import Steps
# =============================================================================
# Post-import steps derive geometries, indexes and statistics from the four
# imported tables. They run after the pass has completed, never during it.
# =============================================================================

from abc import ABC, abstractmethod

__all__ = ["PostImportStep"]


class PostImportStep(ABC):
    """
    Base class for all post-import steps.

    All steps must implement the `generate_sql` method to produce SQL that
    will be executed against the import schema.

    Attributes:
        requires_autocommit: True for statements that cannot run inside a
            transaction block (e.g. VACUUM)
    """

    requires_autocommit: bool = False

    @abstractmethod
    def generate_sql(self, schema: str) -> str:
        """
        Generate SQL for this step.

        Args:
            schema: Import schema name (validated by the step)

        Returns:
            SQL string to execute
        """
        pass

    @property
    def description(self) -> str:
        """Short human-readable description used in log lines."""
        return type(self).__name__
