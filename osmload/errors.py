# =============================================================================
# Error Types
# =============================================================================
# Fatal error taxonomy for an import pass. Non-fatal conditions (spatial
# rejection, unresolved references, unknown relation types) are handled by
# the router and never surface as exceptions.
# =============================================================================

__all__ = ["OsmLoadError", "ElementDecodeError", "SinkError"]


class OsmLoadError(RuntimeError):
    """Base class for errors that abort an import pass."""


class ElementDecodeError(OsmLoadError):
    """
    An element from the source could not be decoded.

    Raised for invalid text in tags or roles, nodes without a valid
    location, or objects of an unknown element type.
    """


class SinkError(OsmLoadError):
    """A row could not be written to, or flushed from, an output destination."""
