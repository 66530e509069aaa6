# =============================================================================
# osmload Core Library
# =============================================================================
# Streaming filter-and-route engine that loads OSM elements into PostGIS.
# See individual sub-packages for detailed documentation.
# =============================================================================

"""
osmload core library.

Sub-packages:
- models: element dataclasses, row shapes, relation types, settings
- spatial_utils: spatial admissibility predicates and WKT helpers
- sinks: append-only output destinations (PostgreSQL COPY, Parquet, memory)
- sources: lazy element sources (PBF via osmium)
- transformations: post-import SQL steps (geometry materialization)
"""

__version__ = "0.1.0"
