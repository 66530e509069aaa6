"""Element sources for osmload."""

from .pbf import convert_osmium_object, iter_pbf_elements

__all__ = ["convert_osmium_object", "iter_pbf_elements"]
