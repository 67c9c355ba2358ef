"""Runtime introspection adapters for DTO and enum classes."""

from .enum_inspector import EnumInspector
from .shape_extractor import DtoShapeExtractor

__all__ = ["DtoShapeExtractor", "EnumInspector"]
