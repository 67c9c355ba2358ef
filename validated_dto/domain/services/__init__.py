"""Type inference and rendering for TypeScript interface generation."""

from .interface_renderer import InterfaceRenderer, interface_name
from .type_mapping import CAST_TYPE_MAPPING, lookup_cast_type
from .type_resolver import TypeScriptTypeResolver, render_enum_literal

__all__ = [
    "CAST_TYPE_MAPPING",
    "InterfaceRenderer",
    "TypeScriptTypeResolver",
    "interface_name",
    "lookup_cast_type",
    "render_enum_literal",
]
