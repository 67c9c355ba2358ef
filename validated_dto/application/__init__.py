"""Application layer for validated-dto.

This layer contains the export use case and defines the ports (interfaces)
its infrastructure adapters implement.
"""

from .export_typescript_use_case import (
    ExportTypescriptDependencies,
    ExportTypescriptUseCase,
)
from .models import (
    DiscoveredClass,
    DtoShape,
    EnumCase,
    ExportRequest,
    ExportResponse,
    InterfaceBlock,
    ResolvedProperty,
)

__all__ = [
    "DiscoveredClass",
    "DtoShape",
    "EnumCase",
    "ExportRequest",
    "ExportResponse",
    "ExportTypescriptDependencies",
    "ExportTypescriptUseCase",
    "InterfaceBlock",
    "ResolvedProperty",
]
