"""Port interfaces for external dependencies.

This module defines the protocols that infrastructure adapters implement so
the export use case can be wired with real or test doubles.
"""

from .services import (
    ClassDiscoveryPort,
    EnumIntrospectionPort,
    InterfaceWriterPort,
    LoggerPort,
    ShapeExtractorPort,
)

__all__ = [
    "ClassDiscoveryPort",
    "EnumIntrospectionPort",
    "InterfaceWriterPort",
    "LoggerPort",
    "ShapeExtractorPort",
]
