"""DTO class discovery adapters."""

from .class_filter import exclusion_reason, qualified_name
from .registry_discovery import RegistryDiscovery
from .source_scan_discovery import SourceScanDiscovery, module_path_for

__all__ = [
    "RegistryDiscovery",
    "SourceScanDiscovery",
    "exclusion_reason",
    "module_path_for",
    "qualified_name",
]
