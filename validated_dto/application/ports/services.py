from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from ..models import DiscoveredClass, DtoShape, EnumCase


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_export_start(
        self, scan_path: Path, output_path: Path, filename: str
    ) -> None: ...

    def log_class_discovered(self, class_name: str, source: Path | None) -> None: ...

    def log_class_excluded(self, class_name: str, reason: str) -> None: ...

    def log_interface_generated(
        self, class_name: str, interface_name: str, property_count: int
    ) -> None: ...

    def log_class_skipped(self, class_name: str, reason: str) -> None: ...

    def log_final_stats(self) -> None: ...


@runtime_checkable
class ClassDiscoveryPort(Protocol):
    pass

    def discover(self, root: Path) -> list[DiscoveredClass]: ...


@runtime_checkable
class ShapeExtractorPort(Protocol):
    pass

    def extract(self, cls: type) -> DtoShape: ...


@runtime_checkable
class EnumIntrospectionPort(Protocol):
    pass

    def cases(self, reference: object) -> list[EnumCase] | None: ...


@runtime_checkable
class InterfaceWriterPort(Protocol):
    pass

    def write(self, output_dir: Path, filename: str, content: str) -> Path: ...
