from __future__ import annotations

from typing import TYPE_CHECKING, override

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from pathlib import Path


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_export_start(
        self, scan_path: Path, output_path: Path, filename: str
    ) -> None:
        return None

    @override
    def log_class_discovered(self, class_name: str, source: Path | None) -> None:
        return None

    @override
    def log_class_excluded(self, class_name: str, reason: str) -> None:
        return None

    @override
    def log_interface_generated(
        self, class_name: str, interface_name: str, property_count: int
    ) -> None:
        return None

    @override
    def log_class_skipped(self, class_name: str, reason: str) -> None:
        return None

    @override
    def log_final_stats(self) -> None:
        return None
