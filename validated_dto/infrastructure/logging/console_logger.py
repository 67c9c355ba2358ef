from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from pathlib import Path


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._stats: dict[str, int] = {
            "classes_discovered": 0,
            "classes_excluded": 0,
            "interfaces_generated": 0,
            "classes_skipped": 0,
            "warnings": 0,
            "errors": 0,
        }

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            self.console.print(message)

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print(f"[dim]{message}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            self.console.print(f"[dim cyan]{message}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {message}")

    @override
    def log_export_start(
        self, scan_path: Path, output_path: Path, filename: str
    ) -> None:
        self.verbose(f"Scanning for DTO classes in: {escape(str(scan_path))}")
        self.verbose(f"Output file: {escape(str(output_path / filename))}")

    @override
    def log_class_discovered(self, class_name: str, source: Path | None) -> None:
        self._stats["classes_discovered"] += 1
        where = f" ({escape(str(source))})" if source is not None else ""
        self.debug(f"Discovered {escape(class_name)}{where}")

    @override
    def log_class_excluded(self, class_name: str, reason: str) -> None:
        self._stats["classes_excluded"] += 1
        self.debug(f"Excluded {escape(class_name)}: {escape(reason)}")

    @override
    def log_interface_generated(
        self, class_name: str, interface_name: str, property_count: int
    ) -> None:
        self._stats["interfaces_generated"] += 1
        self.verbose(
            f"  {escape(class_name)} -> {interface_name} ({property_count} properties)"
        )

    @override
    def log_class_skipped(self, class_name: str, reason: str) -> None:
        self._stats["classes_skipped"] += 1
        self.warning(f"Skipped {escape(class_name)}: {escape(reason)}")

    @override
    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Export Statistics:[/dim]")
            self.console.print(
                f"[dim]  Classes discovered: {self._stats['classes_discovered']}[/dim]"
            )
            self.console.print(
                f"[dim]  Interfaces generated: {self._stats['interfaces_generated']}[/dim]"
            )
            if self._stats["classes_excluded"] > 0:
                self.console.print(
                    f"[dim]  Classes excluded: {self._stats['classes_excluded']}[/dim]"
                )
            if self._stats["classes_skipped"] > 0:
                self.console.print(
                    f"[dim yellow]  Classes skipped: {self._stats['classes_skipped']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )
