from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console

    from ...application.models import ExportResponse

_SKIP_SEPARATOR = ": "


class ExportSummaryPresenter:
    pass

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def present(self, response: ExportResponse) -> None:
        if response.is_empty or response.file is None:
            self.console.print("[yellow]No DTO classes found to export.[/yellow]")
        else:
            self.console.print(
                f"[green]✓[/green] Successfully exported {response.count} DTO "
                f"classes to {escape(str(response.file))}",
                soft_wrap=True,
            )
        if response.has_skipped:
            self.console.print()
            self.console.print("[yellow]Skipped classes:[/yellow]")
            self.console.print(self._build_skipped_table(response.skipped))

    def _build_skipped_table(self, skipped: list[str]) -> Table:
        table = Table(show_header=True, header_style="bold yellow", box=None)
        table.add_column("Class", style="cyan", overflow="fold")
        table.add_column("Reason", style="dim", overflow="fold")
        for entry in skipped:
            class_name, _, reason = entry.partition(_SKIP_SEPARATOR)
            table.add_row(escape(class_name), escape(reason))
        return table
