"""export:typescript command - Generate TypeScript interfaces from DTO classes.

A thin adapter between click and ``ExportTypescriptUseCase``: it resolves
paths from flags and configuration, runs the use case and hands the response
to the presenter.
"""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from ...application.models import ExportRequest
from ...config import ConfigLoader
from ...exceptions import ScanPathNotFoundError
from ...infrastructure.container import DependencyContainer
from ..presenters.summary import ExportSummaryPresenter

console = Console()


@click.command()
@click.argument(
    "dto_path", required=False, type=click.Path(file_okay=False, path_type=Path)
)
@click.option(
    "-o",
    "--output",
    "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Output directory (default: <base_path>/resources/typescript)",
)
@click.option(
    "-f",
    "--filename",
    help="Output filename (default: dtos.ts)",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to a validated_dto.toml config file (default: ./validated_dto.toml)",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def export_typescript_command(
    dto_path: Path | None,
    output_dir: Path | None,
    filename: str | None,
    config_file: Path | None,
    verbose: int,
) -> None:
    """Export DTO classes as TypeScript interfaces.

    Every concrete DTO class found under DTO_PATH becomes one
    ``export interface`` in a single generated file.

    Examples:

    \b
        # Scan the configured namespace (default: app/dto)
        validated-dto export:typescript

    \b
        # Custom source folder, output folder and file name
        validated-dto export:ts src/dto -o frontend/types -f api.ts
    """
    try:
        config = ConfigLoader.load(config_file=config_file)
    except ValueError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc

    request = ExportRequest(
        scan_path=dto_path or config.default_dto_path(),
        output_dir=output_dir or config.default_output_path(),
        filename=filename or config.filename,
    )

    container = DependencyContainer(verbose=verbose, console=console)
    use_case = container.create_export_typescript_use_case()

    try:
        response = use_case.execute(request)
    except ScanPathNotFoundError as exc:
        raise click.ClickException(str(exc)) from exc
    except Exception as exc:
        raise click.ClickException(f"Export failed: {exc}") from exc

    ExportSummaryPresenter(console).present(response)
