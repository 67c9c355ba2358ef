"""TypeScript export use case.

Orchestrates one export run: discover DTO classes under a scan path, extract
each class's shape, resolve property types, render one interface block per
class and write them all into a single file.

The run is single-threaded. Each class is processed at most once per run,
keyed by its fully qualified name. A class that cannot be introspected is
recorded in the skip list and never blocks the remaining classes; only a
missing scan path or a failed write aborts the run.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from ..exceptions import ScanPathNotFoundError, ShapeExtractionError
from .models import ExportResponse, InterfaceBlock

if TYPE_CHECKING:
    from ..domain.services.interface_renderer import InterfaceRenderer
    from ..domain.services.type_resolver import TypeScriptTypeResolver
    from .models import DiscoveredClass, ExportRequest
    from .ports.services import (
        ClassDiscoveryPort,
        InterfaceWriterPort,
        LoggerPort,
        ShapeExtractorPort,
    )


@dataclass(slots=True)
class ExportTypescriptDependencies:
    logger: LoggerPort
    discovery: ClassDiscoveryPort
    shape_extractor: ShapeExtractorPort
    type_resolver: TypeScriptTypeResolver
    renderer: InterfaceRenderer
    writer: InterfaceWriterPort
    clock: Callable[[], datetime] = datetime.now


class ExportTypescriptUseCase:
    """Use case for exporting DTO classes as TypeScript interfaces.

    Example:
        >>> container = DependencyContainer()
        >>> use_case = container.create_export_typescript_use_case()
        >>> response = use_case.execute(
        ...     ExportRequest(
        ...         scan_path=Path("app/dto"),
        ...         output_dir=Path("resources/typescript"),
        ...         filename="dtos.ts",
        ...     )
        ... )
        >>> response.count, response.file
        (3, PosixPath('resources/typescript/dtos.ts'))
    """

    def __init__(self, dependencies: ExportTypescriptDependencies) -> None:
        super().__init__()
        self.logger = dependencies.logger
        self._discovery = dependencies.discovery
        self._shape_extractor = dependencies.shape_extractor
        self._type_resolver = dependencies.type_resolver
        self._renderer = dependencies.renderer
        self._writer = dependencies.writer
        self._clock = dependencies.clock

    def execute(self, request: ExportRequest) -> ExportResponse:
        if not request.scan_path.is_dir():
            raise ScanPathNotFoundError(request.scan_path)

        self.logger.log_export_start(
            request.scan_path, request.output_dir, request.filename
        )
        processed: set[str] = set()
        blocks: list[InterfaceBlock] = []
        skipped: list[str] = []

        for discovered in self._discovery.discover(request.scan_path):
            if discovered.name in processed:
                continue
            processed.add(discovered.name)
            try:
                block = self._build_interface(discovered)
            except ShapeExtractionError as exc:
                skipped.append(f"{discovered.name}: {exc.reason}")
                self.logger.log_class_skipped(discovered.name, exc.reason)
                continue
            except Exception as exc:
                skipped.append(f"{discovered.name}: {exc}")
                self.logger.log_class_skipped(discovered.name, str(exc))
                continue
            if block is None:
                self.logger.debug(
                    f"{discovered.name} declares no properties; no interface emitted"
                )
                continue
            blocks.append(block)
            self.logger.log_interface_generated(
                discovered.name, block.interface_name, len(block.properties)
            )

        response = ExportResponse(
            skipped=skipped,
            interfaces=[block.interface_name for block in blocks],
        )
        if not blocks:
            self.logger.log_final_stats()
            return response

        content = self._renderer.render_file(
            [block.text for block in blocks], self._clock()
        )
        response.file = self._writer.write(
            request.output_dir, request.filename, content
        )
        response.count = len(blocks)
        self.logger.log_final_stats()
        return response

    def _build_interface(self, discovered: DiscoveredClass) -> InterfaceBlock | None:
        shape = self._shape_extractor.extract(discovered.cls)
        properties = self._type_resolver.resolve_properties(shape)
        name = self._renderer.interface_name(discovered.cls)
        text = self._renderer.render_block(name, properties)
        if text is None:
            return None
        return InterfaceBlock(
            class_name=discovered.name,
            interface_name=name,
            properties=tuple(properties),
            text=text,
        )
