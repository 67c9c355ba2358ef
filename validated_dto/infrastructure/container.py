from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from rich.console import Console

from ..application.export_typescript_use_case import (
    ExportTypescriptDependencies,
    ExportTypescriptUseCase,
)
from ..domain.services.interface_renderer import InterfaceRenderer
from ..domain.services.type_resolver import TypeScriptTypeResolver
from .discovery.registry_discovery import RegistryDiscovery
from .discovery.source_scan_discovery import SourceScanDiscovery
from .introspection.enum_inspector import EnumInspector
from .introspection.shape_extractor import DtoShapeExtractor
from .io.typescript_writer import TypeScriptFileWriter
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from ..application.ports.services import (
        ClassDiscoveryPort,
        EnumIntrospectionPort,
        InterfaceWriterPort,
        LoggerPort,
        ShapeExtractorPort,
    )


class DependencyContainer:
    pass

    def __init__(
        self,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
        dto_classes: Iterable[type | str] | None = None,
    ) -> None:
        super().__init__()
        self.verbose = verbose
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self.dto_classes = list(dto_classes) if dto_classes is not None else None
        self._logger_instance: LoggerPort | None = None
        self._discovery_instance: ClassDiscoveryPort | None = None
        self._shape_extractor_instance: ShapeExtractorPort | None = None
        self._enum_inspector_instance: EnumIntrospectionPort | None = None
        self._type_resolver_instance: TypeScriptTypeResolver | None = None
        self._renderer_instance: InterfaceRenderer | None = None
        self._writer_instance: InterfaceWriterPort | None = None

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_discovery(self) -> ClassDiscoveryPort:
        if self._discovery_instance is None:
            logger = self.create_logger()
            if self.dto_classes is not None:
                self._discovery_instance = RegistryDiscovery(
                    self.dto_classes, logger=logger
                )
            else:
                self._discovery_instance = SourceScanDiscovery(logger=logger)
        return self._discovery_instance

    def create_shape_extractor(self) -> ShapeExtractorPort:
        if self._shape_extractor_instance is None:
            self._shape_extractor_instance = DtoShapeExtractor(
                logger=self.create_logger()
            )
        return self._shape_extractor_instance

    def create_enum_inspector(self) -> EnumIntrospectionPort:
        if self._enum_inspector_instance is None:
            self._enum_inspector_instance = EnumInspector()
        return self._enum_inspector_instance

    def create_type_resolver(self) -> TypeScriptTypeResolver:
        if self._type_resolver_instance is None:
            self._type_resolver_instance = TypeScriptTypeResolver(
                enum_introspection=self.create_enum_inspector()
            )
        return self._type_resolver_instance

    def create_renderer(self) -> InterfaceRenderer:
        if self._renderer_instance is None:
            self._renderer_instance = InterfaceRenderer()
        return self._renderer_instance

    def create_writer(self) -> InterfaceWriterPort:
        if self._writer_instance is None:
            self._writer_instance = TypeScriptFileWriter()
        return self._writer_instance

    def create_export_typescript_use_case(
        self, clock: Callable[[], datetime] | None = None
    ) -> ExportTypescriptUseCase:
        dependencies = ExportTypescriptDependencies(
            logger=self.create_logger(),
            discovery=self.create_discovery(),
            shape_extractor=self.create_shape_extractor(),
            type_resolver=self.create_type_resolver(),
            renderer=self.create_renderer(),
            writer=self.create_writer(),
            clock=clock or datetime.now,
        )
        return ExportTypescriptUseCase(dependencies)
