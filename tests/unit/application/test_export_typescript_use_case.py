"""Tests for the TypeScript export use case.

The discovery side runs against real modules written by the ``dto_package``
fixture; the remaining collaborators are the production adapters with a
silent logger and a fixed clock.
"""

# pyright: reportPrivateUsage=false

from datetime import datetime
from unittest.mock import Mock

import pytest

from validated_dto.application.export_typescript_use_case import (
    ExportTypescriptDependencies,
    ExportTypescriptUseCase,
)
from validated_dto.application.models import DiscoveredClass, ExportRequest
from validated_dto.domain.services import InterfaceRenderer, TypeScriptTypeResolver
from validated_dto.exceptions import EmissionError, ScanPathNotFoundError
from validated_dto.infrastructure.discovery import SourceScanDiscovery
from validated_dto.infrastructure.introspection import DtoShapeExtractor, EnumInspector
from validated_dto.infrastructure.io import TypeScriptFileWriter
from validated_dto.infrastructure.logging import NullLogger

FIXED_TIME = datetime(2024, 6, 1, 12, 0, 0)

USER_MODULE = """
    from enum import Enum
    from typing import Annotated

    from validated_dto import (
        BooleanCast,
        Cast,
        DTOCast,
        EnumCast,
        FloatCast,
        IntegerCast,
        SimpleDTO,
        ValidatedDTO,
    )


    class Status(str, Enum):
        ACTIVE = "A"
        INACTIVE = "B"


    class Color(Enum):
        Red = 1
        Green = 2


    class Address(SimpleDTO):
        def casts(self):
            return {}

        def defaults(self):
            return {}


    class UserDTO(ValidatedDTO):
        active: Annotated[bool, Cast(BooleanCast)]

        def rules(self):
            return {
                "name": "required|string",
                "age": "integer",
                "email": ["required", "email"],
            }

        def casts(self):
            return {
                "id": IntegerCast(),
                "balance": FloatCast,
                "status": EnumCast(Status),
                "color": EnumCast(Color),
                "address": DTOCast(Address),
            }

        def defaults(self):
            return {"active": True, "name": "anonymous"}
"""

EXPECTED_USER_INTERFACE = (
    "export interface UserInterface {\n"
    "  id?: number;\n"
    "  balance?: number;\n"
    "  status?: 'A' | 'B';\n"
    "  color?: 'Red' | 'Green';\n"
    "  address?: AddressInterface;\n"
    "  name?: string;\n"
    "  age?: number;\n"
    "  email: string;\n"
    "  active?: boolean;\n"
    "}"
)

BROKEN_MODULE = """
    from validated_dto import SimpleDTO


    class BrokenDTO(SimpleDTO):
        def __new__(cls, *args, **kwargs):
            raise RuntimeError("refuses to exist")

        def casts(self):
            return {}

        def defaults(self):
            return {"x": 1}
"""

ORDER_MODULE = """
    from validated_dto import SimpleDTO, StringCast


    class OrderDTO(SimpleDTO):
        def casts(self):
            return {"reference": StringCast()}

        def defaults(self):
            return {}
"""


def build_use_case(**overrides) -> ExportTypescriptUseCase:
    dependencies = {
        "logger": NullLogger(),
        "discovery": SourceScanDiscovery(),
        "shape_extractor": DtoShapeExtractor(),
        "type_resolver": TypeScriptTypeResolver(enum_introspection=EnumInspector()),
        "renderer": InterfaceRenderer(),
        "writer": TypeScriptFileWriter(),
        "clock": lambda: FIXED_TIME,
    }
    dependencies.update(overrides)
    return ExportTypescriptUseCase(ExportTypescriptDependencies(**dependencies))


def body_without_timestamp(content: str) -> str:
    return "\n".join(
        line for line in content.splitlines() if not line.startswith("// Generated at:")
    )


class TestExportTypescriptUseCase:
    """Tests for ExportTypescriptUseCase."""

    def test_use_case_accepts_injected_dependencies(self):
        logger = NullLogger()
        discovery = Mock()
        writer = Mock()

        use_case = build_use_case(logger=logger, discovery=discovery, writer=writer)

        assert use_case.logger is logger
        assert use_case._discovery is discovery
        assert use_case._writer is writer

    def test_exports_user_dto(self, dto_package, tmp_path):
        package = dto_package({"user.py": USER_MODULE})
        output_dir = tmp_path / "out"

        response = build_use_case().execute(
            ExportRequest(scan_path=package.path, output_dir=output_dir, filename="dtos.ts")
        )

        assert response.count == 1
        assert response.file == output_dir / "dtos.ts"
        assert response.interfaces == ["UserInterface"]
        assert response.skipped == []
        content = response.file.read_text(encoding="utf-8")
        assert "// Generated at: 2024-06-01 12:00:00" in content
        assert EXPECTED_USER_INTERFACE in content
        # Address declares nothing, so it gets no block of its own.
        assert "export interface AddressInterface" not in content

    def test_failing_class_is_skipped_without_blocking_others(
        self, dto_package, tmp_path
    ):
        package = dto_package({"a_broken.py": BROKEN_MODULE, "order.py": ORDER_MODULE})

        response = build_use_case().execute(
            ExportRequest(scan_path=package.path, output_dir=tmp_path, filename="dtos.ts")
        )

        assert response.count == 1
        assert response.has_skipped
        assert len(response.skipped) == 1
        assert response.skipped[0].startswith(f"{package.name}.a_broken.BrokenDTO: ")
        assert "refuses to exist" in response.skipped[0]
        content = (tmp_path / "dtos.ts").read_text(encoding="utf-8")
        assert "BrokenInterface" not in content
        assert "export interface OrderInterface {\n  reference?: string;\n}" in content

    def test_zero_classes_reports_empty_success(self, dto_package, tmp_path):
        package = dto_package({"helpers.py": "class NotADTO:\n    pass\n"})
        output_dir = tmp_path / "never-created"

        response = build_use_case().execute(
            ExportRequest(scan_path=package.path, output_dir=output_dir, filename="dtos.ts")
        )

        assert response.is_empty
        assert response.count == 0
        assert response.file is None
        assert not output_dir.exists()

    def test_rerun_is_byte_identical_apart_from_timestamp(self, dto_package, tmp_path):
        package = dto_package({"user.py": USER_MODULE, "order.py": ORDER_MODULE})
        request = ExportRequest(
            scan_path=package.path, output_dir=tmp_path, filename="dtos.ts"
        )

        first = build_use_case(clock=lambda: datetime(2024, 1, 1)).execute(request)
        first_content = first.file.read_text(encoding="utf-8")
        second = build_use_case(clock=lambda: datetime(2025, 1, 1)).execute(request)
        second_content = second.file.read_text(encoding="utf-8")

        assert first_content != second_content
        assert body_without_timestamp(first_content) == body_without_timestamp(
            second_content
        )

    def test_missing_scan_path_raises(self, tmp_path):
        with pytest.raises(ScanPathNotFoundError, match="does not exist"):
            build_use_case().execute(
                ExportRequest(
                    scan_path=tmp_path / "missing",
                    output_dir=tmp_path,
                    filename="dtos.ts",
                )
            )

    def test_each_class_is_processed_once(self, tmp_path):
        class TwiceDTO:
            pass

        discovered = DiscoveredClass(name="pkg.TwiceDTO", cls=TwiceDTO)
        discovery = Mock()
        discovery.discover.return_value = [discovered, discovered]
        extractor = Mock(wraps=DtoShapeExtractor())

        build_use_case(discovery=discovery, shape_extractor=extractor).execute(
            ExportRequest(scan_path=tmp_path, output_dir=tmp_path, filename="dtos.ts")
        )

        extractor.extract.assert_called_once_with(TwiceDTO)

    def test_unexpected_errors_are_recorded_as_skips(self, tmp_path):
        class OddDTO:
            pass

        discovery = Mock()
        discovery.discover.return_value = [DiscoveredClass(name="pkg.OddDTO", cls=OddDTO)]
        extractor = Mock()
        extractor.extract.side_effect = KeyError("casts")

        response = build_use_case(
            discovery=discovery, shape_extractor=extractor
        ).execute(
            ExportRequest(scan_path=tmp_path, output_dir=tmp_path, filename="dtos.ts")
        )

        assert response.skipped == ["pkg.OddDTO: 'casts'"]
        assert response.file is None

    def test_emission_failure_propagates(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("file, not a directory")

        class OnlyDTO:
            def __init__(self, data):
                pass

            def defaults(self):
                return {"x": 1}

        discovery = Mock()
        discovery.discover.return_value = [
            DiscoveredClass(name="pkg.OnlyDTO", cls=OnlyDTO)
        ]
        use_case = build_use_case(discovery=discovery)

        with pytest.raises(EmissionError):
            use_case.execute(
                ExportRequest(scan_path=tmp_path, output_dir=blocker, filename="dtos.ts")
            )
