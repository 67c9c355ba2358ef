"""Unit tests for SourceScanDiscovery."""

import calendar
import sys
from unittest.mock import Mock
import uuid

import pytest

from validated_dto.infrastructure.discovery import SourceScanDiscovery, module_path_for
from validated_dto.infrastructure.discovery.source_scan_discovery import (
    declared_class_names,
)
from validated_dto.infrastructure.logging import NullLogger

USER_DTO = """
    from validated_dto import IntegerCast, SimpleDTO


    class UserDTO(SimpleDTO):
        def casts(self):
            return {"id": IntegerCast()}

        def defaults(self):
            return {}


    class Helper:
        pass
"""

ABSTRACT_DTO = """
    from abc import abstractmethod

    from validated_dto import SimpleDTO


    class BaseDTO(SimpleDTO):
        @abstractmethod
        def casts(self): ...

        def defaults(self):
            return {}


    class ConcreteDTO(BaseDTO):
        def casts(self):
            return {}
"""


class TestModulePath:
    """Tests for deriving module paths from file locations."""

    def test_nested_package(self, tmp_path):
        package = tmp_path / "app" / "dto"
        package.mkdir(parents=True)
        (tmp_path / "app" / "__init__.py").write_text("")
        (package / "__init__.py").write_text("")
        source = package / "user.py"
        source.write_text("")

        assert module_path_for(source) == (tmp_path, "app.dto.user")

    def test_package_init_module(self, tmp_path):
        (tmp_path / "pkg").mkdir()
        init = tmp_path / "pkg" / "__init__.py"
        init.write_text("")

        assert module_path_for(init) == (tmp_path, "pkg")

    def test_invalid_identifier_is_rejected(self, tmp_path):
        source = tmp_path / "my-module.py"
        source.write_text("")

        assert module_path_for(source) is None

    def test_declared_class_names_are_top_level_only(self):
        text = "class A:\n    class Inner:\n        pass\nclass B(A): pass\nclass A: ...\n"

        assert declared_class_names(text) == ["A", "B"]


class TestSourceScanDiscovery:
    """Test suite for SourceScanDiscovery."""

    def test_discovers_concrete_dtos_only(self, dto_package):
        package = dto_package({"user.py": USER_DTO, "base.py": ABSTRACT_DTO})

        discovered = SourceScanDiscovery().discover(package.path)

        assert [item.name for item in discovered] == [
            f"{package.name}.base.ConcreteDTO",
            f"{package.name}.user.UserDTO",
        ]
        assert discovered[1].cls.__name__ == "UserDTO"
        assert discovered[1].source == (package.path / "user.py").resolve()

    def test_nested_directories_are_scanned(self, dto_package):
        package = dto_package({"admin/accounts/user.py": USER_DTO})

        discovered = SourceScanDiscovery().discover(package.path)

        assert [item.name for item in discovered] == [
            f"{package.name}.admin.accounts.user.UserDTO"
        ]

    def test_symlinked_file_is_listed_once(self, dto_package):
        package = dto_package({"user.py": USER_DTO})
        (package.path / "alias.py").symlink_to(package.path / "user.py")

        discovered = SourceScanDiscovery().discover(package.path)

        assert [item.name for item in discovered] == [f"{package.name}.user.UserDTO"]

    def test_reexported_class_is_not_rediscovered(self, dto_package):
        package = dto_package(
            {
                "user.py": USER_DTO,
                "aliases.py": "from __pkg__.user import UserDTO\n\nclass Marker: pass\n",
            }
        )

        discovered = SourceScanDiscovery().discover(package.path)

        assert len(discovered) == 1

    def test_broken_module_is_excluded(self, dto_package):
        package = dto_package(
            {
                "user.py": USER_DTO,
                "broken.py": "import does_not_exist_anywhere\n\nclass BrokenDTO: pass\n",
            }
        )
        logger = Mock(wraps=NullLogger())

        discovered = SourceScanDiscovery(logger=logger).discover(package.path)

        assert [item.name for item in discovered] == [f"{package.name}.user.UserDTO"]
        excluded = [call.args[0] for call in logger.log_class_excluded.call_args_list]
        assert f"{package.name}.broken" in excluded

    def test_exclusions_and_discoveries_are_logged(self, dto_package):
        package = dto_package({"user.py": USER_DTO})
        logger = Mock(wraps=NullLogger())

        SourceScanDiscovery(logger=logger).discover(package.path)

        logger.log_class_discovered.assert_called_once()
        logger.log_class_excluded.assert_called_once_with(
            f"{package.name}.user.Helper", "not a subclass of SimpleDTO"
        )

    def test_empty_directory(self, tmp_path):
        assert SourceScanDiscovery().discover(tmp_path) == []

    def test_files_outside_packages_import_as_top_level(
        self, tmp_path, monkeypatch, request
    ):
        monkeypatch.setattr(sys, "path", list(sys.path))
        name = f"loose_{uuid.uuid4().hex[:10]}"
        request.addfinalizer(lambda: sys.modules.pop(name, None))
        (tmp_path / f"{name}.py").write_text(
            "from validated_dto import SimpleDTO\n"
            "class LooseDTO(SimpleDTO):\n"
            "    def casts(self):\n"
            "        return {}\n"
            "    def defaults(self):\n"
            "        return {'x': 1}\n"
        )

        discovered = SourceScanDiscovery().discover(tmp_path)

        assert [item.name for item in discovered] == [f"{name}.LooseDTO"]
        assert str(tmp_path.resolve()) in sys.path

    def test_file_named_like_an_imported_module_is_loaded_from_disk(
        self, tmp_path, monkeypatch
    ):
        monkeypatch.setattr(sys, "path", list(sys.path))
        (tmp_path / "calendar.py").write_text(
            "from validated_dto import SimpleDTO\n"
            "class EventDTO(SimpleDTO):\n"
            "    def casts(self):\n"
            "        return {}\n"
            "    def defaults(self):\n"
            "        return {'title': ''}\n"
        )

        discovered = SourceScanDiscovery().discover(tmp_path)

        assert [item.name for item in discovered] == ["calendar.EventDTO"]
        assert discovered[0].cls().defaults() == {"title": ""}
        assert sys.modules["calendar"] is calendar

    @pytest.mark.parametrize("content", [b"\xff\xfe\x00bad", b""])
    def test_unreadable_or_empty_files_are_ignored(self, tmp_path, content):
        (tmp_path / "odd.py").write_bytes(content)

        assert SourceScanDiscovery().discover(tmp_path) == []
