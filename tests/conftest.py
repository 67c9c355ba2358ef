from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
import importlib
from pathlib import Path
import sys
import textwrap
import uuid

import pytest

PACKAGE_PLACEHOLDER = "__pkg__"


@dataclass(frozen=True)
class DtoPackage:
    name: str
    root: Path
    path: Path


type DtoPackageFactory = Callable[[Mapping[str, str]], DtoPackage]


@pytest.fixture
def dto_package(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Iterator[DtoPackageFactory]:
    """Write a uniquely named package of DTO modules into ``tmp_path``.

    Keys are paths relative to the package directory; ``__pkg__`` inside a
    source is replaced by the package name so modules can import each other.
    Every directory gets an ``__init__.py``. Imported modules and the
    ``sys.path`` entries added by discovery are removed afterwards.
    """
    monkeypatch.setattr(sys, "path", list(sys.path))
    created: list[str] = []

    def factory(files: Mapping[str, str]) -> DtoPackage:
        name = f"dto_pkg_{uuid.uuid4().hex[:10]}"
        root = tmp_path / f"src_{name}"
        package_dir = root / name
        package_dir.mkdir(parents=True)
        (package_dir / "__init__.py").write_text("", encoding="utf-8")
        for relative, source in files.items():
            target = package_dir / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            directory = target.parent
            while directory != package_dir:
                marker = directory / "__init__.py"
                if not marker.exists():
                    marker.write_text("", encoding="utf-8")
                directory = directory.parent
            body = textwrap.dedent(source).replace(PACKAGE_PLACEHOLDER, name)
            target.write_text(body, encoding="utf-8")
        importlib.invalidate_caches()
        created.append(name)
        return DtoPackage(name=name, root=root, path=package_dir)

    yield factory

    for module_name in list(sys.modules):
        if any(
            module_name == name or module_name.startswith(f"{name}.")
            for name in created
        ):
            del sys.modules[module_name]
