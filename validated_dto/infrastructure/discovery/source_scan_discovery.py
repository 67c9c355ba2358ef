"""Infrastructure adapter discovering DTO classes by scanning source files.

Discovery is a best-effort textual match, not a parse:

- the module path ("namespace") of a file is derived from its location, by
  climbing parent directories for as long as they hold an ``__init__.py``;
  the first directory without one is the import root
- class declarations are top-level ``class Name`` lines

Every candidate is then imported and kept only when it is a concrete
subclass of ``SimpleDTO``. Anything that fails along the way is excluded
silently (a debug log line at most).
"""

from __future__ import annotations

import importlib
import importlib.util
from pathlib import Path
import re
import sys
from typing import TYPE_CHECKING, override

from ...application.models import DiscoveredClass
from ...application.ports.services import ClassDiscoveryPort
from .class_filter import exclusion_reason

if TYPE_CHECKING:
    from types import ModuleType

    from ...application.ports.services import LoggerPort

_CLASS_PATTERN = re.compile(r"^class\s+([A-Za-z_]\w*)", re.MULTILINE)
SOURCE_SUFFIX = ".py"
PACKAGE_MARKER = "__init__.py"


def module_path_for(source: Path) -> tuple[Path, str] | None:
    """Return ``(import_root, dotted_module_name)`` for a source file."""
    parts = [] if source.name == PACKAGE_MARKER else [source.stem]
    directory = source.parent
    while (directory / PACKAGE_MARKER).is_file():
        parts.insert(0, directory.name)
        if directory.parent == directory:
            break
        directory = directory.parent
    if not parts or not all(part.isidentifier() for part in parts):
        return None
    return directory, ".".join(parts)


def _module_source(module: ModuleType) -> Path | None:
    location = getattr(module, "__file__", None)
    return Path(location).resolve() if location else None


def _load_from_file(module_name: str, source: Path) -> ModuleType:
    """Execute ``source`` as a fresh module left out of ``sys.modules``.

    Used when ``module_name`` already belongs to another module (a stdlib
    ``calendar`` next to a scanned ``calendar.py``), which must stay intact.
    """
    spec = importlib.util.spec_from_file_location(module_name, source)
    if spec is None or spec.loader is None:
        raise ImportError(f"cannot load {source}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def declared_class_names(source_text: str) -> list[str]:
    return list(dict.fromkeys(_CLASS_PATTERN.findall(source_text)))


class SourceScanDiscovery(ClassDiscoveryPort):
    """Discover concrete DTO classes declared in ``*.py`` files under a root.

    Import roots are prepended to ``sys.path`` the first time they are needed
    and left in place so that dotted references (``DTOCast("app.dto.X")``)
    stay resolvable for the rest of the run.
    """

    def __init__(self, *, logger: LoggerPort | None = None) -> None:
        super().__init__()
        self._logger = logger

    @override
    def discover(self, root: Path) -> list[DiscoveredClass]:
        discovered: dict[str, DiscoveredClass] = {}
        seen: set[type] = set()
        for source in self._source_files(root):
            for item in self._discover_in_file(source):
                if item.name not in discovered and item.cls not in seen:
                    discovered[item.name] = item
                    seen.add(item.cls)
                    if self._logger is not None:
                        self._logger.log_class_discovered(item.name, item.source)
        return list(discovered.values())

    def _source_files(self, root: Path) -> list[Path]:
        # Symlinked copies resolve to the file they point at.
        sources = {
            path.resolve()
            for path in root.rglob(f"*{SOURCE_SUFFIX}")
            if path.is_file()
        }
        return sorted(sources)

    def _discover_in_file(self, source: Path) -> list[DiscoveredClass]:
        try:
            text = source.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            self._log_debug(f"Skipping unreadable file {source}: {exc}")
            return []

        class_names = declared_class_names(text)
        location = module_path_for(source)
        if not class_names or location is None:
            return []

        import_root, module_name = location
        module = self._import(import_root, module_name, source)
        if module is None:
            return []

        found: list[DiscoveredClass] = []
        for class_name in class_names:
            name = f"{module_name}.{class_name}"
            candidate = getattr(module, class_name, None)
            reason = exclusion_reason(candidate)
            if reason is not None:
                self._log_excluded(name, reason)
                continue
            found.append(DiscoveredClass(name=name, cls=candidate, source=source))
        return found

    def _import(
        self, import_root: Path, module_name: str, source: Path
    ) -> ModuleType | None:
        entry = str(import_root)
        if entry not in sys.path:
            sys.path.insert(0, entry)
        try:
            module = importlib.import_module(module_name)
            if _module_source(module) != source:
                self._log_debug(
                    f"{module_name} is shadowed by another module; loading {source}"
                )
                module = _load_from_file(module_name, source)
        except Exception as exc:
            self._log_excluded(module_name, f"import failed: {exc}")
            return None
        return module

    def _log_excluded(self, name: str, reason: str) -> None:
        if self._logger is not None:
            self._logger.log_class_excluded(name, reason)

    def _log_debug(self, message: str) -> None:
        if self._logger is not None:
            self._logger.debug(message)
