from __future__ import annotations

from typing import TYPE_CHECKING, override

from ...application.models import DiscoveredClass
from ...application.ports.services import ClassDiscoveryPort
from ...casting.base import resolve_reference
from .class_filter import exclusion_reason, qualified_name

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from ...application.ports.services import LoggerPort


class RegistryDiscovery(ClassDiscoveryPort):
    """Discovery over an explicit list of classes or dotted class paths.

    The scan root is ignored; the registry is the source of truth. Entries
    that cannot be resolved or are not concrete DTOs are excluded the same
    way a source scan would exclude them.
    """

    def __init__(
        self,
        classes: Iterable[type | str],
        *,
        logger: LoggerPort | None = None,
    ) -> None:
        super().__init__()
        self._classes = list(classes)
        self._logger = logger

    @override
    def discover(self, root: Path) -> list[DiscoveredClass]:
        discovered: dict[str, DiscoveredClass] = {}
        for entry in self._classes:
            label = entry if isinstance(entry, str) else qualified_name(entry)
            try:
                candidate = resolve_reference(entry)
            except (ImportError, AttributeError, ValueError, TypeError) as exc:
                self._log_excluded(label, f"unresolvable reference: {exc}")
                continue
            reason = exclusion_reason(candidate)
            if reason is not None:
                self._log_excluded(label, reason)
                continue
            name = qualified_name(candidate)
            if name in discovered:
                continue
            discovered[name] = DiscoveredClass(name=name, cls=candidate)
            if self._logger is not None:
                self._logger.log_class_discovered(name, None)
        return list(discovered.values())

    def _log_excluded(self, name: str, reason: str) -> None:
        if self._logger is not None:
            self._logger.log_class_excluded(name, reason)
