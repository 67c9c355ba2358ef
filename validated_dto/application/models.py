from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from ..rules import RuleSpec


def _empty_str_list() -> list[str]:
    return []


def _empty_attributes() -> dict[str, list[object]]:
    return {}


@dataclass(frozen=True, slots=True)
class DiscoveredClass:
    name: str
    cls: type
    source: Path | None = None


@dataclass(slots=True)
class DtoShape:
    casts: Mapping[str, object]
    rules: Mapping[str, RuleSpec]
    defaults: Mapping[str, object]
    attributes: dict[str, list[object]] = field(default_factory=_empty_attributes)

    def property_names(self) -> list[str]:
        names = dict.fromkeys(self.casts)
        names.update(dict.fromkeys(self.rules))
        names.update(dict.fromkeys(self.defaults))
        return list(names)


@dataclass(frozen=True, slots=True)
class EnumCase:
    name: str
    value: object
    backed: bool


@dataclass(frozen=True, slots=True)
class ResolvedProperty:
    name: str
    type: str
    optional: bool

    def render(self) -> str:
        marker = "?" if self.optional else ""
        return f"{self.name}{marker}: {self.type}"


@dataclass(frozen=True, slots=True)
class InterfaceBlock:
    class_name: str
    interface_name: str
    properties: tuple[ResolvedProperty, ...]
    text: str


@dataclass(slots=True)
class ExportRequest:
    scan_path: Path
    output_dir: Path
    filename: str


@dataclass(slots=True)
class ExportResponse:
    count: int = 0
    file: Path | None = None
    skipped: list[str] = field(default_factory=_empty_str_list)
    interfaces: list[str] = field(default_factory=_empty_str_list)

    @property
    def is_empty(self) -> bool:
        return self.count == 0

    @property
    def has_skipped(self) -> bool:
        return len(self.skipped) > 0
