from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import os
from pathlib import Path
import re
import tomllib
from typing import cast
import warnings

from .constants import Defaults

_NAMESPACE_PATTERN = re.compile(r"^[A-Za-z_]\w*(\.[A-Za-z_]\w*)*$")


@dataclass(frozen=True, slots=True)
class ExporterConfig:
    base_path: Path = field(default_factory=lambda: Path("."))
    dto_namespace: str = Defaults.DTO_NAMESPACE
    output_path: Path | None = None
    filename: str = Defaults.FILENAME

    def __post_init__(self) -> None:
        if not self.filename.strip():
            raise ValueError("filename must not be empty")
        if "/" in self.filename or "\\" in self.filename:
            raise ValueError(
                f"filename must not contain path separators, got {self.filename!r}"
            )
        if not _NAMESPACE_PATTERN.match(self.dto_namespace):
            raise ValueError(
                f"dto_namespace must be a dotted module path, got {self.dto_namespace!r}"
            )

    def default_dto_path(self) -> Path:
        return self.base_path.joinpath(*self.dto_namespace.split("."))

    def default_output_path(self) -> Path:
        if self.output_path is not None:
            return self.output_path
        return self.base_path / Defaults.OUTPUT_SUBPATH

    @classmethod
    def from_env(cls) -> ExporterConfig:
        raw_output_path = os.getenv("DTO_TYPESCRIPT_OUTPUT_PATH")
        output_path = Path(raw_output_path) if raw_output_path else None
        return cls(
            base_path=Path(os.getenv("BASE_PATH", ".")),
            dto_namespace=os.getenv("DTO_NAMESPACE", Defaults.DTO_NAMESPACE),
            output_path=output_path,
            filename=os.getenv("DTO_TYPESCRIPT_FILENAME", Defaults.FILENAME),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> ExporterConfig:
        config = ExporterConfig.from_env()
        if config_file is None:
            config_file = Path(Defaults.CONFIG_FILENAME)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except Exception as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(
        config_file: Path, base_config: ExporterConfig
    ) -> ExporterConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        paths = _get_table(data, "paths")
        dto_section = _get_table(data, "dto")
        typescript = _get_table(data, "typescript")
        base_path = base_config.base_path
        if value := paths.get("base_path"):
            base_path = Path(_coerce_str(value, key="paths.base_path"))
        dto_namespace = base_config.dto_namespace
        if value := dto_section.get("namespace"):
            dto_namespace = _coerce_str(value, key="dto.namespace")
        output_path = base_config.output_path
        if value := typescript.get("output_path"):
            output_path = Path(_coerce_str(value, key="typescript.output_path"))
        filename = base_config.filename
        if value := typescript.get("filename"):
            filename = _coerce_str(value, key="typescript.filename")
        return ExporterConfig(
            base_path=base_path,
            dto_namespace=dto_namespace,
            output_path=output_path,
            filename=filename,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_str(value: object, *, key: str) -> str:
    if isinstance(value, str):
        return value.strip()
    raise ValueError(f"{key} must be a string, got {type(value).__name__}")
