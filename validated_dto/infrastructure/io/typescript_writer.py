from __future__ import annotations

from typing import TYPE_CHECKING, override

from ...application.ports.services import InterfaceWriterPort
from ...exceptions import EmissionError

if TYPE_CHECKING:
    from pathlib import Path


class TypeScriptFileWriter(InterfaceWriterPort):
    """Write generated TypeScript to ``output_dir / filename``.

    The directory is created on demand and an existing file is replaced.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        super().__init__()
        self.encoding = encoding

    @override
    def write(self, output_dir: Path, filename: str, content: str) -> Path:
        target = output_dir / filename
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding=self.encoding)
        except OSError as exc:
            raise EmissionError(target, exc) from exc
        return target
