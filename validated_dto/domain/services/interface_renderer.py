"""Rendering of TypeScript interface blocks and the generated file."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...casting.base import reference_short_name
from ...constants import TypeScript

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime

    from ...application.models import ResolvedProperty


def interface_name(reference: type | str) -> str:
    """``UserDTO`` -> ``UserInterface``; ``Address`` -> ``AddressInterface``."""
    short_name = reference_short_name(reference)
    if short_name.endswith(TypeScript.STRIPPED_CLASS_SUFFIX):
        short_name = short_name[: -len(TypeScript.STRIPPED_CLASS_SUFFIX)]
    return short_name + TypeScript.INTERFACE_SUFFIX


class InterfaceRenderer:
    pass

    def interface_name(self, reference: type | str) -> str:
        return interface_name(reference)

    def render_block(
        self, name: str, properties: Sequence[ResolvedProperty]
    ) -> str | None:
        if not properties:
            return None
        body = "\n".join(
            f"{TypeScript.INDENT}{prop.render()};" for prop in properties
        )
        return f"export interface {name} {{\n{body}\n}}"

    def render_file(self, blocks: Sequence[str], generated_at: datetime) -> str:
        timestamp = generated_at.strftime(TypeScript.TIMESTAMP_FORMAT)
        header = "\n".join(
            line.format(generated_at=timestamp) for line in TypeScript.HEADER_LINES
        )
        return header + "\n\n" + "\n\n".join(blocks) + "\n"
