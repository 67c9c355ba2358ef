"""Casts producing containers, models, nested DTOs and enum members."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
import json
from typing import TYPE_CHECKING, override

from ..exceptions import CastError
from .base import Castable, is_enum_class, resolve_reference

if TYPE_CHECKING:
    from ..dto import SimpleDTO


def _decode_json(property: str, value: str) -> object:
    try:
        return json.loads(value)
    except ValueError as exc:
        raise CastError(property) from exc


class ArrayCast(Castable):
    pass

    @override
    def cast(self, property: str, value: object) -> list[object]:
        if isinstance(value, str):
            value = _decode_json(property, value)
        if isinstance(value, Mapping):
            return list(value.values())
        if isinstance(value, (list, tuple)):
            return list(value)
        raise CastError(property)


class CollectionCast(ArrayCast):
    """Casts every item with ``item_cast`` when one is given."""

    def __init__(self, item_cast: Castable | None = None) -> None:
        super().__init__()
        self.item_cast = item_cast

    @override
    def cast(self, property: str, value: object) -> list[object]:
        items = super().cast(property, value)
        if self.item_cast is None:
            return items
        return [self.item_cast.cast(property, item) for item in items]


class ObjectCast(Castable):
    pass

    @override
    def cast(self, property: str, value: object) -> dict[str, object]:
        if isinstance(value, str):
            value = _decode_json(property, value)
        if not isinstance(value, Mapping):
            raise CastError(property)
        return dict(value)


class ModelCast(Castable):
    def __init__(self, model: type | str) -> None:
        super().__init__()
        self.model = model

    @override
    def cast(self, property: str, value: object) -> object:
        model = resolve_reference(self.model)
        if isinstance(value, model):
            return value
        data = ObjectCast().cast(property, value)
        try:
            return model(**data)
        except TypeError as exc:
            raise CastError(property) from exc


class DTOCast(Castable):
    """Builds a nested DTO; ``dto_class`` may be a class or a dotted path."""

    def __init__(self, dto_class: type[SimpleDTO] | str) -> None:
        super().__init__()
        self.dto_class = dto_class

    @override
    def cast(self, property: str, value: object) -> SimpleDTO:
        dto_class = resolve_reference(self.dto_class)
        if isinstance(value, dto_class):
            return value
        return dto_class(ObjectCast().cast(property, value))


class EnumCast(Castable):
    def __init__(self, enum: type[Enum] | str) -> None:
        super().__init__()
        self.enum = enum

    @override
    def cast(self, property: str, value: object) -> Enum:
        enum = resolve_reference(self.enum)
        if not is_enum_class(enum):
            raise CastError(property)
        if isinstance(value, enum):
            return value
        try:
            return enum(value)
        except ValueError:
            pass
        if isinstance(value, str) and value in enum.__members__:
            return enum.__members__[value]
        raise CastError(property)
