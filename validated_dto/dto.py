"""DTO base classes.

Every DTO describes its own shape through three providers that the
TypeScript exporter reads back:

- ``casts()``: property name -> cast instance or cast class
- ``rules()``: property name -> rule spec (``"required|integer"`` or a list)
- ``defaults()``: property name -> default value
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING

from .casting.base import Castable
from .exceptions import CastError, ValidationError
from .rules import is_required

if TYPE_CHECKING:
    from .rules import RuleSpec


def _apply_cast(descriptor: object, property: str, value: object) -> object:
    if isinstance(descriptor, type):
        try:
            descriptor = descriptor()
        except TypeError as exc:
            raise CastError(property) from exc
    if not isinstance(descriptor, Castable):
        raise CastError(property)
    return descriptor.cast(property, value)


class SimpleDTO(ABC):
    """A DTO whose input is cast but not validated."""

    def __init__(self, data: Mapping[str, object] | None = None) -> None:
        super().__init__()
        payload: dict[str, object] = dict(self.defaults())
        payload.update(data or {})
        self._validate(payload)
        casts = self.casts()
        attributes: dict[str, object] = {}
        for name, value in payload.items():
            descriptor = casts.get(name)
            if descriptor is not None and value is not None:
                value = _apply_cast(descriptor, name, value)
            attributes[name] = value
        self._attributes = attributes

    @abstractmethod
    def casts(self) -> Mapping[str, object]: ...

    @abstractmethod
    def defaults(self) -> Mapping[str, object]: ...

    def rules(self) -> Mapping[str, RuleSpec]:
        return {}

    def _validate(self, payload: Mapping[str, object]) -> None:
        return None

    def __getattr__(self, name: str) -> object:
        attributes = self.__dict__.get("_attributes", {})
        if name in attributes:
            return attributes[name]
        raise AttributeError(
            f"{type(self).__name__!r} object has no attribute {name!r}"
        )

    def to_dict(self) -> dict[str, object]:
        return dict(self.__dict__.get("_attributes", {}))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r})"


class ValidatedDTO(SimpleDTO):
    """A DTO that refuses input missing any ``required`` property."""

    @abstractmethod
    def rules(self) -> Mapping[str, RuleSpec]: ...

    def _validate(self, payload: Mapping[str, object]) -> None:
        errors: dict[str, list[str]] = {}
        for name, spec in self.rules().items():
            if is_required(spec) and payload.get(name) is None:
                errors[name] = [f"The {name} field is required."]
        if errors:
            raise ValidationError(errors)
