"""Declarative per-property metadata.

Attributes are attached through ``typing.Annotated`` on class annotations::

    class UserDTO(SimpleDTO):
        age: Annotated[int, Cast(IntegerCast)]
"""

from dataclasses import dataclass
import inspect
from typing import Annotated, get_args, get_origin, get_type_hints


@dataclass(frozen=True, slots=True)
class Cast:
    type: type


def property_attributes(cls: type) -> dict[str, list[object]]:
    """Return the ``Annotated`` metadata declared for each property of ``cls``.

    Falls back to the raw ``__annotations__`` of the class hierarchy when the
    hints cannot be evaluated; string annotations found that way carry no
    metadata and are ignored.
    """
    try:
        hints = get_type_hints(cls, include_extras=True)
    except Exception:
        hints = {}
        for klass in reversed(cls.__mro__):
            try:
                hints.update(inspect.get_annotations(klass))
            except Exception:
                continue
    attributes: dict[str, list[object]] = {}
    for name, hint in hints.items():
        if get_origin(hint) is Annotated:
            attributes[name] = list(get_args(hint)[1:])
    return attributes


def find_attribute[T](attributes: list[object], kind: type[T]) -> T | None:
    for attribute in attributes:
        if isinstance(attribute, kind):
            return attribute
    return None
