from enum import Enum
import pkgutil
from typing import Protocol, runtime_checkable


@runtime_checkable
class Castable(Protocol):
    pass

    def cast(self, property: str, value: object) -> object: ...


def resolve_reference[T](reference: type[T] | str) -> type[T]:
    """Resolve a class given either directly or as a dotted import path.

    Both ``"package.module.Name"`` and ``"package.module:Name"`` are accepted.
    Raises ``ImportError``/``AttributeError``/``ValueError`` when the path
    cannot be resolved and ``TypeError`` when it does not name a class.
    """
    if isinstance(reference, type):
        return reference
    resolved = pkgutil.resolve_name(reference)
    if not isinstance(resolved, type):
        raise TypeError(f"{reference} does not name a class")
    return resolved


def reference_short_name(reference: type | str) -> str:
    if isinstance(reference, type):
        return reference.__name__
    return str(reference).replace(":", ".").rsplit(".", 1)[-1]


def is_enum_class(candidate: object) -> bool:
    return isinstance(candidate, type) and issubclass(candidate, Enum)
