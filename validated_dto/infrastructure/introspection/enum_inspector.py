from __future__ import annotations

from typing import TYPE_CHECKING, override

from ...application.models import EnumCase
from ...application.ports.services import EnumIntrospectionPort
from ...casting.base import is_enum_class, resolve_reference

if TYPE_CHECKING:
    from enum import Enum

BACKING_TYPES = (str, int, float)


class EnumInspector(EnumIntrospectionPort):
    """List the cases of an enum given as a class or a dotted path.

    An enum mixing in ``str``, ``int`` or ``float`` is backed and contributes
    its values; any other enum contributes its member names. Returns ``None``
    when the reference does not resolve to an enum.
    """

    @override
    def cases(self, reference: object) -> list[EnumCase] | None:
        if not isinstance(reference, (type, str)):
            return None
        try:
            candidate = resolve_reference(reference)
        except (ImportError, AttributeError, ValueError, TypeError):
            return None
        if not is_enum_class(candidate):
            return None
        enum: type[Enum] = candidate
        backed = issubclass(enum, BACKING_TYPES)
        return [
            EnumCase(name=member.name, value=member.value, backed=backed)
            for member in enum
        ]
