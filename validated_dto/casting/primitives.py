"""Scalar casts.

Each cast coerces a raw input value for one DTO property and raises
``CastError`` naming the property when the value cannot be coerced.
"""

import math
from collections.abc import Mapping
from typing import override

from ..exceptions import CastError
from .base import Castable

_TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})
_FALSE_STRINGS = frozenset({"false", "0", "no", "off"})


def _is_numeric(value: object) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    if isinstance(value, str):
        try:
            float(value.strip())
        except ValueError:
            return False
        return True
    return False


class StringCast(Castable):
    pass

    @override
    def cast(self, property: str, value: object) -> str:
        if isinstance(value, (Mapping, list, tuple, set)):
            raise CastError(property)
        return str(value)


class IntegerCast(Castable):
    pass

    @override
    def cast(self, property: str, value: object) -> int:
        if not _is_numeric(value):
            raise CastError(property)
        number = float(value) if isinstance(value, str) else value
        if not math.isfinite(number):
            raise CastError(property)
        return int(number)


class LongCast(IntegerCast):
    """Kept for compatibility; identical to ``IntegerCast``."""


class FloatCast(Castable):
    pass

    @override
    def cast(self, property: str, value: object) -> float:
        if not _is_numeric(value):
            raise CastError(property)
        return float(value)


class DoubleCast(FloatCast):
    """Kept for compatibility; identical to ``FloatCast``."""


class BooleanCast(Castable):
    pass

    @override
    def cast(self, property: str, value: object) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)) and value in (0, 1):
            return bool(value)
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUE_STRINGS:
                return True
            if lowered in _FALSE_STRINGS:
                return False
        raise CastError(property)
