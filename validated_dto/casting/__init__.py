"""Cast classes coercing raw input values into DTO property values."""

from .base import Castable
from .primitives import (
    BooleanCast,
    DoubleCast,
    FloatCast,
    IntegerCast,
    LongCast,
    StringCast,
)
from .structured import (
    ArrayCast,
    CollectionCast,
    DTOCast,
    EnumCast,
    ModelCast,
    ObjectCast,
)
from .temporal import DateCast, DateTimeCast

__all__ = [
    "ArrayCast",
    "BooleanCast",
    "Castable",
    "CollectionCast",
    "DTOCast",
    "DateCast",
    "DateTimeCast",
    "DoubleCast",
    "EnumCast",
    "FloatCast",
    "IntegerCast",
    "LongCast",
    "ModelCast",
    "ObjectCast",
    "StringCast",
]
