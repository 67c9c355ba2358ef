"""Cast class -> TypeScript type table.

Lookup is by exact class: a custom cast deriving from a listed one is still
unknown and resolves to ``any``.
"""

from ...casting import (
    ArrayCast,
    BooleanCast,
    CollectionCast,
    DateCast,
    DateTimeCast,
    DoubleCast,
    EnumCast,
    FloatCast,
    IntegerCast,
    LongCast,
    ModelCast,
    ObjectCast,
    StringCast,
)
from ...constants import TypeScript

CAST_TYPE_MAPPING: dict[type, str] = {
    StringCast: TypeScript.STRING,
    IntegerCast: TypeScript.NUMBER,
    LongCast: TypeScript.NUMBER,
    FloatCast: TypeScript.NUMBER,
    DoubleCast: TypeScript.NUMBER,
    BooleanCast: TypeScript.BOOLEAN,
    ArrayCast: TypeScript.ANY_ARRAY,
    CollectionCast: TypeScript.ANY_ARRAY,
    ObjectCast: TypeScript.OBJECT,
    ModelCast: TypeScript.OBJECT,
    # Enum classes that cannot be introspected fall back to plain strings.
    EnumCast: TypeScript.STRING,
    # ISO 8601 strings
    DateTimeCast: TypeScript.STRING,
    DateCast: TypeScript.STRING,
}


def lookup_cast_type(cast_class: object) -> str:
    if not isinstance(cast_class, type):
        return TypeScript.ANY
    return CAST_TYPE_MAPPING.get(cast_class, TypeScript.ANY)
