"""Validated DTO package.

Data transfer objects that declare their own casts, rules and defaults, and
a generator turning those declarations into TypeScript interfaces.

Features:
- SimpleDTO / ValidatedDTO base classes
- Primitive, structured and temporal casts
- ``validated-dto export:typescript`` interface generation
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("validated-dto")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

from validated_dto.attributes import Cast
from validated_dto.casting import (
    ArrayCast,
    BooleanCast,
    Castable,
    CollectionCast,
    DateCast,
    DateTimeCast,
    DoubleCast,
    DTOCast,
    EnumCast,
    FloatCast,
    IntegerCast,
    LongCast,
    ModelCast,
    ObjectCast,
    StringCast,
)
from validated_dto.dto import SimpleDTO, ValidatedDTO
from validated_dto.exceptions import CastError, ValidatedDTOError, ValidationError

__all__ = [
    "__version__",
    # DTOs
    "SimpleDTO",
    "ValidatedDTO",
    # Casts
    "ArrayCast",
    "BooleanCast",
    "Cast",
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
    # Errors
    "CastError",
    "ValidatedDTOError",
    "ValidationError",
]
