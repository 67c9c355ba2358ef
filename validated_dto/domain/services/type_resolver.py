"""Type inference for DTO properties.

Given the casts, rules, defaults and declared attributes of a DTO, resolve a
TypeScript type and an optional flag for every property. Resolution never
raises: missing information degrades to ``any`` (or ``string`` for enums and
rule-only properties).

Type precedence, first match wins:

1. cast descriptor
2. rule spec (substring match on the joined tokens)
3. ``Cast`` attribute declared on the class
4. ``any``

A property is optional when it has a default, or when it has a rule spec
without the ``required`` token, or when nothing constrains it at all.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from ...application.models import ResolvedProperty
from ...attributes import Cast, find_attribute
from ...casting import DTOCast, EnumCast
from ...casting.base import resolve_reference
from ...constants import TypeScript
from ...rules import is_required, join_rules
from .interface_renderer import interface_name
from .type_mapping import lookup_cast_type

if TYPE_CHECKING:
    from ...application.models import DtoShape, EnumCase
    from ...application.ports.services import EnumIntrospectionPort
    from ...rules import RuleSpec


def _escape_literal(text: str) -> str:
    return text.replace("\\", "\\\\").replace("'", "\\'")


def _is_non_finite(value: object) -> bool:
    return isinstance(value, float) and not math.isfinite(value)


def render_enum_literal(case: EnumCase) -> str:
    if not case.backed:
        return f"'{_escape_literal(case.name)}'"
    if isinstance(case.value, str):
        return f"'{_escape_literal(case.value)}'"
    return repr(case.value)


class TypeScriptTypeResolver:
    pass

    def __init__(self, enum_introspection: EnumIntrospectionPort) -> None:
        super().__init__()
        self._enum_introspection = enum_introspection

    def resolve_properties(self, shape: DtoShape) -> list[ResolvedProperty]:
        return [
            ResolvedProperty(
                name=name,
                type=self.determine_type(name, shape),
                optional=self.is_optional(name, shape),
            )
            for name in shape.property_names()
        ]

    def determine_type(self, name: str, shape: DtoShape) -> str:
        if shape.casts.get(name) is not None:
            return self.map_cast(shape.casts[name])
        if shape.rules.get(name) is not None:
            return self.infer_type_from_rules(shape.rules[name])
        if name in shape.attributes:
            return self.type_from_attributes(shape.attributes[name])
        return TypeScript.ANY

    def map_cast(self, descriptor: object) -> str:
        if isinstance(descriptor, DTOCast):
            return interface_name(descriptor.dto_class)
        if isinstance(descriptor, EnumCast):
            return self.enum_type(descriptor)
        if isinstance(descriptor, str):
            return self._map_cast_reference(descriptor)
        if isinstance(descriptor, type):
            return lookup_cast_type(descriptor)
        if descriptor is None:
            return TypeScript.ANY
        return lookup_cast_type(type(descriptor))

    def _map_cast_reference(self, reference: str) -> str:
        try:
            cast_class = resolve_reference(reference)
        except (ImportError, AttributeError, ValueError, TypeError):
            return TypeScript.ANY
        return lookup_cast_type(cast_class)

    def enum_type(self, enum_cast: EnumCast) -> str:
        cases = self._enum_introspection.cases(enum_cast.enum)
        if not cases or any(
            case.backed and _is_non_finite(case.value) for case in cases
        ):
            return TypeScript.STRING
        return " | ".join(render_enum_literal(case) for case in cases)

    def infer_type_from_rules(self, spec: RuleSpec) -> str:
        rule_string = join_rules(spec)
        if "integer" in rule_string or "numeric" in rule_string:
            return TypeScript.NUMBER
        if "boolean" in rule_string:
            return TypeScript.BOOLEAN
        if "array" in rule_string:
            return TypeScript.ANY_ARRAY
        # Dates travel as ISO strings, same as the fallback.
        return TypeScript.STRING

    def type_from_attributes(self, attributes: list[object]) -> str:
        attribute = find_attribute(attributes, Cast)
        if attribute is None:
            return TypeScript.ANY
        return lookup_cast_type(attribute.type)

    def is_optional(self, name: str, shape: DtoShape) -> bool:
        if name in shape.defaults:
            return True
        if shape.rules.get(name) is not None:
            return not is_required(shape.rules[name])
        return True
