"""Read the declared shape of a DTO class without real input data.

A DTO's providers are instance methods, so an instance is needed. The
extractor first constructs the class with empty input; when construction
rejects that (validation, casts, side effects in ``__init__``) it falls back
to an uninitialised instance created with ``__new__``. Providers that are
missing, raise, or return something other than a mapping contribute nothing.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, override

from ...application.models import DtoShape
from ...application.ports.services import ShapeExtractorPort
from ...attributes import property_attributes
from ...exceptions import ShapeExtractionError

if TYPE_CHECKING:
    from ...application.ports.services import LoggerPort

PROVIDERS = ("casts", "rules", "defaults")


class DtoShapeExtractor(ShapeExtractorPort):
    def __init__(self, *, logger: LoggerPort | None = None) -> None:
        super().__init__()
        self._logger = logger

    @override
    def extract(self, cls: type) -> DtoShape:
        instance = self._instantiate(cls)
        return DtoShape(
            casts=self._call_provider(instance, "casts"),
            rules=self._call_provider(instance, "rules"),
            defaults=self._call_provider(instance, "defaults"),
            attributes=property_attributes(cls),
        )

    def _instantiate(self, cls: type) -> object:
        try:
            return cls({})
        except Exception as constructor_error:
            self._log_debug(
                f"{cls.__name__}({{}}) failed ({constructor_error}); "
                "falling back to an uninitialised instance"
            )
            try:
                return cls.__new__(cls)
            except Exception as bare_error:
                raise ShapeExtractionError(
                    cls.__name__,
                    f"cannot instantiate ({constructor_error}; {bare_error})",
                ) from bare_error

    def _call_provider(self, instance: object, provider: str) -> dict[str, object]:
        method = getattr(instance, provider, None)
        if not callable(method):
            return {}
        try:
            result = method()
        except Exception as exc:
            self._log_debug(
                f"{type(instance).__name__}.{provider}() raised {exc!r}; treated as empty"
            )
            return {}
        if not isinstance(result, Mapping):
            return {}
        return {str(key): value for key, value in result.items()}

    def _log_debug(self, message: str) -> None:
        if self._logger is not None:
            self._logger.debug(message)
