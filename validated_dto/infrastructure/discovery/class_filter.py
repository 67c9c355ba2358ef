import inspect

from ...dto import SimpleDTO


def exclusion_reason(candidate: object) -> str | None:
    """Return why ``candidate`` cannot be exported, or ``None`` if it can."""
    if not inspect.isclass(candidate):
        return "not a class"
    if candidate is SimpleDTO or not issubclass(candidate, SimpleDTO):
        return f"not a subclass of {SimpleDTO.__name__}"
    if inspect.isabstract(candidate):
        return "abstract class"
    return None


def qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"
