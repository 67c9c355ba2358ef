from pathlib import Path


class ValidatedDTOError(Exception):
    pass


class CastError(ValidatedDTOError):
    def __init__(self, property: str) -> None:
        super().__init__(f"Unable to cast property: {property}")
        self.property = property


class ValidationError(ValidatedDTOError):
    def __init__(self, errors: dict[str, list[str]]) -> None:
        fields = ", ".join(sorted(errors))
        super().__init__(f"The given data was invalid: {fields}")
        self.errors = errors


class ShapeExtractionError(ValidatedDTOError):
    def __init__(self, class_name: str, reason: str) -> None:
        super().__init__(reason)
        self.class_name = class_name
        self.reason = reason


class ExportError(ValidatedDTOError):
    pass


class ScanPathNotFoundError(ExportError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"DTO path '{path}' does not exist.")
        self.path = path


class EmissionError(ExportError):
    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Unable to write {path}: {cause}")
        self.path = path
        self.cause = cause
