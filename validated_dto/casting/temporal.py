from datetime import date, datetime
from typing import override

from ..exceptions import CastError
from .base import Castable


class DateTimeCast(Castable):
    """Parses ISO 8601 strings; optionally converts into ``timezone``."""

    def __init__(self, timezone: object | None = None) -> None:
        super().__init__()
        self.timezone = timezone

    @override
    def cast(self, property: str, value: object) -> datetime:
        if isinstance(value, datetime):
            result = value
        elif isinstance(value, date):
            result = datetime(value.year, value.month, value.day)
        elif isinstance(value, str):
            try:
                result = datetime.fromisoformat(value.strip())
            except ValueError as exc:
                raise CastError(property) from exc
        else:
            raise CastError(property)
        if self.timezone is not None:
            result = result.astimezone(self.timezone)
        return result


class DateCast(Castable):
    pass

    @override
    def cast(self, property: str, value: object) -> date:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if isinstance(value, str):
            try:
                return date.fromisoformat(value.strip())
            except ValueError as exc:
                raise CastError(property) from exc
        raise CastError(property)
