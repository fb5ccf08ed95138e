from __future__ import annotations


class CityNotFoundError(LookupError):
    """A query named a city that is not in the airline system."""

    def __init__(self, city: str):
        super().__init__(f"City not found: {city!r}")
        self.city = city


class ScheduleFormatError(ValueError):
    """The schedule file could not be parsed."""
