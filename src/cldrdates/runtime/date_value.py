"""Validated calendar date values.

DateValue is the engine's date input: a (year, month, day) triple in the
proleptic Gregorian calendar with no time component. Unlike
``datetime.date`` it is not limited to years 1-9999; year 0 and negative
years use astronomical numbering (year 0 is 1 BC).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TypeAlias

import calendar
from dataclasses import dataclass
from datetime import date

from cldrdates.diagnostics import ErrorTemplate, InvalidDateValueError

__all__ = ["DateInput", "DateValue", "era_of", "era_year"]


@dataclass(frozen=True, slots=True)
class DateValue:
    """Immutable, validated calendar date.

    Construction validates the fields, so every DateValue in circulation
    names a real day.

    Attributes:
        year: Astronomical year (any integer)
        month: Month 1-12
        day: Day of month, valid for (year, month)

    Example:
        >>> DateValue(2016, 7, 11).weekday
        0
        >>> DateValue(2015, 2, 29)
        Traceback (most recent call last):
        ...
        cldrdates.diagnostics.errors.InvalidDateValueError: Invalid date (2015, 2, 29): day must be 1-28
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        """Validate calendrical ranges.

        Raises:
            InvalidDateValueError: If a field is not an int, month is outside
                1-12, or day does not exist in that month
        """
        fields = (self.year, self.month, self.day)
        for name, value in zip(("year", "month", "day"), fields, strict=True):
            # bool is an int subclass but never a meaningful date field
            if type(value) is bool or not isinstance(value, int):
                diagnostic = ErrorTemplate.invalid_date_field(name, value)
                raise InvalidDateValueError(diagnostic, value=fields)

        if not 1 <= self.month <= 12:
            diagnostic = ErrorTemplate.invalid_date_value(
                self.year, self.month, self.day, "month must be 1-12"
            )
            raise InvalidDateValueError(diagnostic, value=fields)

        last_day = days_in_month(self.year, self.month)
        if not 1 <= self.day <= last_day:
            diagnostic = ErrorTemplate.invalid_date_value(
                self.year, self.month, self.day, f"day must be 1-{last_day}"
            )
            raise InvalidDateValueError(diagnostic, value=fields)

    @classmethod
    def coerce(cls, value: DateInput) -> DateValue:
        """Convert supported date inputs to a DateValue.

        Args:
            value: DateValue, ``datetime.date``/``datetime.datetime``, or a
                (year, month, day) tuple or list

        Returns:
            Validated DateValue

        Raises:
            InvalidDateValueError: If the value is not a supported date type
                or its fields are out of range

        Example:
            >>> from datetime import date
            >>> DateValue.coerce(date(2016, 7, 11))
            DateValue(year=2016, month=7, day=11)
            >>> DateValue.coerce((2016, 7, 11))
            DateValue(year=2016, month=7, day=11)
        """
        match value:
            case DateValue():
                return value
            case date():
                return cls(value.year, value.month, value.day)
            case (year, month, day):
                return cls(year, month, day)
            case _:
                diagnostic = ErrorTemplate.invalid_date_type(value)
                raise InvalidDateValueError(diagnostic, value=value)

    @property
    def weekday(self) -> int:
        """Day of the week, Monday is 0 and Sunday is 6."""
        return calendar.weekday(self.year, self.month, self.day)

    @property
    def era(self) -> int:
        """Gregorian era index: 1 for years after the epoch (AD), 0 otherwise (BC)."""
        return era_of(self.year)

    @property
    def year_of_era(self) -> int:
        """Gregorian year counted within its era (year 0 is 1 BC, year -1 is 2 BC)."""
        return era_year(self.year)


def era_of(year: int) -> int:
    """Era index of an astronomical year in any calendar: 1 after the epoch, 0 before."""
    return 1 if year > 0 else 0


def era_year(year: int) -> int:
    """Year within its era for an astronomical year (0 -> 1, -1 -> 2)."""
    return year if year > 0 else 1 - year


def days_in_month(year: int, month: int) -> int:
    """Number of days in a proleptic Gregorian month."""
    if month == 2 and calendar.isleap(year):
        return 29
    return calendar.mdays[month]


DateInput: TypeAlias = DateValue | date | tuple[int, int, int] | list[int]
