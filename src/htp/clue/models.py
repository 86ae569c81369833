"""
Time Clue Models

Immutable pydantic models, one per grammar production. A time clue is the
typed representation of a recognized phrase before it is resolved against a
reference instant.

Every model carries a ``kind`` literal naming the production it came from, so
the union below is a pydantic discriminated union and survives a
``model_dump()`` / validate round trip.
"""

import calendar
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import Direction, Meridiem, Modifier, Shortcut, Unit, Weekday


class _Clue(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


def _check_calendar_date(year: int, month: int, day: int) -> None:
    days_in_month = calendar.monthrange(year, month)[1]
    if day > days_in_month:
        raise ValueError(f"day {day} out of range for {year:04d}-{month:02d}")


class Now(_Clue):
    """The reference instant itself: "now"."""

    kind: Literal["now"] = "now"


class Iso(_Clue):
    """
    Fully specified date and time: "2020-12-25T19:43:00".

    Attributes:
        year: Four-digit year
        month: Month of year (1-12)
        day: Day of month (1-31, valid for the month)
        hour: Hour of day (0-23)
        minute: Minute (0-59)
        second: Second (0-59)
    """

    kind: Literal["iso"] = "iso"
    year: int = Field(..., ge=1, le=9999, description="Four-digit year")
    month: int = Field(..., ge=1, le=12, description="Month of year")
    day: int = Field(..., ge=1, le=31, description="Day of month")
    hour: int = Field(..., ge=0, le=23, description="Hour of day (24-hour clock)")
    minute: int = Field(..., ge=0, le=59, description="Minute")
    second: int = Field(..., ge=0, le=59, description="Second")

    @model_validator(mode="after")
    def _valid_calendar_date(self) -> "Iso":
        _check_calendar_date(self.year, self.month, self.day)
        return self


class Date(_Clue):
    """
    Calendar date without a time: "25/12/2020", "25-12-2020".

    Resolves to midnight of that day.
    """

    kind: Literal["date"] = "date"
    day: int = Field(..., ge=1, le=31, description="Day of month")
    month: int = Field(..., ge=1, le=12, description="Month of year")
    year: int = Field(..., ge=1, le=9999, description="Four-digit year")

    @model_validator(mode="after")
    def _valid_calendar_date(self) -> "Date":
        _check_calendar_date(self.year, self.month, self.day)
        return self


class Relative(_Clue):
    """Offset into the past: "4 min ago", "2 weeks ago"."""

    kind: Literal["relative"] = "relative"
    quantity: int = Field(..., gt=0, description="Number of units")
    unit: Unit
    direction: Literal[Direction.PAST] = Direction.PAST


class RelativeFuture(_Clue):
    """Offset into the future: "in 4 min", "in 2 months"."""

    kind: Literal["relative_future"] = "relative_future"
    quantity: int = Field(..., gt=0, description="Number of units")
    unit: Unit
    direction: Literal[Direction.FUTURE] = Direction.FUTURE


class Time(_Clue):
    """
    Time of day without a date: "19:43:42", "18", "7pm".

    Missing minute/second are None and default to 0 at interpretation.
    With a meridiem the hour is on the 12-hour clock (1-12).
    """

    kind: Literal["time"] = "time"
    hour: int = Field(..., ge=0, le=23)
    minute: Optional[int] = Field(None, ge=0, le=59)
    second: Optional[int] = Field(None, ge=0, le=59)
    meridiem: Optional[Meridiem] = None

    @model_validator(mode="after")
    def _twelve_hour_clock(self) -> "Time":
        if self.meridiem is not None and not 1 <= self.hour <= 12:
            raise ValueError(f"hour {self.hour} out of range for {self.meridiem}")
        return self

    def to_24h(self) -> tuple[int, int, int]:
        """
        Return (hour, minute, second) on the 24-hour clock.

        12am is midnight, 12pm is noon, other pm hours add 12.
        """
        hour = self.hour
        if self.meridiem is Meridiem.AM and hour == 12:
            hour = 0
        elif self.meridiem is Meridiem.PM and hour != 12:
            hour += 12
        return hour, self.minute or 0, self.second or 0


class DayAt(_Clue):
    """
    A day, optionally at a time: "last friday at 19:43", "monday", "tomorrow at 7pm".

    Attributes:
        modifier: LAST/NEXT, only allowed with a weekday anchor
        anchor: The weekday or shortcut day resolved against the reference date
        time: Time of day merged onto the anchor date (midnight if None)
    """

    kind: Literal["day_at"] = "day_at"
    modifier: Optional[Modifier] = None
    anchor: Union[Weekday, Shortcut]
    time: Optional[Time] = None

    @model_validator(mode="after")
    def _modifier_needs_weekday(self) -> "DayAt":
        if self.modifier is not None and not isinstance(self.anchor, Weekday):
            raise ValueError(f"modifier '{self.modifier}' requires a weekday, got '{self.anchor}'")
        return self


TimeClue = Union[Now, Iso, Date, Relative, RelativeFuture, Time, DayAt]

# Discriminated on ``kind`` for validation from plain data
AnyTimeClue = Annotated[TimeClue, Field(discriminator="kind")]
