"""
Interpreter - resolves a TimeClue against a reference instant.

Pure: every well-formed clue resolves to a datetime carrying the reference's
tzinfo. Nothing here reads the system clock. The only failure is an offset
that lands outside the datetime range, reported as a TimeRangeError.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Optional

from dateutil.relativedelta import relativedelta

from htp.clue.enums import Modifier, Shortcut, Unit, Weekday
from htp.clue.models import Date, DayAt, Iso, Now, Relative, RelativeFuture, Time, TimeClue
from htp.errors import TimeRangeError

_FIXED_UNITS = {
    Unit.MINUTE: timedelta(minutes=1),
    Unit.HOUR: timedelta(hours=1),
    Unit.DAY: timedelta(days=1),
    Unit.WEEK: timedelta(weeks=1),
}


def shift(reference: datetime, quantity: int, unit: Unit) -> datetime:
    """
    Move a reference instant by a signed number of units.

    Fixed units (minute, hour, day, week) are elapsed time: an aware
    reference is shifted in UTC and converted back, so "3 h ago" is exactly
    three hours earlier even across a DST change. Months are calendar steps
    on the wall clock, with the day-of-month clamped to the target month's
    length (Mar 31 minus 1 month is Feb 28).

    Raises:
        TimeRangeError: If the result falls outside the datetime range
    """
    try:
        if unit is Unit.MONTH:
            return reference + relativedelta(months=quantity)
        delta = _FIXED_UNITS[unit] * quantity
        if reference.tzinfo is None:
            return reference + delta
        return (reference.astimezone(timezone.utc) + delta).astimezone(reference.tzinfo)
    except (OverflowError, ValueError) as e:
        raise TimeRangeError("quantity", abs(quantity), "result out of datetime range") from e


def _at(day: date, time: Optional[Time], reference: datetime) -> datetime:
    """Place a time of day (midnight if None) on a date, in the reference's timezone."""
    hour, minute, second = time.to_24h() if time is not None else (0, 0, 0)
    return reference.replace(
        year=day.year,
        month=day.month,
        day=day.day,
        hour=hour,
        minute=minute,
        second=second,
        microsecond=0,
    )


def weekday_distance(reference_weekday: int, target: Weekday, modifier: Optional[Modifier]) -> int:
    """
    Signed number of days from the reference date to the anchor weekday.

    - No modifier: 0 if the reference is already that weekday, otherwise the
      next future occurrence (1-6 days ahead).
    - LAST: the most recent occurrence strictly before the reference date
      (1-7 days back, 7 when the weekday matches).
    - NEXT: the nearest occurrence strictly after the reference date
      (1-7 days ahead, 7 when the weekday matches).
    """
    target_index = target.days_from_monday
    if modifier is Modifier.LAST:
        return -((reference_weekday - target_index) % 7 or 7)
    if modifier is Modifier.NEXT:
        return (target_index - reference_weekday) % 7 or 7
    return (target_index - reference_weekday) % 7


def anchor_date(clue: DayAt, reference: datetime) -> date:
    """Resolve the weekday or shortcut of a DayAt clue to a calendar date."""
    if isinstance(clue.anchor, Shortcut):
        days = clue.anchor.day_offset
    else:
        days = weekday_distance(reference.weekday(), clue.anchor, clue.modifier)
    return reference.date() + timedelta(days=days)


def evaluate(clue: TimeClue, reference: datetime, assume_next_day: bool = False) -> datetime:
    """
    Resolve a time clue against a reference instant.

    Args:
        clue: The parsed time clue
        reference: The instant relative phrases are resolved against. Its
            tzinfo (or lack of one) is carried over to the result.
        assume_next_day: If True, a bare time of day that falls before the
            reference is moved to the following day ("19:43" at 20:00 means
            tomorrow at 19:43). Clues naming a day are unaffected.

    Returns:
        The absolute datetime the clue describes

    Raises:
        TimeRangeError: If a relative offset leaves the datetime range

    Example:
        >>> from htp.clue.models import DayAt, Time
        >>> from htp.clue.enums import Modifier, Weekday
        >>> evaluate(
        ...     DayAt(modifier=Modifier.LAST, anchor=Weekday.FRIDAY, time=Time(hour=19, minute=43)),
        ...     datetime(2020, 12, 24, 23, 45),
        ... )
        datetime.datetime(2020, 12, 18, 19, 43)
    """
    if isinstance(clue, Now):
        return reference

    if isinstance(clue, Iso):
        return datetime(
            clue.year,
            clue.month,
            clue.day,
            clue.hour,
            clue.minute,
            clue.second,
            tzinfo=reference.tzinfo,
        )

    if isinstance(clue, Date):
        return datetime(clue.year, clue.month, clue.day, tzinfo=reference.tzinfo)

    if isinstance(clue, Relative):
        return shift(reference, -clue.quantity, clue.unit)

    if isinstance(clue, RelativeFuture):
        return shift(reference, clue.quantity, clue.unit)

    if isinstance(clue, Time):
        resolved = _at(reference.date(), clue, reference)
        if assume_next_day and resolved < reference:
            resolved = _at(reference.date() + timedelta(days=1), clue, reference)
        return resolved

    if isinstance(clue, DayAt):
        return _at(anchor_date(clue, reference), clue.time, reference)

    raise TypeError(f"Unsupported time clue: {clue!r}")
