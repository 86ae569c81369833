"""
Time Clues

Typed representation of a recognized phrase, prior to resolution against a
reference instant.
"""

from .enums import Direction, Meridiem, Modifier, Shortcut, Unit, Weekday
from .models import AnyTimeClue, Date, DayAt, Iso, Now, Relative, RelativeFuture, Time, TimeClue

__all__ = [
    "AnyTimeClue",
    "Date",
    "DayAt",
    "Direction",
    "Iso",
    "Meridiem",
    "Modifier",
    "Now",
    "Relative",
    "RelativeFuture",
    "Shortcut",
    "Time",
    "TimeClue",
    "Unit",
    "Weekday",
]
