"""
Time Clue Enums

Closed vocabularies used by time clues: units, directions, meridiems,
modifiers, shortcut days and weekdays.
"""

from enum import Enum


class Unit(str, Enum):
    """
    Units a relative offset can be expressed in.

    Minutes, hours, days and weeks are fixed durations. Months are calendar
    steps and are resolved with calendar arithmetic.
    """

    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"

    def __str__(self) -> str:
        """Return the string value for easy serialization."""
        return self.value


class Direction(str, Enum):
    """Direction of a relative offset from the reference instant."""

    PAST = "past"  # "4 min ago"
    FUTURE = "future"  # "in 4 min"

    def __str__(self) -> str:
        """Return the string value for easy serialization."""
        return self.value


class Meridiem(str, Enum):
    """12-hour clock suffix."""

    AM = "am"
    PM = "pm"

    def __str__(self) -> str:
        """Return the string value for easy serialization."""
        return self.value


class Modifier(str, Enum):
    """
    Weekday modifier.

    LAST looks strictly backward and NEXT strictly forward, both at least
    one day and at most seven days away from the reference date.
    """

    LAST = "last"
    NEXT = "next"

    def __str__(self) -> str:
        """Return the string value for easy serialization."""
        return self.value


class Shortcut(str, Enum):
    """Day shortcuts, each a fixed day offset from the reference date."""

    TODAY = "today"
    YESTERDAY = "yesterday"
    TOMORROW = "tomorrow"

    @property
    def day_offset(self) -> int:
        """Number of days between the reference date and this shortcut."""
        return _SHORTCUT_OFFSETS[self]

    def __str__(self) -> str:
        """Return the string value for easy serialization."""
        return self.value


_SHORTCUT_OFFSETS = {
    Shortcut.TODAY: 0,
    Shortcut.YESTERDAY: -1,
    Shortcut.TOMORROW: 1,
}


class Weekday(str, Enum):
    """
    Named weekdays.

    Declaration order is the canonical order used for distance computation
    (Monday=0 ... Sunday=6), which matches ``datetime.weekday()``.
    """

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @property
    def days_from_monday(self) -> int:
        """Days from Monday (Monday=0 ... Sunday=6)."""
        return list(Weekday).index(self)

    @classmethod
    def from_alias(cls, alias: str) -> "Weekday":
        """
        Resolve a full name or three-letter alias ("fri") to a weekday.

        Raises:
            ValueError: If the alias names no weekday
        """
        for weekday in cls:
            if alias == weekday.value or alias == weekday.value[:3]:
                return weekday
        raise ValueError(f"Unknown weekday: '{alias}'")

    def __str__(self) -> str:
        """Return the string value for easy serialization."""
        return self.value
