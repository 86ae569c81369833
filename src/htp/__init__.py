"""
htp - (H)uman (T)ime (P)arser

Turns phrases like "last friday at 19:43" or "4 min ago" into absolute
datetimes, resolved against a reference instant you supply.

Example:
    >>> from datetime import datetime
    >>> from htp import parse_and_interpret
    >>> parse_and_interpret("last friday at 19:43", datetime(2020, 12, 24, 23, 45))
    datetime.datetime(2020, 12, 18, 19, 43)
"""

from .errors import TimeParseError, TimeRangeError, TimeSyntaxError
from .grammar import GRAMMAR_VERSION
from .time_parser import parse, parse_and_interpret

__version__ = "0.1.0"

__all__ = [
    "GRAMMAR_VERSION",
    "TimeParseError",
    "TimeRangeError",
    "TimeSyntaxError",
    "parse",
    "parse_and_interpret",
]
