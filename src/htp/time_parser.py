"""
Time parsing entry points.

Parses short, informally spaced human phrases ("last friday at 19",
"4 min ago", "in 2 weeks", "2020-12-25T19:43:00") into time clues, and
resolves them against a caller-supplied reference instant.

Both functions are pure: the reference instant is always passed in, never
read from the system clock.
"""

from datetime import datetime

from htp import grammar
from htp.clue.builder import ClueBuilder
from htp.clue.models import TimeClue
from htp.interpreter import evaluate


def parse(text: str) -> TimeClue:
    """
    Parse a human time phrase into a TimeClue.

    Supports:
    - Keyword: "now"
    - ISO 8601: "2020-12-25T19:43:00", "2020/12/25T19:43:00"
    - Date: "25/12/2020", "25-12-2020"
    - Relative past: "4 min ago", "2 hours ago", "3 d ago", "1 week ago", "2 months ago"
    - Relative future: "in 4 min", "in 2 hours", "in 1 w", "in 3 months"
    - Time of day: "9", "19:43", "19:43:42", "7pm", "7:30 am"
    - Day at time: "friday", "last fri at 9", "next monday at 7pm",
      "today", "yesterday at 19:43", "tomorrow at 8am"

    Whitespace between tokens is free-form. Keywords and am/pm are lowercase;
    fold case before calling if needed.

    Args:
        text: The phrase to parse

    Returns:
        The time clue for the matched phrase shape

    Raises:
        TimeSyntaxError: If the text matches no phrase shape
        TimeRangeError: If a field is out of range (month 13, hour 25, ...)

    Examples:
        >>> parse("4 min ago")
        Relative(kind='relative', quantity=4, unit=<Unit.MINUTE: 'minute'>, direction=<Direction.PAST: 'past'>)
    """
    matched = grammar.match(text)
    return ClueBuilder().build(matched.tree)


def parse_and_interpret(text: str, reference: datetime, assume_next_day: bool = False) -> datetime:
    """
    Parse a human time phrase and resolve it against a reference instant.

    Args:
        text: The phrase to parse
        reference: The "now" relative phrases are resolved against. The
            result keeps its tzinfo.
        assume_next_day: Move a bare time of day that is already past to the
            following day

    Returns:
        The absolute datetime described by the phrase

    Raises:
        TimeSyntaxError: If the text matches no phrase shape
        TimeRangeError: If a field is out of range, or the offset lands
            outside the datetime range ("99999999999 min ago")
        TypeError: If reference is not a datetime

    Examples:
        >>> reference = datetime(2020, 12, 24, 23, 45)
        >>> parse_and_interpret("last friday at 19:43", reference)
        datetime.datetime(2020, 12, 18, 19, 43)
    """
    if not isinstance(reference, datetime):
        raise TypeError(f"reference must be a datetime, got {type(reference).__name__}")

    clue = parse(text)
    return evaluate(clue, reference, assume_next_day=assume_next_day)
