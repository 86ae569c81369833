"""
Parse errors raised by htp.

Two disjoint kinds, both subclasses of TimeParseError (itself a ValueError so
callers that already guard time parsing with ``except ValueError`` keep
working):

- TimeSyntaxError: the text matches no phrase shape
- TimeRangeError: the text matches a shape but a field is out of range
"""

from typing import Iterable


class TimeParseError(ValueError):
    """Base class for all errors raised while parsing a time phrase."""


class TimeSyntaxError(TimeParseError):
    """
    The text matches none of the recognized phrase shapes.

    Attributes:
        text: The input text
        line: 1-based line of the furthest point the grammar reached
        column: 1-based column of that point
        expected: Token names that would have allowed progress there
    """

    def __init__(self, text: str, line: int, column: int, expected: Iterable[str]) -> None:
        self.text = text
        self.line = line
        self.column = column
        self.expected = tuple(expected)
        super().__init__(self.render())

    def render(self) -> str:
        """
        Render the error with a pointer under the offending column.

        Example:
             --> 1:15
              |
            1 | last friday at
              |               ^---
              |
              = expected hms
        """
        lines = self.text.split("\n")
        source_line = lines[self.line - 1] if self.line <= len(lines) else ""
        gutter = " " * len(str(self.line))

        if self.expected:
            message = f"expected {', '.join(self.expected)}"
        else:
            message = "unexpected input"

        return "\n".join(
            [
                f"{gutter}--> {self.line}:{self.column}",
                f"{gutter} |",
                f"{self.line} | {source_line}",
                f"{gutter} | {' ' * (self.column - 1)}^---",
                f"{gutter} |",
                f"{gutter} = {message}",
            ]
        )


class TimeRangeError(TimeParseError):
    """
    A field matched syntactically but its value is out of range.

    Attributes:
        field: Name of the offending field ("month", "hour", "quantity", ...)
        value: The value observed
    """

    def __init__(self, field: str, value: int, detail: str | None = None) -> None:
        self.field = field
        self.value = value
        message = f"{field} out of range: {value}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
