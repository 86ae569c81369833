"""
Phrase grammar for human time expressions.

The grammar below is the user-facing format of htp: the set of recognized
phrase shapes and token aliases. Accepting or rejecting a new phrasing is a
compatibility change and must bump GRAMMAR_VERSION.

Top-level productions are tried one after another in PRODUCTIONS order and
the first one that matches the whole text wins. When none match, the failure
that got furthest into the text is reported together with the tokens that
would have let it continue.

Only digit counts are enforced here ("13" is a fine month as far as the
grammar is concerned); value ranges are checked by the clue builder.
"""

from typing import Iterable, List, NamedTuple, Tuple

from lark import Lark, Tree
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput

from htp.errors import TimeSyntaxError

GRAMMAR_VERSION = "1.0"

GRAMMAR = r"""
now: NOW

iso: YEAR _DATE_SEP MONTH _DATE_SEP DAY _ISO_T HMS _COLON HMS _COLON HMS

date: DAY _DATE_SEP MONTH _DATE_SEP YEAR

relative: INT unit _AGO

relative_future: _IN INT unit

time: clock

day_at: MODIFIER? WEEKDAY (_AT clock)?
      | SHORTCUT (_AT clock)?

clock: HMS (_COLON HMS (_COLON HMS)?)? MERIDIEM?

unit: MINUTES | HOURS | DAYS | WEEKS | MONTHS

NOW: "now"
_AGO: "ago"
_IN: "in"
_AT: "at"

MODIFIER: "last" | "next"
SHORTCUT: "yesterday" | "tomorrow" | "today"
WEEKDAY: "wednesday" | "thursday" | "saturday" | "tuesday" | "monday" | "friday" | "sunday"
       | "mon" | "tue" | "wed" | "thu" | "fri" | "sat" | "sun"

MINUTES: /min(?:utes?|s)?/
HOURS: /h(?:ours?)?/
DAYS: /d(?:ays?)?/
WEEKS: /w(?:eeks?)?/
MONTHS: /months?/

MERIDIEM: "am" | "pm"

YEAR: /\d{4}/
MONTH: /\d{1,2}/
DAY: /\d{1,2}/
HMS: /\d{1,2}/
INT: /\d+/

_DATE_SEP: "-" | "/"
_ISO_T: "T"
_COLON: ":"

%import common.WS
%ignore WS
"""

# Priority order of the top-level productions
PRODUCTIONS: Tuple[str, ...] = (
    "now",
    "iso",
    "date",
    "relative",
    "relative_future",
    "time",
    "day_at",
)

_parser = Lark(GRAMMAR, start=list(PRODUCTIONS), parser="earley", lexer="dynamic")


class Match(NamedTuple):
    """A successful full-span match of one top-level production."""

    production: str
    tree: Tree


class _Failure(NamedTuple):
    position: int
    expected: List[str]


def token_display_name(terminal: str) -> str:
    """Name a grammar terminal the way diagnostics show it ("_AT" -> "at")."""
    return terminal.lstrip("_").lower()


def _describe_failure(error: UnexpectedInput, text: str) -> _Failure:
    if isinstance(error, UnexpectedEOF):
        position = len(text)
        expected: Iterable[str] = error.expected
    elif isinstance(error, UnexpectedCharacters):
        position = error.pos_in_stream
        expected = error.allowed or ()
    else:
        position = error.pos_in_stream if error.pos_in_stream is not None else len(text)
        expected = getattr(error, "expected", None) or ()

    return _Failure(position, sorted({token_display_name(name) for name in expected}))


def _line_and_column(text: str, position: int) -> Tuple[int, int]:
    line = text.count("\n", 0, position) + 1
    column = position - (text.rfind("\n", 0, position) + 1) + 1
    return line, column


def _furthest_failure(text: str, failures: List[_Failure]) -> TimeSyntaxError:
    furthest = max(failure.position for failure in failures)

    expected: List[str] = []
    for failure in failures:
        if failure.position != furthest:
            continue
        for name in failure.expected:
            if name not in expected:
                expected.append(name)

    line, column = _line_and_column(text, furthest)
    return TimeSyntaxError(text, line, column, expected)


def match(text: str) -> Match:
    """
    Match text against the top-level productions in priority order.

    Args:
        text: The phrase to recognize

    Returns:
        The first production that matches the entire text, with its parse tree

    Raises:
        TimeSyntaxError: If no production matches. Position and expected
            tokens come from the failure that reached furthest into the text.
    """
    failures: List[_Failure] = []
    for production in PRODUCTIONS:
        try:
            tree = _parser.parse(text, start=production)
        except UnexpectedInput as e:
            failures.append(_describe_failure(e, text))
            continue
        return Match(production, tree)

    raise _furthest_failure(text, failures)
