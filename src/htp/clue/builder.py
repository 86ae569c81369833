"""
Clue Builder - turns a matched parse tree into a TimeClue.

The grammar only enforces digit counts, so this is where field ranges are
checked: month 13, day 32, hour 25, "0 min ago" and "13pm" all get past the
grammar and are rejected here with a TimeRangeError naming the field.
"""

import calendar
from typing import List, Optional, Union

from lark import Token, Transformer, Tree
from lark.exceptions import VisitError

from htp.clue.enums import Meridiem, Modifier, Shortcut, Unit, Weekday
from htp.clue.models import Date, DayAt, Iso, Now, Relative, RelativeFuture, Time, TimeClue
from htp.errors import TimeRangeError

_UNITS = {
    "MINUTES": Unit.MINUTE,
    "HOURS": Unit.HOUR,
    "DAYS": Unit.DAY,
    "WEEKS": Unit.WEEK,
    "MONTHS": Unit.MONTH,
}


def _field(name: str, token: Token, low: int, high: int) -> int:
    value = int(token)
    if not low <= value <= high:
        raise TimeRangeError(name, value)
    return value


def _year(token: Token) -> int:
    # Exactly four digits by grammar; 0000 is not a representable year
    return _field("year", token, 1, 9999)


def _day_of(year: int, month: int, token: Token) -> int:
    day = _field("day", token, 1, 31)
    days_in_month = calendar.monthrange(year, month)[1]
    if day > days_in_month:
        raise TimeRangeError("day", day, f"{year:04d}-{month:02d} has {days_in_month} days")
    return day


def _quantity(token: Token) -> int:
    quantity = int(token)
    if quantity < 1:
        raise TimeRangeError("quantity", quantity)
    return quantity


class ClueBuilder(Transformer):
    """
    Lark transformer with one callback per grammar rule.

    Usage:
        clue = ClueBuilder().build(grammar.match(text).tree)
    """

    def build(self, tree: Tree) -> TimeClue:
        """
        Build a TimeClue from a parse tree produced by htp.grammar.

        Raises:
            TimeRangeError: If a field value is out of its valid range
        """
        try:
            return self.transform(tree)
        except VisitError as e:
            if isinstance(e.orig_exc, TimeRangeError):
                raise e.orig_exc from None
            raise

    def now(self, children: List[Token]) -> Now:
        return Now()

    def iso(self, children: List[Token]) -> Iso:
        year_token, month_token, day_token, hour_token, minute_token, second_token = children
        year = _year(year_token)
        month = _field("month", month_token, 1, 12)
        return Iso(
            year=year,
            month=month,
            day=_day_of(year, month, day_token),
            hour=_field("hour", hour_token, 0, 23),
            minute=_field("minute", minute_token, 0, 59),
            second=_field("second", second_token, 0, 59),
        )

    def date(self, children: List[Token]) -> Date:
        day_token, month_token, year_token = children
        year = _year(year_token)
        month = _field("month", month_token, 1, 12)
        return Date(day=_day_of(year, month, day_token), month=month, year=year)

    def relative(self, children: list) -> Relative:
        quantity_token, unit = children
        return Relative(quantity=_quantity(quantity_token), unit=unit)

    def relative_future(self, children: list) -> RelativeFuture:
        quantity_token, unit = children
        return RelativeFuture(quantity=_quantity(quantity_token), unit=unit)

    def unit(self, children: List[Token]) -> Unit:
        return _UNITS[children[0].type]

    def time(self, children: List[Time]) -> Time:
        return children[0]

    def clock(self, children: List[Token]) -> Time:
        """Assemble hour[:minute[:second]] [am|pm] into one Time."""
        meridiem: Optional[Meridiem] = None
        if children[-1].type == "MERIDIEM":
            meridiem = Meridiem(str(children[-1]))
            children = children[:-1]

        if meridiem is None:
            hour = _field("hour", children[0], 0, 23)
        else:
            hour = _field("hour", children[0], 1, 12)

        minute = _field("minute", children[1], 0, 59) if len(children) > 1 else None
        second = _field("second", children[2], 0, 59) if len(children) > 2 else None

        return Time(hour=hour, minute=minute, second=second, meridiem=meridiem)

    def day_at(self, children: list) -> DayAt:
        """Assemble [last|next] <weekday|shortcut> [at <time>] into one DayAt."""
        modifier: Optional[Modifier] = None
        anchor: Union[Weekday, Shortcut, None] = None
        time: Optional[Time] = None

        for child in children:
            if isinstance(child, Time):
                time = child
            elif child.type == "MODIFIER":
                modifier = Modifier(str(child))
            elif child.type == "WEEKDAY":
                anchor = Weekday.from_alias(str(child))
            elif child.type == "SHORTCUT":
                anchor = Shortcut(str(child))

        return DayAt(modifier=modifier, anchor=anchor, time=time)
