"""Weekday, date and time range primitives.

All three take a variable argument list whose meaning depends on how
many arguments there are and what each one looks like. A trailing
"GMT" switches the reference clock from local time to UTC.

Arguments arrive untyped from the script engine: 12, 12.0 and "12" are
the same day-of-month, "JAN" is a month name, 1999 is a year.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Optional, Sequence, Tuple

from pachost.context import PacContext, default_context
from pachost.errors import BadArgumentCount

GMT = "GMT"

WEEKDAYS = {"SUN": 0, "MON": 1, "TUE": 2, "WED": 3, "THU": 4, "FRI": 5, "SAT": 6}

MONTHS = {
    "JAN": 0,
    "FEB": 1,
    "MAR": 2,
    "APR": 3,
    "MAY": 4,
    "JUN": 5,
    "JUL": 6,
    "AUG": 7,
    "SEP": 8,
    "OCT": 9,
    "NOV": 10,
    "DEC": 11,
}

# Day-of-month values are below this; anything at or above is a year.
YEAR_THRESHOLD = 32

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_DECIMAL = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


class TokenKind(str, Enum):
    """How a dateRange argument is interpreted."""

    NAME = "name"
    SMALL_INT = "small_int"
    LARGE_INT = "large_int"


def parse_int(value: Any) -> Optional[int]:
    """Leading-integer parse: 7 -> 7, "15th" -> 15, "JAN" -> None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            return int(match.group(1))
    return None


def to_number(value: Any) -> Optional[float]:
    """Strict numeric conversion; None for anything that is not a number."""
    if isinstance(value, (bool, int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        if not _DECIMAL.fullmatch(text):
            return None
        number = float(text)
    else:
        return None
    return number if math.isfinite(number) else None


def classify(value: Any) -> TokenKind:
    """Classify a temporal argument as a name, a day-of-month or a year."""
    number = parse_int(value)
    if number is None:
        return TokenKind.NAME
    if number < YEAR_THRESHOLD:
        return TokenKind.SMALL_INT
    return TokenKind.LARGE_INT


def _lookup(table: dict, value: Any) -> Optional[int]:
    if not isinstance(value, str):
        return None
    return table.get(value)


def js_weekday(moment: datetime) -> int:
    """Weekday numbered from Sunday = 0."""
    return (moment.weekday() + 1) % 7


@dataclass(frozen=True)
class TemporalCall:
    """Arguments of a temporal primitive with the GMT marker split off."""

    args: Tuple[Any, ...]
    gmt: bool = False

    @classmethod
    def parse(cls, args: Sequence[Any]) -> TemporalCall:
        args = tuple(args)
        if args and args[-1] == GMT:
            return cls(args=args[:-1], gmt=True)
        return cls(args=args)

    @property
    def argc(self) -> int:
        return len(self.args)


def compose(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    microsecond: int = 0,
) -> datetime:
    """Build a datetime from possibly out-of-range fields.

    ``month`` is zero-based. Overflowing fields carry into the next larger
    one, so day 31 of a 30-day month is the 1st of the next month and
    month -1 is December of the previous year.

    Raises:
        ValueError: if the result falls outside datetime's year range
        OverflowError: if a field is too large to carry
    """
    year += month // 12
    month %= 12
    return datetime(year, month + 1, 1) + timedelta(
        days=day - 1,
        hours=hour,
        minutes=minute,
        seconds=second,
        microseconds=microsecond,
    )


class CalendarDate:
    """Mutable date whose field setters roll over into adjacent fields."""

    def __init__(self, value: datetime) -> None:
        self.value = value

    def _replace(self, **fields: int) -> None:
        v = self.value
        self.value = compose(
            fields.get("year", v.year),
            fields.get("month", v.month - 1),
            fields.get("day", v.day),
            fields.get("hour", v.hour),
            fields.get("minute", v.minute),
            fields.get("second", v.second),
            v.microsecond,
        )

    def set_year(self, year: int) -> None:
        self._replace(year=year)

    def set_month(self, month: int) -> None:
        self._replace(month=month)

    def set_day(self, day: int) -> None:
        self._replace(day=day)

    def set_hours(self, hour: int) -> None:
        self._replace(hour=hour)

    def set_minutes(self, minute: int) -> None:
        self._replace(minute=minute)

    def set_seconds(self, second: int) -> None:
        self._replace(second=second)


def weekday_range(*args: Any, context: Optional[PacContext] = None) -> bool:
    """Check whether today falls in a weekday range.

    weekday_range("MON") is True on Mondays; weekday_range("MON", "FRI")
    on Monday through Friday. Ranges do not wrap: ("FRI", "MON") never
    matches.
    """
    call = TemporalCall.parse(args)
    if call.argc < 1:
        return False

    first = _lookup(WEEKDAYS, call.args[0])
    last = _lookup(WEEKDAYS, call.args[1]) if call.argc == 2 else first
    if first is None or last is None:
        return False

    context = context or default_context()
    today = js_weekday(context.now(call.gmt))
    return first <= today <= last


def _assign_date_field(date: CalendarDate, value: Any) -> None:
    kind = classify(value)
    if kind is TokenKind.NAME:
        month = _lookup(MONTHS, value)
        date.set_month(-1 if month is None else month)
    elif kind is TokenKind.SMALL_INT:
        date.set_day(parse_int(value))
    else:
        date.set_year(parse_int(value))


def _date_bounds(call: TemporalCall, now: datetime) -> Tuple[datetime, datetime]:
    date1 = CalendarDate(datetime(now.year, 1, 1, 0, 0, 0))
    date2 = CalendarDate(datetime(now.year, 12, 31, 23, 59, 59))

    middle = call.argc // 2
    for value in call.args[:middle]:
        _assign_date_field(date1, value)
    for value in call.args[middle:]:
        _assign_date_field(date2, value)

    # A bare day-to-day range stays inside the current month.
    if call.argc == 2 and all(classify(v) is TokenKind.SMALL_INT for v in call.args):
        date1.set_month(now.month - 1)
        date2.set_month(now.month - 1)

    return date1.value, date2.value


def date_range(*args: Any, context: Optional[PacContext] = None) -> bool:
    """Check whether now falls in a date range.

    Accepted shapes (each optionally followed by "GMT"):

        date_range(15)                      # 15th of every month
        date_range("DEC")                   # all of December
        date_range(1995)                    # all of 1995
        date_range(1, 15)                   # 1st-15th of this month
        date_range("JUN", "AUG")            # June 1st - August 31st
        date_range(1, "JUN", 15, "AUG")     # June 1st - August 15th
        date_range(1, "JUN", 1995, 15, "AUG", 1995)

    The first half of the arguments sets fields of the start date
    (default January 1st 00:00:00), the second half fields of the end
    date (default December 31st 23:59:59), both in the current year.
    """
    if not args:
        return False

    call = TemporalCall.parse(args)
    context = context or default_context()
    now = context.now(call.gmt)

    if call.argc == 1:
        value = call.args[0]
        kind = classify(value)
        if kind is TokenKind.NAME:
            return now.month - 1 == _lookup(MONTHS, value)
        if kind is TokenKind.SMALL_INT:
            return now.day == parse_int(value)
        return now.year == parse_int(value)

    try:
        date1, date2 = _date_bounds(call, now)
    except (ValueError, OverflowError):
        return False
    return date1 <= now <= date2


def _time_bounds(values: Sequence[int], now: datetime) -> Tuple[datetime, datetime]:
    date1 = CalendarDate(now)
    date2 = CalendarDate(now)

    if len(values) == 6:
        date1.set_seconds(values[2])
        date2.set_seconds(values[5])

    middle = len(values) // 2
    date1.set_hours(values[0])
    date1.set_minutes(values[1])
    date2.set_hours(values[middle])
    date2.set_minutes(values[middle + 1])
    if middle == 2:
        date2.set_seconds(59)

    return date1.value, date2.value


def time_range(*args: Any, context: Optional[PacContext] = None) -> bool:
    """Check whether the current time of day falls in a range.

    Accepted shapes (each optionally followed by "GMT"):

        time_range(12)                      # 12:00:00 - 12:59:59
        time_range(9, 17)                   # 09:00:00 - 17:59:59
        time_range(8, 30, 17, 0)            # 08:30 - 17:00:59
        time_range(0, 0, 0, 0, 0, 30)       # first half-minute after midnight

    Raises:
        BadArgumentCount: for any other number of arguments
    """
    if not args:
        return False

    call = TemporalCall.parse(args)
    context = context or default_context()
    now = context.now(call.gmt)

    if call.argc == 1:
        hour = to_number(call.args[0])
        return hour is not None and now.hour == hour

    if call.argc == 2:
        start, end = to_number(call.args[0]), to_number(call.args[1])
        if start is None or end is None:
            return False
        return start <= now.hour <= end

    if call.argc not in (4, 6):
        raise BadArgumentCount("timeRange", call.argc)

    numbers = [to_number(v) for v in call.args]
    if any(n is None for n in numbers):
        return False

    try:
        date1, date2 = _time_bounds([int(n) for n in numbers], now)
    except (ValueError, OverflowError):
        return False
    return date1 <= now <= date2


__all__ = [
    "GMT",
    "WEEKDAYS",
    "MONTHS",
    "TokenKind",
    "TemporalCall",
    "CalendarDate",
    "classify",
    "compose",
    "parse_int",
    "to_number",
    "js_weekday",
    "weekday_range",
    "date_range",
    "time_range",
]
