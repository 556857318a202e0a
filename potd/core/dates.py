"""
Calendar dates and date ranges for the POTD generator.

Only the calendar arithmetic the generator needs lives here: validating a
(year, month, day) triple, stepping to the next day, and enumerating an
inclusive range of days. Parsing and display of date strings use standard
strftime tokens.
"""

import datetime
import re
from dataclasses import dataclass
from typing import Iterator, Optional

from potd.utils.config import DEFAULT_DATE_FORMAT
from potd.utils.exceptions import (
    InvalidCalendarDateError,
    InvalidDateFormatError,
    InvalidRangeError,
)

MIN_YEAR = 1
MAX_YEAR = 9999

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

_FIELD_PATTERNS = {
    "Y": r"(?P<year>\d{4})",
    "y": r"(?P<short_year>\d{2})",
    "m": r"(?P<month>\d{1,2})",
    "d": r"(?P<day>\d{1,2})",
}


def is_leap_year(year: int) -> bool:
    """Gregorian leap year rule"""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Number of days in ``month`` of ``year``"""
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


@dataclass(frozen=True, order=True)
class CalendarDate:
    """A validated calendar date

    Field order makes the generated comparisons chronological.
    """

    year: int
    month: int
    day: int

    def __post_init__(self):
        for name in ("year", "month", "day"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidCalendarDateError(f"{name} must be an integer, got {value!r}")
        if not MIN_YEAR <= self.year <= MAX_YEAR:
            raise InvalidCalendarDateError(
                f"Year {self.year} is outside {MIN_YEAR}..{MAX_YEAR}"
            )
        if not 1 <= self.month <= 12:
            raise InvalidCalendarDateError(f"Month {self.month} is outside 1..12")
        limit = days_in_month(self.year, self.month)
        if not 1 <= self.day <= limit:
            raise InvalidCalendarDateError(
                f"Day {self.day} is outside 1..{limit} for {self.year:04d}-{self.month:02d}"
            )

    @classmethod
    def from_date(cls, value: datetime.date) -> "CalendarDate":
        return cls(value.year, value.month, value.day)

    @classmethod
    def today(cls) -> "CalendarDate":
        """Current local date"""
        return cls.from_date(datetime.date.today())

    def next_day(self) -> Optional["CalendarDate"]:
        """The following calendar day, or None after 9999-12-31"""
        if self.day < days_in_month(self.year, self.month):
            return CalendarDate(self.year, self.month, self.day + 1)
        if self.month < 12:
            return CalendarDate(self.year, self.month + 1, 1)
        if self.year < MAX_YEAR:
            return CalendarDate(self.year + 1, 1, 1)
        return None

    def to_date(self) -> datetime.date:
        return datetime.date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


def _numeric_pattern(date_format: str) -> Optional[re.Pattern]:
    """Regex for a format made only of %Y or %y, %m, %d and literal text

    Returns None when the format uses any other directive.
    """
    parts = []
    fields = set()
    for piece in re.split(r"(%.)", date_format, flags=re.DOTALL):
        if len(piece) != 2 or piece[0] != "%":
            if "%" in piece:
                # lone trailing %
                return None
            parts.append(re.escape(piece))
        elif piece == "%%":
            parts.append("%")
        elif piece[1] in _FIELD_PATTERNS and piece[1] not in fields:
            fields.add(piece[1])
            parts.append(_FIELD_PATTERNS[piece[1]])
        else:
            return None
    if not {"m", "d"} <= fields or len(fields & {"Y", "y"}) != 1:
        return None
    return re.compile(r"^\s*" + "".join(parts) + r"\s*$")


def _expand_year(short_year: int) -> int:
    # Same pivot as strptime's %y
    return 1900 + short_year if short_year >= 69 else 2000 + short_year


def parse_date(raw: str, date_format: Optional[str] = None) -> CalendarDate:
    """Parse a date string into a CalendarDate

    Formats built from %Y/%y, %m and %d are matched field by field, so a
    month of 13 is reported as an impossible date rather than a format
    mismatch. Any other format goes through ``datetime.strptime``.

    Args:
        raw: Date string
        date_format: strftime-style format; defaults to ``%Y-%m-%d``

    Raises:
        InvalidDateFormatError: the string does not match the format
        InvalidCalendarDateError: the fields do not denote a real date
    """
    if not isinstance(raw, str):
        raise InvalidDateFormatError(f"Date must be a string, got {type(raw).__name__}")

    date_format = date_format or DEFAULT_DATE_FORMAT
    pattern = _numeric_pattern(date_format)
    if pattern is not None:
        match = pattern.match(raw)
        if not match:
            raise InvalidDateFormatError(f"Date {raw!r} does not match format {date_format!r}")
        fields = match.groupdict()
        if fields.get("year") is not None:
            year = int(fields["year"])
        else:
            year = _expand_year(int(fields["short_year"]))
        return CalendarDate(year, int(fields["month"]), int(fields["day"]))

    try:
        parsed = datetime.datetime.strptime(raw.strip(), date_format)
    except ValueError as e:
        if "out of range" in str(e):
            raise InvalidCalendarDateError(f"Date {raw!r} is not a real calendar date: {e}")
        raise InvalidDateFormatError(f"Date {raw!r} does not match format {date_format!r}: {e}")
    return CalendarDate.from_date(parsed.date())


def format_date(value: CalendarDate, date_format: Optional[str] = None) -> str:
    """Render a CalendarDate with a strftime-style format"""
    if date_format is None or date_format == DEFAULT_DATE_FORMAT:
        return value.isoformat()
    return value.to_date().strftime(date_format)


class DateRange:
    """Inclusive, gap-free range of calendar dates

    Iterating yields every day from ``start`` to ``end`` in ascending order.
    Each call to ``iter()`` starts over, so a range can be consumed more than
    once.
    """

    def __init__(self, start: CalendarDate, end: CalendarDate):
        if start > end:
            raise InvalidRangeError(f"Range start {start} is after range end {end}")
        self.start = start
        self.end = end

    def __iter__(self) -> Iterator[CalendarDate]:
        current = self.start
        while current is not None and current <= self.end:
            yield current
            current = current.next_day()

    def __len__(self) -> int:
        return self.end.to_date().toordinal() - self.start.to_date().toordinal() + 1

    def __contains__(self, value) -> bool:
        return isinstance(value, CalendarDate) and self.start <= value <= self.end

    def __repr__(self) -> str:
        return f"DateRange({self.start}, {self.end})"


def date_range(start: CalendarDate, end: CalendarDate) -> DateRange:
    """Build the inclusive range from ``start`` to ``end``

    Raises:
        InvalidRangeError: ``start`` is after ``end``
    """
    return DateRange(start, end)
