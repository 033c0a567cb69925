"""
Fiscal quarter calculations for the content calendar and running totals.

Fiscal layout:
- Q1: March-May
- Q2: June-August
- Q3: September-November
- Q4: December-February (spans the calendar year boundary)

Q4 is attributed to the fiscal year of its December, so January and
February 2026 belong to Q4 of fiscal year 2025.
"""

import re
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date
from typing import Callable, Iterable, Iterator, Optional, TypeVar

from ..utils.time import Clock, SystemClock, add_months, last_day_of_month

T = TypeVar("T")

QUARTER_MONTHS = 3

# Quarter number -> first calendar month
_QUARTER_START_MONTH = {1: 3, 2: 6, 3: 9, 4: 12}

_LABEL = re.compile(r"^Q([1-4])\s+(\d{2}|\d{4})$")


@dataclass(frozen=True)
class Quarter:
    """A fiscal quarter with inclusive calendar bounds."""
    number: int          # 1..4
    fiscal_year: int     # Calendar year of the quarter's first month
    start: date
    end: date

    def contains(self, value: date) -> bool:
        """True if the date falls within the quarter."""
        return self.start <= value <= self.end

    def months(self) -> list[tuple[int, int]]:
        """(year, month) pairs covered by the quarter, in order."""
        first = _QUARTER_START_MONTH[self.number] - 1
        return [
            (self.fiscal_year + (first + offset) // 12, (first + offset) % 12 + 1)
            for offset in range(QUARTER_MONTHS)
        ]

    def label(self, style: str = "short") -> str:
        return format_quarter_label(self, style)


def quarter_for_number(number: int, fiscal_year: int) -> Quarter:
    """
    Build a quarter from its number and fiscal year.

    Args:
        number: Quarter number, 1..4
        fiscal_year: Fiscal year (the December's year for Q4)

    Returns:
        Quarter with computed bounds. A Q4 straddling the edge of the
        supported date range is clipped to date.min or date.max.

    Raises:
        ValueError: If the number is not 1-4 or no day of the quarter is representable
    """
    if number not in _QUARTER_START_MONTH:
        raise ValueError(f"Quarter number must be 1-4, got {number}")

    start_month = _QUARTER_START_MONTH[number]
    end_index = fiscal_year * 12 + start_month - 1 + QUARTER_MONTHS - 1
    end_year, end_month = end_index // 12, end_index % 12 + 1

    if end_year < MINYEAR or fiscal_year > MAXYEAR:
        raise ValueError(f"Q{number} {fiscal_year} is outside the supported date range")

    start = date(fiscal_year, start_month, 1) if fiscal_year >= MINYEAR else date.min
    end = date(end_year, end_month, last_day_of_month(end_year, end_month)) if end_year <= MAXYEAR else date.max
    return Quarter(number=number, fiscal_year=fiscal_year, start=start, end=end)


def quarter_of(value: date) -> Quarter:
    """
    Classify a date into its fiscal quarter.

    Args:
        value: Calendar date

    Returns:
        Quarter containing the date
    """
    month = value.month
    year = value.year

    if month in (1, 2):
        return quarter_for_number(4, year - 1)
    if month == 12:
        return quarter_for_number(4, year)

    return quarter_for_number((month - 3) // 3 + 1, year)


def next_quarter(value: date) -> date:
    """A date in the chronologically next quarter (three months later)."""
    return _shift(value, QUARTER_MONTHS)


def prev_quarter(value: date) -> date:
    """A date in the chronologically previous quarter (three months earlier)."""
    return _shift(value, -QUARTER_MONTHS)


def _shift(value: date, months: int) -> date:
    # Saturates at date.min / date.max instead of leaving the supported range
    target_year = value.year + (value.month - 1 + months) // 12
    if target_year > MAXYEAR:
        return date.max
    if target_year < MINYEAR:
        return date.min
    return add_months(value, months)


def format_quarter_label(quarter: Quarter, style: str = "short") -> str:
    """
    Format a quarter label.

    Args:
        quarter: Quarter to label
        style: "short" for "Q1 25", "long" for "Q1 2025"

    Returns:
        Label string
    """
    if style == "long":
        return f"Q{quarter.number} {quarter.fiscal_year}"
    if style == "short":
        return f"Q{quarter.number} {quarter.fiscal_year % 100:02d}"
    raise ValueError(f"Unknown label style: {style!r}")


def parse_quarter_label(label: str, century: int = 2000) -> Quarter:
    """
    Parse a label produced by format_quarter_label.

    Two-digit years are placed in the given century.

    Raises:
        ValueError: If the label is not in "Qn YY" or "Qn YYYY" form
    """
    match = _LABEL.match(label.strip())
    if not match:
        raise ValueError(f"Not a quarter label: {label!r}")

    number, year_text = match.groups()
    year = int(year_text)
    if len(year_text) == 2:
        year += century
    return quarter_for_number(int(number), year)


def iter_quarters(start: date, count: int) -> Iterator[Quarter]:
    """Yield count consecutive quarters beginning with the one containing start."""
    current = quarter_of(start).start
    for _ in range(count):
        yield quarter_of(current)
        current = next_quarter(current)


def filter_in_quarter(
    records: Iterable[T],
    quarter: Quarter,
    date_getter: Callable[[T], Optional[date]],
) -> list[T]:
    """
    Keep the records whose date falls in the quarter.

    Records for which date_getter returns None are dropped.
    """
    result = []
    for record in records:
        value = date_getter(record)
        if value is not None and quarter.contains(value):
            result.append(record)
    return result


class FiscalCalendar:
    """
    Fiscal quarter operations bound to a clock and a label style.

    The dashboard's quarter views navigate from the current quarter with
    next/previous buttons; this object backs that navigation.
    """

    def __init__(self, clock: Optional[Clock] = None, label_style: str = "short") -> None:
        self.clock = clock or SystemClock()
        self.label_style = label_style

    def quarter_of(self, value: date) -> Quarter:
        return quarter_of(value)

    def next_quarter(self, value: date) -> date:
        return next_quarter(value)

    def prev_quarter(self, value: date) -> date:
        return prev_quarter(value)

    def format_quarter_label(self, quarter: Quarter) -> str:
        return format_quarter_label(quarter, self.label_style)

    def current_quarter(self) -> Quarter:
        """Quarter containing the clock's current date."""
        return quarter_of(self.clock.today())
