"""
Calendar date utilities shared by the calendar, matching and report modules.

Sheet cells arrive as free text. This module is the single place where they
are turned into datetime.date values, and where "today" comes from.
"""

import calendar
import re
from datetime import date, datetime, timedelta
from typing import Any, Optional, Protocol

import structlog

from ..errors import UnparseableDateError

logger = structlog.get_logger(__name__)

_ISO_DATE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$", re.ASCII)
_US_DATE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$", re.ASCII)

_WEEKDAY_INDEX = {"monday": 0, "sunday": 6}


class Clock(Protocol):
    """Source of the current calendar date."""

    def today(self) -> date:
        ...


class SystemClock:
    """Clock backed by the local wall-clock date."""

    def today(self) -> date:
        return date.today()


class FixedClock:
    """Clock pinned to a single date, for tests and report snapshots."""

    def __init__(self, fixed: date):
        self.fixed = fixed

    def today(self) -> date:
        return self.fixed


def today(clock: Optional[Clock] = None) -> date:
    """
    Get today's date from the given clock.

    Args:
        clock: Optional clock, defaults to the system clock

    Returns:
        Current calendar date
    """
    if clock is None:
        clock = SystemClock()
    return clock.today()


def parse_date_strict(raw: Any) -> date:
    """
    Parse a sheet date cell.

    Accepts YYYY-MM-DD and M/D/YYYY (one or two digit month and day).
    date instances pass through, datetime instances are truncated.

    Args:
        raw: Cell value

    Returns:
        Parsed calendar date

    Raises:
        UnparseableDateError: If the value is not a valid date in an accepted form
    """
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if not isinstance(raw, str):
        raise UnparseableDateError(f"Unsupported date value type: {type(raw).__name__}", raw_value=raw)

    text = raw.strip()

    match = _ISO_DATE.match(text)
    if match:
        year, month, day = (int(part) for part in match.groups())
    else:
        match = _US_DATE.match(text)
        if not match:
            raise UnparseableDateError(f"Unrecognized date format: {raw!r}", raw_value=raw)
        month, day, year = (int(part) for part in match.groups())

    try:
        return date(year, month, day)
    except ValueError as e:
        raise UnparseableDateError(f"Date out of range: {raw!r} ({e})", raw_value=raw) from e


def parse_date(raw: Any) -> Optional[date]:
    """
    Parse a sheet date cell, returning None when it cannot be parsed.

    Args:
        raw: Cell value (string, date, or None)

    Returns:
        Parsed calendar date, or None for empty or unparseable input
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return None

    try:
        return parse_date_strict(raw)
    except UnparseableDateError as e:
        logger.debug("Ignoring unparseable date", raw_value=raw, reason=str(e))
        return None


def add_months(value: date, months: int) -> date:
    """
    Shift a date by whole calendar months, clamping the day to the target month.

    Args:
        value: Starting date
        months: Number of months to add (negative to subtract)

    Returns:
        Shifted date, e.g. Nov 30 + 3 months -> Feb 28 (or 29)
    """
    month_index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(value.day, last_day_of_month(year, month))
    return date(year, month, day)


def last_day_of_month(year: int, month: int) -> int:
    """Number of days in the given month, leap years included."""
    return calendar.monthrange(year, month)[1]


def days_between(start: date, end: date) -> int:
    """Signed whole days from start to end."""
    return (end - start).days


def week_bounds(value: date, week_starts_on: str = "sunday") -> tuple[date, date]:
    """
    Get the inclusive bounds of the week containing a date.

    Args:
        value: Any date in the week
        week_starts_on: "sunday" or "monday"

    Returns:
        Tuple of (first_day, last_day)
    """
    first_weekday = _WEEKDAY_INDEX[week_starts_on]
    offset = (value.weekday() - first_weekday) % 7
    start = value - timedelta(days=offset)
    return start, start + timedelta(days=6)


def format_display_date(value: date) -> str:
    """
    Format a date the way dashboard tables show it.

    Args:
        value: Date to format

    Returns:
        Formatted string such as "Mar 1, 2025"
    """
    return f"{value.strftime('%b')} {value.day}, {value.year}"
