from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..core.constants import MONTH_NAMES
from ..core.exceptions import MalformedDate


@dataclass(frozen=True)
class DateParts:
    year: int
    month: int
    day: int

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)


def _is_ascii_digits(value: str) -> bool:
    return value.isascii() and value.isdigit()


def parse_date(value: str) -> DateParts:
    """Parse a YYYY-MM-DD string into numeric parts.

    Month and day may be given with or without zero padding, so "2025-07-05"
    and "2025-7-5" parse to the same parts.
    """
    if not isinstance(value, str):
        raise MalformedDate(f"Date must be a string, got {type(value).__name__}")

    parts = value.strip().split("-")
    if len(parts) != 3:
        raise MalformedDate(f"Date {value!r} is not in YYYY-MM-DD form")

    year_s, month_s, day_s = parts
    if len(year_s) != 4 or not _is_ascii_digits(year_s):
        raise MalformedDate(f"Date {value!r} has an invalid year")
    if not (1 <= len(month_s) <= 2 and _is_ascii_digits(month_s)):
        raise MalformedDate(f"Date {value!r} has an invalid month")
    if not (1 <= len(day_s) <= 2 and _is_ascii_digits(day_s)):
        raise MalformedDate(f"Date {value!r} has an invalid day")

    dp = DateParts(year=int(year_s), month=int(month_s), day=int(day_s))
    try:
        dp.to_date()
    except ValueError:
        raise MalformedDate(f"Date {value!r} is not a calendar date")
    return dp


def format_date(year: int, month: int, day: int) -> str:
    """Inverse of parse_date; always zero-pads month and day."""
    return f"{int(year):04d}-{int(month):02d}-{int(day):02d}"


def canonical_date(value: str) -> str:
    dp = parse_date(value)
    return format_date(dp.year, dp.month, dp.day)


def today_iso(today: date | None = None) -> str:
    """Current local calendar day as YYYY-MM-DD."""
    d = today or now_local().date()
    return format_date(d.year, d.month, d.day)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def month_name(month: int) -> str:
    return MONTH_NAMES[int(month) - 1]
