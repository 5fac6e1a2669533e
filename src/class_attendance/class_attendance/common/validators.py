from __future__ import annotations

from ..core.constants import MAX_REPORT_YEAR, MIN_REPORT_YEAR
from ..core.exceptions import InvalidClass, InvalidPeriod


def require_class_name(value: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidClass("Class name is required")
    return value.strip()


def _require_whole_number(value, field_name: str) -> int:
    # bool is an int subclass and floats would be truncated by int()
    if isinstance(value, bool):
        raise InvalidPeriod(f"{field_name} must be a whole number, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidPeriod(f"{field_name} must be a whole number, got {value!r}")
        return int(value)
    if isinstance(value, str) and value.strip().isascii() and value.strip().isdigit():
        return int(value.strip())
    raise InvalidPeriod(f"{field_name} must be a whole number, got {value!r}")


def require_period(month: int, year: int) -> tuple[int, int]:
    m = _require_whole_number(month, "Month")
    y = _require_whole_number(year, "Year")

    if not 1 <= m <= 12:
        raise InvalidPeriod(f"Month must be between 1 and 12, got {m}")
    if not MIN_REPORT_YEAR <= y <= MAX_REPORT_YEAR:
        raise InvalidPeriod(f"Year must be between {MIN_REPORT_YEAR} and {MAX_REPORT_YEAR}, got {y}")
    return m, y
