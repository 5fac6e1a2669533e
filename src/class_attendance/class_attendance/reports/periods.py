from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.constants import MONTH_NAMES, REPORT_YEARS_BACK


@dataclass(frozen=True)
class MonthOption:
    value: int
    name: str


@dataclass(frozen=True)
class PeriodOptions:
    months: list[MonthOption]
    years: list[int]


def report_period_options(today: Optional[date] = None) -> PeriodOptions:
    """Months of the year and the selectable years, newest first."""

    today = today or now_local().date()
    months = [MonthOption(value=i, name=name) for i, name in enumerate(MONTH_NAMES, start=1)]
    years = [today.year - offset for offset in range(REPORT_YEARS_BACK + 1)]
    return PeriodOptions(months=months, years=years)
