from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AttendanceStatus, PercentageBasis


@dataclass(frozen=True)
class ReportCell:
    status: AttendanceStatus
    comment: str = ""


@dataclass(frozen=True)
class ReportRow:
    """One roster student across the report days.

    `cells` holds (day-of-month, cell) pairs in day order; a day with no
    record for this student is simply missing.
    """

    student_id: int
    name: str
    cells: tuple[tuple[int, ReportCell], ...]
    total_present: int
    total_absent: int
    attendance_percentage: float

    def cell(self, day: int) -> Optional[ReportCell]:
        day = int(day)
        for d, c in self.cells:
            if d == day:
                return c
        return None


@dataclass(frozen=True)
class ReportModel:
    """Read-model for a monthly per-class report; rebuilt on every request."""

    class_name: str
    month: int
    year: int
    days: tuple[int, ...]
    rows: tuple[ReportRow, ...]
    percentage_basis: PercentageBasis = PercentageBasis.STUDENT_RECORDED_DAYS

    @property
    def has_records(self) -> bool:
        return bool(self.days)

    @property
    def has_students(self) -> bool:
        return bool(self.rows)

    def to_dict(self) -> dict:
        return {
            "class_name": self.class_name,
            "month": self.month,
            "year": self.year,
            "days": list(self.days),
            "percentage_basis": self.percentage_basis.value,
            "rows": [
                {
                    "id": r.student_id,
                    "name": r.name,
                    "cells": {
                        str(day): {"status": c.status.value, "comment": c.comment}
                        for day, c in r.cells
                    },
                    "total_present": r.total_present,
                    "total_absent": r.total_absent,
                    "attendance_percentage": r.attendance_percentage,
                }
                for r in self.rows
            ],
        }
