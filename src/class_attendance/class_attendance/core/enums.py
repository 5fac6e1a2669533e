from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Daily attendance status as stored with each record."""

    PRESENT = "Present"
    ABSENT = "Absent"

    @property
    def code(self) -> str:
        return "P" if self is AttendanceStatus.PRESENT else "A"


class CommentPolicy(str, Enum):
    """Which status may carry a free-text comment when a record is written."""

    PRESENT_ONLY = "PRESENT_ONLY"
    ABSENT_ONLY = "ABSENT_ONLY"

    def allows(self, status: AttendanceStatus) -> bool:
        if self is CommentPolicy.PRESENT_ONLY:
            return status is AttendanceStatus.PRESENT
        return status is AttendanceStatus.ABSENT


class PercentageBasis(str, Enum):
    """Denominator used for a row's attendance percentage."""

    # present / (present + absent) for that student
    STUDENT_RECORDED_DAYS = "STUDENT_RECORDED_DAYS"
    # present / number of report days for the whole class
    CLASS_REPORT_DAYS = "CLASS_REPORT_DAYS"
