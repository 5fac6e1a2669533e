from __future__ import annotations

from datetime import date

import pytest

from src.class_attendance.class_attendance.attendance.model import AttendanceRecord
from src.class_attendance.class_attendance.core.enums import AttendanceStatus
from src.class_attendance.class_attendance.students.model import RosterEntry


@pytest.fixture
def fixed_today() -> date:
    return date(2025, 3, 5)


@pytest.fixture
def roster() -> list[RosterEntry]:
    # Deliberately unsorted and mixed across classes
    return [
        RosterEntry(id=3, name="Chitra", class_name="First"),
        RosterEntry(id=1, name="Ann", class_name="First"),
        RosterEntry(id=4, name="Dev", class_name="Second"),
        RosterEntry(id=2, name="Ben", class_name="First"),
    ]


def make_record(student_id, date_s, status="Present", comment="", class_name="First", sequence=None):
    return AttendanceRecord(
        student_id=student_id,
        class_name=class_name,
        date=date_s,
        status=AttendanceStatus(status),
        comment=comment,
        sequence=sequence,
    )


@pytest.fixture
def record():
    return make_record
