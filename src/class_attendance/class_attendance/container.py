from __future__ import annotations

from dataclasses import dataclass

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.service import AttendanceService
from .core.enums import CommentPolicy, PercentageBasis
from .reports.aggregator import ReportAggregator
from .reports.service import ReportService
from .students.json_roster_repository import JsonRosterRepository
from .students.repository import RosterRepository


@dataclass(frozen=True)
class Container:
    roster_repo: RosterRepository
    attendance_repo: InMemoryAttendanceRepository

    attendance_service: AttendanceService
    report_service: ReportService


def build_container(*, settings: dict, roster_repo: RosterRepository | None = None) -> Container:
    comment_policy = CommentPolicy(str(settings.get("COMMENT_POLICY", CommentPolicy.PRESENT_ONLY.value)).upper())
    percentage_basis = PercentageBasis(
        str(settings.get("PERCENTAGE_BASIS", PercentageBasis.STUDENT_RECORDED_DAYS.value)).upper()
    )

    roster_repo = roster_repo or JsonRosterRepository(str(settings["ROSTER_PATH"]))
    attendance_repo = InMemoryAttendanceRepository()

    attendance_service = AttendanceService(attendance_repo, roster_repo, comment_policy=comment_policy)
    report_service = ReportService(
        roster_repo,
        attendance_repo,
        aggregator=ReportAggregator(percentage_basis=percentage_basis),
    )

    return Container(
        roster_repo=roster_repo,
        attendance_repo=attendance_repo,
        attendance_service=attendance_service,
        report_service=report_service,
    )
