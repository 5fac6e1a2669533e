from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..common.datetime_utils import parse_date, today_iso
from ..common.validators import require_class_name
from ..core.constants import DEFAULT_COMMENT_POLICY
from ..core.enums import AttendanceStatus, CommentPolicy
from ..core.exceptions import CommentNotAllowed, MalformedDate, ValidationError
from ..students.repository import RosterRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass
class SheetEntry:
    student_id: int
    name: str
    status: AttendanceStatus = AttendanceStatus.PRESENT
    comment: str = ""


@dataclass
class AttendanceSheet:
    """Attendance being taken for one class on one day.

    Every student starts as Present with no comment. The comment policy is
    applied on every change, so a saved sheet never holds a comment on a
    status the policy forbids.
    """

    class_name: str
    date: str
    policy: CommentPolicy
    entries: dict[int, SheetEntry] = field(default_factory=dict)

    def _entry(self, student_id: int) -> SheetEntry:
        entry = self.entries.get(int(student_id))
        if entry is None:
            raise ValidationError(f"Student {student_id} is not on the {self.class_name} sheet")
        return entry

    def set_status(self, student_id: int, status: AttendanceStatus | str) -> None:
        entry = self._entry(student_id)
        try:
            entry.status = AttendanceStatus(status)
        except ValueError:
            raise ValidationError(f"Unknown attendance status {status!r}")
        if entry.comment and not self.policy.allows(entry.status):
            entry.comment = ""

    def set_comment(self, student_id: int, comment: str) -> None:
        entry = self._entry(student_id)
        text = (comment or "").strip()
        if text and not self.policy.allows(entry.status):
            raise CommentNotAllowed(
                f"Comments are not allowed for {entry.status.value} students ({self.policy.value})"
            )
        entry.comment = text

    def to_records(self) -> list[AttendanceRecord]:
        return [
            AttendanceRecord(
                student_id=e.student_id,
                class_name=self.class_name,
                date=self.date,
                status=e.status,
                comment=e.comment,
            )
            for e in self.entries.values()
        ]


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        roster: RosterRepository,
        *,
        comment_policy: CommentPolicy = DEFAULT_COMMENT_POLICY,
    ):
        self._attendance = attendance
        self._roster = roster
        self._policy = CommentPolicy(comment_policy)

    @property
    def comment_policy(self) -> CommentPolicy:
        return self._policy

    def open_sheet(self, class_name: str, *, on: Optional[date] = None) -> AttendanceSheet:
        class_name = require_class_name(class_name)
        students = self._roster.list_for_class(class_name)
        if not students:
            raise ValidationError(f"No students found for class: {class_name}")

        sheet = AttendanceSheet(class_name=class_name, date=today_iso(on), policy=self._policy)
        for stu in students:
            sheet.entries[stu.id] = SheetEntry(student_id=stu.id, name=stu.name)
        return sheet

    def save_sheet(self, sheet: AttendanceSheet) -> list[AttendanceRecord]:
        if sheet.policy != self._policy:
            raise ValidationError(
                f"Sheet was opened under {sheet.policy.value} but comments are saved under {self._policy.value}"
            )

        # Check every entry before writing so a rejected sheet leaves the store untouched
        records = sheet.to_records()
        for record in records:
            if record.comment and not self._policy.allows(record.status):
                raise CommentNotAllowed(f"Comment not allowed for student {record.student_id} ({record.status.value})")

        saved = [self._attendance.save(record) for record in records]
        logger.info("Saved attendance for %s on %s (%d students)", sheet.class_name, sheet.date, len(saved))
        return saved

    def student_history(self, student_id: int) -> list[AttendanceRecord]:
        dated: list[tuple[tuple[int, int, int], AttendanceRecord]] = []
        for r in self._attendance.list_for_student(int(student_id)):
            try:
                dp = parse_date(r.date)
            except MalformedDate as e:
                logger.warning("Skipping history record %s for student %s: %s", r.date, r.student_id, e)
                continue
            dated.append(((dp.year, dp.month, dp.day), r))
        dated.sort(key=lambda x: x[0])
        return [r for _, r in dated]
