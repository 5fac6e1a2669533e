import pytest

from src.class_attendance.class_attendance.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from src.class_attendance.class_attendance.attendance.service import AttendanceService
from src.class_attendance.class_attendance.core.enums import AttendanceStatus, CommentPolicy
from src.class_attendance.class_attendance.core.exceptions import (
    CommentNotAllowed,
    InvalidClass,
    ValidationError,
)
from src.class_attendance.class_attendance.students.memory_roster_repository import InMemoryRosterRepository


def _service(roster, policy=CommentPolicy.PRESENT_ONLY):
    repo = InMemoryAttendanceRepository()
    return AttendanceService(repo, InMemoryRosterRepository(roster), comment_policy=policy), repo


def test_open_sheet_defaults_everyone_present(roster, fixed_today):
    svc, _ = _service(roster)
    sheet = svc.open_sheet("First", on=fixed_today)

    assert sheet.date == "2025-03-05"
    assert sorted(sheet.entries) == [1, 2, 3]
    assert all(e.status == AttendanceStatus.PRESENT and e.comment == "" for e in sheet.entries.values())


def test_open_sheet_requires_class(roster):
    svc, _ = _service(roster)
    with pytest.raises(InvalidClass):
        svc.open_sheet("  ")


def test_open_sheet_rejects_class_without_students(roster):
    svc, _ = _service(roster)
    with pytest.raises(ValidationError):
        svc.open_sheet("Fourth")


def test_present_only_policy_rejects_comment_on_absent(roster, fixed_today):
    svc, _ = _service(roster, CommentPolicy.PRESENT_ONLY)
    sheet = svc.open_sheet("First", on=fixed_today)

    sheet.set_comment(1, "arrived late")
    sheet.set_status(2, "Absent")

    assert sheet.entries[1].comment == "arrived late"
    with pytest.raises(CommentNotAllowed):
        sheet.set_comment(2, "sick")


def test_present_only_policy_clears_comment_when_marked_absent(roster, fixed_today):
    svc, _ = _service(roster, CommentPolicy.PRESENT_ONLY)
    sheet = svc.open_sheet("First", on=fixed_today)

    sheet.set_comment(1, "arrived late")
    sheet.set_status(1, AttendanceStatus.ABSENT)

    assert sheet.entries[1].comment == ""


def test_absent_only_policy_is_the_mirror_image(roster, fixed_today):
    svc, _ = _service(roster, CommentPolicy.ABSENT_ONLY)
    sheet = svc.open_sheet("First", on=fixed_today)

    with pytest.raises(CommentNotAllowed):
        sheet.set_comment(1, "arrived late")

    sheet.set_status(2, "Absent")
    sheet.set_comment(2, "called, sick")
    assert sheet.entries[2].comment == "called, sick"

    sheet.set_status(2, "Present")
    assert sheet.entries[2].comment == ""


def test_empty_comment_is_always_allowed(roster, fixed_today):
    svc, _ = _service(roster, CommentPolicy.ABSENT_ONLY)
    sheet = svc.open_sheet("First", on=fixed_today)

    sheet.set_comment(1, "   ")
    assert sheet.entries[1].comment == ""


def test_set_status_rejects_unknown_student_and_status(roster, fixed_today):
    svc, _ = _service(roster)
    sheet = svc.open_sheet("First", on=fixed_today)

    with pytest.raises(ValidationError):
        sheet.set_status(4, "Absent")
    with pytest.raises(ValidationError):
        sheet.set_status(1, "Late")


def test_save_sheet_writes_one_record_per_student_and_replaces_same_day(roster, fixed_today):
    svc, repo = _service(roster)
    sheet = svc.open_sheet("First", on=fixed_today)
    sheet.set_status(3, "Absent")
    svc.save_sheet(sheet)

    again = svc.open_sheet("First", on=fixed_today)
    saved = svc.save_sheet(again)

    stored = repo.list_all()
    assert len(saved) == 3
    assert len(stored) == 3
    assert {r.storage_key for r in stored} == {"1_2025-03-05", "2_2025-03-05", "3_2025-03-05"}
    assert all(r.status == AttendanceStatus.PRESENT for r in stored)


def test_save_sheet_refuses_comment_that_breaks_policy(roster, fixed_today):
    svc, repo = _service(roster, CommentPolicy.PRESENT_ONLY)
    sheet = svc.open_sheet("First", on=fixed_today)
    entry = sheet.entries[1]
    entry.status = AttendanceStatus.ABSENT
    entry.comment = "sick"

    with pytest.raises(CommentNotAllowed):
        svc.save_sheet(sheet)


def test_student_history_is_ordered_by_date(roster, record):
    svc, repo = _service(roster)
    repo.save(record(1, "2025-03-10"))
    repo.save(record(1, "2025-2-28"))
    repo.save(record(2, "2025-03-01"))
    repo.save(record(1, "2025-03-09", "Absent"))

    history = svc.student_history(1)

    assert [r.date for r in history] == ["2025-02-28", "2025-03-09", "2025-03-10"]


def test_rejected_sheet_leaves_store_untouched(roster, fixed_today):
    svc, repo = _service(roster, CommentPolicy.PRESENT_ONLY)
    sheet = svc.open_sheet("First", on=fixed_today)
    last = sheet.entries[3]
    last.status = AttendanceStatus.ABSENT
    last.comment = "sick"

    with pytest.raises(CommentNotAllowed):
        svc.save_sheet(sheet)

    assert repo.list_all() == []


def test_sheet_from_another_policy_is_refused_without_writes(roster, fixed_today):
    absent_svc, _ = _service(roster, CommentPolicy.ABSENT_ONLY)
    sheet = absent_svc.open_sheet("First", on=fixed_today)
    sheet.set_status(3, "Absent")
    sheet.set_comment(3, "sick")

    present_svc, repo = _service(roster, CommentPolicy.PRESENT_ONLY)
    with pytest.raises(ValidationError):
        present_svc.save_sheet(sheet)

    assert repo.list_all() == []
