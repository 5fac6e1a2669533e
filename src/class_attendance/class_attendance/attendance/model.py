from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.datetime_utils import canonical_date
from ..core.enums import AttendanceStatus
from ..core.exceptions import InvalidRecord


def _require_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or value is None:
        raise InvalidRecord(f"{field_name} is missing or not an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isascii() and value.strip().isdigit():
        return int(value.strip())
    raise InvalidRecord(f"{field_name} is missing or not an integer")


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's attendance on one day.

    `sequence` is the storage write order; a higher value is a later write.
    """

    student_id: int
    class_name: str
    date: str
    status: AttendanceStatus
    comment: str = ""
    sequence: Optional[int] = None

    @property
    def storage_key(self) -> str:
        return f"{self.student_id}_{canonical_date(self.date)}"

    @classmethod
    def from_document(cls, doc: Mapping[str, Any], *, sequence: Optional[int] = None) -> "AttendanceRecord":
        """Build a record from a stored document ({studentId, class, date, status, comment}).

        Field presence and types are checked here; the date format is checked
        where the date is used, so a bad date can be skipped without losing
        the rest of the document set.
        """

        if not isinstance(doc, Mapping):
            raise InvalidRecord("Attendance document must be an object")

        student_id = _require_int(doc.get("studentId", doc.get("student_id")), "studentId")

        class_name = doc.get("class", doc.get("class_name"))
        if not isinstance(class_name, str) or not class_name.strip():
            raise InvalidRecord(f"Attendance document for student {student_id} has no class")

        date_value = doc.get("date")
        if not isinstance(date_value, str) or not date_value.strip():
            raise InvalidRecord(f"Attendance document for student {student_id} has no date")

        try:
            status = AttendanceStatus(doc.get("status"))
        except ValueError:
            raise InvalidRecord(f"Attendance document for student {student_id} has unknown status {doc.get('status')!r}")

        comment = doc.get("comment") or ""
        if not isinstance(comment, str):
            raise InvalidRecord(f"Attendance document for student {student_id} has a non-text comment")

        if sequence is None and doc.get("sequence") is not None:
            sequence = _require_int(doc.get("sequence"), "sequence")

        return cls(
            student_id=student_id,
            class_name=class_name.strip(),
            date=date_value.strip(),
            status=status,
            comment=comment,
            sequence=sequence,
        )

    def to_document(self) -> dict:
        return {
            "studentId": self.student_id,
            "class": self.class_name,
            "date": self.date,
            "status": self.status.value,
            "comment": self.comment,
        }
