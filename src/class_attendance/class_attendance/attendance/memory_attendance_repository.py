from __future__ import annotations

import logging
import threading
from dataclasses import replace
from typing import Any, Iterable, Sequence

from ..common.datetime_utils import canonical_date
from ..core.exceptions import InvalidRecord
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def records_from_documents(docs: Iterable[Any]) -> list[AttendanceRecord]:
    """Validate raw attendance documents, skipping the malformed ones."""

    records: list[AttendanceRecord] = []
    for doc in docs:
        try:
            records.append(AttendanceRecord.from_document(doc))
        except InvalidRecord as e:
            logger.warning("Skipping attendance document: %s", e)
    return records


class InMemoryAttendanceRepository(AttendanceRepository):
    """Records keyed by `<studentId>_<YYYY-MM-DD>`; a later write replaces an earlier one."""

    def __init__(self):
        self._by_key: dict[str, AttendanceRecord] = {}
        self._seq = 0
        self._lock = threading.Lock()

    def save(self, record: AttendanceRecord) -> AttendanceRecord:
        date_s = canonical_date(record.date)
        with self._lock:
            self._seq += 1
            stored = replace(record, date=date_s, sequence=self._seq)
            key = stored.storage_key
            if key in self._by_key:
                logger.debug("Replacing attendance record %s", key)
            self._by_key[key] = stored
        return stored

    def list_all(self) -> Sequence[AttendanceRecord]:
        with self._lock:
            items = list(self._by_key.values())
        return sorted(items, key=lambda r: r.sequence or 0)

    def list_for_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        return [r for r in self.list_all() if r.student_id == int(student_id)]
