from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional, Union

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import parse_date
from ..common.validators import require_class_name, require_period
from ..core.constants import DEFAULT_PERCENTAGE_BASIS, PERCENTAGE_DECIMALS
from ..core.enums import AttendanceStatus, PercentageBasis
from ..core.exceptions import InvalidRecord, MalformedDate
from ..students.model import RosterEntry
from ..students.ordering import sort_class_names
from .model import ReportCell, ReportModel, ReportRow

logger = logging.getLogger(__name__)

RecordLike = Union[AttendanceRecord, Mapping[str, Any]]
RosterLike = Union[RosterEntry, Mapping[str, Any]]


def _as_record(item: RecordLike) -> Optional[AttendanceRecord]:
    if isinstance(item, AttendanceRecord):
        return item
    try:
        return AttendanceRecord.from_document(item)
    except InvalidRecord as e:
        logger.warning("Skipping attendance document: %s", e)
        return None


def _as_roster_entry(item: RosterLike) -> Optional[RosterEntry]:
    if isinstance(item, RosterEntry):
        return item
    try:
        return RosterEntry.from_document(item)
    except InvalidRecord as e:
        logger.warning("Skipping roster entry: %s", e)
        return None


def _write_rank(record: AttendanceRecord) -> tuple:
    # Later writes win; unsequenced records lose to sequenced ones and the
    # remaining ties are settled by content so input order never matters.
    return (
        record.sequence is not None,
        record.sequence or 0,
        record.status.value,
        record.comment,
    )


def _percentage(present: int, denominator: int) -> float:
    if denominator <= 0:
        return 0.0
    return round(present / denominator * 100, PERCENTAGE_DECIMALS)


class ReportAggregator:
    """Build the student x day pivot for one class and month.

    Inputs are never mutated and every call returns a fresh ReportModel,
    so one instance can serve concurrent report requests.
    """

    def __init__(self, *, percentage_basis: PercentageBasis = DEFAULT_PERCENTAGE_BASIS):
        self._basis = PercentageBasis(percentage_basis)

    @property
    def percentage_basis(self) -> PercentageBasis:
        return self._basis

    def select_records(
        self,
        records: Iterable[RecordLike],
        *,
        class_name: str,
        month: int,
        year: int,
    ) -> dict[tuple[int, int], AttendanceRecord]:
        """Records of the class in the period, one per (student_id, day)."""

        selected: dict[tuple[int, int], AttendanceRecord] = {}
        for item in records:
            record = _as_record(item)
            if record is None or record.class_name != class_name:
                continue

            try:
                dp = parse_date(record.date)
            except MalformedDate as e:
                logger.warning("Skipping record for student %s: %s", record.student_id, e)
                continue

            if dp.year != year or dp.month != month:
                continue

            key = (record.student_id, dp.day)
            current = selected.get(key)
            if current is None:
                selected[key] = record
                continue

            logger.warning(
                "Duplicate attendance for %s_%04d-%02d-%02d; keeping the latest write",
                record.student_id,
                dp.year,
                dp.month,
                dp.day,
            )
            if _write_rank(record) > _write_rank(current):
                selected[key] = record
        return selected

    def aggregate(
        self,
        roster: Iterable[RosterLike],
        records: Iterable[RecordLike],
        class_name: str,
        month: int,
        year: int,
    ) -> ReportModel:
        class_name = require_class_name(class_name)
        month, year = require_period(month, year)

        selected = self.select_records(records, class_name=class_name, month=month, year=year)
        days = tuple(sorted({day for _, day in selected}))

        students = [e for e in (_as_roster_entry(i) for i in roster) if e is not None and e.class_name == class_name]
        students.sort(key=lambda e: e.id)

        known_ids = {s.id for s in students}
        unknown = sorted({sid for sid, _ in selected if sid not in known_ids})
        if unknown:
            logger.debug("Records for students not on the %s roster: %s", class_name, unknown)

        rows = []
        for stu in students:
            cells: dict[int, ReportCell] = {}
            for day in days:
                record = selected.get((stu.id, day))
                if record is not None:
                    cells[day] = ReportCell(status=record.status, comment=record.comment)

            present = sum(1 for c in cells.values() if c.status == AttendanceStatus.PRESENT)
            absent = sum(1 for c in cells.values() if c.status == AttendanceStatus.ABSENT)
            if self._basis == PercentageBasis.CLASS_REPORT_DAYS:
                denominator = len(days)
            else:
                denominator = present + absent

            rows.append(
                ReportRow(
                    student_id=stu.id,
                    name=stu.name,
                    cells=tuple(sorted(cells.items(), key=lambda kv: kv[0])),
                    total_present=present,
                    total_absent=absent,
                    attendance_percentage=_percentage(present, denominator),
                )
            )

        logger.debug(
            "Aggregated %s %02d/%d: %d students, %d days, %d records",
            class_name,
            month,
            year,
            len(rows),
            len(days),
            len(selected),
        )
        return ReportModel(
            class_name=class_name,
            month=month,
            year=year,
            days=days,
            rows=tuple(rows),
            percentage_basis=self._basis,
        )


def aggregate(
    roster: Iterable[RosterLike],
    records: Iterable[RecordLike],
    class_name: str,
    month: int,
    year: int,
    *,
    percentage_basis: PercentageBasis = DEFAULT_PERCENTAGE_BASIS,
) -> ReportModel:
    return ReportAggregator(percentage_basis=percentage_basis).aggregate(roster, records, class_name, month, year)


def classes_with_data(records: Iterable[RecordLike], month: int, year: int) -> list[str]:
    """Classes with at least one valid record in the period, in school order."""

    month, year = require_period(month, year)
    names = set()
    for item in records:
        record = _as_record(item)
        if record is None:
            continue
        try:
            dp = parse_date(record.date)
        except MalformedDate as e:
            logger.warning("Skipping record for student %s: %s", record.student_id, e)
            continue
        if dp.year == year and dp.month == month:
            names.add(record.class_name)
    return sort_class_names(names)
