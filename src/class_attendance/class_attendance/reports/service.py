from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.validators import require_class_name, require_period
from ..students.repository import RosterRepository
from . import csv_serializer
from .aggregator import ReportAggregator, classes_with_data
from .model import ReportModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CsvExport:
    filename: str
    content: str


class ReportService:
    def __init__(
        self,
        roster: RosterRepository,
        attendance: AttendanceRepository,
        *,
        aggregator: Optional[ReportAggregator] = None,
    ):
        self._roster = roster
        self._attendance = attendance
        self._aggregator = aggregator or ReportAggregator()

    def class_report(self, *, class_name: str, month: int, year: int) -> ReportModel:
        class_name = require_class_name(class_name)
        month, year = require_period(month, year)

        records = self._attendance.list_all()
        model = self._aggregator.aggregate(self._roster.list_for_class(class_name), records, class_name, month, year)
        if not model.has_records:
            logger.info("No attendance data for %s in %02d/%d", class_name, month, year)
        return model

    def all_class_reports(self, *, month: int, year: int) -> list[ReportModel]:
        """One report per class that has records in the period."""

        month, year = require_period(month, year)
        records = self._attendance.list_all()
        roster = self._roster.list_all()
        return [
            self._aggregator.aggregate(roster, records, class_name, month, year)
            for class_name in classes_with_data(records, month, year)
        ]

    def export_class_csv(self, *, class_name: str, month: int, year: int) -> CsvExport:
        model = self.class_report(class_name=class_name, month=month, year=year)
        return CsvExport(
            filename=csv_serializer.report_filename(model.class_name, model.month, model.year),
            content=csv_serializer.to_csv(model),
        )

    def export_all_csv(self, *, month: int, year: int) -> CsvExport:
        models = self.all_class_reports(month=month, year=year)
        month, year = require_period(month, year)
        return CsvExport(
            filename=csv_serializer.multi_class_filename(month, year),
            content=csv_serializer.to_multi_class_csv(models),
        )
