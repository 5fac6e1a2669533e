from __future__ import annotations

import csv
import io
from typing import Iterable, Sequence

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import month_name
from .model import ReportModel, ReportRow

NO_RECORD = "-"
HISTORY_HEADER = ["Date", "Class", "Status", "Comment"]


def _writer(out: io.StringIO):
    # QUOTE_MINIMAL quotes any field holding a comma, quote or newline and doubles inner quotes
    return csv.writer(out, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")


def format_percentage(value: float) -> str:
    return f"{value:.1f}%"


def header_row(model: ReportModel) -> list[str]:
    return ["ID", "Name", *[f"Day {d}" for d in model.days], "Total Present", "Total Absent", "Attendance %"]


def data_row(model: ReportModel, row: ReportRow) -> list[str]:
    out = [str(row.student_id), row.name]
    for day in model.days:
        cell = row.cell(day)
        out.append(cell.status.code if cell else NO_RECORD)
    out += [str(row.total_present), str(row.total_absent), format_percentage(row.attendance_percentage)]
    return out


def export_table(model: ReportModel) -> list[list[str]]:
    """Rectangular grid for a report: header row first, then one row per student."""

    return [header_row(model), *[data_row(model, r) for r in model.rows]]


def to_csv(model: ReportModel) -> str:
    out = io.StringIO()
    _writer(out).writerows(export_table(model))
    return out.getvalue()


def from_csv(text: str) -> list[list[str]]:
    """Parse CSV text back into rows of cells, dropping blank lines."""

    return [row for row in csv.reader(io.StringIO(text)) if row]


def report_label(class_name: str, month: int, year: int) -> str:
    return f"Class: {class_name} Attendance Report for {month_name(month)}, {year}"


def to_multi_class_csv(models: Sequence[ReportModel]) -> str:
    """One labeled block per class, separated by a blank line, each with its own header."""

    out = io.StringIO()
    writer = _writer(out)
    for i, model in enumerate(models):
        if i:
            out.write("\n")
        writer.writerow([report_label(model.class_name, model.month, model.year)])
        writer.writerows(export_table(model))
    return out.getvalue()


def from_multi_class_csv(text: str) -> list[tuple[str, list[list[str]]]]:
    """Split a multi-class export into (label, rows) blocks."""

    blocks: list[tuple[str, list[list[str]]]] = []
    current: list[list[str]] = []
    for row in csv.reader(io.StringIO(text)):
        if row:
            current.append(row)
            continue
        if current:
            blocks.append((current[0][0], current[1:]))
            current = []
    if current:
        blocks.append((current[0][0], current[1:]))
    return blocks


def report_filename(class_name: str, month: int, year: int) -> str:
    return f"{class_name}_Attendance_Report_{month_name(month)}_{year}.csv"


def multi_class_filename(month: int, year: int) -> str:
    return f"Attendance_Report_{month_name(month)}_{year}.csv"


def history_to_csv(records: Iterable[AttendanceRecord]) -> str:
    out = io.StringIO()
    writer = _writer(out)
    writer.writerow(HISTORY_HEADER)
    for r in records:
        writer.writerow([r.date, r.class_name, r.status.value, r.comment])
    return out.getvalue()
