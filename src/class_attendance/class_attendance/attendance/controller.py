from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import ValidationError
from ..reports import csv_serializer
from .service import AttendanceSheet


def _sheet_json(sheet: AttendanceSheet) -> dict:
    return {
        "class": sheet.class_name,
        "date": sheet.date,
        "comment_policy": sheet.policy.value,
        "entries": [
            {"studentId": e.student_id, "name": e.name, "status": e.status.value, "comment": e.comment}
            for e in sorted(sheet.entries.values(), key=lambda e: e.student_id)
        ],
    }


def register(app: Flask, container: Container) -> None:
    def _fail(message: str, code: int):
        return jsonify({"success": False, "message": message}), code

    @app.route("/classes", methods=["GET"], endpoint="classes")
    def classes():
        return jsonify({"success": True, "classes": list(container.roster_repo.class_names())})

    @app.route("/attendance/sheet", methods=["GET"], endpoint="attendance_sheet")
    def attendance_sheet():
        try:
            sheet = container.attendance_service.open_sheet(request.args.get("class", ""))
        except ValidationError as e:
            return _fail(str(e), 400)
        return jsonify({"success": True, "sheet": _sheet_json(sheet)})

    @app.route("/attendance/sheet", methods=["POST"], endpoint="attendance_save")
    def attendance_save():
        """Save today's attendance for a class.

        Body: {"class": "First", "entries": [{"studentId": 1, "status": "Absent", "comment": ""}]}
        Students not listed keep the default (Present, no comment).
        """

        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return _fail("Request body must be a JSON object", 400)

        try:
            entries = data.get("entries") or []
            if not isinstance(entries, list) or not all(isinstance(item, dict) for item in entries):
                raise ValidationError("entries must be a list of objects")

            sheet = container.attendance_service.open_sheet(data.get("class", ""))
            for item in entries:
                student_id = item.get("studentId")
                if "status" in item:
                    sheet.set_status(student_id, item["status"])
                if "comment" in item:
                    sheet.set_comment(student_id, item["comment"])
            saved = container.attendance_service.save_sheet(sheet)
        except (ValidationError, TypeError, ValueError) as e:
            return _fail(str(e), 400)

        return jsonify(
            {
                "success": True,
                "message": f"Attendance for {sheet.class_name} on {sheet.date} saved successfully!",
                "saved": len(saved),
            }
        )

    @app.route("/students/<int:student_id>/history", methods=["GET"], endpoint="student_history")
    def student_history(student_id: int):
        records = container.attendance_service.student_history(student_id)
        return jsonify(
            {
                "success": True,
                "studentId": student_id,
                "records": [r.to_document() for r in records],
            }
        )

    @app.route("/students/<int:student_id>/history.csv", methods=["GET"], endpoint="student_history_csv")
    def student_history_csv(student_id: int):
        records = container.attendance_service.student_history(student_id)
        csv_bytes = csv_serializer.history_to_csv(records).encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f'attachment; filename="Student_{student_id}_Attendance_History.csv"'},
        )
