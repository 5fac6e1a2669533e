from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import ValidationError
from .periods import report_period_options
from .service import CsvExport

logger = logging.getLogger(__name__)

ALL_CLASSES = "all"


def register(app: Flask, container: Container) -> None:
    def _fail(message: str, code: int):
        return jsonify({"success": False, "message": message}), code

    def _write_csv(export: CsvExport):
        """CSV download response shared by single-class and multi-class exports."""

        csv_bytes = export.content.encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
        )

    @app.route("/reports/periods", methods=["GET"], endpoint="report_periods")
    def report_periods():
        options = report_period_options()
        return jsonify(
            {
                "success": True,
                "months": [{"value": m.value, "name": m.name} for m in options.months],
                "years": options.years,
            }
        )

    @app.route("/reports/monthly", methods=["GET"], endpoint="monthly_report")
    def monthly_report():
        try:
            model = container.report_service.class_report(
                class_name=request.args.get("class", ""),
                month=request.args.get("month", ""),
                year=request.args.get("year", ""),
            )
        except ValidationError as e:
            return _fail(str(e), 400)

        # An empty report is a valid answer, not an error
        return jsonify({"success": True, "has_records": model.has_records, "report": model.to_dict()})

    @app.route("/reports/monthly.csv", methods=["GET"], endpoint="monthly_report_csv")
    def monthly_report_csv():
        class_name = request.args.get("class", ALL_CLASSES)
        month = request.args.get("month", "")
        year = request.args.get("year", "")
        try:
            if class_name.strip().lower() == ALL_CLASSES:
                export = container.report_service.export_all_csv(month=month, year=year)
            else:
                export = container.report_service.export_class_csv(class_name=class_name, month=month, year=year)
        except ValidationError as e:
            return _fail(str(e), 400)

        logger.info("Exporting %s", export.filename)
        return _write_csv(export)
