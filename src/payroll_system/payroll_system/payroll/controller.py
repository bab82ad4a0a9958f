from __future__ import annotations

from dataclasses import asdict
from datetime import date

from flask import Flask, jsonify, request

from ..common.datetime_utils import month_period, parse_iso_date
from ..core.exceptions import PayrollCalculationError, ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _error(message: str, status: int = 400):
        return jsonify({"success": False, "message": message}), status

    def _period_from_args() -> tuple[date, date]:
        start_s = request.args.get("start")
        end_s = request.args.get("end")
        if bool(start_s) != bool(end_s):
            raise ValidationError("Both start and end dates are required")
        if not start_s:
            today = date.today()
            return month_period(today.year, today.month)
        try:
            return parse_iso_date(start_s), parse_iso_date(end_s)
        except ValueError as exc:
            raise ValidationError("Dates must use the YYYY-MM-DD format") from exc

    @app.route("/api/payroll/<int:employee_id>", methods=["GET"], endpoint="api_payroll_employee")
    def api_payroll_employee(employee_id: int):
        try:
            start, end = _period_from_args()
            result = container.payroll_service.calculate(employee_id, start, end)
        except (ValidationError, PayrollCalculationError) as e:
            return _error(str(e))
        return jsonify({"success": True, "payroll": result.to_dict()}), 200

    @app.route("/api/payroll", methods=["GET"], endpoint="api_payroll_month")
    def api_payroll_month():
        today = date.today()
        try:
            year = int(request.args.get("year") or today.year)
            month = int(request.args.get("month") or today.month)
            if not 1 <= month <= 12:
                raise ValidationError("Month must be between 1 and 12")
            report = container.payroll_report_service.build_monthly_payroll(year=year, month=month)
        except ValueError:
            return _error("Year and month must be numbers")
        except (ValidationError, PayrollCalculationError) as e:
            return _error(str(e))

        return jsonify(
            {
                "success": True,
                "period_start": report.period_start.strftime("%Y-%m-%d"),
                "period_end": report.period_end.strftime("%Y-%m-%d"),
                "payrolls": [e.payroll.to_dict() for e in report.entries if e.ok],
                "errors": [{"employee_id": e.employee_id, "message": e.error} for e in report.failed],
                "summary": asdict(report.summary),
            }
        ), 200

    @app.route("/api/attendance/summary", methods=["GET"], endpoint="api_attendance_summary")
    def api_attendance_summary():
        try:
            start, end = _period_from_args()
            summary = container.payroll_report_service.build_attendance_summary(start=start, end=end)
        except (ValidationError, PayrollCalculationError) as e:
            return _error(str(e))
        return jsonify({"success": True, "summary": asdict(summary)}), 200
