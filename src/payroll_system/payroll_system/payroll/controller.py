from __future__ import annotations

import io

from flask import Flask, jsonify, request

from ..common.http import json_body, json_errors
from ..common.validators import require_month_year
from ..container import Container
from ..core.exceptions import ValidationError

ALLOWED_EXTENSIONS = (".xlsx", ".xls", ".csv")


def register(app: Flask, container: Container) -> None:
    records = container.salary_record_service
    holidays = container.company_holiday_service

    @app.route("/api/attendance/upload", methods=["POST"], endpoint="attendance_upload")
    @json_errors
    def upload():
        file = request.files.get("file")
        if file is None or not file.filename:
            raise ValidationError("Attendance file is required")
        if not file.filename.lower().endswith(ALLOWED_EXTENSIONS):
            raise ValidationError("Unsupported file type. Upload .xlsx, .xls or .csv")

        month_year = require_month_year(request.form.get("monthYear"))
        summary = container.payroll_upload_service.process_file(
            io.BytesIO(file.read()),
            month_year=month_year,
            filename=file.filename,
            total_holidays=request.form.get("totalHolidays"),
        )
        return jsonify(
            {
                "success": True,
                "message": f"Processed {summary.processed_count} employees for {month_year}",
                **summary.to_dict(),
            }
        )

    @app.route("/api/attendance/", methods=["GET"], endpoint="attendance_list")
    @json_errors
    def list_for_month():
        month_year = require_month_year(request.args.get("monthYear"))
        exposed_only = request.args.get("exposedOnly", "").lower() in {"1", "true"}
        items = records.list_for_month(month_year, exposed_only=exposed_only)
        return jsonify({"success": True, "monthYear": month_year, "count": len(items), "records": [r.to_dict() for r in items]})

    @app.route("/api/attendance/user/<employee_id>", methods=["GET"], endpoint="attendance_for_user")
    @json_errors
    def list_for_employee(employee_id: str):
        include_hidden = request.args.get("includeHidden", "").lower() in {"1", "true"}
        items = records.list_for_employee(employee_id, exposed_only=not include_hidden)
        return jsonify({"success": True, "employeeId": employee_id, "count": len(items), "records": [r.to_dict() for r in items]})

    @app.route("/api/attendance/adjust/<int:record_id>", methods=["PUT"], endpoint="attendance_adjust")
    @json_errors
    def adjust(record_id: int):
        data = json_body()
        record, adjustment = records.adjust(record_id, data.get("adjustedSalary"), data.get("reason") or "")
        return jsonify(
            {
                "success": True,
                "message": "Salary adjusted successfully",
                "record": record.to_dict(),
                "adjustment": adjustment.to_dict(),
            }
        )

    @app.route("/api/attendance/salary-increase/<int:record_id>", methods=["PUT"], endpoint="attendance_salary_increase")
    @json_errors
    def salary_increase(record_id: int):
        data = json_body()
        record, adjustment = records.increase(record_id, data.get("amount"), data.get("reason") or "")
        return jsonify(
            {
                "success": True,
                "message": "Salary increased successfully",
                "record": record.to_dict(),
                "adjustment": adjustment.to_dict(),
                "originalSalary": adjustment.original_salary,
                "newSalary": adjustment.adjusted_salary,
            }
        )

    @app.route("/api/attendance/salary-decrease/<int:record_id>", methods=["PUT"], endpoint="attendance_salary_decrease")
    @json_errors
    def salary_decrease(record_id: int):
        data = json_body()
        record, adjustment = records.decrease(record_id, data.get("amount"), data.get("reason") or "")
        return jsonify(
            {
                "success": True,
                "message": "Salary decreased successfully",
                "record": record.to_dict(),
                "adjustment": adjustment.to_dict(),
                "originalSalary": adjustment.original_salary,
                "newSalary": adjustment.adjusted_salary,
            }
        )

    @app.route("/api/attendance/expose/<int:record_id>", methods=["PUT"], endpoint="attendance_expose")
    @json_errors
    def expose(record_id: int):
        record = records.expose(record_id)
        return jsonify({"success": True, "message": "Record exposed to employee", "record": record.to_dict()})

    @app.route("/api/attendance/expose-all", methods=["PUT"], endpoint="attendance_expose_all")
    @json_errors
    def expose_all():
        data = json_body()
        count = records.expose_month(data.get("monthYear"))
        return jsonify({"success": True, "message": f"Exposed {count} records to employees", "modifiedCount": count})

    @app.route("/api/attendance/holidays", methods=["POST"], endpoint="attendance_add_holidays")
    @json_errors
    def add_holidays():
        data = json_body()
        items = data.get("holidays")
        if items is None:
            items = [data]
        if not isinstance(items, list) or not items:
            raise ValidationError("Holidays array is required")

        month_year = data.get("monthYear")
        if month_year:
            month_year = require_month_year(month_year)

        created = []
        for item in items:
            if not isinstance(item, dict):
                raise ValidationError("Each holiday must be an object with date and name")
            if month_year and not str(item.get("date") or "").startswith(month_year):
                raise ValidationError(f"Holiday date {item.get('date')} is outside {month_year}")
            created.append(
                holidays.add(
                    holiday_date=item.get("date"),
                    name=item.get("name"),
                    holiday_type=item.get("type"),
                    description=item.get("description"),
                )
            )
        return jsonify(
            {
                "success": True,
                "message": f"Added {len(created)} holidays",
                "holidays": [h.to_dict() for h in created],
            }
        ), 201

    @app.route("/api/attendance/holidays/<month_year>", methods=["GET"], endpoint="attendance_list_holidays")
    @json_errors
    def list_holidays(month_year: str):
        items = holidays.list_for_month(month_year)
        return jsonify({"success": True, "monthYear": month_year, "count": len(items), "holidays": [h.to_dict() for h in items]})

    @app.route("/api/attendance/holidays/<int:holiday_id>", methods=["DELETE"], endpoint="attendance_delete_holiday")
    @json_errors
    def delete_holiday(holiday_id: int):
        holidays.deactivate(holiday_id)
        return jsonify({"success": True, "message": "Holiday deleted successfully"})
