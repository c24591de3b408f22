from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_month_year, now_local
from ..common.http import json_body, json_errors
from ..common.validators import require_int_in_range, require_iso_date, require_month_year, require_number
from ..container import Container
from ..core.enums import CalculationMethod
from ..core.exceptions import ValidationError


def _flag(value) -> bool:
    return str(value or "").strip().lower() in {"1", "true", "yes"}


def register(app: Flask, container: Container) -> None:
    calendar = container.calendar

    def _working_days_payload(month_year: str):
        admin_count = container.company_holiday_service.resolve_admin_holiday_count(month_year)
        info = container.working_days.compute(
            month_year,
            exclude_saturdays=_flag(request.args.get("excludeSaturdays")),
            admin_holiday_count=admin_count,
        )
        return jsonify({"success": True, "workingDays": info.to_dict()})

    @app.route("/api/calendar/holidays/<year>", methods=["GET"], endpoint="calendar_holidays_year")
    @json_errors
    def holidays_for_year(year: str):
        year_no = require_int_in_range(year, "year", low=2020, high=2030)
        holidays = calendar.holidays_for_year(year_no)
        country, state = calendar.location
        return jsonify(
            {
                "success": True,
                "year": year_no,
                "country": country,
                "state": state,
                "count": len(holidays),
                "holidays": [h.to_dict() for h in holidays],
            }
        )

    @app.route("/api/calendar/holidays/month/<month_year>", methods=["GET"], endpoint="calendar_holidays_month")
    @json_errors
    def holidays_for_month(month_year: str):
        month_year = require_month_year(month_year)
        holidays = calendar.holidays_for_month(month_year)
        return jsonify(
            {
                "success": True,
                "monthYear": month_year,
                "count": len(holidays),
                "holidays": [h.to_dict() for h in holidays],
            }
        )

    @app.route("/api/calendar/working-days/current", methods=["GET"], endpoint="calendar_working_days_current")
    @json_errors
    def working_days_current():
        return _working_days_payload(format_month_year(now_local().date()))

    @app.route("/api/calendar/working-days/<month_year>", methods=["GET"], endpoint="calendar_working_days")
    @json_errors
    def working_days(month_year: str):
        return _working_days_payload(require_month_year(month_year))

    @app.route("/api/calendar/check-holiday/<day>", methods=["GET"], endpoint="calendar_check_holiday")
    @json_errors
    def check_holiday(day: str):
        parsed = require_iso_date(day)
        holiday = calendar.is_holiday(parsed)
        return jsonify(
            {
                "success": True,
                "date": parsed.isoformat(),
                "dayName": parsed.strftime("%A"),
                "isHoliday": holiday is not None,
                "holiday": holiday.to_dict() if holiday else None,
                "isSunday": calendar.is_sunday(parsed),
                "isWeekend": calendar.is_weekend(parsed),
            }
        )

    @app.route("/api/calendar/upcoming-holidays", methods=["GET"], endpoint="calendar_upcoming_holidays")
    @json_errors
    def upcoming_holidays():
        days = require_int_in_range(request.args.get("days", 30), "days", low=1, high=365)
        holidays = calendar.upcoming_holidays(days)
        return jsonify(
            {
                "success": True,
                "days": days,
                "count": len(holidays),
                "holidays": [h.to_dict() for h in holidays],
            }
        )

    @app.route("/api/calendar/calculate-salary", methods=["POST"], endpoint="calendar_calculate_salary")
    @json_errors
    def calculate_salary():
        data = json_body()
        month_year = require_month_year(data.get("monthYear"))
        hours_worked = require_number(data.get("hoursWorked"), "hoursWorked", minimum=0)
        days_present = require_number(data.get("daysPresent", 0), "daysPresent", minimum=0)
        admin_holidays = _optional_number(data, "adminHolidays", minimum=0)

        config = container.default_salary_config.with_overrides(
            base_salary=_optional_number(data, "baseSalary", strictly_positive=True),
            daily_wage=_optional_number(data, "dailyWage", strictly_positive=True),
            salary_calculation_method=_method(data.get("salaryCalculationMethod")),
        )
        breakdown = container.salary_engine.calculate_dynamic_salary(
            hours_worked,
            days_present,
            month_year,
            config,
            admin_holiday_count=int(admin_holidays) if admin_holidays is not None else None,
        )
        return jsonify({"success": True, "calculation": breakdown.to_dict()})

    @app.route("/api/calendar/settings", methods=["GET"], endpoint="calendar_settings")
    @json_errors
    def get_settings():
        return jsonify({"success": True, "settings": _settings_payload(container)})

    @app.route("/api/calendar/settings", methods=["PUT"], endpoint="calendar_update_settings")
    @json_errors
    def update_settings():
        data = json_body()
        country = (data.get("country") or "").strip()
        if country:
            calendar.set_location(country.upper(), (data.get("state") or "").strip().upper() or None)
        return jsonify(
            {
                "success": True,
                "message": "Calendar settings updated successfully",
                "settings": _settings_payload(container),
            }
        )

    @app.route("/api/calendar/clear-cache", methods=["POST"], endpoint="calendar_clear_cache")
    @json_errors
    def clear_cache():
        calendar.clear_cache()
        return jsonify({"success": True, "message": "Calendar cache cleared successfully"})


def _optional_number(data: dict, key: str, **rules):
    value = data.get(key)
    if value in (None, ""):
        return None
    return require_number(value, key, **rules)


def _method(value):
    if value in (None, ""):
        return None
    try:
        return CalculationMethod(str(value).strip().lower())
    except ValueError:
        raise ValidationError("Invalid salaryCalculationMethod. Use auto, daily_wage or proportional") from None


def _settings_payload(container: Container) -> dict:
    country, state = container.calendar.location
    config = container.default_salary_config
    return {
        "country": country,
        "state": state,
        "defaultBaseSalary": config.base_salary,
        "defaultDailyWage": config.daily_wage,
        "maxWorkingDays": config.max_working_days,
        "expectedHoursPerDay": config.expected_hours_per_day,
        "excludeSaturdays": False,
    }
