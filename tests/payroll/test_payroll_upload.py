from datetime import date, timedelta

import pytest

from src.payroll_system.payroll_system.attendance.model import UploadRow
from src.payroll_system.payroll_system.core.enums import CalculationMethod
from src.payroll_system.payroll_system.core.exceptions import SpreadsheetError, ValidationError


def _full_month_rows(employee_id, name, *, value="09:00 17:00"):
    rows = []
    day = date(2025, 8, 1)
    while day.month == 8:
        if day.weekday() != 6:
            rows.append(UploadRow(employee_id=employee_id, name=name, dept="Ops", date=day, raw_value=value))
        day += timedelta(days=1)
    return rows


def test_upload_builds_one_record_per_employee(container, records_repo):
    rows = _full_month_rows("E001", "Asha") + _full_month_rows("E002", "Ravi")

    summary = container.payroll_upload_service.process_rows(rows, "2025-08")

    assert summary.processed_count == 2
    assert summary.admin_holiday_count == 0
    by_id = {r.employee_id: r for r in records_repo.list_for_month("2025-08")}

    asha = by_id["E001"]
    assert asha.hours_worked == 208
    assert asha.calculation_method == CalculationMethod.DAILY_WAGE
    assert asha.calculated_salary == asha.adjusted_salary == 6708
    assert asha.calculated_calendar_days == 8.67
    assert asha.sunday_attendance == 0
    assert not asha.exposed

    # E002 has a base-salary override above the proportional threshold
    ravi = by_id["E002"]
    assert ravi.base_salary == 25000
    assert ravi.calculation_method == CalculationMethod.PROPORTIONAL
    assert ravi.calculated_salary == 25000


def test_reupload_replaces_the_whole_month(container, records_repo):
    service = container.payroll_upload_service
    service.process_rows(_full_month_rows("E001", "Asha") + _full_month_rows("E002", "Ravi"), "2025-08")
    service.process_rows(_full_month_rows("E003", "Meena", value="HD"), "2025-08")

    records = records_repo.list_for_month("2025-08")

    assert [r.employee_id for r in records] == ["E003"]
    assert records[0].days_present == 26 * 0.5


def test_declared_company_holidays_feed_the_admin_count(container, records_repo):
    container.company_holiday_service.add(holiday_date="2025-08-11", name="Foundation Day")

    summary = container.payroll_upload_service.process_rows(_full_month_rows("E001", "Asha"), "2025-08")

    assert summary.admin_holiday_count == 1
    assert summary.records[0].total_working_days == 25

    summary = container.payroll_upload_service.process_rows(
        _full_month_rows("E001", "Asha"), "2025-08", total_holidays="3"
    )
    assert summary.admin_holiday_count == 3
    assert summary.records[0].total_working_days == 23


def test_sunday_marks_are_flagged_not_dropped(container):
    rows = _full_month_rows("E001", "Asha") + [
        UploadRow(employee_id="E001", name="Asha", dept="Ops", date=date(2025, 8, 3), raw_value="P")
    ]

    record = container.payroll_upload_service.process_rows(rows, "2025-08").records[0]

    assert record.sunday_attendance == 1
    assert record.valid_working_days == 26
    assert record.validation_warnings == ["Attendance marked on Sunday: 2025-08-03"]
    assert record.hours_worked == 216


def test_empty_upload_is_rejected(container):
    with pytest.raises(SpreadsheetError):
        container.payroll_upload_service.process_rows([], "2025-08")

    with pytest.raises(ValidationError):
        container.payroll_upload_service.process_rows(_full_month_rows("E001", "Asha"), "08-2025")


def test_overflowing_cell_reads_absent_and_upload_completes(container, records_repo):
    rows = _full_month_rows("E001", "Asha", value="P")
    rows[-1] = UploadRow(employee_id="E001", name="Asha", dept="Ops", date=rows[-1].date, raw_value="1e400")

    summary = container.payroll_upload_service.process_rows(rows, "2025-08")

    record = summary.records[0]
    assert record.hours_worked == 200
    assert record.calculated_salary == 25 * 258
    assert record.calculated_calendar_days == 8.33
    assert not record.fallback_used
    assert record.attendance_details[-1].status == "Absent"
    assert len(records_repo.list_for_month("2025-08")) == 1
