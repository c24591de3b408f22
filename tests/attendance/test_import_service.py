from datetime import date

from src.payroll_system.payroll_system.attendance.aggregator import merge
from src.payroll_system.payroll_system.attendance.model import EmployeeMonthTotals, ParsedCell, UploadRow
from src.payroll_system.payroll_system.attendance.rules.status_keyword_rule import HALF_DAY_CELL, PRESENT_CELL
from src.payroll_system.payroll_system.attendance.service import AttendanceImportService
from src.payroll_system.payroll_system.core.enums import AttendanceStatus


def _row(day, value, *, employee_id="E001", name="Asha", dept="Ops"):
    return UploadRow(employee_id=employee_id, name=name, dept=dept, date=date(2025, 8, day), raw_value=value)


def test_merge_only_upgrades_a_repeated_date():
    totals = EmployeeMonthTotals(employee_id="E001", name="Asha", dept="Ops")
    day = date(2025, 8, 1)

    merge(totals, day, HALF_DAY_CELL)
    merge(totals, day, ParsedCell.absent())
    assert totals.total_days_present == 0.5
    assert totals.total_hours_worked == 4

    merge(totals, day, PRESENT_CELL)
    merge(totals, day, HALF_DAY_CELL)
    assert len(totals.attendance_details) == 1
    assert totals.attendance_details[0].status == AttendanceStatus.PRESENT
    assert totals.total_days_present == 1
    assert totals.total_hours_worked == 8


def test_merge_is_idempotent_for_same_cell():
    totals = EmployeeMonthTotals(employee_id="E001", name="Asha", dept="Ops")

    for _ in range(3):
        merge(totals, date(2025, 8, 1), PRESENT_CELL)

    assert totals.total_days_present == 1
    assert totals.total_hours_worked == 8


def test_aggregate_groups_by_name_and_sums_days():
    rows = [
        _row(1, "09:00 17:30"),
        _row(2, "HD"),
        _row(4, "A"),
        _row(1, "P", employee_id="E002", name="Ravi", dept=""),
        _row(2, ""),
    ]

    employees = {e.name: e for e in AttendanceImportService().aggregate(rows, "2025-08")}

    asha = employees["Asha"]
    assert asha.total_hours_worked == 12.5
    assert asha.total_days_present == 1.5
    assert [d.status for d in asha.attendance_details] == [
        AttendanceStatus.PRESENT,
        AttendanceStatus.HALF_DAY,
        AttendanceStatus.ABSENT,
    ]

    ravi = employees["Ravi"]
    assert ravi.dept == "General"
    assert ravi.total_hours_worked == 8


def test_aggregate_skips_rows_without_identity_or_outside_month():
    rows = [
        _row(1, "P", employee_id=""),
        _row(1, "P", name="  "),
        UploadRow(employee_id="E001", name="Asha", dept="Ops", date=date(2025, 9, 1), raw_value="P"),
        _row(5, "8"),
    ]

    employees = AttendanceImportService().aggregate(rows, "2025-08")

    assert len(employees) == 1
    assert employees[0].total_hours_worked == 8
    assert [d.date for d in employees[0].attendance_details] == [date(2025, 8, 5)]
