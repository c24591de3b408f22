from __future__ import annotations

from typing import Optional, Sequence

from ..attendance.model import DailyAttendanceRecord
from ..core.enums import CalculationMethod
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, from_json_column, to_json_column
from .model import SalaryAdjustment, SalaryRecord
from .repository import SalaryRecordRepository

_FIELDS = (
    "employee_id",
    "name",
    "dept",
    "month_year",
    "days_present",
    "calculated_days_present",
    "calculated_calendar_days",
    "hours_worked",
    "total_working_days",
    "working_days_in_month",
    "expected_total_hours",
    "avg_hours_per_day",
    "daily_wage",
    "base_salary",
    "calculation_method",
    "calculated_salary",
    "adjusted_salary",
    "attendance_percentage",
    "hours_percentage",
    "salary_percentage",
    "calculation_formula",
    "attendance_details",
    "sunday_attendance",
    "valid_working_days",
    "validation_warnings",
    "exposed",
    "fallback_used",
)

_SELECT = f"SELECT record_id, {', '.join(_FIELDS)}, created_at, updated_at FROM salary_records"


def _record_params(r: SalaryRecord) -> tuple:
    return (
        r.employee_id,
        r.name,
        r.dept,
        r.month_year,
        r.days_present,
        r.calculated_days_present,
        r.calculated_calendar_days,
        r.hours_worked,
        int(r.total_working_days),
        int(r.working_days_in_month),
        r.expected_total_hours,
        r.avg_hours_per_day,
        r.daily_wage,
        r.base_salary,
        r.calculation_method.value,
        r.calculated_salary,
        r.adjusted_salary,
        r.attendance_percentage,
        r.hours_percentage,
        r.salary_percentage,
        r.calculation_formula,
        to_json_column([d.to_dict() for d in r.attendance_details]),
        int(r.sunday_attendance),
        int(r.valid_working_days),
        to_json_column(list(r.validation_warnings)),
        1 if r.exposed else 0,
        1 if r.fallback_used else 0,
    )


def _row_to_record(r: dict) -> SalaryRecord:
    return SalaryRecord(
        record_id=int(r["record_id"]),
        employee_id=r["employee_id"],
        name=r["name"],
        dept=r["dept"],
        month_year=r["month_year"],
        days_present=float(r["days_present"]),
        calculated_days_present=float(r["calculated_days_present"]),
        calculated_calendar_days=float(r["calculated_calendar_days"]),
        hours_worked=float(r["hours_worked"]),
        total_working_days=int(r["total_working_days"]),
        working_days_in_month=int(r["working_days_in_month"]),
        expected_total_hours=float(r["expected_total_hours"]),
        avg_hours_per_day=float(r["avg_hours_per_day"]),
        daily_wage=float(r["daily_wage"]),
        base_salary=float(r["base_salary"]),
        calculation_method=CalculationMethod(r["calculation_method"]),
        calculated_salary=float(r["calculated_salary"]),
        adjusted_salary=float(r["adjusted_salary"]),
        attendance_percentage=float(r["attendance_percentage"]),
        hours_percentage=float(r["hours_percentage"]),
        salary_percentage=float(r["salary_percentage"]),
        calculation_formula=r.get("calculation_formula") or "",
        attendance_details=[
            DailyAttendanceRecord.from_dict(d) for d in from_json_column(r.get("attendance_details"), [])
        ],
        sunday_attendance=int(r.get("sunday_attendance") or 0),
        valid_working_days=int(r.get("valid_working_days") or 0),
        validation_warnings=list(from_json_column(r.get("validation_warnings"), [])),
        exposed=bool(r["exposed"]),
        fallback_used=bool(r.get("fallback_used")),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


def _matched(cur, record_id: int) -> bool:
    # MySQL reports changed rows, so an UPDATE to the same value counts 0.
    if cur.rowcount > 0:
        return True
    cur.execute("SELECT record_id FROM salary_records WHERE record_id=%s", (int(record_id),))
    return fetchone(cur) is not None


class MySQLSalaryRecordRepository(SalaryRecordRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def replace_month(self, month_year: str, records: Sequence[SalaryRecord]) -> int:
        placeholders = ",".join(["%s"] * len(_FIELDS))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM salary_records WHERE month_year=%s", (month_year,))
            if records:
                cur.executemany(
                    f"INSERT INTO salary_records({', '.join(_FIELDS)}) VALUES({placeholders})",
                    [_record_params(r) for r in records],
                )
            return len(records)

    def list_for_month(self, month_year: str, *, exposed_only: bool = False) -> Sequence[SalaryRecord]:
        where = "WHERE month_year=%s" + (" AND exposed=1" if exposed_only else "")
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} {where} ORDER BY name", (month_year,))
            return [_row_to_record(r) for r in fetchall(cur)]

    def list_for_employee(self, employee_id: str, *, exposed_only: bool = False) -> Sequence[SalaryRecord]:
        where = "WHERE employee_id=%s" + (" AND exposed=1" if exposed_only else "")
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} {where} ORDER BY month_year DESC", (str(employee_id),))
            return [_row_to_record(r) for r in fetchall(cur)]

    def get_by_id(self, record_id: int) -> Optional[SalaryRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE record_id=%s", (int(record_id),))
            r = fetchone(cur)
            return _row_to_record(r) if r else None

    def update_adjusted_salary(self, record_id: int, adjusted_salary: float) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE salary_records SET adjusted_salary=%s WHERE record_id=%s",
                (adjusted_salary, int(record_id)),
            )
            return _matched(cur, record_id)

    def set_exposed(self, record_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE salary_records SET exposed=1 WHERE record_id=%s", (int(record_id),))
            return _matched(cur, record_id)

    def expose_month(self, month_year: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE salary_records SET exposed=1 WHERE month_year=%s AND exposed=0", (month_year,))
            return int(cur.rowcount)

    def add_adjustment(self, adjustment: SalaryAdjustment) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO salary_adjustments(
                    record_id, employee_id, month_year, original_salary, adjusted_salary,
                    adjustment_type, adjustment_amount, reason
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(adjustment.record_id),
                    adjustment.employee_id,
                    adjustment.month_year,
                    adjustment.original_salary,
                    adjustment.adjusted_salary,
                    adjustment.adjustment_type.value,
                    adjustment.adjustment_amount,
                    adjustment.reason,
                ),
            )
            return int(cur.lastrowid)
