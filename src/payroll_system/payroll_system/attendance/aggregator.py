from __future__ import annotations

from datetime import date

from .model import DailyAttendanceRecord, EmployeeMonthTotals, ParsedCell


def merge(totals: EmployeeMonthTotals, day: date, parsed: ParsedCell) -> DailyAttendanceRecord:
    """Fold one parsed cell into an employee's month.

    A repeated date only ever upgrades (Present > Half Day > Absent). Totals
    are adjusted incrementally and never rescanned from the details.
    """

    existing = totals.record_for(day)
    if existing is None:
        record = DailyAttendanceRecord(
            date=day,
            check_in=parsed.check_in,
            check_out=parsed.check_out,
            hours_worked=parsed.hours_worked,
            status=parsed.status,
        )
        totals.attendance_details.append(record)
        _add(totals, record.contribution, 1)
        return record

    if parsed.status.rank <= existing.status.rank:
        return existing

    _add(totals, existing.contribution, -1)
    existing.apply(parsed)
    _add(totals, existing.contribution, 1)
    return existing


def _add(totals: EmployeeMonthTotals, contribution: tuple[float, float], sign: int) -> None:
    days, hours = contribution
    totals.total_days_present += sign * days
    totals.total_hours_worked += sign * hours
