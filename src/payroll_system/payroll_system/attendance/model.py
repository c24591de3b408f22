from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Optional

from ..common.datetime_utils import as_date
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class ParsedCell:
    """Normalized reading of one spreadsheet attendance cell."""

    check_in: Optional[str]
    check_out: Optional[str]
    hours_worked: float
    status: AttendanceStatus

    @classmethod
    def absent(cls) -> "ParsedCell":
        return cls(check_in=None, check_out=None, hours_worked=0, status=AttendanceStatus.ABSENT)


@dataclass
class DailyAttendanceRecord:
    """One (employee, date) attendance entry inside an upload batch.

    Mutated only when a duplicate date upgrades it during aggregation.
    """

    date: date
    check_in: Optional[str]
    check_out: Optional[str]
    hours_worked: float
    status: AttendanceStatus

    @property
    def contribution(self) -> tuple[float, float]:
        """(days, hours) this record adds to the employee totals."""
        if self.status == AttendanceStatus.ABSENT:
            return 0.0, 0.0
        return self.status.day_value, float(self.hours_worked)

    def apply(self, parsed: ParsedCell) -> None:
        self.check_in = parsed.check_in
        self.check_out = parsed.check_out
        self.hours_worked = parsed.hours_worked
        self.status = parsed.status

    def to_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "checkIn": self.check_in or "",
            "checkOut": self.check_out or "",
            "hoursWorked": self.hours_worked,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DailyAttendanceRecord":
        return cls(
            date=as_date(data["date"]),
            check_in=data.get("checkIn") or None,
            check_out=data.get("checkOut") or None,
            hours_worked=float(data.get("hoursWorked") or 0),
            status=AttendanceStatus(data.get("status") or AttendanceStatus.ABSENT.value),
        )


@dataclass
class EmployeeMonthTotals:
    employee_id: str
    name: str
    dept: str
    attendance_details: list[DailyAttendanceRecord] = field(default_factory=list)
    total_days_present: float = 0.0
    total_hours_worked: float = 0.0

    def record_for(self, day: date) -> Optional[DailyAttendanceRecord]:
        for record in self.attendance_details:
            if record.date == day:
                return record
        return None


@dataclass(frozen=True)
class UploadRow:
    """One attendance cell together with the employee it belongs to."""

    employee_id: str
    name: str
    dept: str
    date: date
    raw_value: Any
