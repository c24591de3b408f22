from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ..holiday_calendar.model import HolidayRecord


@dataclass(frozen=True)
class NonWorkingDay:
    date: date
    reason: str
    day_name: str

    def to_dict(self) -> dict:
        return {"date": self.date.isoformat(), "reason": self.reason, "dayName": self.day_name}


@dataclass(frozen=True)
class WorkingDaysCalculation:
    """Step-by-step numbers shown next to the working-days figure."""

    total_days: int
    minus_weekends: int
    minus_holidays: int
    final_working_days: int

    def to_dict(self) -> dict:
        return {
            "totalDays": self.total_days,
            "minusWeekends": self.minus_weekends,
            "minusHolidays": self.minus_holidays,
            "finalWorkingDays": self.final_working_days,
        }


@dataclass(frozen=True)
class WorkingDaysInfo:
    month_year: str
    total_days: int
    working_days: int
    required_working_days: int
    sunday_count: int
    saturday_count: int
    weekends: int
    holiday_count: int
    holidays: tuple[HolidayRecord, ...] = ()
    working_days_list: tuple[date, ...] = ()
    non_working_days: tuple[NonWorkingDay, ...] = ()
    calculation: WorkingDaysCalculation | None = None
    admin_holiday_count: int = 0
    fallback_used: bool = False

    def to_dict(self) -> dict:
        return {
            "monthYear": self.month_year,
            "totalDays": self.total_days,
            "workingDays": self.working_days,
            "requiredWorkingDays": self.required_working_days,
            "sundayCount": self.sunday_count,
            "saturdayCount": self.saturday_count,
            "weekends": self.weekends,
            "holidayCount": self.holiday_count,
            "adminHolidayCount": self.admin_holiday_count,
            "holidays": [h.to_dict() for h in self.holidays],
            "workingDaysList": [d.isoformat() for d in self.working_days_list],
            "nonWorkingDays": [d.to_dict() for d in self.non_working_days],
            "calculation": self.calculation.to_dict() if self.calculation else None,
            "fallbackUsed": self.fallback_used,
        }


@dataclass(frozen=True)
class AttendanceValidation:
    valid_working_days: int
    sunday_attendance: int
    total_attendance_records: int
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "validWorkingDays": self.valid_working_days,
            "sundayAttendance": self.sunday_attendance,
            "totalAttendanceRecords": self.total_attendance_records,
            "warnings": list(self.warnings),
        }
