from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..attendance.model import DailyAttendanceRecord
from ..core.enums import AdjustmentType, CalculationMethod
from ..holiday_calendar.model import HolidayRecord
from ..working_days.model import NonWorkingDay, WorkingDaysInfo


@dataclass(frozen=True)
class SalaryDetail:
    """What the UI shows under 'how was this calculated'."""

    daily_rate: float
    calculation_formula: str
    days_worked: float
    expected_hours: float
    holidays: tuple[HolidayRecord, ...] = ()
    non_working_days: tuple[NonWorkingDay, ...] = ()

    def to_dict(self) -> dict:
        return {
            "dailyRate": self.daily_rate,
            "calculationFormula": self.calculation_formula,
            "daysWorked": self.days_worked,
            "expectedHours": self.expected_hours,
            "holidays": [h.to_dict() for h in self.holidays],
            "nonWorkingDays": [d.to_dict() for d in self.non_working_days],
        }


@dataclass(frozen=True)
class SalaryBreakdown:
    base_salary: float
    daily_wage: float
    calculation_method: CalculationMethod
    required_days: int
    working_days_in_month: int
    days_present: float
    hours_worked: float
    expected_total_hours: float
    avg_hours_per_day: float
    avg_hours_per_month: float
    calculated_salary: int
    adjusted_salary: int
    attendance_percentage: float
    hours_percentage: float
    salary_percentage: float
    salary_breakdown: SalaryDetail
    working_days_info: Optional[WorkingDaysInfo] = None
    fallback_used: bool = False

    def to_dict(self) -> dict:
        return {
            "baseSalary": self.base_salary,
            "dailyWage": self.daily_wage,
            "calculationMethod": self.calculation_method.value,
            "requiredDays": self.required_days,
            "workingDaysInMonth": self.working_days_in_month,
            "daysPresent": self.days_present,
            "hoursWorked": self.hours_worked,
            "expectedTotalHours": self.expected_total_hours,
            "avgHoursPerDay": self.avg_hours_per_day,
            "avgHoursPerMonth": self.avg_hours_per_month,
            "calculatedSalary": self.calculated_salary,
            "adjustedSalary": self.adjusted_salary,
            "attendancePercentage": self.attendance_percentage,
            "hoursPercentage": self.hours_percentage,
            "salaryPercentage": self.salary_percentage,
            "salaryBreakdown": self.salary_breakdown.to_dict(),
            "workingDaysInfo": self.working_days_info.to_dict() if self.working_days_info else None,
            "fallbackUsed": self.fallback_used,
        }


@dataclass(frozen=True)
class SalaryRecord:
    """Persisted per-employee, per-month salary row.

    `adjusted_salary` is the authoritative figure; admins edit it
    independently of `calculated_salary`.
    """

    record_id: Optional[int]
    employee_id: str
    name: str
    dept: str
    month_year: str
    days_present: float
    calculated_days_present: float
    calculated_calendar_days: float
    hours_worked: float
    total_working_days: int
    working_days_in_month: int
    expected_total_hours: float
    avg_hours_per_day: float
    daily_wage: float
    base_salary: float
    calculation_method: CalculationMethod
    calculated_salary: float
    adjusted_salary: float
    attendance_percentage: float
    hours_percentage: float
    salary_percentage: float
    calculation_formula: str
    attendance_details: list[DailyAttendanceRecord] = field(default_factory=list)
    sunday_attendance: int = 0
    valid_working_days: int = 0
    validation_warnings: list[str] = field(default_factory=list)
    exposed: bool = False
    fallback_used: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.record_id,
            "employeeId": self.employee_id,
            "name": self.name,
            "dept": self.dept,
            "monthYear": self.month_year,
            "daysPresent": self.days_present,
            "calculatedDaysPresent": self.calculated_days_present,
            "calculatedCalendarDays": self.calculated_calendar_days,
            "hoursWorked": self.hours_worked,
            "totalWorkingDays": self.total_working_days,
            "workingDaysInMonth": self.working_days_in_month,
            "expectedTotalHours": self.expected_total_hours,
            "avgHoursPerDay": self.avg_hours_per_day,
            "dailyWage": self.daily_wage,
            "baseSalary": self.base_salary,
            "calculationMethod": self.calculation_method.value,
            "calculatedSalary": self.calculated_salary,
            "adjustedSalary": self.adjusted_salary,
            "attendancePercentage": self.attendance_percentage,
            "hoursPercentage": self.hours_percentage,
            "salaryPercentage": self.salary_percentage,
            "calculationFormula": self.calculation_formula,
            "attendanceDetails": [d.to_dict() for d in self.attendance_details],
            "sundayAttendance": self.sunday_attendance,
            "validWorkingDays": self.valid_working_days,
            "validationWarnings": list(self.validation_warnings),
            "exposed": self.exposed,
            "fallbackUsed": self.fallback_used,
        }


@dataclass(frozen=True)
class SalaryAdjustment:
    """Audit row written for every manual salary change."""

    record_id: int
    employee_id: str
    month_year: str
    original_salary: float
    adjusted_salary: float
    adjustment_type: AdjustmentType
    adjustment_amount: float
    reason: str = ""
    adjustment_id: Optional[int] = None
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.adjustment_id,
            "recordId": self.record_id,
            "employeeId": self.employee_id,
            "monthYear": self.month_year,
            "originalSalary": self.original_salary,
            "adjustedSalary": self.adjusted_salary,
            "adjustmentType": self.adjustment_type.value,
            "adjustmentAmount": self.adjustment_amount,
            "reason": self.reason,
        }
