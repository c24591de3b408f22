from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from ..attendance.model import EmployeeMonthTotals, UploadRow
from ..attendance.service import AttendanceImportService
from ..attendance.spreadsheet import read_upload_rows
from ..common.datetime_utils import round_half_up
from ..common.validators import require_month_year
from ..core.constants import HOURS_TO_DAYS_DIVISOR
from ..core.exceptions import SpreadsheetError
from ..holiday_calendar.company_holiday_service import CompanyHolidayService
from ..working_days.calculator import WorkingDaysCalculator
from .config import SalaryConfig
from .directory import EmployeeSalaryDirectory
from .engine import SalaryEngine
from .model import SalaryRecord
from .repository import SalaryRecordRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadSummary:
    month_year: str
    admin_holiday_count: int
    records: list[SalaryRecord] = field(default_factory=list)

    @property
    def processed_count(self) -> int:
        return len(self.records)

    def to_dict(self) -> dict:
        return {
            "monthYear": self.month_year,
            "processedCount": self.processed_count,
            "adminHolidayCount": self.admin_holiday_count,
            "records": [r.to_dict() for r in self.records],
        }


class PayrollUploadService:
    """Upload pipeline: sheet rows -> monthly totals -> salary records.

    A new upload for a month supersedes every record of that month.
    """

    def __init__(
        self,
        records: SalaryRecordRepository,
        engine: SalaryEngine,
        working_days: WorkingDaysCalculator,
        company_holidays: CompanyHolidayService,
        directory: EmployeeSalaryDirectory,
        *,
        default_config: Optional[SalaryConfig] = None,
        importer: Optional[AttendanceImportService] = None,
    ):
        self._records = records
        self._engine = engine
        self._working_days = working_days
        self._company_holidays = company_holidays
        self._directory = directory
        self._default_config = default_config or SalaryConfig()
        self._importer = importer or AttendanceImportService()

    def process_file(self, source, *, month_year: str, filename: Optional[str] = None, total_holidays=None) -> UploadSummary:
        month_year = require_month_year(month_year)
        rows = read_upload_rows(source, month_year, filename=filename)
        return self.process_rows(rows, month_year, total_holidays=total_holidays)

    def process_rows(self, rows: Iterable[UploadRow], month_year: str, total_holidays=None) -> UploadSummary:
        month_year = require_month_year(month_year)
        employees = self._importer.aggregate(rows, month_year)
        if not employees:
            raise SpreadsheetError(f"No employee attendance found for {month_year}")

        admin_count = self._company_holidays.resolve_admin_holiday_count(month_year, total_holidays)
        records = [self._build_record(e, month_year, admin_count) for e in employees]

        self._records.replace_month(month_year, records)
        logger.info("Processed %d employees for %s (admin holidays=%d)", len(records), month_year, admin_count)
        return UploadSummary(month_year=month_year, admin_holiday_count=admin_count, records=records)

    def _build_record(self, totals: EmployeeMonthTotals, month_year: str, admin_count: int) -> SalaryRecord:
        config = self._directory.get_config(totals.employee_id, totals.name) or self._default_config
        breakdown = self._engine.calculate_dynamic_salary(
            totals.total_hours_worked,
            totals.total_days_present,
            month_year,
            config,
            admin_holiday_count=admin_count,
        )
        validation = self._working_days.validate_attendance(totals.attendance_details, month_year)
        if validation.sunday_attendance:
            logger.info("%s has %d Sunday attendance marks in %s", totals.name, validation.sunday_attendance, month_year)

        return SalaryRecord(
            record_id=None,
            employee_id=totals.employee_id,
            name=totals.name,
            dept=totals.dept,
            month_year=month_year,
            days_present=totals.total_days_present,
            calculated_days_present=breakdown.days_present,
            calculated_calendar_days=round_half_up(breakdown.hours_worked / HOURS_TO_DAYS_DIVISOR, 2),
            hours_worked=breakdown.hours_worked,
            total_working_days=breakdown.required_days,
            working_days_in_month=breakdown.working_days_in_month,
            expected_total_hours=breakdown.expected_total_hours,
            avg_hours_per_day=breakdown.avg_hours_per_day,
            daily_wage=breakdown.daily_wage,
            base_salary=breakdown.base_salary,
            calculation_method=breakdown.calculation_method,
            calculated_salary=breakdown.calculated_salary,
            adjusted_salary=breakdown.adjusted_salary,
            attendance_percentage=breakdown.attendance_percentage,
            hours_percentage=breakdown.hours_percentage,
            salary_percentage=breakdown.salary_percentage,
            calculation_formula=breakdown.salary_breakdown.calculation_formula,
            attendance_details=list(totals.attendance_details),
            sunday_attendance=validation.sunday_attendance,
            valid_working_days=validation.valid_working_days,
            validation_warnings=list(validation.warnings),
            fallback_used=breakdown.fallback_used,
        )
