from __future__ import annotations

import logging
from typing import Iterable

from ..common.datetime_utils import as_date, iter_month_days, parse_month_year
from ..core.constants import (
    FALLBACK_SATURDAYS,
    FALLBACK_SUNDAYS,
    FALLBACK_TOTAL_DAYS,
    FALLBACK_WEEKENDS,
    FALLBACK_WORKING_DAYS,
    MAX_WORKING_DAYS,
)
from ..core.enums import AttendanceStatus
from ..holiday_calendar.service import SATURDAY, SUNDAY, HolidayCalendar
from .model import AttendanceValidation, NonWorkingDay, WorkingDaysCalculation, WorkingDaysInfo

logger = logging.getLogger(__name__)


class WorkingDaysCalculator:
    """Derives the payable-days baseline of a month.

    Sundays are always off, Saturdays only when asked, calendar holidays are
    off. Admin-declared holidays arrive as a plain count and are taken out of
    the working days before the payable-days cap is applied.
    """

    def __init__(self, calendar: HolidayCalendar, *, max_working_days: int = MAX_WORKING_DAYS):
        self._calendar = calendar
        self._max_working_days = int(max_working_days)

    @property
    def calendar(self) -> HolidayCalendar:
        return self._calendar

    def compute(self, month_year: str, exclude_saturdays: bool = False, admin_holiday_count: int = 0) -> WorkingDaysInfo:
        try:
            return self._compute(month_year, exclude_saturdays, admin_holiday_count)
        except Exception:
            logger.exception("Error calculating working days for month %r, using fallback", month_year)
            return self.fallback(month_year)

    def _compute(self, month_year: str, exclude_saturdays: bool, admin_holiday_count: int) -> WorkingDaysInfo:
        parse_month_year(month_year)
        admin_count = int(admin_holiday_count or 0)
        if admin_count < 0:
            raise ValueError(f"Negative admin holiday count: {admin_holiday_count!r}")

        holidays = self._calendar.holidays_for_month(month_year)
        by_date = {h.date: h for h in holidays}

        total_days = 0
        weekends = sundays = saturdays = holiday_count = 0
        working = []
        non_working = []

        for day in iter_month_days(month_year):
            total_days += 1
            weekday = day.weekday()
            if weekday == SUNDAY:
                reason = "Sunday"
                weekends += 1
                sundays += 1
            elif exclude_saturdays and weekday == SATURDAY:
                reason = "Saturday"
                weekends += 1
                saturdays += 1
            elif day in by_date:
                reason = f"Holiday: {by_date[day].name}"
                holiday_count += 1
            else:
                working.append(day)
                continue
            non_working.append(NonWorkingDay(date=day, reason=reason, day_name=day.strftime("%A")))

        working_days = max(0, len(working) - admin_count)
        holiday_count += admin_count
        required = min(working_days, self._max_working_days)

        return WorkingDaysInfo(
            month_year=month_year,
            total_days=total_days,
            working_days=working_days,
            required_working_days=required,
            sunday_count=sundays,
            saturday_count=saturdays,
            weekends=weekends,
            holiday_count=holiday_count,
            holidays=tuple(holidays),
            working_days_list=tuple(working),
            non_working_days=tuple(non_working),
            calculation=WorkingDaysCalculation(
                total_days=total_days,
                minus_weekends=total_days - weekends,
                minus_holidays=max(0, total_days - weekends - holiday_count),
                final_working_days=working_days,
            ),
            admin_holiday_count=admin_count,
        )

    def fallback(self, month_year: str) -> WorkingDaysInfo:
        return WorkingDaysInfo(
            month_year=str(month_year),
            total_days=FALLBACK_TOTAL_DAYS,
            working_days=FALLBACK_WORKING_DAYS,
            required_working_days=FALLBACK_WORKING_DAYS,
            sunday_count=FALLBACK_SUNDAYS,
            saturday_count=FALLBACK_SATURDAYS,
            weekends=FALLBACK_WEEKENDS,
            holiday_count=0,
            calculation=WorkingDaysCalculation(
                total_days=FALLBACK_TOTAL_DAYS,
                minus_weekends=FALLBACK_WORKING_DAYS,
                minus_holidays=FALLBACK_WORKING_DAYS,
                final_working_days=FALLBACK_WORKING_DAYS,
            ),
            fallback_used=True,
        )

    def validate_attendance(self, details: Iterable, month_year: str) -> AttendanceValidation:
        """Count attended days, flagging attendance marked on Sundays."""

        records = list(details)
        sundays = set(self._calendar.sundays_in_month(month_year))
        valid = 0
        on_sunday = 0
        warnings: list[str] = []

        for record in records:
            if AttendanceStatus(record.status) not in (AttendanceStatus.PRESENT, AttendanceStatus.HALF_DAY):
                continue
            day = as_date(record.date)
            if day in sundays:
                on_sunday += 1
                warnings.append(f"Attendance marked on Sunday: {day.isoformat()}")
            else:
                valid += 1

        return AttendanceValidation(
            valid_working_days=valid,
            sunday_attendance=on_sunday,
            total_attendance_records=len(records),
            warnings=warnings,
        )
