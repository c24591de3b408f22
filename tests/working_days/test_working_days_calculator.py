import calendar
from datetime import date

import pytest

from src.payroll_system.payroll_system.attendance.model import DailyAttendanceRecord
from src.payroll_system.payroll_system.core.enums import AttendanceStatus
from src.payroll_system.payroll_system.holiday_calendar.service import HolidayCalendar
from src.payroll_system.payroll_system.working_days.calculator import WorkingDaysCalculator

from conftest import INDEPENDENCE_DAY, FakeHolidayProvider


def test_sundays_are_off_and_required_days_are_capped(working_days):
    # January 2025: 31 days, 4 Sundays -> 27 working days, capped at 26.
    info = working_days.compute("2025-01")

    assert info.total_days == 31
    assert info.sunday_count == 4
    assert info.working_days == 27
    assert info.required_working_days == 26
    assert not info.fallback_used
    assert len(info.working_days_list) == 27
    assert all(d.reason == "Sunday" for d in info.non_working_days)
    assert info.non_working_days[0].day_name == "Sunday"


def test_saturdays_only_excluded_when_asked(working_days):
    # February 2025 starts on a Saturday: 4 Saturdays and 4 Sundays.
    assert working_days.compute("2025-02").working_days == 24

    info = working_days.compute("2025-02", exclude_saturdays=True)
    assert info.working_days == 20
    assert info.saturday_count == 4
    assert info.weekends == 8
    assert info.calculation.minus_weekends == 20


def test_calendar_holidays_are_non_working():
    calc = WorkingDaysCalculator(HolidayCalendar(FakeHolidayProvider([INDEPENDENCE_DAY])))

    info = calc.compute("2025-08")

    assert info.working_days == 25
    assert info.holiday_count == 1
    assert date(2025, 8, 15) not in info.working_days_list
    assert "Holiday: Independence Day" in [d.reason for d in info.non_working_days]


def test_admin_holidays_reduce_working_days_before_the_cap(working_days):
    info = working_days.compute("2025-01", admin_holiday_count=2)

    assert info.working_days == 25
    assert info.required_working_days == 25
    assert info.holiday_count == 2
    assert info.admin_holiday_count == 2

    assert working_days.compute("2025-01", admin_holiday_count=40).working_days == 0


@pytest.mark.parametrize("month", ["2025-13", "January", "", None])
def test_bad_month_uses_fallback(working_days, month):
    info = working_days.compute(month)

    assert info.fallback_used
    assert (info.total_days, info.working_days, info.weekends) == (30, 22, 8)


def test_required_never_exceeds_working_never_exceeds_total(working_days):
    for month in range(1, 13):
        info = working_days.compute(f"2025-{month:02d}", admin_holiday_count=month % 3)
        assert 0 <= info.required_working_days <= info.working_days <= info.total_days
        assert info.required_working_days <= 26


def test_validate_attendance_flags_sunday_marks(working_days):
    details = [
        DailyAttendanceRecord(date(2025, 8, 1), "09:00", "18:00", 8, AttendanceStatus.PRESENT),
        DailyAttendanceRecord(date(2025, 8, 2), "09:00", "13:00", 4, AttendanceStatus.HALF_DAY),
        DailyAttendanceRecord(date(2025, 8, 3), "09:00", "18:00", 8, AttendanceStatus.PRESENT),
        DailyAttendanceRecord(date(2025, 8, 10), None, None, 0, AttendanceStatus.ABSENT),
    ]

    result = working_days.validate_attendance(details, "2025-08")

    assert result.valid_working_days == 2
    assert result.sunday_attendance == 1
    assert result.total_attendance_records == 4
    assert result.warnings == ["Attendance marked on Sunday: 2025-08-03"]


@pytest.mark.parametrize("month", range(1, 13))
def test_every_month_matches_the_gregorian_calendar(working_days, month):
    info = working_days.compute(f"2025-{month:02d}")
    weeks = calendar.monthcalendar(2025, month)

    assert info.total_days == calendar.monthrange(2025, month)[1]
    assert info.sunday_count == sum(1 for week in weeks if week[calendar.SUNDAY])
    assert info.working_days == info.total_days - info.sunday_count
    assert not info.fallback_used
