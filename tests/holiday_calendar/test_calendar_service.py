import calendar as gregorian
from datetime import date

import pytest

from src.payroll_system.payroll_system.holiday_calendar.model import HolidayRecord
from src.payroll_system.payroll_system.holiday_calendar.service import HolidayCalendar

from conftest import INDEPENDENCE_DAY, FakeHolidayProvider


def test_holidays_are_cached_per_location_and_year():
    provider = FakeHolidayProvider([INDEPENDENCE_DAY])
    calendar = HolidayCalendar(provider, country="IN", state="DL")

    assert calendar.holidays_for_year(2025) == [INDEPENDENCE_DAY]
    assert calendar.holidays_for_year(2025) == [INDEPENDENCE_DAY]
    assert provider.calls == [("IN", "DL", 2025)]


def test_set_location_invalidates_cache():
    provider = FakeHolidayProvider([INDEPENDENCE_DAY])
    calendar = HolidayCalendar(provider, country="IN", state="DL")
    calendar.holidays_for_year(2025)

    calendar.set_location("IN", "MH")
    calendar.holidays_for_year(2025)

    assert calendar.location == ("IN", "MH")
    assert provider.calls == [("IN", "DL", 2025), ("IN", "MH", 2025)]


def test_provider_failure_means_no_holidays():
    calendar = HolidayCalendar(FakeHolidayProvider(fail=True), country="XX", state=None)

    assert calendar.holidays_for_year(2025) == []
    assert calendar.holidays_for_month("2025-08") == []
    assert calendar.is_holiday("2025-08-15") is None


def test_holidays_for_month_filters_and_tolerates_bad_month():
    new_year = HolidayRecord(date=date(2025, 1, 1), name="New Year")
    calendar = HolidayCalendar(FakeHolidayProvider([new_year, INDEPENDENCE_DAY]))

    assert calendar.holidays_for_month("2025-08") == [INDEPENDENCE_DAY]
    assert calendar.holidays_for_month("2025-13") == []


def test_is_holiday_and_weekend_checks():
    calendar = HolidayCalendar(FakeHolidayProvider([INDEPENDENCE_DAY]))

    assert calendar.is_holiday("2025-08-15") == INDEPENDENCE_DAY
    assert calendar.is_holiday(date(2025, 8, 14)) is None
    assert calendar.is_holiday("not-a-date") is None

    assert calendar.is_sunday("2025-08-03")
    assert not calendar.is_sunday("2025-08-02")
    assert calendar.is_weekend("2025-08-02")
    assert not calendar.is_weekend("garbage")


def test_sundays_and_weekends_in_month():
    calendar = HolidayCalendar(FakeHolidayProvider())

    # August 2025 starts on a Friday: five Saturdays and five Sundays.
    assert [d.day for d in calendar.sundays_in_month("2025-08")] == [3, 10, 17, 24, 31]
    assert len(calendar.weekends_in_month("2025-08")) == 10
    assert calendar.sundays_in_month("bad") == []


@pytest.mark.parametrize("year", [2024, 2025])
def test_sundays_match_the_gregorian_calendar_for_every_month(year):
    calendar = HolidayCalendar(FakeHolidayProvider())

    for month in range(1, 13):
        expected = [week[gregorian.SUNDAY] for week in gregorian.monthcalendar(year, month) if week[gregorian.SUNDAY]]
        weekend_days = sum(1 for week in gregorian.monthcalendar(year, month) for d in week[5:] if d)

        assert [d.day for d in calendar.sundays_in_month(f"{year}-{month:02d}")] == expected
        assert len(calendar.weekends_in_month(f"{year}-{month:02d}")) == weekend_days


def test_upcoming_holidays_span_year_end():
    provider = FakeHolidayProvider(
        [
            HolidayRecord(date=date(2025, 12, 25), name="Christmas"),
            HolidayRecord(date=date(2026, 1, 1), name="New Year"),
            HolidayRecord(date=date(2026, 1, 26), name="Republic Day"),
        ]
    )
    calendar = HolidayCalendar(provider)

    upcoming = calendar.upcoming_holidays(30, today=date(2025, 12, 20))

    assert [h.name for h in upcoming] == ["Christmas", "New Year"]
