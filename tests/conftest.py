from __future__ import annotations

from dataclasses import replace
from datetime import date

import pytest

from src.payroll_system.payroll_system.container import build_services
from src.payroll_system.payroll_system.holiday_calendar.model import CompanyHoliday, HolidayRecord
from src.payroll_system.payroll_system.holiday_calendar.service import HolidayCalendar
from src.payroll_system.payroll_system.payroll.engine import SalaryEngine
from src.payroll_system.payroll_system.working_days.calculator import WorkingDaysCalculator


class FakeHolidayProvider:
    def __init__(self, holidays=None, *, fail=False):
        self._holidays = list(holidays or [])
        self._fail = fail
        self.calls = []

    def holidays_for_year(self, country, state, year):
        self.calls.append((country, state, year))
        if self._fail:
            raise KeyError(f"unsupported country {country}")
        return [h for h in self._holidays if h.date.year == year]


class FakeCompanyHolidayRepo:
    def __init__(self):
        self._next_id = 1
        self._rows: dict[int, CompanyHoliday] = {}

    def create(self, *, holiday_date, name, holiday_type, month_year, description):
        hid = self._next_id
        self._next_id += 1
        self._rows[hid] = CompanyHoliday(
            holiday_id=hid,
            date=holiday_date,
            name=name,
            type=holiday_type,
            month_year=month_year,
            description=description,
        )
        return hid

    def get_by_id(self, holiday_id):
        return self._rows.get(int(holiday_id))

    def list_active_for_month(self, month_year):
        return sorted(
            (h for h in self._rows.values() if h.month_year == month_year and h.is_active),
            key=lambda h: h.date,
        )

    def deactivate(self, holiday_id):
        h = self._rows.get(int(holiday_id))
        if h is None or not h.is_active:
            return False
        self._rows[int(holiday_id)] = replace(h, is_active=False)
        return True


class FakeSalaryRecordRepo:
    def __init__(self):
        self._next_id = 1
        self.records: dict[int, object] = {}
        self.adjustments = []

    def replace_month(self, month_year, records):
        self.records = {rid: r for rid, r in self.records.items() if r.month_year != month_year}
        for r in records:
            rid = self._next_id
            self._next_id += 1
            self.records[rid] = replace(r, record_id=rid)
        return len(records)

    def list_for_month(self, month_year, *, exposed_only=False):
        return sorted(
            (r for r in self.records.values() if r.month_year == month_year and (r.exposed or not exposed_only)),
            key=lambda r: r.name,
        )

    def list_for_employee(self, employee_id, *, exposed_only=False):
        return sorted(
            (r for r in self.records.values() if r.employee_id == employee_id and (r.exposed or not exposed_only)),
            key=lambda r: r.month_year,
            reverse=True,
        )

    def get_by_id(self, record_id):
        return self.records.get(int(record_id))

    def update_adjusted_salary(self, record_id, adjusted_salary):
        r = self.records.get(int(record_id))
        if r is None:
            return False
        self.records[int(record_id)] = replace(r, adjusted_salary=adjusted_salary)
        return True

    def set_exposed(self, record_id):
        r = self.records.get(int(record_id))
        if r is None:
            return False
        self.records[int(record_id)] = replace(r, exposed=True)
        return True

    def expose_month(self, month_year):
        count = 0
        for rid, r in list(self.records.items()):
            if r.month_year == month_year and not r.exposed:
                self.records[rid] = replace(r, exposed=True)
                count += 1
        return count

    def add_adjustment(self, adjustment):
        self.adjustments.append(adjustment)
        return len(self.adjustments)


INDEPENDENCE_DAY = HolidayRecord(date=date(2025, 8, 15), name="Independence Day")


@pytest.fixture
def no_holidays():
    return FakeHolidayProvider()


@pytest.fixture
def calendar(no_holidays):
    return HolidayCalendar(no_holidays, country="IN", state="DL")


@pytest.fixture
def working_days(calendar):
    return WorkingDaysCalculator(calendar)


@pytest.fixture
def engine(working_days):
    return SalaryEngine(working_days)


@pytest.fixture
def holiday_repo():
    return FakeCompanyHolidayRepo()


@pytest.fixture
def records_repo():
    return FakeSalaryRecordRepo()


@pytest.fixture
def container(holiday_repo, records_repo, no_holidays):
    return build_services(
        company_holiday_repo=holiday_repo,
        salary_records_repo=records_repo,
        salary_overrides={"E002": {"base_salary": 25000}},
        provider=no_holidays,
    )
