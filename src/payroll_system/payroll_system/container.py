from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType
from typing import Mapping, Optional

from .core.constants import DEFAULT_COUNTRY, DEFAULT_STATE
from .database.connection import DBConfig, DatabaseConnection
from .holiday_calendar.company_holiday_repository import CompanyHolidayRepository
from .holiday_calendar.company_holiday_service import CompanyHolidayService
from .holiday_calendar.mysql_company_holiday_repository import MySQLCompanyHolidayRepository
from .holiday_calendar.provider import HolidayProvider
from .holiday_calendar.service import HolidayCalendar
from .payroll.config import SalaryConfig
from .payroll.directory import EmployeeSalaryDirectory, SettingsSalaryDirectory
from .payroll.engine import SalaryEngine
from .payroll.mysql_salary_record_repository import MySQLSalaryRecordRepository
from .payroll.record_service import SalaryRecordService
from .payroll.repository import SalaryRecordRepository
from .payroll.upload_service import PayrollUploadService
from .working_days.calculator import WorkingDaysCalculator


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    calendar: HolidayCalendar
    working_days: WorkingDaysCalculator
    salary_engine: SalaryEngine
    default_salary_config: SalaryConfig

    company_holiday_repo: CompanyHolidayRepository
    salary_records_repo: SalaryRecordRepository

    company_holiday_service: CompanyHolidayService
    salary_directory: EmployeeSalaryDirectory
    payroll_upload_service: PayrollUploadService
    salary_record_service: SalaryRecordService


def build_services(
    *,
    company_holiday_repo: CompanyHolidayRepository,
    salary_records_repo: SalaryRecordRepository,
    salary_config: Optional[SalaryConfig] = None,
    salary_overrides: Optional[Mapping[str, Mapping]] = None,
    provider: Optional[HolidayProvider] = None,
    country: str = DEFAULT_COUNTRY,
    state: Optional[str] = DEFAULT_STATE,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire the services over the given repositories (MySQL or in-memory)."""

    salary_config = salary_config or SalaryConfig()

    calendar = HolidayCalendar(provider, country=country, state=state)
    working_days = WorkingDaysCalculator(calendar, max_working_days=salary_config.max_working_days)
    salary_engine = SalaryEngine(working_days)

    company_holiday_service = CompanyHolidayService(company_holiday_repo)
    salary_directory = SettingsSalaryDirectory(salary_config, salary_overrides)
    payroll_upload_service = PayrollUploadService(
        salary_records_repo,
        salary_engine,
        working_days,
        company_holiday_service,
        salary_directory,
        default_config=salary_config,
    )
    salary_record_service = SalaryRecordService(salary_records_repo)

    return Container(
        conn=conn,
        calendar=calendar,
        working_days=working_days,
        salary_engine=salary_engine,
        default_salary_config=salary_config,
        company_holiday_repo=company_holiday_repo,
        salary_records_repo=salary_records_repo,
        company_holiday_service=company_holiday_service,
        salary_directory=salary_directory,
        payroll_upload_service=payroll_upload_service,
        salary_record_service=salary_record_service,
    )


def build_container(*, db_config: dict, settings: Optional[ModuleType] = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return build_services(
        company_holiday_repo=MySQLCompanyHolidayRepository(conn),
        salary_records_repo=MySQLSalaryRecordRepository(conn),
        salary_config=SalaryConfig.from_settings(settings),
        salary_overrides=getattr(settings, "EMPLOYEE_SALARY_OVERRIDES", None),
        country=str(getattr(settings, "HOLIDAY_COUNTRY", DEFAULT_COUNTRY)),
        state=getattr(settings, "HOLIDAY_STATE", DEFAULT_STATE),
        conn=conn,
    )
