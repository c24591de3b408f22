from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import HolidayType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .company_holiday_repository import CompanyHolidayRepository
from .model import CompanyHoliday

_COLUMNS = "holiday_id, holiday_date, name, description, holiday_type, month_year, is_active"


def _row_to_holiday(r: dict) -> CompanyHoliday:
    return CompanyHoliday(
        holiday_id=int(r["holiday_id"]),
        date=r["holiday_date"],
        name=r["name"],
        type=HolidayType(r["holiday_type"]),
        month_year=r["month_year"],
        is_active=bool(r["is_active"]),
        description=r.get("description"),
    )


class MySQLCompanyHolidayRepository(CompanyHolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        holiday_date: date,
        name: str,
        holiday_type: HolidayType,
        month_year: str,
        description: Optional[str],
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO company_holidays(holiday_date, name, description, holiday_type, month_year, is_active)
                VALUES(%s,%s,%s,%s,%s,1)
                """,
                (holiday_date, name, description, holiday_type.value, month_year),
            )
            return int(cur.lastrowid)

    def get_by_id(self, holiday_id: int) -> Optional[CompanyHoliday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM company_holidays WHERE holiday_id=%s",
                (int(holiday_id),),
            )
            r = fetchone(cur)
            return _row_to_holiday(r) if r else None

    def list_active_for_month(self, month_year: str) -> Sequence[CompanyHoliday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM company_holidays
                WHERE month_year=%s AND is_active=1
                ORDER BY holiday_date
                """,
                (month_year,),
            )
            return [_row_to_holiday(r) for r in fetchall(cur)]

    def deactivate(self, holiday_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE company_holidays SET is_active=0 WHERE holiday_id=%s AND is_active=1",
                (int(holiday_id),),
            )
            return cur.rowcount > 0
