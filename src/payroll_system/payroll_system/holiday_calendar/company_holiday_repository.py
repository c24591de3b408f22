from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import HolidayType
from .model import CompanyHoliday


class CompanyHolidayRepository(Protocol):
    def create(
        self,
        *,
        holiday_date: date,
        name: str,
        holiday_type: HolidayType,
        month_year: str,
        description: Optional[str],
    ) -> int:
        raise NotImplementedError

    def get_by_id(self, holiday_id: int) -> Optional[CompanyHoliday]:
        raise NotImplementedError

    def list_active_for_month(self, month_year: str) -> Sequence[CompanyHoliday]:
        raise NotImplementedError

    def deactivate(self, holiday_id: int) -> bool:
        raise NotImplementedError
