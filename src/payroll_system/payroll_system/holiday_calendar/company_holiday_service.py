from __future__ import annotations

import logging
from typing import Optional

from ..common.datetime_utils import format_month_year
from ..common.validators import require_iso_date, require_month_year, require_non_empty, require_number
from ..core.enums import HolidayType
from ..core.exceptions import NotFoundError, ValidationError
from .company_holiday_repository import CompanyHolidayRepository
from .model import CompanyHoliday

logger = logging.getLogger(__name__)


class CompanyHolidayService:
    """Admin-declared holidays, the single source of the admin holiday count."""

    def __init__(self, holidays: CompanyHolidayRepository):
        self._holidays = holidays

    def add(
        self,
        *,
        holiday_date: str,
        name: str,
        holiday_type: Optional[str] = None,
        description: Optional[str] = None,
    ) -> CompanyHoliday:
        day = require_iso_date(holiday_date)
        name = require_non_empty(name, "Holiday name")
        try:
            kind = HolidayType((holiday_type or HolidayType.COMPANY.value).strip().lower())
        except ValueError:
            allowed = ", ".join(t.value for t in HolidayType)
            raise ValidationError(f"Invalid holiday type. Use one of: {allowed}") from None

        holiday_id = self._holidays.create(
            holiday_date=day,
            name=name,
            holiday_type=kind,
            month_year=format_month_year(day),
            description=(description or "").strip() or None,
        )
        logger.info("Company holiday %s added on %s (%s)", name, day, kind.value)

        created = self._holidays.get_by_id(holiday_id)
        if created is None:
            raise NotFoundError("Holiday not found after creation")
        return created

    def list_for_month(self, month_year: str) -> list[CompanyHoliday]:
        month_year = require_month_year(month_year)
        return list(self._holidays.list_active_for_month(month_year))

    def deactivate(self, holiday_id: int) -> None:
        if not self._holidays.deactivate(int(holiday_id)):
            raise NotFoundError("Holiday not found")
        logger.info("Company holiday %s deactivated", holiday_id)

    def resolve_admin_holiday_count(self, month_year: str, explicit_total=None) -> int:
        """Explicit count from the upload form wins, else the declared holidays for the month."""

        if explicit_total not in (None, ""):
            total = require_number(explicit_total, "totalHolidays", minimum=0)
            if not total.is_integer():
                raise ValidationError("totalHolidays must be a whole number")
            return int(total)
        return len(self._holidays.list_active_for_month(month_year))
