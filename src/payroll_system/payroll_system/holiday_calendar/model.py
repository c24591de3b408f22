from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import HolidayType


@dataclass(frozen=True)
class HolidayRecord:
    """Public holiday as returned by the calendar provider."""

    date: date
    name: str
    type: str = "public"

    def to_dict(self) -> dict:
        return {"date": self.date.isoformat(), "name": self.name, "type": self.type}


@dataclass(frozen=True)
class CompanyHoliday:
    """Admin-declared non-working day (distinct from public holidays)."""

    holiday_id: int
    date: date
    name: str
    type: HolidayType
    month_year: str
    is_active: bool = True
    description: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.holiday_id,
            "date": self.date.isoformat(),
            "name": self.name,
            "type": self.type.value,
            "monthYear": self.month_year,
            "isActive": self.is_active,
            "description": self.description,
        }
