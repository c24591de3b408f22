from __future__ import annotations

from typing import Optional, Protocol, Sequence

import holidays

from .model import HolidayRecord


class HolidayProvider(Protocol):
    def holidays_for_year(self, country: str, state: Optional[str], year: int) -> Sequence[HolidayRecord]:
        """Return every public holiday for the location in `year`.

        May raise for unsupported locations; callers decide how to degrade.
        """

        raise NotImplementedError


class PythonHolidaysProvider(HolidayProvider):
    """Holiday tables from the `holidays` package."""

    def __init__(self, *, language: Optional[str] = None):
        self._language = language

    def holidays_for_year(self, country: str, state: Optional[str], year: int) -> Sequence[HolidayRecord]:
        table = holidays.country_holidays(country, subdiv=state or None, years=int(year), language=self._language)
        records = [
            HolidayRecord(date=day, name=str(name), type="public")
            for day, name in sorted(table.items())
        ]
        return records
