from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Optional

from ..common.datetime_utils import DateLike, as_date, iter_month_days, now_local, parse_month_year
from ..core.constants import DEFAULT_COUNTRY, DEFAULT_STATE, DEFAULT_UPCOMING_DAYS
from .cache import HolidayCache, InMemoryHolidayCache
from .model import HolidayRecord
from .provider import HolidayProvider, PythonHolidaysProvider

logger = logging.getLogger(__name__)

SUNDAY = 6
SATURDAY = 5


class HolidayCalendar:
    """Answers holiday / weekend questions for a configured country and state.

    Holiday lookup is best-effort: a failing provider yields an empty list
    and the month is treated as having no public holidays.
    """

    def __init__(
        self,
        provider: HolidayProvider | None = None,
        *,
        country: str = DEFAULT_COUNTRY,
        state: Optional[str] = DEFAULT_STATE,
        cache: HolidayCache | None = None,
    ):
        self._provider = provider or PythonHolidaysProvider()
        self._country = country
        self._state = state or None
        self._cache = cache if cache is not None else InMemoryHolidayCache()

    @property
    def location(self) -> tuple[str, Optional[str]]:
        return self._country, self._state

    def set_location(self, country: str, state: Optional[str] = None) -> None:
        self._country = country
        self._state = state or None
        self._cache.clear()
        logger.info("Calendar location updated to %s%s", country, f", {state}" if state else "")

    def clear_cache(self) -> None:
        self._cache.clear()
        logger.info("Holiday cache cleared")

    def holidays_for_year(self, year: int) -> list[HolidayRecord]:
        key = (self._country, self._state, int(year))
        cached = self._cache.get(key)
        if cached is not None:
            return list(cached)

        try:
            records = tuple(self._provider.holidays_for_year(self._country, self._state, int(year)))
        except Exception:
            logger.exception("Error fetching holidays for %s/%s year %s", self._country, self._state, year)
            return []

        self._cache.put(key, records)
        logger.debug("Found %d holidays for year %s", len(records), year)
        return list(records)

    def holidays_for_month(self, month_year: str) -> list[HolidayRecord]:
        try:
            year, month = parse_month_year(month_year)
        except ValueError:
            logger.warning("Cannot list holidays for malformed month %r", month_year)
            return []
        return [h for h in self.holidays_for_year(year) if h.date.year == year and h.date.month == month]

    def is_holiday(self, value: DateLike) -> Optional[HolidayRecord]:
        try:
            day = as_date(value)
        except ValueError:
            return None
        for h in self.holidays_for_year(day.year):
            if h.date == day:
                return h
        return None

    def is_sunday(self, value: DateLike) -> bool:
        try:
            return as_date(value).weekday() == SUNDAY
        except ValueError:
            return False

    def is_weekend(self, value: DateLike) -> bool:
        try:
            return as_date(value).weekday() in (SATURDAY, SUNDAY)
        except ValueError:
            return False

    def sundays_in_month(self, month_year: str) -> list[date]:
        try:
            return [d for d in iter_month_days(month_year) if d.weekday() == SUNDAY]
        except ValueError:
            return []

    def weekends_in_month(self, month_year: str) -> list[date]:
        try:
            return [d for d in iter_month_days(month_year) if d.weekday() in (SATURDAY, SUNDAY)]
        except ValueError:
            return []

    def upcoming_holidays(self, days: int = DEFAULT_UPCOMING_DAYS, *, today: date | None = None) -> list[HolidayRecord]:
        today = today or now_local().date()
        end = today + timedelta(days=int(days))

        candidates = self.holidays_for_year(today.year)
        if end.year > today.year:
            candidates = candidates + self.holidays_for_year(end.year)

        upcoming = [h for h in candidates if today <= h.date <= end]
        upcoming.sort(key=lambda h: h.date)
        return upcoming
