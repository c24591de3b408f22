from __future__ import annotations

from typing import Optional, Protocol

from .model import HolidayRecord

CacheKey = tuple[str, Optional[str], int]


class HolidayCache(Protocol):
    def get(self, key: CacheKey) -> Optional[tuple[HolidayRecord, ...]]:
        raise NotImplementedError

    def put(self, key: CacheKey, value: tuple[HolidayRecord, ...]) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class InMemoryHolidayCache(HolidayCache):
    """Dict-backed memo of (country, state, year) -> holidays.

    Entries are write-once tuples; clear() swaps in a fresh dict instead of
    mutating the one concurrent readers may hold.
    """

    def __init__(self) -> None:
        self._entries: dict[CacheKey, tuple[HolidayRecord, ...]] = {}

    def get(self, key: CacheKey) -> Optional[tuple[HolidayRecord, ...]]:
        return self._entries.get(key)

    def put(self, key: CacheKey, value: tuple[HolidayRecord, ...]) -> None:
        self._entries.setdefault(key, tuple(value))

    def clear(self) -> None:
        self._entries = {}

    def __len__(self) -> int:
        return len(self._entries)
