from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timedelta

from ...common.datetime_utils import round_half_up
from ...core.constants import FULL_DAY_HOURS, HALF_DAY_HOURS
from ...core.enums import AttendanceStatus
from ..model import ParsedCell


class CellRule(ABC):
    """Strategy Pattern: one way of reading an attendance cell.

    Rules receive the cell already rendered as a trimmed string.
    """

    @abstractmethod
    def matches(self, text: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def parse(self, text: str) -> ParsedCell:
        raise NotImplementedError


def status_for_hours(hours: float) -> AttendanceStatus:
    # Short but non-zero attendance still counts as Present.
    if hours >= FULL_DAY_HOURS:
        return AttendanceStatus.PRESENT
    if hours >= HALF_DAY_HOURS:
        return AttendanceStatus.HALF_DAY
    return AttendanceStatus.PRESENT


def pad_time(value: str) -> str:
    """'9:05' -> '09:05'."""
    hours, minutes = value.split(":", 1)
    return f"{int(hours):02d}:{minutes}"


def hours_between(check_in: str, check_out: str) -> float:
    """Hours from check-in to check-out, wrapping past midnight."""
    try:
        start = datetime.strptime(check_in, "%H:%M")
        end = datetime.strptime(check_out, "%H:%M")
    except ValueError:
        return 0
    if end < start:
        end += timedelta(days=1)
    return max(0, round_half_up((end - start).total_seconds() / 3600, 2))


def from_times(check_in: str, check_out: str) -> ParsedCell:
    check_in, check_out = pad_time(check_in), pad_time(check_out)
    hours = hours_between(check_in, check_out)
    return ParsedCell(check_in=check_in, check_out=check_out, hours_worked=hours, status=status_for_hours(hours))
