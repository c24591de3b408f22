from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Normalized daily attendance status stored with each record."""

    PRESENT = "Present"
    HALF_DAY = "Half Day"
    ABSENT = "Absent"

    @property
    def rank(self) -> int:
        return _STATUS_RANK[self]

    @property
    def day_value(self) -> float:
        """Contribution to days-present totals."""
        return _DAY_VALUE[self]


_STATUS_RANK = {
    AttendanceStatus.ABSENT: 0,
    AttendanceStatus.HALF_DAY: 1,
    AttendanceStatus.PRESENT: 2,
}

_DAY_VALUE = {
    AttendanceStatus.ABSENT: 0.0,
    AttendanceStatus.HALF_DAY: 0.5,
    AttendanceStatus.PRESENT: 1.0,
}


class CalculationMethod(str, Enum):
    """How a monthly salary figure was derived."""

    AUTO = "auto"
    DAILY_WAGE = "daily_wage"
    PROPORTIONAL = "proportional"


class AdjustmentType(str, Enum):
    SET = "set"
    INCREASE = "increase"
    DECREASE = "decrease"


class HolidayType(str, Enum):
    """Category of an admin-declared company holiday."""

    GOVERNMENT = "government"
    COMPANY = "company"
    FESTIVAL = "festival"
    OTHER = "other"
