from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceStatus
from ..model import ParsedCell
from .base import CellRule

PRESENT_WORDS = frozenset({"p", "1", "yes", "y", "wfh", "ewfh", "pr"})
HALF_DAY_WORDS = frozenset({"h", "hd", "halfday", "0.5"})
ABSENT_WORDS = frozenset({"a", "0", "no", "n", "ab", "abs", "l"})

PRESENT_CELL = ParsedCell(check_in="09:00", check_out="18:00", hours_worked=8, status=AttendanceStatus.PRESENT)
HALF_DAY_CELL = ParsedCell(check_in="09:00", check_out="13:00", hours_worked=4, status=AttendanceStatus.HALF_DAY)


def keyword_status(text: str) -> Optional[AttendanceStatus]:
    word = text.strip().lower()
    if "present" in word or word in PRESENT_WORDS:
        return AttendanceStatus.PRESENT
    if "half" in word or word in HALF_DAY_WORDS:
        return AttendanceStatus.HALF_DAY
    if "absent" in word or "leave" in word or "holiday" in word or word in ABSENT_WORDS:
        return AttendanceStatus.ABSENT
    return None


class StatusKeywordRule(CellRule):
    """Status words map to a standard shift: P = 09:00-18:00, half = 09:00-13:00."""

    def matches(self, text: str) -> bool:
        return keyword_status(text) is not None

    def parse(self, text: str) -> ParsedCell:
        status = keyword_status(text)
        if status == AttendanceStatus.PRESENT:
            return PRESENT_CELL
        if status == AttendanceStatus.HALF_DAY:
            return HALF_DAY_CELL
        return ParsedCell.absent()
