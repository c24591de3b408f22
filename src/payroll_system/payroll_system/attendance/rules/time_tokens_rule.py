from __future__ import annotations

import re

from ...core.enums import AttendanceStatus
from ..model import ParsedCell
from .base import CellRule, from_times, pad_time

TIME_TOKEN_RE = re.compile(r"\b(\d{1,2}:\d{2})\b")

SINGLE_PUNCH_HOURS = 4


class TimeTokensRule(CellRule):
    """Loose HH:MM punches anywhere in the cell.

    First and last punch bound the day; a lone punch is a check-in only and
    counts as a half day.
    """

    def matches(self, text: str) -> bool:
        return TIME_TOKEN_RE.search(text) is not None

    def parse(self, text: str) -> ParsedCell:
        times = TIME_TOKEN_RE.findall(text)
        if len(times) >= 2:
            return from_times(times[0], times[-1])
        return ParsedCell(
            check_in=pad_time(times[0]),
            check_out=None,
            hours_worked=SINGLE_PUNCH_HOURS,
            status=AttendanceStatus.HALF_DAY,
        )
