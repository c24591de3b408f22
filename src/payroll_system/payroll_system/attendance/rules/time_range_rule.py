from __future__ import annotations

import re

from ..model import ParsedCell
from .base import CellRule, from_times

TIME_RANGE_RE = re.compile(r"(\d{1,2}:\d{2})\s*(?:[-\s]|to)\s*(\d{1,2}:\d{2})", re.IGNORECASE)


class TimeRangeRule(CellRule):
    """'10:30 16:30', '10:30-16:30', '10:30 to 16:30'."""

    def matches(self, text: str) -> bool:
        return TIME_RANGE_RE.search(text) is not None

    def parse(self, text: str) -> ParsedCell:
        m = TIME_RANGE_RE.search(text)
        return from_times(m.group(1), m.group(2))
