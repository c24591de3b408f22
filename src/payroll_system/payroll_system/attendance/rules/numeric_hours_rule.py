from __future__ import annotations

import math
import re

from ..model import ParsedCell
from .base import CellRule, status_for_hours

# Leading number the way spreadsheets export it: '8', '7.5', '8 hrs', '.5'.
LEADING_NUMBER_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def leading_number(text: str) -> float | None:
    m = LEADING_NUMBER_RE.match(text.strip())
    if not m:
        return None
    try:
        return float(m.group(0))
    except ValueError:
        return None


class NumericHoursRule(CellRule):
    """A positive, finite number is read as hours worked."""

    def matches(self, text: str) -> bool:
        value = leading_number(text)
        return value is not None and math.isfinite(value) and value > 0

    def parse(self, text: str) -> ParsedCell:
        hours = leading_number(text)
        return ParsedCell(check_in=None, check_out=None, hours_worked=hours, status=status_for_hours(hours))
