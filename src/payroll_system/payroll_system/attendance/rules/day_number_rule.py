from __future__ import annotations

import re

from ..model import ParsedCell
from .base import CellRule
from .status_keyword_rule import PRESENT_CELL

DAY_NUMBER_RE = re.compile(r"^\d{1,2}$")


class DayNumberRule(CellRule):
    """A lone day number (1-31) is taken as a present mark.

    In the default rule order NumericHoursRule claims every positive number
    first, so this rule only fires in chains built without it.
    """

    def matches(self, text: str) -> bool:
        text = text.strip()
        return bool(DAY_NUMBER_RE.match(text)) and 1 <= int(text) <= 31

    def parse(self, text: str) -> ParsedCell:
        return PRESENT_CELL
