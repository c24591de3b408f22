from __future__ import annotations

from ..model import ParsedCell
from .base import CellRule

EMPTY_MARKERS = frozenset({"", "0", "-", "undefined", "null", "none", "nan"})


class EmptyCellRule(CellRule):
    """Blank, zero or placeholder cells mean no attendance."""

    def matches(self, text: str) -> bool:
        return text.strip().lower() in EMPTY_MARKERS

    def parse(self, text: str) -> ParsedCell:
        return ParsedCell.absent()
