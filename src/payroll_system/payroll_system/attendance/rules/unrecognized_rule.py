from __future__ import annotations

import logging

from ..model import ParsedCell
from .base import CellRule

logger = logging.getLogger(__name__)


class UnrecognizedCellRule(CellRule):
    """Last resort: one bad cell never fails an upload, it reads as Absent."""

    def matches(self, text: str) -> bool:
        return True

    def parse(self, text: str) -> ParsedCell:
        logger.info("Unrecognized attendance value: %r", text)
        return ParsedCell.absent()
