from __future__ import annotations

import logging
import math
import re
from datetime import datetime, time
from typing import Any, Optional

from .factory import CellRuleFactory
from .model import ParsedCell

logger = logging.getLogger(__name__)

_SECONDS_RE = re.compile(r"\b(\d{1,2}:\d{2}):\d{2}\b")


def cell_to_text(raw: Any) -> str:
    """Render a raw cell (str, number, time, NaN) as the text the rules read."""

    if raw is None:
        return ""
    if isinstance(raw, bool):
        return "1" if raw else ""
    if isinstance(raw, (datetime, time)):
        return raw.strftime("%H:%M")
    if isinstance(raw, (int, float)):
        if isinstance(raw, float) and math.isnan(raw):
            return ""
        if raw == 0:
            return ""
        if isinstance(raw, float) and raw.is_integer():
            return str(int(raw))
        return str(raw)
    text = str(raw).strip()
    return _SECONDS_RE.sub(r"\1", text)


class AttendanceCellParser:
    """Best-effort reader for heterogeneous attendance marks. Never raises."""

    def __init__(self, factory: Optional[CellRuleFactory] = None):
        self._factory = factory or CellRuleFactory()

    def parse(self, raw: Any) -> ParsedCell:
        try:
            text = cell_to_text(raw)
            return self._factory.for_value(text).parse(text)
        except Exception:
            logger.exception("Failed to parse attendance value %r", raw)
            return ParsedCell.absent()
