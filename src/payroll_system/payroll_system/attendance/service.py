from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..common.datetime_utils import format_month_year
from .aggregator import merge
from .model import EmployeeMonthTotals, UploadRow
from .parser import AttendanceCellParser, cell_to_text

logger = logging.getLogger(__name__)

DEFAULT_DEPT = "General"


class AttendanceImportService:
    def __init__(self, parser: Optional[AttendanceCellParser] = None):
        self._parser = parser or AttendanceCellParser()

    def aggregate(self, rows: Iterable[UploadRow], month_year: Optional[str] = None) -> list[EmployeeMonthTotals]:
        """Group upload rows per employee (by name) and merge their days.

        Rows without id or name and blank cells are skipped; with a month
        given, dates outside it are ignored.
        """

        employees: dict[str, EmployeeMonthTotals] = {}
        skipped = 0

        for row in rows:
            employee_id = str(row.employee_id or "").strip()
            name = str(row.name or "").strip()
            if not employee_id or not name:
                skipped += 1
                continue
            if month_year and format_month_year(row.date) != month_year:
                skipped += 1
                continue
            if not cell_to_text(row.raw_value):
                continue

            totals = employees.get(name)
            if totals is None:
                totals = EmployeeMonthTotals(
                    employee_id=employee_id,
                    name=name,
                    dept=str(row.dept or "").strip() or DEFAULT_DEPT,
                )
                employees[name] = totals

            merge(totals, row.date, self._parser.parse(row.raw_value))

        if skipped:
            logger.debug("Skipped %d upload rows without identity or outside %s", skipped, month_year)
        return list(employees.values())
