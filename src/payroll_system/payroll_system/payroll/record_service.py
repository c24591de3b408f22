from __future__ import annotations

import logging
from dataclasses import replace

from ..common.validators import require_month_year, require_non_empty, require_number
from ..core.enums import AdjustmentType
from ..core.exceptions import NotFoundError
from .model import SalaryAdjustment, SalaryRecord
from .repository import SalaryRecordRepository

logger = logging.getLogger(__name__)


class SalaryRecordService:
    """Manual salary changes and publication of records to employees."""

    def __init__(self, records: SalaryRecordRepository):
        self._records = records

    def get(self, record_id: int) -> SalaryRecord:
        record = self._records.get_by_id(int(record_id))
        if record is None:
            raise NotFoundError("Salary record not found")
        return record

    def adjust(self, record_id: int, amount, reason: str = "") -> tuple[SalaryRecord, SalaryAdjustment]:
        new_salary = require_number(amount, "adjusted salary", minimum=0)
        return self._apply(record_id, AdjustmentType.SET, new_salary, new_salary, reason or "Manual adjustment by admin")

    def increase(self, record_id: int, amount, reason: str = "") -> tuple[SalaryRecord, SalaryAdjustment]:
        value = require_number(amount, "increase amount", strictly_positive=True)
        record = self.get(record_id)
        return self._apply(
            record_id,
            AdjustmentType.INCREASE,
            record.adjusted_salary + value,
            value,
            reason or f"Salary increase of ₹{value:g}",
            record=record,
        )

    def decrease(self, record_id: int, amount, reason: str = "") -> tuple[SalaryRecord, SalaryAdjustment]:
        value = require_number(amount, "decrease amount", strictly_positive=True)
        record = self.get(record_id)
        return self._apply(
            record_id,
            AdjustmentType.DECREASE,
            max(0, record.adjusted_salary - value),
            value,
            reason or f"Salary decrease of ₹{value:g}",
            record=record,
        )

    def _apply(
        self,
        record_id: int,
        kind: AdjustmentType,
        new_salary: float,
        amount: float,
        reason: str,
        *,
        record: SalaryRecord | None = None,
    ) -> tuple[SalaryRecord, SalaryAdjustment]:
        record = record or self.get(record_id)
        adjustment = SalaryAdjustment(
            record_id=int(record.record_id),
            employee_id=record.employee_id,
            month_year=record.month_year,
            original_salary=record.adjusted_salary,
            adjusted_salary=new_salary,
            adjustment_type=kind,
            adjustment_amount=amount,
            reason=reason.strip(),
        )
        if not self._records.update_adjusted_salary(int(record.record_id), new_salary):
            raise NotFoundError("Salary record not found")
        adjustment_id = self._records.add_adjustment(adjustment)

        logger.info(
            "Salary of %s for %s %s: %s -> %s",
            record.employee_id,
            record.month_year,
            kind.value,
            record.adjusted_salary,
            new_salary,
        )
        return self.get(record.record_id), replace(adjustment, adjustment_id=adjustment_id)

    def expose(self, record_id: int) -> SalaryRecord:
        if not self._records.set_exposed(int(record_id)):
            raise NotFoundError("Salary record not found")
        return self.get(record_id)

    def expose_month(self, month_year: str) -> int:
        month_year = require_month_year(month_year)
        count = self._records.expose_month(month_year)
        logger.info("Exposed %d salary records for %s", count, month_year)
        return count

    def list_for_month(self, month_year: str, *, exposed_only: bool = False) -> list[SalaryRecord]:
        month_year = require_month_year(month_year)
        return list(self._records.list_for_month(month_year, exposed_only=exposed_only))

    def list_for_employee(self, employee_id: str, *, exposed_only: bool = True) -> list[SalaryRecord]:
        employee_id = require_non_empty(employee_id, "Employee id")
        return list(self._records.list_for_employee(employee_id, exposed_only=exposed_only))
