from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import SalaryAdjustment, SalaryRecord


class SalaryRecordRepository(Protocol):
    def replace_month(self, month_year: str, records: Sequence[SalaryRecord]) -> int:
        """Delete every record of the month, then insert `records`. Returns inserted count."""

        raise NotImplementedError

    def list_for_month(self, month_year: str, *, exposed_only: bool = False) -> Sequence[SalaryRecord]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: str, *, exposed_only: bool = False) -> Sequence[SalaryRecord]:
        raise NotImplementedError

    def get_by_id(self, record_id: int) -> Optional[SalaryRecord]:
        raise NotImplementedError

    def update_adjusted_salary(self, record_id: int, adjusted_salary: float) -> bool:
        raise NotImplementedError

    def set_exposed(self, record_id: int) -> bool:
        raise NotImplementedError

    def expose_month(self, month_year: str) -> int:
        raise NotImplementedError

    def add_adjustment(self, adjustment: SalaryAdjustment) -> int:
        raise NotImplementedError
