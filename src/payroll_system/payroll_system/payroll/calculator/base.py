from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ...core.enums import CalculationMethod


@dataclass(frozen=True)
class SalaryInputs:
    base_salary: float
    effective_days: float
    required_days: int
    days_in_month: int


@dataclass(frozen=True)
class SalaryFigure:
    calculated_salary: int
    daily_wage: int
    daily_rate: int
    formula: str


class SalaryCalculator(ABC):
    """Calculator interface (Strategy Pattern for monthly salary)."""

    method: CalculationMethod

    @abstractmethod
    def calculate(self, inputs: SalaryInputs) -> SalaryFigure:
        raise NotImplementedError


def format_amount(value: float) -> str:
    """Numbers as shown in formulas: 26 not 26.0, 25.5 stays 25.5."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)
