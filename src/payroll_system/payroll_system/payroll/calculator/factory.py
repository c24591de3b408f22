from __future__ import annotations

from dataclasses import dataclass

from ...core.enums import CalculationMethod
from ..config import SalaryConfig
from .base import SalaryCalculator
from .daily_wage_calculator import DailyWageSalaryCalculator
from .proportional_calculator import ProportionalSalaryCalculator


@dataclass
class SalaryCalculatorFactory:
    """Factory Pattern: pick the salary method for an employee."""

    def resolve_method(self, config: SalaryConfig) -> CalculationMethod:
        if config.salary_calculation_method != CalculationMethod.AUTO:
            return config.salary_calculation_method
        if config.base_salary > config.proportional_threshold:
            return CalculationMethod.PROPORTIONAL
        return CalculationMethod.DAILY_WAGE

    def for_method(self, method: CalculationMethod) -> SalaryCalculator:
        if method == CalculationMethod.PROPORTIONAL:
            return ProportionalSalaryCalculator()
        return DailyWageSalaryCalculator()

    def for_config(self, config: SalaryConfig) -> SalaryCalculator:
        return self.for_method(self.resolve_method(config))
