from __future__ import annotations

from ...common.datetime_utils import round_half_up
from ...core.enums import CalculationMethod
from .base import SalaryCalculator, SalaryFigure, SalaryInputs, format_amount


class ProportionalSalaryCalculator(SalaryCalculator):
    """base x min(effective / required, 1): never more than the base salary."""

    method = CalculationMethod.PROPORTIONAL

    def calculate(self, inputs: SalaryInputs) -> SalaryFigure:
        if inputs.required_days > 0:
            ratio = min(inputs.effective_days / inputs.required_days, 1)
            daily_rate = round_half_up(inputs.base_salary / inputs.required_days)
        else:
            # No payable days left in the month: any attendance earns the full base.
            ratio = 1 if inputs.effective_days > 0 else 0
            daily_rate = 0
        salary = max(0, round_half_up(inputs.base_salary * max(ratio, 0)))

        return SalaryFigure(
            calculated_salary=salary,
            daily_wage=round_half_up(inputs.base_salary / inputs.days_in_month),
            daily_rate=daily_rate,
            formula=(
                f"₹{format_amount(inputs.base_salary)} × "
                f"({format_amount(inputs.effective_days)}/{inputs.required_days}) = ₹{salary}"
            ),
        )
