from __future__ import annotations

import logging

from ...common.datetime_utils import round_half_up
from ...core.enums import CalculationMethod
from .base import SalaryCalculator, SalaryFigure, SalaryInputs, format_amount

logger = logging.getLogger(__name__)


class DailyWageSalaryCalculator(SalaryCalculator):
    """effective days x (base / days in month). Not clamped to the base salary."""

    method = CalculationMethod.DAILY_WAGE

    def calculate(self, inputs: SalaryInputs) -> SalaryFigure:
        daily_wage = round_half_up(inputs.base_salary / inputs.days_in_month)
        salary = max(0, round_half_up(inputs.effective_days * daily_wage))

        if salary > inputs.base_salary:
            logger.warning(
                "Daily-wage salary %s exceeds base salary %s (%s effective days)",
                salary,
                inputs.base_salary,
                inputs.effective_days,
            )

        return SalaryFigure(
            calculated_salary=salary,
            daily_wage=daily_wage,
            daily_rate=daily_wage,
            formula=f"{format_amount(inputs.effective_days)} days × ₹{daily_wage} = ₹{salary}",
        )
