from __future__ import annotations

import logging
import math
from typing import Optional

from ..common.datetime_utils import days_in_month, parse_month_year, round_half_up
from ..core.constants import FALLBACK_REQUIRED_DAYS
from ..core.enums import CalculationMethod
from ..working_days.calculator import WorkingDaysCalculator
from .calculator.base import SalaryInputs, format_amount
from .calculator.factory import SalaryCalculatorFactory
from .config import SalaryConfig
from .model import SalaryBreakdown, SalaryDetail

logger = logging.getLogger(__name__)


def _percent(part: float, whole: float) -> float:
    if not whole:
        return 0
    return round_half_up(part / whole * 100, 2)


def _safe_hours(value) -> float:
    try:
        hours = float(value)
    except (TypeError, ValueError):
        return 0.0
    return hours if math.isfinite(hours) else 0.0


class SalaryEngine:
    """Turns a month of worked hours into a bounded salary with its breakdown.

    Effective days present are always hours / expected hours per day; the
    `days_present` argument is accepted for callers but does not enter the
    formula. Never raises: any failure yields the 27-day daily-wage fallback
    with `fallback_used` set.
    """

    def __init__(self, working_days: WorkingDaysCalculator, *, factory: Optional[SalaryCalculatorFactory] = None):
        self._working_days = working_days
        self._factory = factory or SalaryCalculatorFactory()

    def calculate_dynamic_salary(
        self,
        hours_worked: float,
        days_present: float,
        month_year: str,
        config: Optional[SalaryConfig] = None,
        admin_holiday_count: Optional[int] = None,
    ) -> SalaryBreakdown:
        config = config or SalaryConfig()
        try:
            return self._calculate(float(hours_worked), month_year, config, admin_holiday_count)
        except Exception:
            logger.exception("Error calculating salary for %r, using fallback", month_year)
            return self.fallback(_safe_hours(hours_worked), config)

    def _calculate(
        self,
        hours_worked: float,
        month_year: str,
        config: SalaryConfig,
        admin_holiday_count: Optional[int],
    ) -> SalaryBreakdown:
        parse_month_year(month_year)
        if not math.isfinite(hours_worked):
            raise ValueError(f"Hours worked is not a finite number: {hours_worked!r}")

        info = self._working_days.compute(month_year, exclude_saturdays=False, admin_holiday_count=admin_holiday_count or 0)
        required = min(info.required_working_days, int(config.max_working_days))
        per_day = float(config.expected_hours_per_day)
        expected_total_hours = required * per_day
        effective = hours_worked / per_day

        calculator = self._factory.for_config(config)
        figure = calculator.calculate(
            SalaryInputs(
                base_salary=config.base_salary,
                effective_days=effective,
                required_days=required,
                days_in_month=days_in_month(month_year),
            )
        )

        calculated = max(0, figure.calculated_salary)
        attendance_percentage = _percent(effective, required)
        avg_hours_per_day = round_half_up(hours_worked / effective, 2) if effective else 0

        return SalaryBreakdown(
            base_salary=config.base_salary,
            daily_wage=figure.daily_wage,
            calculation_method=calculator.method,
            required_days=required,
            working_days_in_month=info.working_days,
            days_present=round_half_up(effective, 2),
            hours_worked=round_half_up(hours_worked, 2),
            expected_total_hours=expected_total_hours,
            avg_hours_per_day=avg_hours_per_day,
            avg_hours_per_month=round_half_up(hours_worked, 2),
            calculated_salary=calculated,
            adjusted_salary=calculated,
            attendance_percentage=attendance_percentage,
            hours_percentage=_percent(hours_worked, expected_total_hours),
            salary_percentage=attendance_percentage,
            salary_breakdown=SalaryDetail(
                daily_rate=figure.daily_rate,
                calculation_formula=figure.formula,
                days_worked=effective,
                expected_hours=expected_total_hours,
                holidays=info.holidays,
                non_working_days=info.non_working_days,
            ),
            working_days_info=info,
            fallback_used=info.fallback_used,
        )

    def fallback(self, hours_worked: float, config: SalaryConfig) -> SalaryBreakdown:
        required = FALLBACK_REQUIRED_DAYS
        per_day = float(config.expected_hours_per_day) or 8.0
        expected_total_hours = required * per_day
        effective = hours_worked / per_day
        daily_wage = config.daily_wage
        calculated = max(0, round_half_up(effective * daily_wage))
        attendance_percentage = _percent(effective, required)

        return SalaryBreakdown(
            base_salary=config.base_salary,
            daily_wage=daily_wage,
            calculation_method=CalculationMethod.DAILY_WAGE,
            required_days=required,
            working_days_in_month=required,
            days_present=round_half_up(effective, 2),
            hours_worked=round_half_up(hours_worked, 2),
            expected_total_hours=expected_total_hours,
            avg_hours_per_day=round_half_up(hours_worked / effective, 2) if effective else 0,
            avg_hours_per_month=round_half_up(hours_worked, 2),
            calculated_salary=calculated,
            adjusted_salary=calculated,
            attendance_percentage=attendance_percentage,
            hours_percentage=_percent(hours_worked, expected_total_hours),
            salary_percentage=attendance_percentage,
            salary_breakdown=SalaryDetail(
                daily_rate=daily_wage,
                calculation_formula=f"{format_amount(effective)} days × ₹{format_amount(daily_wage)} = ₹{calculated}",
                days_worked=effective,
                expected_hours=expected_total_hours,
            ),
            fallback_used=True,
        )
