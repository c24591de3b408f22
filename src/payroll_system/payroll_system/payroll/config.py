from __future__ import annotations

import math
from dataclasses import dataclass, replace
from types import ModuleType
from typing import Any, Optional

from ..core.constants import (
    DEFAULT_BASE_SALARY,
    DEFAULT_DAILY_WAGE,
    MAX_WORKING_DAYS,
    PROPORTIONAL_THRESHOLD,
    STANDARD_WORKING_HOURS,
)
from ..core.enums import CalculationMethod
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class SalaryConfig:
    """Per-employee salary inputs, resolved once before calculation."""

    base_salary: float = DEFAULT_BASE_SALARY
    daily_wage: float = DEFAULT_DAILY_WAGE
    salary_calculation_method: CalculationMethod = CalculationMethod.AUTO
    expected_hours_per_day: float = STANDARD_WORKING_HOURS
    max_working_days: int = MAX_WORKING_DAYS
    proportional_threshold: float = PROPORTIONAL_THRESHOLD

    @classmethod
    def from_settings(cls, settings: Optional[ModuleType]) -> "SalaryConfig":
        if settings is None:
            return cls()
        return cls(
            base_salary=float(getattr(settings, "DEFAULT_BASE_SALARY", DEFAULT_BASE_SALARY)),
            daily_wage=float(getattr(settings, "DEFAULT_DAILY_WAGE", DEFAULT_DAILY_WAGE)),
            expected_hours_per_day=float(getattr(settings, "STANDARD_WORKING_HOURS", STANDARD_WORKING_HOURS)),
            max_working_days=int(getattr(settings, "MAX_WORKING_DAYS", MAX_WORKING_DAYS)),
        )

    def with_overrides(self, **overrides: Any) -> "SalaryConfig":
        """Copy with the given non-empty fields replaced.

        Values are coerced to the field types; anything that does not convert
        raises ValidationError.
        """

        values = {k: v for k, v in overrides.items() if v is not None and v != ""}
        unknown = sorted(set(values) - set(_COERCE))
        if unknown:
            raise ValidationError(f"Unknown salary setting(s): {', '.join(unknown)}")

        for key, value in values.items():
            try:
                values[key] = _COERCE[key](value)
            except (TypeError, ValueError, OverflowError):
                raise ValidationError(f"Invalid value for {key}: {value!r}") from None
        return replace(self, **values)


def _finite(value: Any) -> float:
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"Not a finite number: {value!r}")
    return number


def _whole(value: Any) -> int:
    number = _finite(value)
    if not number.is_integer():
        raise ValueError(f"Not a whole number: {value!r}")
    return int(number)


def _method(value: Any) -> CalculationMethod:
    if isinstance(value, CalculationMethod):
        return value
    return CalculationMethod(str(value).strip().lower())


_COERCE = {
    "base_salary": _finite,
    "daily_wage": _finite,
    "salary_calculation_method": _method,
    "expected_hours_per_day": _finite,
    "max_working_days": _whole,
    "proportional_threshold": _finite,
}
