from __future__ import annotations

from typing import Mapping, Optional, Protocol

from .config import SalaryConfig


class EmployeeSalaryDirectory(Protocol):
    def get_config(self, employee_id: str, name: str) -> Optional[SalaryConfig]:
        raise NotImplementedError


class SettingsSalaryDirectory(EmployeeSalaryDirectory):
    """Per-employee overrides read from settings, keyed by employee id or name.

    Example EMPLOYEE_SALARY_OVERRIDES: {"E002": {"base_salary": 25000}}
    Overrides are resolved at construction, so a bad value fails at startup
    with ValidationError rather than during an upload.
    """

    def __init__(self, default: SalaryConfig, overrides: Optional[Mapping[str, Mapping]] = None):
        self._default = default
        self._configs = {
            str(k).strip().lower(): default.with_overrides(**dict(v)) for k, v in (overrides or {}).items()
        }

    @property
    def default(self) -> SalaryConfig:
        return self._default

    def get_config(self, employee_id: str, name: str) -> Optional[SalaryConfig]:
        for key in (employee_id, name):
            found = self._configs.get(str(key or "").strip().lower())
            if found is not None:
                return found
        return None
