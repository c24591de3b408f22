from __future__ import annotations

import math
import re
from datetime import date

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date, parse_month_year

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_month_year(value: str | None) -> str:
    if not value:
        raise ValidationError("Invalid month format. Use YYYY-MM (e.g., 2025-01)")
    try:
        parse_month_year(value)
    except ValueError:
        raise ValidationError("Invalid month format. Use YYYY-MM (e.g., 2025-01)") from None
    return value.strip()


def require_iso_date(value: str | None) -> date:
    if not value or not _ISO_DATE_RE.match(value.strip()):
        raise ValidationError("Invalid date format. Use YYYY-MM-DD (e.g., 2025-01-15)")
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        raise ValidationError("Invalid date format. Use YYYY-MM-DD (e.g., 2025-01-15)") from None


def require_number(value, field_name: str, *, minimum: float | None = None, strictly_positive: bool = False) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"{field_name} must be a number") from None
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} must be a finite number")
    if strictly_positive and number <= 0:
        raise ValidationError(f"Valid {field_name} is required")
    if minimum is not None and number < minimum:
        raise ValidationError(f"Valid {field_name} is required")
    return number


def require_int_in_range(value, field_name: str, *, low: int, high: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field_name}. Must be between {low} and {high}") from None
    if not low <= number <= high:
        raise ValidationError(f"Invalid {field_name}. Must be between {low} and {high}")
    return number
