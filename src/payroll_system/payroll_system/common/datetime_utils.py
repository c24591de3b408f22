from __future__ import annotations

import calendar
import math
import re
from datetime import date, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Iterator, Union

_MONTH_YEAR_RE = re.compile(r"^(\d{4})-(\d{2})$")

DateLike = Union[date, str]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def as_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(str(value).strip())


def parse_month_year(value: str) -> tuple[int, int]:
    """Parse YYYY-MM string into (year, month).

    Raises ValueError on anything else, including month numbers outside 1-12.
    """
    m = _MONTH_YEAR_RE.match(str(value).strip())
    if not m:
        raise ValueError(f"Invalid month string: {value!r}")
    year, month = int(m.group(1)), int(m.group(2))
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month number: {value!r}")
    return year, month


def format_month_year(value: date) -> str:
    return value.strftime("%Y-%m")


def days_in_month(month_year: str) -> int:
    year, month = parse_month_year(month_year)
    return calendar.monthrange(year, month)[1]


def iter_month_days(month_year: str) -> Iterator[date]:
    year, month = parse_month_year(month_year)
    current = date(year, month, 1)
    while current.month == month:
        yield current
        current += timedelta(days=1)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like spreadsheets do (2.5 -> 3), not like round() (2.5 -> 2).

    Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    exp = Decimal(1).scaleb(-digits)
    number = Decimal(str(value))
    with localcontext() as ctx:
        # quantize needs room for every integer digit of large values
        ctx.prec = max(ctx.prec, number.adjusted() + digits + 2)
        rounded = number.quantize(exp, rounding=ROUND_HALF_UP)
    return int(rounded) if digits == 0 else float(rounded)
