from __future__ import annotations

import logging
import re
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Any, Optional

import pandas as pd

from ..common.datetime_utils import parse_month_year
from ..core.exceptions import SpreadsheetError
from .model import UploadRow

logger = logging.getLogger(__name__)

HEADER_KEYWORDS = ("id", "name", "employee", "emp", "dept", "department", "date", "attendance", "status")
ID_TERMS = ("id", "emp id", "employee id", "empid", "emp_id", "employee_id")
NAME_TERMS = ("name", "employee name", "emp name", "full name", "employee_name")
DEPT_TERMS = ("dept", "department", "dept.", "dep", "division")

HEADER_SCAN_ROWS = 10
EXCEL_EPOCH = date(1899, 12, 30)

_DAY_RE = re.compile(r"^\d{1,2}$")
_DAY_MONTH_RE = re.compile(r"^(\d{1,2})[/-](\d{1,2})(?:[/-](\d{2,4}))?")
_ANY_DAY_RE = re.compile(r"\b(\d{1,2})\b")


def read_upload_rows(source, month_year: str, filename: Optional[str] = None) -> list[UploadRow]:
    """Read an attendance sheet (xlsx/xls/csv) into one UploadRow per marked cell."""

    frame = load_frame(source, filename)
    return rows_from_frame(frame, month_year)


def load_frame(source, filename: Optional[str] = None) -> pd.DataFrame:
    name = filename or (str(source) if isinstance(source, (str, Path)) else "")
    ext = Path(name).suffix.lower()

    try:
        if ext == ".csv":
            return pd.read_csv(source, header=None, dtype=object, skip_blank_lines=True)
        sheets = pd.read_excel(source, sheet_name=None, header=None, dtype=object)
    except Exception as e:
        raise SpreadsheetError(f"Failed to read attendance file: {e}") from e

    best_name, best = None, None
    for sheet_name, sheet in sheets.items():
        sheet = sheet.dropna(how="all")
        logger.debug("Sheet %r has %d non-empty rows", sheet_name, len(sheet))
        if best is None or len(sheet) > len(best):
            best_name, best = sheet_name, sheet

    if best is None or best.empty:
        raise SpreadsheetError(f"No data found in any sheet. Sheets analyzed: {', '.join(map(str, sheets))}")
    logger.info("Using sheet %r with %d non-empty rows", best_name, len(best))
    return best


def rows_from_frame(frame: pd.DataFrame, month_year: str) -> list[UploadRow]:
    year, month = parse_month_year(month_year)
    rows = [[_clean(v) for v in row] for row in frame.dropna(how="all").itertuples(index=False, name=None)]

    header_index = find_header_row(rows)
    if header_index is None or len(rows) < 2:
        raise SpreadsheetError(
            f"No valid data found. Found {len(rows)} rows; the file needs ID, Name and date columns."
        )

    header = rows[header_index]
    id_col = find_column(header, ID_TERMS)
    name_col = find_column(header, NAME_TERMS)
    dept_col = find_column(header, DEPT_TERMS)
    if id_col is None or name_col is None:
        raise SpreadsheetError(f"Required columns not found. Found: ID={id_col}, Name={name_col}, Dept={dept_col}")

    start = max(id_col, name_col, dept_col if dept_col is not None else -1) + 1
    date_columns: list[tuple[int, date]] = []
    for col in range(start, len(header)):
        cell = header[col]
        if not is_date_header(cell):
            continue
        day = header_to_date(cell, year, month)
        if day is None:
            logger.warning("Skipping column %d: cannot read %r as a date", col, cell)
            continue
        date_columns.append((col, day))
    logger.info("Found %d date columns starting at column %d", len(date_columns), start)

    out: list[UploadRow] = []
    for row in rows[header_index + 1:]:
        employee_id = _cell_str(_at(row, id_col))
        name = _cell_str(_at(row, name_col))
        if not employee_id or not name:
            continue
        dept = _cell_str(_at(row, dept_col)) if dept_col is not None else ""

        for col, day in date_columns:
            value = _at(row, col)
            if value is None or value == "":
                continue
            out.append(UploadRow(employee_id=employee_id, name=name, dept=dept or "General", date=day, raw_value=value))
    return out


def find_header_row(rows: list[list[Any]]) -> Optional[int]:
    for i, row in enumerate(rows[:HEADER_SCAN_ROWS]):
        matches = sum(
            1 for cell in row if isinstance(cell, str) and any(k in cell.strip().lower() for k in HEADER_KEYWORDS)
        )
        if matches >= 2:
            return i

    for i, row in enumerate(rows):
        if sum(1 for cell in row if cell is not None and cell != "") > 2:
            return i
    return None


def find_column(header: list[Any], terms: tuple[str, ...]) -> Optional[int]:
    for i, cell in enumerate(header):
        if isinstance(cell, str) and any(term in cell.strip().lower() for term in terms):
            return i
    return None


def is_date_header(cell: Any) -> bool:
    if cell is None or cell == "":
        return False
    if isinstance(cell, (date, datetime, int, float)) and not isinstance(cell, bool):
        return True
    text = str(cell).strip().lower()
    if not text:
        return False
    if _DAY_RE.match(text) or _DAY_MONTH_RE.match(text) or "date" in text or "day" in text:
        return True
    return not pd.isna(pd.to_datetime(text, errors="coerce", dayfirst=True))


def header_to_date(cell: Any, year: int, month: int) -> Optional[date]:
    """Turn a date-column header into the calendar date it stands for.

    Bare day numbers are placed in the target month.
    """

    if isinstance(cell, datetime):
        return cell.date()
    if isinstance(cell, date):
        return cell
    if isinstance(cell, (int, float)):
        number = float(cell)
        if number.is_integer() and 1 <= number <= 31:
            return _day_in_month(year, month, int(number))
        if number > 31:
            return EXCEL_EPOCH + timedelta(days=int(number))
        return None

    text = str(cell).strip()
    if _DAY_RE.match(text):
        return _day_in_month(year, month, int(text))

    m = _DAY_MONTH_RE.match(text)
    if m:
        day, mon = int(m.group(1)), int(m.group(2))
        yr = int(m.group(3)) if m.group(3) else year
        if yr < 100:
            yr += 2000
        try:
            return date(yr, mon, day)
        except ValueError:
            try:
                return date(yr, day, mon)
            except ValueError:
                return None

    parsed = pd.to_datetime(text, errors="coerce", dayfirst=True)
    if not pd.isna(parsed):
        return parsed.date()

    m = _ANY_DAY_RE.search(text)
    if m:
        return _day_in_month(year, month, int(m.group(1)))
    return None


def _day_in_month(year: int, month: int, day: int) -> Optional[date]:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def _clean(value: Any) -> Any:
    if value is None or (pd.api.types.is_scalar(value) and pd.isna(value)):
        return None
    return value


def _at(row: list[Any], col: Optional[int]) -> Any:
    if col is None or col >= len(row):
        return None
    return row[col]


def _cell_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()
