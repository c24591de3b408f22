import io
from datetime import date, datetime

import pandas as pd
import pytest

from src.payroll_system.payroll_system.attendance.spreadsheet import (
    find_header_row,
    header_to_date,
    read_upload_rows,
    rows_from_frame,
)
from src.payroll_system.payroll_system.core.exceptions import SpreadsheetError

CSV = """Monthly attendance,,,,,
Emp ID,Employee Name,Department,1,2,3
E001,Asha,Ops,09:00 17:30,HD,
E002,Ravi,,P,A,8
,Nobody,Ops,P,P,P
"""


def test_read_csv_upload():
    rows = read_upload_rows(io.BytesIO(CSV.encode("utf-8")), "2025-08", filename="august.csv")

    cells = {(r.employee_id, r.date.day): r.raw_value for r in rows}
    assert cells == {
        ("E001", 1): "09:00 17:30",
        ("E001", 2): "HD",
        ("E002", 1): "P",
        ("E002", 2): "A",
        ("E002", 3): "8",
    }
    assert {r.dept for r in rows if r.employee_id == "E002"} == {"General"}


def test_rows_from_frame_accepts_excel_typed_headers():
    frame = pd.DataFrame(
        [
            ["ID", "Name", "Dept", datetime(2025, 8, 1), 45871.0],
            ["E001", "Asha", "Ops", "P", 8.0],
        ]
    )

    rows = rows_from_frame(frame, "2025-08")

    assert [(r.date, r.raw_value) for r in rows] == [(date(2025, 8, 1), "P"), (date(2025, 8, 2), 8.0)]


def test_missing_columns_is_a_spreadsheet_error():
    frame = pd.DataFrame([["Code", "Dept", "1"], ["E001", "Ops", "P"], ["E002", "Ops", "A"]])

    with pytest.raises(SpreadsheetError):
        rows_from_frame(frame, "2025-08")


def test_unreadable_file_is_a_spreadsheet_error():
    with pytest.raises(SpreadsheetError):
        read_upload_rows(io.BytesIO(b"not a workbook"), "2025-08", filename="august.xlsx")


def test_header_row_found_by_keywords():
    rows = [["Attendance August", None], ["Employee ID", "Name", "1"], ["E1", "A", "P"]]

    assert find_header_row(rows) == 1


@pytest.mark.parametrize(
    "cell, expected",
    [
        ("5", date(2025, 8, 5)),
        (12, date(2025, 8, 12)),
        ("03/08/2025", date(2025, 8, 3)),
        ("3-8", date(2025, 8, 3)),
        ("Day 7", date(2025, 8, 7)),
        ("31", date(2025, 8, 31)),
        ("32", None),
    ],
)
def test_header_to_date(cell, expected):
    assert header_to_date(cell, 2025, 8) == expected


def test_date_columns_start_after_name_when_there_is_no_dept():
    frame = pd.DataFrame([["ID", "Name", 1, 2, 3], ["E001", "Asha", "P", "HD", "A"]])

    rows = rows_from_frame(frame, "2025-08")

    assert [r.date for r in rows] == [date(2025, 8, 1), date(2025, 8, 2), date(2025, 8, 3)]
    assert rows[0].dept == ""
