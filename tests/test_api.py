import io

import pytest

from src.payroll_system.payroll_system.main import create_app

CSV = """Emp ID,Name,Dept,1,2,4
E001,Asha,Ops,09:00 17:00,P,HD
E002,Ravi,Sales,P,P,P
"""


@pytest.fixture
def client(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container)
    return app.test_client()


def _upload(client, month="2025-08", **form):
    data = {"file": (io.BytesIO(CSV.encode("utf-8")), "attendance.csv"), "monthYear": month, **form}
    return client.post("/api/attendance/upload", data=data, content_type="multipart/form-data")


def test_working_days_endpoint(client):
    resp = client.get("/api/calendar/working-days/2025-08")

    assert resp.status_code == 200
    info = resp.get_json()["workingDays"]
    assert info["workingDays"] == 26
    assert info["sundayCount"] == 5
    assert info["fallbackUsed"] is False

    resp = client.get("/api/calendar/working-days/2025-02?excludeSaturdays=true")
    assert resp.get_json()["workingDays"]["workingDays"] == 20


@pytest.mark.parametrize(
    "path",
    [
        "/api/calendar/working-days/2025-13",
        "/api/calendar/holidays/month/August",
        "/api/calendar/check-holiday/15-08-2025",
        "/api/calendar/holidays/1999",
        "/api/calendar/upcoming-holidays?days=0",
        "/api/attendance/?monthYear=2025/08",
    ],
)
def test_malformed_inputs_are_400(client, path):
    resp = client.get(path)

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_check_holiday(client):
    body = client.get("/api/calendar/check-holiday/2025-08-03").get_json()

    assert body["isHoliday"] is False
    assert body["isSunday"] is True
    assert body["dayName"] == "Sunday"


def test_calculate_salary_endpoint(client):
    resp = client.post(
        "/api/calendar/calculate-salary",
        json={"hoursWorked": 208, "daysPresent": 26, "monthYear": "2025-08"},
    )

    calc = resp.get_json()["calculation"]
    assert resp.status_code == 200
    assert calc["calculatedSalary"] == 6708
    assert calc["calculationMethod"] == "daily_wage"

    resp = client.post(
        "/api/calendar/calculate-salary",
        json={"hoursWorked": 300, "monthYear": "2025-08", "baseSalary": 25000},
    )
    assert resp.get_json()["calculation"]["calculatedSalary"] == 25000

    resp = client.post("/api/calendar/calculate-salary", json={"monthYear": "2025-08"})
    assert resp.status_code == 400


def test_settings_update_changes_location(client, container):
    resp = client.put("/api/calendar/settings", json={"country": "us", "state": "ca"})

    assert resp.status_code == 200
    assert resp.get_json()["settings"]["country"] == "US"
    assert container.calendar.location == ("US", "CA")


def test_upload_then_adjust_and_expose(client):
    resp = _upload(client)
    body = resp.get_json()

    assert resp.status_code == 200
    assert body["processedCount"] == 2
    records = {r["employeeId"]: r for r in body["records"]}
    assert records["E001"]["hoursWorked"] == 20
    assert records["E001"]["attendanceDetails"][2]["status"] == "Half Day"

    record_id = client.get("/api/attendance/?monthYear=2025-08").get_json()["records"][0]["id"]

    resp = client.put(f"/api/attendance/salary-increase/{record_id}", json={"amount": 100, "reason": "Festival"})
    assert resp.status_code == 200
    assert resp.get_json()["adjustment"]["adjustmentType"] == "increase"

    resp = client.put("/api/attendance/adjust/999", json={"adjustedSalary": 100})
    assert resp.status_code == 404

    assert client.get("/api/attendance/user/E001").get_json()["count"] == 0
    resp = client.put("/api/attendance/expose-all", json={"monthYear": "2025-08"})
    assert resp.get_json()["modifiedCount"] == 2
    assert client.get("/api/attendance/user/E001").get_json()["count"] == 1


def test_upload_rejects_bad_requests(client):
    resp = client.post("/api/attendance/upload", data={"monthYear": "2025-08"}, content_type="multipart/form-data")
    assert resp.status_code == 400

    resp = _upload(client, month="2025-8")
    assert resp.status_code == 400

    data = {"file": (io.BytesIO(b"just,some\n"), "attendance.csv"), "monthYear": "2025-08"}
    resp = client.post("/api/attendance/upload", data=data, content_type="multipart/form-data")
    assert resp.status_code == 422


def test_company_holiday_endpoints(client):
    resp = client.post(
        "/api/attendance/holidays",
        json={"monthYear": "2025-08", "holidays": [{"date": "2025-08-11", "name": "Foundation Day"}]},
    )
    assert resp.status_code == 201
    holiday_id = resp.get_json()["holidays"][0]["id"]

    listed = client.get("/api/attendance/holidays/2025-08").get_json()
    assert [h["name"] for h in listed["holidays"]] == ["Foundation Day"]

    info = client.get("/api/calendar/working-days/2025-08").get_json()["workingDays"]
    assert info["workingDays"] == 25
    assert info["adminHolidayCount"] == 1

    resp = client.post(
        "/api/attendance/holidays",
        json={"monthYear": "2025-08", "holidays": [{"date": "2025-09-01", "name": "Wrong month"}]},
    )
    assert resp.status_code == 400

    assert client.delete(f"/api/attendance/holidays/{holiday_id}").status_code == 200
    assert client.delete(f"/api/attendance/holidays/{holiday_id}").status_code == 404
