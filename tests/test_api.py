from __future__ import annotations

from datetime import date

import pytest

from src.personnel_system.personnel_system.container import build_container
from src.personnel_system.personnel_system.main import create_app


@pytest.fixture
def container():
    return build_container(seed_demo_data=True, clock=lambda: date(2024, 6, 15))


@pytest.fixture
def client(container):
    app = create_app(env="testing", container=container)
    return app.test_client()


def _payload(**overrides):
    data = {
        "full_name": "Đặng Thu Trang",
        "date_of_birth": "1992-07-07",
        "gender": "Nữ",
        "department_id": "PB05",
        "position_id": "CV07",
        "phone_number": "0966000111",
        "id_card_number": "040192000777",
        "id_card_issue_date": "2022-05-05",
        "recruitment_date": "2018-02-01",
        "employment_type": "Khoán",
        "highest_specialization": "CĐ Điều dưỡng",
    }
    data.update(overrides)
    return data


def test_dashboard_endpoint(client):
    resp = client.get("/api/dashboard")
    body = resp.get_json()

    assert resp.status_code == 200
    assert body["success"] is True
    totals = body["data"]["totals"]
    assert totals["total"] == 5
    assert totals["permanent"] + totals["contract"] == totals["total"]
    assert sum(a["count"] for a in body["data"]["ages"]) == 5
    assert sum(q["count"] for q in body["data"]["qualifications"]) == 5


def test_dashboard_rejects_bad_date(client):
    resp = client.get("/api/dashboard?on=15-06-2024")

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_list_filters_by_name(client):
    resp = client.get("/api/employees?q=AN")
    names = [r["full_name"] for r in resp.get_json()["data"]]

    assert resp.status_code == 200
    assert names == ["Nguyễn Văn An"]


def test_list_filters_by_department(client):
    body = client.get("/api/employees?department=PB06").get_json()

    assert [r["employee_id"] for r in body["data"]] == ["EMP002"]
    assert body["data"][0]["department_name"] == "Khoa Nội tổng hợp"


def test_create_update_and_soft_delete(client, container):
    created = client.post("/api/employees", json=_payload())
    assert created.status_code == 201
    emp_id = created.get_json()["data"]["employee_id"]
    assert emp_id.startswith("EMP")
    assert created.get_json()["data"]["status"] == "Đang công tác"

    updated = client.put(f"/api/employees/{emp_id}", json=_payload(full_name="Đặng Thu Hà"))
    assert updated.status_code == 200
    assert client.get(f"/api/employees/{emp_id}").get_json()["data"]["full_name"] == "Đặng Thu Hà"

    deleted = client.delete(f"/api/employees/{emp_id}")
    assert deleted.status_code == 200
    assert client.get(f"/api/employees/{emp_id}").get_json()["data"]["status"] == "Nghỉ việc"
    assert len(container.employees_repo.snapshot()) == 6


def test_create_missing_required_field_returns_400(client):
    resp = client.post("/api/employees", json=_payload(phone_number=""))

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_unknown_employee_returns_404(client):
    assert client.get("/api/employees/EMP404").status_code == 404
    assert client.put("/api/employees/EMP404", json=_payload()).status_code == 404
    assert client.delete("/api/employees/EMP404").status_code == 404


def test_reference_lists_and_blank_form(client):
    departments = client.get("/api/departments").get_json()["data"]
    positions = client.get("/api/positions").get_json()["data"]
    form = client.get("/api/employees/new").get_json()["data"]

    assert departments[0] == {"id": "PB01", "name": "Ban Giám đốc"}
    assert positions[0] == {"id": "CV01", "name": "Giám đốc"}
    assert form["department_id"] == "PB01"
    assert form["gender"] == "Nam"


@pytest.mark.parametrize(
    "overrides",
    [
        {"state_management": "abc"},
        {"informatics": ["certificate"]},
        {"work_history": ["2015-07-01"]},
        {"work_history": {"date": "2015-07-01", "event": "Bổ nhiệm"}},
        {"decisions": "QĐ-01"},
    ],
)
def test_create_with_malformed_nested_data_returns_400(client, container, overrides):
    resp = client.post("/api/employees", json=_payload(**overrides))

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False
    assert len(container.employees_repo.snapshot()) == 5


def test_non_object_payload_returns_400(client):
    assert client.post("/api/employees", json=["Đặng Thu Trang"]).status_code == 400
    assert client.put("/api/employees/EMP001", json="Đặng Thu Trang").status_code == 400


def test_update_with_malformed_nested_data_returns_400(client):
    resp = client.put("/api/employees/EMP001", json=_payload(political_theory=1))

    assert resp.status_code == 400
    assert client.get("/api/employees/EMP001").get_json()["data"]["full_name"] == "Nguyễn Văn An"
