from __future__ import annotations

from pathlib import Path

import pytest

from app import create_app

PAYLOAD = {
    "locations": [{"id": "L1", "name": "Block A"}, {"id": "L2", "name": "Block B"}],
    "staff": [
        {"id": "s1", "name": "Kumar", "location_id": "L1", "category": "Permanent"},
        {"id": "s2", "name": "Devi", "location_id": "L1", "category": "Associate"},
        {"id": "s3", "name": "Arun", "location_id": "L2", "category": "MIS"},
    ],
    "topics": [{"id": "t1", "name": "Kindness"}, {"id": "t2", "name": "Patience"}],
    "verses": [{"id": "v1", "topic_id": "t1", "text": "Verse one"}],
    "sharing_rules": [{"day": "Monday", "location_ids": ["L1", "L2"]}],
    "leave_days": {"2024-01": [26]},
}


@pytest.fixture()
def client(tmp_path: Path):
    app = create_app({
        "TESTING": True,
        "DATABASE": str(tmp_path / "test.sqlite"),
        "AUTO_INIT_DB": True,
    })
    with app.test_client() as client:
        yield client


@pytest.fixture()
def loaded(client):
    resp = client.post("/api/data", json=PAYLOAD)
    assert resp.status_code == 200
    return client


def test_healthz(client):
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.data == b"OK"


def test_import_and_read_back(loaded):
    data = loaded.get("/api/data").get_json()
    assert [loc["id"] for loc in data["locations"]] == ["L1", "L2"]
    assert data["leave_days"] == {"2024-01": [26]}
    assert data["staff"][0]["category"] == "Block Integrator / Federation Coordinator"


def test_generate_schedule(loaded):
    resp = loaded.post("/api/schedule/generate", json={"month": "2024-01"})
    assert resp.status_code == 200
    payload = resp.get_json()
    assert payload["ok"] is True
    # 27 working days minus the 26th; Mondays carry two sub-rows
    assert payload["dates"] == 26
    assert payload["count"] == 26 + 5
    monday = [row for row in payload["rows"] if row["date"] == "2024-01-01"]
    assert [row["sub_row_location"] for row in monday] == ["Block A", "Block B"]
    assert monday[0]["sharing4_staff"] == "Devi"
    assert monday[1]["sharing2_staff"] == "Arun"


def test_empty_store_generates_nothing(client):
    payload = client.get("/api/schedule?month=2024-01").get_json()
    assert payload["rows"] == []


def test_exports(loaded):
    resp = loaded.get("/api/export/xlsx?month=2024-01")
    assert resp.status_code == 200
    assert "spreadsheetml.sheet" in resp.headers["Content-Type"]
    assert "01-01-2024.xlsx" in resp.headers["Content-Disposition"]

    resp = loaded.get("/api/export/csv?month=2024-01")
    assert resp.status_code == 200
    assert resp.headers["Content-Type"].startswith("text/csv")


def test_toggle_leave_day(loaded):
    resp = loaded.post("/api/leave-days/toggle", json={"month": "2024-01", "day": 2})
    assert resp.get_json()["days"] == [2, 26]
    resp = loaded.post("/api/leave-days/toggle", json={"month": "2024-01", "day": 26})
    assert resp.get_json()["days"] == [2]
    # Sundays cannot be toggled
    resp = loaded.post("/api/leave-days/toggle", json={"month": "2024-01", "day": 7})
    assert resp.get_json()["days"] == [2]
    assert loaded.get("/api/leave-days?month=2024-01").get_json()["days"] == [2]


def test_bad_input_is_rejected(loaded):
    assert loaded.get("/api/schedule?month=2024-13").status_code == 400
    assert loaded.post("/api/data", json={"staff": [{"id": "x", "category": "Boss"}]}).status_code == 400


def test_duplicate_ids_are_rejected(client):
    payload = {"locations": [{"id": "L", "name": "One"}, {"id": "L", "name": "Two"}]}
    resp = client.post("/api/data", json=payload)
    assert resp.status_code == 400
    assert resp.get_json()["ok"] is False


def test_import_reports_stored_rule_count(client):
    payload = dict(PAYLOAD, sharing_rules=[
        {"day": "Monday", "location_ids": ["L1"]},
        {"day": "Monday", "location_ids": ["L2"]},
        {"day": "Tuesday", "location_ids": ["L2"]},
    ])
    resp = client.post("/api/data", json=payload)
    assert resp.get_json()["sharing_rules"] == 2
    assert len(client.get("/api/data").get_json()["sharing_rules"]) == 2


def test_toggle_requires_month_and_day(loaded):
    assert loaded.post("/api/leave-days/toggle", json={"month": "2024-01"}).status_code == 400
    assert loaded.post("/api/leave-days/toggle", json={"day": 2}).status_code == 400
