"""Integration tests for the HTTP adapter."""

import pytest
from fastapi.testclient import TestClient

from workshopguard.api.app import app
from workshopguard.capacity import FULL_CAPACITY_MESSAGE


@pytest.fixture
def client(monkeypatch):
    """Create a test client with a small configured workshop."""
    monkeypatch.setenv("WORKSHOPGUARD_MAX_CONCURRENT_JOBS", "5")
    monkeypatch.setenv("WORKSHOPGUARD_MAX_JOBS_PER_TECHNICIAN", "5")
    with TestClient(app) as client:
        yield client


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


class TestForms:
    def test_list(self, client):
        response = client.get("/api/forms")
        assert "intake" in response.json()["forms"]

    def test_valid_record(self, client):
        response = client.post(
            "/api/forms/intake/validate",
            json={"data": {"job_id": "J-1", "reported_issue": "Won't start"}},
        )
        assert response.status_code == 200
        assert response.json() == {"success": True, "valid": True}

    def test_all_violations_returned(self, client):
        response = client.post("/api/forms/intake/validate", json={"data": {}})
        assert response.status_code == 422
        body = response.json()
        assert body["valid"] is False
        assert body["errors"] == [
            {"field": "Job ID", "message": "Job ID is required"},
            {"field": "Reported Issue", "message": "Reported Issue is required"},
        ]

    def test_delivery_in_future(self, client):
        response = client.post(
            "/api/forms/delivery/validate",
            json={"data": {"delivery_date": "2999-01-01", "delivery_technician_id": "t1"}},
        )
        assert response.status_code == 200

    def test_delivery_missing_date(self, client):
        response = client.post(
            "/api/forms/delivery/validate",
            json={"data": {"delivery_technician_id": "t1"}},
        )
        assert response.status_code == 422
        assert response.json()["errors"] == [
            {"field": "Delivery Date", "message": "Delivery Date is required"}
        ]

    def test_unknown_form(self, client):
        response = client.post("/api/forms/timesheet/validate", json={"data": {}})
        assert response.status_code == 404

    def test_malformed_body(self, client):
        response = client.post("/api/forms/intake/validate", json={"job_id": "J-1"})
        assert response.status_code == 422

    def test_delivery_date_past_calendar_edge(self, client):
        response = client.post(
            "/api/forms/delivery/validate",
            json={
                "data": {
                    "delivery_date": "9999-12-31T23:00:00-05:00",
                    "delivery_technician_id": "t1",
                }
            },
        )
        assert response.status_code == 422
        assert response.json()["errors"] == [
            {"field": "Delivery Date", "message": "Invalid date format for Delivery Date"}
        ]

    def test_workshop_setting_not_a_number(self, client):
        response = client.post(
            "/api/forms/workshop_settings/validate",
            json={"data": {"max_concurrent_jobs": "abc"}},
        )
        assert response.status_code == 422
        assert response.json()["errors"] == [
            {
                "field": "Max Concurrent Jobs",
                "message": "Max Concurrent Jobs must be a number",
            }
        ]


class TestTransitions:
    def test_table(self, client):
        body = client.get("/api/transitions").json()
        assert body["initial"] == "pending_intake"
        assert body["terminal"] == ["returned"]
        assert body["transitions"]["in_repair"] == ["repair_completed", "received"]
        assert body["transitions"]["returned"] == []

    def test_allowed(self, client):
        response = client.post(
            "/api/transitions/check",
            json={"current": "received", "proposed": "in_repair"},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["valid"] is True
        assert body["data"]["job_status"] == "in_progress"

    def test_rejected(self, client):
        response = client.post(
            "/api/transitions/check",
            json={"current": "in_repair", "proposed": "returned"},
        )
        assert response.status_code == 409
        assert response.json()["errors"] == [
            {
                "field": "status",
                "message": (
                    "Cannot transition from in_repair to returned. "
                    "Valid transitions: repair_completed, received"
                ),
            }
        ]

    def test_terminal(self, client):
        response = client.post(
            "/api/transitions/check",
            json={"current": "returned", "proposed": "received"},
        )
        assert response.status_code == 409
        assert response.json()["errors"][0]["message"].endswith("Valid transitions: none")


class TestCapacity:
    def test_normal(self, client):
        body = client.post("/api/capacity", json={"current": 2, "max": 10}).json()
        assert body["valid"] is True
        assert body["data"]["level"] == "normal"
        assert body["data"]["scope"] == "workshop"
        assert body["data"]["violation"] is None
        assert "warnings" not in body

    def test_approaching_is_a_warning(self, client):
        body = client.post("/api/capacity", json={"current": 8, "max": 10}).json()
        assert body["valid"] is True
        assert body["data"]["level"] == "approaching"
        assert body["warnings"][0]["field"] == "capacity"
        assert "(8/10 jobs)" in body["warnings"][0]["message"]

    def test_exceeded_is_an_error(self, client):
        response = client.post("/api/capacity", json={"current": 10, "max": 10})
        assert response.status_code == 200
        body = response.json()
        assert body["valid"] is False
        assert body["data"]["level"] == "exceeded"
        assert body["errors"] == [{"field": "capacity", "message": FULL_CAPACITY_MESSAGE}]
        assert body["data"]["violation"] == {
            "level": "exceeded",
            "severity": "error",
            "message": FULL_CAPACITY_MESSAGE,
        }

    def test_utilization(self, client):
        body = client.post("/api/capacity", json={"current": 3, "max": 4}).json()
        assert body["data"]["utilization"] == {
            "current": 3,
            "max": 4,
            "utilization_percentage": 75.0,
            "available_capacity": 1,
        }

    def test_falls_back_to_configured_limit(self, client):
        body = client.post("/api/capacity", json={"current": 5}).json()
        assert body["data"]["level"] == "exceeded"
        assert body["data"]["utilization"]["max"] == 5

    def test_technician_scope_uses_technician_limit(self, client):
        body = client.post(
            "/api/capacity", json={"current": 5, "scope": "technician"}
        ).json()
        assert body["valid"] is False
        assert body["data"]["scope"] == "technician"
        assert body["data"]["utilization"]["max"] == 5
        assert body["errors"][0]["message"].startswith(
            "Technician has reached maximum capacity (5 jobs)"
        )

    def test_technician_near_limit_is_not_a_warning(self, client):
        body = client.post(
            "/api/capacity", json={"current": 4, "max": 5, "scope": "technician"}
        ).json()
        assert body["valid"] is True
        assert body["data"]["level"] == "normal"
        assert "warnings" not in body

    @pytest.mark.parametrize(
        "payload",
        [
            {"current": 1, "max": 0},
            {"current": -1, "max": 10},
            {"max": 10},
            {"current": 1, "scope": "company"},
        ],
    )
    def test_invalid_reading(self, client, payload):
        response = client.post("/api/capacity", json=payload)
        assert response.status_code == 422
