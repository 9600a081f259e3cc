"""Tests for the inheritance request API endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from landregistry.core.config import Settings
from landregistry.web.app import create_app
from tests.conftest import HEIR_ADDRESS, OWNER_ADDRESS, make_parcel

TX_HASH = "0x" + "d" * 64


@pytest.fixture
def app():
    settings = Settings()
    settings.db.database_url = None
    return create_app(settings=settings)


@pytest.fixture
def parcel(app):
    return app.state.parcel_store.save(make_parcel(nominated_heir=HEIR_ADDRESS))


@pytest.fixture
def client(app):
    return TestClient(app)


def _open(client, parcel, **overrides):
    body = {
        "parcel_id": parcel.id,
        "owner_address": OWNER_ADDRESS,
        "heir_address": HEIR_ADDRESS,
        "request_date": "2025-05-01T09:00:00Z",
    }
    body.update(overrides)
    return client.post("/api/inheritance/requests", json=body)


class TestCreateEndpoint:
    def test_create(self, client, parcel):
        resp = _open(client, parcel)
        assert resp.status_code == 201
        data = resp.json()
        assert data["status"] == "PENDING"
        assert data["parcel_id"] == parcel.id

    def test_validation_error(self, client, parcel):
        resp = _open(client, parcel, heir_address="not-an-address")
        assert resp.status_code == 422

    def test_unknown_parcel(self, client, parcel):
        resp = _open(client, parcel, parcel_id="6f1c2a9e-3b7d-4c5e-9f0a-1b2c3d4e5f60")
        assert resp.status_code == 404

    def test_wrong_heir(self, client, parcel):
        resp = _open(client, parcel, heir_address="0x5678901234567890123456789012345678901234")
        assert resp.status_code == 400
        assert "designated heir" in resp.json()["detail"]


class TestLifecycleEndpoints:
    def test_verify_and_execute(self, app, client, parcel):
        request_id = _open(client, parcel).json()["id"]

        resp = client.post(
            f"/api/inheritance/requests/{request_id}/verify",
            json={
                "death_certificate_ref": "DC-2025-001",
                "date_of_death": "2025-04-20",
                "verification_source": "NIDA",
            },
        )
        assert resp.status_code == 200
        assert resp.json()["status"] == "DEATH_VERIFIED"

        resp = client.post(
            f"/api/inheritance/requests/{request_id}/execute",
            json={"transfer_transaction_hash": TX_HASH},
        )
        assert resp.status_code == 200
        assert resp.json()["status"] == "COMPLETED"
        assert app.state.parcel_store.get(parcel.id).owner_address == HEIR_ADDRESS

    def test_execute_before_verify(self, client, parcel):
        request_id = _open(client, parcel).json()["id"]
        resp = client.post(
            f"/api/inheritance/requests/{request_id}/execute",
            json={"transfer_transaction_hash": TX_HASH},
        )
        assert resp.status_code == 400

    def test_execute_bad_hash(self, client, parcel):
        request_id = _open(client, parcel).json()["id"]
        resp = client.post(
            f"/api/inheritance/requests/{request_id}/execute",
            json={"transfer_transaction_hash": "0x1"},
        )
        assert resp.status_code == 422

    def test_get_and_patch(self, client, parcel):
        request_id = _open(client, parcel).json()["id"]
        resp = client.patch(
            f"/api/inheritance/requests/{request_id}",
            json={"status": "VERIFICATION_REQUESTED", "notes": "awaiting NIDA"},
        )
        assert resp.status_code == 200
        data = client.get(f"/api/inheritance/requests/{request_id}").json()
        assert data["status"] == "VERIFICATION_REQUESTED"
        assert data["notes"] == "awaiting NIDA"

    def test_patch_rejects_null_status(self, client, parcel):
        request_id = _open(client, parcel).json()["id"]
        resp = client.patch(f"/api/inheritance/requests/{request_id}", json={"status": None})
        assert resp.status_code == 422
        resp = client.patch(
            f"/api/inheritance/requests/{request_id}",
            json={"requires_manual_verification": None},
        )
        assert resp.status_code == 422

        assert client.get(f"/api/inheritance/requests/{request_id}").json()["status"] == "PENDING"
        resp = client.post(
            f"/api/inheritance/requests/{request_id}/verify",
            json={
                "death_certificate_ref": "DC-2025-0042",
                "date_of_death": "2025-04-20",
                "verification_source": "MANUAL",
            },
        )
        assert resp.status_code == 200
        assert resp.json()["status"] == "DEATH_VERIFIED"

    def test_missing_request(self, client):
        assert client.get("/api/inheritance/requests/missing").status_code == 404
        assert client.patch("/api/inheritance/requests/missing", json={}).status_code == 404


class TestListEndpoint:
    def test_list_with_filters(self, client, parcel):
        for day in range(1, 4):
            _open(client, parcel, request_date=f"2025-05-0{day}")
        resp = client.get(
            "/api/inheritance/requests",
            params={"limit": 2, "sort_order": "ASC", "heir_address": HEIR_ADDRESS},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["total"] == 3
        assert data["limit"] == 2
        assert [r["request_date"][:10] for r in data["items"]] == ["2025-05-01", "2025-05-02"]

    def test_list_rejects_bad_sort(self, client):
        resp = client.get("/api/inheritance/requests", params={"sort_by": "owner_address"})
        assert resp.status_code == 422

    def test_list_manual_flag(self, client, parcel):
        _open(client, parcel, requires_manual_verification=True)
        _open(client, parcel)
        resp = client.get(
            "/api/inheritance/requests", params={"requires_manual_verification": "true"}
        )
        assert resp.json()["total"] == 1
