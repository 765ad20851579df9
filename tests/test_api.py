from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from clinic_booking.application.use_cases.booking import BookingUseCase
from clinic_booking.application.use_cases.treatment_admin import TreatmentAdminUseCase
from clinic_booking.main import app
from clinic_booking.wiring.dependencies import (
    get_booking_use_case,
    get_service_catalog,
    get_treatment_admin_use_case,
)


@pytest.fixture
def client(store):
    app.dependency_overrides[get_service_catalog] = lambda: store
    app.dependency_overrides[get_booking_use_case] = lambda: BookingUseCase(
        catalog=store, doctors=store, orders=store
    )
    app.dependency_overrides[get_treatment_admin_use_case] = lambda: TreatmentAdminUseCase(store)
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_list_services_normalizes_catalog(client):
    services = {s["id"]: s for s in client.get("/services").json()}

    assert [s["name"] for s in services["laser"]["treatment_subcategories"]] == ["Upper Lip", "Chin"]
    assert services["peel"]["treatment_subcategories"] == []


def test_create_service(client):
    resp = client.post(
        "/services",
        json={"name": "Microneedling", "base_price": 150, "treatment_options": "not json"},
    )

    assert resp.status_code == 201
    assert resp.json()["treatment_subcategories"] == []


def test_offer_packages(client):
    body = client.get("/services/facial/offer").json()

    assert body["has_treatment_subcategories"] is False
    six = body["packages"][5]
    assert six["label"] == "6 sessions"
    assert six["per_session_display"] == "£65.00"
    assert six["total_display"] == "£390.00"
    assert [d["id"] for d in body["doctors"]] == ["d1"]


def test_offer_unknown_service(client):
    assert client.get("/services/missing/offer").status_code == 404


def test_quote_itemized(client):
    resp = client.post(
        "/bookings/quote",
        json={
            "service_id": "laser",
            "selected_subcategories": {
                "Upper Lip": {"name": "Small", "price": 45},
                "Chin": {"name": "Standard", "price": 60},
            },
        },
    )

    assert resp.json() == {
        "session_count": 2,
        "unit_price": 105.0,
        "discount_percent": 0,
        "total_amount": 105.0,
        "total_display": "£105.00",
    }


def test_submit_reports_first_missing_input(client):
    resp = client.post("/bookings", json={"service_id": "laser"})

    assert resp.status_code == 422
    assert resp.json()["detail"]["reason"] == "TREATMENT_REQUIRED"


def test_submit_and_reschedule(client):
    draft = {
        "service_id": "facial",
        "doctor_id": "d1",
        "date": "2026-11-02",
        "time": "10:00",
        "package": "3 sessions",
    }
    created = client.post("/bookings", json=draft)
    assert created.status_code == 201
    order = created.json()
    assert order["summary"]["total_amount"] == 225.0
    assert order["summary"]["discount_percent"] == 25

    moved = client.put(f"/bookings/{order['id']}", json={**draft, "time": "16:00"})
    assert moved.status_code == 200
    assert moved.json()["booking_time"] == "16:00"
    assert moved.json()["status"] == "pending"

    assert client.put("/bookings/missing", json=draft).status_code == 404


def test_admin_append_and_replace(client):
    new = {"subcategories": [{"name": "Neck", "pricing": [{"name": "Small", "price": 35}]}]}

    appended = client.post("/admin/services/laser/treatment-subcategories", json=new)
    assert [s["name"] for s in appended.json()] == ["Upper Lip", "Chin", "Neck"]

    replaced = client.put("/admin/services/laser/treatment-subcategories", json=new)
    assert [s["name"] for s in replaced.json()] == ["Neck"]

    listing = {c["service_id"]: c for c in client.get("/admin/treatment-subcategories").json()}
    assert [s["name"] for s in listing["laser"]["subcategories"]] == ["Neck"]


def test_admin_rejects_invalid_subcategories(client):
    resp = client.post(
        "/admin/services/laser/treatment-subcategories",
        json={"subcategories": [{"name": "Neck", "pricing": []}]},
    )

    assert resp.status_code == 400


def test_quote_itemized_without_selection(client):
    resp = client.post("/bookings/quote", json={"service_id": "laser"})

    assert resp.status_code == 422
    assert resp.json()["detail"]["reason"] == "TREATMENT_REQUIRED"


def test_submit_with_inactive_doctor(client):
    resp = client.post(
        "/bookings",
        json={"service_id": "peel", "doctor_id": "d2", "date": "2026-11-02", "time": "10:00"},
    )

    assert resp.status_code == 422
    assert resp.json()["detail"]["reason"] == "DOCTOR_REQUIRED"


def test_get_booking(client):
    created = client.post(
        "/bookings",
        json={"service_id": "peel", "doctor_id": "d1", "date": "2026-11-02", "time": "10:00"},
    ).json()

    fetched = client.get(f"/bookings/{created['id']}")

    assert fetched.status_code == 200
    assert fetched.json()["summary"]["total_amount"] == 80.0
    assert client.get("/bookings/missing").status_code == 404
