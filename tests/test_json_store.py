"""
Tests for the file-backed development store.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

import pytest

from clinic_booking.application.exceptions import OrderNotFoundError, ServiceNotFoundError
from clinic_booking.domain.entities.order import OrderRequest
from clinic_booking.domain.entities.pricing import PricedSummary
from clinic_booking.infrastructure.store.json_store import JsonStore


def _request(**overrides) -> OrderRequest:
    values = dict(
        service_id="peel",
        service_title="Chemical Peel",
        package="3 sessions",
        doctor_id="d1",
        booking_date="2026-11-02",
        booking_time="10:00",
        summary=PricedSummary(session_count=3, unit_price=60.0, discount_percent=25, total_amount=180.0),
    )
    values.update(overrides)
    return OrderRequest(**values)


def test_service_round_trips_through_file():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "clinic.json"
        store = JsonStore(path=str(path))
        store.create_service({"id": "peel", "name": "Chemical Peel", "base_price": 80})

        reopened = JsonStore(path=str(path))
        service = reopened.get_service("peel")

        assert service is not None
        assert service.name == "Chemical Peel"
        assert service.base_price == 80.0


def test_string_treatment_options_stored_parsed():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "clinic.json"
        store = JsonStore(path=str(path))
        store.create_service({"id": "a", "name": "A", "treatment_options": '[{"title": "Chin", "price": 60}]'})
        store.create_service({"id": "b", "name": "B", "treatment_options": "not json"})

        data = json.loads(path.read_text(encoding="utf-8"))

        assert data["services"]["a"]["treatment_options"] == [{"title": "Chin", "price": 60}]
        assert data["services"]["b"]["treatment_options"] == []


def test_save_treatment_options():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = JsonStore(path=str(Path(tmpdir) / "clinic.json"))
        store.create_service({"id": "peel", "name": "Chemical Peel"})

        store.save_treatment_options("peel", '[{"name": "Neck", "image": "", "pricing": []}]')

        assert store.get_service("peel").treatment_options == '[{"name": "Neck", "image": "", "pricing": []}]'
        with pytest.raises(ServiceNotFoundError):
            store.save_treatment_options("missing", None)


def test_orders_create_and_update():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = JsonStore(path=str(Path(tmpdir) / "clinic.json"))

        record = store.create_order(_request())
        updated = store.update_order(record.id, _request(booking_time="15:00"))

        assert updated.id == record.id
        assert updated.request.booking_time == "15:00"
        assert store.get_order(record.id).request.booking_time == "15:00"
        assert store.get_order("missing") is None
        with pytest.raises(OrderNotFoundError):
            store.update_order("missing", _request())


def test_doctors():
    with tempfile.TemporaryDirectory() as tmpdir:
        store = JsonStore(path=str(Path(tmpdir) / "clinic.json"))
        store.add_doctor({"id": "d1", "first_name": "Amara", "last_name": "Okafor", "is_active": True})

        assert [d.display_name for d in store.list_doctors()] == ["Amara Okafor"]
        assert store.get_doctor("d2") is None


def test_corrupted_file_reads_as_empty():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "clinic.json"
        path.write_text("{ not json", encoding="utf-8")

        assert JsonStore(path=str(path)).list_services() == []
