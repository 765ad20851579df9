from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any

from clinic_booking.application.exceptions import OrderNotFoundError, ServiceNotFoundError
from clinic_booking.application.ports.doctor_directory import DoctorDirectoryPort
from clinic_booking.application.ports.order_gateway import OrderGatewayPort
from clinic_booking.application.ports.service_catalog import ServiceCatalogPort
from clinic_booking.domain.entities.doctor import Doctor
from clinic_booking.domain.entities.order import OrderRecord, OrderRequest
from clinic_booking.domain.entities.service import Service
from clinic_booking.infrastructure.store.rows import (
    doctor_from_row,
    new_id,
    order_from_row,
    service_from_row,
    service_row,
)


class JsonStore(ServiceCatalogPort, DoctorDirectoryPort, OrderGatewayPort):
    """Single-file JSON store for local development."""

    def __init__(self, path: str = "./data/clinic.json") -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def _load(self) -> dict[str, Any]:
        """Load the document, return empty tables if missing or corrupted."""
        empty: dict[str, Any] = {"services": {}, "doctors": {}, "orders": {}, "version": 1}
        if not self._path.exists():
            return empty
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            self._logger.warning("Corrupted store file, starting empty", extra={"error": str(e)})
            return empty
        for table in ("services", "doctors", "orders"):
            data.setdefault(table, {})
        return data

    def _save(self, data: dict[str, Any]) -> None:
        """Save the document atomically."""
        temp_path = self._path.with_suffix(".json.tmp")
        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            temp_path.replace(self._path)
        except Exception:
            if temp_path.exists():
                temp_path.unlink()
            raise

    def list_services(self) -> list[Service]:
        with self._lock:
            return [service_from_row(row) for row in self._load()["services"].values()]

    def get_service(self, service_id: str) -> Service | None:
        with self._lock:
            row = self._load()["services"].get(service_id)
        return service_from_row(row) if row else None

    def create_service(self, payload: dict[str, Any]) -> Service:
        row = service_row(payload)
        with self._lock:
            data = self._load()
            data["services"][str(row["id"])] = row
            self._save(data)
        return service_from_row(row)

    def save_treatment_options(self, service_id: str, serialized: str | None) -> None:
        with self._lock:
            data = self._load()
            if service_id not in data["services"]:
                raise ServiceNotFoundError(service_id)
            data["services"][service_id]["treatment_options"] = serialized
            self._save(data)

    def add_doctor(self, row: dict[str, Any]) -> Doctor:
        """Seed helper for local development; the doctor directory itself is read-only."""
        with self._lock:
            data = self._load()
            data["doctors"][str(row["id"])] = dict(row)
            self._save(data)
        return doctor_from_row(row)

    def list_doctors(self) -> list[Doctor]:
        with self._lock:
            return [doctor_from_row(row) for row in self._load()["doctors"].values()]

    def get_doctor(self, doctor_id: str) -> Doctor | None:
        with self._lock:
            row = self._load()["doctors"].get(doctor_id)
        return doctor_from_row(row) if row else None

    def create_order(self, request: OrderRequest) -> OrderRecord:
        order_id = new_id()
        with self._lock:
            data = self._load()
            data["orders"][order_id] = {"id": order_id, **request.to_payload()}
            self._save(data)
        return OrderRecord(id=order_id, request=request)

    def update_order(self, order_id: str, request: OrderRequest) -> OrderRecord:
        with self._lock:
            data = self._load()
            if order_id not in data["orders"]:
                raise OrderNotFoundError(order_id)
            data["orders"][order_id] = {"id": order_id, **request.to_payload()}
            self._save(data)
        return OrderRecord(id=order_id, request=request)

    def get_order(self, order_id: str) -> OrderRecord | None:
        with self._lock:
            row = self._load()["orders"].get(order_id)
        return order_from_row(row) if row else None
