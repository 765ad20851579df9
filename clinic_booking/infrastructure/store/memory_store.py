from __future__ import annotations

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


class MemoryStore(ServiceCatalogPort, DoctorDirectoryPort, OrderGatewayPort):
    def __init__(
        self,
        services: list[dict[str, Any]] | None = None,
        doctors: list[dict[str, Any]] | None = None,
    ) -> None:
        self._services: dict[str, dict[str, Any]] = {}
        self._doctors: dict[str, dict[str, Any]] = {}
        self._orders: dict[str, dict[str, Any]] = {}
        for payload in services or []:
            self.create_service(payload)
        for row in doctors or []:
            self._doctors[str(row["id"])] = dict(row)

    def list_services(self) -> list[Service]:
        return [service_from_row(row) for row in self._services.values()]

    def get_service(self, service_id: str) -> Service | None:
        row = self._services.get(service_id)
        return service_from_row(row) if row else None

    def create_service(self, payload: dict[str, Any]) -> Service:
        row = service_row(payload)
        self._services[str(row["id"])] = row
        return service_from_row(row)

    def save_treatment_options(self, service_id: str, serialized: str | None) -> None:
        if service_id not in self._services:
            raise ServiceNotFoundError(service_id)
        self._services[service_id]["treatment_options"] = serialized

    def list_doctors(self) -> list[Doctor]:
        return [doctor_from_row(row) for row in self._doctors.values()]

    def get_doctor(self, doctor_id: str) -> Doctor | None:
        row = self._doctors.get(doctor_id)
        return doctor_from_row(row) if row else None

    def create_order(self, request: OrderRequest) -> OrderRecord:
        order_id = new_id()
        self._orders[order_id] = {"id": order_id, **request.to_payload()}
        return OrderRecord(id=order_id, request=request)

    def update_order(self, order_id: str, request: OrderRequest) -> OrderRecord:
        if order_id not in self._orders:
            raise OrderNotFoundError(order_id)
        self._orders[order_id] = {"id": order_id, **request.to_payload()}
        return OrderRecord(id=order_id, request=request)

    def get_order(self, order_id: str) -> OrderRecord | None:
        row = self._orders.get(order_id)
        return order_from_row(row) if row else None
