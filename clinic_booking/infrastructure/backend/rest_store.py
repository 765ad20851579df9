from __future__ import annotations

from typing import Any

from clinic_booking.application.exceptions import OrderNotFoundError, ServiceNotFoundError
from clinic_booking.application.ports.doctor_directory import DoctorDirectoryPort
from clinic_booking.application.ports.order_gateway import OrderGatewayPort
from clinic_booking.application.ports.service_catalog import ServiceCatalogPort
from clinic_booking.domain.entities.doctor import Doctor
from clinic_booking.domain.entities.order import OrderRecord, OrderRequest
from clinic_booking.domain.entities.service import Service
from clinic_booking.infrastructure.backend.rest_client import BackendRestClient
from clinic_booking.infrastructure.store.rows import (
    coerce_treatment_options,
    doctor_from_row,
    order_from_row,
    service_from_row,
)


class RestServiceCatalog(ServiceCatalogPort):
    def __init__(self, client: BackendRestClient) -> None:
        self._client = client

    def list_services(self) -> list[Service]:
        return [service_from_row(row) for row in self._client.select("services")]

    def get_service(self, service_id: str) -> Service | None:
        rows = self._client.select("services", {"id": service_id})
        return service_from_row(rows[0]) if rows else None

    def create_service(self, payload: dict[str, Any]) -> Service:
        row = dict(payload)
        if "treatment_options" in row:
            row["treatment_options"] = coerce_treatment_options(row["treatment_options"])
        return service_from_row(self._client.insert("services", row))

    def save_treatment_options(self, service_id: str, serialized: str | None) -> None:
        rows = self._client.update("services", service_id, {"treatment_options": serialized})
        if not rows:
            raise ServiceNotFoundError(service_id)


class RestDoctorDirectory(DoctorDirectoryPort):
    def __init__(self, client: BackendRestClient) -> None:
        self._client = client

    def list_doctors(self) -> list[Doctor]:
        return [doctor_from_row(row) for row in self._client.select("doctors")]

    def get_doctor(self, doctor_id: str) -> Doctor | None:
        rows = self._client.select("doctors", {"id": doctor_id})
        return doctor_from_row(rows[0]) if rows else None


class RestOrderGateway(OrderGatewayPort):
    def __init__(self, client: BackendRestClient) -> None:
        self._client = client

    def create_order(self, request: OrderRequest) -> OrderRecord:
        row = self._client.insert("orders", request.to_payload())
        return OrderRecord(id=str(row["id"]), request=request)

    def update_order(self, order_id: str, request: OrderRequest) -> OrderRecord:
        # 200 with no rows means nothing matched
        rows = self._client.update("orders", order_id, request.to_payload())
        if not rows:
            raise OrderNotFoundError(order_id)
        return OrderRecord(id=order_id, request=request)

    def get_order(self, order_id: str) -> OrderRecord | None:
        rows = self._client.select("orders", {"id": order_id})
        return order_from_row(rows[0]) if rows else None
