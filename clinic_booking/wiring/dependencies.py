from functools import lru_cache
import logging

from clinic_booking.core.config import settings
from clinic_booking.application.ports.doctor_directory import DoctorDirectoryPort
from clinic_booking.application.ports.order_gateway import OrderGatewayPort
from clinic_booking.application.ports.service_catalog import ServiceCatalogPort
from clinic_booking.application.use_cases.booking import BookingUseCase
from clinic_booking.application.use_cases.treatment_admin import TreatmentAdminUseCase
from clinic_booking.domain.entities.treatment import TreatmentSubcategory
from clinic_booking.infrastructure.backend.rest_client import BackendRestClient
from clinic_booking.infrastructure.backend.rest_store import (
    RestDoctorDirectory,
    RestOrderGateway,
    RestServiceCatalog,
)
from clinic_booking.infrastructure.store.json_store import JsonStore
from clinic_booking.infrastructure.store.memory_store import MemoryStore


_local_store: MemoryStore | JsonStore | None = None


def _use_backend() -> bool:
    return bool(settings.BACKEND_URL) and settings.ENV.lower() not in {"dev", "local"}


def get_local_store() -> MemoryStore | JsonStore:
    global _local_store
    if _local_store is None:
        if settings.ENV.lower() in {"dev", "local"}:
            _local_store = JsonStore()
        else:
            _local_store = MemoryStore()
    return _local_store


@lru_cache
def get_backend_client() -> BackendRestClient:
    return BackendRestClient()


def get_service_catalog() -> ServiceCatalogPort:
    if _use_backend():
        return RestServiceCatalog(get_backend_client())
    return get_local_store()


def get_doctor_directory() -> DoctorDirectoryPort:
    if _use_backend():
        return RestDoctorDirectory(get_backend_client())
    return get_local_store()


def get_order_gateway() -> OrderGatewayPort:
    if _use_backend():
        return RestOrderGateway(get_backend_client())
    return get_local_store()


def _log_catalog_changed(service_id: str, catalog: list[TreatmentSubcategory]) -> None:
    logging.getLogger(__name__).info(
        "Catalog changed", extra={"service": service_id, "count": len(catalog)}
    )


def get_booking_use_case() -> BookingUseCase:
    return BookingUseCase(
        catalog=get_service_catalog(),
        doctors=get_doctor_directory(),
        orders=get_order_gateway(),
        default_max_sessions=settings.DEFAULT_MAX_SESSIONS,
    )


def get_treatment_admin_use_case() -> TreatmentAdminUseCase:
    return TreatmentAdminUseCase(
        catalog=get_service_catalog(),
        on_catalog_changed=_log_catalog_changed,
    )
