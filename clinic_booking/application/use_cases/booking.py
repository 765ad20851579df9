from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import NoReturn

from clinic_booking.application.exceptions import (
    OrderNotFoundError,
    SelectionIncompleteError,
    ServiceNotFoundError,
)
from clinic_booking.application.ports.doctor_directory import DoctorDirectoryPort
from clinic_booking.application.ports.order_gateway import OrderGatewayPort
from clinic_booking.application.ports.service_catalog import ServiceCatalogPort
from clinic_booking.application.utils import pricing, treatment_catalog
from clinic_booking.application.utils.selection_validator import can_submit
from clinic_booking.domain.entities.booking_state import BookingDraft
from clinic_booking.domain.entities.doctor import Doctor
from clinic_booking.domain.entities.order import OrderRecord, OrderRequest
from clinic_booking.domain.entities.pricing import PricedSummary, SessionQuote
from clinic_booking.domain.entities.selection_state import SelectionState
from clinic_booking.domain.entities.service import Service
from clinic_booking.domain.entities.treatment import PricingOption, TreatmentSubcategory
from clinic_booking.domain.entities.validation import ValidationReason, ValidationResult


@dataclass(frozen=True)
class BookingOffer:
    """What the booking panel shows for one service."""

    service: Service
    catalog: list[TreatmentSubcategory]  # non-empty -> itemized pricing
    packages: list[SessionQuote]  # only filled when catalog is empty
    doctors: list[Doctor]
    times_of_day: list[str] | None

    @property
    def has_treatment_subcategories(self) -> bool:
        return bool(self.catalog)


class BookingUseCase:
    def __init__(
        self,
        catalog: ServiceCatalogPort,
        doctors: DoctorDirectoryPort,
        orders: OrderGatewayPort,
        default_max_sessions: int = treatment_catalog.DEFAULT_MAX_SESSIONS,
    ) -> None:
        self._catalog = catalog
        self._doctors = doctors
        self._orders = orders
        self._default_max_sessions = default_max_sessions
        self._logger = logging.getLogger(__name__)

    def get_offer(self, service_id: str) -> BookingOffer:
        service = self._get_service(service_id)
        catalog = treatment_catalog.normalize(service.treatment_options)

        packages: list[SessionQuote] = []
        if not catalog:
            packages = [pricing.quote_package(service.base_price, label) for label in self._packages_for(service)]

        return BookingOffer(
            service=service,
            catalog=catalog,
            packages=packages,
            doctors=[d for d in self._doctors.list_doctors() if d.is_active],
            times_of_day=treatment_catalog.allowed_times_of_day(service.session_options),
        )

    def quote(self, draft: BookingDraft) -> PricedSummary:
        """Price a draft. Itemized services need at least one selection from their catalog."""
        service = self._get_service(draft.service_id)
        catalog = treatment_catalog.normalize(service.treatment_options)
        selected = self._resolved_selection(service, catalog, draft)
        if catalog and not selected:
            self._blocked(service, ValidationResult(ok=False, reason=ValidationReason.TREATMENT_REQUIRED))
        return self._price(service, catalog, draft.selection.package, selected)

    def submit(self, draft: BookingDraft, address: str | None = None, notes: str | None = None) -> OrderRecord:
        request = self._build_request(draft, address=address, notes=notes)
        record = self._orders.create_order(request)
        self._logger.info(
            "Booking submitted",
            extra={"service": request.service_id, "order_id": record.id, "total": request.summary.total_amount},
        )
        return record

    def reschedule(self, order_id: str, draft: BookingDraft) -> OrderRecord:
        request = self._build_request(draft)
        try:
            record = self._orders.update_order(order_id, request)
        except OrderNotFoundError:
            self._logger.warning("Reschedule target missing", extra={"order_id": order_id})
            raise
        self._logger.info("Booking rescheduled", extra={"service": request.service_id, "order_id": order_id})
        return record

    def get_order(self, order_id: str) -> OrderRecord:
        record = self._orders.get_order(order_id)
        if record is None:
            raise OrderNotFoundError(order_id)
        return record

    def _build_request(
        self,
        draft: BookingDraft,
        address: str | None = None,
        notes: str | None = None,
    ) -> OrderRequest:
        service = self._get_service(draft.service_id)
        catalog = treatment_catalog.normalize(service.treatment_options)
        selected = self._resolved_selection(service, catalog, draft)

        # unknown selections and unavailable doctors count as not selected
        checked = replace(
            draft,
            doctor_id=draft.doctor_id if self._is_bookable_doctor(draft.doctor_id) else None,
            selection=SelectionState(package=draft.selection.package, subcategories=selected),
        )
        result = can_submit(checked, has_catalog=bool(catalog))
        if not result.ok:
            self._blocked(service, result)

        summary = self._price(service, catalog, draft.selection.package, selected)
        if catalog:
            package = pricing.describe_selection(selected)
        else:
            package = pricing.resolve_package(draft.selection.package, self._packages_for(service))

        return OrderRequest(
            service_id=service.id,
            service_title=service.name,
            package=package,
            doctor_id=str(draft.doctor_id),
            booking_date=str(draft.date),
            booking_time=str(draft.time),
            summary=summary,
            address=address,
            notes=notes,
        )

    def _price(
        self,
        service: Service,
        catalog: list[TreatmentSubcategory],
        package: str,
        selected: dict[str, PricingOption],
    ) -> PricedSummary:
        if catalog:
            return pricing.price_subcategories(selected)
        label = pricing.resolve_package(package, self._packages_for(service))
        return pricing.price_package(service.base_price, label)

    def _resolved_selection(
        self, service: Service, catalog: list[TreatmentSubcategory], draft: BookingDraft
    ) -> dict[str, PricingOption]:
        """Catalog-backed selections, priced from the stored options. Empty if any entry is unknown."""
        if not catalog:
            return {}
        resolved = pricing.resolve_selection(catalog, draft.selection.selected())
        if resolved is None:
            self._logger.info("Selection not in catalog", extra={"service": service.id})
            return {}
        return resolved

    def _is_bookable_doctor(self, doctor_id: str | None) -> bool:
        if not doctor_id:
            return False
        doctor = self._doctors.get_doctor(doctor_id)
        return doctor is not None and doctor.is_active

    def _blocked(self, service: Service, result: ValidationResult) -> NoReturn:
        self._logger.info(
            "Booking blocked",
            extra={"service": service.id, "reason": result.reason.value if result.reason else None},
        )
        raise SelectionIncompleteError(result)

    def _packages_for(self, service: Service) -> list[str]:
        count = treatment_catalog.max_sessions(service.session_options, default=self._default_max_sessions)
        return treatment_catalog.session_packages(count)

    def _get_service(self, service_id: str) -> Service:
        service = self._catalog.get_service(service_id)
        if service is None:
            raise ServiceNotFoundError(service_id)
        return service
