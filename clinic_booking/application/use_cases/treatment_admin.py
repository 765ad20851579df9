from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from clinic_booking.application.exceptions import InvalidSubcategoriesError, ServiceNotFoundError
from clinic_booking.application.ports.service_catalog import ServiceCatalogPort
from clinic_booking.application.utils import treatment_catalog
from clinic_booking.domain.entities.service import Service
from clinic_booking.domain.entities.treatment import TreatmentSubcategory


CatalogChangedCallback = Callable[[str, list[TreatmentSubcategory]], None]

INVALID_MESSAGE = (
    "All subcategories must have a name and at least one pricing option with name and price > 0"
)


@dataclass(frozen=True)
class ServiceCatalogView:
    service: Service
    subcategories: list[TreatmentSubcategory]


class TreatmentAdminUseCase:
    """Admin editing of a service's treatment subcategories and their pricing tiers."""

    def __init__(
        self,
        catalog: ServiceCatalogPort,
        on_catalog_changed: CatalogChangedCallback | None = None,
    ) -> None:
        self._catalog = catalog
        self._on_catalog_changed = on_catalog_changed
        self._logger = logging.getLogger(__name__)

    def list_catalogs(self) -> list[ServiceCatalogView]:
        return [
            ServiceCatalogView(service=s, subcategories=treatment_catalog.normalize(s.treatment_options))
            for s in self._catalog.list_services()
        ]

    def replace_subcategories(
        self, service_id: str, subcategories: list[TreatmentSubcategory]
    ) -> list[TreatmentSubcategory]:
        """Overwrite the catalog. An empty list clears it."""
        self._require_service(service_id)
        valid = self._validated(subcategories)
        self._persist(service_id, valid, treatment_catalog.serialize(valid) if valid else None)
        return valid

    def append_subcategories(
        self, service_id: str, subcategories: list[TreatmentSubcategory]
    ) -> list[TreatmentSubcategory]:
        service = self._require_service(service_id)
        valid = self._validated(subcategories)
        if not valid:
            raise InvalidSubcategoriesError("No valid subcategories")

        combined = treatment_catalog.normalize(service.treatment_options) + valid
        self._persist(service_id, combined, treatment_catalog.serialize(combined))
        return combined

    def _validated(self, subcategories: list[TreatmentSubcategory]) -> list[TreatmentSubcategory]:
        valid, invalid = treatment_catalog.split_valid(subcategories)
        if invalid:
            self._logger.info("Rejected subcategory edit", extra={"reason": f"{len(invalid)} invalid"})
            raise InvalidSubcategoriesError(INVALID_MESSAGE)
        return valid

    def _persist(self, service_id: str, catalog: list[TreatmentSubcategory], serialized: str | None) -> None:
        self._catalog.save_treatment_options(service_id, serialized)
        self._logger.info(
            "Treatment subcategories saved",
            extra={"service": service_id, "count": len(catalog)},
        )
        if self._on_catalog_changed is not None:
            self._on_catalog_changed(service_id, catalog)

    def _require_service(self, service_id: str) -> Service:
        service = self._catalog.get_service(service_id)
        if service is None:
            raise ServiceNotFoundError(service_id)
        return service
