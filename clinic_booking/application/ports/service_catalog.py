from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from clinic_booking.domain.entities.service import Service


class ServiceCatalogPort(ABC):
    @abstractmethod
    def list_services(self) -> list[Service]:
        raise NotImplementedError

    @abstractmethod
    def get_service(self, service_id: str) -> Service | None:
        """Get service by id, None if it does not exist."""
        raise NotImplementedError

    @abstractmethod
    def create_service(self, payload: dict[str, Any]) -> Service:
        """Insert a service. A string treatment_options is stored parsed, or as [] if it is not JSON."""
        raise NotImplementedError

    @abstractmethod
    def save_treatment_options(self, service_id: str, serialized: str | None) -> None:
        """Replace the full stored catalog of a service with a JSON string (None clears it)."""
        raise NotImplementedError
