from __future__ import annotations

from abc import ABC, abstractmethod

from clinic_booking.domain.entities.order import OrderRecord, OrderRequest


class OrderGatewayPort(ABC):
    @abstractmethod
    def create_order(self, request: OrderRequest) -> OrderRecord:
        """Create an order. Failures propagate to the caller, no retry."""
        raise NotImplementedError

    @abstractmethod
    def update_order(self, order_id: str, request: OrderRequest) -> OrderRecord:
        """Overwrite an existing order (reschedule)."""
        raise NotImplementedError

    @abstractmethod
    def get_order(self, order_id: str) -> OrderRecord | None:
        raise NotImplementedError
