from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from clinic_booking.domain.entities.pricing import PricedSummary


@dataclass(frozen=True)
class OrderRequest:
    service_id: str
    service_title: str
    package: str
    doctor_id: str
    booking_date: str
    booking_time: str
    summary: PricedSummary
    status: str = "pending"
    address: str | None = None
    notes: str | None = None

    def to_payload(self) -> dict[str, Any]:
        return {
            "service_id": self.service_id,
            "service_title": self.service_title,
            "package": self.package,
            "doctor_id": self.doctor_id,
            "booking_date": self.booking_date,
            "booking_time": self.booking_time,
            "session_count": self.summary.session_count,
            "unit_price": self.summary.unit_price,
            "discount_percent": self.summary.discount_percent,
            "total_amount": self.summary.total_amount,
            "status": self.status,
            "address": self.address,
            "notes": self.notes,
        }


@dataclass(frozen=True)
class OrderRecord:
    id: str
    request: OrderRequest
