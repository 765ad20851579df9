from __future__ import annotations

import json
import uuid
from typing import Any

from clinic_booking.domain.entities.doctor import Doctor
from clinic_booking.domain.entities.order import OrderRecord, OrderRequest
from clinic_booking.domain.entities.pricing import PricedSummary
from clinic_booking.domain.entities.service import Service


def coerce_treatment_options(value: Any) -> Any:
    """Stored as JSON, not as a JSON string. Unparseable strings become []."""
    if isinstance(value, str):
        try:
            return json.loads(value)
        except ValueError:
            return []
    return value


def new_id() -> str:
    return str(uuid.uuid4())


def service_from_row(row: dict[str, Any]) -> Service:
    return Service(
        id=str(row["id"]),
        name=str(row.get("name") or ""),
        base_price=float(row.get("base_price") or 0),
        treatment_options=row.get("treatment_options"),
        session_options=row.get("session_options"),
        description=row.get("description"),
    )


def service_row(payload: dict[str, Any]) -> dict[str, Any]:
    row = dict(payload)
    row.setdefault("id", new_id())
    if "treatment_options" in row:
        row["treatment_options"] = coerce_treatment_options(row["treatment_options"])
    return row


def doctor_from_row(row: dict[str, Any]) -> Doctor:
    return Doctor(
        id=str(row["id"]),
        first_name=str(row.get("first_name") or ""),
        last_name=str(row.get("last_name") or ""),
        specialization=row.get("specialization"),
        is_active=bool(row.get("is_active", True)),
    )


def order_from_row(row: dict[str, Any]) -> OrderRecord:
    summary = PricedSummary(
        session_count=int(row.get("session_count") or 1),
        unit_price=float(row.get("unit_price") or 0),
        discount_percent=int(row.get("discount_percent") or 0),
        total_amount=float(row.get("total_amount") or 0),
    )
    request = OrderRequest(
        service_id=str(row.get("service_id") or ""),
        service_title=str(row.get("service_title") or ""),
        package=str(row.get("package") or ""),
        doctor_id=str(row.get("doctor_id") or ""),
        booking_date=str(row.get("booking_date") or ""),
        booking_time=str(row.get("booking_time") or ""),
        summary=summary,
        status=str(row.get("status") or "pending"),
        address=row.get("address"),
        notes=row.get("notes"),
    )
    return OrderRecord(id=str(row["id"]), request=request)
