from __future__ import annotations

from dataclasses import dataclass

from clinic_booking.domain.entities.selection_state import SelectionState


@dataclass(frozen=True)
class BookingDraft:
    service_id: str
    doctor_id: str | None = None
    date: str | None = None  # YYYY-MM-DD
    time: str | None = None  # HH:MM
    selection: SelectionState = SelectionState()
