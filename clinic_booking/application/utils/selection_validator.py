from __future__ import annotations

from clinic_booking.domain.entities.booking_state import BookingDraft
from clinic_booking.domain.entities.validation import ValidationReason, ValidationResult


def can_submit(draft: BookingDraft, has_catalog: bool) -> ValidationResult:
    """
    Check a booking draft before it is submitted.

    Rules run in a fixed order and the first failure wins, so the most upstream
    missing input is reported first: treatment, then doctor, then date/time.
    """
    if has_catalog and not draft.selection.has_selection():
        return ValidationResult(ok=False, reason=ValidationReason.TREATMENT_REQUIRED)
    if not draft.doctor_id:
        return ValidationResult(ok=False, reason=ValidationReason.DOCTOR_REQUIRED)
    if not draft.date or not draft.time:
        return ValidationResult(ok=False, reason=ValidationReason.DATETIME_REQUIRED)
    return ValidationResult(ok=True)
