from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ValidationReason(str, Enum):
    TREATMENT_REQUIRED = "TREATMENT_REQUIRED"
    DOCTOR_REQUIRED = "DOCTOR_REQUIRED"
    DATETIME_REQUIRED = "DATETIME_REQUIRED"


REASON_MESSAGES: dict[ValidationReason, tuple[str, str]] = {
    ValidationReason.TREATMENT_REQUIRED: (
        "Treatment Selection Required",
        "Please select at least one treatment subcategory and pricing option",
    ),
    ValidationReason.DOCTOR_REQUIRED: (
        "Doctor Selection Required",
        "Please select a doctor before booking",
    ),
    ValidationReason.DATETIME_REQUIRED: (
        "Date and Time Required",
        "Please select a date and time before booking",
    ),
}


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    reason: ValidationReason | None = None

    @property
    def title(self) -> str | None:
        return REASON_MESSAGES[self.reason][0] if self.reason else None

    @property
    def description(self) -> str | None:
        return REASON_MESSAGES[self.reason][1] if self.reason else None
