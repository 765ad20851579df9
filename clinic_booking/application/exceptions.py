from clinic_booking.domain.entities.validation import ValidationResult


class ServiceNotFoundError(LookupError):
    """Raised when a service id does not resolve to a stored service."""
    pass


class OrderNotFoundError(LookupError):
    """Raised when an order to reschedule does not exist."""
    pass


class InvalidSubcategoriesError(ValueError):
    """Raised when an admin edit contains subcategories that fail validation."""
    pass


class SelectionIncompleteError(ValueError):
    """Raised when a booking is submitted before the selection is complete."""

    def __init__(self, result: ValidationResult) -> None:
        super().__init__(result.reason.value if result.reason else "incomplete selection")
        self.result = result
