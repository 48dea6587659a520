"""Reservation domain exceptions."""

from staybook.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class ReservationNotFoundError(EntityNotFoundError):
    """Reservation not found."""

    def __init__(self, reservation_id: str) -> None:
        self.reservation_id = reservation_id
        super().__init__(
            message=f"Reservation not found with id: {reservation_id}",
            code=ErrorCode.RESERVATION_NOT_FOUND,
            details={"reservation_id": reservation_id},
        )


class InvalidDateFormatError(ValidationError):
    """Raised when a stay date is not an ISO 8601 date-time."""

    def __init__(self, field: str, value: str) -> None:
        self.field = field
        self.value = value
        super().__init__(
            message=f"Invalid date format for {field}: {value!r}",
            code=ErrorCode.INVALID_DATE,
            details={"field": field, "value": value},
        )


class InvalidStayWindowError(ValidationError):
    """Raised when a stay does not end after it starts, or starts in the past."""

    def __init__(self, message: str) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.INVALID_STAY_WINDOW,
            details={"field": "start_date"},
        )


class LodgingUnavailableError(ConflictError):
    """Raised when the lodging cannot be booked for the requested stay."""

    def __init__(self, lodging_id: str, reason: str) -> None:
        self.lodging_id = lodging_id
        super().__init__(
            message=f"Lodging {lodging_id} is not available: {reason}",
            code=ErrorCode.LODGING_UNAVAILABLE,
            details={"lodging_id": lodging_id},
        )
