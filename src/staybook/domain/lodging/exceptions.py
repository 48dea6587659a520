"""Lodging domain exceptions."""

from staybook.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    FieldValidationError,
)


class InvalidLodgingFieldError(FieldValidationError):
    """Raised when a lodging field violates a validation rule."""


class InvalidCategoryError(InvalidLodgingFieldError):
    """Raised when a category name cannot be parsed."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            "category", f"Unknown lodging category: {value}", ErrorCode.INVALID_CATEGORY
        )


class LodgingNotFoundError(EntityNotFoundError):
    """Lodging not found."""

    def __init__(self, lodging_id: str) -> None:
        self.lodging_id = lodging_id
        super().__init__(
            message=f"Lodging not found with id: {lodging_id}",
            code=ErrorCode.LODGING_NOT_FOUND,
            details={"lodging_id": lodging_id},
        )


class LodgingHasReservationsError(ConflictError):
    """Raised when deleting a lodging that still has upcoming stays."""

    def __init__(self, lodging_id: str, reservation_count: int) -> None:
        super().__init__(
            message=(
                f"Lodging {lodging_id} has {reservation_count} pending or "
                "active reservation(s)"
            ),
            code=ErrorCode.LODGING_HAS_RESERVATIONS,
            details={
                "lodging_id": lodging_id,
                "reservation_count": reservation_count,
            },
        )
