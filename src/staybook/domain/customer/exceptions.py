"""Customer domain exceptions."""

from staybook.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    FieldValidationError,
)


class InvalidCustomerFieldError(FieldValidationError):
    """Raised when a customer field violates a validation rule."""


class InvalidEmailError(InvalidCustomerFieldError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__("email", message, ErrorCode.INVALID_EMAIL)


class InvalidPhoneNumberError(InvalidCustomerFieldError):
    """Raised when phone number does not look like an E.164 number."""

    def __init__(self, message: str) -> None:
        super().__init__("phone_number", message, ErrorCode.INVALID_PHONE_NUMBER)


class CustomerNotFoundError(EntityNotFoundError):
    """Customer not found."""

    def __init__(self, customer_id: str) -> None:
        self.customer_id = customer_id
        super().__init__(
            message=f"Customer not found with id: {customer_id}",
            code=ErrorCode.CUSTOMER_NOT_FOUND,
            details={"customer_id": customer_id},
        )


class DuplicateUserError(ConflictError):
    """Username or email already registered."""

    def __init__(self, username: str, email: str) -> None:
        self.username = username
        self.email = email
        super().__init__(
            message=f"User with username {username} or email {email} already exists",
            code=ErrorCode.DUPLICATE_USER,
            details={"username": username, "email": email},
        )
