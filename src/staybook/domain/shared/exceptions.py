"""Exception hierarchy and error codes shared by all domain packages.

Every domain error derives from DomainException so the API can translate
it in one place.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Machine-readable codes returned to API clients; values must stay stable."""

    # Validation Errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_PHONE_NUMBER = "INVALID_PHONE_NUMBER"
    INVALID_PASSWORD = "INVALID_PASSWORD"
    INVALID_DATE = "INVALID_DATE"
    INVALID_STAY_WINDOW = "INVALID_STAY_WINDOW"
    INVALID_CATEGORY = "INVALID_CATEGORY"
    INVALID_RATING = "INVALID_RATING"

    # Not Found Errors (404)
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    CUSTOMER_NOT_FOUND = "CUSTOMER_NOT_FOUND"
    LODGING_NOT_FOUND = "LODGING_NOT_FOUND"
    RESERVATION_NOT_FOUND = "RESERVATION_NOT_FOUND"

    # Conflict Errors
    CONFLICT = "CONFLICT"
    DUPLICATE_USER = "DUPLICATE_USER"
    LODGING_UNAVAILABLE = "LODGING_UNAVAILABLE"
    LODGING_HAS_RESERVATIONS = "LODGING_HAS_RESERVATIONS"

    # Business Rule Violations (422)
    BUSINESS_RULE_VIOLATION = "BUSINESS_RULE_VIOLATION"

    # Authentication Errors (401/403)
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    INVALID_TOKEN = "INVALID_TOKEN"
    FORBIDDEN = "FORBIDDEN"

    # General Errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base class for domain errors.

    Attributes
    ----------
    message
        Text shown to API clients
    code
        Error code; subclasses provide a default through ``default_code``
    details
        Extra context for logs
    """

    default_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"code={self.code.value!r}, details={self.details!r})"
        )


class ValidationError(DomainException):
    """Input does not satisfy a validation rule."""

    default_code = ErrorCode.VALIDATION_ERROR


class FieldValidationError(ValidationError):
    """A single named field is invalid; the name is in ``field`` and ``details``."""

    def __init__(
        self,
        field: str,
        message: str,
        code: ErrorCode | None = None,
    ) -> None:
        self.field = field
        super().__init__(message, code, details={"field": field})


class BusinessRuleViolation(DomainException):
    default_code = ErrorCode.BUSINESS_RULE_VIOLATION


class EntityNotFoundError(DomainException):
    default_code = ErrorCode.ENTITY_NOT_FOUND


class ConflictError(DomainException):
    """The operation clashes with the current state of the store."""

    default_code = ErrorCode.CONFLICT
