"""Shared kernel: exceptions, time helpers and audit stamps."""

from staybook.domain.shared.audit import AuditStamp
from staybook.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    FieldValidationError,
    ValidationError,
)

__all__ = [
    "AuditStamp",
    "BusinessRuleViolation",
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "FieldValidationError",
    "ValidationError",
]
