from staybook.domain.customer.value_objects.email import EMAIL_PATTERN, Email
from staybook.domain.customer.value_objects.phone_number import (
    PHONE_PATTERN,
    PhoneNumber,
)

__all__ = [
    "EMAIL_PATTERN",
    "Email",
    "PHONE_PATTERN",
    "PhoneNumber",
]
