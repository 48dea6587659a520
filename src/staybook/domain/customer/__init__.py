"""Customer domain - login identity and traveller profile.

This domain handles:
- Customer aggregate (username, email, password hash, profile)
- Email and phone number value objects
- Repository interface (implementation in infrastructure)

Design notes:
- Customer ID is a random UUID4 string generated at creation
- Username is case-sensitive, email is normalized to lower case
- The password hash is produced outside the domain by a PasswordHasher
"""

from staybook.domain.customer.aggregates import Customer
from staybook.domain.customer.exceptions import (
    CustomerNotFoundError,
    DuplicateUserError,
    InvalidCustomerFieldError,
    InvalidEmailError,
    InvalidPhoneNumberError,
)
from staybook.domain.customer.repositories import CustomerRepository
from staybook.domain.customer.value_objects import Email, PhoneNumber

__all__ = [
    "Customer",
    "CustomerNotFoundError",
    "CustomerRepository",
    "DuplicateUserError",
    "Email",
    "InvalidCustomerFieldError",
    "InvalidEmailError",
    "InvalidPhoneNumberError",
    "PhoneNumber",
]
