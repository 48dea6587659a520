from staybook.domain.customer.aggregates.customer import (
    ADULT_AGE,
    MIN_PASSWORD_LENGTH,
    MIN_USERNAME_LENGTH,
    Customer,
)

__all__ = [
    "ADULT_AGE",
    "Customer",
    "MIN_PASSWORD_LENGTH",
    "MIN_USERNAME_LENGTH",
]
