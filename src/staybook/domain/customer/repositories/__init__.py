from staybook.domain.customer.repositories.customer_repository import (
    CustomerRepository,
)

__all__ = ["CustomerRepository"]
