"""SQLAlchemy repository implementations."""

from staybook.infrastructure.persistence.sqlalchemy.repositories.customer_repository import (  # NOQA: E501
    CustomerRepositorySQLAlchemy,
)
from staybook.infrastructure.persistence.sqlalchemy.repositories.lodging_repository import (  # NOQA: E501
    LodgingRepositorySQLAlchemy,
)
from staybook.infrastructure.persistence.sqlalchemy.repositories.reservation_repository import (  # NOQA: E501
    ReservationRepositorySQLAlchemy,
)

__all__ = [
    "CustomerRepositorySQLAlchemy",
    "LodgingRepositorySQLAlchemy",
    "ReservationRepositorySQLAlchemy",
]
