"""SQLAlchemy models for persistence layer."""

from staybook.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from staybook.infrastructure.persistence.sqlalchemy.models.customer_model import (
    CustomerModel,
)
from staybook.infrastructure.persistence.sqlalchemy.models.lodging_model import (
    LodgingModel,
)
from staybook.infrastructure.persistence.sqlalchemy.models.photo_model import (
    PhotoModel,
)
from staybook.infrastructure.persistence.sqlalchemy.models.reservation_model import (
    ReservationModel,
)

__all__ = [
    "Base",
    "CustomerModel",
    "LodgingModel",
    "PhotoModel",
    "ReservationModel",
    "TimestampMixin",
]
