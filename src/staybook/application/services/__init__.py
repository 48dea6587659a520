"""Application services orchestrating the domain and the auth building blocks."""

from staybook.application.services.customer_service import CustomerService
from staybook.application.services.lodging_service import LodgingService
from staybook.application.services.reservation_service import ReservationService

__all__ = [
    "CustomerService",
    "LodgingService",
    "ReservationService",
]
