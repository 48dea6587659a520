"""Data Transfer Objects for presentation layer.

DTOs decouple the presentation layer from domain models,
providing stable interfaces for API endpoints and the CLI.
"""

from staybook.application.dtos.customer_dto import (
    CustomerDTO,
    CustomerListResult,
    CustomerRegistration,
    CustomerStatistics,
    CustomerUpdate,
    LoginResult,
)
from staybook.application.dtos.lodging_dto import (
    SORT_OPTIONS,
    CategorySummary,
    LodgingChanges,
    LodgingDraft,
    LodgingDTO,
    LodgingListResult,
    LodgingSearchCriteria,
    LodgingStatistics,
    PhotoDTO,
)
from staybook.application.dtos.reservation_dto import (
    ReservationDTO,
    ReservationRequest,
)

__all__ = [
    "CategorySummary",
    "CustomerDTO",
    "CustomerListResult",
    "CustomerRegistration",
    "CustomerStatistics",
    "CustomerUpdate",
    "LodgingChanges",
    "LodgingDTO",
    "LodgingDraft",
    "LodgingListResult",
    "LodgingSearchCriteria",
    "LodgingStatistics",
    "LoginResult",
    "PhotoDTO",
    "ReservationDTO",
    "ReservationRequest",
    "SORT_OPTIONS",
]
