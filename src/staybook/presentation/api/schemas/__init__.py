"""Pydantic request/response schemas for the Staybook API."""

from staybook.presentation.api.schemas.auth import (
    JWKSResponse,
    LoginErrorResponse,
    LoginRequest,
    LoginResponse,
)
from staybook.presentation.api.schemas.common import (
    CamelModel,
    ErrorResponse,
    HealthResponse,
)
from staybook.presentation.api.schemas.customers import (
    CustomerCreateRequest,
    CustomerListResponse,
    CustomerResponse,
    CustomerStatisticsResponse,
    CustomerUpdateRequest,
)
from staybook.presentation.api.schemas.lodgings import (
    CategoryListResponse,
    CategoryResponse,
    LodgingCreateRequest,
    LodgingListResponse,
    LodgingResponse,
    LodgingStatisticsResponse,
    LodgingUpdateRequest,
    PhotoSchema,
)
from staybook.presentation.api.schemas.reservations import (
    ReservationCreateRequest,
    ReservationListResponse,
    ReservationResponse,
    ReservationUpdateRequest,
)

__all__ = [
    "CamelModel",
    "CategoryListResponse",
    "CategoryResponse",
    "CustomerCreateRequest",
    "CustomerListResponse",
    "CustomerResponse",
    "CustomerStatisticsResponse",
    "CustomerUpdateRequest",
    "ErrorResponse",
    "HealthResponse",
    "JWKSResponse",
    "LodgingCreateRequest",
    "LodgingListResponse",
    "LodgingResponse",
    "LodgingStatisticsResponse",
    "LodgingUpdateRequest",
    "PhotoSchema",
    "LoginErrorResponse",
    "LoginRequest",
    "LoginResponse",
    "ReservationCreateRequest",
    "ReservationListResponse",
    "ReservationResponse",
    "ReservationUpdateRequest",
]
