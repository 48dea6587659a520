"""Reservation schemas for request/response models."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import ConfigDict, Field

from staybook.application.dtos import ReservationDTO, ReservationRequest
from staybook.presentation.api.schemas.common import CamelModel


class ReservationCreateRequest(CamelModel):
    """Booking request.

    Dates stay strings here; the service parses them as ISO 8601
    date-times and reports unparsable values as INVALID_DATE.
    """

    customer_id: str
    lodging_id: str
    start_date: str = Field(
        ..., description="ISO 8601 date-time, e.g. 2026-07-01T15:00:00Z"
    )
    end_date: str = Field(..., description="ISO 8601 date-time")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "customerId": "6f1c2a9e-3c55-4bb1-9d8e-0d2f4c1a7b10",
                "lodgingId": "0b7e2f61-1f0e-4a43-9e55-3a0d2f6c8e21",
                "startDate": "2026-07-01T15:00:00Z",
                "endDate": "2026-07-04T11:00:00Z",
            },
        },
    )

    def to_request(self) -> ReservationRequest:
        return ReservationRequest(**self.model_dump())


class ReservationUpdateRequest(CamelModel):
    start_date: str
    end_date: str


class ReservationResponse(CamelModel):
    id: str
    customer_id: str
    lodging_id: str
    start_date: datetime
    end_date: datetime
    nights: int
    total_price: Decimal
    average_nightly_price: Decimal
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dto(cls, dto: ReservationDTO) -> "ReservationResponse":
        return cls.model_validate(dto, from_attributes=True)


class ReservationListResponse(CamelModel):
    reservations: list[ReservationResponse]
    total: int
