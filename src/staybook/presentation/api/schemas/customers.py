"""Customer schemas for request/response models."""

from datetime import date, datetime
from typing import Optional

from pydantic import ConfigDict, Field

from staybook.application.dtos import (
    CustomerDTO,
    CustomerRegistration,
    CustomerStatistics,
    CustomerUpdate,
)
from staybook.presentation.api.schemas.common import CamelModel


class CustomerCreateRequest(CamelModel):
    """Request schema for customer registration.

    Field rules (lengths, formats, dates) are enforced by the domain so the
    API and other callers share one set of messages.
    """

    username: str
    email: str
    password: str
    first_name: str
    last_name: str
    date_of_birth: date
    passport_number: Optional[str] = None
    passport_expiry: Optional[date] = None
    phone_number: Optional[str] = None
    country_of_residence: Optional[str] = None
    frequent_flyer_program: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "jdoe",
                "email": "jdoe@example.com",
                "password": "securepassword123",
                "firstName": "John",
                "lastName": "Doe",
                "dateOfBirth": "1990-05-17",
                "phoneNumber": "+491701234567",
                "countryOfResidence": "Germany",
            },
        },
    )

    def to_registration(self) -> CustomerRegistration:
        return CustomerRegistration(**self.model_dump())


class CustomerUpdateRequest(CamelModel):
    """Partial profile update; omitted fields stay unchanged."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    passport_number: Optional[str] = None
    passport_expiry: Optional[date] = None
    phone_number: Optional[str] = None
    country_of_residence: Optional[str] = None
    frequent_flyer_program: Optional[str] = None

    def to_update(self) -> CustomerUpdate:
        return CustomerUpdate(**self.model_dump())


class CustomerResponse(CamelModel):
    """Customer profile (the password hash is never exposed)."""

    id: str
    username: str
    email: str
    first_name: str
    last_name: str
    full_name: str
    date_of_birth: date
    age: int
    is_adult: bool
    has_passport: bool
    passport_number: Optional[str] = None
    passport_expiry: Optional[date] = None
    phone_number: Optional[str] = None
    country_of_residence: Optional[str] = None
    frequent_flyer_program: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dto(cls, dto: CustomerDTO) -> "CustomerResponse":
        return cls.model_validate(dto, from_attributes=True)


class CustomerListResponse(CamelModel):
    customers: list[CustomerResponse]
    total: int = Field(..., description="Number of customers returned")


class CustomerStatisticsResponse(CamelModel):
    total_customers: int
    customers_by_country: dict[str, int]
    average_age: float
    expiring_passports_count: int
    customers_without_passport: int

    @classmethod
    def from_dto(cls, dto: CustomerStatistics) -> "CustomerStatisticsResponse":
        return cls.model_validate(dto, from_attributes=True)
