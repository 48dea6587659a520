"""DTOs for customer registration, profile and statistics."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from staybook.domain.customer import Customer


@dataclass(frozen=True)
class CustomerRegistration:
    """Input for creating a customer. Carries the plaintext password."""

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

    def __repr__(self) -> str:
        return f"CustomerRegistration(username={self.username!r}, email={self.email!r})"


@dataclass(frozen=True)
class CustomerUpdate:
    """Partial profile update; None means "leave unchanged"."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    passport_number: Optional[str] = None
    passport_expiry: Optional[date] = None
    phone_number: Optional[str] = None
    country_of_residence: Optional[str] = None
    frequent_flyer_program: Optional[str] = None


@dataclass(frozen=True)
class CustomerDTO:
    """Customer profile for the presentation layer (never the hash)."""

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
    passport_number: Optional[str]
    passport_expiry: Optional[date]
    phone_number: Optional[str]
    country_of_residence: Optional[str]
    frequent_flyer_program: Optional[str]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_customer(
        cls, customer: Customer, today: Optional[date] = None
    ) -> "CustomerDTO":
        audit = customer.audit
        return cls(
            id=customer.id,
            username=customer.username,
            email=customer.email,
            first_name=customer.first_name,
            last_name=customer.last_name,
            full_name=customer.full_name,
            date_of_birth=customer.date_of_birth,
            age=customer.age(today),
            is_adult=customer.is_adult(today),
            has_passport=customer.has_passport,
            passport_number=customer.passport_number,
            passport_expiry=customer.passport_expiry,
            phone_number=customer.phone_number,
            country_of_residence=customer.country_of_residence,
            frequent_flyer_program=customer.frequent_flyer_program,
            created_at=audit.created_at if audit else None,
            updated_at=audit.updated_at if audit else None,
        )


@dataclass(frozen=True)
class LoginResult:
    """Successful login: a bearer token plus the customer's profile."""

    token: str
    expires_in: int
    customer: CustomerDTO
    token_type: str = "Bearer"

    def __repr__(self) -> str:
        return (
            f"LoginResult(token_type={self.token_type!r}, "
            f"expires_in={self.expires_in}, customer={self.customer.username!r})"
        )


@dataclass(frozen=True)
class CustomerListResult:
    customers: list[CustomerDTO] = field(default_factory=list)

    @property
    def has_results(self) -> bool:
        return bool(self.customers)

    @property
    def count(self) -> int:
        return len(self.customers)


@dataclass(frozen=True)
class CustomerStatistics:
    """Aggregate figures over all customers."""

    total_customers: int
    customers_by_country: dict[str, int]
    average_age: float
    expiring_passports_count: int
    customers_without_passport: int
