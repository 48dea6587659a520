"""SQLAlchemy model for the Customer aggregate."""

from datetime import date
from typing import Optional

from sqlalchemy import Date, String
from sqlalchemy.orm import Mapped, mapped_column

from staybook.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class CustomerModel(Base, TimestampMixin):
    """
    Database model for customers.

    username and email are unique; email is stored lower-cased by the
    domain so a plain unique index makes it case-insensitive.

    Table: customers
    """

    __tablename__ = "customers"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    username: Mapped[str] = mapped_column(
        String(50), unique=True, nullable=False, index=True
    )
    email: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False, index=True
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    # Profile
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    date_of_birth: Mapped[date] = mapped_column(Date, nullable=False)
    passport_number: Mapped[Optional[str]] = mapped_column(String(50))
    passport_expiry: Mapped[Optional[date]] = mapped_column(Date, index=True)
    phone_number: Mapped[Optional[str]] = mapped_column(String(20))
    country_of_residence: Mapped[Optional[str]] = mapped_column(
        String(100), index=True
    )
    frequent_flyer_program: Mapped[Optional[str]] = mapped_column(String(100))

    def __repr__(self) -> str:
        return f"<CustomerModel(id={self.id}, username={self.username})>"
