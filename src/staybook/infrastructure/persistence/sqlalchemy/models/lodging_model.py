"""SQLAlchemy model for lodgings."""

from datetime import datetime, time
from decimal import Decimal
from typing import Any, Optional

from sqlalchemy import Boolean, DateTime, Float, Integer, Numeric, String, Text, Time
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.types import JSON

from staybook.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from staybook.infrastructure.persistence.sqlalchemy.models.photo_model import (
    PhotoModel,
)


class LodgingModel(Base, TimestampMixin):
    """Database model for lodgings (table: lodgings)."""

    __tablename__ = "lodgings"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    address: Mapped[str] = mapped_column(String(255), default="")
    city: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    country: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, default="")

    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    stars: Mapped[int] = mapped_column(Integer, nullable=False)
    average_customer_rating: Mapped[int] = mapped_column(Integer, nullable=False)
    # Category enum name (HOTEL, HOSTEL, ...)
    category: Mapped[str] = mapped_column(String(30), nullable=False, index=True)

    available_from: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    available_to: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    max_occupancy: Mapped[int] = mapped_column(Integer, nullable=False)
    check_in_time: Mapped[time] = mapped_column(Time, nullable=False)
    check_out_time: Mapped[time] = mapped_column(Time, nullable=False)
    is_favorite: Mapped[bool] = mapped_column(Boolean, default=False)

    # Facilities; amenities is a list of names in display order
    amenities: Mapped[Optional[list[Any]]] = mapped_column(JSON, nullable=True)
    room_size_square_meters: Mapped[Optional[float]] = mapped_column(Float)
    is_pet_friendly: Mapped[bool] = mapped_column(Boolean, default=False)
    has_parking: Mapped[bool] = mapped_column(Boolean, default=False)

    photos: Mapped[list[PhotoModel]] = relationship(
        "PhotoModel",
        back_populates="lodging",
        cascade="all, delete-orphan",
        order_by=PhotoModel.position,
        lazy="joined",  # Photos are part of every lodging read
    )

    def __repr__(self) -> str:
        return f"<LodgingModel(id={self.id}, name={self.name})>"
