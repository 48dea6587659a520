"""SQLAlchemy model for reservations."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Index, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from staybook.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class ReservationModel(Base, TimestampMixin):
    """Database model for reservations (table: reservations)."""

    __tablename__ = "reservations"

    __table_args__ = (
        # Overlap lookups filter by lodging and date range
        Index("ix_reservations_lodging_dates", "lodging_id", "start_date", "end_date"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    customer_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("customers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    lodging_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("lodgings.id", ondelete="CASCADE"),
        nullable=False,
    )
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    total_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)

    def __repr__(self) -> str:
        return (
            f"<ReservationModel(id={self.id}, lodging_id={self.lodging_id}, "
            f"start_date={self.start_date})>"
        )
