"""SQLAlchemy model for lodging photos."""

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from staybook.infrastructure.persistence.sqlalchemy.models.base import Base

if TYPE_CHECKING:
    from staybook.infrastructure.persistence.sqlalchemy.models.lodging_model import (
        LodgingModel,
    )


class PhotoModel(Base):
    """
    Database model for lodging photos.

    Rows belong to exactly one lodging and are replaced as a whole when
    the lodging is saved; ``position`` keeps the display order.

    Table: lodging_photos
    """

    __tablename__ = "lodging_photos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    lodging_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("lodgings.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    url: Mapped[str] = mapped_column(String(500), nullable=False)
    alt_text: Mapped[str] = mapped_column(String(255), default="")
    is_main: Mapped[bool] = mapped_column(Boolean, default=False)
    # PhotoType enum name (ROOM, EXTERIOR, ...)
    photo_type: Mapped[str] = mapped_column(String(30), nullable=False)

    lodging: Mapped["LodgingModel"] = relationship(
        "LodgingModel",
        back_populates="photos",
    )

    def __repr__(self) -> str:
        return f"<PhotoModel(lodging_id={self.lodging_id}, url={self.url})>"
