"""SQLAlchemy implementation of ReservationRepository."""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from staybook.domain.reservation import Reservation, ReservationRepository
from staybook.domain.shared.time import utc_now
from staybook.infrastructure.persistence.sqlalchemy.models import ReservationModel
from staybook.infrastructure.persistence.sqlalchemy.repositories._utils import (
    audit_stamp,
    from_db,
    to_utc,
)

logger = logging.getLogger(__name__)


class ReservationRepositorySQLAlchemy(ReservationRepository):
    """SQLAlchemy implementation of the ReservationRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, reservation_id: str) -> Optional[Reservation]:
        model = await self._find_model_by_id(reservation_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_all(self) -> list[Reservation]:
        stmt = select(ReservationModel).order_by(
            ReservationModel.start_date, ReservationModel.id
        )
        return await self._fetch(stmt)

    async def find_by_customer(self, customer_id: str) -> list[Reservation]:
        stmt = (
            select(ReservationModel)
            .where(ReservationModel.customer_id == customer_id)
            .order_by(ReservationModel.start_date, ReservationModel.id)
        )
        return await self._fetch(stmt)

    async def find_overlapping(
        self,
        lodging_id: str,
        start_date: datetime,
        end_date: datetime,
        exclude_id: Optional[str] = None,
    ) -> list[Reservation]:
        stmt = select(ReservationModel).where(
            ReservationModel.lodging_id == lodging_id,
            ReservationModel.start_date < to_utc(end_date),
            ReservationModel.end_date > to_utc(start_date),
        )
        if exclude_id is not None:
            stmt = stmt.where(ReservationModel.id != exclude_id)
        return await self._fetch(stmt.order_by(ReservationModel.start_date))

    async def count_ending_after(self, lodging_id: str, moment: datetime) -> int:
        stmt = (
            select(func.count())
            .select_from(ReservationModel)
            .where(
                ReservationModel.lodging_id == lodging_id,
                ReservationModel.end_date > to_utc(moment),
            )
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def save(self, reservation: Reservation) -> Reservation:
        existing = await self._find_model_by_id(reservation.id)
        now = utc_now()

        if existing:
            self._update_model(existing, reservation)
            existing.updated_at = now
            model = existing
            logger.debug("Updated reservation: %s", reservation.id)
        else:
            model = ReservationModel(
                id=reservation.id,
                customer_id=reservation.customer_id,
                lodging_id=reservation.lodging_id,
                created_at=now,
                updated_at=now,
            )
            self._update_model(model, reservation)
            self._session.add(model)
            logger.debug("Created reservation: %s", reservation.id)

        await self._session.flush()
        return self._map_to_domain(model)

    async def delete(self, reservation_id: str) -> bool:
        model = await self._find_model_by_id(reservation_id)
        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()
        logger.debug("Deleted reservation: %s", reservation_id)
        return True

    async def _fetch(self, stmt) -> list[Reservation]:
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def _find_model_by_id(
        self, reservation_id: str
    ) -> Optional[ReservationModel]:
        stmt = select(ReservationModel).where(ReservationModel.id == reservation_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: ReservationModel) -> Reservation:
        return Reservation(
            id=model.id,
            customer_id=model.customer_id,
            lodging_id=model.lodging_id,
            start_date=from_db(model.start_date),
            end_date=from_db(model.end_date),
            total_price=model.total_price,
            audit=audit_stamp(model),
        )

    def _update_model(self, model: ReservationModel, reservation: Reservation) -> None:
        model.start_date = to_utc(reservation.start_date)
        model.end_date = to_utc(reservation.end_date)
        model.total_price = reservation.total_price
