"""SQLAlchemy implementation of LodgingRepository."""

import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from staybook.domain.lodging import (
    Category,
    Lodging,
    LodgingRepository,
    Photo,
    PhotoType,
)
from staybook.domain.shared.time import utc_now
from staybook.infrastructure.persistence.sqlalchemy.models import (
    LodgingModel,
    PhotoModel,
)
from staybook.infrastructure.persistence.sqlalchemy.repositories._utils import (
    audit_stamp,
    from_db,
    to_utc,
)

logger = logging.getLogger(__name__)


class LodgingRepositorySQLAlchemy(LodgingRepository):
    """SQLAlchemy implementation of the LodgingRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, lodging_id: str) -> Optional[Lodging]:
        model = await self._find_model_by_id(lodging_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_all(
        self, limit: Optional[int] = None, offset: int = 0
    ) -> list[Lodging]:
        stmt = select(LodgingModel).order_by(LodgingModel.name, LodgingModel.id)
        if offset:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        return await self._fetch(stmt)

    async def count(self) -> int:
        stmt = select(func.count()).select_from(LodgingModel)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def find_by_category(self, category: Category) -> list[Lodging]:
        stmt = (
            select(LodgingModel)
            .where(LodgingModel.category == category.value)
            .order_by(LodgingModel.name, LodgingModel.id)
        )
        return await self._fetch(stmt)

    async def count_by_category(self) -> dict[Category, int]:
        stmt = select(LodgingModel.category, func.count()).group_by(
            LodgingModel.category
        )
        result = await self._session.execute(stmt)
        return {Category(name): count for name, count in result.all()}

    async def find_distinct_cities(self) -> list[str]:
        stmt = select(LodgingModel.city).distinct().order_by(LodgingModel.city)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def save(self, lodging: Lodging) -> Lodging:
        existing = await self._find_model_by_id(lodging.id)
        now = utc_now()

        if existing:
            self._update_model(existing, lodging)
            existing.updated_at = now
            model = existing
            logger.debug("Updated lodging: %s", lodging.id)
        else:
            model = LodgingModel(
                id=lodging.id, created_at=now, updated_at=now, photos=[]
            )
            self._update_model(model, lodging)
            self._session.add(model)
            logger.debug("Created lodging: %s", lodging.id)

        await self._session.flush()
        return self._map_to_domain(model)

    async def delete(self, lodging_id: str) -> bool:
        model = await self._find_model_by_id(lodging_id)
        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()
        logger.debug("Deleted lodging: %s", lodging_id)
        return True

    async def _fetch(self, stmt) -> list[Lodging]:
        result = await self._session.execute(stmt)
        # Joined photo rows repeat the lodging row
        return [self._map_to_domain(m) for m in result.unique().scalars().all()]

    async def _find_model_by_id(self, lodging_id: str) -> Optional[LodgingModel]:
        stmt = select(LodgingModel).where(LodgingModel.id == lodging_id)
        result = await self._session.execute(stmt)
        return result.unique().scalar_one_or_none()

    def _map_to_domain(self, model: LodgingModel) -> Lodging:
        return Lodging(
            id=model.id,
            name=model.name,
            address=model.address or "",
            city=model.city,
            country=model.country,
            description=model.description or "",
            price=model.price,
            stars=model.stars,
            average_customer_rating=model.average_customer_rating,
            category=Category(model.category),
            available_from=from_db(model.available_from),
            available_to=from_db(model.available_to),
            max_occupancy=model.max_occupancy,
            check_in_time=model.check_in_time,
            check_out_time=model.check_out_time,
            is_favorite=bool(model.is_favorite),
            photos=[
                Photo(
                    url=photo.url,
                    alt_text=photo.alt_text or "",
                    is_main=bool(photo.is_main),
                    photo_type=PhotoType(photo.photo_type),
                )
                for photo in model.photos
            ],
            amenities=model.amenities or (),
            room_size_square_meters=model.room_size_square_meters,
            is_pet_friendly=bool(model.is_pet_friendly),
            has_parking=bool(model.has_parking),
            audit=audit_stamp(model),
        )

    def _update_model(self, model: LodgingModel, lodging: Lodging) -> None:
        model.name = lodging.name
        model.address = lodging.address
        model.city = lodging.city
        model.country = lodging.country
        model.description = lodging.description
        model.price = lodging.price
        model.stars = lodging.stars
        model.average_customer_rating = lodging.average_customer_rating
        model.category = lodging.category.value
        model.available_from = to_utc(lodging.available_from)
        model.available_to = to_utc(lodging.available_to)
        model.max_occupancy = lodging.max_occupancy
        model.check_in_time = lodging.check_in_time
        model.check_out_time = lodging.check_out_time
        model.is_favorite = lodging.is_favorite
        model.amenities = list(lodging.amenities)
        model.room_size_square_meters = lodging.room_size_square_meters
        model.is_pet_friendly = lodging.is_pet_friendly
        model.has_parking = lodging.has_parking

        # Photos have no identity of their own; replace the whole list
        model.photos.clear()
        model.photos.extend(
            PhotoModel(
                position=position,
                url=photo.url,
                alt_text=photo.alt_text,
                is_main=photo.is_main,
                photo_type=photo.photo_type.value,
            )
            for position, photo in enumerate(lodging.photos)
        )
