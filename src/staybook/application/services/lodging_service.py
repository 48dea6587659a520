"""Lodging service: catalog management, categories and search."""

from __future__ import annotations

import logging
from collections import Counter
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Callable, Optional

from staybook.application.dtos import (
    SORT_OPTIONS,
    CategorySummary,
    LodgingChanges,
    LodgingDraft,
    LodgingDTO,
    LodgingListResult,
    LodgingSearchCriteria,
    LodgingStatistics,
)
from staybook.domain.lodging import (
    Category,
    Lodging,
    LodgingHasReservationsError,
    LodgingNotFoundError,
)
from staybook.domain.lodging.entities import (
    DEFAULT_CHECK_IN_TIME,
    DEFAULT_CHECK_OUT_TIME,
)
from staybook.domain.shared.exceptions import FieldValidationError
from staybook.domain.shared.time import utc_now

if TYPE_CHECKING:
    from staybook.domain.lodging import LodgingRepository
    from staybook.domain.reservation import ReservationRepository

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")

_SORT_KEYS: dict[str, tuple[Callable[[Lodging], object], bool]] = {
    "price_asc": (lambda lodging: lodging.price, False),
    "price_desc": (lambda lodging: lodging.price, True),
    "rating_desc": (lambda lodging: lodging.average_customer_rating, True),
    "stars_desc": (lambda lodging: lodging.stars, True),
    "name": (lambda lodging: lodging.name.casefold(), False),
}


class LodgingService:
    """Application service for lodgings."""

    def __init__(
        self,
        lodging_repository: LodgingRepository,
        reservation_repository: ReservationRepository,
    ):
        self._lodging_repo = lodging_repository
        self._reservation_repo = reservation_repository

    async def find_all(
        self, limit: Optional[int] = None, offset: int = 0
    ) -> LodgingListResult:
        """
        List lodgings by name, optionally one page at a time.

        Statistics cover the returned page; ``total`` counts the whole
        catalog.

        Raises
        ------
        FieldValidationError
            If limit is below 1 or offset is negative
        """
        if limit is not None and limit < 1:
            raise FieldValidationError("limit", "limit must be at least 1")
        if offset < 0:
            raise FieldValidationError("offset", "offset must not be negative")

        lodgings = await self._lodging_repo.find_all(limit=limit, offset=offset)
        paged = limit is not None or offset > 0
        total = await self._lodging_repo.count() if paged else len(lodgings)
        logger.debug("Listing %d of %d lodgings", len(lodgings), total)
        return _to_list_result(lodgings, total)

    async def find_by_id(self, lodging_id: str) -> LodgingDTO:
        lodging = await self._get_lodging(lodging_id)
        return LodgingDTO.from_lodging(lodging)

    async def create(self, draft: LodgingDraft) -> LodgingDTO:
        lodging = Lodging(
            name=draft.name,
            address=draft.address,
            city=draft.city,
            country=draft.country,
            description=draft.description,
            price=draft.price,
            stars=draft.stars,
            average_customer_rating=draft.average_customer_rating,
            category=draft.category,
            available_from=draft.available_from,
            available_to=draft.available_to,
            max_occupancy=draft.max_occupancy,
            check_in_time=draft.check_in_time or DEFAULT_CHECK_IN_TIME,
            check_out_time=draft.check_out_time or DEFAULT_CHECK_OUT_TIME,
            is_favorite=draft.is_favorite,
            photos=[photo.to_photo() for photo in draft.photos],
            amenities=draft.amenities,
            room_size_square_meters=draft.room_size_square_meters,
            is_pet_friendly=draft.is_pet_friendly,
            has_parking=draft.has_parking,
        )
        saved = await self._lodging_repo.save(lodging)

        logger.info("Lodging created: %s (%s)", saved.id, saved.name)
        return LodgingDTO.from_lodging(saved)

    async def update(self, lodging_id: str, changes: LodgingChanges) -> LodgingDTO:
        lodging = await self._get_lodging(lodging_id)
        lodging.update(**changes.as_changes())
        saved = await self._lodging_repo.save(lodging)

        logger.info("Lodging updated: %s", lodging_id)
        return LodgingDTO.from_lodging(saved)

    async def delete(self, lodging_id: str) -> None:
        """
        Delete a lodging.

        Raises
        ------
        LodgingNotFoundError
            If the lodging does not exist
        LodgingHasReservationsError
            While the lodging has pending or active reservations
        """
        await self._get_lodging(lodging_id)

        upcoming = await self._reservation_repo.count_ending_after(
            lodging_id, utc_now()
        )
        if upcoming:
            logger.warning(
                "Refusing to delete lodging %s with %d upcoming reservation(s)",
                lodging_id,
                upcoming,
            )
            raise LodgingHasReservationsError(lodging_id, upcoming)

        await self._lodging_repo.delete(lodging_id)
        logger.info("Lodging deleted: %s", lodging_id)

    async def find_all_categories(self) -> list[CategorySummary]:
        counts = await self._lodging_repo.count_by_category()
        return [
            CategorySummary(
                name=category.value,
                display_name=category.display_name,
                count=counts.get(category, 0),
            )
            for category in Category
        ]

    async def find_by_category(self, category: str) -> LodgingListResult:
        parsed = Category.parse(category)
        lodgings = await self._lodging_repo.find_by_category(parsed)
        return _to_list_result(lodgings)

    async def find_all_cities(self) -> list[str]:
        return await self._lodging_repo.find_distinct_cities()

    async def search(self, criteria: LodgingSearchCriteria) -> LodgingListResult:
        """
        Filter and sort lodgings.

        Parameters
        ----------
        criteria
            Search filters; unset filters match everything

        Returns
        -------
        LodgingListResult with matches and statistics over the matches

        Raises
        ------
        FieldValidationError
            For a date range with only one bound or inverted bounds, a
            non-positive guest count or room size, an inverted price range,
            or an unknown sort option
        InvalidCategoryError
            If a category filter does not name a category
        """
        _validate_criteria(criteria)
        categories = {Category.parse(c) for c in criteria.categories}

        matches = [
            lodging
            for lodging in await self._lodging_repo.find_all()
            if _matches(lodging, criteria, categories)
        ]

        if criteria.sort_by:
            key, reverse = _SORT_KEYS[criteria.sort_by]
            matches.sort(key=key, reverse=reverse)

        logger.debug("Search matched %d lodgings", len(matches))
        return _to_list_result(matches)

    async def _get_lodging(self, lodging_id: str) -> Lodging:
        lodging = await self._lodging_repo.find_by_id(lodging_id)
        if lodging is None:
            raise LodgingNotFoundError(lodging_id)
        return lodging


def _validate_criteria(criteria: LodgingSearchCriteria) -> None:
    if (criteria.check_in is None) != (criteria.check_out is None):
        missing = "check_out" if criteria.check_out is None else "check_in"
        raise FieldValidationError(
            missing, "check_in and check_out must be given together"
        )
    if criteria.check_in and criteria.check_out:
        if criteria.check_in >= criteria.check_out:
            raise FieldValidationError(
                "check_out", "check_out must be after check_in"
            )
    if criteria.guests < 1:
        raise FieldValidationError("guests", "guests must be at least 1")
    if (
        criteria.min_price is not None
        and criteria.max_price is not None
        and criteria.min_price > criteria.max_price
    ):
        raise FieldValidationError(
            "max_price", "max_price must not be below min_price"
        )
    if criteria.min_room_size is not None and criteria.min_room_size <= 0:
        raise FieldValidationError("min_room_size", "min_room_size must be positive")
    if criteria.sort_by and criteria.sort_by not in SORT_OPTIONS:
        raise FieldValidationError(
            "sort_by", f"sort_by must be one of: {', '.join(SORT_OPTIONS)}"
        )


def _matches(  # NOQA: PLR0911
    lodging: Lodging,
    criteria: LodgingSearchCriteria,
    categories: set[Category],
) -> bool:
    if criteria.destination and not lodging.matches_destination(criteria.destination):
        return False
    if criteria.check_in and criteria.check_out:
        if not lodging.covers_dates(criteria.check_in, criteria.check_out):
            return False
    if lodging.max_occupancy < criteria.guests:
        return False
    if categories and lodging.category not in categories:
        return False
    if criteria.min_stars is not None and lodging.stars < criteria.min_stars:
        return False
    if (
        criteria.min_rating is not None
        and lodging.average_customer_rating < criteria.min_rating
    ):
        return False
    if criteria.min_price is not None and lodging.price < criteria.min_price:
        return False
    if criteria.max_price is not None and lodging.price > criteria.max_price:
        return False
    return _matches_facilities(lodging, criteria)


def _matches_facilities(lodging: Lodging, criteria: LodgingSearchCriteria) -> bool:
    if (
        criteria.is_pet_friendly is not None
        and lodging.is_pet_friendly != criteria.is_pet_friendly
    ):
        return False
    if criteria.has_parking is not None and lodging.has_parking != criteria.has_parking:
        return False
    if criteria.min_room_size is not None:
        size = lodging.room_size_square_meters
        # Lodgings without a known size never satisfy a size filter
        if size is None or size < criteria.min_room_size:
            return False
    return lodging.has_amenities(criteria.amenities)


def _statistics(lodgings: list[Lodging]) -> LodgingStatistics:
    if not lodgings:
        return LodgingStatistics()

    prices = [lodging.price for lodging in lodgings]
    ratings = [lodging.average_customer_rating for lodging in lodgings]
    distribution = Counter(lodging.category.value for lodging in lodgings)

    return LodgingStatistics(
        total=len(lodgings),
        average_price=(sum(prices) / len(prices)).quantize(
            CENT, rounding=ROUND_HALF_UP
        ),
        min_price=min(prices),
        max_price=max(prices),
        average_rating=round(sum(ratings) / len(ratings), 2),
        category_distribution=dict(sorted(distribution.items())),
    )


def _to_list_result(
    lodgings: list[Lodging], total: Optional[int] = None
) -> LodgingListResult:
    return LodgingListResult(
        lodgings=[LodgingDTO.from_lodging(lodging) for lodging in lodgings],
        statistics=_statistics(lodgings),
        total=len(lodgings) if total is None else total,
    )
