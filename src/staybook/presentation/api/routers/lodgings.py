"""Lodgings router: public catalog and search, admin-only management."""

import logging
from datetime import date
from decimal import Decimal
from typing import Annotated, Optional

from fastapi import APIRouter, Query, Response, status

from staybook.application.dtos import LodgingSearchCriteria
from staybook.presentation.api.dependencies import AdminPrincipal, DBSession, Lodgings
from staybook.presentation.api.schemas import (
    CategoryListResponse,
    CategoryResponse,
    LodgingCreateRequest,
    LodgingListResponse,
    LodgingResponse,
    LodgingUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# Type aliases for search query parameters
Destination = Annotated[
    Optional[str], Query(description="City or country (substring, any case)")
]
CheckIn = Annotated[Optional[date], Query(alias="checkIn")]
CheckOut = Annotated[Optional[date], Query(alias="checkOut")]
Guests = Annotated[int, Query(ge=1, description="Number of guests")]
Categories = Annotated[
    Optional[list[str]], Query(alias="category", description="Repeatable")
]
MinStars = Annotated[Optional[int], Query(alias="minStars", ge=1, le=5)]
MinRating = Annotated[Optional[int], Query(alias="minRating", ge=1, le=10)]
MinPrice = Annotated[Optional[Decimal], Query(alias="minPrice", ge=0)]
MaxPrice = Annotated[Optional[Decimal], Query(alias="maxPrice", ge=0)]
PetFriendly = Annotated[Optional[bool], Query(alias="isPetFriendly")]
HasParking = Annotated[Optional[bool], Query(alias="hasParking")]
MinRoomSize = Annotated[
    Optional[float], Query(alias="minRoomSize", gt=0, description="Square meters")
]
Amenities = Annotated[
    Optional[list[str]],
    Query(alias="amenity", description="Repeatable; all must be offered"),
]
SortBy = Annotated[
    Optional[str],
    Query(
        alias="sortBy",
        description="price_asc, price_desc, rating_desc, stars_desc or name",
    ),
]
Limit = Annotated[Optional[int], Query(ge=1, le=100, description="Page size")]
Offset = Annotated[int, Query(ge=0, description="Lodgings to skip")]


@router.get(
    "",
    summary="List lodgings",
    response_model=LodgingListResponse,
)
async def list_lodgings(
    lodgings: Lodgings,
    limit: Limit = None,
    offset: Offset = 0,
) -> LodgingListResponse:
    """
    List lodgings ordered by name.

    Without ``limit`` every lodging is returned. ``total`` always counts
    the whole catalog.
    """
    result = await lodgings.find_all(limit=limit, offset=offset)
    return LodgingListResponse.from_result(result)


@router.get(
    "/search",
    summary="Search lodgings",
    response_model=LodgingListResponse,
    responses={400: {"description": "Invalid search criteria"}},
)
async def search_lodgings(  # NOQA: PLR0913
    lodgings: Lodgings,
    destination: Destination = None,
    check_in: CheckIn = None,
    check_out: CheckOut = None,
    guests: Guests = 1,
    categories: Categories = None,
    min_stars: MinStars = None,
    min_rating: MinRating = None,
    min_price: MinPrice = None,
    max_price: MaxPrice = None,
    is_pet_friendly: PetFriendly = None,
    has_parking: HasParking = None,
    min_room_size: MinRoomSize = None,
    amenities: Amenities = None,
    sort_by: SortBy = None,
) -> LodgingListResponse:
    criteria = LodgingSearchCriteria(
        destination=destination,
        check_in=check_in,
        check_out=check_out,
        guests=guests,
        categories=tuple(categories or ()),
        min_stars=min_stars,
        min_rating=min_rating,
        min_price=min_price,
        max_price=max_price,
        is_pet_friendly=is_pet_friendly,
        has_parking=has_parking,
        min_room_size=min_room_size,
        amenities=tuple(amenities or ()),
        sort_by=sort_by,
    )
    return LodgingListResponse.from_result(await lodgings.search(criteria))


@router.get(
    "/categories",
    summary="Lodging categories with counts",
    response_model=CategoryListResponse,
)
async def list_categories(lodgings: Lodgings) -> CategoryListResponse:
    summaries = await lodgings.find_all_categories()
    return CategoryListResponse(
        categories=[CategoryResponse.from_dto(s) for s in summaries],
    )


@router.get(
    "/categories/{category}",
    summary="Lodgings of one category",
    response_model=LodgingListResponse,
    responses={400: {"description": "Unknown category"}},
)
async def lodgings_by_category(category: str, lodgings: Lodgings) -> LodgingListResponse:
    return LodgingListResponse.from_result(await lodgings.find_by_category(category))


@router.get(
    "/cities",
    summary="Distinct lodging cities",
    response_model=list[str],
)
async def list_cities(lodgings: Lodgings) -> list[str]:
    return await lodgings.find_all_cities()


@router.get(
    "/{lodging_id}",
    summary="Get a lodging",
    response_model=LodgingResponse,
    responses={404: {"description": "Lodging not found"}},
)
async def get_lodging(lodging_id: str, lodgings: Lodgings) -> LodgingResponse:
    return LodgingResponse.from_dto(await lodgings.find_by_id(lodging_id))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a lodging",
    response_model=LodgingResponse,
    responses={400: {"description": "Invalid field"}, 403: {"description": "Admin only"}},
)
async def create_lodging(
    request: LodgingCreateRequest,
    _admin: AdminPrincipal,
    lodgings: Lodgings,
    session: DBSession,
) -> LodgingResponse:
    try:
        dto = await lodgings.create(request.to_draft())
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    return LodgingResponse.from_dto(dto)


@router.patch(
    "/{lodging_id}",
    summary="Update a lodging",
    response_model=LodgingResponse,
    responses={
        400: {"description": "Invalid field"},
        403: {"description": "Admin only"},
        404: {"description": "Lodging not found"},
    },
)
async def update_lodging(
    lodging_id: str,
    request: LodgingUpdateRequest,
    _admin: AdminPrincipal,
    lodgings: Lodgings,
    session: DBSession,
) -> LodgingResponse:
    try:
        dto = await lodgings.update(lodging_id, request.to_changes())
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    return LodgingResponse.from_dto(dto)


@router.delete(
    "/{lodging_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a lodging",
    responses={
        403: {"description": "Admin only"},
        404: {"description": "Lodging not found"},
        409: {"description": "Lodging has pending or active reservations"},
    },
)
async def delete_lodging(
    lodging_id: str,
    _admin: AdminPrincipal,
    lodgings: Lodgings,
    session: DBSession,
) -> Response:
    try:
        await lodgings.delete(lodging_id)
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    return Response(status_code=status.HTTP_204_NO_CONTENT)
