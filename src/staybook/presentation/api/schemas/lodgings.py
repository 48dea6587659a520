"""Lodging schemas for request/response models."""

from datetime import datetime, time
from decimal import Decimal
from typing import Optional

from pydantic import ConfigDict, Field

from staybook.application.dtos import (
    CategorySummary,
    LodgingChanges,
    LodgingDraft,
    LodgingDTO,
    LodgingListResult,
    LodgingStatistics,
    PhotoDTO,
)
from staybook.presentation.api.schemas.common import CamelModel


class PhotoSchema(CamelModel):
    """A lodging photo."""

    model_config = ConfigDict(from_attributes=True)

    url: str = Field(..., description="Absolute http(s) URL")
    alt_text: str = ""
    is_main: bool = False
    photo_type: str = Field(
        "ROOM",
        description=(
            "ROOM, EXTERIOR, BATHROOM, VIEW, AMENITY, RESTAURANT, POOL, GYM "
            "or COMMON_AREA"
        ),
    )

    def to_dto(self) -> PhotoDTO:
        return PhotoDTO(**self.model_dump())


class LodgingCreateRequest(CamelModel):
    """Request schema for creating a lodging."""

    name: str
    address: str = ""
    city: str
    country: str
    description: str = ""
    price: Decimal = Field(..., description="Price per night")
    stars: int = 3
    average_customer_rating: int = 7
    category: str = Field(
        "HOTEL", description="HOTEL, HOSTEL, DEPARTMENT or BED_AND_BREAKFAST"
    )
    available_from: datetime
    available_to: datetime
    max_occupancy: int = 2
    check_in_time: Optional[time] = None
    check_out_time: Optional[time] = None
    is_favorite: bool = False
    photos: list[PhotoSchema] = Field(default_factory=list)
    amenities: list[str] = Field(default_factory=list)
    room_size_square_meters: Optional[float] = None
    is_pet_friendly: bool = False
    has_parking: bool = False

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Hotel Alpenblick",
                "city": "Innsbruck",
                "country": "Austria",
                "price": "129.00",
                "stars": 4,
                "averageCustomerRating": 9,
                "category": "HOTEL",
                "availableFrom": "2026-01-01T00:00:00Z",
                "availableTo": "2026-12-31T00:00:00Z",
                "maxOccupancy": 3,
                "photos": [
                    {
                        "url": "https://example.com/alpenblick.jpg",
                        "altText": "Front view",
                        "isMain": True,
                        "photoType": "EXTERIOR",
                    },
                ],
                "amenities": ["wifi", "sauna"],
                "hasParking": True,
            },
        },
    )

    def to_draft(self) -> LodgingDraft:
        fields = self.model_dump(exclude={"photos", "amenities"})
        return LodgingDraft(
            **fields,
            photos=tuple(photo.to_dto() for photo in self.photos),
            amenities=tuple(self.amenities),
        )


class LodgingUpdateRequest(CamelModel):
    """Partial lodging update; omitted fields stay unchanged."""

    name: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = None
    stars: Optional[int] = None
    average_customer_rating: Optional[int] = None
    category: Optional[str] = None
    available_from: Optional[datetime] = None
    available_to: Optional[datetime] = None
    max_occupancy: Optional[int] = None
    check_in_time: Optional[time] = None
    check_out_time: Optional[time] = None
    is_favorite: Optional[bool] = None
    photos: Optional[list[PhotoSchema]] = Field(
        None, description="Replaces all photos; an empty list removes them"
    )
    amenities: Optional[list[str]] = None
    room_size_square_meters: Optional[float] = None
    is_pet_friendly: Optional[bool] = None
    has_parking: Optional[bool] = None

    def to_changes(self) -> LodgingChanges:
        fields = self.model_dump(exclude={"photos", "amenities"})
        return LodgingChanges(
            **fields,
            photos=(
                None
                if self.photos is None
                else tuple(photo.to_dto() for photo in self.photos)
            ),
            amenities=None if self.amenities is None else tuple(self.amenities),
        )


class LodgingResponse(CamelModel):
    id: str
    name: str
    address: str
    city: str
    country: str
    description: str
    price: Decimal
    stars: int
    average_customer_rating: int
    grade: str
    grade_label: str
    category: str
    category_display_name: str
    available_from: datetime
    available_to: datetime
    max_occupancy: int
    check_in_time: time
    check_out_time: time
    is_favorite: bool
    photos: list[PhotoSchema]
    display_photo: str
    amenities: list[str]
    room_size_square_meters: Optional[float] = None
    is_pet_friendly: bool
    has_parking: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dto(cls, dto: LodgingDTO) -> "LodgingResponse":
        return cls.model_validate(dto, from_attributes=True)


class LodgingStatisticsResponse(CamelModel):
    total: int
    average_price: Decimal
    min_price: Decimal
    max_price: Decimal
    average_rating: float
    category_distribution: dict[str, int]

    @classmethod
    def from_dto(cls, dto: LodgingStatistics) -> "LodgingStatisticsResponse":
        return cls.model_validate(dto, from_attributes=True)


class LodgingListResponse(CamelModel):
    lodgings: list[LodgingResponse]
    statistics: LodgingStatisticsResponse
    total: int = Field(..., description="Lodgings matched before paging")

    @classmethod
    def from_result(cls, result: LodgingListResult) -> "LodgingListResponse":
        return cls(
            lodgings=[LodgingResponse.from_dto(dto) for dto in result.lodgings],
            statistics=LodgingStatisticsResponse.from_dto(result.statistics),
            total=result.total,
        )


class CategoryResponse(CamelModel):
    name: str
    display_name: str
    count: int

    @classmethod
    def from_dto(cls, dto: CategorySummary) -> "CategoryResponse":
        return cls(name=dto.name, display_name=dto.display_name, count=dto.count)


class CategoryListResponse(CamelModel):
    categories: list[CategoryResponse]
