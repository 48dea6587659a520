"""DTOs for lodging management, catalog and search."""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from decimal import Decimal
from typing import Optional

from staybook.domain.lodging import Category, Lodging, Photo, PhotoType


@dataclass(frozen=True)
class PhotoDTO:
    """A lodging photo, used for both input and output."""

    url: str
    alt_text: str = ""
    is_main: bool = False
    photo_type: str = PhotoType.ROOM.value

    @classmethod
    def from_photo(cls, photo: Photo) -> "PhotoDTO":
        return cls(
            url=photo.url,
            alt_text=photo.alt_text,
            is_main=photo.is_main,
            photo_type=photo.photo_type.value,
        )

    def to_photo(self) -> Photo:
        return Photo(
            url=self.url,
            alt_text=self.alt_text,
            is_main=self.is_main,
            photo_type=self.photo_type,
        )


@dataclass(frozen=True)
class LodgingDraft:
    """Input for creating a lodging."""

    name: str
    city: str
    country: str
    price: Decimal
    available_from: datetime
    available_to: datetime
    category: str = Category.HOTEL.value
    address: str = ""
    description: str = ""
    stars: int = 3
    average_customer_rating: int = 7
    max_occupancy: int = 2
    check_in_time: Optional[time] = None
    check_out_time: Optional[time] = None
    is_favorite: bool = False
    photos: tuple[PhotoDTO, ...] = ()
    amenities: tuple[str, ...] = ()
    room_size_square_meters: Optional[float] = None
    is_pet_friendly: bool = False
    has_parking: bool = False


@dataclass(frozen=True)
class LodgingChanges:
    """Partial lodging update; None means "leave unchanged"."""

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
    photos: Optional[tuple[PhotoDTO, ...]] = None
    amenities: Optional[tuple[str, ...]] = None
    room_size_square_meters: Optional[float] = None
    is_pet_friendly: Optional[bool] = None
    has_parking: Optional[bool] = None

    def as_changes(self) -> dict:
        changes = {
            name: getattr(self, name)
            for name in self.__dataclass_fields__
            if getattr(self, name) is not None
        }
        if "photos" in changes:
            changes["photos"] = [photo.to_photo() for photo in self.photos]
        return changes


SORT_OPTIONS = ("price_asc", "price_desc", "rating_desc", "stars_desc", "name")


@dataclass(frozen=True)
class LodgingSearchCriteria:
    """Filters for lodging search. Unset filters do not restrict."""

    destination: Optional[str] = None
    check_in: Optional[date] = None
    check_out: Optional[date] = None
    guests: int = 1
    categories: tuple[str, ...] = ()
    min_stars: Optional[int] = None
    min_rating: Optional[int] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    is_pet_friendly: Optional[bool] = None
    has_parking: Optional[bool] = None
    min_room_size: Optional[float] = None
    amenities: tuple[str, ...] = ()
    sort_by: Optional[str] = None


@dataclass(frozen=True)
class LodgingDTO:
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
    photos: tuple[PhotoDTO, ...] = ()
    display_photo: str = ""
    amenities: tuple[str, ...] = ()
    room_size_square_meters: Optional[float] = None
    is_pet_friendly: bool = False
    has_parking: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_lodging(cls, lodging: Lodging) -> "LodgingDTO":
        audit = lodging.audit
        return cls(
            id=lodging.id,
            name=lodging.name,
            address=lodging.address,
            city=lodging.city,
            country=lodging.country,
            description=lodging.description,
            price=lodging.price,
            stars=lodging.stars,
            average_customer_rating=lodging.average_customer_rating,
            grade=lodging.grade.name,
            grade_label=lodging.grade.label,
            category=lodging.category.value,
            category_display_name=lodging.category.display_name,
            available_from=lodging.available_from,
            available_to=lodging.available_to,
            max_occupancy=lodging.max_occupancy,
            check_in_time=lodging.check_in_time,
            check_out_time=lodging.check_out_time,
            is_favorite=lodging.is_favorite,
            photos=tuple(PhotoDTO.from_photo(p) for p in lodging.photos),
            display_photo=lodging.display_photo,
            amenities=lodging.amenities,
            room_size_square_meters=lodging.room_size_square_meters,
            is_pet_friendly=lodging.is_pet_friendly,
            has_parking=lodging.has_parking,
            created_at=audit.created_at if audit else None,
            updated_at=audit.updated_at if audit else None,
        )


@dataclass(frozen=True)
class LodgingStatistics:
    """Figures over a list of lodgings (zeros when the list is empty)."""

    total: int = 0
    average_price: Decimal = Decimal("0.00")
    min_price: Decimal = Decimal("0.00")
    max_price: Decimal = Decimal("0.00")
    average_rating: float = 0.0
    category_distribution: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class LodgingListResult:
    """
    A list of lodgings with statistics over that list.

    ``total`` counts every lodging the query matched; for a paged listing
    it can exceed ``len(lodgings)``.
    """

    lodgings: list[LodgingDTO] = field(default_factory=list)
    statistics: LodgingStatistics = field(default_factory=LodgingStatistics)
    total: int = 0

    @property
    def has_results(self) -> bool:
        return bool(self.lodgings)


@dataclass(frozen=True)
class CategorySummary:
    name: str
    display_name: str
    count: int
