from typing import List, Optional, Sequence

from pydantic import BaseModel, Field

from app.models.domain import HotelRecord, SearchCriteria, StayQuote, ValidationResult


class StayQuoteSchema(BaseModel):
    price_per_night: int
    nights: int
    guests: int
    total: int
    total_label: Optional[str] = None

    @classmethod
    def from_domain(cls, obj: StayQuote) -> "StayQuoteSchema":
        return cls(
            price_per_night=obj.price_per_night,
            nights=obj.nights,
            guests=obj.guests,
            total=obj.total,
            total_label=obj.total_label,
        )


class HotelSchema(BaseModel):
    id: str
    name: str
    city: str
    rating: float = Field(ge=0, le=5)
    price: int = Field(ge=0)
    description: str
    facilities: List[str] = Field(default_factory=list)
    image: Optional[str] = None
    quote: Optional[StayQuoteSchema] = None
    stars: Optional[List[int]] = None

    @classmethod
    def from_domain(
        cls,
        obj: HotelRecord,
        quote: Optional[StayQuote] = None,
        stars: Optional[Sequence[int]] = None,
    ) -> "HotelSchema":
        return cls(
            id=obj.id,
            name=obj.name,
            city=obj.city,
            rating=obj.rating,
            price=obj.price,
            description=obj.description,
            facilities=list(obj.facilities),
            image=obj.image,
            quote=StayQuoteSchema.from_domain(quote) if quote else None,
            stars=list(stars) if stars is not None else None,
        )

    def to_domain(self) -> HotelRecord:
        return HotelRecord(
            id=self.id,
            name=self.name,
            city=self.city,
            rating=self.rating,
            price=self.price,
            description=self.description,
            facilities=tuple(self.facilities),
            image=self.image or None,
        )


class StaySchema(BaseModel):
    nights: int
    guests: int


class HotelListResponse(BaseModel):
    success: bool = True
    data: List[HotelSchema]
    count: int
    stay: StaySchema


class HotelDetailResponse(BaseModel):
    success: bool = True
    data: HotelSchema


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


class CitySuggestionsResponse(BaseModel):
    query: str
    suggestions: List[str]


class SearchForm(BaseModel):
    city: Optional[str] = None
    check_in: Optional[str] = None
    check_out: Optional[str] = None
    guests: int = 1

    def to_domain(self) -> SearchCriteria:
        return SearchCriteria(
            city=self.city or "",
            check_in=self.check_in or "",
            check_out=self.check_out or "",
            guests=self.guests,
        )


class ValidationResponse(BaseModel):
    is_valid: bool
    errors: List[str]
    results_path: Optional[str] = None

    @classmethod
    def from_domain(
        cls, obj: ValidationResult, results_path: Optional[str] = None
    ) -> "ValidationResponse":
        return cls(is_valid=obj.is_valid, errors=list(obj.errors), results_path=results_path)
