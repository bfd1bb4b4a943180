import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.api import get_catalog
from app.models.schemas import (
    ErrorResponse,
    HotelDetailResponse,
    HotelListResponse,
    HotelSchema,
    StaySchema,
)
from app.services.catalog_service import CatalogService
from app.services.pricing import (
    build_stay_quote,
    count_nights,
    parse_guests,
    star_breakdown,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=HotelListResponse)
def list_hotels(
    city: Optional[str] = None,
    checkin: Optional[str] = None,
    checkout: Optional[str] = None,
    guests: Optional[str] = None,
    catalog: CatalogService = Depends(get_catalog),
) -> HotelListResponse:
    hotels = catalog.list_by_city(city) if city else catalog.list_all()
    nights = count_nights(checkin, checkout)
    guest_count = parse_guests(guests)
    data = [
        HotelSchema.from_domain(
            h,
            quote=build_stay_quote(h, nights, guest_count),
            stars=star_breakdown(h.rating),
        )
        for h in hotels
    ]
    return HotelListResponse(
        data=data,
        count=len(data),
        stay=StaySchema(nights=nights, guests=guest_count),
    )


@router.get(
    "/{hotel_id}",
    response_model=HotelDetailResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_hotel(hotel_id: str, catalog: CatalogService = Depends(get_catalog)):
    hotel = catalog.find_by_id(hotel_id)
    if hotel is None:
        logger.info("Hotel %s not found", hotel_id)
        return JSONResponse(
            status_code=404,
            content=ErrorResponse(error="Hotel not found").model_dump(),
        )
    return HotelDetailResponse(
        data=HotelSchema.from_domain(hotel, stars=star_breakdown(hotel.rating))
    )
