from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

from app.models.domain import HotelRecord
from app.services.images import FallbackImageCache
from app.storage.repository import StaticHotelRepository


class CatalogService:
    def __init__(
        self,
        repository: StaticHotelRepository,
        image_cache: Optional[FallbackImageCache] = None,
    ):
        self.repository = repository
        self.image_cache = image_cache if image_cache is not None else FallbackImageCache()

    def list_all(self) -> List[HotelRecord]:
        return [self._with_image(h) for h in self.repository.hotels()]

    def list_by_city(self, city: str) -> List[HotelRecord]:
        # No trimming: " Goa" does not match "Goa".
        wanted = city.lower()
        return [
            self._with_image(h)
            for h in self.repository.hotels()
            if h.city.lower() == wanted
        ]

    def find_by_id(self, hotel_id: str) -> Optional[HotelRecord]:
        hotel = self.repository.get(hotel_id)
        return self._with_image(hotel) if hotel else None

    def search_city_names(self, query: str) -> List[str]:
        """Cities containing `query`, case-insensitive. Callers skip blank queries."""
        needle = query.lower()
        return [c for c in self.repository.cities() if needle in c.lower()]

    def _with_image(self, hotel: HotelRecord) -> HotelRecord:
        if hotel.image:
            return hotel
        return replace(hotel, image=self.image_cache.resolve(hotel.id))
