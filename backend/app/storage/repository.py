from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple

from pydantic import ValidationError

from app.models.domain import HotelRecord
from app.models.schemas import HotelSchema

logger = logging.getLogger(__name__)


class DatasetError(RuntimeError):
    """Raised when a bundled dataset file is missing or malformed."""


class StaticHotelRepository:
    """Read-only store over the bundled hotel and city lists."""

    def __init__(self, hotels: Iterable[HotelRecord], cities: Iterable[str]) -> None:
        self._hotels: Tuple[HotelRecord, ...] = tuple(hotels)
        self._cities: Tuple[str, ...] = tuple(cities)
        self._by_id: Dict[str, HotelRecord] = {}
        for hotel in self._hotels:
            self._by_id.setdefault(hotel.id, hotel)

    @classmethod
    def from_files(cls, hotels_path: Path, cities_path: Path) -> "StaticHotelRepository":
        raw_hotels = _read_json_list(hotels_path)
        try:
            hotels = [HotelSchema.model_validate(h).to_domain() for h in raw_hotels]
        except ValidationError as exc:
            raise DatasetError(f"Invalid hotel entry in {hotels_path}: {exc}") from exc

        cities = _read_json_list(cities_path)
        if not all(isinstance(c, str) for c in cities):
            raise DatasetError(f"City list in {cities_path} must contain only strings")

        logger.info(
            "Loaded %d hotels from %s and %d cities from %s",
            len(hotels),
            hotels_path,
            len(cities),
            cities_path,
        )
        return cls(hotels=hotels, cities=cities)

    def hotels(self) -> Tuple[HotelRecord, ...]:
        return self._hotels

    def cities(self) -> Tuple[str, ...]:
        return self._cities

    def get(self, hotel_id: str) -> Optional[HotelRecord]:
        return self._by_id.get(hotel_id)


def _read_json_list(path: Path) -> list:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise DatasetError(f"Dataset file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise DatasetError(f"Dataset file is not valid JSON: {path}: {exc}") from exc
    if not isinstance(data, list):
        raise DatasetError(f"Dataset file must contain a JSON list: {path}")
    return data
