from __future__ import annotations

import logging
from typing import Dict, Iterator, Optional

logger = logging.getLogger(__name__)

HOTEL_IMAGE_PALETTE = (
    "https://images.unsplash.com/photo-1506744038136-46273834b3fb?auto=format&fit=crop&w=600&q=80",
    "https://images.unsplash.com/photo-1512918728675-ed5a9ecdebfd?auto=format&fit=crop&w=600&q=80",
    "https://images.unsplash.com/photo-1465101046530-73398c7f28ca?auto=format&fit=crop&w=600&q=80",
    "https://images.unsplash.com/photo-1500534314209-a25ddb2bd429?auto=format&fit=crop&w=600&q=80",
    "https://images.unsplash.com/photo-1522708323590-d24dbb6b0267?auto=format&fit=crop&w=600&q=80",
    "https://images.unsplash.com/photo-1509228468518-180dd4864904?auto=format&fit=crop&w=600&q=80",
)


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _utf16_units(text: str) -> Iterator[int]:
    raw = text.encode("utf-16-le")
    for i in range(0, len(raw), 2):
        yield raw[i] | (raw[i + 1] << 8)


def rolling_hash(hotel_id: str) -> int:
    """
    acc = code + ((acc << 5) - acc) over UTF-16 code units, starting at 0.
    Only the shift wraps to 32 bits; the subtraction and addition do not.
    """
    acc = 0
    for code in _utf16_units(hotel_id):
        acc = code + (_to_int32(_to_int32(acc) << 5) - acc)
    return acc


def fallback_image_for(hotel_id: str) -> str:
    return HOTEL_IMAGE_PALETTE[abs(rolling_hash(hotel_id)) % len(HOTEL_IMAGE_PALETTE)]


class FallbackImageCache:
    """Append-only map of hotel id to its derived fallback image."""

    def __init__(self) -> None:
        self._images: Dict[str, str] = {}

    def get(self, hotel_id: str) -> Optional[str]:
        return self._images.get(hotel_id)

    def resolve(self, hotel_id: str) -> str:
        image = self._images.get(hotel_id)
        if image is None:
            image = self._images.setdefault(hotel_id, fallback_image_for(hotel_id))
            logger.debug("Assigned fallback image for hotel %s", hotel_id)
        return image

    def __contains__(self, hotel_id: object) -> bool:
        return hotel_id in self._images

    def __len__(self) -> int:
        return len(self._images)
