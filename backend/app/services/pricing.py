from __future__ import annotations

import math
from typing import Optional, Tuple

from app.models.domain import HotelRecord, StayQuote
from app.services.validation import parse_date

CURRENCY_SYMBOL = "₹"
MAX_STARS = 5


def count_nights(check_in: Optional[str], check_out: Optional[str]) -> int:
    """Calendar nights between the two dates, never below one."""
    start = parse_date(check_in)
    end = parse_date(check_out)
    if start is None or end is None:
        return 1
    return max((end - start).days, 1)


def parse_guests(value: Optional[str]) -> int:
    try:
        return int(value) if value else 1
    except ValueError:
        return 1


def total_price(price: int, nights: int) -> int:
    return price * nights


def format_price(amount: int) -> str:
    return f"{CURRENCY_SYMBOL}{amount:,}"


def pluralize(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count > 1 else ''}"


def star_breakdown(rating: float) -> Tuple[int, int, int]:
    full = math.floor(rating)
    half = 1 if rating % 1 != 0 else 0
    return full, half, MAX_STARS - full - half


def build_stay_quote(hotel: HotelRecord, nights: int = 1, guests: int = 1) -> StayQuote:
    total = total_price(hotel.price, nights)
    label = None
    if nights > 1:
        label = f"Total: {format_price(total)} for {pluralize(nights, 'night')}"
    return StayQuote(
        price_per_night=hotel.price,
        nights=nights,
        guests=guests,
        total=total,
        total_label=label,
    )
