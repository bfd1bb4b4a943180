from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class HotelRecord:
    id: str
    name: str
    city: str
    rating: float
    price: int
    description: str
    facilities: Tuple[str, ...] = ()
    image: Optional[str] = None


@dataclass
class SearchCriteria:
    city: str = ""
    check_in: str = ""
    check_out: str = ""
    guests: int = 1


@dataclass
class ValidationResult:
    is_valid: bool
    errors: List[str] = field(default_factory=list)


@dataclass
class StayQuote:
    price_per_night: int
    nights: int
    guests: int
    total: int
    total_label: Optional[str] = None
