from __future__ import annotations

from datetime import date
from typing import Optional

from app.models.domain import SearchCriteria, ValidationResult

MIN_GUESTS = 1
MAX_GUESTS = 5


def parse_date(value: Optional[str]) -> Optional[date]:
    """Parse a YYYY-MM-DD string; None when empty or malformed."""
    if not value:
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        return None


def is_date_in_future(value: Optional[str], today: Optional[date] = None) -> bool:
    parsed = parse_date(value)
    if parsed is None:
        return False
    return parsed >= (today or date.today())


def is_check_out_after_check_in(
    check_in: Optional[str], check_out: Optional[str]
) -> bool:
    start = parse_date(check_in)
    end = parse_date(check_out)
    if start is None or end is None:
        return False
    return end > start


def validate_search(criteria: SearchCriteria, today: Optional[date] = None) -> ValidationResult:
    today = today or date.today()
    errors = []

    if not (criteria.city or "").strip():
        errors.append("City is required")

    if not criteria.check_in:
        errors.append("Check-in date is required")
    elif not is_date_in_future(criteria.check_in, today):
        errors.append("Check-in date must be in the future")

    if not criteria.check_out:
        errors.append("Check-out date is required")
    elif not is_date_in_future(criteria.check_out, today):
        errors.append("Check-out date must be in the future")

    if (
        criteria.check_in
        and criteria.check_out
        and not is_check_out_after_check_in(criteria.check_in, criteria.check_out)
    ):
        errors.append("Check-out date must be after check-in date")

    if criteria.guests < MIN_GUESTS or criteria.guests > MAX_GUESTS:
        errors.append(f"Number of guests must be between {MIN_GUESTS} and {MAX_GUESTS}")

    return ValidationResult(is_valid=not errors, errors=errors)
