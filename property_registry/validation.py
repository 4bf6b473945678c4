"""Input validation for registry payloads.

The registry stores whatever it is given; these checks belong to callers
(forms, import scripts) and run before a payload reaches the registry.
Each validator raises :class:`ValidationError` on the first problem found.
"""

import re
from datetime import date
from typing import Any, Mapping

from property_registry.exceptions import ValidationError
from property_registry.models import coerce_date

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_CONSTRUCTION_YEAR = 1800


def validate_property(data: Mapping[str, Any], today: date | None = None) -> None:
    """Validate a property payload."""
    today = today or date.today()
    _require_strings(data, "name", "address", "city", "postal_code")

    year = data.get("construction_year")
    if year is not None and not MIN_CONSTRUCTION_YEAR <= year <= today.year:
        raise ValidationError(
            "construction_year",
            f"Construction year must be between {MIN_CONSTRUCTION_YEAR} and {today.year}",
        )

    if not _positive(data.get("total_apartments")):
        raise ValidationError("total_apartments", "Number of apartments must be greater than 0")


def validate_apartment(data: Mapping[str, Any]) -> None:
    """Validate an apartment payload."""
    _require_strings(data, "property_id", "number")

    floor = data.get("floor")
    if floor is None or floor < 0:
        raise ValidationError("floor", "Floor must be 0 or higher")

    for name in ("size", "rooms", "bathrooms", "price"):
        if not _positive(data.get(name)):
            raise ValidationError(name, f"{name.capitalize()} must be greater than 0")


def validate_tenant(data: Mapping[str, Any], today: date | None = None) -> None:
    """Validate a tenant payload."""
    today = today or date.today()
    _require_strings(data, "first_name", "last_name", "email", "phone")

    if not EMAIL_PATTERN.match(data["email"]):
        raise ValidationError("email", "Invalid email address")

    birth = _parse_date(data, "date_of_birth")
    if birth is not None and birth > today:
        raise ValidationError("date_of_birth", "Date of birth cannot be in the future")


def validate_contract(data: Mapping[str, Any]) -> None:
    """Validate a contract payload."""
    _require_strings(data, "apartment_id", "tenant_id")
    start = _parse_date(data, "start_date")
    if start is None:
        raise ValidationError("start_date", "Start date is required")

    if not _positive(data.get("rental_price")):
        raise ValidationError("rental_price", "Rental price must be greater than 0")

    deposit = data.get("deposit")
    if deposit is None or deposit < 0:
        raise ValidationError("deposit", "Deposit cannot be negative")

    end = _parse_date(data, "end_date")
    if end is not None and end <= start:
        raise ValidationError("end_date", "End date must be after start date")


def _require_strings(data: Mapping[str, Any], *names: str) -> None:
    for name in names:
        value = data.get(name)
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(name, f"{name} is required")


def _positive(value: Any) -> bool:
    return value is not None and value > 0


def _parse_date(data: Mapping[str, Any], name: str) -> date | None:
    try:
        return coerce_date(data.get(name))
    except (TypeError, ValueError):
        raise ValidationError(name, f"{name} must be a date in YYYY-MM-DD format") from None
