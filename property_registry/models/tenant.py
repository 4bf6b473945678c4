"""Tenant model."""

from dataclasses import dataclass
from datetime import date

from property_registry.models.base import ID, coerce_date


@dataclass
class Tenant:
    """Person who may hold one or more contracts."""

    id: ID
    first_name: str
    last_name: str
    email: str
    phone: str
    date_of_birth: date | None = None
    id_number: str | None = None

    def __post_init__(self) -> None:
        self.date_of_birth = coerce_date(self.date_of_birth)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
