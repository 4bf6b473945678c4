"""Property model: a building containing apartments."""

from dataclasses import dataclass

from property_registry.models.base import ID


@dataclass
class Property:
    """Real estate asset managed by the registry."""

    id: ID
    name: str
    address: str
    city: str
    postal_code: str
    total_apartments: int  # Declared capacity, not reconciled with linked apartments
    construction_year: int | None = None
