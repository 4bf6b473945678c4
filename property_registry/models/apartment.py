"""Apartment model: a rentable unit within a property."""

from dataclasses import dataclass, field

from property_registry.models.base import ID


@dataclass
class Apartment:
    """Rentable unit.

    ``is_occupied`` is maintained by the contract lifecycle in
    :class:`~property_registry.registry.Registry`; callers never set it
    through an update.
    """

    id: ID
    property_id: ID
    number: str  # Unique by convention within a property only
    floor: int
    size: float  # Square meters
    rooms: int
    bathrooms: int
    price: float  # Monthly rent
    is_occupied: bool = False
    amenities: list[str] = field(default_factory=list)
