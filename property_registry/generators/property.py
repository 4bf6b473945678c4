"""Property and apartment payload generators."""

from __future__ import annotations

import random
from datetime import date
from typing import Any, Iterator

from property_registry.generators.base import BaseGenerator
from property_registry.models import ID


class PropertyGenerator(BaseGenerator):
    """Generate synthetic property payloads."""

    NAME_SUFFIXES = ["Residenz", "Hof", "Carré", "Gärten", "Blick", "Haus"]

    def generate(self) -> dict[str, Any]:
        """Generate a property payload (without id).

        Returns
        -------
        dict[str, Any]
            Payload for :meth:`Registry.add_property`.
        """
        return {
            "name": f"{self.fake.last_name()} {random.choice(self.NAME_SUFFIXES)}",
            "address": self.fake.street_address(),
            "city": self.fake.city(),
            "postal_code": self.fake.postcode(),
            "construction_year": random.randint(1900, date.today().year),
            "total_apartments": random.randint(2, 24),
        }

    def generate_batch(self, count: int) -> Iterator[dict[str, Any]]:
        for _ in range(count):
            yield self.generate()


class ApartmentGenerator(BaseGenerator):
    """Generate synthetic apartment payloads for a property."""

    AMENITIES = ["Balkon", "Keller", "Aufzug", "Einbauküche", "Terrasse", "Garten", "Stellplatz"]

    # Monthly rent per square meter (EUR)
    RENT_PER_SQM = (9.0, 22.0)

    def generate(self, property_id: ID, floor: int | None = None, index: int = 1) -> dict[str, Any]:
        """Generate an apartment payload.

        Parameters
        ----------
        property_id : ID
            Parent property.
        floor : int | None
            Floor number (random when None).
        index : int
            Position on the floor, used for the apartment number.

        Returns
        -------
        dict[str, Any]
            Payload for :meth:`Registry.add_apartment`.
        """
        if floor is None:
            floor = random.randint(0, 5)
        rooms = random.choices([1, 2, 3, 4, 5], weights=[0.15, 0.35, 0.30, 0.15, 0.05], k=1)[0]
        size = round(rooms * random.uniform(20, 32) + random.uniform(5, 15), 1)
        price = round(size * random.uniform(*self.RENT_PER_SQM), 2)

        return {
            "property_id": property_id,
            "number": f"{floor}{index:02d}",
            "floor": floor,
            "size": size,
            "rooms": rooms,
            "bathrooms": 2 if rooms >= 4 else 1,
            "price": price,
            "amenities": random.sample(self.AMENITIES, k=random.randint(0, 4)),
        }

    def generate_for_property(self, property_id: ID, count: int) -> Iterator[dict[str, Any]]:
        """Generate ``count`` apartments, two per floor from the ground floor up."""
        for i in range(count):
            yield self.generate(property_id, floor=i // 2, index=i % 2 + 1)
