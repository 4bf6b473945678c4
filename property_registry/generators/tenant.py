"""Tenant payload generator."""

from __future__ import annotations

from typing import Any, Iterator

from property_registry.generators.base import BaseGenerator


class TenantGenerator(BaseGenerator):
    """Generate synthetic tenant payloads."""

    def generate(self) -> dict[str, Any]:
        first_name = self.fake.first_name()
        last_name = self.fake.last_name()
        return {
            "first_name": first_name,
            "last_name": last_name,
            "email": self.fake.email(),
            "phone": self.fake.phone_number(),
            "date_of_birth": self.fake.date_of_birth(minimum_age=18, maximum_age=85),
            "id_number": self.fake.bothify("DE#########"),
        }

    def generate_batch(self, count: int) -> Iterator[dict[str, Any]]:
        for _ in range(count):
            yield self.generate()
