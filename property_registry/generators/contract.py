"""Contract payload generator."""

from __future__ import annotations

import random
from datetime import date, timedelta
from typing import Any

from property_registry.generators.base import BaseGenerator
from property_registry.models import Apartment, ID


class ContractGenerator(BaseGenerator):
    """Generate synthetic rental contract payloads.

    Roughly a third of contracts are fixed-term; the rest are open-ended.
    Deposits are two or three months of rent.
    """

    FIXED_TERM_RATE = 0.35

    def generate(self, apartment: Apartment, tenant_id: ID) -> dict[str, Any]:
        """Generate a contract payload for an apartment.

        Parameters
        ----------
        apartment : Apartment
            Rented apartment; its price is the basis for rent and deposit.
        tenant_id : ID
            Contract holder.

        Returns
        -------
        dict[str, Any]
            Payload for :meth:`Registry.add_contract`.
        """
        start_date = date.today() - timedelta(days=random.randint(0, 6 * 365))
        start_date = start_date.replace(day=1)

        end_date = None
        if random.random() < self.FIXED_TERM_RATE:
            end_date = start_date + timedelta(days=365 * random.randint(1, 5) - 1)

        return {
            "apartment_id": apartment.id,
            "tenant_id": tenant_id,
            "start_date": start_date,
            "end_date": end_date,
            "rental_price": apartment.price,
            "deposit": round(apartment.price * random.choice([2, 3]), 2),
            "is_paid": random.random() < 0.9,
            "documents": [],
            "notes": self.fake.sentence(nb_words=6) if random.random() < 0.3 else None,
        }
