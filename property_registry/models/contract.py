"""Rental contract model."""

from dataclasses import dataclass, field
from datetime import date

from property_registry.models.base import ID, coerce_date


@dataclass
class Contract:
    """Lease agreement linking one tenant to one apartment.

    A contract without ``end_date`` is open-ended (unbefristet).
    """

    id: ID
    apartment_id: ID
    tenant_id: ID
    start_date: date
    rental_price: float
    deposit: float
    is_paid: bool = False  # Deposit payment received
    end_date: date | None = None
    documents: list[str] = field(default_factory=list)
    notes: str | None = None

    def __post_init__(self) -> None:
        self.start_date = coerce_date(self.start_date)
        self.end_date = coerce_date(self.end_date)

    def is_active(self, today: date) -> bool:
        """Return True if the contract has no end date or ends on/after ``today``."""
        return self.end_date is None or self.end_date >= today
